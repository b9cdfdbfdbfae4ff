"""
Modelo de Tags - Quizboard
==========================

Tag de assunto de uma questão, com contador desnormalizado
de quantas questões a utilizam (question_number).
"""

from extensions import db


class Tag(db.Model):
    __tablename__ = 'tags'
    __table_args__ = (
        db.CheckConstraint('question_number >= 0', name='ck_tags_question_number_non_negative'),
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), unique=True, nullable=False, index=True)
    question_number = db.Column(db.Integer, nullable=False, default=0, server_default='0')

    questions = db.relationship('Question', back_populates='tag', lazy=True, passive_deletes=True)

    @staticmethod
    def increment_question_number(tag_id):
        """Incrementa o contador no banco (UPDATE atômico); retorna linhas afetadas"""
        result = db.session.execute(
            db.update(Tag)
            .where(Tag.id == tag_id)
            .values(question_number=Tag.question_number + 1)
        )
        return result.rowcount

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'question_number': self.question_number
        }

    def __repr__(self):
        return f'<Tag {self.name}: {self.question_number}>'
