"""
Modelo de Questões - Quizboard
==============================

Define a estrutura das questões com:
- Quatro alternativas e a alternativa correta (1 a 4)
- Nível de dificuldade
- Uma tag de assunto
- Estatísticas de respostas
- Questões relacionadas (ligações apenas informativas)
"""
import enum

from extensions import db

OPTION_NUMBERS = (1, 2, 3, 4)


class QuestionLevel(str, enum.Enum):
    EASY = 'easy'
    MEDIUM = 'medium'
    HARD = 'hard'

    @classmethod
    def values(cls):
        return [level.value for level in cls]

    @staticmethod
    def values_of(levels):
        # Grava 'easy'/'medium'/'hard' no banco em vez dos nomes do enum
        return [level.value for level in levels]


related_questions = db.Table(
    'related_questions',
    db.Column('question_id', db.Integer, db.ForeignKey('questions.id', ondelete='CASCADE'), primary_key=True),
    db.Column('related_id', db.Integer, db.ForeignKey('questions.id', ondelete='CASCADE'), primary_key=True),
)


class Question(db.Model):
    __tablename__ = 'questions'
    __table_args__ = (
        db.CheckConstraint('correct_option BETWEEN 1 AND 4', name='ck_questions_correct_option'),
        db.CheckConstraint('answer_count >= 0', name='ck_questions_answer_count'),
        db.CheckConstraint('correct_answer_count >= 0 AND correct_answer_count <= answer_count',
                           name='ck_questions_correct_answer_count'),
    )

    # Campos principais
    id = db.Column(db.Integer, primary_key=True)
    creator_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='RESTRICT'), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    question = db.Column(db.Text, nullable=False)

    # Alternativas
    option1 = db.Column(db.Text, nullable=False)
    option2 = db.Column(db.Text, nullable=False)
    option3 = db.Column(db.Text, nullable=False)
    option4 = db.Column(db.Text, nullable=False)
    correct_option = db.Column(db.Integer, nullable=False)

    level = db.Column(
        db.Enum(QuestionLevel, name='question_level', values_callable=QuestionLevel.values_of),
        nullable=False,
        default=QuestionLevel.EASY
    )
    tag_id = db.Column(db.Integer, db.ForeignKey('tags.id', ondelete='CASCADE'), nullable=False, index=True)

    # Estatísticas
    answer_count = db.Column(db.Integer, nullable=False, default=0, server_default='0')
    correct_answer_count = db.Column(db.Integer, nullable=False, default=0, server_default='0')

    creator = db.relationship('User', back_populates='questions')
    tag = db.relationship('Tag', back_populates='questions')
    answers = db.relationship('AnsweredRecord', back_populates='question', lazy=True, passive_deletes=True)
    related = db.relationship(
        'Question',
        secondary=related_questions,
        primaryjoin=id == related_questions.c.question_id,
        secondaryjoin=id == related_questions.c.related_id,
        lazy=True
    )

    @property
    def success_rate(self):
        """Calcula a taxa de sucesso (% de acertos)"""
        if not self.answer_count:
            return 0
        return round((self.correct_answer_count / self.answer_count) * 100, 1)

    def is_correct_option(self, option):
        """Verifica se a alternativa escolhida é a correta"""
        return option == self.correct_option

    @staticmethod
    def record_attempt(question_id, is_correct):
        """
        Registra uma tentativa de resposta com UPDATE atômico no banco.

        answer_count e correct_answer_count sobem no mesmo comando, então
        correct_answer_count <= answer_count vale em qualquer momento.

        Returns:
            int: Linhas afetadas (0 se a questão não existe)
        """
        result = db.session.execute(
            db.update(Question)
            .where(Question.id == question_id)
            .values(
                answer_count=Question.answer_count + 1,
                correct_answer_count=Question.correct_answer_count + (1 if is_correct else 0)
            )
        )
        return result.rowcount

    def to_dict(self):
        """Converte questão para dicionário (útil para JSON)"""
        return {
            'id': self.id,
            'creator_id': self.creator_id,
            'name': self.name,
            'question': self.question,
            'option1': self.option1,
            'option2': self.option2,
            'option3': self.option3,
            'option4': self.option4,
            'correct_option': self.correct_option,
            'level': self.level.value if self.level else None,
            'tag_id': self.tag_id,
            'tag': self.tag.name if self.tag else None,
            'answer_count': self.answer_count,
            'correct_answer_count': self.correct_answer_count,
            'success_rate': self.success_rate,
            'related_ids': [related.id for related in self.related]
        }

    def __repr__(self):
        return f'<Question {self.id}: {self.name[:50]}>'
