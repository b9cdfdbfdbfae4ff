"""
Modelo de Respostas - Quizboard
===============================

Registro de resposta (livro de respostas): no máximo um por par
(questão, usuário), garantido pela chave primária composta.
Criado uma única vez na submissão; nunca é alterado nem removido.
"""
import enum

from extensions import db


class AnswerStatus(str, enum.Enum):
    CORRECT = 'correct'
    INCORRECT = 'incorrect'

    @classmethod
    def from_result(cls, is_correct):
        return cls.CORRECT if is_correct else cls.INCORRECT


class AnsweredRecord(db.Model):
    __tablename__ = 'answered_questions'

    question_id = db.Column(db.Integer, db.ForeignKey('questions.id', ondelete='CASCADE'), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    answered_status = db.Column(
        db.Enum(AnswerStatus, name='answered_status', values_callable=lambda statuses: [s.value for s in statuses]),
        nullable=False
    )

    question = db.relationship('Question', back_populates='answers')
    user = db.relationship('User', back_populates='answers')

    def __repr__(self):
        return f'<AnsweredRecord {self.user_id}-{self.question_id}: {self.answered_status.value}>'
