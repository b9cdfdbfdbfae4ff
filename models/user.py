"""
Modelo de Usuários - Quizboard
==============================

Define a estrutura dos usuários:
- Nome e email únicos
- Senha armazenada apenas como hash
- Pontuação acumulada (uma unidade por resposta correta)
"""

from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash

from extensions import db


class User(UserMixin, db.Model):
    """
    Modelo de usuário do sistema Quizboard
    Herda de UserMixin para compatibilidade com Flask-Login
    """

    __tablename__ = 'users'
    __table_args__ = (
        db.CheckConstraint('score >= 0', name='ck_users_score_non_negative'),
    )

    # Campos da tabela
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    score = db.Column(db.Integer, nullable=False, default=0, server_default='0')

    # Questões criadas: exclusão do criador é bloqueada pelo banco (RESTRICT)
    questions = db.relationship('Question', back_populates='creator', lazy=True, passive_deletes='all')
    answers = db.relationship('AnsweredRecord', back_populates='user', lazy=True, passive_deletes=True)

    def __init__(self, name, email, password_hash=None, score=0):
        """Inicializar novo usuário"""
        self.name = name
        self.email = email
        self.password_hash = password_hash
        self.score = score

    def set_password(self, password):
        """Define nova senha usando hash seguro"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Verifica se a senha fornecida está correta"""
        return check_password_hash(self.password_hash, password)

    @staticmethod
    def increment_score(user_id):
        """
        Soma um ponto ao usuário direto no banco (UPDATE atômico).

        Returns:
            int: Linhas afetadas (0 se o usuário não existe)
        """
        result = db.session.execute(
            db.update(User)
            .where(User.id == user_id)
            .values(score=User.score + 1)
        )
        return result.rowcount

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'score': self.score
        }

    def __repr__(self):
        return f'<User {self.name} ({self.score})>'
