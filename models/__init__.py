"""
Modelos do Banco de Dados - Quizboard
=====================================

Este módulo contém todos os modelos (estruturas) do banco de dados:
- User: Usuários e sua pontuação
- Tag: Assuntos das questões, com contador de questões
- Question: Questões de múltipla escolha e questões relacionadas
- AnsweredRecord: Livro de respostas (uma por usuário e questão)
"""

from .user import User
from .tag import Tag
from .question import Question, QuestionLevel, related_questions, OPTION_NUMBERS
from .answer import AnsweredRecord, AnswerStatus

# Lista de todos os modelos disponíveis para import
__all__ = [
    'User',
    'Tag',
    'Question',
    'QuestionLevel',
    'related_questions',
    'OPTION_NUMBERS',
    'AnsweredRecord',
    'AnswerStatus'
]
