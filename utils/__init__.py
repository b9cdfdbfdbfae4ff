"""
Utilitários do Sistema Quizboard
================================

Este módulo contém erros, funções auxiliares e decoradores:
- errors: Taxonomia de erros da API
- helpers: Validação e conversão de parâmetros
- decorators: Pré-condições das rotas
"""

from .errors import (
    QuizboardError,
    ValidationError,
    InvalidOptionError,
    NotFoundError,
    UserNotFoundError,
    QuestionNotFoundError,
    TagNotFoundError,
    ConflictError,
    AlreadyAnsweredError,
    StoreError
)

from .helpers import (
    validate_email,
    validate_password,
    validate_user_data,
    validate_question_data,
    parse_option,
    parse_id,
    parse_sort
)

from .decorators import (
    json_body_required,
    answered_status_requires_login
)

# Lista de todas as funções disponíveis para import
__all__ = [
    # Erros
    'QuizboardError',
    'ValidationError',
    'InvalidOptionError',
    'NotFoundError',
    'UserNotFoundError',
    'QuestionNotFoundError',
    'TagNotFoundError',
    'ConflictError',
    'AlreadyAnsweredError',
    'StoreError',

    # Funções auxiliares
    'validate_email',
    'validate_password',
    'validate_user_data',
    'validate_question_data',
    'parse_option',
    'parse_id',
    'parse_sort',

    # Decoradores
    'json_body_required',
    'answered_status_requires_login'
]
