"""
Decoradores das Rotas - Quizboard
=================================

Decoradores aplicados às rotas da API:
- json_body_required: exige corpo JSON (objeto) na requisição
- answered_status_requires_login: filtro por status de resposta exige login
"""

from functools import wraps
from flask import request
from flask_login import current_user

from extensions import login_manager
from utils.errors import ValidationError


def json_body_required(f):
    """
    Decorador que exige um objeto JSON no corpo da requisição
    Uso: @json_body_required
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            raise ValidationError('O corpo da requisição deve ser um objeto JSON.')

        return f(*args, **kwargs)

    return decorated_function


def answered_status_requires_login(f):
    """
    Decorador para listagens filtradas por status de resposta:
    o status depende do usuário, então o filtro só vale com login
    Uso: @answered_status_requires_login
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if request.args.get('answered_status') and not current_user.is_authenticated:
            return login_manager.unauthorized()

        return f(*args, **kwargs)

    return decorated_function
