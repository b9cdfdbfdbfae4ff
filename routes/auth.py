"""
Rotas de Autenticação - Quizboard
=================================

Responsável por:
- Login por email e senha (sessão do Flask-Login)
- Logout
"""

from flask import Blueprint, request, jsonify, current_app
from flask_login import login_user, logout_user, login_required, current_user

from services.users import authenticate
from utils.decorators import json_body_required
from utils.errors import ValidationError

# Criar blueprint para rotas de autenticação
auth = Blueprint('auth', __name__)


@auth.route('/login', methods=['POST'])
@json_body_required
def login():
    """Inicia sessão do usuário"""
    data = request.get_json()
    email = data.get('email')
    password = data.get('password')

    # Validações básicas
    if not email or not password:
        raise ValidationError('Email e senha são obrigatórios.')

    user = authenticate(email, password)
    if user is None:
        raise ValidationError('Email ou senha incorretos.')

    login_user(user, remember=bool(data.get('remember')))
    current_app.logger.info("Login: usuário %s", user.id)

    return jsonify({'message': 'Login realizado com sucesso.', 'user': user.to_dict()})


@auth.route('/logout', methods=['POST'])
@login_required
def logout():
    """Encerra sessão do usuário"""
    user_id = current_user.id
    logout_user()
    current_app.logger.info("Logout: usuário %s", user_id)
    return jsonify({'message': 'Logout realizado com sucesso.'})
