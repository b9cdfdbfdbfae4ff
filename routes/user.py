"""
Rotas de Usuários - Quizboard
=============================

Responsável por:
- Cadastro de usuários
- Listagem de usuários com pontuação
"""

from flask import Blueprint, request, jsonify

from services.users import register_user, list_users
from utils.decorators import json_body_required

# Criar blueprint para rotas de usuário
user = Blueprint('user', __name__)


@user.route('', methods=['GET'])
def index():
    """Lista todos os usuários"""
    return jsonify([u.to_dict() for u in list_users()])


@user.route('', methods=['POST'])
@json_body_required
def create():
    """Cadastra novo usuário"""
    new_user = register_user(request.get_json())
    return jsonify(new_user.to_dict()), 201
