"""
Rotas de Tags - Quizboard
=========================

Responsável por:
- Criar tags
- Listar tags por nome, ordenadas pelo número de questões
"""

from flask import Blueprint, request, jsonify

from services.tags import create_tag, list_tags
from utils.decorators import json_body_required

# Criar blueprint para rotas de tag
tag = Blueprint('tag', __name__)


@tag.route('', methods=['GET'])
def index():
    """Lista tags (?name= filtra, ?sort=asc|desc ordena; padrão desc)"""
    tags = list_tags(name=request.args.get('name'), sort=request.args.get('sort'))
    return jsonify([t.to_dict() for t in tags])


@tag.route('', methods=['POST'])
@json_body_required
def create():
    """Cria nova tag"""
    new_tag = create_tag(request.get_json().get('name'))
    return jsonify(new_tag.to_dict()), 201
