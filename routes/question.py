"""
Rotas de Questões - Quizboard
=============================

Responsável por:
- Criar questões (com tag e questões relacionadas)
- Submeter respostas (uma por usuário e questão)
- Detalhes e listagem de questões
"""

from flask import Blueprint, request, jsonify
from flask_login import login_required, current_user

from services.questions import create_question, get_question, list_questions, question_summary
from services.scoring import submit_answer
from utils.decorators import json_body_required, answered_status_requires_login
from utils.errors import ValidationError
from utils.helpers import parse_id

# Criar blueprint para rotas de questão
question = Blueprint('question', __name__)


@question.route('/question', methods=['POST'])
@login_required
@json_body_required
def create():
    """Criar nova questão"""
    new_question = create_question(current_user.id, request.get_json())
    return jsonify({
        'message': 'Questão criada com sucesso.',
        'question': new_question.to_dict()
    }), 201


@question.route('/answer', methods=['POST'])
@login_required
@json_body_required
def answer():
    """Submeter resposta de uma questão"""
    data = request.get_json()
    question_id = parse_id(data.get('question_id'), 'question_id')

    if data.get('option') is None:
        raise ValidationError("Campo 'option' é obrigatório.", field='option')

    result = submit_answer(current_user.id, question_id, data.get('option'))

    return jsonify({
        'correct': result['correct'],
        'message': 'Resposta correta!' if result['correct'] else 'Resposta incorreta.'
    })


@question.route('/question-details/<int:question_id>', methods=['GET'])
def details(question_id):
    """Detalhes de uma questão"""
    return jsonify(get_question(question_id).to_dict())


@question.route('/questions', methods=['GET'])
@answered_status_requires_login
def index():
    """Lista questões (?level=, ?answered_status=correct|incorrect|unanswered)"""
    user_id = current_user.id if current_user.is_authenticated else None
    questions = list_questions(
        level=request.args.get('level'),
        answered_status=request.args.get('answered_status'),
        user_id=user_id
    )
    return jsonify([question_summary(q) for q in questions])
