"""
Rotas do Ranking - Quizboard
============================

Ranking de usuários por pontuação (empates dividem a posição).
"""

from flask import Blueprint, request, jsonify

from services.leaderboard import get_leaderboard

# Criar blueprint para o ranking
leaderboard = Blueprint('leaderboard', __name__)


@leaderboard.route('', methods=['GET'])
def index():
    """Ranking (?name= filtra por trecho do nome, ?sort=asc|desc)"""
    return jsonify(get_leaderboard(name=request.args.get('name'), sort=request.args.get('sort')))
