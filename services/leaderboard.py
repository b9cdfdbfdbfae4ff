"""
Ranking de Usuários - Quizboard
===============================

Ranking por competição ("1224"): empatados dividem a mesma posição e o
próximo placar distinto recebe sua posição na lista (1, 1, 3, 4, 4, 4, 7).
O filtro por nome é aplicado antes do ranking.
"""

from models.user import User
from utils.helpers import parse_sort


def rank_users(users, name=None, sort='desc'):
    """
    Ordena e classifica usuários pela pontuação

    Args:
        users: Qualquer sequência de objetos com id, name e score
        name (str): Trecho do nome (sem diferenciar maiúsculas), opcional
        sort (str): 'desc' (padrão) ou 'asc'

    Returns:
        list: Pares (usuário, posição) na ordem do ranking
    """
    direction = parse_sort(sort)

    if name:
        needle = name.casefold()
        users = [u for u in users if needle in u.name.casefold()]

    # id desempata para o resultado não depender da ordem de entrada
    if direction == 'desc':
        ordered = sorted(users, key=lambda u: (-u.score, u.id))
    else:
        ordered = sorted(users, key=lambda u: (u.score, u.id))

    ranked = []
    rank = 0
    previous_score = None
    for position, user in enumerate(ordered, 1):
        if user.score != previous_score:
            rank = position
            previous_score = user.score
        ranked.append((user, rank))

    return ranked


def get_leaderboard(name=None, sort='desc'):
    """Ranking atual de todos os usuários do banco, pronto para JSON"""
    users = User.query.all()
    return [
        {'id': user.id, 'name': user.name, 'score': user.score, 'rank': rank}
        for user, rank in rank_users(users, name=name, sort=sort)
    ]
