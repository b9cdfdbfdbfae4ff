"""
Rotas do Sistema Quizboard
==========================
Este módulo contém todas as rotas da API organizadas por funcionalidade:
- auth: Login e logout
- user: Cadastro e listagem de usuários
- tag: Criar e listar tags
- question: Criar questões, responder, detalhes e listagem
- leaderboard: Ranking de usuários
"""
from .auth import auth
from .user import user
from .tag import tag
from .question import question
from .leaderboard import leaderboard

# Lista de todos os blueprints disponíveis
__all__ = [
    'auth',
    'user',
    'tag',
    'question',
    'leaderboard'
]
