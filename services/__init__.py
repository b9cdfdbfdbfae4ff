"""
Serviços do Sistema Quizboard
=============================

Regras de negócio, separadas das rotas:
- ledger: Livro de respostas (uma resposta por usuário e questão)
- scoring: Submissão de respostas e pontuação
- leaderboard: Ranking de usuários
- tags: Tags e contador de questões
- questions: Criação e consulta de questões
- users: Cadastro e autenticação
"""
