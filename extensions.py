"""
Extensões Flask - Quizboard
===========================

Instâncias compartilhadas das extensões, inicializadas em create_app():
- db: Banco de dados (Flask-SQLAlchemy)
- migrate: Migrações do banco (Flask-Migrate)
- login_manager: Sessões de login (Flask-Login)
"""

from flask_login import LoginManager
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
migrate = Migrate()
login_manager = LoginManager()
