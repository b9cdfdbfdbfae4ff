import os
import sqlite3

from flask import Flask, jsonify
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from dotenv import load_dotenv

from extensions import db, migrate, login_manager
from utils.errors import QuizboardError, StoreError

# Carregar variáveis de ambiente do arquivo .env
load_dotenv()


def create_app(test_config=None):
    """Cria e configura a aplicação Quizboard"""
    app = Flask(__name__)

    # ================================
    # CONFIGURAÇÕES DO QUIZBOARD
    # ================================

    # Chave secreta para sessões de login
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY') or 'quizboard-dev-secret-2024'

    # Configuração do banco de dados
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL') or 'sqlite:///quizboard.db'

    # Fix para PostgreSQL no Render (substitui postgres:// por postgresql://)
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith("postgres://"):
        app.config['SQLALCHEMY_DATABASE_URI'] = app.config['SQLALCHEMY_DATABASE_URI'].replace("postgres://",
                                                                                              "postgresql://", 1)

    # Outras configurações
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['LOG_LEVEL'] = os.environ.get('LOG_LEVEL', 'INFO')

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # ================================
    # INICIALIZAR EXTENSÕES
    # ================================

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # ================================
    # IMPORTAR MODELOS DO BANCO
    # ================================

    from models.user import User

    # Função necessária para o Flask-Login carregar usuários
    @login_manager.user_loader
    def load_user(user_id):
        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return jsonify({'error': 'Não autorizado. Faça login.', 'kind': 'unauthorized'}), 401

    # ================================
    # IMPORTAR E REGISTRAR ROTAS
    # ================================

    from routes.auth import auth
    from routes.user import user
    from routes.tag import tag
    from routes.question import question
    from routes.leaderboard import leaderboard

    # Registrar blueprints (grupos de rotas)
    app.register_blueprint(auth, url_prefix='/api')
    app.register_blueprint(user, url_prefix='/api/user')
    app.register_blueprint(tag, url_prefix='/api/tag')
    app.register_blueprint(question, url_prefix='/api')
    app.register_blueprint(leaderboard, url_prefix='/api/leaderboard')

    register_error_handlers(app)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    # ================================
    # INICIALIZAÇÃO DO BANCO
    # ================================

    with app.app_context():
        db.create_all()

    return app


# ================================
# TRATAMENTO DE ERROS
# ================================

def register_error_handlers(app):
    """Respostas JSON estruturadas para todos os erros da API"""

    @app.errorhandler(QuizboardError)
    def handle_quizboard_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        app.logger.exception("Falha no banco de dados: %s", error)
        store_error = StoreError('Falha ao acessar o banco de dados.')
        return jsonify(store_error.to_dict()), store_error.status_code

    @app.errorhandler(404)
    def handle_not_found(error):
        return jsonify({'error': 'Recurso não encontrado.', 'kind': 'not_found'}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return jsonify({'error': 'Método não permitido.', 'kind': 'method_not_allowed'}), 405


# Chaves estrangeiras do SQLite ficam desligadas por padrão
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# ================================
# EXECUTAR APLICAÇÃO
# ================================

if __name__ == '__main__':
    # Determinar se está em desenvolvimento ou produção
    debug_mode = os.environ.get('FLASK_ENV') == 'development'

    app = create_app()
    app.logger.info("Iniciando Quizboard (modo: %s)", 'Desenvolvimento' if debug_mode else 'Produção')

    # Rodar aplicação
    app.run(
        debug=debug_mode,
        host='0.0.0.0',  # Permite acesso externo
        port=int(os.environ.get('PORT', 5000))  # Porta flexível para deploy
    )
