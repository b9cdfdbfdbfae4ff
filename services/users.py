"""
Usuários - Quizboard
====================

Cadastro, autenticação por email e senha, e listagem de usuários.
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError

from extensions import db
from models.user import User
from utils.errors import ConflictError, ValidationError
from utils.helpers import validate_user_data


def register_user(data):
    """
    Cadastra novo usuário com pontuação zero

    Raises:
        ValidationError: campos ausentes ou inválidos
        ConflictError: nome ou email já cadastrado
    """
    is_valid, errors = validate_user_data(data)
    if not is_valid:
        raise ValidationError('Dados do usuário inválidos.', errors=errors)

    name = data['name'].strip()
    email = data['email'].strip().lower()

    if User.query.filter_by(name=name).first():
        raise ConflictError('Este nome de usuário já está em uso.', field='name')
    if User.query.filter_by(email=email).first():
        raise ConflictError('Este email já está cadastrado.', field='email')

    new_user = User(name=name, email=email)
    new_user.set_password(data['password'])
    db.session.add(new_user)
    try:
        db.session.commit()
    except IntegrityError as e:
        # Cadastro simultâneo com o mesmo nome ou email
        db.session.rollback()
        raise ConflictError('Nome ou email já cadastrado.') from e

    current_app.logger.info("Usuário cadastrado: %s", name)
    return new_user


def authenticate(email, password):
    """Retorna o usuário se email e senha conferem, senão None"""
    if not isinstance(email, str) or not isinstance(password, str):
        return None

    user = User.query.filter_by(email=email.strip().lower()).first()
    if user and user.check_password(password):
        return user
    return None


def list_users():
    return User.query.order_by(User.id).all()
