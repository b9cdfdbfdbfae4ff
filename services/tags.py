"""
Tags e Contador de Questões - Quizboard
=======================================

Responsável por:
- Criar e listar tags
- Resolver a tag pelo nome antes de criar uma questão
- Incrementar question_number quando uma questão é criada
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError

from extensions import db
from models.tag import Tag
from utils.errors import ConflictError, TagNotFoundError, ValidationError
from utils.helpers import parse_sort


def resolve_tag(name):
    """Busca a tag pelo nome exato; TagNotFoundError se não existir"""
    tag = Tag.query.filter_by(name=name).first()
    if tag is None:
        raise TagNotFoundError(name)
    return tag


def on_question_created(tag_id):
    """
    Incrementa o contador de questões da tag (UPDATE atômico).
    Não faz commit: roda dentro da transação de criação da questão.

    Raises:
        TagNotFoundError: se a tag não existe
    """
    if Tag.increment_question_number(tag_id) == 0:
        raise TagNotFoundError(tag_id)


def create_tag(name):
    """Cria nova tag; ConflictError se o nome já existe"""
    name = name.strip() if isinstance(name, str) else ''
    if not name:
        raise ValidationError('Nome é obrigatório e deve ser texto.', field='name')

    if Tag.query.filter_by(name=name).first():
        raise ConflictError('Tag já existe.', name=name)

    tag = Tag(name=name, question_number=0)
    db.session.add(tag)
    try:
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        raise ConflictError('Tag já existe.', name=name) from e

    current_app.logger.info("Tag criada: %s", name)
    return tag


def list_tags(name=None, sort='desc'):
    """Lista tags filtradas por nome e ordenadas pelo número de questões"""
    direction = parse_sort(sort)

    query = Tag.query
    if name:
        query = query.filter(Tag.name.ilike(f'%{name}%'))

    if direction == 'desc':
        query = query.order_by(Tag.question_number.desc(), Tag.id)
    else:
        query = query.order_by(Tag.question_number.asc(), Tag.id)

    return query.all()
