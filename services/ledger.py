"""
Livro de Respostas - Quizboard
==============================

Garante no máximo uma resposta por par (usuário, questão).

A verificação prévia (has_answered) é só uma otimização: quem garante a
unicidade é a chave primária composta de answered_questions. Duas
submissões simultâneas para o mesmo par não conseguem gravar ambas.
"""

from flask import current_app
from sqlalchemy.exc import IntegrityError

from extensions import db
from models.answer import AnsweredRecord
from utils.errors import AlreadyAnsweredError


def has_answered(user_id, question_id):
    """Verifica se o usuário já respondeu a questão"""
    return bool(db.session.query(
        AnsweredRecord.query.filter_by(user_id=user_id, question_id=question_id).exists()
    ).scalar())


def record_answer(user_id, question_id, status):
    """
    Grava o registro de resposta na unidade de trabalho atual.

    Nunca sobrescreve um registro existente. Em caso de violação da
    chave única, a transação inteira é desfeita antes do erro subir.

    Args:
        user_id (int): Usuário que respondeu
        question_id (int): Questão respondida
        status (AnswerStatus): Resultado da resposta

    Raises:
        AlreadyAnsweredError: se o par já possui registro
    """
    # INSERT direto: o banco decide, sem passar pelo identity map da sessão
    try:
        db.session.execute(
            db.insert(AnsweredRecord).values(
                question_id=question_id,
                user_id=user_id,
                answered_status=status
            )
        )
    except IntegrityError as e:
        db.session.rollback()
        if not has_answered(user_id, question_id):
            # Outra restrição (chave estrangeira): não é resposta duplicada
            raise
        current_app.logger.warning("Resposta duplicada: usuário %s, questão %s", user_id, question_id)
        raise AlreadyAnsweredError(user_id, question_id) from e
