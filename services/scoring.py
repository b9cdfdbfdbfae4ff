"""
Motor de Pontuação - Quizboard
==============================

Submissão de respostas:
1. Valida a alternativa e resolve usuário e questão (nada é alterado antes)
2. Grava o registro de resposta (primeira alteração; falha se duplicado)
3. Incrementa as estatísticas da questão
4. Se correta, incrementa a pontuação do usuário

Os passos 2 a 4 formam uma única transação: qualquer falha desfaz tudo,
então os contadores nunca divergem do livro de respostas.
"""

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models.answer import AnswerStatus
from models.question import Question
from models.user import User
from services import ledger
from utils.errors import AlreadyAnsweredError, QuestionNotFoundError, StoreError, UserNotFoundError
from utils.helpers import parse_option


def submit_answer(user_id, question_id, option):
    """
    Submete a resposta de um usuário para uma questão

    Args:
        user_id (int): Usuário autenticado
        question_id (int): Questão respondida
        option (int): Alternativa escolhida (1 a 4)

    Returns:
        dict: {'correct': bool}

    Raises:
        InvalidOptionError, UserNotFoundError, QuestionNotFoundError,
        AlreadyAnsweredError, StoreError
    """
    option = parse_option(option)

    user = db.session.get(User, user_id)
    if user is None:
        raise UserNotFoundError(user_id)

    question = db.session.get(Question, question_id)
    if question is None:
        raise QuestionNotFoundError(question_id)

    if ledger.has_answered(user_id, question_id):
        raise AlreadyAnsweredError(user_id, question_id)

    is_correct = question.is_correct_option(option)

    try:
        ledger.record_answer(user_id, question_id, AnswerStatus.from_result(is_correct))
        Question.record_attempt(question_id, is_correct)
        if is_correct:
            User.increment_score(user_id)
        db.session.commit()
    except AlreadyAnsweredError:
        raise
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Erro ao registrar resposta: usuário %s, questão %s", user_id, question_id)
        raise StoreError('Falha ao registrar resposta.') from e

    current_app.logger.info(
        "Resposta registrada: usuário %s, questão %s, %s",
        user_id, question_id, 'correta' if is_correct else 'incorreta'
    )
    return {'correct': is_correct}
