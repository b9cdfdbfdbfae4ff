"""
Questões - Quizboard
====================

Responsável por:
- Criar questões (tag resolvida antes, contador da tag na mesma transação)
- Ligar questões relacionadas
- Detalhes e listagem com filtros de nível e status de resposta
"""

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models.answer import AnsweredRecord, AnswerStatus
from models.question import Question, QuestionLevel
from services.tags import on_question_created, resolve_tag
from utils.errors import QuestionNotFoundError, StoreError, TagNotFoundError, ValidationError
from utils.helpers import validate_question_data

UNANSWERED = 'unanswered'
ANSWERED_STATUSES = [status.value for status in AnswerStatus] + [UNANSWERED]


def create_question(creator_id, data):
    """
    Cria nova questão

    Toda validação e resolução (tag, questões relacionadas) acontece antes
    de qualquer escrita. A questão, suas ligações e o incremento do
    contador da tag são gravados juntos ou nada é gravado.

    Args:
        creator_id (int): Usuário autenticado que cria a questão
        data (dict): Campos da questão, tag_name e related_ids opcional

    Returns:
        Question: Questão criada

    Raises:
        ValidationError, TagNotFoundError, QuestionNotFoundError, StoreError
    """
    is_valid, errors = validate_question_data(data)
    if not is_valid:
        raise ValidationError('Dados da questão inválidos.', errors=errors)

    tag = resolve_tag(data['tag_name'].strip())

    related = []
    for related_id in dict.fromkeys(data.get('related_ids') or []):
        related_question = db.session.get(Question, related_id)
        if related_question is None:
            raise QuestionNotFoundError(related_id)
        related.append(related_question)

    new_question = Question(
        creator_id=creator_id,
        name=data['name'].strip(),
        question=data['question'].strip(),
        option1=data['option1'].strip(),
        option2=data['option2'].strip(),
        option3=data['option3'].strip(),
        option4=data['option4'].strip(),
        correct_option=data['correct_option'],
        level=QuestionLevel(data['level']),
        tag_id=tag.id,
        answer_count=0,
        correct_answer_count=0
    )
    new_question.related = related

    try:
        db.session.add(new_question)
        db.session.flush()
        on_question_created(tag.id)
        db.session.commit()
    except TagNotFoundError:
        # Tag removida entre a resolução e o incremento
        db.session.rollback()
        raise
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.exception("Erro ao criar questão '%s'", data.get('name'))
        raise StoreError('Falha ao criar questão.') from e

    current_app.logger.info("Questão %s criada na tag '%s'", new_question.id, tag.name)
    return new_question


def get_question(question_id):
    """Busca questão pelo ID; QuestionNotFoundError se não existir"""
    question = db.session.get(Question, question_id)
    if question is None:
        raise QuestionNotFoundError(question_id)
    return question


def list_questions(level=None, answered_status=None, user_id=None):
    """
    Lista questões com filtros opcionais

    Args:
        level (str): easy, medium ou hard
        answered_status (str): correct, incorrect ou unanswered,
            relativo ao usuário user_id
        user_id (int): Usuário do filtro de status

    Returns:
        list: Questões ordenadas por ID
    """
    query = Question.query

    if level:
        if level not in QuestionLevel.values():
            raise ValidationError(f"Nível inválido (use: {', '.join(QuestionLevel.values())})", level=level)
        query = query.filter(Question.level == QuestionLevel(level))

    if answered_status:
        if answered_status not in ANSWERED_STATUSES:
            raise ValidationError(f"Status inválido (use: {', '.join(ANSWERED_STATUSES)})",
                                  answered_status=answered_status)
        if user_id is None:
            raise ValidationError('Filtro por status de resposta exige um usuário.')

        if answered_status == UNANSWERED:
            query = query.filter(~Question.answers.any(AnsweredRecord.user_id == user_id))
        else:
            query = query.filter(Question.answers.any(
                (AnsweredRecord.user_id == user_id)
                & (AnsweredRecord.answered_status == AnswerStatus(answered_status))
            ))

    return query.order_by(Question.id).all()


def question_summary(question):
    """Resumo usado na listagem"""
    return {
        'id': question.id,
        'name': question.name,
        'level': question.level.value,
        'tag': question.tag.name if question.tag else None
    }
