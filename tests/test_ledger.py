import pytest
from sqlalchemy.exc import IntegrityError

from models import AnsweredRecord, AnswerStatus, User
from services import ledger
from utils.errors import AlreadyAnsweredError


@pytest.fixture
def pair(user_factory, tag_factory, question_factory):
    author = user_factory('autor')
    player = user_factory('jogador')
    question = question_factory(author, tag_factory('Algebra'))
    return player.id, question.id


def test_has_answered_reflects_recorded_entries(db_session, pair):
    user_id, question_id = pair
    assert ledger.has_answered(user_id, question_id) is False

    ledger.record_answer(user_id, question_id, AnswerStatus.CORRECT)
    db_session.commit()

    assert ledger.has_answered(user_id, question_id) is True


def test_record_never_overwrites(db_session, pair):
    user_id, question_id = pair
    ledger.record_answer(user_id, question_id, AnswerStatus.INCORRECT)
    db_session.commit()

    # Sem a verificação prévia: a chave composta do banco barra o segundo registro
    with pytest.raises(AlreadyAnsweredError):
        ledger.record_answer(user_id, question_id, AnswerStatus.CORRECT)

    records = AnsweredRecord.query.filter_by(user_id=user_id, question_id=question_id).all()
    assert len(records) == 1
    assert records[0].answered_status is AnswerStatus.INCORRECT


def test_same_user_other_question_is_independent(db_session, pair, question_factory, tag_factory):
    user_id, question_id = pair
    other = question_factory(db_session.get(User, user_id),
                             tag_factory('Geometria'), name='Outra')

    ledger.record_answer(user_id, question_id, AnswerStatus.CORRECT)
    ledger.record_answer(user_id, other.id, AnswerStatus.INCORRECT)
    db_session.commit()

    assert AnsweredRecord.query.filter_by(user_id=user_id).count() == 2


def test_foreign_key_violation_is_not_reported_as_duplicate(db_session, pair):
    _, question_id = pair

    with pytest.raises(IntegrityError):
        ledger.record_answer(9999, question_id, AnswerStatus.CORRECT)

    assert AnsweredRecord.query.count() == 0
