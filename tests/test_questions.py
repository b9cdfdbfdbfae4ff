import pytest
from sqlalchemy.exc import IntegrityError

from conftest import question_payload
from models import Question, QuestionLevel, Tag, related_questions
from services.questions import create_question, get_question, list_questions
from services.scoring import submit_answer
from services.tags import create_tag, list_tags, on_question_created, resolve_tag
from utils.errors import ConflictError, QuestionNotFoundError, TagNotFoundError, ValidationError


def test_question_creation_increments_tag_counter(db_session, user_factory, tag_factory):
    author = user_factory('autor')
    tag = tag_factory('Algebra', question_number=3)

    question = create_question(author.id, question_payload(tag_name='Algebra'))

    db_session.expire_all()
    assert db_session.get(Tag, tag.id).question_number == 4
    assert question.tag_id == tag.id
    assert question.level is QuestionLevel.EASY
    assert question.answer_count == 0


def test_unknown_tag_creates_nothing(db_session, user_factory, tag_factory):
    author = user_factory('autor')
    tag_factory('Algebra', question_number=3)

    with pytest.raises(TagNotFoundError):
        create_question(author.id, question_payload(tag_name='Inexistente'))

    assert Question.query.count() == 0
    assert resolve_tag('Algebra').question_number == 3


def test_on_question_created_with_unknown_tag(db_session):
    with pytest.raises(TagNotFoundError):
        on_question_created(424242)


@pytest.mark.parametrize('overrides', [
    {'correct_option': 5},
    {'correct_option': '2'},
    {'level': 'impossible'},
    {'name': '   '},
    {'option3': None},
    {'tag_name': ''},
    {'related_ids': 'abc'},
])
def test_invalid_payload_is_rejected_before_any_write(db_session, user_factory, tag_factory, overrides):
    author = user_factory('autor')
    tag = tag_factory('Algebra')

    with pytest.raises(ValidationError) as excinfo:
        create_question(author.id, question_payload(**overrides))

    assert excinfo.value.details['errors']
    assert Question.query.count() == 0
    db_session.expire_all()
    assert db_session.get(Tag, tag.id).question_number == 0


def test_related_questions_are_linked(db_session, user_factory, tag_factory):
    author = user_factory('autor')
    tag_factory('Algebra')
    first = create_question(author.id, question_payload(name='Primeira'))
    second = create_question(author.id, question_payload(name='Segunda', related_ids=[first.id, first.id]))

    assert [q.id for q in second.related] == [first.id]
    assert db_session.execute(related_questions.select()).all() == [(second.id, first.id)]
    assert resolve_tag('Algebra').question_number == 2


def test_unknown_related_question_creates_nothing(db_session, user_factory, tag_factory):
    author = user_factory('autor')
    tag_factory('Algebra')

    with pytest.raises(QuestionNotFoundError):
        create_question(author.id, question_payload(related_ids=[777]))

    assert Question.query.count() == 0
    assert resolve_tag('Algebra').question_number == 0


def test_get_question_not_found(db_session):
    with pytest.raises(QuestionNotFoundError):
        get_question(1)


def test_list_questions_by_level_and_answered_status(db_session, user_factory, tag_factory, question_factory):
    author = user_factory('autor')
    player = user_factory('jogador')
    tag = tag_factory('Algebra')
    easy = question_factory(author, tag, correct_option=1, name='Facil', level=QuestionLevel.EASY)
    hard = question_factory(author, tag, correct_option=1, name='Dificil', level=QuestionLevel.HARD)
    medium = question_factory(author, tag, correct_option=1, name='Media', level=QuestionLevel.MEDIUM)

    submit_answer(player.id, easy.id, 1)
    submit_answer(player.id, hard.id, 2)

    assert [q.name for q in list_questions(level='hard')] == ['Dificil']
    assert [q.name for q in list_questions(answered_status='correct', user_id=player.id)] == ['Facil']
    assert [q.name for q in list_questions(answered_status='incorrect', user_id=player.id)] == ['Dificil']
    assert [q.name for q in list_questions(answered_status='unanswered', user_id=player.id)] == ['Media']
    assert len(list_questions(answered_status='unanswered', user_id=author.id)) == 3
    assert medium.id in [q.id for q in list_questions()]


def test_list_questions_rejects_unknown_filters(db_session):
    with pytest.raises(ValidationError):
        list_questions(level='legendary')
    with pytest.raises(ValidationError):
        list_questions(answered_status='skipped', user_id=1)


def test_create_tag_rejects_duplicates(db_session):
    create_tag('Algebra')

    with pytest.raises(ConflictError):
        create_tag('Algebra')

    assert Tag.query.count() == 1


def test_list_tags_filters_and_orders(db_session, tag_factory):
    tag_factory('Algebra', question_number=3)
    tag_factory('Geometria', question_number=7)
    tag_factory('Algebra Linear', question_number=1)

    assert [t.name for t in list_tags()] == ['Geometria', 'Algebra', 'Algebra Linear']
    assert [t.name for t in list_tags(sort='asc')] == ['Algebra Linear', 'Algebra', 'Geometria']
    assert [t.name for t in list_tags(name='algebra')] == ['Algebra', 'Algebra Linear']


def test_creator_with_questions_cannot_be_deleted(db_session, user_factory, tag_factory, question_factory):
    author = user_factory('autor')
    question_factory(author, tag_factory('Algebra'))

    db_session.delete(author)
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
