import pytest

from app import create_app
from extensions import db
from models import Question, QuestionLevel, Tag, User

TEST_CONFIG = {
    'TESTING': True,
    'SECRET_KEY': 'test-secret',
    'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    'LOG_LEVEL': 'DEBUG',
}

DEFAULT_PASSWORD = 'senha123'


@pytest.fixture
def app():
    app = create_app(TEST_CONFIG)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield db.session
        db.session.rollback()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user_factory(db_session):
    def _factory(name='alice', email=None, score=0, password=DEFAULT_PASSWORD):
        user = User(name=name, email=email or f'{name}@example.com', score=score)
        user.set_password(password)
        db_session.add(user)
        db_session.commit()
        return user
    return _factory


@pytest.fixture
def tag_factory(db_session):
    def _factory(name='Algebra', question_number=0):
        tag = Tag(name=name, question_number=question_number)
        db_session.add(tag)
        db_session.commit()
        return tag
    return _factory


@pytest.fixture
def question_factory(db_session):
    def _factory(creator, tag, correct_option=2, name='Soma', level=QuestionLevel.EASY):
        question = Question(
            creator_id=creator.id,
            name=name,
            question='Quanto é 1 + 1?',
            option1='1',
            option2='2',
            option3='3',
            option4='4',
            correct_option=correct_option,
            level=level,
            tag_id=tag.id,
            answer_count=0,
            correct_answer_count=0
        )
        db_session.add(question)
        db_session.commit()
        return question
    return _factory


def question_payload(**overrides):
    payload = {
        'name': 'Soma',
        'question': 'Quanto é 2 + 2?',
        'option1': '3',
        'option2': '4',
        'option3': '5',
        'option4': '6',
        'correct_option': 2,
        'level': 'easy',
        'tag_name': 'Algebra',
    }
    payload.update(overrides)
    return payload
