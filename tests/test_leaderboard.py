import random
from types import SimpleNamespace

import pytest

from services.leaderboard import get_leaderboard, rank_users
from utils.errors import ValidationError


def make_users(scores, names=None):
    names = names or [f'user{i}' for i in range(len(scores))]
    return [SimpleNamespace(id=i + 1, name=name, score=score)
            for i, (name, score) in enumerate(zip(names, scores))]


def ranks_by_id(ranked):
    return {user.id: rank for user, rank in ranked}


def test_ties_share_rank_and_consume_positions():
    ranked = rank_users(make_users([50, 50, 30]))
    assert [rank for _, rank in ranked] == [1, 1, 3]


def test_competition_ranking_sequence():
    ranked = rank_users(make_users([10, 9, 9, 8, 7, 7, 7, 3]))
    assert [rank for _, rank in ranked] == [1, 2, 2, 4, 5, 5, 5, 8]


def test_ascending_order():
    ranked = rank_users(make_users([30, 50, 30]), sort='asc')
    assert [user.score for user, _ in ranked] == [30, 30, 50]
    assert [rank for _, rank in ranked] == [1, 1, 3]


def test_default_direction_is_desc():
    ranked = rank_users(make_users([1, 3, 2]), sort=None)
    assert [user.score for user, _ in ranked] == [3, 2, 1]


def test_ranking_is_invariant_to_input_order():
    users = make_users([5, 7, 7, 1, 5, 9, 0])
    expected = rank_users(users)

    shuffled = list(users)
    random.Random(42).shuffle(shuffled)
    result = rank_users(shuffled)

    assert ranks_by_id(result) == ranks_by_id(expected)
    assert [u.id for u, _ in result] == [u.id for u, _ in expected]


def test_ranking_is_idempotent():
    users = make_users([4, 4, 2, 8])
    assert rank_users(users) == rank_users(users)


def test_name_filter_is_case_insensitive_and_applied_before_ranking():
    users = make_users([100, 40, 40, 10], names=['Zara', 'ana', 'Mariana', 'ANAbel'])

    ranked = rank_users(users, name='ANA')

    assert [(user.name, rank) for user, rank in ranked] == [('ana', 1), ('Mariana', 1), ('ANAbel', 3)]


def test_empty_input():
    assert rank_users([]) == []


def test_unknown_sort_direction():
    with pytest.raises(ValidationError):
        rank_users(make_users([1]), sort='sideways')


def test_leaderboard_reads_current_scores(db_session, user_factory):
    user_factory('carla', score=50)
    user_factory('bruno', score=50)
    user_factory('diego', score=30)

    board = get_leaderboard()

    assert [(row['name'], row['score'], row['rank']) for row in board] == [
        ('carla', 50, 1),
        ('bruno', 50, 1),
        ('diego', 30, 3),
    ]
    assert set(board[0]) == {'id', 'name', 'score', 'rank'}
