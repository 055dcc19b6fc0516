import random
from itertools import combinations

import pytest

from team_balance import Config, Player, balance_teams, evaluate_split, propose_match, snake_draft


def _pool(*ratings):
    return [Player(f"p{i}", f"Player {i}", r) for i, r in enumerate(ratings)]


def _best_diff(pool, team_size):
    best = None
    for picked in combinations(range(len(pool)), team_size):
        a = sum(pool[i].rating for i in picked)
        b = sum(p.rating for i, p in enumerate(pool) if i not in picked)
        if best is None or abs(a - b) < best:
            best = abs(a - b)
    return best


def test_end_to_end_scenario():
    pool = [
        Player("A", "A", 2000),
        Player("B", "B", 1900),
        Player("C", "C", 1200),
        Player("D", "D", 1100),
    ]
    split = balance_teams(pool, 2)
    assert {p.id for p in split.team_a} == {"A", "D"}
    assert {p.id for p in split.team_b} == {"B", "C"}
    assert split.rating_a == split.rating_b == 3100

    proposal = propose_match(pool, 2, Config())
    assert proposal.quality == 1.0
    assert proposal.method == "exhaustive"


def test_hundred_point_gap_scores_three_quarters():
    pool = [
        Player("A", "A", 2000),
        Player("B", "B", 1900),
        Player("C", "C", 1100),
        Player("D", "D", 1100),
    ]
    proposal = propose_match(pool, 2, Config())
    assert {p.id for p in proposal.team_a} == {"A", "C"}
    assert proposal.diff == 100
    assert proposal.quality == pytest.approx(0.75)


@pytest.mark.parametrize("team_size", [1, 2, 3, 4])
def test_partition_is_complete_and_minimal(team_size):
    rng = random.Random(team_size)
    for _ in range(20):
        pool = _pool(*(rng.randint(600, 2600) for _ in range(team_size * 2)))
        split = balance_teams(pool, team_size)
        assert len(split.team_a) == team_size
        assert len(split.team_b) == team_size
        ids = [p.id for p in split.team_a + split.team_b]
        assert sorted(ids) == sorted(p.id for p in pool)
        assert split.diff == _best_diff(pool, team_size)


def test_short_pool_gives_empty_split():
    split = balance_teams(_pool(1000, 1100, 1200), 2)
    assert split.is_empty
    assert split.team_a == [] and split.team_b == []
    assert propose_match(_pool(1000, 1100, 1200), 2, Config()) is None


def test_extra_players_are_ignored():
    pool = _pool(1000, 1000, 1000, 1000, 3000)
    split = balance_teams(pool, 2)
    assert "p4" not in {p.id for p in split.team_a + split.team_b}
    assert split.diff == 0


def test_ties_keep_first_split():
    split = balance_teams(_pool(1000, 1000, 1000, 1000), 2)
    assert [p.id for p in split.team_a] == ["p0", "p1"]
    assert [p.id for p in split.team_b] == ["p2", "p3"]


def test_duplicate_players_by_value():
    same = Player("x", "X", 1000)
    split = balance_teams([same, same], 1)
    assert split.team_a == [same]
    assert split.team_b == [same]


def test_invalid_team_size():
    with pytest.raises(ValueError):
        balance_teams(_pool(1000, 1000), 0)


def test_snake_draft_pattern():
    pool = _pool(1000, 1500, 1400, 1300, 1200, 1100, 900, 800)
    split = snake_draft(pool, 4)
    assert [p.rating for p in split.team_a] == [1500, 1400, 1100, 1000]
    assert [p.rating for p in split.team_b] == [1300, 1200, 900, 800]


def test_snake_draft_odd_team_size():
    split = snake_draft(_pool(1000, 1500, 1400, 1300, 1200, 1100), 3)
    assert [p.rating for p in split.team_a] == [1500, 1400, 1100]
    assert [p.rating for p in split.team_b] == [1300, 1200, 1000]


@pytest.mark.parametrize("team_size", [3, 6, 7])
def test_large_team_falls_back_to_snake_draft(team_size):
    cfg = Config(max_exhaustive_team_size=2)
    pool = _pool(*range(900, 900 + 50 * team_size * 2, 50))
    proposal = propose_match(pool, team_size, cfg)
    assert proposal.method == "snake"
    assert len(proposal.team_a) == len(proposal.team_b) == team_size
    ids = [p.id for p in proposal.team_a + proposal.team_b]
    assert sorted(ids) == sorted(p.id for p in pool)


def test_seven_a_side_uses_snake_draft_by_default():
    proposal = propose_match(_pool(*([1200] * 7 + [1000] * 7)), 7, Config())
    assert proposal.method == "snake"
    assert len(proposal.team_a) == len(proposal.team_b) == 7


def test_evaluate_manual_split():
    pool = _pool(1200, 1000, 1100, 1100)
    proposal = evaluate_split(pool[:2], pool[2:], Config())
    assert proposal.diff == 0
    assert proposal.quality == 1.0
    assert proposal.method == "manual"

    with pytest.raises(ValueError):
        evaluate_split(pool[:3], pool[3:], Config())
    with pytest.raises(ValueError):
        evaluate_split(pool[:2], [pool[0], pool[3]], Config())
    with pytest.raises(ValueError):
        evaluate_split([], [], Config())
