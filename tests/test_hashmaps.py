import pytest

from practicekit.solutions.hashmaps import (
    Fruit,
    Team,
    build_scores_table,
    fill_fruit_basket,
    fruit_basket,
)


def test_at_least_three_types_of_fruits():
    assert len(fruit_basket()) >= 3


def test_at_least_five_fruits():
    assert sum(fruit_basket().values()) >= 5


def test_banana_given():
    assert fruit_basket()["banana"] == 2


@pytest.fixture
def basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified(basket):
    fill_fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits(basket):
    fill_fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits(basket):
    fill_fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_all_fruit_types_in_basket(basket):
    fill_fruit_basket(basket)
    assert all(amount != 0 for amount in basket.values())
    assert set(basket) == set(Fruit)


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team == Team(goals_scored=0, goals_conceded=2)


def test_empty_results_give_empty_table():
    assert build_scores_table("") == {}


@pytest.mark.parametrize("line", ["England,France,4", "England,France,x,2"])
def test_malformed_line_raises(line):
    with pytest.raises(ValueError):
        build_scores_table(line)