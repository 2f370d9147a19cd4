"""
Tests for the interactive menu, with input() scripted.
"""

import pytest

from explore_dataset import build_tables
from main import find_team, run_menu


@pytest.fixture
def tables(game_events, game_results):
    return build_tables(game_events, game_results)


@pytest.fixture
def scripted_input(monkeypatch):
    def _script(*answers):
        answers = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

    return _script


def test_find_team():
    all_teams = ["Boston Celtics", "New York Knicks"]
    assert find_team("knicks", all_teams) == "New York Knicks"
    assert find_team("BOSTON", all_teams) == "Boston Celtics"
    assert find_team("Lakers", all_teams) is None


def test_offense_and_defense(tables, scripted_input, capsys):
    scripted_input("offense", "defense", "exit")
    run_menu(tables)

    out = capsys.readouterr().out
    assert "off_pts_per_poss" in out
    assert "def_pts_per_poss" in out


def test_free_throws(tables, scripted_input, capsys):
    scripted_input("free throws", "exit")
    run_menu(tables)

    assert "opp_fta_per_game" in capsys.readouterr().out


def test_team_lookup(tables, scripted_input, capsys):
    scripted_input("team", "celtics", "team", "lakers", "exit")
    run_menu(tables)

    out = capsys.readouterr().out
    assert "Boston Celtics" in out
    assert "offensive points per possession: 2.333" in out
    assert "no team found matching lakers" in out


def test_invalid_option(tables, scripted_input, capsys):
    scripted_input("predict", "exit")
    run_menu(tables)

    assert "invalid option. please try again" in capsys.readouterr().out
