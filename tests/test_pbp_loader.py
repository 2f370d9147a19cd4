"""
Tests for loading events and game results from csv.
"""

import pandas as pd
import pytest

from game_results import game_results_to_frame
from pbp_loader import EventSchemaError, load_events, load_game_results


@pytest.fixture
def events_csv(tmp_path, game_events):
    path = tmp_path / "pbp_events.csv"
    events = game_events.copy()
    # flags written the way spreadsheets export them
    events["free_throw"] = events["free_throw"].map({True: "TRUE", False: "FALSE"})
    events["three_pt"] = events["three_pt"].map({True: "TRUE", False: "FALSE"})
    events.to_csv(path, index=False)
    return path


def test_load_events(events_csv, game_events):
    events = load_events(events_csv)

    assert len(events) == len(game_events)
    # leading zeros survive
    assert events["game_id"].unique().tolist() == ["0022300001"]
    assert events["date"].dtype.kind == "M"
    assert events["free_throw"].dtype == bool
    assert events["free_throw"].tolist() == game_events["free_throw"].tolist()
    assert events["three_pt"].tolist() == game_events["three_pt"].tolist()


def test_load_events_keeps_shot_outcome_as_is(tmp_path, game_events):
    path = tmp_path / "pbp_events.csv"
    events = game_events.copy()
    events.loc[1, "shot_outcome"] = "MADE"
    events.to_csv(path, index=False)

    assert load_events(path).loc[1, "shot_outcome"] == "MADE"


def test_load_events_missing_columns(tmp_path, game_events):
    path = tmp_path / "pbp_events.csv"
    game_events.drop(columns=["poss_number", "three_pt"]).to_csv(path, index=False)

    with pytest.raises(EventSchemaError, match="poss_number"):
        load_events(path)


def test_load_events_without_locations(tmp_path, game_events):
    path = tmp_path / "pbp_events.csv"
    game_events.drop(columns=["loc_x", "loc_y"]).to_csv(path, index=False)

    events = load_events(path)
    assert "loc_x" not in events.columns


def test_load_game_results(tmp_path, game_results):
    path = tmp_path / "game_results.csv"
    game_results_to_frame(game_results).to_csv(path, index=False)

    loaded = load_game_results(path)

    assert list(loaded) == ["0022300001"]
    game = loaded["0022300001"]
    assert game["home"] == "Boston Celtics"
    assert game["away"] == "New York Knicks"
    assert game["home_score"] == 7
    assert game["away_score"] == 3


def test_load_game_results_missing_columns(tmp_path):
    path = tmp_path / "game_results.csv"
    pd.DataFrame([{"game_id": "1", "date": "2024-01-15", "home": "A"}]).to_csv(path, index=False)

    with pytest.raises(EventSchemaError, match="away"):
        load_game_results(path)
