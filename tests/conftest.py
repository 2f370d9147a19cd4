"""
Shared fixtures: small play-by-play events and matching game results.
"""

import matplotlib

# charts are drawn off screen during tests
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

GAME_ID = "0022300001"
GAME_DATE = pd.Timestamp("2024-01-15")
HOME = "Boston Celtics"
AWAY = "New York Knicks"


@pytest.fixture
def make_event():
    """Factory for a single event row."""

    def _make_event(team, poss_number, shot_outcome=None, free_throw=False,
                    three_pt=False, game_id=GAME_ID, date=GAME_DATE,
                    loc_x=None, loc_y=None):
        return {
            "game_id": game_id,
            "date": date,
            "poss_before": team,
            "poss_number": poss_number,
            "shot_outcome": shot_outcome,
            "free_throw": free_throw,
            "three_pt": three_pt,
            "loc_x": loc_x,
            "loc_y": loc_y,
        }

    return _make_event


@pytest.fixture
def game_events(make_event):
    """One game: the home side scores 7 on 3 possessions, the away side 3 on 3."""
    rows = [
        # jump ball, nobody in possession yet
        make_event(None, None),
        # home possession 1: made three
        make_event(HOME, 1, "made", three_pt=True, loc_x=-22.0, loc_y=3.0),
        # away possession 2: made two
        make_event(AWAY, 2, "made", loc_x=2.0, loc_y=8.0),
        # home possession 3: missed two, offensive rebound, made two
        make_event(HOME, 3, "missed", loc_x=5.0, loc_y=12.0),
        make_event(HOME, 3),
        make_event(HOME, 3, "made", loc_x=0.0, loc_y=2.0),
        # away possession 4: missed three
        make_event(AWAY, 4, "missed", three_pt=True, loc_x=20.0, loc_y=15.0),
        # home possession 5: two made free throws
        make_event(HOME, 5, "made", free_throw=True),
        make_event(HOME, 5, "made", free_throw=True),
        # away possession 6: one of two free throws
        make_event(AWAY, 6, "made", free_throw=True),
        make_event(AWAY, 6, "missed", free_throw=True),
    ]
    return pd.DataFrame(rows)


@pytest.fixture
def game_results():
    return {
        GAME_ID: {
            "date": "2024-01-15",
            "home": HOME,
            "away": AWAY,
            "home_score": 7,
            "away_score": 3,
        }
    }


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")
