# import logging to report what was loaded
import logging
# import pandas to work with tabular data
import pandas as pd

from game_results import game_results_from_frame

logger = logging.getLogger(__name__)

# columns the possession aggregation can't run without
EVENT_COLUMNS = [
    "game_id", "date", "poss_before", "poss_number", "shot_outcome", "free_throw", "three_pt",
]
# shot location and shooter columns, only the shot chart needs these
OPTIONAL_EVENT_COLUMNS = ["loc_x", "loc_y", "shooter", "shot_team"]

RESULTS_COLUMNS = ["game_id", "date", "home", "away", "home_score", "away_score"]


class EventSchemaError(ValueError):
    """A loaded table is missing columns we need."""


# this function will turn TRUE/true/1 style flags into real booleans
def _to_bool(values):
    return values.astype(str).str.strip().str.lower().isin(["true", "t", "1", "1.0", "yes"])


# this function will load the play-by-play events csv
def load_events(path):
    # game ids are opaque, keep leading zeros
    events = pd.read_csv(path, dtype={"game_id": str})

    missing = [column for column in EVENT_COLUMNS if column not in events.columns]
    if missing:
        raise EventSchemaError(f"{path} is missing event columns: {missing}")

    events["date"] = pd.to_datetime(events["date"]).dt.normalize()
    events["free_throw"] = _to_bool(events["free_throw"])
    events["three_pt"] = _to_bool(events["three_pt"])

    absent = [column for column in OPTIONAL_EVENT_COLUMNS if column not in events.columns]
    if absent:
        logger.info("%s has no %s columns, shot charts won't be available", path, absent)

    logger.info("loaded %d events across %d games from %s",
                len(events), events["game_id"].nunique(), path)
    return events


# this function will load the game results csv into the results dictionary
def load_game_results(path):
    frame = pd.read_csv(path, dtype={"game_id": str})

    missing = [column for column in RESULTS_COLUMNS if column not in frame.columns]
    if missing:
        raise EventSchemaError(f"{path} is missing game result columns: {missing}")

    logger.info("loaded %d game results from %s", len(frame), path)
    return game_results_from_frame(frame[RESULTS_COLUMNS])
