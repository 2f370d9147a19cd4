# import logging to report row counts and data problems
import logging
# import numpy for vectorized case splits
import numpy as np
# import pandas to work with tabular data
import pandas as pd

logger = logging.getLogger(__name__)

# the only shot outcomes we know how to score
SHOT_OUTCOMES = ("made", "missed")

# one possession is identified by these columns
POSSESSION_KEYS = ["date", "game_id", "poss_before", "poss_number"]
# one team in one game is identified by these columns
TEAM_GAME_KEYS = ["date", "game_id", "team"]

SHOT_COUNT_COLUMNS = ["fgm", "fga", "ftm", "fta", "points"]
POSSESSION_COLUMNS = POSSESSION_KEYS + SHOT_COUNT_COLUMNS
TEAM_GAME_COLUMNS = TEAM_GAME_KEYS + ["poss"] + SHOT_COUNT_COLUMNS + ["pts_per_poss"]


class MalformedEventError(ValueError):
    """An event carries a shot outcome we cannot score."""


class GameContextMismatchError(ValueError):
    """Team-game rows and game results do not line up one to one."""


# this function will classify a single event as (shot_made, shot_value, points)
def classify_shot(shot_outcome, free_throw, three_pt):
    # no shot outcome means this event was not a shot attempt
    if shot_outcome is None or pd.isna(shot_outcome):
        return None, None, None

    if shot_outcome not in SHOT_OUTCOMES:
        raise MalformedEventError(f"unknown shot outcome: {shot_outcome!r}")

    # free throws are worth 1 even if the three flag is set
    if free_throw:
        shot_value = 1
    elif three_pt:
        shot_value = 3
    else:
        shot_value = 2

    shot_made = shot_outcome == "made"
    points = shot_value if shot_made else 0
    return shot_made, shot_value, points


# this function will add shot_made, shot_value and points columns to every event
def score_events(events: pd.DataFrame) -> pd.DataFrame:
    outcome = events["shot_outcome"]

    # reject anything that is not made, missed or empty
    unknown = outcome.notna() & ~outcome.isin(SHOT_OUTCOMES)
    if unknown.any():
        bad_values = sorted(outcome[unknown].astype(str).unique())
        raise MalformedEventError(
            f"{int(unknown.sum())} events have unknown shot outcomes: {bad_values}"
        )

    is_shot = outcome.notna()
    free_throw = events["free_throw"].eq(True)
    three_pt = events["three_pt"].eq(True)

    # first matching condition wins, same order as classify_shot
    shot_value = pd.Series(
        np.select([free_throw, three_pt], [1, 3], default=2), index=events.index
    )
    shot_made = outcome.eq("made")

    scored = events.copy()
    scored["shot_made"] = shot_made.where(is_shot).astype("boolean")
    scored["shot_value"] = shot_value.where(is_shot).astype("Int64")
    scored["points"] = (shot_value * shot_made).where(is_shot).astype("Int64")
    return scored


# this function will build one summary row per possession
def summarize_possessions(events: pd.DataFrame) -> pd.DataFrame:
    # score everything first so a bad shot outcome fails the run wherever it is
    scored = score_events(events)

    # events without a team in possession are administrative, skip them
    scored = scored[scored["poss_before"].notna()]
    dropped = len(events) - len(scored)
    if dropped:
        logger.debug("dropped %d events with no team in possession", dropped)

    if scored.empty:
        return pd.DataFrame(columns=POSSESSION_COLUMNS)

    made = scored["shot_made"].fillna(False).astype(bool)
    is_shot = scored["shot_value"].notna()
    free_throw = scored["shot_value"].eq(1).fillna(False).astype(bool)

    # one 0/1 column per counter so a plain groupby sum does the work
    counters = scored[POSSESSION_KEYS].copy()
    counters["fga"] = (is_shot & ~free_throw).astype(int)
    counters["fgm"] = (is_shot & ~free_throw & made).astype(int)
    counters["fta"] = (is_shot & free_throw).astype(int)
    counters["ftm"] = (is_shot & free_throw & made).astype(int)
    counters["points"] = scored["points"].fillna(0).astype(int)

    if counters["poss_number"].isna().any():
        logger.warning(
            "%d events have a team in possession but no possession number",
            int(counters["poss_number"].isna().sum()),
        )

    possessions = (
        counters.groupby(POSSESSION_KEYS, dropna=False, sort=True)[SHOT_COUNT_COLUMNS]
        .sum()
        .reset_index()
    )
    logger.debug("summarized %d events into %d possessions", len(scored), len(possessions))
    return possessions[POSSESSION_COLUMNS]


# this function will roll possessions up into one row per team per game
def summarize_team_games(possessions: pd.DataFrame) -> pd.DataFrame:
    if possessions.empty:
        return pd.DataFrame(columns=TEAM_GAME_COLUMNS)

    missing_keys = possessions[["date", "game_id"]].isna().any(axis=1)
    if missing_keys.any():
        logger.warning("%d possessions have no date or game id", int(missing_keys.sum()))

    # null keys stay as their own team-game so the game results join rejects them
    team_games = (
        possessions.rename(columns={"poss_before": "team"})
        .groupby(TEAM_GAME_KEYS, dropna=False, sort=True)
        .agg(
            poss=("poss_number", "size"),
            fgm=("fgm", "sum"),
            fga=("fga", "sum"),
            ftm=("ftm", "sum"),
            fta=("fta", "sum"),
            points=("points", "sum"),
        )
        .reset_index()
    )
    team_games["pts_per_poss"] = team_games["points"] / team_games["poss"]
    return team_games[TEAM_GAME_COLUMNS]


def attach_game_context(team_games: pd.DataFrame, perspectives: pd.DataFrame) -> pd.DataFrame:
    """Join opponent, location and final scores onto each team-game row.

    Every team-game row has to find exactly one game perspective row. A missing
    match means the game results are incomplete, so it raises instead of
    dropping or null-filling the row.
    """
    duplicated = perspectives.duplicated(subset=TEAM_GAME_KEYS, keep=False)
    if duplicated.any():
        keys = perspectives.loc[duplicated, TEAM_GAME_KEYS].drop_duplicates()
        raise GameContextMismatchError(
            f"game results list {len(keys)} team-games more than once: "
            f"{keys.to_dict('records')}"
        )

    context_columns = [c for c in perspectives.columns if c not in team_games.columns]
    if team_games.empty:
        return pd.DataFrame(columns=list(team_games.columns) + context_columns)

    merged = team_games.merge(
        perspectives[TEAM_GAME_KEYS + context_columns],
        on=TEAM_GAME_KEYS,
        how="left",
        indicator=True,
    )

    unmatched = merged["_merge"] == "left_only"
    if unmatched.any():
        keys = merged.loc[unmatched, TEAM_GAME_KEYS]
        raise GameContextMismatchError(
            f"{len(keys)} team-games have no game result: {keys.to_dict('records')}"
        )

    return merged.drop(columns="_merge")


# weighted mean of pts_per_poss by possessions, grouped by one column
def _weighted_efficiency(team_games, group_column, value_column):
    columns = ["team", "games", "poss", value_column]
    if team_games.empty:
        return pd.DataFrame(columns=columns)

    weighted = team_games.assign(
        weighted_points=team_games["pts_per_poss"] * team_games["poss"]
    )
    rollup = (
        weighted.groupby(group_column, sort=True)
        .agg(
            games=("poss", "size"),
            poss=("poss", "sum"),
            weighted_points=("weighted_points", "sum"),
        )
        .reset_index()
        .rename(columns={group_column: "team"})
    )
    rollup[value_column] = rollup["weighted_points"] / rollup["poss"]
    return rollup[columns]


# this function will compute each team's points per possession on offense
def offensive_efficiency(team_games: pd.DataFrame) -> pd.DataFrame:
    return _weighted_efficiency(team_games, "team", "off_pts_per_poss")


# this function will compute the points per possession each team allowed
def defensive_efficiency(team_games: pd.DataFrame) -> pd.DataFrame:
    # grouping by opponent sums what the opponents scored against the team
    return _weighted_efficiency(team_games, "opponent", "def_pts_per_poss")


# this function will put offense and defense side by side for every team
def efficiency_table(team_games: pd.DataFrame) -> pd.DataFrame:
    offense = offensive_efficiency(team_games)[["team", "games", "off_pts_per_poss"]]
    defense = defensive_efficiency(team_games)[["team", "def_pts_per_poss"]]

    table = offense.merge(defense, on="team", how="outer")
    table["net_pts_per_poss"] = table["off_pts_per_poss"] - table["def_pts_per_poss"]
    return table.sort_values("net_pts_per_poss", ascending=False).reset_index(drop=True)


def free_throw_rates(team_games: pd.DataFrame) -> pd.DataFrame:
    """Average free throw attempts per game, home and away.

    fta_per_game is what the team shot, opp_fta_per_game is what its opponents
    shot in the same games.
    """
    columns = ["team", "location", "games", "fta_per_game", "opp_fta_per_game"]
    if team_games.empty:
        return pd.DataFrame(columns=columns)

    # line each team-game up with the opponent's row from the same game
    opponent_rows = team_games[["date", "game_id", "team", "fta"]].rename(
        columns={"team": "opponent", "fta": "opp_fta"}
    )
    paired = team_games.merge(opponent_rows, on=["date", "game_id", "opponent"], how="left")

    # an opponent with no charted possessions has no free throw count for that game
    unpaired = paired["opp_fta"].isna()
    if unpaired.any():
        logger.warning(
            "%d team-games have no opponent row, left out of opp_fta_per_game: %s",
            int(unpaired.sum()),
            paired.loc[unpaired, ["game_id", "team", "opponent"]].to_dict("records"),
        )

    rates = (
        paired.groupby(["team", "location"], sort=True)
        .agg(
            games=("game_id", "size"),
            fta_per_game=("fta", "mean"),
            opp_fta_per_game=("opp_fta", "mean"),
        )
        .reset_index()
    )
    return rates[columns]


# this function will return team-games whose possessions don't add up to the final score
def find_score_mismatches(team_games: pd.DataFrame) -> pd.DataFrame:
    mismatched = team_games[team_games["points"] != team_games["team_score"]]
    return mismatched[TEAM_GAME_KEYS + ["points", "team_score"]].reset_index(drop=True)
