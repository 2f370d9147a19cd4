# import logging to report games we have to skip
import logging
# import pandas to work with tabular data
import pandas as pd

logger = logging.getLogger(__name__)

# every game in the results dictionary needs these fields
GAME_FIELDS = ["date", "home", "away", "home_score", "away_score"]

PERSPECTIVE_COLUMNS = [
    "date", "game_id", "team", "opponent", "location", "team_score", "opp_score", "win",
]


class GameResultsError(ValueError):
    """A game in the results dictionary is missing fields."""


def build_game_perspectives(game_results: dict) -> pd.DataFrame:
    """Turn {game_id: {date, home, away, home_score, away_score}} into one row
    per team per game, each seen from that team's side."""
    rows = []
    for game_id, game in game_results.items():
        missing = [field for field in GAME_FIELDS if pd.isna(game.get(field))]
        if missing:
            raise GameResultsError(f"game {game_id} is missing {missing}")

        # home team's view of the game
        rows.append({
            "date": game["date"],
            "game_id": game_id,
            "team": game["home"],
            "opponent": game["away"],
            "location": "home",
            "team_score": game["home_score"],
            "opp_score": game["away_score"],
        })
        # away team's view of the same game
        rows.append({
            "date": game["date"],
            "game_id": game_id,
            "team": game["away"],
            "opponent": game["home"],
            "location": "away",
            "team_score": game["away_score"],
            "opp_score": game["home_score"],
        })

    if len(rows) == 0:
        return pd.DataFrame(columns=PERSPECTIVE_COLUMNS)

    perspectives = pd.DataFrame(rows)
    perspectives["date"] = pd.to_datetime(perspectives["date"]).dt.normalize()
    perspectives["team_score"] = perspectives["team_score"].astype(int)
    perspectives["opp_score"] = perspectives["opp_score"].astype(int)

    # add win column (1 for win, 0 for loss)
    perspectives["win"] = (perspectives["team_score"] > perspectives["opp_score"]).astype(int)
    return perspectives[PERSPECTIVE_COLUMNS]


# this function will pair up the two LeagueGameFinder rows of every game
def game_results_from_finder(games_df, team_field="TEAM_NAME"):
    game_results = {}

    for game_id, game_rows in games_df.groupby("GAME_ID", sort=True):
        # a finished game has exactly one row per team
        if len(game_rows) != 2:
            logger.warning("skipping game %s with %d team rows", game_id, len(game_rows))
            continue

        # MATCHUP: "LAL vs. NYK" for the home team or "NYK @ LAL" for the away team
        is_home = game_rows["MATCHUP"].str.contains("vs")
        if is_home.sum() != 1:
            logger.warning("skipping game %s, can't tell home from away", game_id)
            continue

        home = game_rows[is_home].iloc[0]
        away = game_rows[~is_home].iloc[0]
        game_results[game_id] = {
            "date": pd.to_datetime(home["GAME_DATE"]).normalize(),
            "home": home[team_field],
            "away": away[team_field],
            "home_score": int(home["PTS"]),
            "away_score": int(away["PTS"]),
        }

    return game_results


# this function will flatten the results dictionary so it can be saved to csv
def game_results_to_frame(game_results):
    rows = [{"game_id": game_id, **game} for game_id, game in game_results.items()]
    if len(rows) == 0:
        return pd.DataFrame(columns=["game_id"] + GAME_FIELDS)
    return pd.DataFrame(rows)[["game_id"] + GAME_FIELDS]


# this function will rebuild the results dictionary from its csv shape
def game_results_from_frame(frame):
    game_results = {}
    for row in frame.to_dict("records"):
        game_id = row.pop("game_id")
        if game_id in game_results:
            raise GameResultsError(f"game {game_id} is listed more than once")
        game_results[game_id] = row
    return game_results
