# import game finder to get every game of a season
from nba_api.stats.endpoints import leaguegamefinder
# import pandas to work with tabular data
import pandas as pd

from config import Config
from game_results import game_results_from_finder, game_results_to_frame


# this function will build the game results dictionary for the inputted season
def get_game_results_for_season(season, team_field="TEAM_NAME"):
    # we want both regular season and playoffs
    all_types = ['Regular Season', 'Playoffs']
    season_frames = []

    for stype in all_types:
        # get nba games for that season and season type
        gamefinder = leaguegamefinder.LeagueGameFinder(
            season_nullable=season,
            season_type_nullable=stype,
            league_id_nullable='00',
        )

        # gets the first result for the games
        games_df = gamefinder.get_data_frames()[0]

        # skip if this season type returned no rows
        if games_df is None or games_df.empty:
            continue

        season_frames.append(games_df)

    # nothing came back at all
    if len(season_frames) == 0:
        return {}

    games_df = pd.concat(season_frames, ignore_index=True)

    # drop any rows with missing matchup, we can't tell home from away without it
    games_df = games_df.dropna(subset=['MATCHUP']).copy()

    return game_results_from_finder(games_df, team_field=team_field)


if __name__ == "__main__":
    config = Config.from_env()
    config.setup_logging()

    print(f"fetching game results for season: {config.season}...")
    game_results = get_game_results_for_season(config.season)

    # save to csv
    game_results_to_frame(game_results).to_csv(config.results_csv, index=False)
    print(f"saved {len(game_results)} games to {config.results_csv}")
