# import logging to flag games whose possessions don't add up
import logging
# import os to build chart file paths
import os
# import matlotlib to visualize stats
import matplotlib.pyplot as plt

import charts
from config import Config
from game_results import build_game_perspectives
from pbp_loader import load_events, load_game_results
from possession_stats import (
    attach_game_context,
    efficiency_table,
    find_score_mismatches,
    free_throw_rates,
    score_events,
    summarize_possessions,
    summarize_team_games,
)

logger = logging.getLogger(__name__)


# this function will compute every derived table from the raw events and game results
def build_tables(events, game_results):
    possessions = summarize_possessions(events)
    team_games = summarize_team_games(possessions)
    perspectives = build_game_perspectives(game_results)
    team_games = attach_game_context(team_games, perspectives)

    return {
        "scored_events": score_events(events),
        "possessions": possessions,
        "team_games": team_games,
        "efficiency": efficiency_table(team_games),
        "free_throw_rates": free_throw_rates(team_games),
    }


# this function will either show the current chart or save it to the chart folder
def _finish_chart(name, output_dir):
    plt.tight_layout()
    if output_dir is None:
        plt.show()
    else:
        plt.savefig(os.path.join(output_dir, f"{name}.png"))
    plt.close()


def run_walkthrough(events_path, results_path, show=True, output_dir=None):
    # load the dataset
    events = load_events(events_path)
    game_results = load_game_results(results_path)

    # see basic info
    print("\ndataset info:")
    events.info()

    # see first 10 rows
    print("\nfirst 10 rows:")
    print(events.head(10).to_string())

    # see the columns available
    print("\ncolumns available:")
    print(events.columns.tolist())

    # see shot outcome distribution
    print("\nshot outcome distribution:")
    print(events['shot_outcome'].value_counts(dropna=False))

    tables = build_tables(events, game_results)
    possessions = tables["possessions"]
    team_games = tables["team_games"]

    # possessions should add up to the final score, charted data sometimes doesn't
    mismatches = find_score_mismatches(team_games)
    if not mismatches.empty:
        logger.warning("%d team-games don't add up to the final score", len(mismatches))
        print("\nteam-games where possessions don't match the final score:")
        print(mismatches.to_string())

    # average stats per possession
    print("\naverage stats per possession:")
    print(f"points: {possessions['points'].mean():.3f}")
    print(f"field goal attempts: {possessions['fga'].mean():.3f}")
    print(f"free throw attempts: {possessions['fta'].mean():.3f}")

    # home/away performance
    home_games = team_games[team_games['location'] == 'home']
    away_games = team_games[team_games['location'] == 'away']

    print("\nhome points per possession:")
    print(f"{home_games['pts_per_poss'].mean():.3f}")

    print("\naway points per possession:")
    print(f"{away_games['pts_per_poss'].mean():.3f}")

    # teams with the best net efficiency
    print("\noffensive and defensive efficiency per team:")
    print(tables["efficiency"].head(10).to_string())

    print("\nfree throw attempts per game:")
    print(tables["free_throw_rates"].to_string())

    # nothing to chart without possessions
    if team_games.empty:
        print("\nno possessions found, skipping charts")
    elif show or output_dir is not None:
        if output_dir is not None:
            os.makedirs(output_dir, exist_ok=True)

        charts.plot_points_per_possession_histogram(team_games)
        _finish_chart("points_per_possession", output_dir)

        charts.plot_possession_outcomes(possessions)
        _finish_chart("possession_outcomes", output_dir)

        # shot charts need court locations
        if {'loc_x', 'loc_y'}.issubset(events.columns):
            charts.plot_shot_chart(tables["scored_events"])
            _finish_chart("shot_chart", output_dir)

        charts.plot_efficiency_scatter(tables["efficiency"])
        _finish_chart("efficiency", output_dir)

        charts.plot_efficiency_vs_score(team_games)
        _finish_chart("efficiency_vs_score", output_dir)

        charts.plot_free_throw_rates(tables["free_throw_rates"])
        _finish_chart("free_throw_rates", output_dir)

    return tables


if __name__ == "__main__":
    config = Config.from_env()
    config.setup_logging()
    run_walkthrough(config.events_csv, config.results_csv, output_dir=config.chart_dir)
