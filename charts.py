# import matlotlib to visualize stats
import matplotlib.pyplot as plt
# import pandas to work with tabular data
import pandas as pd
# import linregress to draw trend lines
from scipy.stats import linregress


# this function will give us something to draw on
def _get_axes(ax, figsize=(8, 6)):
    if ax is None:
        _, ax = plt.subplots(figsize=figsize)
    return ax


# this function will show how points per possession is spread across team-games
def plot_points_per_possession_histogram(team_games, bins=20, ax=None):
    ax = _get_axes(ax)
    ax.hist(team_games['pts_per_poss'], bins=bins)
    ax.axvline(team_games['pts_per_poss'].mean(), color='black', linestyle='--')
    ax.set_title("distribution of points per possession")
    ax.set_xlabel("points per possession")
    ax.set_ylabel("number of team-games")
    return ax


# this function will count possessions by how many points they produced
def plot_possession_outcomes(possessions, ax=None):
    ax = _get_axes(ax)
    outcome_counts = possessions['points'].value_counts().sort_index()
    ax.bar(outcome_counts.index.astype(str), outcome_counts.values)
    ax.set_title("possessions by points scored")
    ax.set_xlabel("points scored on the possession")
    ax.set_ylabel("number of possessions")
    return ax


def plot_shot_chart(scored_events, team=None, ax=None):
    """Made and missed field goals by court location.

    Takes the output of score_events, free throws are left out since they all
    come from the same spot.
    """
    ax = _get_axes(ax, figsize=(8, 7))

    shots = scored_events[scored_events['shot_value'].isin([2, 3])]
    if team is not None:
        shots = shots[shots['poss_before'] == team]

    made = shots['shot_made'].fillna(False).astype(bool)
    ax.scatter(shots.loc[made, 'loc_x'], shots.loc[made, 'loc_y'],
               marker='o', alpha=0.6, label='made')
    ax.scatter(shots.loc[~made, 'loc_x'], shots.loc[~made, 'loc_y'],
               marker='x', alpha=0.6, label='missed')

    ax.set_aspect('equal')
    ax.set_title(f"shot chart: {team}" if team else "shot chart")
    ax.set_xlabel("court x")
    ax.set_ylabel("court y")
    ax.legend()
    return ax


# this function will put every team on an offense vs defense scatter plot
def plot_efficiency_scatter(efficiency, ax=None):
    ax = _get_axes(ax, figsize=(10, 8))
    ax.scatter(efficiency['off_pts_per_poss'], efficiency['def_pts_per_poss'])

    # league average reference lines split the plot into quadrants
    ax.axvline(efficiency['off_pts_per_poss'].mean(), color='gray', linestyle='--')
    ax.axhline(efficiency['def_pts_per_poss'].mean(), color='gray', linestyle='--')

    for _, row in efficiency.iterrows():
        ax.annotate(row['team'], (row['off_pts_per_poss'], row['def_pts_per_poss']),
                    textcoords='offset points', xytext=(4, 4), fontsize=8)

    # lower is better on defense
    ax.invert_yaxis()
    ax.set_title("offensive vs defensive efficiency")
    ax.set_xlabel("points scored per possession")
    ax.set_ylabel("points allowed per possession")
    return ax


# this function will compare points per possession to the final score
def plot_efficiency_vs_score(team_games, ax=None):
    ax = _get_axes(ax)
    x = team_games['pts_per_poss'].astype(float)
    y = team_games['team_score'].astype(float)
    ax.scatter(x, y, alpha=0.5)

    # a trend line needs at least two different x values
    if x.nunique() > 1:
        fit = linregress(x, y)
        xs = pd.Series([x.min(), x.max()])
        ax.plot(xs, fit.intercept + fit.slope * xs, color='red')
        ax.annotate(f"r = {fit.rvalue:.2f}", xy=(0.05, 0.95), xycoords='axes fraction',
                    verticalalignment='top')

    ax.set_title("points per possession vs final score")
    ax.set_xlabel("points per possession")
    ax.set_ylabel("final score")
    return ax


# this function will compare free throw attempts at home and away
def plot_free_throw_rates(ft_rates, ax=None):
    ax = _get_axes(ax, figsize=(10, 6))

    # pandas refuses to bar plot an empty frame, leave the axes blank
    if not ft_rates.empty:
        # one bar group per location, team vs opponent attempts
        league = ft_rates.groupby('location')[['fta_per_game', 'opp_fta_per_game']].mean()
        league = league.rename(columns={'fta_per_game': 'team', 'opp_fta_per_game': 'opponent'})
        league.plot(kind='bar', ax=ax)

    ax.set_title("free throw attempts per game, home vs away")
    ax.set_xlabel("location")
    ax.set_ylabel("free throw attempts per game")
    ax.tick_params(axis='x', rotation=0)
    return ax
