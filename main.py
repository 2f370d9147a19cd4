from config import Config
from explore_dataset import build_tables
from pbp_loader import load_events, load_game_results


# this function will find the team that matches the inputted name
def find_team(team_name, all_teams):
    # iterate through all team names
    for team in all_teams:
        # if the team name inputted matches the team name found, return the team name
        if team_name.lower() in team.lower():
            return team
    # otherwise return none
    return None


# this function will display a team's efficiency and its game by game log
def display_team(team_name, tables):
    team = find_team(team_name, tables["efficiency"]["team"].tolist())

    # if no match found, return error message
    if not team:
        print(f"no team found matching {team_name}")
        return

    row = tables["efficiency"][tables["efficiency"]["team"] == team].iloc[0]
    print("*****************************")
    print(f"          {team}          ")
    print(f"games: {row['games']}")
    print(f"offensive points per possession: {row['off_pts_per_poss']:.3f}")
    print(f"defensive points per possession: {row['def_pts_per_poss']:.3f}")
    print(f"net points per possession: {row['net_pts_per_poss']:.3f}")
    print("*****************************")
    print()

    games = tables["team_games"]
    games = games[games["team"] == team].sort_values("date", ascending=False)
    print(games[["date", "opponent", "location", "poss", "points", "pts_per_poss"]].to_string(index=False))
    print()


def run_menu(tables):
    while True:
        user_input = input("would you like to view 'offense', 'defense', 'free throws' or 'team'? (or 'exit' to quit): ").lower()
        print()
        # USER CHOSE OFFENSE
        if user_input == 'offense':
            efficiency = tables["efficiency"].sort_values("off_pts_per_poss", ascending=False)
            print(efficiency[["team", "games", "off_pts_per_poss"]].to_string(index=False))
            print()
        # USER CHOSE DEFENSE
        elif user_input == 'defense':
            # fewest points allowed first
            efficiency = tables["efficiency"].sort_values("def_pts_per_poss")
            print(efficiency[["team", "games", "def_pts_per_poss"]].to_string(index=False))
            print()
        # USER CHOSE FREE THROWS
        elif user_input == 'free throws':
            print(tables["free_throw_rates"].to_string(index=False))
            print()
        # USER CHOSE TEAM
        elif user_input == 'team':
            team_name = input("enter the team name: ")
            display_team(team_name, tables)
        # USER CHOSE EXIT
        elif user_input == 'exit':
            break
        # INVALID OPTION
        else:
            print("invalid option. please try again")


if __name__ == "__main__":
    config = Config.from_env()
    config.setup_logging()

    events = load_events(config.events_csv)
    game_results = load_game_results(config.results_csv)
    run_menu(build_tables(events, game_results))
