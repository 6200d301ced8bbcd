"""Basic usage examples for the F1 history client."""

from f1history import F1HistoryClient, SessionType, dedupe_races, resolve_team
from f1history.resolvers import select_driver_name, select_position, select_team_name, select_time


def main() -> None:
    with F1HistoryClient() as f1:
        # Calendar of a season, without repeated Grand Prix entries
        print("=== 2023 Calendar ===")
        season = f1.season(2023)
        races = dedupe_races(season.races)
        for race in races[:5]:
            sessions = ", ".join(sorted(s.label for s in race.available_sessions))
            print(f"  R{race.round} {race.name} ({sessions})")

        if not races:
            print("  No races found.")
            return

        # Qualifying classification of the first round
        first = races[0]
        print(f"\n=== Qualifying: {first.name} ===")
        quali = f1.session_results(2023, first.round, SessionType.QUALIFYING)
        for record in quali.races.results_for(SessionType.QUALIFYING)[:10]:
            team = resolve_team(select_team_name(record))
            print(
                f"  P{select_position(record, SessionType.QUALIFYING):>3} "
                f"{select_driver_name(record):<24} {team.short_code:<4} "
                f"{select_time(record, SessionType.QUALIFYING)}"
            )


if __name__ == "__main__":
    main()
