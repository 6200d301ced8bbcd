"""Tests for shared/controller.py — view state transitions."""

from __future__ import annotations

from f1history.availability import GENERIC_EMPTY_MESSAGE, NoticeKind, check_availability
from f1history.exceptions import (
    F1HistoryAPIError,
    F1HistoryConnectionError,
    F1HistoryDecodeError,
    F1HistoryTimeoutError,
)
from f1history.session_types import SessionType
from shared.controller import (
    CONNECTIVITY_ERROR,
    LOAD_FAILED_PREFIX,
    ROUND_REQUIRED_ERROR,
    RaceInfo,
    ResultsController,
    describe_failure,
)
from shared.gateway import ProxyConnectivityError, ProxyErrorResponse
from tests.conftest import SAMPLE_QUALY_RESULTS, SAMPLE_RACE_RESULTS


class TestChangeYear:
    def test_dedupes_and_selects_first_round(self, make_gateway, make_season):
        season = make_season(2023, ["Bahrain Grand Prix", "Bahrain Grand Prix", "Saudi Arabian Grand Prix"])
        gateway = make_gateway({("2023", None, None): season})
        controller = ResultsController(gateway, year="2024")

        controller.change_year("2023")

        state = controller.state
        assert state.selected_year == "2023"
        assert [r.name for r in state.race_list] == ["Bahrain Grand Prix", "Saudi Arabian Grand Prix"]
        assert state.selected_round == "1"

    def test_empty_season_clears_round(self, make_gateway, make_season):
        gateway = make_gateway({("1949", None, None): make_season(1949, [])})
        controller = ResultsController(gateway, year="2024")
        controller.select_round("7")

        controller.change_year("1949")

        assert controller.state.race_list == []
        assert controller.state.selected_round == ""

    def test_failure_sets_error(self, make_gateway):
        gateway = make_gateway({("2023", None, None): F1HistoryConnectionError("down")})
        controller = ResultsController(gateway, year="2024")

        controller.change_year("2023")

        assert controller.state.race_list == []
        assert controller.state.error_message == CONNECTIVITY_ERROR

    def test_successful_retry_clears_error(self, make_gateway, make_season):
        gateway = make_gateway({
            ("2023", None, None): F1HistoryConnectionError("down"),
            ("2022", None, None): make_season(2022, ["Bahrain Grand Prix"]),
        })
        controller = ResultsController(gateway, year="2024")
        controller.change_year("2023")
        assert controller.state.error_message == CONNECTIVITY_ERROR

        controller.change_year("2022")

        assert controller.state.error_message is None
        assert controller.state.notice_kind is None
        assert controller.state.selected_round == "1"

    def test_clears_round_required_error(self, make_gateway, make_season):
        gateway = make_gateway({("2022", None, None): make_season(2022, ["Bahrain Grand Prix"])})
        controller = ResultsController(gateway, year="2024")
        controller.load_results()
        assert controller.state.error_message == ROUND_REQUIRED_ERROR

        controller.change_year("2022")

        assert controller.state.error_message is None

    def test_race_without_round_leaves_round_unselected(self, make_gateway):
        gateway = make_gateway({("2022", None, None): {"season": 2022, "races": [{"raceName": "Test Grand Prix"}]}})
        controller = ResultsController(gateway, year="2024")

        controller.change_year("2022")
        controller.load_results()

        assert controller.state.selected_round == ""
        assert controller.state.error_message == ROUND_REQUIRED_ERROR
        assert gateway.calls == [("2022", None, None)]


class TestSelection:
    def test_select_session_type(self, make_gateway):
        controller = ResultsController(make_gateway({}), year="2024")
        controller.select_session_type("qualifying")
        assert controller.state.selected_session_type is SessionType.QUALIFYING

    def test_unknown_session_type_falls_back_to_race(self, make_gateway):
        controller = ResultsController(make_gateway({}), year="2024")
        controller.select_session_type("warmup")
        assert controller.state.selected_session_type is SessionType.RACE


class TestLoadResults:
    def test_requires_round(self, make_gateway):
        gateway = make_gateway({})
        controller = ResultsController(gateway, year="2024")

        controller.load_results()

        assert controller.state.error_message == ROUND_REQUIRED_ERROR
        assert gateway.calls == []

    def test_race_results(self, make_gateway):
        gateway = make_gateway({("2024", "5", "race"): SAMPLE_RACE_RESULTS})
        controller = ResultsController(gateway, year="2024")
        controller.select_round("5")

        controller.load_results()

        state = controller.state
        assert state.is_loading is False
        assert state.error_message is None
        assert len(state.current_results) == 3
        assert state.results_session_type is SessionType.RACE
        assert state.current_race_info == RaceInfo(name="Chinese Grand Prix", season="2024", round="5")
        first = state.current_rows[0]
        assert first.position == "1"
        assert first.driver == "Max Verstappen"
        assert first.team_code == "RBR"
        assert first.time == "1:40:52.554"
        last = state.current_rows[2]
        assert last.driver == "bottas"
        assert last.time == "Retired"
        assert last.team_code == "SAU"

    def test_qualifying_uses_session_rules(self, make_gateway):
        gateway = make_gateway({("2024", "5", "qualifying"): SAMPLE_QUALY_RESULTS})
        controller = ResultsController(gateway, year="2024")
        controller.select_round("5")
        controller.select_session_type(SessionType.QUALIFYING)

        controller.load_results()

        rows = controller.state.current_rows
        assert [r.position for r in rows] == ["1", "16"]
        assert [r.time for r in rows] == ["1:33.660", "1:35.505"]
        assert rows[1].driver == "Hulkenberg"
        assert rows[1].team_code == "HAS"

    def test_empty_sprint_before_2021_is_unavailable(self, make_gateway):
        payload = {"season": 2019, "races": {"round": 3, "sprintRaceResults": []}}
        gateway = make_gateway({("2019", "3", "sprint"): payload})
        controller = ResultsController(gateway, year="2019")
        controller.select_round("3")
        controller.select_session_type("sprint")

        controller.load_results()

        state = controller.state
        assert state.notice_kind is NoticeKind.UNAVAILABLE
        assert state.error_message == check_availability("sprint", 2019).message
        assert state.current_results == []

    def test_empty_sprint_after_2021_is_caveat(self, make_gateway):
        payload = {"season": 2023, "races": {"round": 1, "sprintRaceResults": []}}
        gateway = make_gateway({("2023", "1", "sprint"): payload})
        controller = ResultsController(gateway, year="2023")
        controller.select_round("1")
        controller.select_session_type("sprint")

        controller.load_results()

        assert controller.state.notice_kind is NoticeKind.CAVEAT

    def test_empty_race_is_unexpected(self, make_gateway):
        gateway = make_gateway({("2024", "1", "race"): {"season": 2024, "races": {"results": []}}})
        controller = ResultsController(gateway, year="2024")
        controller.select_round("1")

        controller.load_results()

        assert controller.state.notice_kind is NoticeKind.UNEXPECTED
        assert controller.state.error_message == GENERIC_EMPTY_MESSAGE

    def test_http_error_is_connectivity_message(self, make_gateway):
        gateway = make_gateway({("2024", "5", "race"): F1HistoryAPIError(500, "Internal Server Error")})
        controller = ResultsController(gateway, year="2024")
        controller.select_round("5")

        controller.load_results()

        assert controller.state.error_message == CONNECTIVITY_ERROR
        assert controller.state.is_loading is False

    def test_upstream_failure_behind_proxy_is_connectivity_message(self, make_gateway):
        gateway = make_gateway({
            ("2024", "5", "race"): ProxyConnectivityError("HTTP 503: Service Unavailable"),
        })
        controller = ResultsController(gateway, year="2024")
        controller.select_round("5")

        controller.load_results()

        assert controller.state.error_message == CONNECTIVITY_ERROR

    def test_decode_error_includes_text(self, make_gateway):
        gateway = make_gateway({("2024", "5", "race"): F1HistoryDecodeError("bad json at 1:1")})
        controller = ResultsController(gateway, year="2024")
        controller.select_round("5")

        controller.load_results()

        assert controller.state.error_message == f"{LOAD_FAILED_PREFIX}: bad json at 1:1"

    def test_invalid_payload_reported(self, make_gateway):
        gateway = make_gateway({("2024", "5", "race"): {"races": {"results": "nope"}}})
        controller = ResultsController(gateway, year="2024")
        controller.select_round("5")

        controller.load_results()

        assert controller.state.error_message.startswith(LOAD_FAILED_PREFIX)

    def test_new_load_clears_previous_results(self, make_gateway):
        gateway = make_gateway({
            ("2024", "5", "race"): SAMPLE_RACE_RESULTS,
            ("2024", "5", "fp1"): F1HistoryTimeoutError("slow"),
        })
        controller = ResultsController(gateway, year="2024")
        controller.select_round("5")
        controller.load_results()
        assert controller.state.current_rows

        controller.select_session_type("fp1")
        controller.load_results()

        state = controller.state
        assert state.current_rows == []
        assert state.current_results == []
        assert state.current_race_info is None
        assert state.results_session_type is None

    def test_stale_response_is_discarded(self, make_gateway):
        """A load superseded while in flight must not overwrite the newer one."""
        controller: ResultsController

        class ReentrantGateway:
            def __init__(self):
                self.calls = 0

            def fetch(self, year=None, round_number=None, session_type=None):
                self.calls += 1
                if self.calls == 1:
                    # The user switches to qualifying before the race response lands
                    controller.select_session_type("qualifying")
                    controller.load_results()
                    return SAMPLE_RACE_RESULTS
                return SAMPLE_QUALY_RESULTS

        controller = ResultsController(ReentrantGateway(), year="2024")
        controller.select_round("5")

        controller.load_results()

        state = controller.state
        assert state.results_session_type is SessionType.QUALIFYING
        assert len(state.current_results) == 2
        assert state.current_rows[0].time == "1:33.660"


class TestLoadLatest:
    def test_selects_last_round_and_loads(self, make_gateway, make_season):
        season = make_season(2024, ["Bahrain Grand Prix", "Chinese Grand Prix", "Chinese Grand Prix"])
        gateway = make_gateway({
            (None, None, None): season,
            ("2024", "2", "race"): SAMPLE_RACE_RESULTS,
        })
        controller = ResultsController(gateway, year="1998")

        controller.load_latest()

        state = controller.state
        assert state.selected_year == "2024"
        assert len(state.race_list) == 2
        assert state.selected_round == "2"
        assert gateway.calls[-1] == ("2024", "2", "race")
        assert state.current_rows

    def test_failure(self, make_gateway):
        gateway = make_gateway({(None, None, None): ProxyErrorResponse("upstream down")})
        controller = ResultsController(gateway, year="2024")

        controller.load_latest()

        assert controller.state.error_message == f"{LOAD_FAILED_PREFIX}: upstream down"

    def test_empty_season_does_nothing(self, make_gateway, make_season):
        gateway = make_gateway({(None, None, None): make_season(2026, [])})
        controller = ResultsController(gateway, year="2025")

        controller.load_latest()

        assert controller.state.selected_year == "2025"
        assert len(gateway.calls) == 1

    def test_clears_previous_error(self, make_gateway, make_season):
        gateway = make_gateway({(None, None, None): make_season(2026, [])})
        controller = ResultsController(gateway, year="2025")
        controller.load_results()
        assert controller.state.error_message == ROUND_REQUIRED_ERROR

        controller.load_latest()

        assert controller.state.error_message is None


class TestDescribeFailure:
    def test_connectivity_family(self):
        for exc in (
            F1HistoryAPIError(404, "Not Found"),
            F1HistoryConnectionError("x"),
            F1HistoryTimeoutError("x"),
            ProxyConnectivityError("HTTP 404: Not Found"),
        ):
            assert describe_failure(exc) == CONNECTIVITY_ERROR

    def test_other_errors_include_text(self):
        assert describe_failure(ValueError("boom")) == f"{LOAD_FAILED_PREFIX}: boom"
