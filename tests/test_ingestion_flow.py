from __future__ import annotations

import json
import unittest
from datetime import date, datetime, timezone

from nhl_data.ingestion.mapping import to_external, to_persistable
from nhl_data.ingestion.nhl_parser import parse_schedule
from nhl_data.ingestion.schema import GameRecord, normalize_game_state


def _team(team_id: int, abbrev: str, name: str | None, city: str | None, score=None) -> dict:
    team: dict = {"id": team_id, "abbrev": abbrev, "logo": f"https://assets.example/{abbrev}.svg"}
    if name is not None:
        team["commonName"] = {"default": name, "fr": name.upper()}
    if city is not None:
        team["placeName"] = {"default": city}
    if score is not None:
        team["score"] = score
    return team


def _live_game() -> dict:
    return {
        "id": 2025020045,
        "season": 20252026,
        "gameType": 2,
        "venue": {"default": "TD Garden"},
        "neutralSite": False,
        "startTimeUTC": "2025-10-07T23:00:00Z",
        "easternUTCOffset": "-04:00",
        "venueUTCOffset": "-04:00",
        "venueTimezone": "America/New_York",
        "gameState": "LIVE",
        "gameScheduleState": "OK",
        "homeTeam": _team(6, "BOS", "Bruins", "Boston", score=2),
        "awayTeam": _team(10, "TOR", "Maple Leafs", "Toronto", score=1),
        "periodDescriptor": {"number": 2, "periodType": "REG", "maxRegulationPeriods": 3},
        "clock": {
            "timeRemaining": "12:34",
            "secondsRemaining": 754,
            "running": True,
            "inIntermission": False,
        },
        "gameCenterLink": "/gamecenter/tor-vs-bos/2025/10/07/2025020045",
        "tvBroadcasts": [{"id": 1, "network": "ESPN"}],
    }


def _future_game() -> dict:
    return {
        "id": 2025020046,
        "season": 20252026,
        "gameType": 2,
        "startTimeUTC": "2025-10-08T00:00:00Z",
        "gameState": "FUT",
        "homeTeam": {"id": 3, "abbrev": "NYR"},
        "awayTeam": {"id": 6, "abbrev": "BOS"},
    }


def _payload(*weeks: tuple[str, list[dict]]) -> bytes:
    return json.dumps(
        {
            "nextStartDate": "2025-10-14",
            "gameWeek": [
                {"date": label, "dayAbbrev": "TUE", "numberOfGames": len(games), "games": games}
                for label, games in weeks
            ],
        }
    ).encode("utf-8")


class NhlParserTests(unittest.TestCase):
    def test_parse_schedule_assigns_week_date_to_games_without_one(self) -> None:
        raw = _payload(
            ("2025-10-07", [_live_game(), _future_game()]),
            ("2025-10-08", [dict(_future_game(), id=2025020050)]),
        )

        games = parse_schedule(raw)

        self.assertEqual([2025020045, 2025020046, 2025020050], [g.id for g in games])
        self.assertEqual(
            [date(2025, 10, 7), date(2025, 10, 7), date(2025, 10, 8)],
            [g.game_date for g in games],
        )

    def test_parse_schedule_drops_games_dated_outside_their_week(self) -> None:
        mismatched = dict(_future_game(), gameDate="2025-10-09")
        matching = dict(_live_game(), gameDate="2025-10-07")

        games = parse_schedule(_payload(("2025-10-07", [mismatched, matching])))

        self.assertEqual([2025020045], [g.id for g in games])

    def test_parse_schedule_leaves_missing_substructures_unset(self) -> None:
        games = parse_schedule(_payload(("2025-10-07", [_future_game()])))

        game = games[0]
        self.assertIsNone(game.clock)
        self.assertIsNone(game.period_descriptor)
        self.assertIsNone(game.game_outcome)
        self.assertIsNone(game.venue)
        self.assertIsNone(game.home_team.common_name)
        self.assertIsNone(game.home_team.place_name)
        self.assertIsNone(game.home_team.score)
        self.assertEqual("scheduled", game.status)

    def test_parse_schedule_returns_empty_for_malformed_payloads(self) -> None:
        self.assertEqual([], parse_schedule(b"<html>Bad gateway</html>"))
        self.assertEqual([], parse_schedule(b"[1, 2, 3]"))
        self.assertEqual([], parse_schedule(b'{"games": []}'))
        self.assertEqual([], parse_schedule(b'{"gameWeek": "soon"}'))
        self.assertEqual([], parse_schedule(b""))

    def test_parse_schedule_skips_invalid_games_and_weeks(self) -> None:
        raw = json.dumps(
            {
                "gameWeek": [
                    {"date": "not-a-date", "games": [_live_game()]},
                    {
                        "date": "2025-10-08",
                        "games": [
                            {"season": 20252026},
                            {"id": "abc"},
                            "junk",
                            _future_game(),
                            _future_game(),
                        ],
                    },
                ]
            }
        )

        games = parse_schedule(raw)

        self.assertEqual([2025020046], [g.id for g in games])

    def test_normalize_game_state_maps_upstream_codes(self) -> None:
        self.assertEqual("in_progress", normalize_game_state("CRIT"))
        self.assertEqual("final", normalize_game_state("OFF"))
        self.assertEqual("postponed", normalize_game_state("ppd"))
        self.assertEqual("scheduled", normalize_game_state(None))


class EntityMapperTests(unittest.TestCase):
    def _record(self, game: dict) -> GameRecord:
        return parse_schedule(_payload(("2025-10-07", [game])))[0]

    def test_to_persistable_extracts_names_and_scores(self) -> None:
        game, home, away = to_persistable(self._record(_live_game()))

        self.assertEqual(2025020045, game.id)
        self.assertEqual(date(2025, 10, 7), game.game_date)
        self.assertEqual("TD Garden", game.venue)
        self.assertEqual(2, game.home_score)
        self.assertEqual(1, game.away_score)
        self.assertEqual(6, game.home_team_id)
        self.assertEqual(754, game.seconds_remaining)
        self.assertTrue(game.clock_running)
        self.assertEqual(("Bruins", "Boston"), (home.name, home.city))
        self.assertEqual(("Maple Leafs", "Toronto"), (away.name, away.city))

    def test_to_persistable_tolerates_missing_wrappers_and_teams(self) -> None:
        data = _future_game()
        del data["awayTeam"]

        game, home, away = to_persistable(self._record(data))

        self.assertIsNone(home.name)
        self.assertIsNone(home.city)
        self.assertIsNone(away)
        self.assertIsNone(game.away_team_id)
        self.assertEqual(0, game.away_score)
        self.assertIsNone(game.period)
        self.assertIsNone(game.time_remaining)

    def test_round_trip_reproduces_present_substructures(self) -> None:
        final = dict(
            _live_game(),
            gameState="OFF",
            gameOutcome={"lastPeriodType": "OT", "otPeriods": 1},
            winnerByPeriod={"periods": [6, 10, 6, 6], "gameOutcome": 6},
            winnerByGameOutcome={"periods": [], "gameOutcome": 6},
        )
        for raw_game in (final, _future_game()):
            record = self._record(raw_game)
            game, home, away = to_persistable(record)

            rebuilt = to_external(game, home, away)

            self.assertEqual(record, rebuilt)

    def test_round_trip_does_not_fabricate_absent_substructures(self) -> None:
        record = self._record(_future_game())
        game, home, away = to_persistable(record)

        wire = to_external(game, home, away).to_wire()

        for key in (
            "clock",
            "periodDescriptor",
            "gameOutcome",
            "winnerByPeriod",
            "winnerByGameOutcome",
            "venue",
        ):
            self.assertNotIn(key, wire)
        self.assertNotIn("commonName", wire["homeTeam"])
        self.assertNotIn("placeName", wire["homeTeam"])

    def test_to_external_treats_naive_timestamps_as_utc(self) -> None:
        game, home, away = to_persistable(self._record(_future_game()))
        game.start_time_utc = datetime(2025, 10, 8, 0, 0)

        rebuilt = to_external(game, home, away)

        self.assertEqual(datetime(2025, 10, 8, 0, 0, tzinfo=timezone.utc), rebuilt.start_time_utc)

    def test_offset_start_times_are_normalized_to_utc(self) -> None:
        record = self._record(dict(_future_game(), startTimeUTC="2025-10-07T20:00:00-04:00"))

        game, _, _ = to_persistable(record)

        expected = datetime(2025, 10, 8, 0, 0, tzinfo=timezone.utc)
        self.assertEqual(expected, game.start_time_utc)
        self.assertEqual(timezone.utc, game.start_time_utc.tzinfo)
        self.assertEqual("2025-10-08T00:00:00Z", record.to_wire()["startTimeUTC"])

    def test_winner_substructures_map_to_columns(self) -> None:
        raw_game = dict(_live_game(), winnerByPeriod={"periods": [6, 10], "gameOutcome": 6})

        game, _, _ = to_persistable(self._record(raw_game))

        self.assertEqual([6, 10], game.winner_by_period_periods)
        self.assertEqual(6, game.winner_by_period_outcome)
        self.assertIsNone(game.winner_by_game_outcome_periods)
        self.assertIsNone(game.winner_by_game_outcome_result)


if __name__ == "__main__":
    unittest.main()
