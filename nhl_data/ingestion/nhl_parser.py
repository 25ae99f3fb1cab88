"""Parser for NHL schedule payloads."""

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Any

from pydantic import ValidationError

from nhl_data.ingestion.schema import GameRecord

logger = logging.getLogger(__name__)
MAX_LOG_SNIPPET = 200


def _snippet(raw: bytes | str) -> str:
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, bytes) else raw
    if len(text) <= MAX_LOG_SNIPPET:
        return text
    return text[:MAX_LOG_SNIPPET] + "..."


def _decode(raw: bytes | str | dict) -> dict[str, Any] | None:
    if isinstance(raw, dict):
        return raw
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("Schedule payload is not valid JSON: %s body=%s", exc, _snippet(raw))
        return None
    if not isinstance(payload, dict):
        logger.warning("Schedule payload is not a JSON object: %s", type(payload).__name__)
        return None
    return payload


def _parse_week_date(week: dict[str, Any]) -> date | None:
    value = week.get("date")
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    return None


def _parse_game(game: dict[str, Any], week_date: date) -> GameRecord | None:
    data = dict(game)
    if not data.get("gameDate"):
        data["gameDate"] = week_date.isoformat()
    try:
        record = GameRecord.model_validate(data)
    except ValidationError as exc:
        logger.warning(
            "Skipping invalid game id=%s week=%s errors=%s",
            game.get("id"),
            week_date,
            exc.errors(include_url=False),
        )
        return None
    if record.game_date != week_date:
        logger.warning(
            "Skipping game id=%s dated %s under week %s",
            record.id,
            record.game_date,
            week_date,
        )
        return None
    return record


def parse_schedule(raw: bytes | str | dict) -> list[GameRecord]:
    """Parse an NHL schedule envelope into GameRecord list.

    Every game gets its week's date when it carries none of its own.
    Malformed payloads produce an empty list.
    """

    payload = _decode(raw)
    if payload is None:
        return []

    weeks = payload.get("gameWeek")
    if not isinstance(weeks, list):
        logger.warning("Schedule payload has no gameWeek list")
        return []

    seen_game_ids: set[int] = set()
    parsed_games: list[GameRecord] = []

    for week in weeks:
        if not isinstance(week, dict):
            continue

        week_date = _parse_week_date(week)
        if week_date is None:
            logger.warning("Skipping week without a valid date label: %r", week.get("date"))
            continue

        games = week.get("games")
        if not isinstance(games, list):
            continue

        for game in games:
            if not isinstance(game, dict):
                continue
            record = _parse_game(game, week_date)
            if record is None:
                continue
            if record.id in seen_game_ids:
                continue

            seen_game_ids.add(record.id)
            parsed_games.append(record)

    logger.info("Parsed %s games from %s schedule weeks", len(parsed_games), len(weeks))
    return parsed_games
