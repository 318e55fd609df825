from __future__ import annotations

import json
from typing import Any, Optional

import mysql.connector

from ..common.datetime_utils import parse_iso_datetime, to_iso
from ..common.logging_config import get_logger
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from ..shifts.model import ShiftConfig
from .model import StoredTicker
from .repository import KEY_ACTIVE, KEY_CURRENCY, KEY_END, KEY_SALARY, KEY_START, StateStore

logger = get_logger("state.mysql")


class MySQLStateStore(StateStore):
    """Key-value rows in ``ticker_state``; values are JSON encoded."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> StoredTicker:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "SELECT state_key, state_value FROM ticker_state WHERE state_key IN (%s,%s,%s,%s,%s)",
                    (KEY_SALARY, KEY_CURRENCY, KEY_START, KEY_END, KEY_ACTIVE),
                )
                rows = fetchall(cur)
        except mysql.connector.Error:
            logger.exception("Failed to load ticker state; falling back to defaults")
            return StoredTicker()

        values = {r["state_key"]: _decode(r.get("state_value")) for r in rows}

        salary = values.get(KEY_SALARY)
        currency = values.get(KEY_CURRENCY)
        return StoredTicker(
            annual_salary=float(salary) if isinstance(salary, (int, float)) and not isinstance(salary, bool) else None,
            currency=currency if isinstance(currency, str) and currency.strip() else None,
            start=parse_iso_datetime(values.get(KEY_START)),
            end=parse_iso_datetime(values.get(KEY_END)),
            active=values.get(KEY_ACTIVE) is True,
        )

    def save(self, config: Optional[ShiftConfig], *, active: bool) -> None:
        items: list[tuple[str, Any]] = []
        if config is not None:
            items.extend(
                [
                    (KEY_SALARY, config.annual_salary),
                    (KEY_CURRENCY, config.currency),
                    (KEY_START, to_iso(config.start)),
                    (KEY_END, to_iso(config.end)),
                ]
            )
        items.append((KEY_ACTIVE, bool(active)))

        try:
            with db_cursor(self._conn_factory) as (_, cur):
                for key, value in items:
                    cur.execute(
                        """
                        INSERT INTO ticker_state(state_key, state_value)
                        VALUES(%s,%s)
                        ON DUPLICATE KEY UPDATE state_value=VALUES(state_value)
                        """,
                        (key, json.dumps(value)),
                    )
        except mysql.connector.Error as e:
            raise StoreError(f"Failed to update state: {e}") from e


def _decode(raw: Optional[str]) -> Any:
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return None
