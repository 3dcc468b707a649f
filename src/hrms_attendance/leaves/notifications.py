from __future__ import annotations

import json
from typing import Protocol

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor


class Notifier(Protocol):
    def notify(self, *, employee_id: int, message: str, payload: dict) -> None:
        raise NotImplementedError


class MySQLNotificationRepository(Notifier):
    """Stores notifications for the employee to pick up; delivery is not our concern."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def notify(self, *, employee_id: int, message: str, payload: dict) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO notifications(employee_id, message, payload) VALUES(%s,%s,%s)",
                (int(employee_id), message, json.dumps(payload)),
            )
