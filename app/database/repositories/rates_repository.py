from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from app.database.connection import Database
from app.database.exceptions import PersistenceError
from app.database.models import RateRecord

_INSERT_RATE = """
    INSERT INTO rates (
        agent_id, rate_type, description, cost, currency,
        valid_start, valid_end, details
    )
    VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
    RETURNING id, agent_id, rate_type, description, cost, currency,
              valid_start, valid_end, details, created_at
"""


class RatesRepository:
    """Database operations for the rates table."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def insert_many(self, rows: Sequence[dict[str, Any]]) -> list[RateRecord]:
        """Insert every row in a single transaction and return the stored records.

        Either all rows are committed or none are.

        Raises:
            PersistenceError: if the datastore rejects any row or is unreachable.
        """
        if not rows:
            return []
        try:
            with self._database.connection() as conn:
                try:
                    records = self._insert_rows(conn, rows)
                except Exception:
                    conn.rollback()
                    raise
                conn.commit()
        except psycopg.Error as exc:
            raise PersistenceError(str(exc)) from exc
        return records

    def find_by_agent(self, agent_id: str) -> list[RateRecord]:
        """Return all rates owned by an agent, oldest first."""
        with self._database.connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT id, agent_id, rate_type, description, cost, currency,
                           valid_start, valid_end, details, created_at
                    FROM rates
                    WHERE agent_id = %s
                    ORDER BY created_at, id
                    """,
                    (agent_id,),
                )
                rows = cur.fetchall()
        return [_row_to_record(row) for row in rows]

    @staticmethod
    def _insert_rows(
        conn: psycopg.Connection[Any], rows: Sequence[dict[str, Any]]
    ) -> list[RateRecord]:
        records: list[RateRecord] = []
        with conn.cursor(row_factory=dict_row) as cur:
            for row in rows:
                cur.execute(
                    _INSERT_RATE,
                    (
                        row["agent_id"],
                        row["rate_type"],
                        row["description"],
                        row["cost"],
                        row["currency"],
                        row["valid_start"],
                        row["valid_end"],
                        Jsonb(row.get("details", {})),
                    ),
                )
                inserted = cur.fetchone()
                if inserted is None:
                    raise PersistenceError("Insert returned no row")
                records.append(_row_to_record(inserted))
        return records


def _row_to_record(row: dict[str, Any]) -> RateRecord:
    cost = row["cost"]
    return RateRecord(
        id=str(row["id"]),
        agent_id=str(row["agent_id"]),
        rate_type=row["rate_type"],
        description=row["description"],
        cost=float(cost) if isinstance(cost, Decimal) else cost,
        currency=row["currency"],
        valid_start=row["valid_start"],
        valid_end=row["valid_end"],
        details=row["details"] or {},
        created_at=row["created_at"],
    )
