"""
Task persistence (raw SQL).

Every store failure is logged here and re-raised as `StoreError`, so callers
never see driver details.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from core import db
from core.errors import StoreError

logger = logging.getLogger(__name__)

TASK_COLUMNS = "id, title, description, completed"

# Columns a partial update may touch, in the order they appear in SET.
UPDATABLE_COLUMNS = ("title", "description", "completed")


async def _guarded(call: Callable[..., Awaitable[Any]], sql: str, *args: Any) -> Any:
    try:
        return await call(sql, *args)
    except Exception as exc:
        logger.exception("store_query_failed sql=%s", " ".join(sql.split()))
        raise StoreError() from exc


async def list_tasks() -> list[dict]:
    return await _guarded(
        db.fetch_all,
        f"""
        SELECT {TASK_COLUMNS}
        FROM tasks
        ORDER BY id ASC
        """,
    )


async def get_task(task_id: int) -> dict | None:
    return await _guarded(
        db.fetch_one,
        f"""
        SELECT {TASK_COLUMNS}
        FROM tasks
        WHERE id = $1
        """,
        task_id,
    )


async def create_task(*, title: str, description: str | None = None) -> dict:
    row = await _guarded(
        db.fetch_one,
        f"""
        INSERT INTO tasks (title, description)
        VALUES ($1, $2)
        RETURNING {TASK_COLUMNS}
        """,
        title,
        description,
    )
    if row is None:
        logger.error("store_insert_returned_nothing title=%r", title)
        raise StoreError()
    return row


def build_update_sql(fields: dict[str, Any]) -> tuple[str, list[Any]]:
    """
    Build a single UPDATE touching only the supplied columns.

    Column names come from UPDATABLE_COLUMNS, never from the caller; values
    are positional parameters with the task id last.
    """
    columns = [name for name in UPDATABLE_COLUMNS if name in fields]
    if not columns:
        raise ValueError("No columns to update.")

    assignments = ", ".join(f"{name} = ${i}" for i, name in enumerate(columns, start=1))
    sql = f"""
        UPDATE tasks
        SET {assignments}
        WHERE id = ${len(columns) + 1}
        RETURNING {TASK_COLUMNS}
        """
    return sql, [fields[name] for name in columns]


async def update_task(task_id: int, fields: dict[str, Any]) -> dict | None:
    """
    Apply a partial update in one statement.

    Returns the merged row, or None when no task has this id.
    """
    sql, params = build_update_sql(fields)
    return await _guarded(db.fetch_one, sql, *params, task_id)


async def delete_task(task_id: int) -> bool:
    row = await _guarded(
        db.fetch_one,
        """
        DELETE FROM tasks
        WHERE id = $1
        RETURNING id
        """,
        task_id,
    )
    return row is not None
