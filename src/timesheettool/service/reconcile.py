# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from timesheettool.model.record import Record, RecordChange


def reconcile(
    previous: Optional[Record],
    end_time: pendulum.DateTime,
    start_time: Optional[pendulum.DateTime] = None,
) -> list[RecordChange]:
    """
    Work out how the most recent record has to change when a new event arrives.

    ``previous`` is the most recent record that started strictly before
    ``end_time``. If it is still open, or runs past ``end_time``, it gets
    closed at ``end_time``. If ``start_time`` is given and the previous record
    originally ran past it (or was open), a second record for the same task is
    started at ``start_time``, inheriting the original end. Together this
    splits the previous record around the gap ``end_time``..``start_time``.

    Returns the closing change first and the split change second; records that
    already ended before both times produce no changes.
    """
    if previous is None:
        return []

    changes: list[RecordChange] = []
    original_end = previous["ended_at"]

    if original_end is None or original_end > end_time:
        changes.append(
            {
                "kind": "closed",
                "record_id": previous["id"],
                "task": previous["task"],
                "project": previous["project"],
                "started_at": previous["started_at"],
                "ended_at": end_time,
            }
        )

    if start_time is not None and (original_end is None or original_end > start_time):
        changes.append(
            {
                "kind": "split",
                "record_id": None,
                "task": previous["task"],
                "project": previous["project"],
                "started_at": start_time,
                "ended_at": original_end,
            }
        )

    return changes
