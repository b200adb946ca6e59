# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from timesheettool.model.record import Record, RecordChange
from timesheettool.repository.record import RECORD_REPO, RecordConstraintError
from timesheettool.service.reconcile import reconcile

logger = logging.getLogger(__name__)


def complete_last_record(
    end_time: pendulum.DateTime,
    start_time: Optional[pendulum.DateTime] = None,
) -> list[RecordChange]:
    """
    Close (and possibly split) the most recent record before ``end_time`` and
    persist the result. Returns the applied changes, closing change first.
    """
    previous = RECORD_REPO.get_most_recent_record(end_time)
    changes = reconcile(previous, end_time, start_time)

    for change in changes:
        if change["kind"] == "closed":
            assert change["record_id"] is not None
            RECORD_REPO.set_record_end_timestamp(change["record_id"], end_time)
            logger.debug("Closed record %d at %s", change["record_id"], end_time)
        else:
            record = RECORD_REPO.insert_record(
                change["task"],
                change["project"],
                change["started_at"],
                change["ended_at"],
            )
            change["record_id"] = record["id"]
            logger.debug("Split record %d from %s", record["id"], change["started_at"])

    return changes


def add_record(
    task: str,
    project: Optional[str],
    started_at: pendulum.DateTime,
    ended_at: Optional[pendulum.DateTime],
    allow_overlap: bool = False,
) -> tuple[Record, list[RecordChange]]:
    if ended_at is not None and ended_at < started_at:
        raise RecordConstraintError(started_at, ended_at)

    changes: list[RecordChange] = []
    if not allow_overlap:
        changes = complete_last_record(started_at, ended_at)

    record = RECORD_REPO.insert_record(task, project, started_at, ended_at)
    return record, changes
