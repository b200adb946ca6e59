# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

RecordChangeKind = Literal["closed", "split"]


class Record(TypedDict):
    id: int
    task: str
    project: Optional[str]
    started_at: pendulum.DateTime
    ended_at: Optional[pendulum.DateTime]


class RecordChange(TypedDict):
    """
    A mutation produced by reconciling a new event against the previous record.

    ``closed`` changes carry the id of the record whose end is being moved.
    ``split`` changes describe a brand new record; ``record_id`` stays None
    until the change has been persisted.
    """

    kind: RecordChangeKind
    record_id: Optional[int]
    task: str
    project: Optional[str]
    started_at: pendulum.DateTime
    ended_at: Optional[pendulum.DateTime]
