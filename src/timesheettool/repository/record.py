# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, TypedDict, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from timesheettool import configuration, time
from timesheettool.model.record import Record
from timesheettool.repository.project import PROJECT_REPO

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    def __init__(self, record_id: int) -> None:
        super().__init__(f"No record found with id {record_id}")
        self.record_id = record_id


class RecordConstraintError(ValueError):
    def __init__(
        self,
        started_at: pendulum.DateTime,
        ended_at: pendulum.DateTime,
    ) -> None:
        super().__init__(
            f"Record cannot end at {ended_at} before it starts at {started_at}"
        )
        self.started_at = started_at
        self.ended_at = ended_at


class Records(TypedDict):
    next_id: int
    records: list[Record]


class RecordRepository:
    def __init__(self) -> None:
        self._records: Optional[list[Record]] = None
        self._next_id = 1
        self.is_dirty = False

    @property
    def records(self) -> list[Record]:
        if self._records is None:
            self.__load_data()
        if self._records is None:
            raise ValueError()
        return self._records

    def __load_data(self) -> None:
        self._records = []
        self._next_id = 1
        if not configuration.DATA_RECORDS_PATH.is_file():
            logger.debug("No record file at %s yet", configuration.DATA_RECORDS_PATH)
            return

        logger.debug("Loading records from %s", configuration.DATA_RECORDS_PATH)
        raw_records = load(configuration.DATA_RECORDS_PATH.read_text(), Loader=Loader)
        if raw_records is None:
            return
        self._next_id = raw_records["next_id"]
        for raw_record in raw_records["records"]:
            self._records.append(self.__convert_record_for_deserialization(raw_record))

    def __save_data(self, records: list[Record]) -> None:
        serializable_records = {
            "next_id": self._next_id,
            "records": [
                self.__convert_record_for_serialization(deepcopy(record))
                for record in records
            ],
        }
        configuration.DATA_RECORDS_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_RECORDS_PATH.write_text(
            dump(serializable_records, Dumper=Dumper, sort_keys=False)
        )
        logger.debug(
            "Wrote %d record(s) to %s", len(records), configuration.DATA_RECORDS_PATH
        )

    def flush(self) -> bool:
        if self._records is not None and self.is_dirty:
            self.__save_data(self._records)
            self.is_dirty = False
            return True
        return False

    def __convert_record_for_serialization(self, record: Record) -> dict[str, Any]:
        serializable_record = cast(dict[str, Any], record)
        serializable_record["started_at"] = time.datetime_to_iso_str(
            serializable_record["started_at"]
        )
        serializable_record["ended_at"] = time.datetime_to_iso_str_optional(
            serializable_record["ended_at"]
        )
        return serializable_record

    def __convert_record_for_deserialization(self, record: dict[str, Any]) -> Record:
        deserializable_record = record
        deserializable_record["started_at"] = time.datetime_from_str(
            deserializable_record["started_at"]
        )
        deserializable_record["ended_at"] = time.datetime_from_str_optional(
            deserializable_record["ended_at"]
        )
        return cast(Record, deserializable_record)

    def __find_record(self, record_id: int) -> Record:
        for record in self.records:
            if record["id"] == record_id:
                return record
        raise RecordNotFoundError(record_id)

    def __check_bounds(
        self,
        started_at: pendulum.DateTime,
        ended_at: Optional[pendulum.DateTime],
    ) -> None:
        if ended_at is not None and ended_at < started_at:
            raise RecordConstraintError(started_at, ended_at)

    def insert_record(
        self,
        task: str,
        project: Optional[str],
        started_at: pendulum.DateTime,
        ended_at: Optional[pendulum.DateTime],
    ) -> Record:
        self.__check_bounds(started_at, ended_at)
        # load before reading the id counter
        records = self.records
        self.is_dirty = True

        record: Record = {
            "id": self._next_id,
            "task": task,
            "project": project,
            "started_at": started_at,
            "ended_at": ended_at,
        }
        self._next_id += 1
        records.append(record)

        if project is not None:
            PROJECT_REPO.add_project(project)

        return deepcopy(record)

    def set_record_end_timestamp(
        self, record_id: int, timestamp: pendulum.DateTime
    ) -> None:
        record = self.__find_record(record_id)
        self.__check_bounds(record["started_at"], timestamp)
        self.is_dirty = True
        record["ended_at"] = timestamp

    def update_record(
        self,
        record_id: int,
        started_at: Optional[pendulum.DateTime],
        ended_at: Optional[pendulum.DateTime],
        task: Optional[str],
        project: Optional[str],
    ) -> Record:
        record = self.__find_record(record_id)
        new_started_at = started_at if started_at is not None else record["started_at"]
        new_ended_at = ended_at if ended_at is not None else record["ended_at"]
        self.__check_bounds(new_started_at, new_ended_at)

        self.is_dirty = True
        record["started_at"] = new_started_at
        record["ended_at"] = new_ended_at
        if task is not None:
            record["task"] = task
        if project is not None:
            record["project"] = project
            PROJECT_REPO.add_project(project)

        return deepcopy(record)

    def get_record(self, record_id: int) -> Record:
        return deepcopy(self.__find_record(record_id))

    def get_most_recent_record(self, before: pendulum.DateTime) -> Optional[Record]:
        candidates = [record for record in self.records if record["started_at"] < before]
        if len(candidates) == 0:
            return None
        return deepcopy(max(candidates, key=lambda record: record["started_at"]))

    def query_records(
        self, start: pendulum.DateTime, end: pendulum.DateTime
    ) -> list[Record]:
        overlapping = [
            record
            for record in self.records
            if (record["ended_at"] is None or record["ended_at"] > start)
            and record["started_at"] < end
        ]
        return deepcopy(sorted(overlapping, key=lambda record: record["started_at"]))

    def query_records_all(self) -> list[Record]:
        return deepcopy(sorted(self.records, key=lambda record: record["started_at"]))


RECORD_REPO = RecordRepository()
