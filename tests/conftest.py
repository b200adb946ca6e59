from typing import Optional

import pendulum
import pytest

from timesheettool import configuration
from timesheettool.model.record import Record
from timesheettool.repository.configuration import CONFIGURATION_REPO
from timesheettool.repository.project import PROJECT_REPO
from timesheettool.repository.record import RECORD_REPO


def utc(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, hour, minute, second, tz="UTC")


def make_record(
    started_at: pendulum.DateTime,
    ended_at: Optional[pendulum.DateTime] = None,
    task: str = "write report",
    project: Optional[str] = "acme",
    id: int = 1,
) -> Record:
    return {
        "id": id,
        "task": task,
        "project": project,
        "started_at": started_at,
        "ended_at": ended_at,
    }


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point every repository at a fresh directory and drop cached state."""
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(
        configuration, "DATA_RECORDS_PATH", tmp_path / "data" / "records.yaml"
    )
    monkeypatch.setattr(
        configuration, "DATA_PROJECTS_PATH", tmp_path / "data" / "projects.yaml"
    )

    for repo in (CONFIGURATION_REPO, RECORD_REPO, PROJECT_REPO):
        monkeypatch.setattr(repo, "is_dirty", False)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(RECORD_REPO, "_records", None)
    monkeypatch.setattr(RECORD_REPO, "_next_id", 1)
    monkeypatch.setattr(PROJECT_REPO, "_projects", None)

    CONFIGURATION_REPO.update_config(timezone="UTC")
    return tmp_path
