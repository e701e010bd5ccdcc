"""Tests for the flat-file task store."""

from datetime import datetime

import pytest

from taskpal.adapters.file_store import FileTaskStore
from taskpal.core.errors import ErrorKind
from taskpal.core.tasks import Deadline, Event, Todo


@pytest.fixture
def path(tmp_path):
    return tmp_path / "tasks.txt"


class TestLoad:
    def test_missing_file_is_empty(self, path):
        result = FileTaskStore(path).load()
        assert result.ok
        assert result.tasks == []

    def test_reads_all_lines(self, path):
        path.write_text(
            "T | 1 | read book\n"
            "D | 0 | submit report | 2/12/2019 1800\n"
            "E | 0 | project meeting | 6/8/2019 1400\n"
        )
        result = FileTaskStore(path).load()
        assert result.ok
        assert result.tasks == [
            Todo("read book", done=True),
            Deadline("submit report", datetime(2019, 12, 2, 18, 0)),
            Event("project meeting", datetime(2019, 8, 6, 14, 0)),
        ]

    def test_invalid_utf8_starts_empty(self, path):
        path.write_bytes(b"T | 0 | caf\xe9\n")
        result = FileTaskStore(path).load()
        assert result.tasks == []
        assert result.failure.kind is ErrorKind.INVALID_TASK_TYPE
        assert "UTF-8" in result.failure.message

    def test_bad_tag_discards_everything(self, path):
        path.write_text("X | 0 | bad\n")
        result = FileTaskStore(path).load()
        assert result.tasks == []
        assert result.failure.kind is ErrorKind.INVALID_TASK_TYPE

    def test_no_partial_recovery(self, path):
        path.write_text("T | 0 | good\nX | 0 | bad\nT | 0 | also good\n")
        result = FileTaskStore(path).load()
        assert result.tasks == []
        assert not result.ok

    def test_bad_date(self, path):
        path.write_text("D | 0 | report | someday\n")
        result = FileTaskStore(path).load()
        assert result.failure.kind is ErrorKind.INVALID_DATE_TIME

    def test_unreadable_path(self, tmp_path):
        # A directory exists at the path but cannot be read as a file
        result = FileTaskStore(tmp_path).load()
        assert result.tasks == []
        assert result.failure.kind is ErrorKind.STORAGE

    def test_expands_user(self):
        assert "~" not in str(FileTaskStore("~/tasks.txt").path)


class TestSave:
    def test_writes_one_line_per_task(self, path):
        store = FileTaskStore(path)
        failure = store.save([Todo("read book"), Deadline("report", datetime(2019, 12, 2, 18, 0), done=True)])
        assert failure is None
        assert path.read_text() == "T | 0 | read book\nD | 1 | report | 2/12/2019 1800\n"

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "tasks.txt"
        assert FileTaskStore(path).save([Todo("a")]) is None
        assert path.exists()

    def test_empty_list_truncates(self, path):
        path.write_text("T | 0 | old\n")
        FileTaskStore(path).save([])
        assert path.read_text() == ""

    def test_roundtrip(self, path):
        tasks = [
            Todo("read book", done=True),
            Event("project meeting", datetime(2019, 8, 6, 14, 0)),
        ]
        store = FileTaskStore(path)
        store.save(tasks)
        assert store.load().tasks == tasks

    def test_write_failure_is_returned(self, tmp_path):
        # Parent "directory" is a regular file
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        failure = FileTaskStore(blocker / "tasks.txt").save([Todo("a")])
        assert failure is not None
        assert failure.kind is ErrorKind.STORAGE
