"""Tests for persistence utilities."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from task_tracker.persistence._utils import atomic_write_json, atomic_write_text, dump_json


class TestDumpJson:
    def test_two_space_indent(self):
        assert dump_json([{"id": 1}]) == '[\n  {\n    "id": 1\n  }\n]'

    def test_empty_list(self):
        assert dump_json([]) == "[]"

    def test_keeps_unicode(self):
        assert dump_json(["café ✓"]) == '[\n  "café ✓"\n]'


class TestAtomicWrite:
    def test_writes_json(self, tmp_path: Path):
        target = tmp_path / "tasks.json"
        atomic_write_json(target, [{"id": 1}])
        assert json.loads(target.read_text()) == [{"id": 1}]

    def test_replaces_existing(self, tmp_path: Path):
        target = tmp_path / "tasks.json"
        target.write_text("old")
        atomic_write_text(target, "new")
        assert target.read_text() == "new"

    def test_creates_parent_dirs(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "tasks.json"
        atomic_write_text(target, "[]")
        assert target.read_text() == "[]"

    def test_uses_temp_file_then_rename(self, tmp_path: Path):
        target = tmp_path / "tasks.json"
        seen: list[str] = []
        original_replace = Path.replace

        def spy(self, dest):
            seen.append(self.name)
            return original_replace(self, dest)

        with patch.object(Path, "replace", spy):
            atomic_write_text(target, "[]")

        assert seen == ["tasks.json.tmp"]
        assert not (tmp_path / "tasks.json.tmp").exists()

    def test_failure_keeps_original_and_cleans_up(self, tmp_path: Path):
        target = tmp_path / "tasks.json"
        target.write_text("original")

        with patch.object(Path, "replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                atomic_write_text(target, "new")

        assert target.read_text() == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["tasks.json"]
