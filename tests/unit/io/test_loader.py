"""Unit tests for the session and hook history loaders."""

import json
from pathlib import Path

import pytest

from session_timeline.io.exceptions import RecordLoadError
from session_timeline.io.loader import iter_jsonl, load_hook_events, load_session_records


class TestIterJsonl:
    """Tests for iter_jsonl()."""

    def test_skips_blank_malformed_and_non_objects(self, tmp_path: Path) -> None:
        """Test that only JSON object lines are yielded."""
        path = tmp_path / "session.jsonl"
        path.write_text('{"role": "user"}\n\n{not json\n[1, 2]\n{"role": "assistant"}\n')

        assert [r["role"] for r in iter_jsonl(path)] == ["user", "assistant"]

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that an unreadable file raises RecordLoadError."""
        with pytest.raises(RecordLoadError):
            list(iter_jsonl(tmp_path / "missing.jsonl"))


class TestLoadSessionRecords:
    """Tests for load_session_records()."""

    def test_loads_in_file_order(self, tmp_path: Path, session_records: list[dict]) -> None:
        """Test that records come back in file order."""
        path = tmp_path / "session.jsonl"
        path.write_text("\n".join(json.dumps(r) for r in session_records))

        records = load_session_records(path)

        assert [r["uuid"] for r in records] == ["u1", "a1", "t1", "r1", "s1", "sum1"]


class TestLoadHookEvents:
    """Tests for load_hook_events()."""

    def test_json_array(self, tmp_path: Path, hook_records: list[dict]) -> None:
        """Test that a JSON array file is loaded."""
        path = tmp_path / "hooks.json"
        path.write_text(json.dumps(hook_records + ["stray"]))

        events = load_hook_events(path)

        assert [e["id"] for e in events] == [1, 2]

    def test_jsonl(self, tmp_path: Path, hook_records: list[dict]) -> None:
        """Test that a .jsonl file is read line by line."""
        path = tmp_path / "hooks.jsonl"
        path.write_text("\n".join(json.dumps(r) for r in hook_records))

        assert len(load_hook_events(path)) == 2

    def test_non_array_rejected(self, tmp_path: Path) -> None:
        """Test that a top-level object is rejected."""
        path = tmp_path / "hooks.json"
        path.write_text('{"eventName": "Stop"}')

        with pytest.raises(RecordLoadError, match="must be a JSON array"):
            load_hook_events(path)

    def test_invalid_json_rejected(self, tmp_path: Path) -> None:
        """Test that an unparseable file is rejected."""
        path = tmp_path / "hooks.json"
        path.write_text("[{")

        with pytest.raises(RecordLoadError):
            load_hook_events(path)
