"""Unit tests for reply-thread indentation."""

from session_timeline.engine.threads import build_thread_map, thread_chain
from session_timeline.models.records import SessionRecord


def _chain(length: int) -> list[dict[str, str]]:
    records = [{"uuid": "n0"}]
    for i in range(1, length):
        records.append({"uuid": f"n{i}", "parent_uuid": f"n{i - 1}"})
    return records


class TestBuildThreadMap:
    """Tests for build_thread_map()."""

    def test_depth_follows_parent_chain(self) -> None:
        """Test that indentation counts ancestor hops."""
        nodes = build_thread_map(_chain(4))

        assert [nodes[f"n{i}"].indent_level for i in range(4)] == [0, 1, 2, 3]
        assert nodes["n0"].is_child is False
        assert nodes["n3"].is_child is True
        assert nodes["n3"].parent_id == "n2"

    def test_indent_is_capped(self) -> None:
        """Test that an eight-deep chain is capped at five."""
        nodes = build_thread_map(_chain(8))

        assert [node.indent_level for node in nodes.values()] == [0, 1, 2, 3, 4, 5, 5, 5]

    def test_custom_cap(self) -> None:
        """Test that the cap can be lowered."""
        nodes = build_thread_map(_chain(4), max_indent=1)

        assert [node.indent_level for node in nodes.values()] == [0, 1, 1, 1]

    def test_missing_parent_is_root(self) -> None:
        """Test that a parent outside the input set is ignored."""
        nodes = build_thread_map([{"uuid": "x", "parent_uuid": "gone"}])

        assert nodes["x"].parent_id is None
        assert nodes["x"].indent_level == 0
        assert nodes["x"].is_child is False

    def test_cycle_terminates(self) -> None:
        """Test that a two-record cycle is walked once per record."""
        nodes = build_thread_map(
            [{"uuid": "a", "parent_uuid": "b"}, {"uuid": "b", "parent_uuid": "a"}]
        )

        assert nodes["a"].indent_level == 1
        assert nodes["b"].indent_level == 1

    def test_self_parent_is_ignored(self) -> None:
        """Test that a record naming itself as parent is a root."""
        nodes = build_thread_map([{"uuid": "a", "parent_uuid": "a"}])

        assert nodes["a"].indent_level == 0
        assert nodes["a"].parent_id is None

    def test_records_without_id_are_skipped(self) -> None:
        """Test that unidentified records get no node."""
        nodes = build_thread_map([{"role": "user"}, {"uuid": "a"}])

        assert list(nodes) == ["a"]

    def test_accepts_models_and_id_keys(self) -> None:
        """Test that model instances and id/parent_id mappings both work."""
        records = [
            SessionRecord(role="user", uuid="u1"),
            {"id": "a1", "parent_id": "u1"},
        ]

        nodes = build_thread_map(records)

        assert nodes["a1"].indent_level == 1
        assert nodes["a1"].parent_id == "u1"

    def test_large_chain(self) -> None:
        """Test that a thousand-record chain is handled and capped."""
        nodes = build_thread_map(_chain(1000))

        assert len(nodes) == 1000
        assert max(node.indent_level for node in nodes.values()) == 5


class TestThreadChain:
    """Tests for thread_chain()."""

    def test_includes_ancestors_and_descendants(self) -> None:
        """Test that the whole thread is returned from a middle record."""
        records = _chain(4) + [{"uuid": "other"}]

        assert thread_chain("n1", records) == {"n0", "n1", "n2", "n3"}

    def test_branches_are_included(self) -> None:
        """Test that sibling replies below the record are collected."""
        records = [
            {"uuid": "root"},
            {"uuid": "left", "parent_uuid": "root"},
            {"uuid": "right", "parent_uuid": "root"},
        ]

        assert thread_chain("root", records) == {"root", "left", "right"}

    def test_cycle_safe(self) -> None:
        """Test that cyclic links do not loop forever."""
        records = [{"uuid": "a", "parent_uuid": "b"}, {"uuid": "b", "parent_uuid": "a"}]

        assert thread_chain("a", records) == {"a", "b"}
