"""
Tests for Traceable.
"""

import pytest

from moddocs.app.traceable import Traceable


class _Node(Traceable):
    pass


@pytest.mark.unit
class TestTraceable:
    """Test parent links and attribute tracing."""

    def test_trace_attr_walks_parents(self):
        root = _Node()
        root.value = "root"
        child = _Node(_Node(root))

        assert child.trace_attr("value") == "root"

    def test_nearest_wins(self):
        root = _Node()
        root.value = "root"
        middle = _Node(root)
        middle.value = "middle"

        assert _Node(middle).trace_attr("value") == "middle"

    def test_none_values_skipped(self):
        root = _Node()
        root.value = "root"
        child = _Node(root)
        child.value = None

        assert child.trace_attr("value") == "root"

    def test_missing_attribute(self):
        with pytest.raises(AttributeError, match="'value' not found"):
            _Node(_Node()).trace_attr("value")

    def test_set_parent_type_checked(self):
        node = _Node()
        with pytest.raises(TypeError, match="Traceable instance"):
            node.set_parent(object())  # type: ignore[arg-type]
