from __future__ import annotations

import unittest

from svgtidy.grouping import Run, find_class_runs, group_shapes_by_class
from svgtidy.node import Node, document, element, text


def _shapes(*classes: str | None) -> list[Node]:
    shapes = []
    for i, cls in enumerate(classes):
        attrs = {"id": f"p{i}"}
        if cls is not None:
            attrs["class"] = cls
        shapes.append(element("path", attrs))
    return shapes


def _parent(*classes: str | None, tag: str = "g") -> Node:
    return element(tag, None, *_shapes(*classes))


def _ids(nodes: list[Node]) -> list[str | None]:
    return [n.get_attr("id") for n in nodes]


class TestFindClassRuns(unittest.TestCase):
    def test_three_identical_classes_form_one_run(self) -> None:
        runs = find_class_runs(_shapes("a", "a", "a"))
        assert runs == [Run("a", [0, 1, 2])]
        assert runs[0].start == 0
        assert runs[0].end == 3
        assert len(runs[0]) == 3

    def test_runs_are_listed_in_first_seen_order(self) -> None:
        runs = find_class_runs(_shapes("x", "b", "b", "a", "a", "a"))
        assert [(r.token, r.indices) for r in runs] == [("b", [1, 2]), ("a", [3, 4, 5])]

    def test_second_disjoint_run_of_same_class_is_dropped(self) -> None:
        # One run per class name: the first wins, later runs stay ungrouped.
        runs = find_class_runs(_shapes("a", "a", "b", "a", "a"))
        assert runs == [Run("a", [0, 1])]

    def test_multi_class_child_breaks_the_run(self) -> None:
        assert find_class_runs(_shapes("a", "a b", "a")) == []

    def test_identical_multi_class_siblings_never_form_a_run(self) -> None:
        assert find_class_runs(_shapes("a b", "a b", "a b")) == []

    def test_missing_or_blank_class_never_starts_a_run(self) -> None:
        assert find_class_runs(_shapes(None, None, None)) == []
        assert find_class_runs(_shapes("", "", "  ")) == []

    def test_single_child_or_no_children(self) -> None:
        assert find_class_runs(_shapes("a")) == []
        assert find_class_runs([]) == []

    def test_duplicate_tokens_count_as_one_class(self) -> None:
        runs = find_class_runs(_shapes("a a", "a"))
        assert runs == [Run("a", [0, 1])]

    def test_text_node_interrupts_run(self) -> None:
        a, b = _shapes("a", "a")
        assert find_class_runs([a, text(" "), b]) == []


class TestGroupShapesByClass(unittest.TestCase):
    def test_groups_three_identical_siblings(self) -> None:
        parent = _parent("a", "a", "a")
        originals = list(parent.children)

        wrappers = group_shapes_by_class(parent)

        assert len(wrappers) == 1
        wrapper = wrappers[0]
        assert parent.children == [wrapper]
        assert wrapper.tag_name == "g"
        assert wrapper.attributes == {"class": "a"}
        assert wrapper.children == originals
        for child in originals:
            assert child.parent is wrapper
            assert not child.has_attr("class")
        assert wrapper.parent is parent

    def test_only_first_run_of_a_class_is_wrapped(self) -> None:
        # Later runs of an already grouped class name are left as they are.
        parent = _parent("a", "a", "b", "a", "a")
        group_shapes_by_class(parent)

        assert parent.children[0].tag_name == "g"
        assert _ids(parent.children[0].children) == ["p0", "p1"]
        assert _ids(parent.children[1:]) == ["p2", "p3", "p4"]
        assert [c.get_attr("class") for c in parent.children[1:]] == ["b", "a", "a"]

    def test_multi_class_middle_child_prevents_grouping(self) -> None:
        parent = _parent("a", "a b", "a")
        before = parent.to_test_format()
        assert group_shapes_by_class(parent) == []
        assert parent.to_test_format() == before

    def test_several_runs_keep_relative_order(self) -> None:
        parent = _parent("a", "a", "b", "b", "x", "a", "a", "c", "c")
        wrappers = group_shapes_by_class(parent)

        assert [w.class_list.value for w in wrappers] == ["a", "b", "c"]
        children = parent.children
        assert len(children) == 6
        assert children[0] is wrappers[0]
        assert children[1] is wrappers[1]
        assert _ids(children[2:5]) == ["p4", "p5", "p6"]
        assert children[5] is wrappers[2]
        assert _ids(wrappers[2].children) == ["p7", "p8"]

    def test_other_attributes_are_preserved(self) -> None:
        parent = element(
            "g",
            None,
            element("path", {"class": "a", "d": "M0 0", "fill": "#fff"}),
            element("path", {"class": "a", "d": "M1 1"}),
        )
        group_shapes_by_class(parent)
        assert parent.to_test_format() == "\n".join(
            [
                "| <g>",
                "|   <g>",
                '|     class="a"',
                "|     <path>",
                '|       d="M0 0"',
                '|       fill="#fff"',
                "|     <path>",
                '|       d="M1 1"',
            ]
        )

    def test_wrapper_has_style_and_inherits_namespace(self) -> None:
        parent = _parent("a", "a")
        wrapper = group_shapes_by_class(parent)[0]
        assert wrapper.namespace == "svg"
        assert len(wrapper.style) == 0
        assert not wrapper.has_attr("style")

    def test_children_without_class_are_left_alone(self) -> None:
        parent = _parent(None, None, None)
        assert group_shapes_by_class(parent) == []
        assert len(parent.children) == 3

    def test_one_or_zero_children_unchanged(self) -> None:
        assert group_shapes_by_class(_parent("a")) == []
        empty = element("g")
        assert group_shapes_by_class(empty) == []
        assert empty.children == []

    def test_switch_is_never_grouped(self) -> None:
        parent = _parent("a", "a", "a", tag="switch")
        assert group_shapes_by_class(parent) == []
        assert len(parent.children) == 3
        assert all(c.get_attr("class") == "a" for c in parent.children)

    def test_non_elements_are_skipped(self) -> None:
        root = document(*_shapes("a", "a"))
        assert group_shapes_by_class(root) == []
        assert len(root.children) == 2
        assert group_shapes_by_class(text("hi")) == []

    def test_second_pass_changes_nothing(self) -> None:
        parent = _parent("a", "a", "b", "c", "c")
        group_shapes_by_class(parent)
        once = parent.to_test_format()

        assert group_shapes_by_class(parent) == []
        assert parent.to_test_format() == once

    def test_single_run_among_ungrouped_siblings(self) -> None:
        parent = _parent("x", "a", "a", "y")
        group_shapes_by_class(parent)
        assert [c.tag_name for c in parent.children] == ["path", "g", "path"]
        assert _ids([parent.children[0], parent.children[2]]) == ["p0", "p3"]


if __name__ == "__main__":
    unittest.main()
