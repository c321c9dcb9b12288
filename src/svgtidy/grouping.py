"""Collect siblings sharing one class name into <g> wrappers.

Example (children of one parent):

    <path class="cls-1" id="first"/>
    <path class="cls-1" id="second"/>
    <path class="cls-2" id="third"/>
    <path class="cls-1" id="fourth"/>
    <path class="cls-1 cls-3" id="fifth"/>

becomes

    <g class="cls-1">
        <path id="first"/>
        <path id="second"/>
    </g>
    <path class="cls-2" id="third"/>
    <path class="cls-1" id="fourth"/>
    <path class="cls-1 cls-3" id="fifth"/>

Elements with several class names are never grouped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import GROUP_TAG, SWITCH_TAG
from .node import Node

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(slots=True)
class Run:
    """Contiguous child positions (before rewriting) sharing exactly one class token."""

    token: str
    indices: list[int] = field(default_factory=list)

    @property
    def start(self) -> int:
        return self.indices[0]

    @property
    def end(self) -> int:
        # Half-open
        return self.indices[-1] + 1

    def __len__(self) -> int:
        return len(self.indices)


def _single_class(node: Node) -> str:
    return node.class_list.single_token()


def _find_run(runs: list[Run], token: str) -> Run | None:
    for run in runs:
        if run.token == token:
            return run
    return None


def find_class_runs(children: Sequence[Node]) -> list[Run]:
    """Scan siblings once and return runs in first-seen token order.

    Each token owns at most one run. When a token's run has been interrupted
    and the same token starts a new run later on, the later run is dropped.
    """
    runs: list[Run] = []
    for i in range(1, len(children)):
        prev_class = _single_class(children[i - 1])
        if not prev_class or prev_class != _single_class(children[i]):
            continue

        run = _find_run(runs, prev_class)
        if run is None:
            runs.append(Run(prev_class, [i - 1, i]))
        elif run.indices[-1] == i - 1:
            run.indices.append(i)
        # else: a second, disjoint run of an already seen token; not grouped
    return runs


def _is_groupable(node: Node) -> bool:
    return (
        node.is_element()
        and not node.is_element(SWITCH_TAG)
        and not node.is_empty()
        and len(node.children) >= 2
    )


def _build_wrapper(parent: Node, run: Run, snapshot: Sequence[Node]) -> Node:
    members = [snapshot[i] for i in run.indices]
    for member in members:
        member.class_list.remove(run.token)

    wrapper = Node(GROUP_TAG, namespace=parent.namespace)
    wrapper.class_list.add(run.token)
    wrapper.replace_children(members)
    return wrapper


def group_shapes_by_class(node: Node) -> list[Node]:
    """Wrap each run of same-class children of `node` in a <g> with that class.

    The class is removed from the wrapped children. Returns the wrappers that
    were created; nodes that are not grouping candidates are left untouched.
    """
    if not _is_groupable(node):
        return []

    snapshot = tuple(node.children)
    runs = find_class_runs(snapshot)
    if not runs:
        return []

    run_at = {run.start: run for run in runs}
    covered = {i for run in runs for i in run.indices}

    wrappers: list[Node] = []
    new_children: list[Node] = []
    for i, child in enumerate(snapshot):
        run = run_at.get(i)
        if run is not None:
            wrapper = _build_wrapper(node, run, snapshot)
            wrappers.append(wrapper)
            new_children.append(wrapper)
        elif i not in covered:
            new_children.append(child)

    node.replace_children(new_children)
    return wrappers
