"""Document transforms.

Transforms are small frozen specs applied in order by `apply_transforms`:

- `GroupShapesByClass` visits every element children-first and wraps runs
  of same-class siblings in <g> elements.
- `PreOptimizationChecks` runs once per document and may replace it with an
  empty one.

Diagnostics are reported two ways: as `CheckError` objects appended to the
`errors` list passed to `apply_transforms`, and as human-readable lines sent
to each transform's optional `report` callback.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .checks import DEFAULT_CHECK_POLICY, CheckPolicy, pre_optimization_checks
from .errors import CheckError
from .grouping import group_shapes_by_class

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any, Protocol

    from .node import Node

    class NodeCallback(Protocol):
        def __call__(self, node: Node) -> None: ...

    class ReportCallback(Protocol):
        def __call__(self, msg: str, *, node: Any | None = None) -> None: ...


_ERROR_SINK: ContextVar[list[CheckError] | None] = ContextVar("svgtidy_transform_error_sink", default=None)


def emit_error(
    code: str,
    *,
    path: str | None = None,
    message: str | None = None,
) -> None:
    """Emit a CheckError from within a transform.

    Errors are appended to the active sink while `apply_transforms` runs. If
    no sink is active, this is a no-op.
    """

    sink = _ERROR_SINK.get()
    if sink is None:
        return
    sink.append(CheckError(str(code), message=str(message) if message is not None else None, path=path))


@dataclass(frozen=True, slots=True)
class GroupShapesByClass:
    """Collect sibling shapes with the same single class into <g> elements.

    `callback` is called with each synthesized wrapper.
    """

    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        *,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


@dataclass(frozen=True, slots=True)
class PreOptimizationChecks:
    """Validate the document and empty it if any check fails.

    `callback` is called with the document root when it is emptied.
    """

    policy: CheckPolicy
    enabled: bool
    callback: NodeCallback | None
    report: ReportCallback | None

    def __init__(
        self,
        policy: CheckPolicy = DEFAULT_CHECK_POLICY,
        *,
        enabled: bool = True,
        callback: NodeCallback | None = None,
        report: ReportCallback | None = None,
    ) -> None:
        object.__setattr__(self, "policy", policy)
        object.__setattr__(self, "enabled", bool(enabled))
        object.__setattr__(self, "callback", callback)
        object.__setattr__(self, "report", report)


Transform = GroupShapesByClass | PreOptimizationChecks

_TRANSFORM_CLASSES: tuple[type[object], ...] = (GroupShapesByClass, PreOptimizationChecks)


def _group(node: Node, t: GroupShapesByClass) -> None:
    for wrapper in group_shapes_by_class(node):
        if t.callback is not None:
            t.callback(wrapper)
        if t.report is not None:
            token = wrapper.class_list.value
            t.report(
                f"Grouped {len(wrapper.children)} <{node.tag_name}> children by class '{token}'",
                node=wrapper,
            )


def _walk_children_first(parent: Node, t: GroupShapesByClass) -> None:
    # Iterate over a copy: grouping a child rewrites that child's list, not ours.
    for node in list(parent.children):
        if node.children:
            _walk_children_first(node, t)
        _group(node, t)


def _run_checks(root: Node, t: PreOptimizationChecks, info: Mapping[str, Any] | None) -> Node:
    new_root, errors = pre_optimization_checks(root, t.policy, info)
    for error in errors:
        emit_error(error.code, path=error.path, message=error.message)
        if t.report is not None:
            t.report(f"- {error.message}", node=root)
    if errors and t.callback is not None:
        t.callback(new_root)
    return new_root


def apply_transforms(
    root: Node,
    transforms: list[Transform] | tuple[Transform, ...],
    *,
    info: Mapping[str, Any] | None = None,
    errors: list[CheckError] | None = None,
) -> Node:
    """Apply `transforms` to the document rooted at `root`, in order.

    Returns the resulting root, which is a new node if a check emptied the
    document. `info` carries per-document metadata such as the source `path`.
    """
    for t in transforms:
        if not isinstance(t, _TRANSFORM_CLASSES):
            msg = f"Unsupported transform: {type(t).__name__}"
            raise TypeError(msg)

    token = _ERROR_SINK.set(errors)
    try:
        for t in transforms:
            if not t.enabled:
                continue
            if isinstance(t, GroupShapesByClass):
                _walk_children_first(root, t)
                # The root itself is grouped too; a #document root is skipped by the guard
                _group(root, t)
            else:
                root = _run_checks(root, t, info)
    finally:
        _ERROR_SINK.reset(token)
    return root
