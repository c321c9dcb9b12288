"""Pre-optimization document checks.

A document that fails any check is replaced by an empty document, so a
broken source never produces a plausible-looking optimized file. All
violations are collected before the document is emptied.

The checks are:
- the root <svg> defines every attribute in `required_root_attributes`;
- at least one element has a class containing `themed_marker`;
- if so, every element whose `fill` is one of the policy colors carries
  the matching default-fill class.
"""

from __future__ import annotations

import ntpath
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .constants import DEFAULT_FILL_CLASSES, REQUIRED_ROOT_ATTRIBUTES, ROOT_TAG, THEMED_MARKER
from .errors import CheckError
from .node import Node

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class CheckPolicy:
    """Configuration for `pre_optimization_checks`.

    `fill_classes` maps a literal fill value (compared exactly) to the class
    substring an element with that fill must carry.
    """

    required_root_attributes: Sequence[str] = field(default_factory=lambda: tuple(REQUIRED_ROOT_ATTRIBUTES))
    themed_marker: str = THEMED_MARKER
    fill_classes: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_FILL_CLASSES))

    def __post_init__(self) -> None:
        # Accept lists/dicts from user code, normalize for internal use.
        if not isinstance(self.required_root_attributes, tuple):
            object.__setattr__(self, "required_root_attributes", tuple(self.required_root_attributes))
        if not isinstance(self.fill_classes, dict):
            object.__setattr__(self, "fill_classes", dict(self.fill_classes))
        object.__setattr__(self, "themed_marker", str(self.themed_marker))


DEFAULT_CHECK_POLICY = CheckPolicy()


MISSING_ROOT_ATTRIBUTES = "missing-root-attributes"
NO_THEMED_SHAPES = "no-themed-shapes"
MISSING_DEFAULT_FILL = "missing-default-fill"


def _quoted_list(names: Sequence[str]) -> str:
    quoted = [f"'{name}'" for name in names]
    if len(quoted) <= 1:
        return "".join(quoted)
    if len(quoted) == 2:
        return " and ".join(quoted)
    return ", ".join(quoted[:-1]) + ", and " + quoted[-1]


def _elements(root: Node) -> Iterable[Node]:
    return (node for node in root.iter_descendants() if node.is_element())


def _class_attr(node: Node) -> str:
    value = node.get_attr("class")
    return value if isinstance(value, str) else ""


def _has_themed_shape(root: Node, marker: str) -> bool:
    return any(marker in _class_attr(node) for node in _elements(root))


def _has_unclassed_fill(root: Node, fill_classes: Mapping[str, str]) -> bool:
    for node in _elements(root):
        required = fill_classes.get(node.get_attr("fill"))
        if required is not None and required not in _class_attr(node):
            return True
    return False


def _source_path(info: Mapping[str, Any] | None) -> str | None:
    if not info:
        return None
    path = info.get("path")
    return str(path) if path is not None else None


def find_violations(
    document: Node,
    policy: CheckPolicy = DEFAULT_CHECK_POLICY,
    info: Mapping[str, Any] | None = None,
) -> list[CheckError]:
    """Return every check failure of `document` without modifying it."""
    svg = document.children[0] if document.children else None
    if svg is None or not svg.is_element(ROOT_TAG):
        return []

    path = _source_path(info)
    errors: list[CheckError] = []

    if not all(svg.has_attr(name) for name in policy.required_root_attributes):
        errors.append(
            CheckError(
                MISSING_ROOT_ATTRIBUTES,
                f"<svg> element must have {_quoted_list(policy.required_root_attributes)} defined.",
                path=path,
            )
        )

    if not _has_themed_shape(document, policy.themed_marker):
        errors.append(
            CheckError(NO_THEMED_SHAPES, f"This SVG contains no '{policy.themed_marker}' shapes.", path=path)
        )
    elif _has_unclassed_fill(document, policy.fill_classes):
        errors.append(
            CheckError(
                MISSING_DEFAULT_FILL,
                "One or more shapes is missing a 'defaultFill' class name based on their fill value.",
                path=path,
            )
        )

    return errors


def pre_optimization_checks(
    document: Node,
    policy: CheckPolicy = DEFAULT_CHECK_POLICY,
    info: Mapping[str, Any] | None = None,
) -> tuple[Node, list[CheckError]]:
    """Check `document` and empty it on failure.

    Returns the document itself and an empty list when every check passes,
    otherwise a new, childless `#document` and the collected errors.
    """
    errors = find_violations(document, policy, info)
    if errors:
        return Node("#document"), errors
    return document, errors


def format_report(path: str | None, errors: Sequence[CheckError]) -> list[str]:
    """Render check errors as output lines: a header, then one line per error."""
    if not errors:
        return []
    filename = ntpath.basename(path) if path else "<document>"
    lines = [f"Errors found in {filename} -- output has been emptied."]
    lines.extend(f"- {error.message}" for error in errors)
    return lines
