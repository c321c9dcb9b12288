from .checks import DEFAULT_CHECK_POLICY, CheckPolicy, find_violations, format_report, pre_optimization_checks
from .classlist import ClassList
from .errors import CheckError
from .grouping import Run, find_class_runs, group_shapes_by_class
from .node import Node, comment, document, element, text
from .style import StyleDeclaration
from .transforms import GroupShapesByClass, PreOptimizationChecks, apply_transforms, emit_error

__all__ = [
    "DEFAULT_CHECK_POLICY",
    "CheckError",
    "CheckPolicy",
    "ClassList",
    "GroupShapesByClass",
    "Node",
    "PreOptimizationChecks",
    "Run",
    "StyleDeclaration",
    "apply_transforms",
    "comment",
    "document",
    "element",
    "emit_error",
    "find_class_runs",
    "find_violations",
    "format_report",
    "group_shapes_by_class",
    "pre_optimization_checks",
    "text",
]
