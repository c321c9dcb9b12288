"""SVG element and policy constants.

Usage:
    from svgtidy.constants import GROUP_TAG, DEFAULT_FILL_CLASSES
"""

# Children of <switch> are alternatives, not siblings; wrapping them changes rendering
SWITCH_TAG = "switch"

# Tag used for synthesized class wrappers
GROUP_TAG = "g"

ROOT_TAG = "svg"

REQUIRED_ROOT_ATTRIBUTES = ["viewBox", "width", "height"]

THEMED_MARKER = "themed"

# Literal fill colors and the class name a shape with that fill must carry
DEFAULT_FILL_CLASSES = {
    "#246fb5": "defaultFill-BrandPrimary",
    "#0091ea": "defaultFill-BrandSecondary",
    "#00a1db": "defaultFill-BrandTertiary",
    "#52cc6e": "defaultFill-PositiveBright",
    "#d9545b": "defaultFill-NegativeDim",
}
