from .classlist import ClassList
from .style import StyleDeclaration

LEAF_NAMES = frozenset({"#text", "#comment"})
CONTAINER_NAMES = frozenset({"#document", "#document-fragment"})


class Node:
    """Represents an SVG-like markup node.
    - tag_name: e.g., 'svg', 'g', 'path'. Use '#text' for text nodes.
    - attributes: dict of attributes, in document order
    - children: list of child Nodes
    - parent: reference to parent Node (or None for root)
    - class_list / style: token and declaration views over 'class' and 'style'
    """

    __slots__ = (
        "attributes",
        "children",
        "class_list",
        "namespace",
        "parent",
        "style",
        "tag_name",
        "text_content",
    )

    def __init__(self, tag_name, attributes=None, text_content=None, namespace=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Node constructor"
            raise ValueError(msg)

        self.tag_name = tag_name
        self.namespace = namespace
        # Keep first occurrence of each attribute name
        kept = {}
        if attributes:
            for k, v in attributes.items():
                if k not in kept:
                    kept[k] = "" if v is None else str(v)
        self.attributes = kept
        self.children = []
        self.parent = None
        self.text_content = text_content if text_content is not None else ""
        # Always attached, even when the node has no class or style
        self.class_list = ClassList(self)
        self.style = StyleDeclaration(self)

    def is_element(self, tag_name=None):
        """Check if this is an element, optionally with the given tag name."""
        if self.tag_name in LEAF_NAMES or self.tag_name in CONTAINER_NAMES:
            return False
        return tag_name is None or self.tag_name == tag_name

    def is_empty(self):
        return not self.children

    def has_attr(self, name):
        return name in self.attributes

    def get_attr(self, name, default=None):
        return self.attributes.get(name, default)

    def set_attr(self, name, value):
        self.attributes[name] = value

    def remove_attr(self, name):
        self.attributes.pop(name, None)

    def append_child(self, child):
        if self._would_create_circular_reference(child):
            msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
            raise ValueError(msg)

        if child.parent is not None:
            child.parent.children.remove(child)

        child.parent = self
        self.children.append(child)

    def _would_create_circular_reference(self, child):
        """Check if adding child would create a circular reference."""
        current = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False

    def remove_child(self, child):
        """Remove a child node and clear its parent.

        Args:
            child: The Node to remove

        """
        if child not in self.children:
            return
        self.children.remove(child)
        child.parent = None

    def replace_children(self, children):
        """Replace the whole child list in one pass, re-parenting every entry.

        Incoming nodes are detached from any other parent first, as with
        append_child.
        """
        children = list(children)
        for child in children:
            if self._would_create_circular_reference(child):
                msg = f"Adding {child.tag_name} as child of {self.tag_name} would create circular reference"
                raise ValueError(msg)

        for child in children:
            if child.parent is not None and child.parent is not self:
                child.parent.children.remove(child)
        for child in self.children:
            if child.parent is self:
                child.parent = None
        self.children = children
        for child in self.children:
            child.parent = self

    def iter_descendants(self):
        """Yield every descendant in document (pre-)order."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            if node.children:
                stack.extend(reversed(node.children))

    def __repr__(self):
        if self.tag_name == "#text":
            return f"Node(#text='{self.text_content[:30]}')"
        if self.tag_name == "#comment":
            return f"Node(#comment='{self.text_content[:30]}')"
        return f"Node(<{self.tag_name}>, children={len(self.children)})"

    def to_test_format(self, indent=0):
        if self.tag_name in CONTAINER_NAMES:
            return "\n".join(child.to_test_format(0) for child in self.children)
        if self.tag_name == "#text":
            return f'| {" " * indent}"{self.text_content}"'
        if self.tag_name == "#comment":
            return f"| {' ' * indent}<!-- {self.text_content} -->"

        result = f"| {' ' * indent}<{self.tag_name}>"
        # Attribute order is significant for SVG output, so keep insertion order
        for key, value in self.attributes.items():
            result += f'\n| {" " * (indent + 2)}{key}="{value}"'

        if self.children:
            parts = [result]
            parts.extend(child.to_test_format(indent + 2) for child in self.children)
            return "\n".join(parts)
        return result


def element(tag_name, attributes=None, *children, namespace="svg"):
    node = Node(tag_name, attributes, namespace=namespace)
    for child in children:
        node.append_child(child)
    return node


def text(data):
    return Node("#text", text_content=data)


def comment(data):
    return Node("#comment", text_content=data)


def document(*children):
    root = Node("#document")
    for child in children:
        root.append_child(child)
    return root
