"""Declaration view over a node's inline `style` attribute."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node


def parse_declarations(value: str | None) -> dict[str, str]:
    declarations: dict[str, str] = {}
    if not value:
        return declarations
    for part in value.split(";"):
        name, sep, val = part.partition(":")
        name = name.strip().lower()
        if not sep or not name:
            continue
        # Later declarations of the same property win, as in CSS
        declarations[name] = val.strip()
    return declarations


def serialize_declarations(declarations: dict[str, str]) -> str:
    return "; ".join(f"{name}: {val}" for name, val in declarations.items())


class StyleDeclaration:
    __slots__ = ("_node",)

    def __init__(self, node: Node) -> None:
        self._node = node

    def _declarations(self) -> dict[str, str]:
        value = self._node.attributes.get("style")
        return parse_declarations(value if isinstance(value, str) else None)

    def _store(self, declarations: dict[str, str]) -> None:
        if declarations:
            self._node.attributes["style"] = serialize_declarations(declarations)
        else:
            self._node.attributes.pop("style", None)

    @property
    def value(self) -> str:
        return serialize_declarations(self._declarations())

    def get(self, name: str, default: str | None = None) -> str | None:
        return self._declarations().get(name.strip().lower(), default)

    def set(self, name: str, value: str) -> None:
        declarations = self._declarations()
        declarations[name.strip().lower()] = str(value).strip()
        self._store(declarations)

    def remove(self, name: str) -> None:
        declarations = self._declarations()
        if declarations.pop(name.strip().lower(), None) is not None:
            self._store(declarations)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._declarations()

    def __len__(self) -> int:
        return len(self._declarations())

    def __repr__(self) -> str:
        return f"StyleDeclaration({self.value!r})"
