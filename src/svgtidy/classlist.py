"""Token-set view over a node's `class` attribute.

The attribute string stays the source of truth: every read parses it and
every write serializes back, so edits made through `node.attributes` and
through the class list never disagree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .node import Node


def split_class_tokens(value: str | None) -> list[str]:
    """Split a class attribute value into unique tokens, first-seen order kept."""
    if not value:
        return []
    tokens: list[str] = []
    for tok in value.split():
        if tok not in tokens:
            tokens.append(tok)
    return tokens


class ClassList:
    __slots__ = ("_node",)

    def __init__(self, node: Node) -> None:
        self._node = node

    def _tokens(self) -> list[str]:
        value = self._node.attributes.get("class")
        if not isinstance(value, str):
            return []
        return split_class_tokens(value)

    def _store(self, tokens: list[str]) -> None:
        if tokens:
            self._node.attributes["class"] = " ".join(tokens)
        else:
            # An empty set drops the attribute entirely
            self._node.attributes.pop("class", None)

    @property
    def value(self) -> str:
        return " ".join(self._tokens())

    def single_token(self) -> str:
        """Return the class name if there is exactly one, else ""."""
        tokens = self._tokens()
        if len(tokens) == 1:
            return tokens[0]
        return ""

    def add(self, *names: str) -> None:
        tokens = self._tokens()
        for name in names:
            for tok in name.split():
                if tok not in tokens:
                    tokens.append(tok)
        self._store(tokens)

    def remove(self, *names: str) -> None:
        tokens = self._tokens()
        drop = {tok for name in names for tok in name.split()}
        kept = [tok for tok in tokens if tok not in drop]
        if kept != tokens or (not kept and "class" in self._node.attributes):
            self._store(kept)

    def __contains__(self, name: object) -> bool:
        return name in self._tokens()

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens())

    def __len__(self) -> int:
        return len(self._tokens())

    def __repr__(self) -> str:
        return f"ClassList({self.value!r})"
