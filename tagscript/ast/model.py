"""Tag tree data model."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from tagscript.diagnostics import fatal
from tagscript.diagnostics.codes import RUNTIME_REQUIRED_ATTRIBUTE_MISSING
from tagscript.syntax import (
    BLOCK_TAG,
    LITERAL_NUMBER_TAG,
    LITERAL_TEXT_TAG,
    PROGRAM_TAG,
    OperativeKind,
    TagKind,
    operative_kind_for_name,
    tag_kind_for_name,
)
from tagscript.text import TextPosition

TEXT_LITERAL_ATTRIBUTE = "body"
NUMBER_LITERAL_ATTRIBUTE = "value"


@dataclass(frozen=True, slots=True)
class Tag:
    """Parse-tree node: both the statement and the expression unit.

    `kind` is derived from `name` once, at construction. Attribute order is
    the declaration order in the source.
    """

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: tuple[Tag, ...] = ()
    position: TextPosition | None = None
    kind: TagKind = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "kind", tag_kind_for_name(self.name))

    @staticmethod
    def block(children: Iterable[Tag], position: TextPosition | None = None) -> Tag:
        """Synthetic body wrapper for a nested run (if/while/try bodies)."""
        return Tag(BLOCK_TAG, children=tuple(children), position=position)

    @staticmethod
    def program(children: Iterable[Tag]) -> Tag:
        return Tag(PROGRAM_TAG, children=tuple(children))

    @staticmethod
    def text_literal(text: str, position: TextPosition | None = None) -> Tag:
        return Tag(LITERAL_TEXT_TAG, {TEXT_LITERAL_ATTRIBUTE: text}, position=position)

    @staticmethod
    def number_literal(text: str, position: TextPosition | None = None) -> Tag:
        return Tag(LITERAL_NUMBER_TAG, {NUMBER_LITERAL_ATTRIBUTE: text}, position=position)

    @property
    def operative_kind(self) -> OperativeKind | None:
        if self.kind != TagKind.OPERATIVE:
            return None
        return operative_kind_for_name(self.name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def require_attribute(self, name: str) -> str:
        value = self.attributes.get(name)
        if value is None:
            raise fatal(
                RUNTIME_REQUIRED_ATTRIBUTE_MISSING.code,
                f"<{self.name}> requires a '{name}' attribute",
                self.position,
                len(self.name),
            )
        return value

    def children_of_kind(self, kind: TagKind) -> list[Tag]:
        return [child for child in self.children if child.kind == kind]

    def __str__(self) -> str:
        return f"<{self.name}>"


def format_tag(tag: Tag, indent_level: int = 0) -> str:
    """Render a tag tree as indented pseudo-markup for debugging."""
    indent = "\t" * indent_level
    attributes = "".join(f' {key}="{value}"' for key, value in tag.attributes.items())
    if not tag.children:
        return f"{indent}<{tag.name}{attributes}/>"

    lines = [f"{indent}<{tag.name}{attributes}>"]
    lines.extend(format_tag(child, indent_level + 1) for child in tag.children)
    lines.append(f"{indent}</{tag.name}>")
    return "\n".join(lines)
