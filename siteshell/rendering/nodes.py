"""Render tree: immutable element nodes and their HTML serialization."""

from __future__ import annotations

import html
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_VOID_TAGS: frozenset[str] = frozenset({"br", "hr", "img", "meta", "link"})


class RawHtml(str):
    """Pre-rendered markup, emitted verbatim instead of being escaped."""

    __slots__ = ()


@dataclass(frozen=True)
class Element:
    """An HTML element with ordered attributes and children."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    children: tuple[Node, ...] = ()

    def get(self, name: str) -> str | None:
        """Return the value of attribute ``name``, or ``None``."""
        return next((value for key, value in self.attrs if key == name), None)

    @property
    def text(self) -> str:
        """Concatenated text content of this element and its descendants."""
        return "".join(_iter_text(self))


Node = Element | str
Children = Node | Iterable[Node] | None


def _flatten(children: Children) -> tuple[Node, ...]:
    if children is None:
        return ()
    if isinstance(children, (Element, str)):
        return (children,)
    flat: list[Node] = []
    for child in children:
        flat.extend(_flatten(child))
    return tuple(flat)


def h(tag: str, attrs: dict[str, str] | None = None, *children: Children) -> Element:
    """Build an element; ``None`` children are dropped and iterables flattened."""
    return Element(
        tag=tag,
        attrs=tuple((attrs or {}).items()),
        children=_flatten(children),
    )


def _iter_text(node: Node) -> Iterator[str]:
    if isinstance(node, Element):
        for child in node.children:
            yield from _iter_text(child)
    else:
        yield node


def iter_elements(node: Node, tag: str | None = None) -> Iterator[Element]:
    """Walk the tree depth-first, yielding elements (optionally of one tag)."""
    if not isinstance(node, Element):
        return
    if tag is None or node.tag == tag:
        yield node
    for child in node.children:
        yield from iter_elements(child, tag)


def render_html(node: Children) -> str:
    """Serialize a node (or sequence of nodes) to an HTML string."""
    parts: list[str] = []
    for child in _flatten(node):
        _write(child, parts)
    return "".join(parts)


def _write(node: Node, parts: list[str]) -> None:
    if isinstance(node, RawHtml):
        parts.append(str(node))
        return
    if isinstance(node, str):
        parts.append(html.escape(node, quote=False))
        return

    attrs_text = "".join(
        f' {name}="{html.escape(value, quote=True)}"' for name, value in node.attrs
    )
    if node.tag in _VOID_TAGS:
        parts.append(f"<{node.tag}{attrs_text} />")
        return
    parts.append(f"<{node.tag}{attrs_text}>")
    for child in node.children:
        _write(child, parts)
    parts.append(f"</{node.tag}>")
