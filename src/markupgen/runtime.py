"""
Reference Consumer Runtime

The generated builder module plugs into a consumer library that provides:

    - UI:            the type of every node of an element tree
    - EventHandler:  the callback type accepted by event accessors
    - Text(v):       a text node constructor
    - HTMLElement:   the base class of every generated builder, offering
                        _set_attr(name, value)
                        _set_children(*elems)
                        _set_event_handler(event, handler, *scope)
                     and a dedicated _xmlns field

This module is a minimal implementation of that contract, enough to import
the generated code and run its smoke tests. It does not render, diff or
dispatch anything.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Protocol, Tuple

EventHandler = Callable[[Any, Any], None]


class UI(Protocol):
    """Any node of an element tree."""
    pass


@dataclass(frozen=True)
class EventBinding:
    handler: EventHandler
    scope: Tuple[Any, ...] = ()


class TextNode:
    """A text node."""

    def __init__(self, value: str):
        self.value = value

    def __repr__(self) -> str:
        return f"TextNode({self.value!r})"


def Text(v: Any) -> TextNode:
    """Text returns a text node containing the stringified given value."""
    return TextNode(str(v))


class HTMLElement:
    """
    Base class of every generated element builder.

    Generated accessors only call the underscore mutators below; the public
    properties exist for inspection.
    """

    def __init__(self, tag: str, is_self_closing: bool = False):
        self._tag = tag
        self._is_self_closing = is_self_closing
        self._attrs: Dict[str, Any] = {}
        self._children: List[UI] = []
        self._handlers: Dict[str, EventBinding] = {}
        self._xmlns = ""

    def _set_attr(self, name: str, value: Any) -> None:
        if name == "style":
            # Style declarations accumulate instead of replacing each other.
            self._attrs["style"] = self._attrs.get("style", "") + f"{value};"
            return
        self._attrs[name] = value

    def _set_children(self, *elems: UI) -> None:
        if self._is_self_closing:
            raise ValueError(f"<{self._tag}> is self-closing and cannot have children")
        self._children = [e for e in elems if e is not None]

    def _set_event_handler(self, event: str, handler: EventHandler, *scope: Any) -> None:
        self._handlers[event] = EventBinding(handler=handler, scope=tuple(scope))

    @property
    def tag_name(self) -> str:
        return self._tag

    @property
    def self_closing(self) -> bool:
        return self._is_self_closing

    @property
    def attributes(self) -> Dict[str, Any]:
        return dict(self._attrs)

    @property
    def child_nodes(self) -> List[UI]:
        return list(self._children)

    @property
    def event_handlers(self) -> Dict[str, EventBinding]:
        return dict(self._handlers)

    @property
    def namespace(self) -> str:
        return self._xmlns

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._tag!r}>"
