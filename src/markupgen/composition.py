"""
Attribute and Event Composition

Resolves lookup keys against a catalog and merges them with the fixed
baseline sets every element of a family shares (global attributes, global
events, media events, the SVG event families).

Every function here returns a new list sorted by display name. The sort is
stable and uses plain string comparison, so "ID" sorts before "Id".

DUPLICATES:
    Only the SVG animation set skips descriptors the caller already supplied
    (matched by display name). Every other set is appended as-is, so a
    caller list overlapping a baseline set yields the same display name
    twice. markupgen.analyzer reports such duplicates.
"""

from typing import Callable, Dict, Iterable, List, Sequence, TypeVar

from markupgen.catalog import Catalog, Catalogs
from markupgen.errors import TableError
from markupgen.model import AttributeDescriptor, EventDescriptor

T = TypeVar("T", AttributeDescriptor, EventDescriptor)


GLOBAL_ATTRIBUTE_KEYS = (
    "accesskey",
    "aria-*",
    "class",
    "contenteditable",
    "data-*",
    "dir",
    "draggable",
    "hidden",
    "id",
    "lang",
    "role",
    "spellcheck",
    "style",
    "styles",
    "tabindex",
    "title",
    "attribute",
)

GLOBAL_EVENT_KEYS = (
    # Form
    "onblur",
    "onchange",
    "oncontextmenu",
    "onfocus",
    "oninput",
    "oninvalid",
    "onreset",
    "onsearch",
    "onselect",
    "onsubmit",
    # Keyboard
    "onkeydown",
    "onkeypress",
    "onkeyup",
    # Mouse
    "onclick",
    "ondblclick",
    "onmousedown",
    "onmouseenter",
    "onmouseleave",
    "onmousemove",
    "onmouseout",
    "onmouseover",
    "onmouseup",
    "onwheel",
    # Drag
    "ondrag",
    "ondragend",
    "ondragenter",
    "ondragleave",
    "ondragover",
    "ondragstart",
    "ondrop",
    "onscroll",
    # Clipboard
    "oncopy",
    "oncut",
    "onpaste",
)

MEDIA_EVENT_KEYS = (
    "onabort",
    "oncanplay",
    "oncanplaythrough",
    "oncuechange",
    "ondurationchange",
    "onemptied",
    "onended",
    "onerror",
    "onloadeddata",
    "onloadedmetadata",
    "onloadstart",
    "onpause",
    "onplay",
    "onplaying",
    "onprogress",
    "onratechange",
    "onseeked",
    "onseeking",
    "onstalled",
    "onsuspend",
    "ontimeupdate",
    "onvolumechange",
    "onwaiting",
)

# The leading spaces are part of the keys in the svg event catalog.
SVG_DOCUMENT_EVENT_KEYS = ("onabort", " onerror", " onresize", " onscroll", " onunload")

SVG_DOCUMENT_ELEMENT_EVENT_KEYS = ("oncopy", "oncut", "onpaste")

SVG_GRAPHICAL_EVENT_KEYS = ("onactivate", "onfocusin", "onfocusout")

SVG_ANIMATION_EVENT_KEYS = ("onbegin", "onend", "onrepeat")

SVG_GLOBAL_EVENT_KEYS = (
    "oncancel",
    "oncanplay",
    "oncanplaythrough",
    "onchange",
    "onclick",
    "onclose",
    "oncuechange",
    "ondblclick",
    "ondrag",
    "ondragend",
    "ondragenter",
    "ondragleave",
    "ondragover",
    "ondragstart",
    "ondrop",
    "ondurationchange",
    "onemptied",
    "onended",
    "onerror",
    "onfocus",
    "oninput",
    "oninvalid",
    "onkeydown",
    "onkeypress",
    "onkeyup",
    "onload",
    "onloadeddata",
    "onloadedmetadata",
    "onloadstart",
    "onmousedown",
    "onmouseenter",
    "onmouseleave",
    "onmousemove",
    "onmouseout",
    "onmouseover",
    "onmouseup",
    "onmousewheel",
    "onpause",
    "onplay",
    "onplaying",
    "onprogress",
    "onratechange",
    "onreset",
    "onresize",
    "onscroll",
    "onseeked",
    "onseeking",
    "onselect",
    "onshow",
    "onstalled",
    "onsubmit",
    "onsuspend",
    "ontimeupdate",
    "ontoggle",
    "onvolumechange",
    "onwaiting",
)


def sort_by_name(descriptors: Iterable[T]) -> List[T]:
    """Stable sort by display name."""
    return sorted(descriptors, key=lambda d: d.name)


def _lookup(catalog: Catalog[T], keys: Iterable[str]) -> List[T]:
    # Resolve every key before sorting so the first unknown key is reported.
    return sort_by_name([catalog[key] for key in keys])


def lookup_attributes(catalog: Catalog[AttributeDescriptor], keys: Iterable[str]) -> List[AttributeDescriptor]:
    """
    Resolve attribute keys against a catalog.

    Args:
        catalog: Attribute catalog to search
        keys: Lookup keys, in any order

    Returns:
        Descriptors sorted by display name

    Raises:
        UnresolvedCatalogKey: On the first key missing from the catalog
    """
    return _lookup(catalog, keys)


def lookup_events(catalog: Catalog[EventDescriptor], keys: Iterable[str]) -> List[EventDescriptor]:
    """Resolve event keys against a catalog. Same contract as lookup_attributes."""
    return _lookup(catalog, keys)


class Composer:
    """
    Merges element-specific descriptors with the fixed baseline sets.

    The catalogs are injected so every method is a pure function of its
    arguments and of the catalogs given here.
    """

    def __init__(self, catalogs: Catalogs):
        self.catalogs = catalogs
        self._attribute_sets: Dict[str, Callable[..., List[AttributeDescriptor]]] = {
            "global": self.global_attributes,
        }
        self._event_sets: Dict[str, Callable[..., List[EventDescriptor]]] = {
            "global": self.global_events,
            "media": self.media_events,
            "svg_animation": self.svg_animation_events,
            "svg_document": self.svg_document_events,
            "svg_document_element": self.svg_document_element_events,
            "svg_graphical": self.svg_graphical_events,
            "svg_global": self.svg_global_events,
        }

    @property
    def attribute_set_names(self) -> List[str]:
        return sorted(self._attribute_sets)

    @property
    def event_set_names(self) -> List[str]:
        return sorted(self._event_sets)

    # =========================================================================
    # ATTRIBUTES
    # =========================================================================

    def global_attributes(self, extra: Sequence[AttributeDescriptor] = ()) -> List[AttributeDescriptor]:
        """Attributes every HTML element accepts (id, class, style, ...)."""
        html = self.catalogs.html_attributes
        return sort_by_name(list(extra) + lookup_attributes(html, GLOBAL_ATTRIBUTE_KEYS))

    def compose_attributes(self, set_name: str, extra: Sequence[AttributeDescriptor] = ()) -> List[AttributeDescriptor]:
        """Apply the attribute set called set_name on top of extra."""
        try:
            compose = self._attribute_sets[set_name]
        except KeyError:
            raise TableError(f"unknown attribute set: {set_name!r}") from None
        return compose(extra)

    # =========================================================================
    # EVENTS
    # =========================================================================

    def _append_events(self, catalog: Catalog[EventDescriptor], keys: Sequence[str],
                       extra: Sequence[EventDescriptor]) -> List[EventDescriptor]:
        return sort_by_name(list(extra) + lookup_events(catalog, keys))

    def global_events(self, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        """Form, keyboard, mouse, drag and clipboard events."""
        return self._append_events(self.catalogs.html_events, GLOBAL_EVENT_KEYS, extra)

    def media_events(self, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        """Playback lifecycle events of audio and video elements."""
        return self._append_events(self.catalogs.html_events, MEDIA_EVENT_KEYS, extra)

    def svg_document_events(self, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        return self._append_events(self.catalogs.svg_events, SVG_DOCUMENT_EVENT_KEYS, extra)

    def svg_document_element_events(self, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        return self._append_events(self.catalogs.svg_events, SVG_DOCUMENT_ELEMENT_EVENT_KEYS, extra)

    def svg_graphical_events(self, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        return self._append_events(self.catalogs.svg_events, SVG_GRAPHICAL_EVENT_KEYS, extra)

    def svg_global_events(self, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        return self._append_events(self.catalogs.svg_events, SVG_GLOBAL_EVENT_KEYS, extra)

    def svg_animation_events(self, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        """
        Add begin/end/repeat events unless the caller already supplied them.

        Unlike the other sets this one is idempotent: an event whose display
        name is already present in extra is not added a second time.
        """
        result = list(extra)
        present = {event.name for event in result}
        for event in lookup_events(self.catalogs.svg_events, SVG_ANIMATION_EVENT_KEYS):
            if event.name not in present:
                result.append(event)
        return sort_by_name(result)

    def compose_events(self, set_name: str, extra: Sequence[EventDescriptor] = ()) -> List[EventDescriptor]:
        """Apply the event set called set_name on top of extra."""
        try:
            compose = self._event_sets[set_name]
        except KeyError:
            raise TableError(f"unknown event set: {set_name!r}") from None
        return compose(extra)
