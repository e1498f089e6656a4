"""
Attribute and Event Catalogs

A catalog is a static mapping from a short lookup key to its descriptor.
Four of them exist:

    - html_attributes: generic markup attributes
    - svg_attributes:  vector-graphics attributes
    - html_events:     generic interaction events
    - svg_events:      vector-graphics events

The tables ship as YAML files in markupgen/data and are loaded once.

ARCHITECTURAL RULE:
    Catalogs are read-only after loading. Composition receives them as
    arguments; nothing looks them up through module globals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Iterator, Mapping, TypeVar

import yaml

from markupgen.errors import TableError, UnresolvedCatalogKey
from markupgen.model import AttributeDescriptor, EventDescriptor, ValueKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

HTML = "html"
SVG = "svg"

ATTRIBUTE_FILES = {HTML: "html_attributes.yaml", SVG: "svg_attributes.yaml"}
EVENT_FILES = {HTML: "html_events.yaml", SVG: "svg_events.yaml"}


class Catalog(Mapping[str, T]):
    """
    Immutable, named mapping from lookup key to descriptor.

    Indexing with an unknown key raises UnresolvedCatalogKey, which is a
    KeyError, so `in` and `.get()` keep their usual behavior.
    """

    def __init__(self, name: str, entries: Mapping[str, T]):
        self.name = name
        self._entries: Dict[str, T] = dict(entries)

    def __getitem__(self, key: str) -> T:
        try:
            return self._entries[key]
        except KeyError:
            raise UnresolvedCatalogKey(self.name, key) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalog({self.name!r}, {len(self._entries)} entries)"


@dataclass(frozen=True)
class Catalogs:
    """The four catalogs the element table resolves against."""

    html_attributes: Catalog[AttributeDescriptor]
    svg_attributes: Catalog[AttributeDescriptor]
    html_events: Catalog[EventDescriptor]
    svg_events: Catalog[EventDescriptor]

    def attributes(self, name: str) -> Catalog[AttributeDescriptor]:
        """Select an attribute catalog by name ("html" or "svg")."""
        if name == HTML:
            return self.html_attributes
        if name == SVG:
            return self.svg_attributes
        raise TableError(f"unknown attribute catalog: {name!r}")

    def events(self, name: str) -> Catalog[EventDescriptor]:
        """Select an event catalog by name ("html" or "svg")."""
        if name == HTML:
            return self.html_events
        if name == SVG:
            return self.svg_events
        raise TableError(f"unknown event catalog: {name!r}")


# =========================================================================
# DICT -> DESCRIPTOR
# =========================================================================


def attribute_from_entry(key: str, entry: Dict[str, Any]) -> AttributeDescriptor:
    if "name" not in entry:
        raise TableError(f"attribute {key!r} has no name")
    kind = ValueKind(entry.get("type", ""))
    if kind is ValueKind.OTHER:
        logger.debug("Attribute %r has unrecognized type %r", key, entry.get("type"))
    return AttributeDescriptor(
        key=key,
        name=entry["name"],
        kind=kind,
        doc=entry.get("doc") or "",
        serialized_name=entry.get("serialized_name") or None,
    )


def event_from_entry(key: str, entry: Dict[str, Any]) -> EventDescriptor:
    if "name" not in entry:
        raise TableError(f"event {key!r} has no name")
    return EventDescriptor(key=key, name=entry["name"], doc=entry.get("doc") or "")


def attribute_catalog(name: str, entries: Mapping[str, Dict[str, Any]]) -> Catalog[AttributeDescriptor]:
    return Catalog(name, {k: attribute_from_entry(k, v) for k, v in entries.items()})


def event_catalog(name: str, entries: Mapping[str, Dict[str, Any]]) -> Catalog[EventDescriptor]:
    return Catalog(name, {k: event_from_entry(k, v) for k, v in entries.items()})


def catalogs_from_dicts(
    html_attributes: Mapping[str, Dict[str, Any]],
    svg_attributes: Mapping[str, Dict[str, Any]],
    html_events: Mapping[str, Dict[str, Any]],
    svg_events: Mapping[str, Dict[str, Any]],
) -> Catalogs:
    """Build a Catalogs bundle from in-memory catalog dicts."""
    return Catalogs(
        html_attributes=attribute_catalog(HTML, html_attributes),
        svg_attributes=attribute_catalog(SVG, svg_attributes),
        html_events=event_catalog(HTML, html_events),
        svg_events=event_catalog(SVG, svg_events),
    )


# =========================================================================
# PACKAGED DATA
# =========================================================================


def load_data_file(filename: str) -> Any:
    """Parse one YAML file shipped in markupgen/data."""
    text = resources.files("markupgen").joinpath("data").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    logger.debug("Loaded %s", filename)
    return data


@lru_cache(maxsize=None)
def load_catalogs() -> Catalogs:
    """Load the packaged catalogs. The result is cached."""
    catalogs = catalogs_from_dicts(
        html_attributes=load_data_file(ATTRIBUTE_FILES[HTML]),
        svg_attributes=load_data_file(ATTRIBUTE_FILES[SVG]),
        html_events=load_data_file(EVENT_FILES[HTML]),
        svg_events=load_data_file(EVENT_FILES[SVG]),
    )
    logger.debug(
        "Catalogs loaded: %d html attributes, %d svg attributes, %d html events, %d svg events",
        len(catalogs.html_attributes),
        len(catalogs.svg_attributes),
        len(catalogs.html_events),
        len(catalogs.svg_events),
    )
    return catalogs
