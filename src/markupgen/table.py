"""
Element Table

Builds the ordered list of ElementDescriptor objects every backend renders.

The table itself is declarative data (markupgen/data/elements.yaml). Each
entry names an element, its structural kind and its documentation, and
describes its attributes and events as:

    attributes:
      catalog: html            # catalog the keys resolve against (default html)
      keys: [href, target]     # element-specific keys
      with: [global]           # composition sets, applied in order

Nothing here decides which attributes an element gets; it only replays the
lookups and compositions the entry spells out.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from markupgen.catalog import HTML, Catalogs, load_catalogs, load_data_file
from markupgen.composition import Composer, lookup_attributes, lookup_events
from markupgen.errors import TableError
from markupgen.model import (
    AttributeDescriptor,
    ElementDescriptor,
    EventDescriptor,
    StructuralKind,
)

logger = logging.getLogger(__name__)

ELEMENTS_FILE = "elements.yaml"


def load_element_entries() -> List[Dict[str, Any]]:
    """Raw entries of the packaged element table, in table order."""
    entries = load_data_file(ELEMENTS_FILE)
    if not isinstance(entries, list):
        raise TableError(f"{ELEMENTS_FILE} must hold a list of elements")
    return entries


def _composition_block(entry: Dict[str, Any], field_name: str) -> Dict[str, Any]:
    block = entry.get(field_name) or {}
    if not isinstance(block, dict):
        raise TableError(f"{entry.get('name')}: {field_name} must be a mapping")
    return block


def resolve_attributes(composer: Composer, block: Dict[str, Any]) -> List[AttributeDescriptor]:
    """Resolve one `attributes:` block of an element entry."""
    catalog = composer.catalogs.attributes(block.get("catalog", HTML))
    attributes = lookup_attributes(catalog, block.get("keys") or [])
    for set_name in block.get("with") or []:
        attributes = composer.compose_attributes(set_name, attributes)
    return attributes


def resolve_events(composer: Composer, block: Dict[str, Any]) -> List[EventDescriptor]:
    """Resolve one `events:` block of an element entry."""
    catalog = composer.catalogs.events(block.get("catalog", HTML))
    events = lookup_events(catalog, block.get("keys") or [])
    for set_name in block.get("with") or []:
        events = composer.compose_events(set_name, events)
    return events


def build_element(composer: Composer, entry: Dict[str, Any]) -> ElementDescriptor:
    """
    Resolve one element table entry.

    Raises:
        UnresolvedCatalogKey: If the entry references an unknown key
        TableError: If the entry is malformed
    """
    name = entry.get("name")
    if not name:
        raise TableError(f"element entry without a name: {entry!r}")

    try:
        kind = StructuralKind(entry.get("kind", StructuralKind.CONTAINER.value))
    except ValueError:
        raise TableError(f"{name}: unknown structural kind {entry.get('kind')!r}") from None

    attributes = resolve_attributes(composer, _composition_block(entry, "attributes"))
    events = resolve_events(composer, _composition_block(entry, "events"))

    text_attribute = entry.get("text_attribute")
    if text_attribute and kind != StructuralKind.CONTAINER:
        raise TableError(f"{name}: text_attribute requires a container element")

    logger.debug("Resolved %s: %d attributes, %d events", name, len(attributes), len(events))

    return ElementDescriptor(
        name=name,
        kind=kind,
        doc=entry.get("doc") or "",
        attributes=tuple(attributes),
        events=tuple(events),
        custom_tag=bool(entry.get("custom_tag", False)),
        text_attribute=text_attribute,
    )


def build_element_table(
    catalogs: Optional[Catalogs] = None,
    entries: Optional[Sequence[Dict[str, Any]]] = None,
) -> List[ElementDescriptor]:
    """
    Build the element table.

    Args:
        catalogs: Catalogs to resolve against (packaged catalogs if None)
        entries: Raw element entries (packaged elements.yaml if None)

    Returns:
        ElementDescriptor list in table order

    Raises:
        UnresolvedCatalogKey: On the first unknown attribute or event key
        TableError: On a malformed entry or a duplicate element name
    """
    if catalogs is None:
        catalogs = load_catalogs()
    if entries is None:
        entries = load_element_entries()

    composer = Composer(catalogs)
    elements: List[ElementDescriptor] = []
    seen = set()

    for entry in entries:
        element = build_element(composer, entry)
        if element.name in seen:
            raise TableError(f"duplicate element: {element.name}")
        seen.add(element.name)
        elements.append(element)

    logger.debug("Element table built: %d elements", len(elements))
    return elements


def get_element(elements: Iterable[ElementDescriptor], name: str) -> Optional[ElementDescriptor]:
    """
    Retrieve an element by name.

    Returns:
        ElementDescriptor or None if not found
    """
    for element in elements:
        if element.name == name:
            return element
    return None
