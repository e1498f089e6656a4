"""
Serialization helpers for the resolved element table.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
This is what `markupgen dump` prints: the table after every lookup and
composition, i.e. exactly what the backends render.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

import yaml

from markupgen.model import (
    AttributeDescriptor,
    ElementDescriptor,
    EventDescriptor,
    StructuralKind,
    ValueKind,
)


def attribute_to_dict(a: AttributeDescriptor) -> Dict[str, Any]:
    return {
        "key": a.key,
        "name": a.name,
        "type": a.kind.value,
        "serialized_name": a.serialized_name,
        "doc": a.doc,
    }


def attribute_from_dict(d: Dict[str, Any]) -> AttributeDescriptor:
    return AttributeDescriptor(
        key=d["key"],
        name=d["name"],
        kind=ValueKind(d.get("type", "")),
        doc=d.get("doc", ""),
        serialized_name=d.get("serialized_name"),
    )


def event_to_dict(e: EventDescriptor) -> Dict[str, Any]:
    return {"key": e.key, "name": e.name, "doc": e.doc}


def event_from_dict(d: Dict[str, Any]) -> EventDescriptor:
    return EventDescriptor(key=d["key"], name=d["name"], doc=d.get("doc", ""))


def element_to_dict(el: ElementDescriptor) -> Dict[str, Any]:
    return {
        "name": el.name,
        "kind": el.kind.value,
        "doc": el.doc,
        "custom_tag": el.custom_tag,
        "text_attribute": el.text_attribute,
        "attributes": [attribute_to_dict(a) for a in el.attributes],
        "events": [event_to_dict(e) for e in el.events],
    }


def element_from_dict(d: Dict[str, Any]) -> ElementDescriptor:
    return ElementDescriptor(
        name=d["name"],
        kind=StructuralKind(d.get("kind", StructuralKind.CONTAINER.value)),
        doc=d.get("doc", ""),
        attributes=tuple(attribute_from_dict(a) for a in d.get("attributes", [])),
        events=tuple(event_from_dict(e) for e in d.get("events", [])),
        custom_tag=d.get("custom_tag", False),
        text_attribute=d.get("text_attribute"),
    )


def table_to_dict(elements: Sequence[ElementDescriptor]) -> Dict[str, Any]:
    return {"elements": [element_to_dict(el) for el in elements]}


def table_from_dict(d: Dict[str, Any]) -> List[ElementDescriptor]:
    return [element_from_dict(el) for el in d.get("elements", [])]


def table_to_json(elements: Sequence[ElementDescriptor]) -> str:
    return json.dumps(table_to_dict(elements), sort_keys=True, indent=2)


def table_from_json(s: str) -> List[ElementDescriptor]:
    return table_from_dict(json.loads(s))


def table_to_yaml(elements: Sequence[ElementDescriptor]) -> str:
    # sort_keys=False keeps each mapping in declaration order
    return yaml.safe_dump(table_to_dict(elements), sort_keys=False, allow_unicode=True)


def table_from_yaml(s: str) -> List[ElementDescriptor]:
    return table_from_dict(yaml.safe_load(s))
