"""
Table Analyzer: diagnostics over a resolved element table.

This module provides lightweight analysis of the element table:
    - Inventory (elements by structural kind, accessor counts, value kinds)
    - Ordering (attribute and event lists sorted by display name)
    - Generated names (collisions once display names become Python names)
    - Duplicates (display names appended twice by a composition set)
    - Coverage (catalog entries no element references)

IMPORTANT: It does NOT modify the table. It only produces read-only reports.
Duplicates produced by composition are reported as warnings, never removed.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from markupgen.backends.naming import method_name
from markupgen.catalog import Catalog, Catalogs
from markupgen.model import ElementDescriptor, StructuralKind
from markupgen.runtime import HTMLElement

# Members a generated accessor must not shadow
RESERVED_MEMBERS: Set[str] = {"body", "text", "_body", "on"} | {
    name for name in vars(HTMLElement) if not name.startswith("__")
}


def _is_sorted(names: Sequence[str]) -> bool:
    return all(a <= b for a, b in zip(names, names[1:]))


@dataclass
class TableReport:
    """Analysis report for an element table."""

    total_elements: int = 0
    elements_by_kind: Dict[str, int] = field(default_factory=dict)
    total_attribute_accessors: int = 0
    total_event_accessors: int = 0
    value_kind_usage: Dict[str, int] = field(default_factory=dict)

    duplicate_elements: List[str] = field(default_factory=list)
    unsorted_elements: List[str] = field(default_factory=list)
    unused_catalog_keys: Dict[str, List[str]] = field(default_factory=dict)

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def add_error(self, msg: str) -> None:
        if msg not in self.errors:
            self.errors.append(msg)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def summary_lines(self) -> List[str]:
        lines = [f"Elements: {self.total_elements}"]
        for kind, count in sorted(self.elements_by_kind.items()):
            lines.append(f"  {kind}: {count}")
        lines.append(f"Attribute accessors: {self.total_attribute_accessors}")
        lines.append(f"Event accessors: {self.total_event_accessors}")
        lines.append("Value kinds:")
        for kind, count in sorted(self.value_kind_usage.items()):
            lines.append(f"  {kind}: {count}")
        for msg in self.errors:
            lines.append(f"ERROR: {msg}")
        for msg in self.warnings:
            lines.append(f"WARNING: {msg}")
        return lines


def _check_element(report: TableReport, element: ElementDescriptor) -> None:
    attribute_names = [a.name for a in element.attributes]
    event_names = [e.name for e in element.events]

    if not (_is_sorted(attribute_names) and _is_sorted(event_names)):
        report.unsorted_elements.append(element.name)
        report.add_error(f"{element.name}: accessors are not sorted by display name")

    # Same display name twice: composition appended an overlapping set
    for name, count in sorted(Counter(attribute_names + event_names).items()):
        if count > 1:
            report.add_warning(f"{element.name}: display name {name} appears {count} times")

    # Distinct display names sharing one Python method name
    by_method: Dict[str, Set[str]] = {}
    for name in attribute_names + event_names:
        by_method.setdefault(method_name(name), set()).add(name)
    for method, names in sorted(by_method.items()):
        if len(names) > 1:
            report.add_error(
                f"{element.name}: {', '.join(sorted(names))} all generate method {method}()"
            )
        if method in RESERVED_MEMBERS:
            report.add_error(f"{element.name}: accessor {method}() shadows a builder member")


def _unused_keys(catalog: Catalog, used: Set[object]) -> List[str]:
    return [key for key, descriptor in catalog.items() if descriptor not in used]


def analyze_table(elements: Sequence[ElementDescriptor], catalogs: Optional[Catalogs] = None) -> TableReport:
    """
    Perform analysis of an element table.

    Args:
        elements: Resolved element table
        catalogs: When given, also report catalog entries nothing references

    Returns:
        TableReport with metrics, errors and warnings
    """
    report = TableReport(total_elements=len(elements))

    kind_counts: Counter = Counter()
    value_kinds: Counter = Counter()
    names: Counter = Counter()
    used: Set[object] = set()

    for element in elements:
        names[element.name] += 1
        kind_counts[element.kind.value] += 1
        report.total_attribute_accessors += len(element.attributes)
        report.total_event_accessors += len(element.events)
        for attr in element.attributes:
            value_kinds[attr.kind.value] += 1
        used.update(element.attributes)
        used.update(element.events)
        _check_element(report, element)

    report.elements_by_kind = {kind.value: kind_counts.get(kind.value, 0) for kind in StructuralKind}
    report.value_kind_usage = dict(value_kinds)

    for name, count in sorted(names.items()):
        if count > 1:
            report.duplicate_elements.append(name)
            report.add_error(f"element {name} is defined {count} times")

    if catalogs is not None:
        for label, catalog in (
            ("html attributes", catalogs.html_attributes),
            ("svg attributes", catalogs.svg_attributes),
            ("html events", catalogs.html_events),
            ("svg events", catalogs.svg_events),
        ):
            unused = _unused_keys(catalog, used)
            if unused:
                report.unused_catalog_keys[label] = unused
                report.add_warning(f"{len(unused)} {label} are never referenced")

    return report
