"""
Tests for the Table Analyzer.

Tests verify that the analyzer correctly:
    - Inventories elements, accessors and value kinds
    - Detects unsorted accessor lists and duplicate elements
    - Detects generated method-name collisions
    - Reports duplicate display names without removing them
    - Reports unreferenced catalog entries
"""

from markupgen.analyzer import RESERVED_MEMBERS, analyze_table
from markupgen.catalog import load_catalogs
from markupgen.composition import Composer
from markupgen.model import AttributeDescriptor, ElementDescriptor, EventDescriptor, StructuralKind, ValueKind
from markupgen.table import build_element_table


def attr(name, kind=ValueKind.STRING):
    return AttributeDescriptor(key=name.lower(), name=name, kind=kind)


def element(name="Div", attributes=(), events=(), kind=StructuralKind.CONTAINER):
    return ElementDescriptor(name=name, kind=kind, doc="", attributes=tuple(attributes), events=tuple(events))


def test_packaged_table_is_clean():
    """The shipped table has no errors; unused catalog entries are warnings."""
    catalogs = load_catalogs()
    report = analyze_table(build_element_table(catalogs=catalogs), catalogs)

    assert not report.has_errors
    assert report.total_elements == 181
    assert report.elements_by_kind == {"container": 166, "restricted": 2, "childless": 13}
    assert report.total_attribute_accessors > 0
    assert report.value_kind_usage["style"] > 0


def test_inventory():
    report = analyze_table([
        element(attributes=[attr("Href", ValueKind.URL), attr("Target")]),
        element(name="Br", kind=StructuralKind.CHILDLESS),
    ])
    assert report.total_elements == 2
    assert report.total_attribute_accessors == 2
    assert report.value_kind_usage == {"url": 1, "string": 1}
    assert report.elements_by_kind["childless"] == 1


def test_unsorted_accessors():
    report = analyze_table([element(attributes=[attr("Target"), attr("Href")])])
    assert report.unsorted_elements == ["Div"]
    assert report.has_errors


def test_duplicate_elements():
    report = analyze_table([element(), element()])
    assert report.duplicate_elements == ["Div"]
    assert any("defined 2 times" in msg for msg in report.errors)


def test_method_name_collision():
    """Distinct display names that generate the same method."""
    report = analyze_table([element(attributes=[attr("TabIndex"), attr("Tab_index")])])
    assert any("tab_index()" in msg for msg in report.errors)


def test_reserved_member_collision():
    report = analyze_table([element(attributes=[attr("TagName")])])
    assert "tag_name" in RESERVED_MEMBERS
    assert any("shadows" in msg for msg in report.errors)


def test_duplicate_display_name_is_a_warning():
    """Naive composition may append a display name twice; reported, not removed."""
    catalogs = load_catalogs()
    events = Composer(catalogs).global_events([catalogs.html_events["onclick"]])
    div = element(events=events)

    report = analyze_table([div])

    assert not report.has_errors
    assert any("OnClick appears 2 times" in msg for msg in report.warnings)
    assert [e.name for e in div.events].count("OnClick") == 2


def test_unused_catalog_keys():
    catalogs = load_catalogs()
    report = analyze_table([element(events=[EventDescriptor(key="x", name="OnX")])], catalogs)
    assert len(report.unused_catalog_keys["html events"]) == len(catalogs.html_events)
    assert "html attributes" in report.unused_catalog_keys
    assert any("never referenced" in msg for msg in report.warnings)


def test_summary_lines():
    report = analyze_table([element(attributes=[attr("Target"), attr("Href")])])
    lines = report.summary_lines()
    assert lines[0] == "Elements: 1"
    assert any(line.startswith("ERROR: Div") for line in lines)
