#!/usr/bin/env python3
"""
Pipeline Demo: Catalogs → Element Table → Diagnostics → Generated Builders

Shows the full workflow:
1. Load the attribute and event catalogs
2. Build the element table
3. Analyze the table
4. Generate html_gen.py and html_gen_test.py
"""

import sys
from pathlib import Path

from markupgen.analyzer import analyze_table
from markupgen.catalog import load_catalogs
from markupgen.config import GeneratorConfig
from markupgen.generator import generate
from markupgen.serialization import element_to_dict
from markupgen.table import build_element_table, get_element


def main(output_dir: str = "generated"):
    print("=" * 80)
    print("PIPELINE DEMO: Catalogs → Element Table → Analysis → Builders")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Load catalogs
    # =========================================================================
    print("\n1. LOADING CATALOGS...")
    catalogs = load_catalogs()
    print(f"   ✓ HTML attributes: {len(catalogs.html_attributes)}")
    print(f"   ✓ SVG attributes:  {len(catalogs.svg_attributes)}")
    print(f"   ✓ HTML events:     {len(catalogs.html_events)}")
    print(f"   ✓ SVG events:      {len(catalogs.svg_events)}")

    # =========================================================================
    # STEP 2: Build element table
    # =========================================================================
    print("\n2. BUILDING ELEMENT TABLE...")
    elements = build_element_table(catalogs=catalogs)
    print(f"   ✓ Elements: {len(elements)}")

    a = element_to_dict(get_element(elements, "A"))
    print(f"   ✓ A: {len(a['attributes'])} attributes, {len(a['events'])} events")
    print(f"     {', '.join(attr['name'] for attr in a['attributes'][:8])}, ...")

    # =========================================================================
    # STEP 3: Analyze table
    # =========================================================================
    print("\n3. ANALYZING TABLE...")
    report = analyze_table(elements, catalogs)
    print(f"   ✓ By kind: {report.elements_by_kind}")
    print(f"   ✓ Attribute accessors: {report.total_attribute_accessors}")
    print(f"   ✓ Event accessors:     {report.total_event_accessors}")
    print(f"   ✓ Errors: {len(report.errors)}")

    if report.warnings:
        print(f"\n   Warnings ({len(report.warnings)}):")
        for warning in report.warnings[:5]:  # Show first 5
            print(f"      - {warning}")
        if len(report.warnings) > 5:
            print(f"      ... and {len(report.warnings) - 5} more")

    # =========================================================================
    # STEP 4: Generate builders
    # =========================================================================
    print("\n4. GENERATING BUILDERS...")
    result = generate(GeneratorConfig(output_dir=Path(output_dir)))
    for written in result.files:
        print(f"   ✓ {written.path} ({written.line_count} lines, {written.byte_count} bytes)")

    print("\n" + "=" * 80)
    print(f"✅ Done. Run: pytest {Path(output_dir) / 'html_gen_test.py'}")
    print("=" * 80)


if __name__ == "__main__":
    main(*sys.argv[1:2])
