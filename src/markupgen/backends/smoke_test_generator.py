"""
Smoke test module generator.

Renders one pytest function per element (html_gen_test.py). Each test builds
the element, calls every accessor once with a representative literal and
finally sets its content. The tests assert nothing: they pass when every
generated accessor exists and runs.
"""

from typing import Dict, List, Sequence

from markupgen.backends.builder_generator import HEADER
from markupgen.backends.naming import method_name, smoke_test_name
from markupgen.model import ElementDescriptor, StructuralKind, ValueKind

INDENT = "    "

CUSTOM_TAG_LITERAL = '"div"'

# Arguments passed to each attribute accessor, by value kind
ARGUMENT_LITERALS: Dict[ValueKind, str] = {
    ValueKind.DATA_VALUE: '"foo", "bar"',
    ValueKind.ARIA_VALUE: '"foo", "bar"',
    ValueKind.ATTR_VALUE: '"foo", "bar"',
    ValueKind.STYLE: '"color", "deepskyblue"',
    ValueKind.STYLE_MAP: '{"color": "pink"}',
    ValueKind.INT: "42",
    ValueKind.STRING: '"foo"',
    ValueKind.URL: '"http://foo.com"',
    ValueKind.STRING_CLASS: '"foo", "bar"',
    ValueKind.XMLNS: '"http://www.w3.org/2000/svg"',
}
FALLBACK_LITERAL = "42"

# Both branches of the boolean accessors are exercised
BOOL_KINDS = (ValueKind.BOOL, ValueKind.BOOL_FORCE, ValueKind.ON_OFF)


def accessor_calls(element: ElementDescriptor) -> List[str]:
    """Attribute accessor calls of one smoke test, in attribute order."""
    calls = []
    for attr in element.attributes:
        name = method_name(attr.name)
        if attr.kind in BOOL_KINDS:
            calls.append(f"elem.{name}(True)")
            calls.append(f"elem.{name}(False)")
        else:
            calls.append(f"elem.{name}({ARGUMENT_LITERALS.get(attr.kind, FALLBACK_LITERAL)})")
    return calls


def render_smoke_test(element: ElementDescriptor) -> List[str]:
    lines = [f"def {smoke_test_name(element.name)}():"]

    if element.custom_tag:
        lines.append(f"{INDENT}elem = {element.name}({CUSTOM_TAG_LITERAL})")
    else:
        lines.append(f"{INDENT}elem = {element.name}()")

    for call in accessor_calls(element):
        lines.append(f"{INDENT}{call}")

    if element.events:
        lines.append("")
        lines.append(f"{INDENT}def h(ctx, e):")
        lines.append(f"{INDENT * 2}pass")
        lines.append("")
        lines.append(f'{INDENT}elem.on("click", h)')
        for event in element.events:
            lines.append(f"{INDENT}elem.{method_name(event.name)}(h)")

    if element.kind == StructuralKind.CONTAINER:
        lines.append(f'{INDENT}elem.text("hello")')
    elif element.kind == StructuralKind.RESTRICTED:
        lines.append(f'{INDENT}elem._body(Text("hello"))')

    return lines


def generate_smoke_tests(elements: Sequence[ElementDescriptor], builder_module: str = "html_gen") -> str:
    """
    Generate the smoke test module for an element table.

    Args:
        elements: Resolved element table, rendered in order
        builder_module: Import path of the generated builder module

    Returns:
        Python source of the test module
    """
    lines = [
        HEADER,
        "",
        '"""',
        "Smoke tests calling every accessor of every generated element builder.",
        '"""',
        "",
        f"from {builder_module} import *  # noqa: F401,F403",
    ]

    for element in elements:
        lines.append("")
        lines.append("")
        lines.extend(render_smoke_test(element))

    lines.append("")
    return "\n".join(lines)


__all__ = ["ARGUMENT_LITERALS", "accessor_calls", "generate_smoke_tests", "render_smoke_test"]
