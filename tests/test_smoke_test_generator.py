"""
Tests for the smoke test module generator.
"""

from markupgen.backends.builder_generator import HEADER
from markupgen.backends.smoke_test_generator import (
    accessor_calls,
    generate_smoke_tests,
    render_smoke_test,
)
from markupgen.catalog import load_catalogs
from markupgen.composition import Composer
from markupgen.model import AttributeDescriptor, ElementDescriptor, StructuralKind, ValueKind
from markupgen.table import build_element, build_element_table


def make_element(name, kind="container", keys=(), events=None, **extra):
    entry = {
        "name": name,
        "kind": kind,
        "doc": "",
        "attributes": {"keys": list(keys), "with": ["global"]},
        "events": events if events is not None else {"with": ["global"]},
    }
    entry.update(extra)
    return build_element(Composer(load_catalogs()), entry)


class TestChildlessSmokeTest:
    """The smoke test of a self-closing element with src/width/height."""

    def test_calls_every_accessor_with_its_literal(self):
        element = make_element("Img", kind="childless", keys=["src", "width", "height"], events={})
        lines = render_smoke_test(element)

        assert lines[0] == "def test_Img():"
        assert lines[1] == "    elem = Img()"
        assert '    elem.src("http://foo.com")' in lines
        assert "    elem.width(42)" in lines
        assert "    elem.height(42)" in lines
        assert '    elem.class_("foo", "bar")' in lines
        assert '    elem.style("color", "deepskyblue")' in lines
        assert '    elem.styles({"color": "pink"})' in lines
        assert '    elem.data_set("foo", "bar")' in lines
        assert '    elem.id("foo")' in lines

    def test_bool_accessors_called_twice(self):
        element = make_element("Img", kind="childless", events={})
        lines = render_smoke_test(element)
        assert lines.count("    elem.hidden(True)") == 1
        assert lines.count("    elem.hidden(False)") == 1
        assert "    elem.spellcheck(True)" in lines

    def test_no_structural_call(self):
        element = make_element("Img", kind="childless", events={})
        lines = render_smoke_test(element)
        assert lines[-1].startswith("    elem.")
        assert not any("text(" in line or "_body(" in line for line in lines)

    def test_no_event_calls_without_events(self):
        lines = render_smoke_test(make_element("Img", kind="childless", events={}))
        assert not any("def h(ctx, e):" in line for line in lines)
        assert not any("elem.on(" in line for line in lines)


class TestStructuralCalls:
    """The final structural call depends on the element kind."""

    def test_container_sets_text(self):
        lines = render_smoke_test(make_element("Div"))
        assert lines[-1] == '    elem.text("hello")'

    def test_restricted_sets_internal_body(self):
        lines = render_smoke_test(make_element("Body", kind="restricted"))
        assert lines[-1] == '    elem._body(Text("hello"))'


class TestEvents:
    def test_generic_then_named_events(self):
        element = make_element("A", events={"keys": ["onclick", "onblur"]})
        lines = render_smoke_test(element)
        start = lines.index('    elem.on("click", h)')
        assert lines[start + 1:start + 3] == ["    elem.on_blur(h)", "    elem.on_click(h)"]
        assert "    def h(ctx, e):" in lines


class TestLiterals:
    def test_fallback_literal(self):
        element = ElementDescriptor(
            name="X",
            kind=StructuralKind.CHILDLESS,
            doc="",
            attributes=(
                AttributeDescriptor(key="a", name="Any", kind=ValueKind.ANY),
                AttributeDescriptor(key="o", name="Other", kind=ValueKind.OTHER),
                AttributeDescriptor(key="x", name="XMLNS", kind=ValueKind.XMLNS),
                AttributeDescriptor(key="f", name="Force", kind=ValueKind.ON_OFF),
            ),
        )
        assert accessor_calls(element) == [
            "elem.any(42)",
            "elem.other(42)",
            'elem.xmlns("http://www.w3.org/2000/svg")',
            "elem.force(True)",
            "elem.force(False)",
        ]

    def test_custom_tag_constructor(self):
        element = make_element("Elem", custom_tag=True)
        assert render_smoke_test(element)[1] == '    elem = Elem("div")'


class TestGeneratedModule:
    def test_import_line(self):
        source = generate_smoke_tests([], builder_module="app.html_gen")
        assert source.startswith(HEADER + "\n")
        assert "from app.html_gen import *  # noqa: F401,F403" in source

    def test_one_test_per_element(self):
        table = build_element_table()
        source = generate_smoke_tests(table)
        compile(source, "html_gen_test.py", "exec")
        for element in table:
            assert source.count(f"\ndef test_{element.name}():\n") == 1
