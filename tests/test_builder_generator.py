"""
Tests for the builder module generator.

Generated source is checked two ways: textually (which methods each
Protocol declares, with which signature) and by executing it against the
reference runtime and inspecting what each accessor records.
"""

import pytest
from markupgen.backends.builder_generator import (
    HEADER,
    attribute_body,
    attribute_parameters,
    generate_builder_module,
    render_class,
    render_constructor,
    render_interface,
)
from markupgen.backends.naming import method_name
from markupgen.catalog import load_catalogs
from markupgen.composition import Composer
from markupgen.model import AttributeDescriptor, ElementDescriptor, StructuralKind, ValueKind
from markupgen.runtime import TextNode
from markupgen.table import build_element, build_element_table


def make_element(name, kind="container", keys=(), event_keys=(), **extra):
    entry = {
        "name": name,
        "kind": kind,
        "doc": f"defines {name.lower()}.",
        "attributes": {"keys": list(keys), "with": ["global"]},
        "events": {"keys": list(event_keys), "with": ["global"]},
    }
    entry.update(extra)
    return build_element(Composer(load_catalogs()), entry)


def load_builders(elements):
    """Execute the generated module and return its namespace."""
    source = generate_builder_module(elements)
    namespace = {"__name__": "html_gen"}
    exec(compile(source, "html_gen.py", "exec"), namespace)
    return namespace


@pytest.fixture(scope="module")
def builders():
    return load_builders(build_element_table())


def declared_methods(lines):
    return [line.strip().split("(")[0][len("def "):] for line in lines if line.strip().startswith("def ")]


class TestChildlessElement:
    """A self-closing element with src/width/height plus the global set."""

    @pytest.fixture
    def element(self):
        return make_element("Img", kind="childless", keys=["src", "width", "height"], events={})

    def test_no_structural_accessors(self, element):
        methods = declared_methods(render_interface(element))
        assert "body" not in methods
        assert "text" not in methods
        assert "_body" not in methods

    def test_one_accessor_per_attribute(self, element):
        methods = declared_methods(render_interface(element))
        expected = [method_name(attr.name) for attr in element.attributes]
        assert methods == expected + ["on"]
        assert len(element.attributes) == 20

    def test_signatures_follow_value_kind(self, element):
        source = "\n".join(render_interface(element))
        assert "def src(self, v: str) -> HTMLImg:" in source
        assert "def width(self, v: int) -> HTMLImg:" in source
        assert "def height(self, v: int) -> HTMLImg:" in source
        assert "def class_(self, *v: str) -> HTMLImg:" in source
        assert "def style(self, k: str, v: str) -> HTMLImg:" in source
        assert "def styles(self, s: Dict[str, str]) -> HTMLImg:" in source
        assert "def data_set(self, k: str, v: Any) -> HTMLImg:" in source
        assert "def spellcheck(self, v: bool) -> HTMLImg:" in source
        for attr in element.attributes:
            signature = f"def {method_name(attr.name)}(self, {attribute_parameters(attr)}) -> HTMLImg:"
            assert signature in source

    def test_constructor_is_self_closing(self, element):
        assert render_constructor(element) == [
            "def Img() -> HTMLImg:",
            '    """Img returns an HTML element that defines img."""',
            '    return _HTMLImg("img", True)',
        ]


class TestStructuralKinds:
    """Which structural accessors each kind declares."""

    def test_container(self):
        methods = declared_methods(render_interface(make_element("Div")))
        assert methods[:2] == ["body", "text"]

    def test_restricted(self):
        interface = declared_methods(render_interface(make_element("Body", kind="restricted")))
        assert "body" not in interface
        assert "text" not in interface
        assert "_body" in interface

    def test_class_implements_every_declared_method(self):
        element = make_element("A", keys=["href", "target"], event_keys=[])
        assert declared_methods(render_class(element)) == declared_methods(render_interface(element))

    def test_class_has_no_leading_blank_line(self):
        lines = render_class(make_element("Div"))
        assert lines[0] == "class _HTMLDiv(HTMLElement):"
        assert lines[1].startswith("    def ")


class TestAccessorBodies:
    """Statements generated per value kind."""

    def attr(self, kind, name="Thing", serialized_name=None):
        return AttributeDescriptor(key="thing", name=name, kind=kind, serialized_name=serialized_name)

    def test_pass_through(self):
        assert attribute_body(self.attr(ValueKind.URL)) == ['self._set_attr("thing", v)', "return self"]

    def test_serialized_name(self):
        body = attribute_body(self.attr(ValueKind.STRING, "AcceptCharset", "accept-charset"))
        assert body[0] == 'self._set_attr("accept-charset", v)'

    def test_fallback_kind_is_pass_through_any(self):
        attr = self.attr(ValueKind.OTHER)
        assert attribute_parameters(attr) == "v: Any"
        assert attribute_body(attr)[0] == 'self._set_attr("thing", v)'

    def test_style_map_uses_style_accessor(self):
        body = attribute_body(self.attr(ValueKind.STYLE_MAP), style_method="style")
        assert body == ["for k, v in s.items():", "    self.style(k, v)", "return self"]

    def test_style_map_without_style_accessor(self):
        body = attribute_body(self.attr(ValueKind.STYLE_MAP))
        assert body[1] == '    self._set_attr("style", k + ":" + v)'

    def test_xmlns(self):
        assert attribute_body(self.attr(ValueKind.XMLNS)) == ["self._xmlns = v", "return self"]


class TestGeneratedModule:
    """Executing the generated module against the reference runtime."""

    def test_header_and_imports(self):
        source = generate_builder_module([], runtime_module="app.runtime")
        assert source.startswith(HEADER + "\n")
        assert "from app.runtime import UI, EventHandler, HTMLElement, Text" in source

    def test_full_table_compiles(self):
        source = generate_builder_module(build_element_table())
        compile(source, "html_gen.py", "exec")

    def test_deterministic(self):
        table = build_element_table()
        assert generate_builder_module(table) == generate_builder_module(build_element_table())

    def test_fluent_chain(self, builders):
        a = builders["A"]().href("/home").class_("nav", "active").text("Home")
        assert a.tag_name == "a"
        assert a.attributes == {"href": "/home", "class": "nav active"}
        assert isinstance(a.child_nodes[0], TextNode)
        assert a.child_nodes[0].value == "Home"

    def test_value_shapes(self, builders):
        div = builders["Div"]()
        div.spellcheck(False).data_set("foo", 42).aria("label", "x").attr("x-y", 1)
        div.styles({"color": "pink"}).style("margin", "0")
        assert div.attributes == {
            "spellcheck": "false",
            "data-foo": "42",
            "aria-label": "x",
            "x-y": 1,
            "style": "color:pink;margin:0;",
        }

    def test_boolean_data_and_aria_values_are_lowercase(self, builders):
        div = builders["Div"]().data_set("open", True).aria("hidden", False)
        assert div.attributes == {"data-open": "true", "aria-hidden": "false"}

    def test_xmlns_not_stored_as_attribute(self, builders):
        elem = builders["Elem"]("custom-tag").xmlns("http://www.w3.org/2000/svg")
        assert elem.tag_name == "custom-tag"
        assert elem.namespace == "http://www.w3.org/2000/svg"
        assert "xmlns" not in elem.attributes

    def test_self_closing(self, builders):
        img = builders["Img"]()
        assert img.self_closing
        assert not hasattr(img, "body")
        assert not hasattr(img, "text")

    def test_restricted_body(self, builders):
        body = builders["Body"]()._body(builders["Div"]())
        assert not hasattr(body, "text")
        assert len(body.child_nodes) == 1

    def test_textarea_text_sets_value(self, builders):
        textarea = builders["Textarea"]().text("hello")
        assert textarea.attributes == {"value": "hello"}
        assert textarea.child_nodes == []

    def test_events(self, builders):
        def handler(ctx, e):
            pass

        a = builders["A"]().on_click(handler).on("custom", handler, "scope")
        bindings = a.event_handlers
        assert bindings["click"].handler is handler
        assert bindings["custom"].scope == ("scope",)

    def test_documentation_is_escaped(self):
        element = ElementDescriptor(
            name="Odd",
            kind=StructuralKind.CONTAINER,
            doc='has "quotes", a \\ backslash\nand a second line.',
            attributes=(AttributeDescriptor(key="x", name="X", kind=ValueKind.STRING, doc='say """hi"""'),),
        )
        load_builders([element])
