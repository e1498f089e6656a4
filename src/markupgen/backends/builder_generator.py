"""
Builder module generator.

Renders the element table as a Python module (html_gen.py) holding, for
every element:

    - HTML<Name>:   a Protocol listing every accessor of the element
    - <Name>():     the constructor
    - _HTML<Name>:  the concrete builder, an HTMLElement subclass

Every accessor records exactly one thing on the element (an attribute, the
children, the namespace or an event handler) and returns the element, so
calls chain:

    A().href("/home").class_("nav", "active").text("Home")
"""

from typing import List, Optional, Sequence

from markupgen.backends.naming import (
    class_name,
    docstring,
    interface_name,
    method_name,
    python_string,
    sentence,
)
from markupgen.model import (
    AttributeDescriptor,
    ElementDescriptor,
    EventDescriptor,
    StructuralKind,
    ValueKind,
)

HEADER = "# Code generated by markupgen; DO NOT EDIT."

DEFAULT_RUNTIME_MODULE = "markupgen.runtime"

INDENT = "    "

# Parameter annotation of the single-value accessors
PASS_THROUGH_TYPES = {
    ValueKind.STRING: "str",
    ValueKind.URL: "str",
    ValueKind.INT: "int",
    ValueKind.FLOAT: "float",
    ValueKind.BOOL: "bool",
    ValueKind.ANY: "Any",
}

# Markup text of a data-/aria- value; booleans render as true/false
VALUE_TEXT = "str(v).lower() if isinstance(v, bool) else str(v)"


# =========================================================================
# ACCESSOR SHAPES
# =========================================================================


def attribute_parameters(attr: AttributeDescriptor) -> str:
    """Parameter list (after self) of the accessor generated for attr."""
    kind = attr.kind
    if kind in (ValueKind.DATA_VALUE, ValueKind.ARIA_VALUE):
        return "k: str, v: Any"
    if kind == ValueKind.ATTR_VALUE:
        return "n: str, v: Any"
    if kind == ValueKind.STYLE:
        return "k: str, v: str"
    if kind == ValueKind.STYLE_MAP:
        return "s: Dict[str, str]"
    if kind in (ValueKind.BOOL_FORCE, ValueKind.ON_OFF):
        return "v: bool"
    if kind == ValueKind.STRING_CLASS:
        return "*v: str"
    if kind == ValueKind.XMLNS:
        return "v: str"
    return f"v: {PASS_THROUGH_TYPES.get(kind, 'Any')}"


def attribute_body(attr: AttributeDescriptor, style_method: Optional[str] = None) -> List[str]:
    """
    Statements of the accessor generated for attr, without indentation.

    Args:
        attr: The attribute
        style_method: Name of the element's style accessor, used by the
            style map accessor to apply one declaration at a time
    """
    kind = attr.kind
    name = python_string(attr.attr_name)

    if kind == ValueKind.DATA_VALUE:
        body = [f'self._set_attr("data-" + k, {VALUE_TEXT})']
    elif kind == ValueKind.ARIA_VALUE:
        body = [f'self._set_attr("aria-" + k, {VALUE_TEXT})']
    elif kind == ValueKind.ATTR_VALUE:
        body = ["self._set_attr(n, v)"]
    elif kind == ValueKind.STYLE:
        body = ['self._set_attr("style", k + ":" + v)']
    elif kind == ValueKind.STYLE_MAP:
        if style_method:
            apply = f"self.{style_method}(k, v)"
        else:
            apply = 'self._set_attr("style", k + ":" + v)'
        body = ["for k, v in s.items():", INDENT + apply]
    elif kind == ValueKind.ON_OFF:
        body = [f'self._set_attr({name}, "on" if v else "off")']
    elif kind == ValueKind.BOOL_FORCE:
        body = [f'self._set_attr({name}, "true" if v else "false")']
    elif kind == ValueKind.STRING_CLASS:
        body = [f'self._set_attr({name}, " ".join(v))']
    elif kind == ValueKind.XMLNS:
        body = ["self._xmlns = v"]
    else:
        body = [f"self._set_attr({name}, v)"]

    body.append("return self")
    return body


def _style_method(element: ElementDescriptor) -> Optional[str]:
    for attr in element.attributes:
        if attr.kind == ValueKind.STYLE:
            return method_name(attr.name)
    return None


# =========================================================================
# METHOD RENDERING
# =========================================================================


def _method(lines: List[str], name: str, params: str, returns: str,
            doc: str = "", body: Optional[Sequence[str]] = None) -> None:
    """Append one method. Without a body it renders as a Protocol stub."""
    signature = f"self, {params}" if params else "self"
    lines.append("")
    lines.append(f"{INDENT}def {name}({signature}) -> {returns}:")
    if body is None:
        if doc:
            lines.append(docstring(sentence(doc), INDENT * 2))
        lines.append(f"{INDENT * 2}...")
        return
    for statement in body:
        lines.append(f"{INDENT * 2}{statement}")


def _structural_methods(lines: List[str], element: ElementDescriptor, returns: str, stub: bool) -> None:
    if element.kind == StructuralKind.CONTAINER:
        _method(
            lines, "body", "*elems: UI", returns,
            doc="sets the content of the element.",
            body=None if stub else ["self._set_children(*elems)", "return self"],
        )
        if element.text_attribute:
            text_body = [f"self._set_attr({python_string(element.text_attribute)}, v)", "return self"]
        else:
            text_body = ["return self.body(Text(v))"]
        _method(
            lines, "text", "v: Any", returns,
            doc="sets the content of the element with a text node containing the stringified given value.",
            body=None if stub else text_body,
        )
    elif element.kind == StructuralKind.RESTRICTED:
        _method(
            lines, "_body", "*elems: UI", returns,
            body=None if stub else ["self._set_children(*elems)", "return self"],
        )


def _event_methods(lines: List[str], events: Sequence[EventDescriptor], returns: str, stub: bool) -> None:
    _method(
        lines, "on", "event: str, h: EventHandler, *scope: Any", returns,
        doc="registers the given event handler to the specified event.",
        body=None if stub else ["self._set_event_handler(event, h, *scope)", "return self"],
    )
    for event in events:
        bound = python_string(event.event_name)
        _method(
            lines, method_name(event.name), "h: EventHandler, *scope: Any", returns,
            doc=event.doc,
            body=None if stub else [f"self._set_event_handler({bound}, h, *scope)", "return self"],
        )


# =========================================================================
# ELEMENT RENDERING
# =========================================================================


def render_interface(element: ElementDescriptor) -> List[str]:
    """Protocol describing every accessor of the element."""
    iface = interface_name(element.name)
    lines = [f"class {iface}(UI, Protocol):"]
    lines.append(docstring(f'{iface} is the interface that describes a "{element.tag}" HTML element.', INDENT))

    _structural_methods(lines, element, iface, stub=True)
    for attr in element.attributes:
        _method(lines, method_name(attr.name), attribute_parameters(attr), iface, doc=attr.doc)
    _event_methods(lines, element.events, iface, stub=True)
    return lines


def render_constructor(element: ElementDescriptor) -> List[str]:
    iface = interface_name(element.name)
    concrete = class_name(element.name)
    self_closing = "True" if element.is_self_closing else "False"

    if element.custom_tag:
        lines = [f"def {element.name}(tag: str) -> {iface}:"]
        tag = "tag"
    else:
        lines = [f"def {element.name}() -> {iface}:"]
        tag = python_string(element.tag)

    lines.append(docstring(f"{element.name} returns an HTML element that {element.doc}", INDENT))
    lines.append(f"{INDENT}return {concrete}({tag}, {self_closing})")
    return lines


def render_class(element: ElementDescriptor) -> List[str]:
    """Concrete builder implementing the element's Protocol."""
    iface = interface_name(element.name)
    style_method = _style_method(element)
    lines = [f"class {class_name(element.name)}(HTMLElement):"]

    _structural_methods(lines, element, iface, stub=False)
    for attr in element.attributes:
        _method(
            lines, method_name(attr.name), attribute_parameters(attr), iface,
            body=attribute_body(attr, style_method),
        )
    _event_methods(lines, element.events, iface, stub=False)

    # No docstring here, so the first method follows the class line directly.
    if len(lines) > 1 and lines[1] == "":
        del lines[1]
    return lines


def generate_builder_module(elements: Sequence[ElementDescriptor],
                            runtime_module: str = DEFAULT_RUNTIME_MODULE) -> str:
    """
    Generate the builder module for an element table.

    Args:
        elements: Resolved element table, rendered in order
        runtime_module: Module providing UI, EventHandler, HTMLElement and Text

    Returns:
        Python source of the builder module
    """
    lines = [
        HEADER,
        "",
        '"""',
        "Builders for every element of the markup element table.",
        '"""',
        "",
        "from __future__ import annotations",
        "",
        "from typing import Any, Dict, Protocol",
        "",
        f"from {runtime_module} import UI, EventHandler, HTMLElement, Text",
    ]

    for element in elements:
        for block in (render_interface(element), render_constructor(element), render_class(element)):
            lines.append("")
            lines.append("")
            lines.extend(block)

    lines.append("")
    return "\n".join(lines)


__all__ = [
    "DEFAULT_RUNTIME_MODULE",
    "HEADER",
    "attribute_body",
    "attribute_parameters",
    "generate_builder_module",
    "render_class",
    "render_constructor",
    "render_interface",
]
