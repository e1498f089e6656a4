"""
Identifier rules shared by the Python backends.

Display names in the catalogs are CamelCase (AcceptCharset, OnDblClick,
XMLNS). Generated methods use snake_case:

    AcceptCharset           -> accept_charset
    XMLNS                   -> xmlns
    HTTPEquiv               -> http_equiv
    Conditional_processing  -> conditional_processing
    Class                   -> class_      (Python keyword)
"""

import keyword
import re

_ACRONYM_RE = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_RE = re.compile(r"([a-z0-9])([A-Z])")
_INVALID_RE = re.compile(r"[^0-9A-Za-z_]")


def snake_case(name: str) -> str:
    name = _INVALID_RE.sub("_", name)
    name = _ACRONYM_RE.sub(r"\1_\2", name)
    name = _WORD_RE.sub(r"\1_\2", name)
    return name.lower()


def method_name(display_name: str) -> str:
    """Python method name generated for an attribute or event display name."""
    name = snake_case(display_name)
    if not name or name[0].isdigit():
        name = "_" + name
    if keyword.iskeyword(name):
        name += "_"
    return name


def interface_name(element_name: str) -> str:
    """Name of the Protocol describing an element builder."""
    return f"HTML{element_name}"


def class_name(element_name: str) -> str:
    """Name of the concrete builder class."""
    return f"_HTML{element_name}"


def smoke_test_name(element_name: str) -> str:
    """Name of the generated smoke test (element names are unique as-is)."""
    return f"test_{element_name}"


def docstring(text: str, indent: str) -> str:
    """
    Render text as a triple-quoted docstring at the given indentation.

    Backslashes and double quotes are escaped so any documentation string
    yields valid Python; embedded newlines become docstring lines.
    """
    text = text.strip().replace("\\", "\\\\").replace('"', '\\"')
    lines = text.split("\n")
    if len(lines) == 1:
        return f'{indent}"""{lines[0]}"""'
    body = "\n".join(f"{indent}{line}" if line.strip() else "" for line in lines)
    return f'{indent}"""\n{body}\n{indent}"""'


def sentence(text: str) -> str:
    """Capitalize the first letter of a documentation fragment."""
    text = text.strip()
    return text[:1].upper() + text[1:]


def python_string(value: str) -> str:
    """Double-quoted Python string literal for value."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'
