"""
Core Generator Model Objects

Defines the fundamental data structures of the element table.

These are pure data classes representing:
    - Attributes (settable properties of an element)
    - Events (named callback registration points)
    - Elements (one generated builder each)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about the target language of the backends
        - Are immutable once built
        - Are fully serializable
        - Represent structure, not behavior
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ValueKind(Enum):
    """
    Tag selecting which accessor shape is generated for an attribute.

    The value of each member is the literal tag used in the catalogs.

    Anything the catalogs use that is not listed here parses as OTHER,
    which generates the same pass-through accessor as ANY.
    """

    # Pass-through values
    STRING = "string"
    URL = "url"
    INT = "int"
    FLOAT = "float64"
    ANY = "any"
    BOOL = "bool"

    # Values rewritten before storage
    BOOL_FORCE = "bool|force"
    ON_OFF = "on/off"
    STRING_CLASS = "string|class"
    STYLE = "style"
    STYLE_MAP = "style|map"

    # Caller-named attributes
    ATTR_VALUE = "attr|value"
    DATA_VALUE = "data|value"
    ARIA_VALUE = "aria|value"

    # Stored outside the attribute store
    XMLNS = "xmlns"

    OTHER = "other"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER


class StructuralKind(Enum):
    """Whether a generated builder accepts children."""
    CONTAINER = "container"      # public body() and text()
    RESTRICTED = "restricted"    # internal _body() only
    CHILDLESS = "childless"      # self-closing, no children


@dataclass(frozen=True)
class AttributeDescriptor:
    """
    Describes one settable attribute.

    Properties:
        key:
            Lookup identity, unique within its catalog
            Examples: "href", "aria-*", "marker-start"

        name:
            Display name, the identifier the generated accessor derives from
            Examples: "Href", "Aria", "MarkerStart"

        kind:
            ValueKind selecting the accessor shape

        doc:
            Human-readable description

        serialized_name:
            Literal markup name when it differs from the lower-cased
            display name (e.g. "accept-charset" for AcceptCharset)
    """

    key: str
    name: str
    kind: ValueKind
    doc: str = ""
    serialized_name: Optional[str] = None

    @property
    def attr_name(self) -> str:
        """Name the value is stored under in the attribute store."""
        if self.serialized_name:
            return self.serialized_name
        return self.name.lower()


@dataclass(frozen=True)
class EventDescriptor:
    """
    Describes one event callback.

    Properties:
        key: Lookup identity, unique within its catalog (e.g. "onclick")
        name: Display name (e.g. "OnClick")
        doc: Human-readable description, empty for most SVG events
    """

    key: str
    name: str
    doc: str = ""

    @property
    def event_name(self) -> str:
        """
        Event string bound by the generated accessor.

        The lower-cased display name without its "on" prefix:
            OnClick -> "click", OnDblClick -> "dblclick"
        """
        name = self.name.lower()
        if name.startswith("on"):
            name = name[2:]
        return name


@dataclass(frozen=True)
class ElementDescriptor:
    """
    Describes one markup element, i.e. one generated builder.

    Properties:
        name:
            Unique element identifier, also the constructor name
            Examples: "A", "Div", "SVGcircle"

        kind:
            StructuralKind of the element

        doc:
            Human-readable description

        attributes:
            Resolved attributes, sorted by display name

        events:
            Resolved events, sorted by display name

        custom_tag:
            The markup tag is given by the caller at construction time
            instead of being derived from the name (generic elements)

        text_attribute:
            When set, the text accessor stores its value under this
            attribute instead of adding a text child (e.g. "value")

    INVARIANT:
        attributes and events are sorted by display name when the element
        is built and stay so through every backend.
    """

    name: str
    kind: StructuralKind
    doc: str
    attributes: Tuple[AttributeDescriptor, ...] = ()
    events: Tuple[EventDescriptor, ...] = ()
    custom_tag: bool = False
    text_attribute: Optional[str] = None

    @property
    def tag(self) -> str:
        """Markup tag of the element."""
        return self.name.lower()

    @property
    def is_self_closing(self) -> bool:
        return self.kind == StructuralKind.CHILDLESS
