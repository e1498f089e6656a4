"""
Error types raised by the generator.

All of them describe a problem in the static tables or in the configuration,
never a runtime condition: generation stops at the first one.
"""


class MarkupgenError(Exception):
    """Base class for generator errors."""
    pass


class UnresolvedCatalogKey(MarkupgenError, KeyError):
    """Raised when an attribute or event key has no descriptor in its catalog."""

    def __init__(self, catalog: str, key: str):
        super().__init__(f"unknown key {key!r} in catalog {catalog!r}")
        self.catalog = catalog
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.args[0]


class TableError(MarkupgenError):
    """Raised when an element table entry is malformed."""
    pass


class ConfigError(MarkupgenError):
    """Raised when the generator configuration is invalid."""
    pass
