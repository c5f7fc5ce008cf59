"""Pure-Python descriptions of HDF5 datatypes, string values, arrays, shapes, dataspaces, filters, references, plugins and error stacks."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "descriptor",
    "dim",
    "errors",
    "filters",
    "plugins",
    "references",
    "spaces",
    "strings",
    "typeclasses",
]