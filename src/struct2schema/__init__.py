"""Generate CREATE TABLE statements from annotated Go structs."""

__version__ = "0.1.0"
