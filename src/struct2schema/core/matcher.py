"""Annotation matching for candidate declarations."""

from struct2schema.core.models import Declaration
from struct2schema.settings import PATTERN


def matches(declaration: Declaration, pattern: str = PATTERN) -> bool:
    """
    Check whether a declaration opts into schema generation.

    Only type declarations qualify. The table struct must carry the marker
    somewhere in the doc comment directly above its code block.
    """
    if not declaration.is_type_declaration:
        return False
    if not declaration.doc:
        return False
    return any(pattern in line for line in declaration.doc)
