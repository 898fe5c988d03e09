"""Go source parsing.

Wraps the tree-sitter Go grammar and reduces its syntax tree to the plain
declaration records in `struct2schema.core.models`. Doc comments are attached
the way the Go toolchain attaches them: the comment group that ends on the
line directly above a declaration, where a group is a run of comments with
no blank line between them.
"""

from pathlib import Path
from typing import Iterator, List, Optional, Union

import structlog
import tree_sitter_go
from tree_sitter import Language, Node, Parser

from struct2schema.core.exceptions import ParseError
from struct2schema.core.models import (
    STRUCT_TYPE,
    TYPE_DECLARATION,
    Declaration,
    FieldSpec,
    TypeSpec,
)

logger = structlog.get_logger()

GO_LANGUAGE = Language(tree_sitter_go.language())

DECLARATION_KINDS = {
    "const_declaration",
    "function_declaration",
    "import_declaration",
    "method_declaration",
    TYPE_DECLARATION,
    "var_declaration",
}
TYPE_SPEC_KINDS = ("type_spec", "type_alias")


def _text(node: Node) -> str:
    return node.text.decode("utf-8")


def _line(node: Node) -> int:
    return node.start_point[0] + 1


def _first_error(node: Node) -> Optional[Node]:
    """Depth-first search for the first ERROR or MISSING node."""
    for child in node.children:
        if child.type == "ERROR" or child.is_missing:
            return child
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _struct_fields(struct_node: Node) -> List[FieldSpec]:
    field_list = next(
        (c for c in struct_node.named_children if c.type == "field_declaration_list"),
        None,
    )
    if field_list is None:
        return []

    fields = []
    for decl in field_list.named_children:
        if decl.type != "field_declaration":
            continue  # comments
        type_node = decl.child_by_field_name("type")
        fields.append(
            FieldSpec(
                names=[_text(n) for n in decl.children_by_field_name("name")],
                type_kind=type_node.type,
                type_name=_text(type_node),
                line=_line(decl),
            )
        )
    return fields


def _type_spec(node: Node) -> TypeSpec:
    name_node = node.child_by_field_name("name")
    type_node = node.child_by_field_name("type")

    spec = TypeSpec(
        name=_text(name_node) if name_node is not None else None,
        kind=type_node.type if type_node is not None else "",
        line=_line(node),
    )
    if type_node is not None and type_node.type == STRUCT_TYPE:
        spec.fields = _struct_fields(type_node)
    return spec


def _declaration(node: Node, doc: List[str]) -> Declaration:
    specs = []
    if node.type == TYPE_DECLARATION:
        specs = [
            _type_spec(child)
            for child in node.named_children
            if child.type in TYPE_SPEC_KINDS
        ]
    return Declaration(kind=node.type, line=_line(node), doc=doc, specs=specs)


def _declarations(root: Node) -> Iterator[Declaration]:
    group: List[Node] = []
    prev_end_row = -1

    for node in root.named_children:
        if node.type == "comment":
            start_row = node.start_point[0]
            if start_row == prev_end_row:
                # Trailing comment of the previous line, never a doc comment
                group = []
                continue
            if group and start_row > group[-1].end_point[0] + 1:
                group = []
            group.append(node)
            continue

        if node.type in DECLARATION_KINDS:
            doc = []
            if group and group[-1].end_point[0] + 1 == node.start_point[0]:
                doc = [_text(c) for c in group]
            yield _declaration(node, doc)

        group = []
        prev_end_row = node.end_point[0]


def parse_source(source: Union[str, bytes], filename: str = "<source>") -> List[Declaration]:
    """
    Parse Go source text into top-level declarations.

    Args:
        source: Go source code
        filename: Name used in error messages

    Returns:
        Declarations in source order

    Raises:
        ParseError: If the source has syntax errors or no package clause
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    tree = Parser(GO_LANGUAGE).parse(source)
    root = tree.root_node

    if root.has_error:
        bad = root if root.type == "ERROR" else _first_error(root)
        line = _line(bad) if bad is not None else 1
        raise ParseError(f"{filename}:{line}: syntax error")

    if not any(child.type == "package_clause" for child in root.named_children):
        raise ParseError(f"{filename}:1: expected 'package' clause")

    declarations = list(_declarations(root))
    logger.debug("Parsed file", file=filename, declarations=len(declarations))
    return declarations


def parse_file(path: Union[str, Path]) -> List[Declaration]:
    """Read and parse a Go source file."""
    path = Path(path)
    try:
        source = path.read_bytes()
    except OSError as e:
        raise ParseError(f"{path}: {e}") from e
    return parse_source(source, filename=str(path))
