# directivedocs/parser.py
#
# Source scanning for directive declarations. The module is parsed with `ast`
# and never imported or executed; only module-level functions are reported,
# in source order, together with their cleaned docstrings.

import ast
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import SourceParseError
from .utils import logger


@dataclass
class Declaration:
    name: str
    doc: Optional[str]
    lineno: int
    is_async: bool = False


class DeclarationVisitor(ast.NodeVisitor):
    """Collect module-level function declarations.

    Only the statements of the module body are visited; nested functions,
    classes and their methods are not descended into.
    """

    def __init__(self):
        self.declarations: List[Declaration] = []

    def visit_Module(self, node: ast.Module):
        for stmt in node.body:
            if isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef)):
                self.visit(stmt)
            # ignore other top-level constructs

    def visit_FunctionDef(self, node: ast.FunctionDef):
        self.declarations.append(self._declaration(node))

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef):
        self.declarations.append(self._declaration(node, is_async=True))

    def _declaration(self, node, is_async: bool = False) -> Declaration:
        return Declaration(
            name=node.name,
            doc=clean_docstring(ast.get_docstring(node, clean=False)),
            lineno=node.lineno,
            is_async=is_async,
        )


def clean_docstring(doc: Optional[str]) -> Optional[str]:
    """Strip the docstring indentation the way a comment group is normalized.

    Trailing whitespace is removed from every line and leading and trailing
    blank lines are dropped. Unlike inspect.cleandoc, tabs are left as written.
    """
    if doc is None:
        return None
    lines = [line.rstrip() for line in doc.split('\n')]
    lines[0] = lines[0].lstrip()
    indents = [len(line) - len(line.lstrip()) for line in lines[1:] if line]
    margin = min(indents) if indents else 0
    lines[1:] = [line[margin:] for line in lines[1:]]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return '\n'.join(lines)


def scan_declarations(source: str, filename: str = '<directives>') -> List[Declaration]:
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as e:
        raise SourceParseError(filename, e.lineno, e.msg) from e
    except ValueError as e:
        # null bytes in the source
        raise SourceParseError(filename, None, str(e)) from e
    v = DeclarationVisitor()
    v.visit(tree)
    logger.debug("found %d top-level functions in %s", len(v.declarations), filename)
    return v.declarations


def select_directives(declarations: Iterable[Declaration],
                      prefix: str = 'directive') -> Iterator[Tuple[str, Declaration]]:
    """Yield (directive_name, declaration) for every documented directive function."""
    for decl in declarations:
        if not decl.name.startswith(prefix):
            continue
        if decl.doc is None:
            logger.debug("skipping %s (line %d): no docstring", decl.name, decl.lineno)
            continue
        name = decl.name[len(prefix):]
        if not name:
            logger.debug("skipping %s (line %d): no directive name after prefix", decl.name, decl.lineno)
            continue
        yield name, decl
