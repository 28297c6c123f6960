"""directivedocs - Markdown documentation for configuration directives

This package provides:
- DirectiveDocGenerator: read a directives module, extract each directive's
  docstring fields and write one Markdown file per directive
- parse_directive: the docstring field extractor
- scan_declarations / select_directives: AST scanning of top-level functions
- load_template / render_directive: Jinja2 rendering of a DirectiveRecord

The directives source is parsed with `ast` only; it is never imported.
"""

from .errors import DirectiveDocsError, OutputError, SourceParseError, TemplateError, UnknownFieldError
from .extractor import DirectiveRecord, Field, decorate_note, parse_directive
from .generator import DirectiveDocGenerator, GeneratorConfig
from .parser import Declaration, scan_declarations, select_directives
from .renderer import load_template, render_directive

__all__ = [
    "DirectiveDocGenerator",
    "GeneratorConfig",
    "DirectiveRecord",
    "Field",
    "Declaration",
    "parse_directive",
    "decorate_note",
    "scan_declarations",
    "select_directives",
    "load_template",
    "render_directive",
    "DirectiveDocsError",
    "SourceParseError",
    "UnknownFieldError",
    "TemplateError",
    "OutputError",
]
__version__ = "0.1.0"
