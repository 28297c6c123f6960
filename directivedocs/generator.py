"""Directive documentation pipeline.

DirectiveDocGenerator ties the pieces together: read the source, scan its
top-level functions, extract each directive docstring, render it and write
one Markdown file per directive.

Usage:
  gen = DirectiveDocGenerator(GeneratorConfig(source_path='directives.py', dest_dir='docs'))
  written = gen.generate()

Every error aborts the run. A directive is parsed and rendered before its
file is created, so a failing directive leaves no file behind; documents
written for earlier directives are kept.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, List, Optional

import jinja2

from .errors import OutputError, SourceParseError
from .extractor import DirectiveRecord, parse_directive
from .parser import scan_declarations, select_directives
from .renderer import load_template, render_directive
from .utils import logger

DEFAULT_SOURCE = './seclang/directives.py'
DEFAULT_DEST_DIR = './content/docs/seclang/directives'
DEFAULT_PREFIX = 'directive'


@dataclass
class GeneratorConfig:
    source_path: str = DEFAULT_SOURCE
    dest_dir: str = DEFAULT_DEST_DIR
    template_path: Optional[str] = None
    template_text: Optional[str] = None
    prefix: str = DEFAULT_PREFIX
    date: str = ''
    dry_run: bool = False


class DirectiveDocGenerator:
    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._template: Optional[jinja2.Template] = None

    @property
    def template(self) -> jinja2.Template:
        if self._template is None:
            self._template = load_template(path=self.config.template_path, text=self.config.template_text)
        return self._template

    def reset_template(self):
        self._template = None

    def read_source(self) -> str:
        path = self.config.source_path
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise SourceParseError(os.path.basename(path), None, f"not valid UTF-8: {e}") from e
        except OSError as e:
            raise OutputError(path, e) from e

    def iter_records(self, source: Optional[str] = None, now: Optional[datetime] = None) -> Iterator[DirectiveRecord]:
        """Yield a record per documented directive, in source order.

        Records are extracted lazily, so a failing docstring stops iteration
        after the earlier records have been handed out.
        """
        if source is None:
            source = self.read_source()
        if now is None:
            now = datetime.now()
        declarations = scan_declarations(source, filename=os.path.basename(self.config.source_path))
        for name, decl in select_directives(declarations, prefix=self.config.prefix):
            yield parse_directive(name, decl.doc, prefix=self.config.prefix, timestamp=now, date=self.config.date)

    def parse(self, source: Optional[str] = None, now: Optional[datetime] = None) -> List[DirectiveRecord]:
        """Extract a record for every documented directive, in source order."""
        return list(self.iter_records(source, now))

    def output_path(self, name: str) -> str:
        return os.path.join(self.config.dest_dir, f"{name}.md")

    def write(self, record: DirectiveRecord, text: str) -> str:
        path = self.output_path(record.name)
        try:
            os.makedirs(self.config.dest_dir, exist_ok=True)
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(text)
        except OSError as e:
            raise OutputError(path, e) from e
        return path

    def generate(self, source: Optional[str] = None, now: Optional[datetime] = None) -> List[str]:
        """Run the whole pipeline and return the paths written, in order."""
        template = self.template

        written = []
        for record in self.iter_records(source, now):
            text = render_directive(template, record)
            if self.config.dry_run:
                path = self.output_path(record.name)
                logger.info("would write %s", path)
            else:
                path = self.write(record, text)
                logger.info("wrote %s", path)
            written.append(path)

        logger.info("%d directive document(s) from %s", len(written), self.config.source_path)
        return written
