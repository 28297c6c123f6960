"""Template loading and rendering for directive documents.

Templates are Jinja2 with autoescaping on, so values are HTML-escaped while
they are substituted. The rendered document is Markdown, so the entities are
decoded again before the text is handed back to the writer.
"""

import html
import os
from typing import Optional

import jinja2

from .errors import TemplateError
from .extractor import DirectiveRecord

DEFAULT_TEMPLATE = 'directive.md'


def _environment(loader: Optional[jinja2.BaseLoader] = None) -> jinja2.Environment:
    return jinja2.Environment(
        loader=loader,
        autoescape=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )


def load_template(path: Optional[str] = None, text: Optional[str] = None) -> jinja2.Template:
    """Load the directive template.

    `text` wins over `path`; with neither, the template bundled with the
    package is used.
    """
    try:
        if text is not None:
            return _environment().from_string(text)
        if path is not None:
            directory, name = os.path.split(os.path.abspath(path))
            return _environment(jinja2.FileSystemLoader(directory)).get_template(name)
        return _environment(jinja2.PackageLoader('directivedocs', 'templates')).get_template(DEFAULT_TEMPLATE)
    except jinja2.TemplateSyntaxError as e:
        raise TemplateError(f"template syntax error in {e.filename or '<string>'}:{e.lineno}: {e.message}") from e
    except jinja2.TemplateNotFound as e:
        raise TemplateError(f"template not found: {path or e.name}") from e
    except jinja2.TemplateError as e:
        raise TemplateError(f"cannot load template: {e}") from e


def render_directive(template: jinja2.Template, record: DirectiveRecord) -> str:
    try:
        rendered = template.render(**record.template_context())
    except jinja2.TemplateError as e:
        raise TemplateError(f"cannot render directive {record.name!r}: {e}") from e
    return html.unescape(rendered)
