"""Exceptions raised by the directive documentation pipeline.

Every failure is fatal for the current run; the CLI reports the message
and exits non-zero.
"""

from typing import Optional


class DirectiveDocsError(Exception):
    """Base class for all generator failures."""


class SourceParseError(DirectiveDocsError):
    """The directives source file is not valid Python."""

    def __init__(self, filename: str, lineno: Optional[int], msg: str):
        self.filename = filename
        self.lineno = lineno
        self.msg = msg
        where = f"{filename}:{lineno}" if lineno else filename
        super().__init__(f"cannot parse {where}: {msg}")


class UnknownFieldError(DirectiveDocsError):
    """A docstring line names a field that is not recognized."""

    def __init__(self, key: str, directive: Optional[str] = None):
        self.key = key
        self.directive = directive
        message = f"unknown field {key!r}"
        if directive:
            message += f" in directive {directive!r}"
        super().__init__(message)


class TemplateError(DirectiveDocsError):
    """The template could not be loaded, parsed or rendered."""


class OutputError(DirectiveDocsError):
    """Reading the source or writing a document failed."""

    def __init__(self, path: str, error: BaseException):
        self.path = path
        self.error = error
        super().__init__(f"I/O error on {path}: {error}")
