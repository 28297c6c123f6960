"""Field extraction for directive docstrings.

A directive docstring looks like::

    directiveFoo
    Description: does a thing.
     continued here.
    Syntax: Foo on|off
    Default: "off"
    ---
    Note: free text, copied into the document body.

Lines before the ``---`` marker are parsed into the recognized fields, and
everything after it becomes the body.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from .errors import UnknownFieldError
from .utils import logger, rfc3339

FIELD_SEPARATOR = ': '
BODY_MARKER = '---'


class Field(Enum):
    DESCRIPTION = 'Description'
    SYNTAX = 'Syntax'
    DEFAULT = 'Default'

    @classmethod
    def from_key(cls, key: str) -> Optional['Field']:
        for field in cls:
            if field.value == key:
                return field
        return None


@dataclass
class DirectiveRecord:
    name: str
    description: str = ''
    syntax: str = ''
    default: str = ''
    date: str = ''
    last_modification: str = ''
    content: str = ''

    def append(self, field: Field, value: str):
        if field is Field.DESCRIPTION:
            self.description += value
        elif field is Field.SYNTAX:
            self.syntax += value
        elif field is Field.DEFAULT:
            self.default += value

    def template_context(self) -> Dict[str, str]:
        return {
            'Name': self.name,
            'Description': self.description,
            'Syntax': self.syntax,
            'Default': self.default,
            'Date': self.date,
            'LastModification': self.last_modification,
            'Content': self.content,
        }


def decorate_note(line: str) -> str:
    """Bold every ``Note:`` marker on the line."""
    return line.replace('Note:', '**Note:**')


def parse_directive(name: str, doc: str, *, prefix: str = 'directive',
                    timestamp: Optional[datetime] = None, date: str = '') -> DirectiveRecord:
    """Build a DirectiveRecord from a directive docstring.

    Raises UnknownFieldError when a line names an unrecognized key before any
    field has been established.
    """
    record = DirectiveRecord(name=name, date=date, last_modification=rfc3339(timestamp))

    # split on \n only; a final terminator does not start another line
    lines = doc.split('\n')
    if lines[-1] == '':
        lines.pop()
    lines = [line.rstrip() for line in lines]
    current: Optional[Field] = None
    body_start = len(lines)

    for i, line in enumerate(lines):
        if line.startswith(prefix):
            continue
        if not line.strip():
            continue
        if line.startswith(BODY_MARKER):
            body_start = i + 1
            break

        key, sep, value = line.partition(FIELD_SEPARATOR)
        if not sep:
            if current is None:
                raise UnknownFieldError(line.strip(), directive=name)
            record.append(current, ' ' + line)
            continue

        field = Field.from_key(key)
        if field is not None:
            record.append(field, value)
            current = field
        elif current is not None:
            # unrecognized key after a known one: its value belongs to the current field
            logger.debug("%s: treating %r as part of %s", name, key, current.value)
            record.append(current, value)
        else:
            raise UnknownFieldError(key, directive=name)

    for line in lines[body_start:]:
        record.content += decorate_note(line) + '\n'

    return record
