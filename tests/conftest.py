import textwrap
from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2023, 5, 1, 12, 30, 0, tzinfo=timezone.utc)

DIRECTIVES_SOURCE = textwrap.dedent('''
    """Directive handlers."""


    def directiveFoo(options):
        """directiveFoo
        Description: does a thing.
        Syntax: Foo on|off
        Default: "off"
        ---
        Note: use with care.
        """


    def helper():
        """Not a directive."""


    def directiveUndocumented(options):
        return None


    def directiveBar(options):
        """"""
''')


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "directives.py"
    path.write_text(DIRECTIVES_SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def dest_dir(tmp_path):
    return tmp_path / "out"
