import textwrap

import pytest

from directivedocs.errors import SourceParseError
from directivedocs.parser import clean_docstring, scan_declarations, select_directives

from .conftest import DIRECTIVES_SOURCE


def test_scan_reports_top_level_functions_in_order():
    decls = scan_declarations(DIRECTIVES_SOURCE)
    assert [d.name for d in decls] == ["directiveFoo", "helper", "directiveUndocumented", "directiveBar"]
    assert decls[0].doc.startswith("directiveFoo\nDescription: does a thing.")
    assert decls[2].doc is None
    assert decls[3].doc == ""


def test_scan_skips_nested_functions_and_methods():
    src = textwrap.dedent('''
        class Handlers:
            def directiveMethod(self):
                """Description: method"""

        def outer():
            def directiveInner():
                """Description: inner"""
            return directiveInner

        if True:
            def directiveConditional():
                """Description: conditional"""
    ''')
    assert [d.name for d in scan_declarations(src)] == ["outer"]


def test_scan_includes_async_functions():
    src = textwrap.dedent('''
        async def directiveAsync():
            """Description: async"""
    ''')
    (decl,) = scan_declarations(src)
    assert decl.name == "directiveAsync"
    assert decl.is_async
    assert decl.doc == "Description: async"


def test_docstring_indentation_is_cleaned():
    src = textwrap.dedent('''
        def directiveFoo():
            """
            Description: a
              b
            """
    ''')
    (decl,) = scan_declarations(src)
    assert decl.doc == "Description: a\n  b"


def test_syntax_error_raises_source_parse_error():
    with pytest.raises(SourceParseError) as exc:
        scan_declarations("def broken(:\n    pass\n", filename="directives.py")
    assert exc.value.filename == "directives.py"
    assert exc.value.lineno == 1
    assert "directives.py" in str(exc.value)


def test_null_byte_raises_source_parse_error():
    with pytest.raises(SourceParseError):
        scan_declarations("x = 1\x00\n")


def test_select_directives_filters_and_strips_prefix():
    selected = list(select_directives(scan_declarations(DIRECTIVES_SOURCE)))
    assert [(name, d.name) for name, d in selected] == [("Foo", "directiveFoo"), ("Bar", "directiveBar")]


def test_select_directives_custom_prefix():
    src = textwrap.dedent('''
        def secRuleEngine():
            """Description: engine"""

        def directiveFoo():
            """Description: foo"""
    ''')
    selected = list(select_directives(scan_declarations(src), prefix="sec"))
    assert [name for name, _ in selected] == ["RuleEngine"]


def test_select_directives_skips_bare_prefix():
    src = textwrap.dedent('''
        def directive():
            """Description: nothing"""
    ''')
    assert list(select_directives(scan_declarations(src))) == []


def test_docstring_keeps_tabs_and_drops_trailing_whitespace():
    src = textwrap.dedent('''
        def directiveFoo():
            """directiveFoo
            Syntax: Foo\ton|off   
            Default: off
            """
    ''')
    (decl,) = scan_declarations(src)
    assert decl.doc == "directiveFoo\nSyntax: Foo\ton|off\nDefault: off"


def test_clean_docstring():
    assert clean_docstring(None) is None
    assert clean_docstring("") == ""
    assert clean_docstring("  first  \n\n    a\n      b\n    ") == "first\n\na\n  b"
