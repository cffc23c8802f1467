"""
Tests for per-file reflection.

The script tables mirror the ones coverage tools have historically
been checked against.
"""

import pytest
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scriptreflect import ReflectedScript, ReflectConfig, ParseError


@pytest.fixture
def make_script(tmp_path):
    """Write a mock script to disk and reflect it."""
    def _make(source, name="mock.js", **kwargs):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return ReflectedScript(str(path), **kwargs)
    return _make


EXECUTABLE_LINES = [
    ("lines_inside_functions",
     "function f(a, b) {\n"
     "    let x = a;\n"
     "    let y = b;\n"
     "    return x + y;\n"
     "}\n"
     "\n"
     "var z = f(1, 2);\n",
     [2, 3, 4, 7]),
    ("lines_inside_anonymous_functions",
     "var z = (function f(a, b) {\n"
     "     let x = a;\n"
     "     let y = b;\n"
     "     return x + y;\n"
     " })();\n",
     [1, 2, 3, 4]),
    ("lines_inside_functions_as_properties",
     "var o = {\n"
     "    foo: function () {\n"
     "        let x = a;\n"
     "    }\n"
     "};\n",
     [1, 2, 3]),
    ("lines_inside_calls_as_properties_of_object_to_call",
     "function f(a) {\n"
     "}\n"
     "f({\n"
     "    foo: function() {\n"
     "        let x = a;\n"
     "    }\n"
     "});\n",
     [3, 4, 5]),
    ("function_argument_lines",
     "function f(a, b, c) {\n"
     "}\n"
     "f(1,\n"
     "  2,\n"
     "  3);\n",
     [3, 4, 5]),
    ("new_call_argument_lines",
     "function f(o) {\n"
     "}\n"
     "new f({ a: 1,\n"
     "        b: 2,\n"
     "        c: 3});\n",
     [3, 4, 5]),
    ("object_property_from_new_call",
     "function f(o) {\n"
     "}\n"
     "let obj = {\n"
     "    Name: new f({ a: 1,\n"
     "                  b: 2,\n"
     "                  c: 3\n"
     "                })\n"
     "}\n",
     [3, 4, 5, 6]),
    ("lines_inside_while_loop",
     "var a = 0;\n"
     "while (a < 1) {\n"
     "    let x = 0;\n"
     "    let y = 1;\n"
     "    a++;\n"
     "}\n",
     [1, 2, 3, 4, 5]),
    ("try_catch_finally",
     "var a = 0;\n"
     "try {\n"
     "    a++;\n"
     "} catch (e) {\n"
     "    a++;\n"
     "} finally {\n"
     "    a++;\n"
     "}\n",
     [1, 2, 3, 4, 5, 7]),
    ("lines_inside_of_case_statements",
     "var a = 0;\n"
     "switch (a) {\n"
     "case 1:\n"
     "    a++;\n"
     "    break;\n"
     "case 2:\n"
     "    a++;\n"
     "    break;\n"
     "}\n",
     [1, 2, 4, 5, 7, 8]),
    ("lines_inside_for_loop",
     "for (let i = 0; i < 1; i++) {\n"
     "    let x = 0;\n"
     "    let y = 1;\n"
     "\n"
     "}\n",
     [1, 2, 3]),
    ("lines_inside_if_blocks",
     "if (1 > 0) {\n"
     "    let i = 0;\n"
     "} else {\n"
     "    let j = 1;\n"
     "}\n",
     [1, 2, 4]),
    ("lines_inside_if_tests",
     "if (1 > 0 &&\n"
     "    2 > 0 &&\n"
     "    3 > 0){\n"
     "    let a = 3;\n"
     "}\n",
     [1, 4]),
    ("object_property_expressions",
     "var b = 1;\n"
     "var a = {\n"
     "    Name: b,\n"
     "    Ex: b\n"
     "};\n",
     [1, 2, 3, 4]),
    ("object_property_literals",
     "var a = {\n"
     "    Name: 'foo',\n"
     "    Ex: 'bar'\n"
     "};\n",
     [1, 2, 3]),
    ("object_property_function_expression",
     "var a = {\n"
     "    Name: function() {},\n"
     "};\n",
     [1, 2]),
    ("object_property_object_expression",
     "var a = {\n"
     "    Name: {},\n"
     "};\n",
     [1, 2]),
    ("object_args_to_return",
     "function f() {\n"
     "    return {\n"
     "        a: 1,\n"
     "        b: 2\n"
     "    }\n"
     "}\n",
     [2, 3, 4]),
    ("object_args_to_throw",
     "function f() {\n"
     "    throw {\n"
     "        a: 1,\n"
     "        b: 2\n"
     "    }\n"
     "}\n",
     [2, 3, 4]),
]


FUNCTIONS = [
    ("list_of_functions",
     "function f1() {}\n"
     "function f2() {}\n"
     "function f3() {}\n",
     ["f1", "f2", "f3"]),
    ("nested_functions",
     "function f1() {\n"
     "    let f2 = function() {\n"
     "        let f3 = function() {\n"
     "        }\n"
     "    }\n"
     "}\n",
     ["f1", "function:2", "function:3"]),
]


BRANCHES = [
    ("simple_if_else_branch",
     "if (1) {\n"
     "    let a = 1;\n"
     "} else {\n"
     "    let b = 2;\n"
     "}\n",
     [(1, [2, 4])]),
    ("if_branch_with_only_one_consequent",
     "if (1) {\n"
     "    let a = 1.0;\n"
     "}\n",
     [(1, [2])]),
    ("nested_if_else_branches",
     "if (1) {\n"
     "    let a = 1.0;\n"
     "} else if (2) {\n"
     "    let b = 2.0;\n"
     "} else if (3) {\n"
     "    let c = 3.0;\n"
     "} else {\n"
     "    let d = 4.0;\n"
     "}\n",
     [(1, [2, 3]), (3, [4, 5]), (5, [6, 8])]),
    ("if_else_branch_without_blocks",
     "let a, b;\n"
     "if (1)\n"
     "    a = 1.0\n"
     "else\n"
     "    b = 2.0\n"
     "\n",
     [(2, [3, 5])]),
    ("no_branch_if_consequent_empty",
     "let a, b;\n"
     "if (1);\n",
     []),
    ("branch_if_consequent_empty_but_alternate_defined",
     "let a, b;\n"
     "if (1);\n"
     "else\n"
     "    a++;\n",
     [(2, [4])]),
    ("while_statement_implicit_branch",
     "while (1) {\n"
     "    let a = 1;\n"
     "}\n"
     "let b = 2;",
     [(1, [2])]),
    ("do_while_statement_implicit_branch",
     "do {\n"
     "    let a = 1;\n"
     "} while (1)\n"
     "let b = 2;",
     [(1, [2])]),
    ("case_statements",
     "let a = 1;\n"
     "switch (1) {\n"
     "case '1':\n"
     "    a++;\n"
     "    break;\n"
     "case '2':\n"
     "    a++\n"
     "    break;\n"
     "default:\n"
     "    a++\n"
     "    break;\n"
     "}\n",
     [(2, [4, 7, 10])]),
    ("case_statements_with_noop_labels",
     "let a = 1;\n"
     "switch (1) {\n"
     "case '1':\n"
     "case '2':\n"
     "default:\n"
     "}\n",
     []),
]


def _ids(table):
    return [row[0] for row in table]


class TestReflectedScript:
    """Tests for reflecting script files."""

    def test_simple_script(self, make_script):
        """Test every fact of a small script."""
        script = make_script("var a = 1.0;\nvar b = 2.0;\nvar c = 3.0;\n")

        assert script.executable_lines == [1, 2, 3]
        assert script.functions == []
        assert script.branches == []
        assert script.n_lines == 4

    def test_lazy_reflection(self, make_script):
        """Test that the file is only analyzed when first asked."""
        script = make_script("var a = 1;\n")

        assert not script.reflected
        assert script.n_lines == 2
        assert script.reflected

    def test_reflects_once(self, make_script, tmp_path):
        """Test that later file changes are not picked up."""
        script = make_script("var a = 1;\n")
        assert script.executable_lines == [1]

        (tmp_path / "mock.js").write_text("\n\nvar a = 1;\n", encoding="utf-8")
        assert script.executable_lines == [1]

    def test_executable_lines_are_sorted(self, make_script):
        """Test that per-file lines are sorted even if discovered out of order."""
        script = make_script("while (\n    a) {\n    b();\n}\n")

        assert script.result().executable_lines == [1, 3, 2]
        assert script.executable_lines == [1, 2, 3]

    def test_shebang_script(self, make_script):
        """Test a script starting with a shebang line."""
        script = make_script("#!/usr/bin/env gjs\nprint('hi');\n")

        assert script.executable_lines == [2]
        assert script.n_lines == 3

    def test_module_config(self, make_script):
        """Test parsing as a module through the configuration."""
        script = make_script("export function f() {}\n", name="mod.mjs",
                             config=ReflectConfig(source_type="module"))

        assert script.executable_lines == [1]

    def test_missing_file(self, tmp_path):
        """Test that a missing file fails on first access."""
        script = ReflectedScript(str(tmp_path / "nope.js"))

        with pytest.raises(FileNotFoundError):
            script.functions

    def test_parse_error(self, make_script):
        """Test that broken scripts raise ParseError."""
        script = make_script("function (\n")

        with pytest.raises(ParseError):
            script.branches

    @pytest.mark.parametrize("name,source,expected", EXECUTABLE_LINES, ids=_ids(EXECUTABLE_LINES))
    def test_executable_lines(self, make_script, name, source, expected):
        """Test executable lines of mock scripts."""
        assert make_script(source).executable_lines == expected

    @pytest.mark.parametrize("name,source,expected", FUNCTIONS, ids=_ids(FUNCTIONS))
    def test_functions(self, make_script, name, source, expected):
        """Test function names of mock scripts."""
        assert make_script(source).functions == expected

    @pytest.mark.parametrize("name,source,expected", BRANCHES, ids=_ids(BRANCHES))
    def test_branches(self, make_script, name, source, expected):
        """Test branches of mock scripts."""
        branches = make_script(source).branches

        assert [(b.point, list(b.alternates)) for b in branches] == expected
