"""
Tests for the CONSOLE gate
"""

import pytest

from strictkit.core.finding import Status
from strictkit.core.source import SourceTree
from strictkit.gates.console import ConsoleGate, count_console_calls


class TestCountConsoleCalls:
    def test_counts_call_sites(self):
        assert count_console_calls('console.log("a");\nconsole.log(b);') == 2

    def test_other_console_methods_ignored(self):
        assert count_console_calls('console.error("fatal");\nconsole.warn("x");') == 0

    def test_comments_and_strings_ignored(self):
        code = (
            '// console.log("debug")\n'
            '/* console.log("x") */\n'
            'const msg = "do not use console.log()";\n'
            "const t = `console.log(${x})`;\n"
        )
        assert count_console_calls(code) == 0

    def test_reference_without_call_ignored(self):
        assert count_console_calls("const log = console.log;") == 0

    def test_spaced_call(self):
        assert count_console_calls("console . log ('x')") == 1


class TestConsoleGate:
    """Tests for ConsoleGate."""

    def test_clean_project_passes(self, tree: SourceTree, write_file):
        write_file("app.ts", 'const x: number = 1;\nconsole.error("fatal");')

        finding = ConsoleGate().run(tree)

        assert finding.status == Status.PASS

    def test_no_files_passes(self, tree: SourceTree):
        assert ConsoleGate().run(tree).status == Status.PASS

    def test_single_call_fails(self, tree: SourceTree, write_file):
        write_file("app.ts", 'console.log("debug");')

        finding = ConsoleGate().run(tree)

        assert finding.status == Status.FAIL
        assert "1 console.log()" in finding.message

    def test_counts_across_files(self, tree: SourceTree, write_file):
        write_file("a.js", 'console.log("one");')
        write_file("b.tsx", 'console.log("two");\nconsole.log("three");')

        finding = ConsoleGate().run(tree)

        assert finding.status == Status.FAIL
        assert finding.count == 3
        assert finding.affected_files == 2
        assert "3 console.log()" in finding.message
        assert "2 file(s)" in finding.message

    @pytest.mark.parametrize("path", ["app.test.ts", "app.spec.js", "__tests__/setup.js", "e2e/run.mjs"])
    def test_test_files_ignored(self, tree: SourceTree, write_file, path):
        write_file(path, 'console.log("test output");')
        assert ConsoleGate().run(tree).status == Status.PASS

    def test_minified_bundles_ignored(self, tree: SourceTree, write_file):
        write_file("public/vendor.min.js", 'console.log("bundled");')
        assert ConsoleGate().run(tree).status == Status.PASS
