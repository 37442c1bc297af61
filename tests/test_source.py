"""
Tests for file enumeration and test-path detection
"""

import pytest

from strictkit.core.source import SourceReadError, SourceTree, is_test_path


class TestIsTestPath:
    @pytest.mark.parametrize("path", [
        "auth.test.ts",
        "src/auth.spec.js",
        "db_spec.js",
        "api-test.ts",
        "__tests__/helpers.ts",
        "src/__mocks__/fs.js",
        "packages/core/test/setup.ts",
        "e2e/login.ts",
        "fixtures/user.json",
    ])
    def test_test_designated(self, path):
        assert is_test_path(path)

    @pytest.mark.parametrize("path", [
        "src/app.ts",
        "src/latest.ts",
        "src/contest.ts",
        "src/testing-utils.ts",
        "src/specification.json",
        "attest/index.js",
    ])
    def test_not_test_designated(self, path):
        assert not is_test_path(path)


class TestSourceTree:
    """Tests for SourceTree."""

    def test_find_is_sorted_and_relative(self, tree: SourceTree, write_file):
        write_file("src/z.ts", "")
        write_file("a.ts", "")
        write_file("src/b.tsx", "")
        write_file("src/c.js", "")

        assert tree.find({".ts", ".tsx"}) == ["a.ts", "src/b.tsx", "src/z.ts"]

    def test_find_prunes_ignored_directories(self, tree: SourceTree, write_file):
        write_file("node_modules/x/index.ts", "")
        write_file(".git/hooks/pre.ts", "")
        write_file("build/out.ts", "")
        write_file("src/app.ts", "")

        assert tree.find({".ts"}) == ["src/app.ts"]

    def test_custom_exclude_patterns(self, temp_dir, write_file):
        write_file("generated/api.ts", "")
        write_file("legacy-v1/old.ts", "")
        write_file("src/app.ts", "")

        tree = SourceTree(temp_dir, exclude=["generated", "legacy-*"])

        assert tree.find({".ts"}) == ["src/app.ts"]

    def test_skip_tests(self, tree: SourceTree, write_file):
        write_file("app.ts", "")
        write_file("app.test.ts", "")

        assert tree.find({".ts"}, skip_tests=True) == ["app.ts"]
        assert tree.find({".ts"}) == ["app.test.ts", "app.ts"]

    def test_read(self, tree: SourceTree, write_file):
        write_file("src/app.ts", "const x = 1;")

        unit = tree.read("src/app.ts")

        assert unit.path == "src/app.ts"
        assert unit.content == "const x = 1;"

    def test_read_tolerates_invalid_utf8(self, tree: SourceTree, temp_dir):
        (temp_dir / "bin.js").write_bytes(b"const a = 1;\xff\xfe")
        assert tree.read("bin.js").content == "const a = 1;"

    def test_read_drops_byte_order_mark(self, tree: SourceTree, temp_dir):
        (temp_dir / "Dockerfile").write_bytes(b"\xef\xbb\xbfFROM node:20\n")
        assert tree.read("Dockerfile").content == "FROM node:20\n"

    def test_read_missing_raises(self, tree: SourceTree):
        with pytest.raises(SourceReadError):
            tree.read("missing.ts")

    def test_exists(self, tree: SourceTree, write_file):
        write_file("yarn.lock", "")
        assert tree.exists("yarn.lock")
        assert not tree.exists("bun.lockb")
