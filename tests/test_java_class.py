"""
Tests for JavaClass compile/execute orchestration
"""

from pathlib import Path

import pytest

from javahead.exceptions import (
    CompilationFailedError,
    ErrorKind,
    InvalidArgumentError,
    NotCompiledError,
)


class TestJavaClass:
    """Test class operations against a recording fake toolchain"""

    @pytest.fixture
    def safe(self, registry):
        return registry.resolve_class("com.example.projects.safe.Safe")

    @pytest.fixture
    def broken(self, registry):
        return registry.resolve_class("com.example.projects.broken.Broken")

    def test_safe_class_should_compile(self, safe):
        assert not safe.is_compiled()
        assert safe.compile() is safe
        assert safe.is_compiled()
        assert safe.class_file.exists()

        assert safe.remove_compiled_artifacts() is True
        assert not safe.is_compiled()

    def test_compile_runs_from_package_root(self, safe, fake_toolchain, java_tree):
        cwd = Path.cwd()
        safe.compile("-g:none", "-Xlint:all")

        kind, args, source, compile_cwd = fake_toolchain.calls[0]
        assert kind == "compile"
        assert args == ["-g:none", "-Xlint:all"]
        assert source == safe.source_path
        assert compile_cwd == java_tree
        assert Path.cwd() == cwd

    def test_compile_removes_stale_artifacts_first(self, broken):
        broken.class_file.write_bytes(b"stale")
        assert broken.is_compiled()

        with pytest.raises(CompilationFailedError):
            broken.compile()
        assert not broken.is_compiled()

    def test_broken_class_should_not_compile(self, broken):
        with pytest.raises(CompilationFailedError) as info:
            broken.compile()

        assert info.value.kind is ErrorKind.COMPILATION_FAILED
        assert broken.remove_compiled_artifacts() is False
        assert not broken.is_compiled()

    def test_compile_rejects_unsafe_arguments(self, safe, fake_toolchain):
        with pytest.raises(InvalidArgumentError):
            safe.compile(";rm -rf")
        assert fake_toolchain.calls == []

    def test_remove_compiled_artifacts_includes_nested_classes(self, registry, java_tree):
        hello = registry.resolve_class("com.example.Hello")
        hello.compile()
        nested = java_tree / "com/example/Hello$Greeting.class"
        unrelated = java_tree / "com/example/HelloWorld.class"
        unrelated.write_bytes(b"")
        assert nested.exists()

        assert hello.remove_compiled_artifacts() is True
        assert not nested.exists()
        assert unrelated.exists()

    def test_remove_without_artifacts(self, safe):
        cwd = Path.cwd()
        assert safe.remove_compiled_artifacts() is False
        assert Path.cwd() == cwd

    def test_execute_requires_compilation(self, safe, fake_toolchain):
        with pytest.raises(NotCompiledError):
            safe.execute("Input")
        assert fake_toolchain.calls == []

    def test_execute_returns_output(self, safe, fake_toolchain, java_tree):
        safe.compile()
        output = safe.execute("Input", 2)

        assert output == "Input 2\n"
        kind, full_name, args, classpath, cwd = fake_toolchain.calls[-1]
        assert full_name == "com.example.projects.safe.Safe"
        assert args == ["Input", "2"]
        assert classpath == [java_tree]
        assert cwd == java_tree

    def test_execute_rejects_unsafe_arguments(self, safe):
        safe.compile()
        with pytest.raises(InvalidArgumentError):
            safe.execute("%%%")

    def test_classpath_lists_other_roots_after_package_root(self, registry, java_tree, tmp_path):
        other = tmp_path / "lib"
        other.mkdir()
        registry.add_search_root(other)

        assert registry.resolve_class("com.example.Hello").classpath() == [java_tree, other.resolve()]

    def test_safe_class_should_run(self, safe):
        assert safe.run("Input").rstrip("\n") == "Input"
        assert not safe.is_compiled()

    def test_run_cleans_up_when_execution_fails(self, safe):
        with pytest.raises(InvalidArgumentError):
            safe.run(";bad")
        assert not safe.is_compiled()

    def test_run_broken_class(self, broken):
        with pytest.raises(CompilationFailedError):
            broken.run()
        assert not broken.is_compiled()

    def test_test_leaves_no_artifacts(self, safe):
        assert safe.test() is safe
        assert not safe.is_compiled()

    def test_test_reports_failures(self, broken, safe, caplog):
        assert broken.test() is None
        assert "Compilation failed" in caplog.text

        assert safe.test("%%%") is None
        assert "InvalidArgumentError" in caplog.text

    def test_top_level_class_compiles_in_root(self, registry, fake_toolchain, java_tree):
        main = registry.resolve_class("Main")
        main.compile()

        assert (java_tree / "Main.class").exists()
        assert fake_toolchain.calls[0][3] == java_tree

    def test_str_and_repr(self, safe):
        assert str(safe) == "com.example.projects.safe.Safe"
        assert "not compiled" in repr(safe)
        safe.compile()
        assert "not compiled" not in repr(safe)

    def test_remove_after_package_directory_vanished(self, safe, java_tree):
        package_dir = java_tree / "com/example/projects/safe"
        (package_dir / "Safe.java").unlink()
        package_dir.rmdir()

        assert safe.remove_compiled_artifacts() is False

    def test_run_failure_is_not_masked_by_cleanup(self, safe, fake_toolchain):
        def compile_then_vanish(args, source_path):
            source_path.unlink()
            source_path.parent.rmdir()
            return None

        fake_toolchain.compile = compile_then_vanish

        with pytest.raises(CompilationFailedError):
            safe.run()
