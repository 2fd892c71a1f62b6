"""
Pytest configuration and fixtures for JavaHead tests
"""

import re
import subprocess
from pathlib import Path

import pytest

from javahead.core import Registry, SearchRoots

HELLO = """package com.example;

public class Hello {
    static class Greeting {
        String text() { return "Hello"; }
    }

    public static void main(String[] args) {
        System.out.println(new Greeting().text());
    }
}
"""

SAFE = """package com.example.projects.safe;

public class Safe {
    public static void main(String[] args) {
        System.out.println(String.join(" ", args));
    }
}
"""

BROKEN = """package com.example.projects.broken;

// intentionally broken: missing semicolon
public class Broken {
    public static void main(String[] args) {
        System.out.println("never")
    }
}
"""

MAIN = """public class Main {
    public static void main(String[] args) {
        System.out.println("main");
    }
}
"""


class FakeToolchain:
    """
    Stands in for javac/java.

    compile() writes Name.class (plus Name$Inner.class for each static nested
    class) unless the source is marked as intentionally broken. execute()
    echoes its arguments like the Safe program does.
    """

    def __init__(self):
        self.timeout = None
        self.calls = []

    def compile(self, args, source_path):
        self.calls.append(("compile", list(args), Path(source_path), Path.cwd()))
        source = Path(source_path).read_text()
        if "intentionally broken" not in source:
            name = Path(source_path).stem
            Path(source_path).with_suffix(".class").write_bytes(b"\xca\xfe\xba\xbe")
            for inner in re.findall(r"static class (\w+)", source):
                Path(source_path).with_name(f"{name}${inner}.class").write_bytes(b"\xca\xfe\xba\xbe")
        return subprocess.CompletedProcess([], 0, "", "")

    def execute(self, full_name, args, classpath):
        self.calls.append(("execute", full_name, list(args), list(classpath), Path.cwd()))
        return subprocess.CompletedProcess([], 0, " ".join(args) + "\n", "")


def write_source(root: Path, relative: str, text: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


@pytest.fixture
def java_tree(tmp_path):
    """A source root with com.example (Hello), projects.safe, projects.broken and a top-level Main."""
    root = tmp_path / "src"
    write_source(root, "com/example/Hello.java", HELLO)
    write_source(root, "com/example/projects/safe/Safe.java", SAFE)
    write_source(root, "com/example/projects/broken/Broken.java", BROKEN)
    write_source(root, "Main.java", MAIN)
    return root.resolve()


@pytest.fixture
def fake_toolchain():
    return FakeToolchain()


@pytest.fixture
def registry(java_tree, fake_toolchain):
    return Registry(SearchRoots([java_tree]), toolchain=fake_toolchain)


@pytest.fixture
def broken_source():
    """Source text of a class that fails to compile."""
    return BROKEN
