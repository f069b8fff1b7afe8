import json
import os
import subprocess
from unittest import mock

from practicekit.project import Crate, RustAnalyzerProject


def test_add_path_only_takes_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/if/if1.rs")
    project.add_path("exercises/if/README.md")
    project.add_path("exercises/if")
    assert [c.root_module for c in project.crates] == ["exercises/if/if1.rs"]


def test_crate_defaults():
    crate = Crate(root_module="a.rs").to_dict()
    assert crate == {"root_module": "a.rs", "edition": "2021", "deps": [], "cfg": ["test"]}


def test_exercises_to_json_walks_tree(tmp_path):
    (tmp_path / "if").mkdir()
    (tmp_path / "if" / "if1.rs").write_text("")
    (tmp_path / "if" / "README.md").write_text("")
    (tmp_path / "quiz1.rs").write_text("")
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path)
    roots = {c.root_module for c in project.crates}
    assert roots == {str(tmp_path / "if" / "if1.rs"), str(tmp_path / "quiz1.rs")}


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/src")
    project.add_path("x.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    text = target.read_text()
    assert json.loads(text) == project.to_dict()
    assert " " not in text


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/library")
    project = RustAnalyzerProject()
    project.get_sysroot_src()
    assert project.sysroot_src == "/custom/library"


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    done = subprocess.CompletedProcess([], 0, stdout=b"/opt/toolchain\n", stderr=b"")
    project = RustAnalyzerProject()
    with mock.patch("practicekit.project.subprocess.run", return_value=done):
        project.get_sysroot_src()
    suffix = os.path.join("lib", "rustlib", "src", "rust", "library")
    assert project.sysroot_src.endswith(suffix)
    assert project.sysroot_src.startswith(os.path.normpath("/opt/toolchain"))
    assert "Determined toolchain: /opt/toolchain" in capsys.readouterr().out