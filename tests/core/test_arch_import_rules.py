from pathlib import Path

from core.dev.import_graph_ast import build_import_graph_ast

CORE = Path(__file__).resolve().parents[2] / "core"


def test_registry_stays_pure():
    graph = build_import_graph_ast(CORE)
    violations = []
    for src, targets in graph.items():
        for dst in targets:
            if src.startswith("core.registry") and dst.startswith(
                ("core.config", "core.metrics", "core.eventbus", "core.events")
            ):
                violations.append((src, dst))
    assert not violations, f"Forbidden edges detected: {violations}"


def test_core_never_imports_app_package():
    for py in CORE.rglob("*.py"):
        text = py.read_text(encoding="utf-8")
        assert "import modelhub" not in text, py
        assert "from modelhub" not in text, py


def test_relative_imports_resolved(tmp_path):
    pkg = tmp_path / "pkg"
    (pkg / "sub").mkdir(parents=True)
    (pkg / "__init__.py").write_text("from .sub import thing\n")
    (pkg / "sub" / "__init__.py").write_text("")
    (pkg / "sub" / "thing.py").write_text(
        "from ..other import x\nimport pkg.base\n"
    )
    graph = build_import_graph_ast(pkg, package="pkg")
    assert graph["pkg"] == {"pkg.sub"}
    assert graph["pkg.sub.thing"] == {"pkg.other", "pkg.base"}
