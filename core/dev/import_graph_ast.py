"""AST based import graph builder (used by architecture tests)."""
from __future__ import annotations

import ast
from pathlib import Path
from typing import Dict, Set


def _module_name(package: str, root_path: Path, py: Path) -> str:
    rel = py.relative_to(root_path).with_suffix("").as_posix()
    return f"{package}.{rel}".replace("/", ".")


def _resolve_relative(module: str, node: ast.ImportFrom, is_pkg: bool) -> str:
    # `from .x import y` inside pkg/a.py resolves against "pkg";
    # inside pkg/__init__.py it resolves against "pkg" as well.
    parts = module.split(".")
    base = parts if is_pkg else parts[:-1]
    if node.level > 1:
        base = base[: len(base) - (node.level - 1)]
    target = ".".join(base)
    if node.module:
        target = f"{target}.{node.module}" if target else node.module
    return target


def build_import_graph_ast(
    root: str | Path = "core", package: str = "core"
) -> Dict[str, Set[str]]:
    root_path = Path(root)
    edges: Dict[str, Set[str]] = {}
    prefix = package + "."
    for py in root_path.rglob("*.py"):
        if "__pycache__" in py.parts:
            continue
        is_pkg = py.name == "__init__.py"
        rel_mod = _module_name(package, root_path, py)
        if is_pkg:
            rel_mod = rel_mod[: -len(".__init__")]
        try:
            tree = ast.parse(py.read_text(encoding="utf-8"))
        except SyntaxError:
            continue
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for n in node.names:
                    if n.name.startswith(prefix):
                        edges.setdefault(rel_mod, set()).add(n.name)
            elif isinstance(node, ast.ImportFrom):
                if node.level:
                    target = _resolve_relative(rel_mod, node, is_pkg)
                else:
                    target = node.module or ""
                if target == package or target.startswith(prefix):
                    edges.setdefault(rel_mod, set()).add(target)
    for n in list(edges.keys()):
        for dst in edges[n]:
            edges.setdefault(dst, set())
    return edges


__all__ = ["build_import_graph_ast"]
