from __future__ import annotations

import ast
import sys
from collections.abc import Iterable
from pathlib import Path

# Guard function -> (positional index, keyword) of each argument that names a parameter
NAME_ARGUMENTS: dict[str, tuple[tuple[int, str], ...]] = {
    "not_none": ((1, "name"),),
    "not_empty": ((1, "name"),),
    "not_blank": ((1, "name"),),
    "none_or_not_empty": ((1, "name"),),
    "has_no_nones": ((1, "name"),),
    "in_range": ((1, "name"),),
    "valid_range": ((3, "offset_name"), (4, "count_name")),
}

# Receivers recognised without an import, e.g. `check.not_none(...)`
DEFAULT_RECEIVERS = frozenset({"check", "argcheck", "argcheck.check"})

ScopeNode = ast.FunctionDef | ast.AsyncFunctionDef | ast.Lambda


def iter_python_files(roots: Iterable[str]) -> Iterable[Path]:
    for root in roots:
        base = Path(root)
        if base.is_file() and base.suffix == ".py":
            yield base
            continue
        if not base.exists():
            continue
        yield from base.rglob("*.py")


def _is_argcheck_module(module: str) -> bool:
    return module == "argcheck" or module.startswith("argcheck.")


def argcheck_imports(tree: ast.AST) -> tuple[set[str], dict[str, str]]:
    """Return (receiver names, local name -> guard) bound by argcheck imports."""
    receivers = set(DEFAULT_RECEIVERS)
    functions: dict[str, str] = {}
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom):
            if node.module is None or not _is_argcheck_module(node.module):
                continue
            for alias in node.names:
                local = alias.asname or alias.name
                if alias.name in NAME_ARGUMENTS:
                    functions[local] = alias.name
                else:
                    receivers.add(local)
        elif isinstance(node, ast.Import):
            for alias in node.names:
                if _is_argcheck_module(alias.name) and alias.asname:
                    receivers.add(alias.asname)
    return receivers, functions


def dotted_name(node: ast.expr) -> str | None:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        base = dotted_name(node.value)
        return None if base is None else f"{base}.{node.attr}"
    return None


def guard_name(
    call: ast.Call, receivers: set[str], functions: dict[str, str]
) -> str | None:
    func = call.func
    if isinstance(func, ast.Name):
        return functions.get(func.id)
    if (
        isinstance(func, ast.Attribute)
        and func.attr in NAME_ARGUMENTS
        and dotted_name(func.value) in receivers
    ):
        return func.attr
    return None


def parameter_names(node: ScopeNode) -> set[str]:
    args = node.args
    names = {a.arg for a in [*args.posonlyargs, *args.args, *args.kwonlyargs]}
    if args.vararg is not None:
        names.add(args.vararg.arg)
    if args.kwarg is not None:
        names.add(args.kwarg.arg)
    return names


def cited_names(call: ast.Call, guard: str) -> list[ast.expr]:
    cited: list[ast.expr] = []
    keywords = {kw.arg: kw.value for kw in call.keywords if kw.arg is not None}
    for index, keyword in NAME_ARGUMENTS[guard]:
        if index < len(call.args):
            cited.append(call.args[index])
        elif keyword in keywords:
            cited.append(keywords[keyword])
    return cited


class _CallSiteVisitor(ast.NodeVisitor):
    """Checks literal names at guard calls against the innermost function."""

    def __init__(
        self, path: Path, receivers: set[str], functions: dict[str, str]
    ) -> None:
        self.path = path
        self.receivers = receivers
        self.functions = functions
        self.scopes: list[set[str]] = []
        self.errors: list[str] = []

    def _visit_scope(self, node: ScopeNode) -> None:
        self.scopes.append(parameter_names(node))
        self.generic_visit(node)
        self.scopes.pop()

    def visit_FunctionDef(self, node: ast.FunctionDef) -> None:
        self._visit_scope(node)

    def visit_AsyncFunctionDef(self, node: ast.AsyncFunctionDef) -> None:
        self._visit_scope(node)

    def visit_Lambda(self, node: ast.Lambda) -> None:
        self._visit_scope(node)

    def visit_Call(self, node: ast.Call) -> None:
        guard = guard_name(node, self.receivers, self.functions)
        if guard is not None and self.scopes:
            for arg in cited_names(node, guard):
                if not (isinstance(arg, ast.Constant) and isinstance(arg.value, str)):
                    continue
                if not arg.value.strip():
                    self.errors.append(
                        f"{self.path}:{arg.lineno} {guard}() cites a blank parameter name"
                    )
                elif arg.value not in self.scopes[-1]:
                    self.errors.append(
                        f"{self.path}:{arg.lineno} {guard}() cites '{arg.value}', "
                        "which is not a parameter of the enclosing function"
                    )
        self.generic_visit(node)


def check_path(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
        tree = ast.parse(text, filename=str(path))
    except Exception as exc:  # pragma: no cover - guard must not crash silently
        sys.stderr.write(f"{path}: PARSE_ERROR {exc}\n")
        raise
    receivers, functions = argcheck_imports(tree)
    visitor = _CallSiteVisitor(path, receivers, functions)
    visitor.visit(tree)
    return visitor.errors


def run(roots: list[str]) -> int:
    all_errors: list[str] = []
    for path in iter_python_files(roots):
        all_errors.extend(check_path(path))
    if all_errors:
        sys.stderr.write("\n".join(all_errors) + "\n")
        return 1
    return 0


def main() -> int:
    return run(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
