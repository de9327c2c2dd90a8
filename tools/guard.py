from __future__ import annotations

import sys
from collections.abc import Callable

from tools.guards import param_name_guard

Runner = Callable[[list[str]], int]

DEFAULT_ROOTS = ["argcheck", "tools"]


def run_guards(roots: list[str]) -> int:
    runners: list[Runner] = [
        param_name_guard.run,
    ]
    for runner in runners:
        rc = runner(roots)
        if rc != 0:
            return rc
    return 0


def main(argv: list[str] | None = None) -> int:
    roots = list(sys.argv[1:] if argv is None else argv) or DEFAULT_ROOTS
    return run_guards(roots)


if __name__ == "__main__":
    raise SystemExit(main())
