"""Static checks over argcheck call sites.

Each guard exposes a `run(roots: list[str]) -> int` function that returns
non-zero on violations.
"""
