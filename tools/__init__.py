"""Repository tooling for argcheck.

Hosts static guard scripts that catch misuse the runtime checks cannot:
- A guard call citing a parameter name the enclosing function does not have
- A guard call citing a blank parameter name

Run with `python -m tools.guard [paths...]`.
"""
