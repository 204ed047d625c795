"""risp Language Server package.

This package provides:
- A pygls-based Language Server for risp source files.
- A lightweight indexer that scans documents without evaluating them.
"""

__all__ = [
    "server",
    "indexer",
]
