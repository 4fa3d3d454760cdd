"""
Discovery module.

Enumerates decorated classes from importable packages as declared types.
"""

from .scanner import TypeScanner, contract_types, describe

__all__ = [
    "TypeScanner",
    "contract_types",
    "describe",
]
