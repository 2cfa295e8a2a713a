"""
Language symbol tables.

Usage:
    from docvalidator.symbols import load_defaults

    table = load_defaults("ja")
    table.value_of("COMMA")  # "、"
"""

from .table import Language, Symbol, SymbolTable, load_defaults

__all__ = [
    "Language",
    "Symbol",
    "SymbolTable",
    "load_defaults",
]
