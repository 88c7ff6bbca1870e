"""Numeric expression evaluator: infix/postfix conversion, evaluation and a menu."""

__version__ = "0.1.0"
__all__ = ["cli", "expressao"]