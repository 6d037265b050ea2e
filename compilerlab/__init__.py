"""Compiler-construction exercises: FIRST/FOLLOW sets, a lexer, parsers and a call stack."""

__version__ = "0.1.0"