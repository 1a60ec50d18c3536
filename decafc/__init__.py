"""Lexer, grammar analysis and LALR(1) parser generator for the Decaf language."""

__version__ = "0.1.0"
__all__ = ["token", "lexer", "grammar", "parser", "decaf_grammar"]