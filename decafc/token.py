"""Tokens produced by the Decaf lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of token the lexer can produce."""

    KEYWORD = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()
    BOOL = auto()
    INT = auto()
    DOUBLE = auto()
    STRING = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACK = auto()
    RBRACK = auto()
    LBRACE = auto()
    RBRACE = auto()
    SEMICOLON = auto()
    PERIOD = auto()
    COMMA = auto()
    COMMENT = auto()
    END = auto()


_DISPLAY = {
    TokenType.KEYWORD: "Keyword ",
    TokenType.IDENTIFIER: "Identifier ",
    TokenType.OPERATOR: "Operator ",
    TokenType.BOOL: "Bool ",
    TokenType.INT: "Int ",
    TokenType.DOUBLE: "Double ",
    TokenType.STRING: "String ",
    TokenType.END: "End of input reached\n",
    TokenType.COMMENT: "Comment here\n",
    TokenType.SEMICOLON: ";\n",
    TokenType.LBRACE: "{\n",
    TokenType.RBRACE: "}\n",
}


@dataclass(frozen=True)
class Token:
    """A lexical token: its kind and the source text it stands for."""

    type: TokenType
    value: str = ""

    def __str__(self) -> str:
        """Render the token the way the token printer shows it."""
        return _DISPLAY.get(self.type, self.value)