"""Lexical analyser for the Decaf programming language."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from decafc.token import Token, TokenType

_MAX_IDENTIFIER_LENGTH = 31

_KEYWORDS = frozenset(
    {
        "void", "int", "double", "bool", "string", "class", "interface",
        "null", "this", "extends", "implements", "for", "while", "if",
        "else", "return", "break", "new", "NewArray", "Print",
        "ReadInteger", "ReadLine",
    }
)

_PUNCTUATION = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACK,
    "]": TokenType.RBRACK,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ".": TokenType.PERIOD,
    ",": TokenType.COMMA,
}

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class LexerError(ValueError):
    """Raised when the input is not valid Decaf lexical syntax."""


def _is_alpha(c: str) -> bool:
    return len(c) == 1 and c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c in _DIGITS


def _is_hex_digit(c: str) -> bool:
    return c in _HEX_DIGITS


def _is_word_char(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c) or c == "_"


class Lexer:
    """Splits Decaf source text into tokens, one call at a time."""

    def __init__(self, stream: TextIO | str) -> None:
        self._text = stream if isinstance(stream, str) else stream.read()
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos : self._pos + 1]

    def _get(self) -> str:
        c = self._peek()
        self._pos += len(c)
        return c

    def _take_while(self, predicate) -> str:
        start = self._pos
        while predicate(self._peek()):
            self._pos += 1
        return self._text[start : self._pos]

    def next_token(self) -> Token:
        """Return the next token; END once the input is used up."""
        self._take_while(lambda ch: ch in _SPACE)
        c = self._get()
        if not c:
            return Token(TokenType.END)
        if c == "/":
            if self._peek() == "/":
                self._get()
                self._skip_line()
                return Token(TokenType.COMMENT)
            if self._peek() == "*":
                self._get()
                self._skip_block_comment()
                return Token(TokenType.COMMENT)
        if _is_alpha(c):
            return self._word(c)
        if c in _PUNCTUATION:
            return Token(_PUNCTUATION[c], c)
        if c == '"':
            return self._string()
        if c in "+-*/%":
            return Token(TokenType.OPERATOR, c)
        if c in "&|":
            if self._peek() == c:
                self._get()
                return Token(TokenType.OPERATOR, c * 2)
            raise LexerError(
                f"Invalid syntax while reading operator starting with '{c}'. "
                f"Did you mean {c * 2}?"
            )
        if c in "<=>!":
            value = c
            if self._peek() == "=":
                value += self._get()
            return Token(TokenType.OPERATOR, value)
        if _is_digit(c):
            return self._number(c)
        raise LexerError(f"Unknown Symbol at character with int value {ord(c)}")

    def _skip_line(self) -> None:
        while (c := self._get()) and c != "\n":
            pass

    def _skip_block_comment(self) -> None:
        n = self._get()
        while not (n == "*" and self._peek() == "/"):
            if not n:
                raise LexerError("End of file reached inside block comment")
            n = self._get()
        self._get()

    def _word(self, first: str) -> Token:
        value = first + self._take_while(_is_alpha)
        if self._peek() != "_":
            if value in ("true", "false"):
                return Token(TokenType.BOOL, value)
            if value in _KEYWORDS:
                return Token(TokenType.KEYWORD, value)
        value += self._take_while(_is_word_char)
        if len(value) > _MAX_IDENTIFIER_LENGTH:
            raise LexerError(
                f'Invalid identifier "{value}" of length longer than '
                f"{_MAX_IDENTIFIER_LENGTH} characters"
            )
        return Token(TokenType.IDENTIFIER, value)

    def _string(self) -> Token:
        value = '"'
        # The character right after the opening quote is always taken.
        nxt = self._get()
        if not nxt:
            raise LexerError(
                f'End of file reached while reading string beginning with "{value}"'
            )
        value += nxt
        while (p := self._peek()) != '"':
            if p == "\n":
                raise LexerError(
                    f'String beginning with "{value}" containes newline character'
                )
            if not p:
                raise LexerError(
                    f'End of file reached while reading string beginning with "{value}"'
                )
            value += self._get()
        value += self._get()
        return Token(TokenType.STRING, value)

    def _number(self, first: str) -> Token:
        value = first
        if first == "0" and self._peek() in ("x", "X"):
            value += self._get()
            if not _is_hex_digit(self._peek()):
                raise LexerError(
                    f"Invalid hexadecimal integer starting with {value} "
                    f"followed by {self._peek()}"
                )
            value += self._take_while(_is_hex_digit)
            return Token(TokenType.INT, value)
        value += self._take_while(_is_digit)
        if self._peek() != ".":
            return Token(TokenType.INT, value)
        value += self._get()
        value += self._take_while(_is_digit)
        if self._peek() not in ("E", "e"):
            return Token(TokenType.DOUBLE, value)
        value += self._get()
        if self._peek() in ("+", "-"):
            value += self._get()
        value += self._take_while(_is_digit)
        return Token(TokenType.DOUBLE, value)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, END."""
        while (token := self.next_token()).type is not TokenType.END:
            yield token

    def print_tokens(self, out: TextIO | None = None) -> None:
        """Write every remaining token, then the end marker, to ``out``."""
        out = sys.stdout if out is None else out
        for token in self:
            out.write(str(token))
        out.write(str(Token(TokenType.END)) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Read Decaf source on standard input and print its tokens."""
    argparse.ArgumentParser(
        description="Print the tokens of Decaf source read from standard input."
    ).parse_args(argv)
    Lexer(sys.stdin).print_tokens(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())