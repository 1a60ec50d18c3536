"""The Decaf grammar, its LALR(1) parser, and the mapping from tokens to symbols."""

from __future__ import annotations

from functools import lru_cache

from decafc.grammar import Grammar
from decafc.parser import Parser
from decafc.token import Token, TokenType

_PRODUCTIONS: dict[str, list[list[str]]] = {
    "Start": [["Program"]],
    "Program": [["Decl+"]],
    "Decl+": [["Decl+", "Decl"], ["Decl"]],
    "Decl": [["VariableDecl"], ["FunctionDecl"], ["ClassDecl"], ["InterfaceDecl"]],
    "VariableDecl": [["Variable", ";"]],
    "Variable": [["Type", "Ident"]],
    "Type": [["int"], ["bool"], ["double"], ["string"], ["Ident"], ["Type", "[", "]"]],
    "FunctionDecl": [
        ["Type", "Ident", "(", "Formals", ")", "StmtBlock"],
        ["void", "Ident", "(", "Formals", ")", "StmtBlock"],
    ],
    "Formals": [[], ["VariableList"]],
    "VariableList": [["Variable"], ["Variable", ",", "VariableList"]],
    "ClassDecl": [
        ["class", "Ident", "{", "Field*", "}"],
        ["class", "Ident", "extends", "Ident", "{", "Field*", "}"],
        ["class", "Ident", "extends", "Ident", "implements", "IdentList", "{", "Field*", "}"],
        ["class", "Ident", "implements", "IdentList", "{", "Field*", "}"],
    ],
    "IdentList": [["Ident"], ["Ident", ",", "IdentList"]],
    "Field*": [[], ["Field", "Field*"]],
    "Field": [["VariableDecl"], ["FunctionDecl"]],
    "InterfaceDecl": [["interface", "Ident", "{", "Prototype*", "}"]],
    "Prototype*": [[], ["Prototype", "Prototype*"]],
    "Prototype": [
        ["Type", "Ident", "(", "Formals", ")", ";"],
        ["void", "Ident", "(", "Formals", ")", ";"],
    ],
    "StmtBlock": [["VariableDecl*", "Stmt*"]],
    "VariableDecl*": [[], ["VariableDecl", "VariableDecl*"]],
    "Stmt*": [[], ["Stmt", "Stmt*"]],
    "Stmt": [
        [";"], ["Expr", ";"], ["IfStmt"], ["WhileStmt"], ["ForStmt"],
        ["BreakStmt"], ["ReturnStmt"], ["PrintStmt"], ["StmtBlock"],
    ],
    "IfStmt": [
        ["if", "(", "Expr", ")", "Stmt", "else", "Stmt"],
        ["if", "(", "Expr", ")", "Stmt"],
    ],
    "WhileStmt": [["while", "(", "Expr", ")", "Stmt"]],
    "ForStmt": [
        ["for", "(", "Expr", ";", "Expr", ";", "Expr", ")", "Stmt"],
        ["for", "(", "Expr", ";", "Expr", ";", ")", "Stmt"],
        ["for", "(", ";", "Expr", ";", "Expr", ")", "Stmt"],
    ],
    "ReturnStmt": [["return", ";"], ["return", "Expr", ";"]],
    "BreakStmt": [["break", ";"]],
    "PrintStmt": [["Print", "(", "ExprList", ")", ";"]],
    "ExprList": [["Expr"], ["Expr", ",", "ExprList"]],
    "Expr": [
        ["LValue", "=", "Expr"],
        ["Constant"],
        ["LVlue"],
        ["this"],
        ["Call"],
        ["(", "Expr", ")"],
        ["Expr", "+", "Expr"],
        ["Expr", "=", "Expr"],
        ["Expr", "*", "Expr"],
        ["Expr", "/", "Expr"],
        ["Expr", "%", "Expr"],
        ["-", "Expr"],
        ["Expr", "<", "Expr"],
        ["Expr", "<", "=", "Expr"],
        ["Expr", ">", "Expr"],
        ["Expr", ">", "=", "Expr"],
        ["Expr", "=", "=", "Expr"],
        ["Expr", "!", "=", "Expr"],
        ["Expr", "&", "&", "Expr"],
        ["Expr", "|", "|", "Expr"],
        ["!", "Expr"],
        ["ReadInteger", "(", ")"],
        ["ReadLine", "(", ")"],
        ["new", "Ident"],
        ["NewArray", "(", "Expr", ",", "Type", ")"],
    ],
    "LValue": [["Ident"], ["Expr", ".", "Ident"], ["Expr", "[", "Expr", "]"]],
    "Call": [["Ident", "(", "Actuals", ")"], ["Expr", ".", "Ident", "(", "Actuals", ")"]],
    "Actuals": [[], ["ExprList"]],
    "Constant": [
        ["IntConstant"], ["DoubleConstant"], ["StringConstant"], ["BoolConstant"], ["null"],
    ],
}

_CATEGORY_SYMBOLS = {
    TokenType.IDENTIFIER: "Ident",
    TokenType.BOOL: "BoolConstant",
    TokenType.INT: "IntConstant",
    TokenType.DOUBLE: "DoubleConstant",
    TokenType.STRING: "StringConstant",
    TokenType.SEMICOLON: ";",
    TokenType.PERIOD: ".",
    TokenType.COMMA: ",",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.LBRACK: "[",
    TokenType.RBRACK: "]",
}


@lru_cache(maxsize=None)
def decaf_grammar() -> Grammar:
    """The grammar of the Decaf language."""
    return Grammar(_PRODUCTIONS)


@lru_cache(maxsize=None)
def decaf_parser() -> Parser:
    """The LALR(1) parser for the Decaf grammar; built once, then shared."""
    return Parser(decaf_grammar())


def token_to_symbol(token: Token) -> str:
    """The grammar symbol a lexer token stands for.

    Keywords and operators stand for themselves; other tokens stand for
    their category. Comments and the end marker have no symbol.
    """
    if token.type in (TokenType.KEYWORD, TokenType.OPERATOR):
        return token.value
    try:
        return _CATEGORY_SYMBOLS[token.type]
    except KeyError:
        raise ValueError(f"token of type {token.type.name} has no grammar symbol") from None