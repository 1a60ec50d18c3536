# decafc

Front-end pieces of a compiler for Decaf, a small object-oriented teaching
language. The package has four parts:

- `decafc.token` and `decafc.lexer`: a lexer that turns Decaf source text into
  tokens.
- `decafc.grammar`: a context-free grammar with epsilon (nullability) and
  FIRST-set analysis.
- `decafc.parser`: an LALR(1) parser generator that builds an automaton from a
  grammar and checks whether a sequence of grammar symbols is accepted.
- `decafc.decaf_grammar`: the Decaf grammar itself, a parser built from it, and
  a mapping from lexer tokens to grammar symbols.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Lexing from the command line

`decaf-lex` reads Decaf source from standard input and prints its tokens:

```
decaf-lex < program.decaf
```

Each token is printed by its `str()` form: a kind label such as `Keyword `,
`Identifier ` or `Int ` for words and literals, the character itself for
parentheses, brackets, periods and commas, `;`, `{` and `}` each followed by a
newline, and `Comment here` for comments. The output ends with
`End of input reached`. A lexical error raises `LexerError`, which stops the
command with a traceback and a non-zero exit status.

## Using the lexer

```python
import io
from decafc.lexer import Lexer

for token in Lexer(io.StringIO("int x; x = 0x1F;")):
    print(token.type, token.value)
```

`Lexer` takes a text stream or a string. `Lexer.next_token()` returns one
`Token` at a time and, once the input is used up, a token of type
`TokenType.END`. Iterating over a `Lexer` yields every token before the end,
comments (`TokenType.COMMENT`) included. `Lexer.print_tokens(out)` writes the
remaining tokens to `out` (standard output by default) in the form shown above.

The lexer recognises keywords, `true`/`false`, identifiers (at most 31
characters), decimal and hexadecimal integers, doubles with an optional
exponent, double-quoted strings on a single line, `//` and `/* */` comments,
punctuation, and the operators `+ - * / % < <= > >= = == ! != && ||`.
Malformed input raises `LexerError`, a subclass of `ValueError`.

## Grammars

A `Grammar` is built from a mapping of non-terminals to lists of right-hand
sides. An empty right-hand side is an epsilon production. Symbols with no
productions are terminals. The start symbol is `"Start"`, and `"$"` stands for
the end of input.

```python
from decafc.grammar import Grammar

g = Grammar({
    "Start": [["E"]],
    "E": [["T"], ["E", "+", "T"]],
    "T": [["F"], ["T", "*", "F"]],
    "F": [["id"], ["(", "E", ")"]],
})
g.is_terminal("id")        # True
g.produces_epsilon("E")    # False
g.first_set("E")           # frozenset({"id", "("})
g.rules("F")               # (("id",), ("(", "E", ")"))
```

`Grammar.types` holds every symbol and `Grammar.derivations` maps each symbol
to its right-hand sides.

## LALR(1) parsing

```python
from decafc.parser import Parser

parser = Parser(g)
parser.state_count()                                   # 12
parser.parses(["(", "id", "*", "id", ")", "+", "id"])  # True
parser.parses(["id", "+"])                             # False
```

`Parser` needs a grammar with a `"Start"` production and raises `ValueError`
otherwise. `Item` and `ItemSet` expose the automaton: items with their marker
position, closures with their lookahead sets, and shift transitions.
`Parser.find`, `Parser.shift` and `Parser.reduce` walk the generated tables
state by state, and `str(parser)` lists every state with its items and
lookaheads.

## The Decaf grammar

`decafc.decaf_grammar` provides:

- `decaf_grammar()`: the full Decaf grammar.
- `decaf_parser()`: the parser built from it. Building it takes a while; the
  result is cached and shared.
- `token_to_symbol(token)`: the grammar symbol for a lexer token. Keywords and
  operators stand for themselves, other tokens for their category (`Ident`,
  `IntConstant`, `;` and so on). Comments and the end token raise `ValueError`.

## What the package does not do

The parser only recognises: `Parser.parses` answers whether the input is
accepted and builds no syntax tree. There is no semantic analysis and no code
generation, and no command runs the parser on a source file.