"""Context-free grammars with nullability and FIRST sets.

Special symbols: ``"Start"`` is the start symbol, ``"$"`` marks the end of
input and appears only in lookaheads. The empty string is written as an
empty right-hand side.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

END_OF_INPUT = "$"

Rule = tuple[str, ...]


class Grammar:
    """A grammar given as a map from each left-hand side to its right-hand sides."""

    def __init__(self, productions: Mapping[str, Iterable[Iterable[str]]]) -> None:
        derivations: dict[str, tuple[Rule, ...]] = {
            left: tuple(tuple(right) for right in rights)
            for left, rights in productions.items()
        }
        symbols = set(derivations)
        for rights in list(derivations.values()):
            for right in rights:
                symbols.update(right)
        for symbol in symbols:
            derivations.setdefault(symbol, ())
        self.types: frozenset[str] = frozenset(symbols)
        self.derivations: Mapping[str, tuple[Rule, ...]] = MappingProxyType(derivations)
        self._nullable = self._compute_nullable()
        self._first = self._compute_first_sets()

    def is_terminal(self, symbol: str) -> bool:
        """True for the end marker and for symbols with no productions."""
        return symbol == END_OF_INPUT or not self.derivations[symbol]

    def produces_epsilon(self, symbol: str) -> bool:
        """True if the symbol can derive the empty string."""
        if symbol not in self.types:
            raise KeyError(symbol)
        return symbol in self._nullable

    def first_set(self, symbol: str) -> frozenset[str]:
        """Terminals that can begin a string derived from the symbol."""
        return frozenset(self._first[symbol])

    def rules(self, left: str) -> tuple[Rule, ...]:
        """Right-hand sides of the productions for ``left``."""
        return self.derivations[left]

    def _compute_nullable(self) -> frozenset[str]:
        nullable: set[str] = set()
        changed = True
        while changed:
            changed = False
            for left, rights in self.derivations.items():
                if left in nullable:
                    continue
                if any(all(s in nullable for s in right) for right in rights):
                    nullable.add(left)
                    changed = True
        return frozenset(nullable)

    def _compute_first_sets(self) -> dict[str, set[str]]:
        first = {
            symbol: {symbol} if self.is_terminal(symbol) else set()
            for symbol in self.types
        }
        changed = True
        while changed:
            changed = False
            for left, rights in self.derivations.items():
                if not rights:
                    continue
                target = first[left]
                before = len(target)
                for right in rights:
                    for symbol in right:
                        target |= first[symbol]
                        if symbol not in self._nullable:
                            break
                if len(target) != before:
                    changed = True
        return first