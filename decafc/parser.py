"""LALR(1) parser generation and recognition over a :class:`Grammar`."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from decafc.grammar import END_OF_INPUT, Grammar

START = "Start"


@dataclass(frozen=True, order=True)
class Item:
    """An LR(0) item: a production with a marker position in its right side."""

    left: str
    right: tuple[str, ...] = field(default=())
    position: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "right", tuple(self.right))
        if not 0 <= self.position <= len(self.right):
            raise ValueError(
                f"position {self.position} outside production of length {len(self.right)}"
            )

    def next(self) -> str:
        """The symbol right after the marker."""
        if self.at_end():
            raise IndexError("item has no symbol after its marker")
        return self.right[self.position]

    def at_end(self) -> bool:
        """True when the marker is past the last symbol."""
        return self.position == len(self.right)

    def shift(self) -> Item:
        """A copy of the item with the marker moved one symbol right."""
        if self.at_end():
            raise IndexError("cannot shift a complete item")
        return Item(self.left, self.right, self.position + 1)

    def __str__(self) -> str:
        parts = [f"{self.left} ->"]
        for index, symbol in enumerate(self.right):
            if index == self.position:
                parts.append(" .")
            parts.append(f" {symbol}")
        if self.at_end():
            parts.append(" .")
        return "".join(parts)


class ItemSet:
    """A closed set of LR(1) items, each with its set of lookahead terminals.

    Equality and ordering look only at the LR(0) items, not the lookaheads.
    """

    def __init__(
        self,
        grammar: Grammar,
        kernel: Mapping[Item, Iterable[str]] | Iterable[Item],
    ) -> None:
        self.grammar = grammar
        if isinstance(kernel, Mapping):
            seeds = {item: set(lookaheads) for item, lookaheads in kernel.items()}
        else:
            seeds = {
                item: {END_OF_INPUT} if item.left == START else set()
                for item in kernel
            }
        self._items = self._closure(seeds)
        self._core = frozenset(self._items)

    def _follow(self, item: Item) -> set[str]:
        """Lookaheads for items spawned by the symbol after ``item``'s marker."""
        result: set[str] = set()
        for symbol in item.right[item.position + 1 :]:
            result |= self.grammar.first_set(symbol)
            if not self.grammar.produces_epsilon(symbol):
                return result
        return result | self._items_lookaheads(item)

    def _items_lookaheads(self, item: Item) -> set[str]:
        return self._pending[item]

    def _closure(self, seeds: dict[Item, set[str]]) -> dict[Item, set[str]]:
        items = seeds
        self._pending = items
        work = list(items)
        while work:
            item = work.pop()
            if item.at_end():
                continue
            symbol = item.next()
            if self.grammar.is_terminal(symbol):
                continue
            follow = self._follow(item)
            for right in self.grammar.rules(symbol):
                spawned = Item(symbol, right)
                created = spawned not in items
                current = items.setdefault(spawned, set())
                if created or not follow <= current:
                    current |= follow
                    work.append(spawned)
        del self._pending
        return items

    @property
    def core(self) -> frozenset[Item]:
        """The LR(0) items of the set."""
        return self._core

    def shift(self, symbol: str) -> ItemSet:
        """The closure of every item that can move its marker over ``symbol``."""
        kernel = {
            item.shift(): set(lookaheads)
            for item, lookaheads in self._items.items()
            if not item.at_end() and item.next() == symbol
        }
        return ItemSet(self.grammar, kernel)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(sorted(self._items))

    def lookaheads(self, item: Item) -> frozenset[str]:
        """The lookahead terminals of ``item``; KeyError if it is not in the set."""
        return frozenset(self._items[item])

    def take_lookaheads(self, other: ItemSet) -> bool:
        """Add ``other``'s lookaheads to this set; True if any were new."""
        if self != other:
            raise ValueError("item sets have different LR(0) items")
        changed = False
        for item, lookaheads in self._items.items():
            extra = other._items[item] - lookaheads
            if extra:
                lookaheads |= extra
                changed = True
        return changed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self._core == other._core

    def __lt__(self, other: ItemSet) -> bool:
        if not isinstance(other, ItemSet):
            return NotImplemented
        return tuple(sorted(self._core)) < tuple(sorted(other._core))

    def __hash__(self) -> int:
        return hash(self._core)

    def __str__(self) -> str:
        lines = [f"Size: {len(self)}"]
        for item in self:
            lines.append(f"Item: {item}")
            lines.append(
                "Lookaheads: " + "".join(f"{la}," for la in sorted(self._items[item]))
            )
        return "\n".join(lines)


class Parser:
    """An LALR(1) automaton built from a grammar with a ``Start`` symbol."""

    def __init__(self, grammar: Grammar) -> None:
        if START not in grammar.types or not grammar.rules(START):
            raise ValueError(f"grammar has no {START!r} production")
        self.grammar = grammar
        self._start = ItemSet(grammar, [Item(START, grammar.rules(START)[0])])
        self._states: dict[frozenset[Item], ItemSet] = {}
        self._transitions: dict[frozenset[Item], dict[str, ItemSet]] = {}
        self._build()

    def _build(self) -> None:
        symbols = sorted(self.grammar.types)
        states = self._states
        states[self._start.core] = self._start
        queue = deque([self._start.core])
        queued = {self._start.core}
        while queue:
            core = queue.popleft()
            queued.discard(core)
            state = states[core]
            for symbol in symbols:
                target = state.shift(symbol)
                if not len(target):
                    continue
                known = states.get(target.core)
                if known is None:
                    states[target.core] = target
                elif not known.take_lookaheads(target):
                    continue
                if target.core not in queued:
                    queue.append(target.core)
                    queued.add(target.core)
        for core, state in states.items():
            moves: dict[str, ItemSet] = {}
            for symbol in symbols:
                target_core = frozenset(
                    item.shift()
                    for item in core
                    if not item.at_end() and item.next() == symbol
                )
                if target_core:
                    moves[symbol] = states[state.shift(symbol).core]
            self._transitions[core] = moves

    def state_count(self) -> int:
        """Number of states in the automaton."""
        return len(self._states)

    def find(self, item_set: ItemSet) -> ItemSet | None:
        """The state with the same LR(0) items as ``item_set``, if any."""
        return self._states.get(item_set.core)

    def shift(self, state: ItemSet, symbol: str) -> ItemSet | None:
        """The state reached from ``state`` over ``symbol``, or None."""
        return self._transitions[state.core].get(symbol)

    def reduce(self, state: ItemSet, symbol: str) -> Item | None:
        """The complete item of ``state`` to reduce by on lookahead ``symbol``."""
        for item in state:
            if item.at_end() and symbol in state.lookaheads(item):
                return item
        return None

    def _goto(self, stack: list[ItemSet], symbol: str) -> ItemSet:
        target = self.shift(stack[-1], symbol)
        if target is None:
            raise RuntimeError(f"automaton has no transition over {symbol!r}")
        return target

    def parses(self, symbols: Iterable[str]) -> bool:
        """True if the symbol sequence is a sentence of the grammar."""
        states = [self._states[self._start.core]]
        stack: list[str] = []

        def reduce_by(item: Item) -> None:
            if item.right:
                del states[-len(item.right) :]
                del stack[-len(item.right) :]
            stack.append(item.left)

        for symbol in symbols:
            while True:
                target = self.shift(states[-1], symbol)
                if target is not None:
                    states.append(target)
                    stack.append(symbol)
                    break
                reduction = self.reduce(states[-1], symbol)
                if reduction is None:
                    return False
                reduce_by(reduction)
                states.append(self._goto(states, reduction.left))
        while (reduction := self.reduce(states[-1], END_OF_INPUT)) is not None:
            reduce_by(reduction)
            if reduction.left == START:
                return True
            states.append(self._goto(states, reduction.left))
        return False

    def __str__(self) -> str:
        return "\n\n".join(str(state) for state in sorted(self._states.values()))