"""
Plain function helpers and the fused function chain
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property, reduce
from typing import Callable, TypeVar

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


def identity(x: A) -> A:
    """
    Returns the argument unchanged.
    """
    return x


def comp(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    """
    Composes two functions f and g into a single function.
    """
    return lambda x: f(g(x))


def and_then(g: Callable[[A], B], f: Callable[[B], C]) -> Callable[[A], C]:
    """
    Composes in pipeline order: g first, then f.
    """
    return comp(f, g)


@dataclass(frozen=True, eq=False, repr=False)
class Chain:
    """
    Immutable sequence of unary functions, applied first to last.

    Each chain node points at the chain it extends, so `then` is O(1)
    and never copies. Application walks the flattened steps in a loop,
    which keeps the call stack flat however long the chain grows.
    An empty chain is the identity function.
    """
    prev: Chain | None = None
    step: Callable | None = None

    def then(self, f: Callable) -> Chain:
        """Returns a new chain that applies f after this one."""
        return Chain(self, f)

    @cached_property
    def steps(self) -> tuple[Callable, ...]:
        """The functions of the chain in application order."""
        out: list[Callable] = []
        # top of the stack is always the next step to apply
        pending: list[Callable] = []
        _push_reversed(pending, self)
        while pending:
            step = pending.pop()
            if isinstance(step, Chain):
                _push_reversed(pending, step)
            else:
                out.append(step)
        return tuple(out)

    def __call__(self, x):
        return reduce(lambda acc, f: f(acc), self.steps, x)

    def __len__(self) -> int:
        return len(self.steps)

    def __repr__(self):
        return f"Chain(<{len(self)} steps>)"


def _push_reversed(pending: list[Callable], chain: Chain) -> None:
    """Pushes the steps of chain, last step first."""
    node: Chain | None = chain
    while node is not None and node.step is not None:
        pending.append(node.step)
        node = node.prev
