"""
Natural transformations F ~> G as first-class values
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable


class NaturalTransformation[F, G](ABC):
    """
    A conversion from container F to container G, uniform over the
    element type.

    Implementations must not inspect the elements they carry, and must
    commute with map: nt(map(fa, f)) == map(nt(fa), f). Both are caller
    contracts and are never checked.
    """

    @abstractmethod
    def apply(self, fa):
        """Converts an F[X] into a G[X]."""

    def __call__(self, fa):
        return self.apply(fa)

    def and_then(self, other: NaturalTransformation) -> NaturalTransformation:
        """Returns the transformation that runs self, then other."""
        return _Composed(self, other)

    def compose(self, other: NaturalTransformation) -> NaturalTransformation:
        """Returns the transformation that runs other, then self."""
        return _Composed(other, self)

    def __rshift__(self, other: NaturalTransformation) \
        -> NaturalTransformation:
        """ Override >> operator for and_then """
        return self.and_then(other)

    def __lshift__(self, other: NaturalTransformation) \
        -> NaturalTransformation:
        """ Override << operator for compose """
        return self.compose(other)

    @staticmethod
    def id() -> NaturalTransformation:
        """The identity transformation F ~> F."""
        return ID_NAT


class _FunctionNat(NaturalTransformation):
    def __init__(self, fn: Callable):
        self.fn = fn

    def apply(self, fa):
        return self.fn(fa)

    def __repr__(self):
        return f"nat({getattr(self.fn, '__name__', self.fn)!s})"


class _Composed(NaturalTransformation):
    def __init__(self, first: NaturalTransformation,
                 second: NaturalTransformation):
        self.first = first
        self.second = second

    def apply(self, fa):
        return self.second(self.first(fa))

    def __repr__(self):
        return f"{self.first!r} >> {self.second!r}"


class _Identity(NaturalTransformation):
    def apply(self, fa):
        return fa

    def __repr__(self):
        return "id_nat"


ID_NAT = _Identity()


def nat(fn: Callable) -> NaturalTransformation:
    """
    Wraps a plain function F[X] -> G[X] as a NaturalTransformation.
    Can be used as a decorator.
    """
    if isinstance(fn, NaturalTransformation):
        return fn
    return _FunctionNat(fn)


def id_nat() -> NaturalTransformation:
    """Returns the identity transformation."""
    return ID_NAT
