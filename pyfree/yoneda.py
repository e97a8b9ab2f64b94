"""
Yoneda: the continuation-passing dual of Coyoneda
"""
from __future__ import annotations
from typing import Callable, TypeVar

from .function import Chain, identity
from .functor import Functor, functor_for, functordef

A = TypeVar('A')
B = TypeVar('B')


class Yoneda[F, A]:
    """
    Represents F[A] as a polymorphic function: for any B and any
    g: A -> B, apply(g) yields F[B].

    This is isomorphic to F[A] as long as F is a functor; the functor
    evidence is captured when the value is built, so apply needs none.
    Functions added by map are kept in a Chain in front of run_yoneda
    and handed to it in one piece.
    """

    def __init__(self, run_yoneda: Callable[[Callable[[A], B]], object],
                 prefix: Chain | None = None):
        self._run_yoneda = run_yoneda
        self._prefix = Chain() if prefix is None else prefix

    def apply(self, g: Callable[[A], B]):
        """Maps g over the underlying container."""
        return self._run_yoneda(self._prefix.then(g))

    def __call__(self, g: Callable[[A], B]):
        return self.apply(g)

    def run(self):
        """Converts back to F[A]."""
        return self.apply(identity)

    def map(self, f: Callable[[A], B]) -> Yoneda[F, B]:
        """Fuses f in front of whatever function apply receives later."""
        return Yoneda(self._run_yoneda, self._prefix.then(f))

    def __rand__(self, f: Callable[[A], B]) -> Yoneda[F, B]:
        """Defines the right-hand side of the map operation."""
        return self.map(f)

    def to_coyoneda(self):
        """Converts to Coyoneda by lowering and lifting again."""
        from .coyoneda import Coyoneda  # pylint:disable=C0415
        return Coyoneda.lift(self.run())

    @classmethod
    def lift(cls, fa, F: Functor | None = None) -> Yoneda:
        """
        Wraps fa, resolving its Functor instance when F is not given.
        """
        functor = functor_for(fa) if F is None else F
        return cls(lambda g: functor.map(fa, g))

    def __repr__(self):
        return "Yoneda(<function>)"


@functordef(Yoneda)
class YonedaFunctor(Functor):
    """Yoneda is a functor whatever F is."""

    def map(self, fa, f):
        return fa.map(f)
