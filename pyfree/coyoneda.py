"""
Coyoneda: the free functor on any container type.

A Coyoneda value pairs a wrapped F[Pivot] with a deferred function
Pivot -> A. Mapping only extends the deferred function, so F[A] can be
treated as a functor even when F has no map, and a chain of maps costs a
single pass of F's own map once the value is run. Functor evidence for F
is needed only by run and to_yoneda.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, TypeVar, get_origin

from . import config
from .errors import ContainerMismatch
from .function import Chain
from .functor import Functor, functor_for, functordef
from .implicits import summon
from .natural import NaturalTransformation
from .yoneda import Yoneda

A = TypeVar('A')
B = TypeVar('B')

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True, eq=False, repr=False)
class Coyoneda[A]:
    """
    Immutable pair of a wrapped value and a deferred transform.

    Build with lift, of or by rather than the constructor. The pivot
    type and both fields stay private; the public surface is map,
    transform, run and to_yoneda.
    """
    _fi: object
    _k: Chain

    @classmethod
    def lift(cls, fa) -> Coyoneda:
        """Lifts any F[A] into Coyoneda with the identity transform."""
        return cls(fa, Chain())

    @classmethod
    def of(cls, fa, k: Callable) -> Coyoneda:
        """Like lift(fa).map(k)."""
        return cls(fa, Chain().then(k))

    @staticmethod
    def by(container) -> By:
        """
        Partial application on the container type.
        It can be nicer to say Coyoneda.by(list)(lambda x: ...)
        """
        return By(container)

    def map(self, f: Callable[[A], B]) -> Coyoneda[B]:
        """
        Simple function composition. Allows map fusion without touching
        the underlying value.
        """
        return Coyoneda(self._fi, self._k.then(f))

    def __rand__(self, f: Callable[[A], B]) -> Coyoneda[B]:
        """Defines the right-hand side of the map operation."""
        return self.map(f)

    def transform(self, nt: NaturalTransformation | Callable) -> Coyoneda[A]:
        """
        Swaps the container through a natural transformation,
        leaving the deferred transform as it is.
        """
        return Coyoneda(nt(self._fi), self._k)

    def _evidence(self, F: Functor | None) -> Functor:
        return functor_for(self._fi) if F is None else F

    def run(self, F: Functor | None = None):
        """
        Converts to F[A] given that F is a functor.
        F is resolved from the wrapped value when not supplied.
        """
        functor = self._evidence(F)
        logger.debug("running %s over %s with %d fused steps",
                     type(functor).__name__, type(self._fi).__name__,
                     len(self._k))
        return functor.map(self._fi, self._k)

    def to_yoneda(self, F: Functor | None = None) -> Yoneda:
        """Converts to Yoneda given that F is a functor."""
        functor = self._evidence(F)
        logger.debug("converting to Yoneda via %s",
                     type(functor).__name__)
        fi, k = self._fi, self._k
        return Yoneda(lambda g: functor.map(fi, k.then(g)))

    def __repr__(self):
        return f"Coyoneda({self._fi!r}, <{len(self._k)} steps>)"


@functordef(Coyoneda)
class CoyonedaFunctor(Functor):
    """Coyoneda is a functor whatever F is."""

    def map(self, fa, f):
        return fa.map(f)


class By[F]:
    """
    Represents a partially-built Coyoneda value. Used in the by method.
    """

    def __init__(self, container, strict: bool | None = None):
        self.container = container
        self.strict = config.settings.strict_containers if strict is None \
            else strict

    def _check(self, fa) -> None:
        runtime = get_origin(self.container) or self.container
        if self.strict and isinstance(runtime, type) \
                and not isinstance(fa, runtime):
            raise ContainerMismatch(self.container, type(fa))

    def __call__(self, k: Callable[[A], B], fa=_MISSING) -> Coyoneda[B]:
        """
        Builds Coyoneda.of(fa, k), summoning fa from the implicit
        registry when it is not given.
        """
        value = summon(self.container) if fa is _MISSING else fa
        self._check(value)
        return Coyoneda.of(value, k)

    def __repr__(self):
        return f"By({self.container!r})"


def lift(fa) -> Coyoneda:
    """F[A] converts to Coyoneda[F, A] for any F."""
    return Coyoneda.lift(fa)


def by(container, strict: bool | None = None) -> By:
    """Module-level form of Coyoneda.by."""
    return By(container, strict)
