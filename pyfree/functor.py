""" Functor capability and the registry of instances """
import logging
from abc import ABC, abstractmethod
from functools import partial
from types import BuiltinFunctionType, FunctionType, MethodType
from typing import Callable, TypeVar

from .errors import InstanceError, MissingInstance
from .function import comp

# pylint:disable=C0105
A = TypeVar('A')
B = TypeVar('B')

logger = logging.getLogger(__name__)


class Functor[F](ABC):
    """Evidence that the container type F supports map.

    A Functor is a standalone capability object, not a base class of the
    container, so it can be supplied for containers that know nothing
    about it. To implement an instance, sub-class Functor and override
    map, ensuring that the functor laws hold:

        map(fa, identity) == fa
        map(map(fa, f), g) == map(fa, comp(g, f))

    The laws are a precondition and are not checked.
    """

    @abstractmethod
    def map(self, fa, f: Callable[[A], B]):
        """Applies f to every value held inside fa."""

    def lift(self, f: Callable[[A], B]) -> Callable:
        """Turns f into a function between containers."""
        return lambda fa: self.map(fa, f)


FUNCTOR_INSTANCES: dict[type, Functor] = {}


def functordef(*containers: type) -> Callable[[type[Functor]], type[Functor]]:
    """
    Decorator for Functor instances
    Registers one instance of the class for each container type
    """
    def decorator(cls: type[Functor]) -> type[Functor]:
        instance = cls()
        for container in containers:
            FUNCTOR_INSTANCES[container] = instance
            logger.debug("registered %s for %s",
                         cls.__name__, container.__qualname__)
        return cls
    return decorator


class MethodFunctor(Functor):
    """Functor for containers that carry their own map method."""

    def map(self, fa, f):
        return fa.map(f)


METHOD_FUNCTOR = MethodFunctor()


@functordef(list, tuple)
class SequenceFunctor(Functor):
    """Element-wise map that keeps the sequence type."""

    def map(self, fa, f):
        if hasattr(fa, '_make'):  # namedtuple
            return fa._make(f(x) for x in fa)
        return type(fa)(f(x) for x in fa)


@functordef(dict)
class DictFunctor(Functor):
    """Maps the values of a dict, keeping its keys and its type.

    The result starts as fa.copy(), so Counter, OrderedDict and
    defaultdict (with its default factory) come back as themselves.
    """

    def map(self, fa, f):
        out = fa.copy()
        for k, v in fa.items():
            out[k] = f(v)
        return out


@functordef(FunctionType, MethodType, BuiltinFunctionType, partial)
class FunctionFunctor(Functor):
    """Reader functor: mapping post-composes onto the function."""

    def map(self, fa, f):
        return comp(f, fa)


def functor_for(fa) -> Functor:
    """
    Resolves the Functor instance for the runtime type of fa.
    Walks the type's MRO, then falls back to the value's own map method.
    """
    for klass in type(fa).__mro__:
        instance = FUNCTOR_INSTANCES.get(klass)
        if instance is not None:
            return instance
    if callable(getattr(fa, 'map', None)):
        return METHOD_FUNCTOR
    raise MissingInstance(InstanceError.NO_FUNCTOR, type(fa))


def map(fn, f):  # pylint:disable=W0622
    """Applies the function 'fn' to the value(s) inside the container
    'f' using its resolved Functor instance."""
    return functor_for(f).map(f, fn)
