"""
Errors raised when functor evidence or implicit values cannot be found
"""
from enum import Enum


class InstanceError(str, Enum):
    """
    Enumeration of possible instance resolution errors.
    """
    NO_FUNCTOR = "No Functor instance available for {container}."
    NO_IMPLICIT = "No implicit value registered for {container}."
    WRONG_CONTAINER = "Expected a value of {expected}, got {actual}."

    def render(self, **kwargs) -> str:
        """Fills in the message template."""
        return self.value.format(**kwargs)


def _type_name(t) -> str:
    return getattr(t, '__qualname__', None) or repr(t)


class FreeError(Exception):
    """Base class for pyfree errors.

    Constructor arguments are kept in args, so errors survive pickle and
    copy; the message is rendered from them on demand.
    """
    reason: InstanceError


class MissingInstance(FreeError, LookupError):
    """
    Raised when no Functor evidence or implicit value could be resolved
    """

    def __init__(self, reason: InstanceError, container):
        super().__init__(reason, container)
        self.reason = reason
        self.container = container

    def __str__(self):
        return self.reason.render(container=_type_name(self.container))


class ContainerMismatch(FreeError, TypeError):
    """
    Raised when a builder receives a value of the wrong container type
    """
    reason = InstanceError.WRONG_CONTAINER

    def __init__(self, expected, actual):
        super().__init__(expected, actual)
        self.expected = expected
        self.actual = actual

    def __str__(self):
        return self.reason.render(expected=_type_name(self.expected),
                                  actual=_type_name(self.actual))
