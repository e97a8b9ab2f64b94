"""
Registry of container values resolved implicitly by the By builder
"""
import logging
from typing import Callable

from .errors import InstanceError, MissingInstance

logger = logging.getLogger(__name__)

IMPLICIT_VALUES: dict[object, Callable[[], object]] = {}


def implicitdef(container) -> Callable[[Callable[[], object]], Callable]:
    """
    Decorator for implicit value providers
    Registers a zero-argument function returning the value for container
    """
    def decorator(provider: Callable[[], object]) -> Callable[[], object]:
        IMPLICIT_VALUES[container] = provider
        logger.debug("registered implicit value for %r", container)
        return provider
    return decorator


def summon(container):
    """
    Returns the implicit value registered for container
    """
    provider = IMPLICIT_VALUES.get(container)
    if provider is None:
        raise MissingInstance(InstanceError.NO_IMPLICIT, container)
    return provider()
