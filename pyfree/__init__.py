""" imports for pyfree """
import logging

from .config import Settings, configure_logging, settings
from .coyoneda import Coyoneda, By, lift, by
from .errors import FreeError, MissingInstance, ContainerMismatch, \
    InstanceError
from .function import Chain, identity, comp, and_then
from .functor import Functor, MethodFunctor, functordef, functor_for, \
    map #pylint: disable=redefined-builtin
from .implicits import implicitdef, summon
from .natural import NaturalTransformation, nat, id_nat
from .yoneda import Yoneda

logging.getLogger(__name__).addHandler(logging.NullHandler())
