"""Shared test fixtures."""

from dataclasses import dataclass

import pytest

from pyfree import Functor, nat
from pyfree.functor import SequenceFunctor


@dataclass(frozen=True)
class Box:
    """A container that has no map of its own."""
    value: object


class BoxFunctor(Functor):
    def map(self, fa, f):
        return Box(f(fa.value))


class CountingFunctor(Functor):
    """List functor that records how often map is invoked."""

    def __init__(self):
        self.calls = 0

    def map(self, fa, f):
        self.calls += 1
        return [f(x) for x in fa]


@pytest.fixture
def list_functor():
    return SequenceFunctor()


@pytest.fixture
def box_functor():
    return BoxFunctor()


@pytest.fixture
def counting_functor():
    return CountingFunctor()


@pytest.fixture
def box_cls():
    return Box


@pytest.fixture
def list_to_tuple():
    return nat(tuple)
