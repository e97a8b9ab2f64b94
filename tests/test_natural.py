"""Tests for natural transformations."""

from hypothesis import given
from hypothesis import strategies as st

from pyfree import NaturalTransformation, id_nat, lift, nat
from pyfree.functor import SequenceFunctor

LIST = SequenceFunctor()


@nat
def first_or_empty(xs):
    """list ~> list holding at most the first element"""
    return xs[:1]


def test_nat_wraps_function(list_to_tuple):
    assert isinstance(list_to_tuple, NaturalTransformation)
    assert list_to_tuple([1, 2]) == (1, 2)
    assert list_to_tuple.apply([3]) == (3,)


def test_nat_used_as_decorator():
    assert isinstance(first_or_empty, NaturalTransformation)
    assert first_or_empty([4, 5]) == [4]


def test_nat_of_transformation_is_itself(list_to_tuple):
    assert nat(list_to_tuple) is list_to_tuple


def test_identity():
    assert id_nat()([1]) == [1]
    assert NaturalTransformation.id() is id_nat()


def test_and_then_runs_left_to_right(list_to_tuple):
    both = first_or_empty.and_then(list_to_tuple)

    assert both([1, 2, 3]) == (1,)
    assert (first_or_empty >> list_to_tuple)([1, 2, 3]) == (1,)


def test_compose_runs_right_to_left(list_to_tuple):
    to_list = nat(list)
    both = to_list.compose(list_to_tuple)

    assert both([1, 2]) == [1, 2]
    assert (list_to_tuple << first_or_empty)([7, 8]) == (7,)


def test_custom_subclass():
    class Reverse(NaturalTransformation):
        def apply(self, fa):
            return fa[::-1]

    assert lift([1, 2, 3]).map(str).transform(Reverse()).run(LIST) == \
        ["3", "2", "1"]


def test_transform_keeps_deferred_function():
    c = lift([1, 2, 3]).map(lambda x: x * 10)

    assert c.transform(first_or_empty).run(LIST) == [10]
    assert c.transform(id_nat()).run(LIST) == c.run(LIST)


@given(xs=st.lists(st.integers()))
def test_first_or_empty_is_natural(xs):
    f = lambda x: x - 1  # pylint: disable=unnecessary-lambda-assignment

    assert first_or_empty(LIST.map(xs, f)) == LIST.map(first_or_empty(xs), f)


def test_repr(list_to_tuple):
    assert repr(list_to_tuple) == "nat(tuple)"
    assert repr(first_or_empty >> id_nat()) == "nat(first_or_empty) >> id_nat"
