from operator import mul

import pytest

from rangealgo import NA, accumulate


def test_accumulate():
    assert accumulate([1, 2, 3, 4, 5]) == 15
    assert accumulate(range(10), 2, 5) == 9
    assert accumulate([1, 2, 3, 4, 5], -2) == 9
    assert accumulate([1.5, 2.5]) == 4.0


def test_accumulate_init_and_op():
    assert accumulate([1, 2, 3, 4], init=1, op=mul) == 24
    assert accumulate([1, 2, 3], init=10) == 16
    assert accumulate(['a', 'b', 'c'], init='') == 'abc'


def test_accumulate_left_to_right():
    assert accumulate(['a', 'b', 'c'], init='', op=lambda acc, x: f"({acc}{x})") == "(((a)b)c)"
    assert accumulate([8, 4, 2], init=64, op=lambda acc, x: acc / x) == 1.0


def test_accumulate_empty_range_returns_init():
    init = object()
    assert accumulate([], init=init) is init
    assert accumulate([1, 2, 3], 2, 2, init=init) is init
    assert accumulate([1, 2, 3], 3, 1, init=init, op=mul) is init


def test_accumulate_propagates_na():
    assert isinstance(accumulate([1, NA(int), 3]), NA)
    assert accumulate([1, NA(int), 3], 2) == 3


def test_accumulate_op_errors_propagate():
    with pytest.raises(TypeError):
        accumulate([1, 'a'])
