from rangealgo.utils.range_view import RangeView

V = list(range(10))


def test_view_iterates_range():
    view = RangeView(V, range(3, 7))
    assert len(view) == 4
    assert list(view) == [3, 4, 5, 6]


def test_view_enumerate_is_absolute():
    view = RangeView(V, range(3, 6))
    assert list(view.enumerate()) == [(3, 3), (4, 4), (5, 5)]
    assert view.stop == 6


def test_view_strided():
    view = RangeView(V, range(0, 10, 3))
    assert list(view) == [0, 3, 6, 9]
    assert list(view.enumerate())[-1] == (9, 9)


def test_view_empty_range():
    view = RangeView(V, range(5, 2))
    assert len(view) == 0
    assert list(view) == []
    assert view.stop == 2


def test_view_defaults_to_whole_sequence():
    view = RangeView("hello")
    assert len(view) == 5
    assert list(view) == list("hello")
    assert view.stop == 5


def test_view_repr():
    assert repr(RangeView(V, range(0, 2))) == f"RangeView({V!r}, range(0, 2))"
