import pytest

from patternkit.iterator import SList, SListIterator, TakeView


def _filled() -> SList[int]:
    s: SList[int] = SList()
    for value in (10, 20, 30, 40):
        s.push_front(value)
    return s


def test_java_style_iteration_visits_front_first():
    it = _filled().iterator()
    seen = []
    while it.has_next():
        seen.append(it.next())
    assert seen == [40, 30, 20, 10]


def test_python_iteration_matches_java_style():
    s = _filled()
    assert list(s) == list(s.iterator())


def test_empty_iterator_has_no_next():
    it = SList().iterator()
    assert it.has_next() is False
    with pytest.raises(StopIteration):
        it.next()


def test_exhausted_iterator_raises():
    s: SList[str] = SList()
    s.push_front("a")
    it = s.iterator()
    assert it.next() == "a"
    assert not it.has_next()
    with pytest.raises(StopIteration):
        it.next()


def test_constructor_items_are_pushed_in_order():
    assert list(SList([1, 2, 3])) == [3, 2, 1]


def test_iterators_are_independent():
    s = _filled()
    first = s.iterator()
    second = s.iterator()
    first.next()
    assert second.next() == 40
    assert first.next() == 30


def test_standalone_iterator_over_nothing():
    assert list(SListIterator()) == []


def test_take_view_first_three():
    v = list(range(1, 11))
    assert list(TakeView(v, 3)) == [1, 2, 3]
    assert len(TakeView(v, 3)) == 3


def test_take_view_is_live():
    v = [5]
    view = TakeView(v, 3)
    v.extend([6, 7, 8])
    assert list(view) == [5, 6, 7]


def test_take_view_clamps_to_container():
    view = TakeView([1, 2], 5)
    assert list(view) == [1, 2]
    assert len(view) == 2


def test_take_view_rejects_negative_count():
    with pytest.raises(ValueError):
        TakeView([1, 2], -1)


def test_take_view_over_slist():
    assert list(TakeView(_filled(), 2)) == [40, 30]