import pytest

from liblisp.util import LinkedList


def test_len():
    list1 = LinkedList.from_iterable([32, "a"])
    list2 = LinkedList.from_iterable([LinkedList()])
    assert len(list1) == 2
    assert len(list2) == 1
    assert len(LinkedList()) == 0


def test_head_and_tail():
    list1 = LinkedList.from_iterable([32, "a"])
    assert list1.head() == 32
    assert list1.tail() == LinkedList.from_iterable(["a"])


def test_empty_head_and_tail():
    empty = LinkedList()
    assert empty.head() is None
    assert empty.tail() is empty


def test_cons():
    l1 = LinkedList().cons(10)
    result = l1.cons(11)
    assert result == LinkedList.from_iterable([11, 10])
    assert result.tail() is l1


def test_cons_does_not_modify_original():
    base = LinkedList.from_iterable([1, 2])
    base.cons(0)
    assert list(base) == [1, 2]


def test_iteration_order():
    assert list(LinkedList.from_iterable("abc")) == ["a", "b", "c"]


def test_reverse():
    items = LinkedList.from_iterable([1, 2, 3])
    assert list(items.reverse()) == [3, 2, 1]
    assert items.reverse().reverse() == items
    assert LinkedList().reverse() == LinkedList()


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], ["x", None, 4]])
def test_round_trip(values):
    assert list(LinkedList.from_iterable(values)) == values
    assert len(LinkedList.from_iterable(values)) == len(values)


def test_equality_and_hash():
    a = LinkedList.from_iterable([1, 2])
    b = LinkedList().cons(2).cons(1)
    assert a == b
    assert hash(a) == hash(b)
    assert a != LinkedList.from_iterable([1])


def test_truthiness():
    assert not LinkedList()
    assert LinkedList().cons(0)


def test_long_list_is_not_recursive():
    items = LinkedList.from_iterable(range(50000))
    assert len(items) == 50000
    assert items.reverse().head() == 49999