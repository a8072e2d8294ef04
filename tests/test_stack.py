'''
Bounded stack tests
'''

from rpncalc.stack import BoundedStack


def test_lifo():
    s = BoundedStack()
    assert s.push(1)
    assert s.push(2)
    assert s.pop() == 2
    assert s.pop() == 1


def test_pop_empty():
    s = BoundedStack()
    assert s.pop() is None
    assert len(s) == 0


def test_push_past_capacity():
    s = BoundedStack()
    s.push(1)
    s.push(2)
    assert not s.push(3)
    # Nothing discarded, nothing added.
    assert list(s) == [1, 2]
    assert len(s) == 2


def test_zero_is_a_value():
    s = BoundedStack()
    s.push(0)
    assert s.pop() == 0
    assert s.pop() is None


def test_custom_capacity():
    s = BoundedStack(capacity=3)
    assert all(s.push(n) for n in range(3))
    assert not s.push(3)


def test_clear():
    s = BoundedStack()
    s.push(1)
    s.push(2)
    s.clear()
    assert len(s) == 0
    assert s.push(3)
