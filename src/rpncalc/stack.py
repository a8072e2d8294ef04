from collections import deque


class BoundedStack:
    '''
    Fixed capacity LIFO store of operands.

    Refuses to grow past its capacity instead of dropping the bottom element
    like a deque(maxlen=...) would.
    '''

    DEFAULT_CAPACITY = 2

    def __init__(self, capacity=None):
        self.capacity = capacity or type(self).DEFAULT_CAPACITY
        self._data = deque()

    def push(self, value):
        '''
        Push value on top. Return False, leaving contents untouched, if full.
        '''
        if len(self._data) >= self.capacity:
            return False
        self._data.append(value)
        return True

    def pop(self):
        '''
        Pop topmost value, or None if empty.
        '''
        if not self._data:
            return None
        return self._data.pop()

    def clear(self):
        self._data.clear()

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        # Bottom first
        return iter(self._data)

    def __repr__(self):
        return '{}({!r}, capacity={})'.format(type(self).__name__,
                                              list(self._data),
                                              self.capacity)
