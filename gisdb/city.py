from collections import namedtuple


class City(namedtuple('BaseCity', 'name, x, y')):
    '''
    An immutable named point.

    Ordering is the usual tuple ordering, so the name is the primary key and ties are broken
    on x then y.  Equality needs all three fields; use has_name() to match on name alone.
    '''

    __slots__ = ()

    def __new__(cls, name, x, y):
        if name is None:
            raise ValueError('City name cannot be None')
        return super().__new__(cls, name, int(x), int(y))

    def has_name(self, name):
        return self.name == name

    def coord(self, axis):
        return self.y if axis else self.x

    def __str__(self):
        return f'{self.name} ({self.x}, {self.y})'
