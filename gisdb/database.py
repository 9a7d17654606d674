from collections import Counter
from logging import getLogger

from .bst import NameTree
from .city import City
from .kdtree import KDTree

log = getLogger(__name__)

MAXCOORD = 32767


def valid_coord(value):
    return 0 <= value <= MAXCOORD


class GISDB:
    '''
    The database: cities indexed by name (NameTree) and by coordinate (KDTree).

    Every change goes to both trees so that they always hold the same cities.
    Inputs are checked before either tree is touched and failures are returned in-band
    (False or an empty string), never raised.
    '''

    def __init__(self):
        self.clear()

    def clear(self):
        '''
        Discard all cities.
        '''
        self._names = NameTree()
        self._coords = KDTree()
        return True

    def insert(self, name, x, y):
        '''
        Add a city.  Fails for a missing name, coordinates outside [0, MAXCOORD],
        or a coordinate that is already used.
        '''
        if not name:
            log.debug('Rejecting city with no name')
            return False
        if not (valid_coord(x) and valid_coord(y)):
            log.debug(f'Rejecting {name} at ({x}, {y}); outside [0, {MAXCOORD}]')
            return False
        existing = self._coords.find(x, y)
        if existing is not None:
            log.debug(f'Rejecting {name} at ({x}, {y}); already used by {existing.name}')
            return False
        city = City(name, x, y)
        self._coords.insert(city)
        self._names.insert(city)
        log.debug(f'Inserted {city}')
        return True

    def delete(self, *args):
        '''
        delete(x, y) removes the city at that coordinate and returns "<visits>\\n<name>"
        (or "" if there was none).

        delete(name) removes all cities with that name and returns them, one per line.
        '''
        if len(args) == 1:
            return self.delete_name(*args)
        else:
            return self.delete_coord(*args)

    def delete_coord(self, x, y):
        deletion = self._coords.delete(x, y)
        if not deletion:
            log.debug(f'No city at ({x}, {y}) ({deletion.visits} visits)')
            return ''
        self._names.delete_one(deletion.city.name, deletion.city)
        log.debug(f'Deleted {deletion.city} ({deletion.visits} visits)')
        return str(deletion)

    def delete_name(self, name):
        if not name:
            return ''
        cities = list(self._names.find(name))
        if not cities:
            log.debug(f'No city called {name}')
            return ''
        for city in cities:
            self._coords.delete(city.x, city.y)
        self._names.delete_all(name)
        log.debug(f'Deleted {len(cities)} cities called {name}')
        return '\n'.join(str(city) for city in cities)

    def info(self, *args):
        '''
        info(x, y) returns the name of the city at that coordinate.

        info(name) returns all cities with that name, one per line.

        Both return the empty string if there is no match.
        '''
        if len(args) == 1:
            return self.info_name(*args)
        else:
            return self.info_coord(*args)

    def info_coord(self, x, y):
        city = self._coords.find(x, y)
        return '' if city is None else city.name

    def info_name(self, name):
        if not name:
            return ''
        return self._names.find_all(name)

    def search(self, x, y, radius):
        '''
        Cities within radius of (x, y), one per line, then the number of nodes visited.
        '''
        return self._coords.search(x, y, radius)

    def print(self):
        '''
        The name index, in name order, indented by depth.
        '''
        return self._names.print_tree()

    def debug(self):
        '''
        The coordinate index, in order, indented by depth.
        '''
        return self._coords.print_tree()

    def check(self):
        '''
        Raise AssertionError if either tree is inconsistent or the two trees disagree.
        '''
        self._names.check()
        self._coords.check()
        names, coords = Counter(self._names), Counter(self._coords)
        assert names == coords, f'Indices differ: {sorted((names - coords).elements())} only by name, ' \
                                f'{sorted((coords - names).elements())} only by coordinate'

    def __len__(self):
        return len(self._coords)
