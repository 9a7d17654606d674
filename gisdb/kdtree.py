from collections import namedtuple

from .lib.tree import to_dump, pre_order, in_order


class Deletion(namedtuple('BaseDeletion', 'visits, city')):
    '''
    The result of deleting by coordinate: nodes visited and the city removed (or None).
    '''

    __slots__ = ()

    def __bool__(self):
        return self.city is not None

    def __str__(self):
        if self.city is None:
            return f'{self.visits} '
        else:
            return f'{self.visits}\n{self.city.name}'


class Node:

    def __init__(self, city):
        self.city = city
        self.left = None
        self.right = None
        # set when deletion has left an equal axis value in the right subtree
        self.ties = False


# a node reached by a search, with its depth and the step that led to it (None at the top)
Step = namedtuple('Step', 'node, depth, parent')


class KDTree:

    # a 2d tree of cities keyed by (x, y), at most one city per coordinate.
    # the axis at depth d is d % 2 (0 is x, 1 is y) and is never stored.
    # on the axis, smaller or equal values go left and larger values go right.
    #
    # deletion replaces a removed node with the minimum (on the node's axis) of its right subtree
    # or, when there is only a left subtree, with the minimum of the left, which then becomes the
    # right subtree.  the replacement is then removed from that subtree in the same way, until a
    # leaf is dropped.  if several nodes share the minimum value the others stay on the right,
    # equal to the new node.  such nodes are flagged (ties) and lookups that meet an equal value
    # there check both sides.  the flag is recalculated whenever a deletion passes through.
    #
    # all operations that return visit counts charge one visit per node entered, including the
    # walks that find minimums during deletion.
    #
    # there is no balancing, so every walk keeps its own stack.

    def __init__(self):
        self._root = None
        self.__size = 0
        self.__visits = 0

    def insert(self, city):
        '''
        Add a city.  Returns False (and leaves the tree unchanged) for None or an existing coordinate.
        '''
        if city is None or self.find(city.x, city.y) is not None:
            return False
        if self._root is None:
            self._root = Node(city)
        else:
            node, depth = self._root, 0
            while True:
                axis = depth % 2
                if city.coord(axis) <= node.city.coord(axis):
                    if node.left is None:
                        node.left = Node(city)
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = Node(city)
                        break
                    node = node.right
                depth += 1
        self.__size += 1
        return True

    def find(self, x, y):
        '''
        The city at exactly (x, y), or None.  Visits are not counted.
        '''
        step = self.__locate(Step(self._root, 0, None), x, y, count=False)
        return None if step is None else step.node.city

    def __locate(self, start, x, y, count=True):
        '''
        Depth-first search below start for the node at (x, y).  Returns its Step, or None.
        '''
        stack = [start]
        while stack:
            step = stack.pop()
            node = step.node
            if node is None:
                continue
            if count:
                self.__visits += 1
            if node.city.x == x and node.city.y == y:
                return step
            for child in reversed(self.__children(node, x, y, step.depth)):
                stack.append(Step(child, step.depth + 1, step))
        return None

    @staticmethod
    def __children(node, x, y, depth):
        '''
        The subtrees that might hold (x, y), in order.
        '''
        axis = depth % 2
        value, split = (y if axis else x), node.city.coord(axis)
        if value < split:
            return node.left,
        elif value == split:
            return (node.left, node.right) if node.ties else (node.left,)
        else:
            return node.right,

    def delete(self, x, y):
        '''
        Remove the city at (x, y).  Returns a Deletion with the visit count and the city removed
        (None if there was no such city).
        '''
        self.__visits = 0
        step = self.__locate(Step(self._root, 0, None), x, y)
        if step is None:
            return Deletion(self.__visits, None)
        city = step.node.city
        self.__remove(step)
        self.__size -= 1
        return Deletion(self.__visits, city)

    def __remove(self, step):
        '''
        Remove the city at the step's node, pulling replacements up until a leaf can be dropped.
        '''
        replaced = set()
        while True:
            node, depth = step.node, step.depth
            axis = depth % 2
            if node.right is not None:
                successor = self.__min(node.right, axis, depth + 1)
            elif node.left is not None:
                successor = self.__min(node.left, axis, depth + 1)
                node.left, node.right = None, node.left
            else:
                break
            node.city = successor
            replaced.add(node)
            step = self.__locate(Step(node.right, depth + 1, step), successor.x, successor.y)
        self.__detach(step)
        # every node whose subtree changed is on the path to the leaf
        step = step.parent
        while step is not None:
            node = step.node
            if node.ties or node in replaced:
                node.ties = self.__tied(node, step.depth)
            step = step.parent

    def __detach(self, step):
        if step.parent is None:
            self._root = None
        elif step.parent.node.left is step.node:
            step.parent.node.left = None
        else:
            step.parent.node.right = None

    def __tied(self, node, depth):
        '''
        Does the right subtree hold the node's value on its axis?  Visits are not counted.
        '''
        if node.right is None:
            return False
        axis = depth % 2
        return self.__min(node.right, axis, depth + 1, count=False).coord(axis) == node.city.coord(axis)

    def __min(self, node, axis, depth, count=True):
        '''
        The city with the smallest value on the given axis (the first found, on ties).
        '''
        best, stack = None, [(node, depth)]
        while stack:
            node, depth = stack.pop()
            if node is None:
                continue
            if count:
                self.__visits += 1
            if depth % 2 == axis:
                # the left subtree holds anything smaller or equal
                if node.left is not None:
                    stack.append((node.left, depth + 1))
                    continue
            else:
                stack.append((node.right, depth + 1))
                stack.append((node.left, depth + 1))
            if best is None or node.city.coord(axis) < best.coord(axis):
                best = node.city
        return best

    def within(self, x, y, radius):
        '''
        Cities within radius of (x, y) (inclusive) in pre-order, and the number of nodes visited.
        '''
        self.__visits = 0
        cities = list(self.__within(x, y, radius))
        return cities, self.__visits

    def __within(self, x, y, radius):
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            if node is None:
                continue
            self.__visits += 1
            dx, dy = node.city.x - x, node.city.y - y
            if dx * dx + dy * dy <= radius * radius:
                yield node.city
            diff = dy if depth % 2 else dx
            if diff <= radius:
                stack.append((node.right, depth + 1))
            if diff >= -radius:
                stack.append((node.left, depth + 1))

    def search(self, x, y, radius):
        '''
        Cities within radius of (x, y), one per line, then the visit count.
        The empty string if radius is negative.
        '''
        if radius < 0:
            return ''
        cities, visits = self.within(x, y, radius)
        return '\n'.join([str(city) for city in cities] + [str(visits)])

    def print_tree(self):
        '''
        In-order dump, one line per city, indented by depth.
        '''
        return to_dump((depth, node.city) for depth, node in in_order(self._root))

    def check(self):
        '''
        Raise AssertionError if the tree is inconsistent (ordering on each axis, repeated coordinates
        or stale ties flags).
        '''
        coords = set()
        for city in self:
            assert (city.x, city.y) not in coords, f'Repeated coordinate in {city}'
            coords.add((city.x, city.y))
        assert len(coords) == self.__size, f'Size {self.__size} but found {len(coords)} nodes'
        for depth, node in pre_order(self._root):
            axis = depth % 2
            split = node.city.coord(axis)
            for _, left in pre_order(node.left):
                assert left.city.coord(axis) <= split, f'{left.city} is left of {node.city} but greater'
            for _, right in pre_order(node.right):
                assert right.city.coord(axis) > split or (node.ties and right.city.coord(axis) == split), \
                    f'{right.city} is right of {node.city} but not greater'
            assert not node.ties or self.__tied(node, depth), f'{node.city} flagged with no ties'

    def __len__(self):
        return self.__size

    def __iter__(self):
        for _, node in pre_order(self._root):
            yield node.city

    def __contains__(self, coord):
        x, y = coord
        return self.find(x, y) is not None
