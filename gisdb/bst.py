from .lib.tree import to_dump, in_order


class Node:

    def __init__(self, city, depth):
        self.city = city
        self.depth = depth
        self.left = None
        self.right = None


class NameTree:

    # an unbalanced binary search tree of cities keyed by name
    #   names equal to a node's name go left, greater names go right
    #   so duplicate names collect along the left side of the first node with that name
    #   and can never appear in a right subtree of a node with the same name
    # every city with a given name therefore lies on the single path that an insert of that name
    # would follow, and deletion works on that path, deepest node first.
    # nodes carry their depth (root is 0) for display; this is kept correct when deletion
    # promotes a subtree.
    # there is no balancing, so nothing here recurses.

    def __init__(self):
        self._root = None
        self.__size = 0

    def insert(self, city):
        '''
        Add a city as a new leaf.  Always succeeds.
        '''
        if self._root is None:
            self._root = Node(city, 0)
        else:
            self.__insert(self._root, city)
        self.__size += 1
        return True

    def __insert(self, node, city):
        while True:
            if city.name <= node.city.name:
                if node.left is None:
                    node.left = Node(city, node.depth + 1)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(city, node.depth + 1)
                    return
                node = node.right

    def find(self, name):
        '''
        An iterator over cities with the given name (pre-order).
        '''
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            if name == node.city.name:
                yield node.city
                stack.append(node.right)
                stack.append(node.left)
            elif name < node.city.name:
                stack.append(node.left)
            else:
                stack.append(node.right)

    def find_all(self, name):
        '''
        All cities with the given name, one per line, or the empty string.
        '''
        return '\n'.join(str(city) for city in self.find(name))

    def __path(self, name):
        '''
        The nodes from the root down that an insert of the name would pass.
        '''
        path, node = [], self._root
        while node is not None:
            path.append(node)
            node = node.left if name <= node.city.name else node.right
        return path

    def __replace(self, path, index, node):
        '''
        Put node where path[index] was.
        '''
        if index == 0:
            self._root = node
        elif path[index - 1].left is path[index]:
            path[index - 1].left = node
        else:
            path[index - 1].right = node

    def delete_one(self, name, city=None):
        '''
        Remove a single city with the given name (the deepest, in post-order).

        If `city` is given then only a node holding an equal city (name and coordinates) is removed.
        Returns True if something was removed.
        '''
        path = self.__path(name)
        for index in reversed(range(len(path))):
            node = path[index]
            if node.city.has_name(name) and (city is None or city == node.city):
                self.__replace(path, index, self.__remove(node))
                self.__size -= 1
                return True
        return False

    def delete_all(self, name):
        '''
        Remove every city with the given name.  Returns True if anything was removed.
        '''
        path, count = self.__path(name), 0
        for index in reversed(range(len(path))):
            if path[index].city.has_name(name):
                # any replacement comes from the (already cleaned) left subtree, so cannot match
                self.__replace(path, index, self.__remove(path[index]))
                count += 1
        self.__size -= count
        return bool(count)

    def __remove(self, node):
        '''
        Remove a node, returning whatever replaces it.
        '''
        if node.left is None and node.right is None:
            return None
        elif node.left is None:
            return self.__promote(node.right, node.depth)
        elif node.right is None:
            return self.__promote(node.left, node.depth)
        else:
            node.left, node.city = self.__remove_max(node.left)
            return node

    def __remove_max(self, node):
        '''
        Remove the right-most node of a subtree.  Returns (new subtree, city removed).
        '''
        top, parent = node, None
        while node.right is not None:
            parent, node = node, node.right
        left = self.__promote(node.left, node.depth)
        if parent is None:
            return left, node.city
        parent.right = left
        return top, node.city

    @staticmethod
    def __promote(node, depth):
        '''
        Move a subtree up so that its root sits at the given depth.
        '''
        if node is not None and node.depth != depth:
            delta = node.depth - depth
            stack = [node]
            while stack:
                current = stack.pop()
                current.depth -= delta
                stack.extend(child for child in (current.left, current.right) if child)
        return node

    def print_tree(self):
        '''
        In-order dump, one line per city, indented by depth.
        '''
        return to_dump((node.depth, node.city) for _, node in in_order(self._root))

    def check(self):
        '''
        Raise AssertionError if ordering or depth is inconsistent anywhere in the tree.
        '''
        # upper is inclusive, lower exclusive
        count, stack = 0, [(self._root, 0, None, None)]
        while stack:
            node, depth, upper, lower = stack.pop()
            if node is None:
                continue
            count += 1
            name = node.city.name
            assert node.depth == depth, f'{node.city} has depth {node.depth} but is at {depth}'
            assert upper is None or name <= upper, f'{node.city} is left of {upper} but greater'
            assert lower is None or name > lower, f'{node.city} is right of {lower} but not greater'
            stack.append((node.left, depth + 1, name, lower))
            stack.append((node.right, depth + 1, upper, name))
        assert count == self.__size, f'Size {self.__size} but found {count} nodes'

    def __len__(self):
        return self.__size

    def __iter__(self):
        for _, node in in_order(self._root):
            yield node.city
