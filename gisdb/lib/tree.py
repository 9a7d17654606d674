def to_line(depth, city):
    '''
    a single line of a tree dump: the level, 2 spaces of indent per level, then the city.
    '''
    return f'{depth}{"  " * depth}{city}\n'


def to_dump(nodes):
    '''
    nodes is an iterable of (depth, city), already in the required order.
    '''
    return ''.join(to_line(depth, city) for depth, city in nodes)


# the trees are unbalanced, so a sorted sequence of inserts builds a chain as deep as the tree
# is large.  walks use an explicit stack rather than the interpreter's.

def pre_order(root):
    '''
    (depth, node) for each node: node, then left subtree, then right.
    '''
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node is not None:
            yield depth, node
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))


def in_order(root):
    '''
    (depth, node) for each node: left subtree, then node, then right.
    '''
    stack, node, depth = [], root, 0
    while stack or node is not None:
        if node is not None:
            stack.append((node, depth))
            node, depth = node.left, depth + 1
        else:
            node, depth = stack.pop()
            yield depth, node
            node, depth = node.right, depth + 1
