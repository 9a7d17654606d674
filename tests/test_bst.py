from random import seed, choice, randrange

from gisdb.bst import NameTree
from gisdb.city import City
from tests import LogTestCase

CITIES = [City('Chicago', 100, 150), City('Atlanta', 10, 500), City('Tacoma', 1000, 100),
          City('Baltimore', 0, 300), City('Washington', 5, 350), City('L', 101, 150), City('L', 11, 500)]


class TestNameTree(LogTestCase):

    def known_tree(self):
        tree = NameTree()
        for city in CITIES:
            self.assertTrue(tree.insert(city))
        return tree

    def test_empty(self):
        tree = NameTree()
        self.assertEqual(tree.print_tree(), '')
        self.assertEqual(tree.find_all('Chicago'), '')
        self.assertFalse(tree.delete_one('Chicago'))
        self.assertFalse(tree.delete_all('Chicago'))
        self.assertEqual(len(tree), 0)
        tree.check()

    def test_print(self):
        tree = self.known_tree()
        self.assertEqual(tree.print_tree(),
                         '1  Atlanta (10, 500)\n'
                         '2    Baltimore (0, 300)\n'
                         '0Chicago (100, 150)\n'
                         '3      L (11, 500)\n'
                         '2    L (101, 150)\n'
                         '1  Tacoma (1000, 100)\n'
                         '2    Washington (5, 350)\n')
        tree.check()

    def test_single(self):
        tree = NameTree()
        tree.insert(City('Only', 1, 2))
        self.assertEqual(tree.print_tree(), '0Only (1, 2)\n')

    def test_find(self):
        tree = self.known_tree()
        self.assertEqual(tree.find_all('Tacoma'), 'Tacoma (1000, 100)')
        self.assertEqual(tree.find_all('L'), 'L (101, 150)\nL (11, 500)')
        self.assertEqual(list(tree.find('L')), [City('L', 101, 150), City('L', 11, 500)])
        self.assertEqual(tree.find_all('Boston'), '')
        self.assertEqual(tree.find_all('l'), '')

    def test_delete_one(self):
        tree = self.known_tree()
        self.assertTrue(tree.delete_one('L'))
        self.assertEqual(tree.find_all('L'), 'L (101, 150)')
        self.assertEqual(len(tree), 6)
        self.assertTrue(tree.delete_one('L'))
        self.assertEqual(tree.find_all('L'), '')
        self.assertFalse(tree.delete_one('L'))
        self.assertEqual(len(tree), 5)
        tree.check()

    def test_delete_one_city(self):
        tree = self.known_tree()
        self.assertFalse(tree.delete_one('L', City('L', 1, 1)))
        self.assertEqual(len(tree), 7)
        self.assertTrue(tree.delete_one('L', City('L', 101, 150)))
        self.assertEqual(tree.find_all('L'), 'L (11, 500)')
        # the remaining L moved up a level
        self.assertIn('2    L (11, 500)\n', tree.print_tree())
        tree.check()

    def test_delete_all(self):
        tree = self.known_tree()
        self.assertTrue(tree.delete_all('L'))
        self.assertEqual(tree.find_all('L'), '')
        self.assertFalse(tree.delete_all('L'))
        self.assertEqual(len(tree), 5)
        self.assertEqual(tree.print_tree(),
                         '1  Atlanta (10, 500)\n'
                         '2    Baltimore (0, 300)\n'
                         '0Chicago (100, 150)\n'
                         '1  Tacoma (1000, 100)\n'
                         '2    Washington (5, 350)\n')
        tree.check()

    def test_delete_two_children(self):
        tree = self.known_tree()
        self.assertTrue(tree.delete_all('Chicago'))
        self.assertEqual(tree.print_tree(),
                         '1  Atlanta (10, 500)\n'
                         '0Baltimore (0, 300)\n'
                         '3      L (11, 500)\n'
                         '2    L (101, 150)\n'
                         '1  Tacoma (1000, 100)\n'
                         '2    Washington (5, 350)\n')
        tree.check()

    def test_delete_root_chain(self):
        tree = NameTree()
        for name in 'e', 'd', 'c', 'b', 'a':
            tree.insert(City(name, 0, 0))
        self.assertTrue(tree.delete_one('e'))
        self.assertEqual(tree.print_tree(),
                         '3      a (0, 0)\n'
                         '2    b (0, 0)\n'
                         '1  c (0, 0)\n'
                         '0d (0, 0)\n')
        tree.check()

    def test_duplicates_left(self):
        tree = NameTree()
        for i in range(4):
            tree.insert(City('Springfield', i, i))
        self.assertEqual(tree.print_tree(),
                         '3      Springfield (3, 3)\n'
                         '2    Springfield (2, 2)\n'
                         '1  Springfield (1, 1)\n'
                         '0Springfield (0, 0)\n')
        self.assertEqual(len(tree.find_all('Springfield').splitlines()), 4)
        self.assertTrue(tree.delete_all('Springfield'))
        self.assertEqual(tree.print_tree(), '')
        self.assertEqual(len(tree), 0)

    def test_long_chains(self):
        n = 2000
        tree = NameTree()
        for i in range(n):
            tree.insert(City(f'N{i:05d}', i, i))
        same = [City('Boston', i, 0) for i in range(n)]
        for city in same:
            tree.insert(city)
        self.assertEqual(len(tree), 2 * n)
        self.assertEqual(tree.find_all(f'N{n - 1:05d}'), f'N{n - 1:05d} ({n - 1}, {n - 1})')
        # equal names go left, so they are found in the order they were added
        self.assertEqual(list(tree.find('Boston')), same)
        self.assertEqual(tree.print_tree().splitlines()[0], f'{n}{"  " * n}Boston ({n - 1}, 0)')
        self.assertTrue(tree.delete_one('Boston', City('Boston', 0, 0)))
        self.assertTrue(tree.delete_one(f'N{n - 1:05d}'))
        tree.check()
        self.assertTrue(tree.delete_all('Boston'))
        self.assertEqual(tree.find_all('Boston'), '')
        self.assertEqual(len(tree), n - 1)
        self.assertEqual(list(tree), [City(f'N{i:05d}', i, i) for i in range(n - 1)])
        tree.check()

    def test_iter(self):
        tree = self.known_tree()
        self.assertEqual(list(tree), sorted(CITIES, key=lambda city: city.name)[:3] +
                         [City('L', 11, 500), City('L', 101, 150), City('Tacoma', 1000, 100),
                          City('Washington', 5, 350)])

    def test_random(self):
        seed(42)
        names = ['a', 'b', 'c', 'd', 'e', 'f']
        for _ in range(20):
            tree, cities = NameTree(), []
            for _ in range(100):
                if cities and randrange(3) == 0:
                    name = choice(names)
                    if randrange(2):
                        deleted = tree.delete_all(name)
                        self.assertEqual(deleted, any(city.name == name for city in cities))
                        cities = [city for city in cities if city.name != name]
                    else:
                        target = choice(cities)
                        self.assertTrue(tree.delete_one(target.name, target))
                        cities.remove(target)
                else:
                    city = City(choice(names), randrange(100), randrange(100))
                    tree.insert(city)
                    cities.append(city)
                tree.check()
                self.assertEqual(sorted(tree), sorted(cities))
                name = choice(names)
                self.assertEqual(sorted(tree.find(name)), sorted(city for city in cities if city.name == name))
