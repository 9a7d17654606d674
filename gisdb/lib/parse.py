from collections import namedtuple
from logging import getLogger

log = getLogger(__name__)

CLEAR = 'clear'
DEBUG = 'debug'
DELETE = 'delete'
INFO = 'info'
INSERT = 'insert'
PRINT = 'print'
SEARCH = 'search'

COMMENT = '#'


class ParseError(ValueError):

    def __init__(self, msg, lineno=None):
        if lineno is not None:
            msg = f'Line {lineno}: {msg}'
        super().__init__(msg)
        self.lineno = lineno


class Command(namedtuple('BaseCommand', 'name, args, lineno')):
    '''
    A single parsed command.  args are the values passed to the database method of the same name.
    '''

    __slots__ = ()

    def __str__(self):
        return ' '.join([self.name] + [str(arg) for arg in self.args])


def to_int(token):
    try:
        return int(token)
    except ValueError:
        return None


def all_ints(tokens):
    values = [to_int(token) for token in tokens]
    return None if None in values else values


def parse_insert(tokens, lineno):
    if len(tokens) < 3:
        raise ParseError('insert needs NAME X Y', lineno)
    coords = all_ints(tokens[-2:])
    if coords is None:
        raise ParseError(f'Bad coordinates: {" ".join(tokens[-2:])}', lineno)
    return [' '.join(tokens[:-2])] + coords


def parse_name_or_coords(command):

    def parse(tokens, lineno):
        if not tokens:
            raise ParseError(f'{command} needs NAME or X Y', lineno)
        if len(tokens) == 2:
            coords = all_ints(tokens)
            if coords is not None:
                return coords
        return [' '.join(tokens)]

    return parse


def parse_search(tokens, lineno):
    values = all_ints(tokens) if len(tokens) == 3 else None
    if values is None:
        raise ParseError('search needs X Y RADIUS (integers)', lineno)
    return values


def parse_none(command):

    def parse(tokens, lineno):
        if tokens:
            raise ParseError(f'{command} takes no arguments', lineno)
        return []

    return parse


PARSERS = {CLEAR: parse_none(CLEAR),
           DEBUG: parse_none(DEBUG),
           DELETE: parse_name_or_coords(DELETE),
           INFO: parse_name_or_coords(INFO),
           INSERT: parse_insert,
           PRINT: parse_none(PRINT),
           SEARCH: parse_search}


def parse_line(line, lineno=None):
    '''
    Parse a single line, returning None for blank lines and comments.
    '''
    tokens = line.split()
    if not tokens or tokens[0].startswith(COMMENT):
        return None
    name, tokens = tokens[0].lower(), tokens[1:]
    if name not in PARSERS:
        raise ParseError(f'Unknown command "{name}"', lineno)
    return Command(name, PARSERS[name](tokens, lineno), lineno)


def parse_lines(lines):
    for lineno, line in enumerate(lines, start=1):
        command = parse_line(line, lineno)
        if command is not None:
            yield command


def parse_file(path):
    '''
    All the commands in a file, in order.
    '''
    log.debug(f'Reading commands from {path}')
    with open(path) as input:
        yield from parse_lines(input)
