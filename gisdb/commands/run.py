from logging import getLogger

from .args import FILE
from ..database import GISDB
from ..lib.parse import parse_file, INSERT, CLEAR

log = getLogger(__name__)

NONE = '(none)'


def run(args):
    '''
## run

    > gisdb run FILE [FILE ...]

Execute the commands in each file, in order, against a single (initially empty) database.
The result of each command is written to stdout.

### Commands

    insert NAME X Y
    delete X Y
    delete NAME
    info X Y
    info NAME
    search X Y RADIUS
    print
    debug
    clear

Blank lines and lines starting with # are ignored.
    '''
    db = GISDB()
    for path in args[FILE]:
        for command in parse_file(path):
            print(execute(db, command))


def execute(db, command):
    '''
    Run a single command, returning the text to display.
    '''
    log.debug(f'Executing {command}')
    result = getattr(db, command.name)(*command.args)
    if command.name == INSERT:
        name, x, y = command.args
        return f'{"Inserted" if result else "Rejected"} {name} ({x}, {y})'
    elif command.name == CLEAR:
        return 'Cleared'
    else:
        return result.rstrip('\n') if result else NONE
