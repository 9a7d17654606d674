from logging import getLogger

from .args import FILE
from .run import execute
from ..database import GISDB
from ..lib.parse import parse_file

log = getLogger(__name__)


def check(args):
    '''
## check

    > gisdb check FILE [FILE ...]

As run, but after each command the database is checked: both indices must be correctly
ordered, no coordinate may appear twice, and the two indices must hold the same cities.
Processing stops at the first failure.
    '''
    db = GISDB()
    for path in args[FILE]:
        for command in parse_file(path):
            print(execute(db, command))
            try:
                db.check()
            except AssertionError as e:
                log.error(f'{path} line {command.lineno} ({command}): {e}')
                raise
    log.info(f'Database consistent with {len(db)} cities')
