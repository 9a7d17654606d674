from argparse import ArgumentParser
from logging import getLogger

from ..common.args import mm, m, color
from ..common.names import *

log = getLogger(__name__)

GISDB_VERSION = '0.1.0'

PROGNAME = 'gisdb'

CHECK = 'check'
RUN = 'run'

FILE = 'file'


def make_parser():

    from ..common.io import clean_path

    parser = ArgumentParser(prog=PROGNAME)

    parser.add_argument(mm(DEV), action='store_true',
                        help='verbose log and stack trace on error')
    parser.add_argument(mm(LOG), metavar='FILE',
                        help='the file name for the log (command name by default)')
    parser.add_argument(mm(LOG_DIR), metavar='DIR', default='{base}/logs',
                        help='the directory for the log')
    parser.add_argument(mm(COLOR), mm(COLOUR), type=color, dest=COLOR, default=DARK,
                        help=f'pretty stderr log - {LIGHT}|{DARK}|{OFF}')
    parser.add_argument(m(V), mm(VERBOSITY), default=UNDEF, type=int, metavar='N',
                        help='output level for stderr (0: silent; 5:noisy)')
    parser.add_argument(m(V.upper()), mm(VERSION), action='version', version=GISDB_VERSION,
                        help='display version and exit')
    parser.add_argument(mm(BASE), default='~/.gisdb', metavar='DIR', type=clean_path,
                        help='the base directory for logs (default ~/.gisdb)')

    commands = parser.add_subparsers(title='commands', dest=COMMAND)

    run = commands.add_parser(RUN, help='run command files',
                              description='execute the commands in each file against a single database')
    run.add_argument(FILE, nargs='+', metavar='FILE', help='a file of commands (insert, delete, info, ...)')

    check = commands.add_parser(CHECK, help='run command files, checking the database after each command',
                                description='as run, but verify both indices agree (and are ordered) '
                                            'after every command')
    check.add_argument(FILE, nargs='+', metavar='FILE', help='a file of commands (insert, delete, info, ...)')

    return parser
