from logging import getLogger
from sys import exit

from .common.args import Arguments
from .common.log import log_current_exception, first_line
from .common.names import COMMAND, DEV


class FatalException(Exception):

    '''
    Base class for exceptions that we can't ignore at some higher level
    (fundamental things like a missing command).
    '''

    pass


from .commands.args import make_parser, PROGNAME, GISDB_VERSION, RUN, CHECK
from .commands.check import check
from .commands.run import run
from .lib.log import make_log_from_args

log = getLogger(__name__)

COMMANDS = {CHECK: check,
            RUN: run}


def args_and_command(argv=None):
    parser = make_parser()
    ns = parser.parse_args(args=argv)
    command_name = ns.command if hasattr(ns, COMMAND) else None
    command = COMMANDS[command_name] if command_name in COMMANDS else None
    args = Arguments.from_ns(ns, PROGNAME, GISDB_VERSION)
    return args, command, command_name


def main(argv=None):
    args, command, command_name = args_and_command(argv)
    make_log_from_args(args)
    log.info(f'Version {GISDB_VERSION}')
    try:
        if not command:
            raise FatalException(f'No command given (try `{PROGNAME} -h`)')
        command(args)
    except KeyboardInterrupt:
        log.critical('Interrupted')
        exit(1)
    except Exception as e:
        log.critical(first_line(e))
        log_current_exception(traceback=args[DEV])
        exit(1)
    exit(0)
