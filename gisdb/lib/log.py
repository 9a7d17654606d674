from logging import getLogger, DEBUG
from os.path import join

from ..common.log import configure_log, set_log_color
from ..common.names import UNDEF, COLOR, LOG, LOG_DIR, COMMAND, VERBOSITY, DEV

log = getLogger(__name__)


def make_log_from_args(args):
    from ..commands.args import PROGNAME
    name = args[LOG] if LOG in args and args[LOG] else (
            (args[COMMAND] if COMMAND in args and args[COMMAND] else PROGNAME) + f'.{LOG}')
    path = join(args.directory(LOG_DIR), name)
    if args[VERBOSITY] is UNDEF:
        verbosity = 5 if args[DEV] else 4
    else:
        verbosity = int(args[VERBOSITY])
    configure_log(PROGNAME, path, verbosity, {
        PROGNAME: DEBUG,
        '__main__': DEBUG
    })
    set_log_color(args[COLOR])
    log.info(f'Logging to {path}')
