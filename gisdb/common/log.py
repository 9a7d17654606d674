from logging import getLogger, Formatter, DEBUG, StreamHandler
from logging.handlers import RotatingFileHandler
from sys import exc_info
from traceback import format_tb

from colorlog import ColoredFormatter

from .names import DARK, LIGHT

log = getLogger(__name__)
STDERR_HANDLER = None

LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
# base colour, then message colour per level
PALETTES = {LIGHT: ('black', ('yellow', 'blue', 'black', 'bold_red', 'bold_red')),
            DARK: ('white', ('yellow', 'white', 'cyan', 'bold_red', 'bold_red'))}


def configure_log(name, path, verbosity, levels=None):
    '''
    Log everything for the given roots to a rotating file and, if verbosity is non-zero,
    to stderr (5 is noisy, 1 is errors only).
    '''

    global STDERR_HANDLER
    levels = levels or {name: DEBUG}

    if not getLogger(name).handlers:
        file_formatter = Formatter('%(levelname)-8s %(asctime)s: %(message)s')
        file_handler = RotatingFileHandler(path, maxBytes=1e6, backupCount=10)
        file_handler.setLevel(DEBUG)
        file_handler.setFormatter(file_formatter)
        for root, level in levels.items():
            log = getLogger(root)
            log.setLevel(level)
            log.addHandler(file_handler)

        if verbosity:
            stderr_formatter = Formatter('%(levelname)8s: %(message)s')
            STDERR_HANDLER = StreamHandler()
            STDERR_HANDLER.setLevel(10 * (6 - verbosity))
            STDERR_HANDLER.setFormatter(stderr_formatter)
            for root in levels:
                log = getLogger(root)
                log.addHandler(STDERR_HANDLER)


def set_log_color(color):
    '''
    Colour stderr for a light or dark terminal (or leave it plain for off).
    '''
    if STDERR_HANDLER and color and color.lower() in PALETTES:
        base, message = PALETTES[color.lower()]
        STDERR_HANDLER.setFormatter(
            ColoredFormatter('%(log_color)s%(levelname)8s: %(message_log_color)s%(message)s',
                             log_colors={level: base for level in LEVELS},
                             secondary_log_colors={'message': dict(zip(LEVELS, message))}))


def log_current_exception(traceback=False, exception_level=DEBUG, traceback_level=DEBUG):
    t, e, tb = exc_info()
    log.log(exception_level, f'Exception: {e}')
    log.log(exception_level, f'Type: {t}')
    if traceback:
        log.log(traceback_level, 'Traceback:\n' + ''.join(format_tb(tb)))


def first_line(exception):
    lines = str(exception).splitlines()
    return lines[0] if lines else repr(exception)
