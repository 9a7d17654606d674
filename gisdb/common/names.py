BASE = 'base'
COLOR = 'color'
COLOUR = 'colour'
COMMAND = 'command'
DARK = 'dark'
DEV = 'dev'
LIGHT = 'light'
LOG = 'log'
LOG_DIR = 'log-dir'
OFF = 'off'
V = 'v'
VERBOSITY = 'verbosity'
VERSION = 'version'

UNDEF = object()
