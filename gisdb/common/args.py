from collections.abc import Mapping
from logging import getLogger
from os import environ, makedirs

from .io import clean_path
from .names import LIGHT, DARK, OFF, VERSION

log = getLogger(__name__)


class Arguments(Mapping):
    '''
    The parsed command line, read only.

    Names can be written with '-' or '_'.  An environment variable (GISDB_LOG_DIR for log-dir)
    replaces the value from the command line, including defaults.
    '''

    @classmethod
    def from_ns(cls, ns, env_prefix, version):
        values = dict(vars(ns))
        values[VERSION] = version
        return cls(env_prefix, values)

    def __init__(self, env_prefix, values):
        self.__env_prefix = env_prefix.upper()
        self.__values = {self.__key(name): self.__from_env(name, value) for name, value in values.items()}

    @staticmethod
    def __key(name):
        return name.replace('-', '_')

    def __from_env(self, name, value):
        env_name = f'{self.__env_prefix}_{self.__key(name).upper()}'
        if env_name in environ:
            value = environ[env_name]
            log.debug(f'Forcing {name} to {value} via {env_name}')
        return value

    def __getitem__(self, name):
        return self.__values[self.__key(name)]

    def __iter__(self):
        return iter(self.__values)

    def __len__(self):
        return len(self.__values)

    def directory(self, name):
        '''
        A directory option, with references to other options ('{base}/logs') expanded.
        Created if missing.
        '''
        path = clean_path(self[name].format(**self))
        makedirs(path, exist_ok=True)
        return path


def mm(name): return '--' + name


def m(name): return '-' + name


def color(color):
    if color.lower() not in (LIGHT, DARK, OFF):
        raise Exception(f'Bad color: {color} ({LIGHT}|{DARK}|{OFF})')
    return color
