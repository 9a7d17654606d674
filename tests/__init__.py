from logging import getLogger, DEBUG
from tempfile import gettempdir
from os.path import join
from unittest import TestCase

from gisdb.commands.args import PROGNAME
from gisdb.common.log import configure_log

log = getLogger(__name__)


class LogTestCase(TestCase):

    def setUp(self):
        configure_log(PROGNAME, join(gettempdir(), 'gisdb-test.log'), verbosity=5, levels={
            PROGNAME: DEBUG,
            '__main__': DEBUG
        })
