import sys

from .hardening import Hardening


def main():
    """ Entry point """
    from . import cli
    sys.exit(cli.main())

__version__ = '0.1'
__author__ = 'Rick Voormolen'
__email__ = 'rick@voormolen.org'
