"""
Platform-specific MPTCP lookups.

A Checker answers two queries:
* is_supported(): does the host kernel track MPTCP connections?
* is_active(host, port): is there an active MPTCP connection to host:port?

Only Linux is supported, by reading /proc/net/mptcp. Other platforms get a
Checker that raises NotSupported for every query.
"""
import os
import sys

from .encoding import encode_address
from .errors import NotSupported
from .table import scan_table

import logging
LOG = logging.getLogger(__name__)


# The Linux-specific file listing the active MPTCP connections
PROC_MPTCP = '/proc/net/mptcp'


class Checker(object):
    """Interface of the platform-specific MPTCP lookups."""

    def is_supported(self):
        """Return whether MPTCP is supported on this host."""
        raise NotImplementedError

    def is_active(self, host, port):
        """Return whether host:port is the remote end of an MPTCP connection."""
        raise NotImplementedError

    def __repr__(self):
        """Identify by class name."""
        return '<%s>' % self.__class__.__name__
    __str__ = __repr__


class UnsupportedChecker(Checker):
    """A Checker for platforms without any MPTCP lookup implementation."""

    def is_supported(self):
        """Always raise NotSupported."""
        raise NotSupported()

    def is_active(self, host, port):
        """Always raise NotSupported."""
        raise NotSupported()


class LinuxChecker(Checker):
    """Query the Linux /proc filesystem for MPTCP connections."""

    def __init__(self, path=PROC_MPTCP, opener=open, stat=os.stat):
        """
        Initialize the checker.

        :path: The location of the MPTCP connections table
        :opener: The function used to open the table, with open()'s
                 signature
        :stat: The function used to check for the table presence, with
               os.stat()'s signature
        """
        self.path = path
        self.opener = opener
        self.stat = stat

    def is_supported(self):
        """
        Return whether the MPTCP connections table is present.

        :raise: OSError if the presence of the table cannot be checked
        """
        supported = self.exists()
        LOG.debug('MPTCP is%s supported (%s)',
                  '' if supported else ' not', self.path)
        return supported

    def exists(self):
        """Return whether the table exists; absence is not an error."""
        try:
            self.stat(self.path)
        except FileNotFoundError:
            return False
        return True

    def is_active(self, host, port):
        """
        Return whether host:port is listed in the MPTCP connections table.

        The table presence is not checked beforehand, see is_supported().

        :raise: InvalidAddress, InvalidPort or IPv6NotSupported if host:port
                cannot be encoded
                OSError if the table cannot be read
                InvalidTable, InvalidEntry or UnexpectedEndOfInput if the
                table is malformed
        """
        return self.lookup(encode_address(host, port))

    def lookup(self, key):
        """Scan the MPTCP connections table for the encoded address key."""
        LOG.debug('Looking up %s in %s', key, self.path)
        with self.opener(self.path, 'r') as table:
            return scan_table(table, key)

    def __repr__(self):
        """Show the table location."""
        return '<%s: %s>' % (self.__class__.__name__, self.path)
    __str__ = __repr__


def default_checker(platform=None):
    """Return the Checker to use on the given (default: current) platform."""
    if platform is None:
        platform = sys.platform
    if platform.startswith('linux'):
        return LinuxChecker()
    LOG.debug('No MPTCP lookup implementation for platform %s', platform)
    return UnsupportedChecker()


if __name__ == '__main__':
    checker = default_checker()
    print('MPTCP supported: %s' % checker.is_supported())
    if len(sys.argv) == 3:
        print('MPTCP connection to %s port %s: %s' % (
            sys.argv[1], sys.argv[2],
            checker.is_active(sys.argv[1], int(sys.argv[2]))))
