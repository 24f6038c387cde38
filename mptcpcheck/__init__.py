"""mptcpcheck -- Detect Multipath TCP support and connections on end hosts."""
import logging
# Basic config if nothing else is set
logging.basicConfig(format='%(levelname)8s-%(name)s> %(message)s',
                    level=logging.DEBUG)


# Debug options that are available through the submodules.
DEBUG_OPTIONS = set()
# Global debug flag
DEBUG = set()


from .errors import (  # noqa: E402,F401
    MPTCPError, InvalidAddress, InvalidPort, IPv6NotSupported, InvalidEntry,
    InvalidTable, UnexpectedEndOfInput, NotSupported)
from .checkers import default_checker  # noqa: E402


# The Checker answering the queries on this platform
CHECKER = default_checker()


def is_supported():
    """Return whether the host kernel supports MPTCP."""
    return CHECKER.is_supported()


def is_active(host, port):
    """Return whether there is an active MPTCP connection to host:port."""
    return CHECKER.is_active(host, port)
