"""Errors raised when looking up MPTCP connections."""


class MPTCPError(Exception):
    """Base class for all errors raised by mptcpcheck."""


class InvalidAddress(MPTCPError, ValueError):
    """The host is not a valid IP address."""

    def __init__(self, host):
        """:host: The offending host value."""
        super(InvalidAddress, self).__init__(host)
        self.host = host

    def __repr__(self):
        """Show the rejected host."""
        return 'Invalid IP address: %r' % (self.host,)
    __str__ = __repr__


class InvalidPort(MPTCPError, ValueError):
    """The port cannot be represented as an unsigned 16b integer."""

    def __init__(self, port):
        """:port: The offending port value."""
        super(InvalidPort, self).__init__(port)
        self.port = port

    def __repr__(self):
        """Show the rejected port."""
        return 'Invalid port number: %r' % (self.port,)
    __str__ = __repr__


class IPv6NotSupported(MPTCPError, NotImplementedError):
    """IPv6 addresses cannot be looked up in the MPTCP table yet."""

    def __repr__(self):
        """Constant meaning regardless of the exception."""
        return 'MPTCP lookup of IPv6 addresses is not implemented'
    __str__ = __repr__


class InvalidEntry(MPTCPError, ValueError):
    """A row of the MPTCP connections table is not in the expected format."""


class InvalidTable(MPTCPError, ValueError):
    """The MPTCP connections table does not start with the expected header."""


class UnexpectedEndOfInput(MPTCPError, EOFError):
    """The MPTCP connections table is empty."""

    def __repr__(self):
        """Constant meaning regardless of the exception."""
        return 'Unexpected end of input'
    __str__ = __repr__


class NotSupported(MPTCPError, NotImplementedError):
    """MPTCP lookups are not implemented on this platform."""

    def __repr__(self):
        """Constant meaning regardless of the exception."""
        return 'MPTCP lookups are not implemented on this platform'
    __str__ = __repr__
