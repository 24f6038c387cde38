"""
Parse the kernel MPTCP connections table.

The table is a header line followed by one line per MPTCP connection, e.g.,

      sl  loc_tok  rem_tok  v6 local_address  remote_address  st ns ...
       0: 9C5B7C62 5BA7D0F2  0 0100007F:A3C4  0100007F:0050   01 02 ...

The header lists tx_queue and rx_queue separately, but the kernel prints them
as a single tx_queue:rx_queue field, hence 10 fields per row.
"""
import mptcpcheck as lib
from .errors import InvalidEntry, InvalidTable, UnexpectedEndOfInput

import logging
LOG = logging.getLogger(__name__)


DEBUG_TABLE = 'mptcp_table'
lib.DEBUG_OPTIONS.add(DEBUG_TABLE)

# The number of fields in a valid table row
TABLE_COLUMNS = 10
# The first line of a valid table
TABLE_HEADER = ('  sl  loc_tok  rem_tok  v6 local_address                  '
                '       remote_address                        st ns tx_queue '
                'rx_queue inode')

_V6_COLUMN = 3
_REMOTE_ADDR_COLUMN = 5


class TableEntry(object):
    """
    One connection of the MPTCP table.

    While numerous fields are available, only the address family and the
    remote address are kept.
    """

    __slots__ = ('is_ipv6', 'remote_addr')

    def __init__(self, is_ipv6, remote_addr):
        """
        Register a new entry.

        :is_ipv6: Whether the connection uses IPv6
        :remote_addr: The hex-encoded remote address, as found in the table
        """
        self.is_ipv6 = is_ipv6
        self.remote_addr = remote_addr

    def __eq__(self, other):
        """Two entries are equal if all their fields are."""
        try:
            return self._tuple == other._tuple
        except AttributeError:
            return NotImplemented

    def __hash__(self):
        """Hash the entry based on its fields."""
        return hash(self._tuple)

    def __repr__(self):
        """Show the entry fields."""
        return '<%s: %s, v6: %s>' % (self.__class__.__name__,
                                     self.remote_addr, self.is_ipv6)
    __str__ = __repr__

    @property
    def _tuple(self):
        return (self.is_ipv6, self.remote_addr)


def parse_entry(fields):
    """
    Create a TableEntry from the fields of a table row.

    :fields: The whitespace-separated fields of the row
    :raise: InvalidEntry if the row does not have TABLE_COLUMNS fields
    """
    if len(fields) != TABLE_COLUMNS:
        raise InvalidEntry('Invalid MPTCP connection entry: expected %d '
                           'fields, got %d' % (TABLE_COLUMNS, len(fields)))
    return TableEntry(is_ipv6=fields[_V6_COLUMN] == '1',
                      remote_addr=fields[_REMOTE_ADDR_COLUMN])


def _strip_eol(line):
    if isinstance(line, bytes):
        line = line.decode('ascii')
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def scan_table(stream, key):
    """
    Look for a connection whose remote address is key.

    Reading stops at the first matching row. Malformed rows abort the scan,
    the table being untrustworthy.

    :stream: An iterable over the table lines (file, StringIO, list, ...)
    :key: The encoded remote address to search, see encode_address()
    :return: Whether a matching connection was found
    :raise: UnexpectedEndOfInput if the stream is empty
            InvalidTable if the stream does not start with TABLE_HEADER
            InvalidEntry if a row is malformed
    """
    lines = iter(stream)
    try:
        header = _strip_eol(next(lines))
    except StopIteration:
        raise UnexpectedEndOfInput()
    if header != TABLE_HEADER:
        raise InvalidTable('Invalid MPTCP connections table header: %r' %
                           header)
    debug = DEBUG_TABLE in lib.DEBUG
    for line in lines:
        entry = parse_entry(_strip_eol(line).split())
        if debug:
            LOG.debug('Parsed %s', entry)
        if entry.remote_addr == key:
            LOG.debug('Found MPTCP connection to %s', key)
            return True
    LOG.debug('No MPTCP connection to %s', key)
    return False
