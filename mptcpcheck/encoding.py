"""
Encode IP addresses and ports the way the kernel MPTCP table shows them.

The kernel prints the raw 32b IPv4 address in host byte order, i.e., with its
octets reversed on little-endian machines, and the port as a big-endian 16b
hex number. Both are printed in uppercase.
"""
import struct
from ipaddress import ip_address

from .errors import InvalidAddress, InvalidPort, IPv6NotSupported

import logging
LOG = logging.getLogger(__name__)

MAX_PORT = 65535


def host_to_hex(host):
    """
    Return the hex representation of an IPv4 address.

    :host: The IP address string
    :return: 8 lowercase hex digits, least-significant octet first
    :raise: InvalidAddress if host is not an IP address
            IPv6NotSupported if host is an IPv6 address
    """
    if not isinstance(host, str):
        raise InvalidAddress(host)
    try:
        ip = ip_address(host)
    except ValueError:
        raise InvalidAddress(host)
    if ip.version == 6:
        # IPv4-mapped addresses are plain IPv4 addresses in disguise
        if ip.ipv4_mapped is None:
            raise IPv6NotSupported(host)
        ip = ip.ipv4_mapped
    a, b, c, d = ip.packed
    return '%02x%02x%02x%02x' % (d, c, b, a)


def port_to_hex(port):
    """
    Return the hex representation of a port number.

    :port: The port, as an integer
    :return: 4 lowercase hex digits
    :raise: InvalidPort if port does not fit in an unsigned 16b integer
    """
    if (isinstance(port, bool) or not isinstance(port, int) or
            port < 0 or port > MAX_PORT):
        raise InvalidPort(port)
    buf = struct.pack('<H', port)
    return '%02x%02x' % (buf[1], buf[0])


def encode_address(host, port):
    """
    Return the key identifying the remote endpoint host:port in the table.

    e.g., ('127.0.0.1', 80) -> '0100007F:0050'
    """
    key = ('%s:%s' % (host_to_hex(host), port_to_hex(port))).upper()
    LOG.debug('Encoded %s port %s as %s', host, port, key)
    return key
