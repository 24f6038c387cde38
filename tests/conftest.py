"""Shared fixtures: synthetic MPTCP connections tables."""
import pytest

from .tables import make_row, make_table


@pytest.fixture
def table():
    """A table with two IPv4 connections."""
    return make_table(make_row('0100007F:0050'),
                      make_row('0101A8C0:1F90', slot=1))


@pytest.fixture
def table_file(tmp_path, table):
    """The two-connection table, written on disk."""
    path = tmp_path / 'mptcp'
    path.write_text(table)
    return str(path)
