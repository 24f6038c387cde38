import pytest

import mptcpcheck
from mptcpcheck.checkers import LinuxChecker, UnsupportedChecker


@pytest.fixture
def linux(monkeypatch, table_file):
    checker = LinuxChecker(path=table_file)
    monkeypatch.setattr(mptcpcheck, 'CHECKER', checker)
    return checker


def test_is_supported(linux):
    assert mptcpcheck.is_supported()


def test_is_supported_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(mptcpcheck, 'CHECKER',
                        LinuxChecker(path=str(tmp_path / 'missing')))
    assert not mptcpcheck.is_supported()


def test_is_active(linux):
    assert mptcpcheck.is_active('127.0.0.1', 80)
    assert not mptcpcheck.is_active('127.0.0.2', 80)


def test_is_active_errors(linux):
    with pytest.raises(mptcpcheck.IPv6NotSupported):
        mptcpcheck.is_active('::1', 80)
    with pytest.raises(mptcpcheck.InvalidAddress):
        mptcpcheck.is_active('not-an-ip', 80)
    with pytest.raises(mptcpcheck.InvalidPort):
        mptcpcheck.is_active('127.0.0.1', 70000)


def test_unsupported_platform(monkeypatch):
    monkeypatch.setattr(mptcpcheck, 'CHECKER', UnsupportedChecker())
    with pytest.raises(mptcpcheck.NotSupported):
        mptcpcheck.is_supported()
    with pytest.raises(mptcpcheck.NotSupported):
        mptcpcheck.is_active('127.0.0.1', 80)


def test_errors_share_base():
    for exc in (mptcpcheck.InvalidAddress, mptcpcheck.InvalidPort,
                mptcpcheck.IPv6NotSupported, mptcpcheck.InvalidEntry,
                mptcpcheck.InvalidTable, mptcpcheck.UnexpectedEndOfInput,
                mptcpcheck.NotSupported):
        assert issubclass(exc, mptcpcheck.MPTCPError)
