import os
from unittest import mock

import pytest

from aurkit.stdio import redirect_to_stderr, reopen_stdin, reopen_stdout


def _open_write(path):
    return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC)


@pytest.fixture
def swapped_fds(tmp_path):
    out_path = tmp_path / "out"
    err_path = tmp_path / "err"
    saved = {fd: os.dup(fd) for fd in (0, 1, 2)}
    out_fd = _open_write(out_path)
    err_fd = _open_write(err_path)
    os.dup2(out_fd, 1)
    os.dup2(err_fd, 2)
    os.close(out_fd)
    os.close(err_fd)
    try:
        yield out_path, err_path
    finally:
        for fd, copy in saved.items():
            os.dup2(copy, fd)
            os.close(copy)


def test_reopen_stdout(swapped_fds, tmp_path):
    target = tmp_path / "target"
    with open(target, "w") as handle:
        reopen_stdout(handle)
    os.write(1, b"data")
    assert target.read_bytes() == b"data"
    assert swapped_fds[0].read_bytes() == b""


def test_reopen_stdin(swapped_fds, tmp_path):
    source = tmp_path / "input"
    source.write_bytes(b"hello\n")
    real_fd = os.open(source, os.O_RDONLY)
    with mock.patch("os.open", return_value=real_fd) as fake_open:
        result = reopen_stdin()
    assert result is None
    fake_open.assert_called_once_with("/dev/tty", os.O_RDONLY)
    assert os.path.samestat(os.fstat(0), os.stat(source))
    assert os.read(0, 100) == b"hello\n"


def test_reopen_stdin_without_terminal(swapped_fds):
    with mock.patch("os.open", side_effect=FileNotFoundError("/dev/tty")):
        with pytest.raises(FileNotFoundError):
            reopen_stdin()