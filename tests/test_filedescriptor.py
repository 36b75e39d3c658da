import fcntl
import os

import pytest

from hyprutils.filedescriptor import FileDescriptor, fd_is_closed, fd_is_readable


@pytest.fixture
def file_fd(tmp_path):
    path = tmp_path / "test_filedescriptors"
    return FileDescriptor(os.open(path, os.O_RDWR | os.O_CREAT | os.O_EXCL, 0o600))


def test_source_scenario(file_fd):
    fd = file_fd
    assert fd.is_valid() is True
    assert fd.is_readable() is True

    flags = fd.flags()
    assert flags == fcntl.FD_CLOEXEC
    fd.set_flags(flags & ~fcntl.FD_CLOEXEC)
    assert fd.flags() == 0

    fd2 = fd.duplicate()
    assert fd.is_valid() is True
    assert fd.is_readable() is True
    assert fd2.is_valid() is True
    assert fd2.is_readable() is True

    fd3 = FileDescriptor(fd2.take())
    assert fd.is_valid() is True
    assert fd.is_readable() is True
    assert fd2.is_valid() is False
    assert fd2.is_readable() is False

    assert fd3.flags() == fcntl.FD_CLOEXEC

    fd.reset()
    fd2.reset()
    fd3.reset()

    assert fd.is_readable() is False
    assert fd2.is_readable() is False
    assert fd3.is_readable() is False


def test_duplicate_without_cloexec(file_fd):
    dup = file_fd.duplicate(cloexec=False)
    assert dup.is_valid() is True
    assert dup.flags() & fcntl.FD_CLOEXEC == 0
    assert dup.fileno() != file_fd.fileno()
    dup.reset()
    file_fd.reset()


def test_duplicate_of_empty_is_empty():
    assert FileDescriptor().duplicate().is_valid() is False


def test_default_is_invalid():
    fd = FileDescriptor()
    assert fd.is_valid() is False
    assert fd.fileno() == -1


def test_take_releases_ownership():
    read_end, write_end = os.pipe()
    owner = FileDescriptor(read_end)
    assert owner.take() == read_end
    assert owner.is_valid() is False
    owner.reset()
    os.write(write_end, b"x")
    assert os.read(read_end, 1) == b"x"
    os.close(read_end)
    os.close(write_end)


def test_context_manager_closes():
    read_end, write_end = os.pipe()
    with FileDescriptor(write_end) as writer:
        assert writer.fileno() == write_end
    assert writer.is_valid() is False
    with FileDescriptor(read_end) as reader:
        assert reader.is_closed() is True


def test_pipe_readability():
    read_end, write_end = os.pipe()
    with FileDescriptor(read_end) as reader, FileDescriptor(write_end) as writer:
        assert reader.is_readable() is False
        assert reader.is_closed() is False
        os.write(writer.fileno(), b"data")
        assert reader.is_readable() is True
        assert fd_is_readable(reader.fileno()) is True


def test_closed_after_writer_hangs_up():
    read_end, write_end = os.pipe()
    reader = FileDescriptor(read_end)
    FileDescriptor(write_end).reset()
    assert fd_is_closed(reader.fileno()) is True
    reader.reset()


def test_negative_fd_helpers():
    assert fd_is_readable(-1) is False
    assert fd_is_closed(-1) is False


def test_equality_compares_descriptor():
    assert FileDescriptor() == FileDescriptor(-1)
    read_end, write_end = os.pipe()
    a = FileDescriptor(read_end)
    b = FileDescriptor(write_end)
    assert (a == b) is False
    a.reset()
    b.reset()