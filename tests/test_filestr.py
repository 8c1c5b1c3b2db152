import pytest

from vsftpcore.filestr import read_file


def test_reads_whole_small_file(tmp_path):
    path = tmp_path / "msg"
    path.write_bytes(b"hello\nworld\n")
    assert read_file(path, 4000) == b"hello\nworld\n"


def test_truncates_to_maxsize(tmp_path):
    path = tmp_path / "big"
    content = bytes(range(256)) * 4
    path.write_bytes(content)
    result = read_file(path, 100)
    assert result == content[:100]
    assert len(result) == 100


def test_zero_maxsize_gives_empty(tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"abc")
    assert read_file(path, 0) == b""


def test_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert read_file(path, 10) == b""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "nope", 10)


def test_directory_gives_empty(tmp_path):
    assert read_file(tmp_path, 10) == b""


def test_binary_content_preserved(tmp_path):
    path = tmp_path / "bin"
    content = b"\x00\xff\r\n\x01"
    path.write_bytes(content)
    assert read_file(path, len(content)) == content