import hashlib

import pytest

from zigo.config import ZigoError
from zigo.download import decor, download, format_progress

FILENAME = "zig-linux-x86_64-0.11.0.tar.xz"


def _remote(tmp_path, data):
    src = tmp_path / "remote" / FILENAME
    src.parent.mkdir()
    src.write_bytes(data)
    return src.as_uri()


def test_decor_bytes():
    assert decor(0) == "0.00 B"


def test_decor_kib():
    assert decor(1024) == "1.00 KiB"


@pytest.mark.parametrize(
    "size, unit",
    [(1023, " B"), (2048, " KiB"), (5 * 1024 * 1024, " MiB"), (3 * 1024**3, " GiB")],
)
def test_decor_units(size, unit):
    assert decor(size).endswith(unit)


def test_format_progress_layout():
    line = format_progress(512, 1024, 2048)
    assert line.startswith("\rprogress: ")
    assert f"{decor(512)} / {decor(1024)}" in line
    assert line.endswith(f"{decor(2048)}/s " + " " * 6)


def test_format_progress_complete():
    assert " | 100.0 % | " in format_progress(4096, 4096, 10)


def test_format_progress_unknown_total():
    assert format_progress(10, 0, 0) == format_progress(99, 0, 0).replace(
        decor(99), decor(10), 1
    )


def test_download_and_verify(tmp_path, capsys):
    data = b"zig archive contents" * 1000
    url = _remote(tmp_path, data)
    cache = tmp_path / "cache"
    result = download(url, hashlib.sha256(data).hexdigest(), cache)
    assert result == cache / FILENAME
    assert result.read_bytes() == data
    out = capsys.readouterr().out
    assert f"url: {url}" in out
    assert f"save to: {result}" in out
    assert "Done." in out


def test_second_download_uses_cache(tmp_path, capsys):
    data = b"cached payload"
    url = _remote(tmp_path, data)
    cache = tmp_path / "cache"
    checksum = hashlib.sha256(data).hexdigest()
    download(url, checksum, cache)
    capsys.readouterr()
    result = download(url, checksum, cache)
    out = capsys.readouterr().out
    assert "Load cache from" in out
    assert "Downloading" not in out
    assert result.read_bytes() == data


def test_stale_cache_is_replaced(tmp_path):
    data = b"fresh payload"
    url = _remote(tmp_path, data)
    cache = tmp_path / "cache"
    cache.mkdir()
    (cache / FILENAME).write_bytes(b"stale")
    result = download(url, hashlib.sha256(data).hexdigest(), cache)
    assert result.read_bytes() == data


def test_checksum_mismatch(tmp_path):
    url = _remote(tmp_path, b"payload")
    cache = tmp_path / "cache"
    with pytest.raises(ZigoError):
        download(url, "00" * 32, cache)
    assert not (cache / FILENAME).exists()


def test_malformed_checksum_is_ignored(tmp_path):
    data = b"payload without checksum"
    url = _remote(tmp_path, data)
    result = download(url, "not-hex", tmp_path / "cache")
    assert result.read_bytes() == data


def test_missing_remote_file(tmp_path):
    url = (tmp_path / "nowhere" / FILENAME).as_uri()
    cache = tmp_path / "cache"
    with pytest.raises(ZigoError):
        download(url, "", cache)
    assert not (cache / FILENAME).exists()