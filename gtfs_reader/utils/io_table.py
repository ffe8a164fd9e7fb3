"""Helper functions for locating and opening table files."""

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from functools import partial
from pathlib import Path
from typing import Callable, TextIO

from ..logger import GtfsLogger

ARCHIVE_SUFFIXES = [".zip"]


def unzip_file(path: Path, out_dir: Path) -> Path:
    """Unzips a file to out_dir and returns the directory holding its tables.

    An archive holding a single top-level folder resolves to that folder.
    """
    shutil.unpack_archive(path, out_dir)
    GtfsLogger.debug(f"Unpacked {path} to {out_dir}.")

    children = list(Path(out_dir).iterdir())
    if len(children) == 1 and children[0].is_dir():
        return children[0]
    return Path(out_dir)


@contextmanager
def feed_dir_from_path(path: Path) -> Iterator[Path]:
    """Directory to read tables from, unpacking the path to a temporary directory if needed.

    The temporary directory is removed on exit.
    """
    path = Path(path)
    if path.is_dir() or path.suffix.lower() not in ARCHIVE_SUFFIXES:
        yield path
        return

    with tempfile.TemporaryDirectory() as tmpdir:
        yield unzip_file(path, Path(tmpdir))


def table_path(feed_dir: Path, table_name: str, file_extension: str = "txt") -> Path:
    """Path of the file holding a table within a feed directory."""
    return Path(feed_dir) / f"{table_name}.{file_extension}"


def file_opener(path: Path, encoding: str = "utf-8") -> Callable[[], TextIO]:
    """Returns a callable which opens path as a text stream.

    Lines keep their `\\r` so that a bare `\\r` line can be told apart from a row. Bytes which
    don't decode with encoding are kept as lone surrogates so the reader can tell which line
    holds them.
    """
    return partial(
        Path(path).open, encoding=encoding, errors="surrogateescape", newline="\n"
    )
