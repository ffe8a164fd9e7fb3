from pathlib import Path

import pandas as pd
import pytest

pd.set_option("display.max_rows", 500)
pd.set_option("display.max_columns", 500)
pd.set_option("display.width", 50000)


@pytest.fixture(scope="session", autouse=True)
def _test_logging(test_out_dir):
    from gtfs_reader import setup_logging

    setup_logging(
        info_log_filename=test_out_dir / "tests.info.log",
        debug_log_filename=test_out_dir / "tests.debug.log",
    )


@pytest.fixture(scope="session")
def base_dir():
    return Path(__file__).resolve().parent.parent


@pytest.fixture(scope="session")
def test_dir():
    return Path(__file__).resolve().parent


@pytest.fixture(scope="session")
def test_out_dir(test_dir):
    _test_out_dir = Path(test_dir) / "out"

    if not _test_out_dir.exists():
        _test_out_dir.mkdir()

    return _test_out_dir


@pytest.fixture(scope="session", autouse=True)
def _clear_out_dir(test_out_dir):
    import shutil

    for item in test_out_dir.iterdir():
        if item.name.endswith(".log"):
            continue
        if item.is_dir():
            shutil.rmtree(item)
        else:
            item.unlink()


@pytest.fixture(scope="session")
def sample_feed_dir(test_dir):
    return Path(test_dir) / "data" / "sample_feed"


@pytest.fixture(scope="module")
def sample_feed(sample_feed_dir):
    from gtfs_reader import load_feed

    return load_feed(sample_feed_dir)


@pytest.fixture
def feed_dir_factory(tmp_path, sample_feed_dir):
    """Copy of the sample feed with some tables replaced.

    Call with table name: text pairs. A None text deletes the table file.
    """
    import shutil

    def _make(**tables) -> Path:
        feed_dir = tmp_path / "feed"
        shutil.copytree(sample_feed_dir, feed_dir)
        for table_name, text in tables.items():
            table_file = feed_dir / f"{table_name}.txt"
            if text is None:
                table_file.unlink()
            else:
                table_file.write_text(text, encoding="utf-8")
        return feed_dir

    return _make
