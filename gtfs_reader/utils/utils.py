"""General utility functions used throughout package."""

from ..errors import DictionaryMergeError
from ..logger import GtfsLogger


def merge_dicts(right, left, path=None):
    """Merges the contents of nested dict left into nested dict right.

    Raises errors in case of namespace conflicts.

    Args:
        right: dict, modified in place
        left: dict to be merged into right
        path: default None, sequence of keys to be reported in case of
            error in merging nested dictionaries
    """
    if path is None:
        path = []
    for key in left:
        if key in right:
            if isinstance(right[key], dict) and isinstance(left[key], dict):
                merge_dicts(right[key], left[key], [*path, str(key)])
            else:
                path = ".".join([*path, str(key)])
                msg = f"duplicate keys in source dict files: {path}"
                GtfsLogger.error(msg)
                raise DictionaryMergeError(msg)
        else:
            right[key] = left[key]


def is_ascii_digits(text: str) -> bool:
    """True if text is one or more ASCII decimal digits, e.g. `"0042"` but not `"+5"`."""
    return text.isascii() and text.isdigit()
