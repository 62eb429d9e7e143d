import re
from typing import Any, Iterable, TypeAlias

from fluent_collection.errors import CollectionTypeError

Key: TypeAlias = int | str

# Canonical decimal integers only: no sign on zero, no leading zeros, no '+'.
_INTEGER_KEY = re.compile(r'^(0|-?[1-9][0-9]*)$')


def normalize_key(key: Any) -> Key:
    """Return ``key`` in the form it is stored under.

    Strings holding a canonical decimal integer (``'7'``, ``'-3'``) are stored
    as that integer, so ``c['7']`` and ``c[7]`` address the same entry.
    ``'07'``, ``'+7'`` and ``' 7'`` stay strings.

    Raises
    ------
    CollectionTypeError
        If ``key`` is neither ``int`` nor ``str``. ``bool`` is rejected even
        though it is an ``int`` subclass.
    """
    if isinstance(key, bool) or not isinstance(key, (int, str)):
        raise CollectionTypeError(f'Collection keys must be int or str, got {type(key).__name__}')
    if isinstance(key, str) and _INTEGER_KEY.match(key):
        return int(key)
    return key


def next_auto_key(keys: Iterable[Key]) -> int:
    """One past the largest integer key, never below 0."""
    return max([-1, *(key for key in keys if isinstance(key, int))]) + 1
