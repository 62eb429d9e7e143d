from functools import cmp_to_key
from logging import getLogger
from numbers import Number
from typing import Any, Callable, Iterable, Mapping, Self, Sized

from fluent_collection.errors import CollectionTypeError, CollectionValueError
from fluent_collection.keys import Key, next_auto_key, normalize_key
from fluent_collection.mixins import ArrayAccess, Iterable as IterableMixin, JsonSerializable
from fluent_collection.settings import settings

_logger = getLogger(__name__)

_UNSET: Any = object()


class Collection(ArrayAccess, IterableMixin, JsonSerializable):
    """
    Ordered, mutable key/value container with a fluent API.

    A `Collection` behaves like a list and like a dictionary at the same
    time: values appended without a key get sequential integer keys, while
    values set under a string key keep that key. Insertion order is always
    preserved. Most operations mutate the receiver and return it, so calls
    can be chained.

    Parameters
    ----------
    *values : Any
        A single mapping, list, tuple or `Collection` is taken as the initial
        content. Anything else (several arguments, or one argument of another
        shape) is taken as a flat list of values. Use `of` or `from_mapping`
        to choose explicitly.

    Notes
    -----
    - Reading a missing key is not an error: `get`, item access and
      attribute access return ``None`` (or the given default).
    - A key whose value is ``None`` counts as absent for `has`.
    - Iterating yields ``(key, value)`` pairs.

    Examples
    --------
    >>> Collection(3, 9, 1, 20).sort().implode()
    '1, 3, 9, 20'
    >>> c = Collection({'a': 1})
    >>> c.b = 2
    >>> c.json()
    '{"a": 1, "b": 2}'
    """

    _items: dict[Key, Any]

    def __init__(self, *values: Any) -> None:
        self._items = {}
        if len(values) == 1 and isinstance(values[0], (Collection, Mapping, list, tuple)):
            self._fill(values[0])
        else:
            self._fill(values)

    @classmethod
    def make(cls, *values: Any) -> Self:
        """Create a new collection; arguments follow the constructor rules."""
        return cls(*values)

    @classmethod
    def of(cls, *values: Any) -> Self:
        """Create a collection holding exactly ``values``, keyed from 0."""
        collection = cls()
        collection._items = dict(enumerate(values))
        return collection

    @classmethod
    def from_mapping(cls, mapping: 'Mapping[Any, Any] | Collection') -> Self:
        """Create a collection whose content is a copy of ``mapping``."""
        if not isinstance(mapping, (Collection, Mapping)):
            raise CollectionTypeError(f'Expected a mapping, got {type(mapping).__name__}')
        collection = cls()
        collection._fill(mapping)
        return collection

    @classmethod
    def explode(cls, delimiter: str, string: str, limit: int | None = None) -> Self:
        """Split ``string`` on ``delimiter`` into a new collection of parts.

        A positive ``limit`` returns at most that many parts, the last one
        holding the rest of the string. A negative ``limit`` drops that many
        parts from the end. A ``limit`` of 0 counts as 1.
        """
        if not isinstance(delimiter, str) or not isinstance(string, str):
            raise CollectionTypeError('explode() expects a str delimiter and a str subject')
        if delimiter == '':
            raise CollectionValueError('explode() delimiter must not be empty')

        if limit is None or limit < 0:
            parts = string.split(delimiter)
            if limit is not None:
                parts = parts[:limit]
        else:
            parts = string.split(delimiter, max(limit, 1) - 1)

        _logger.debug('Exploded string into %d parts', len(parts))
        return cls.of(*parts)

    def _fill(self, content: Any) -> None:
        if isinstance(content, Collection):
            entries: Iterable[tuple[Any, Any]] = content._items.items()
        elif isinstance(content, Mapping):
            entries = content.items()  # pyright: ignore[reportUnknownVariableType]
        else:
            entries = enumerate(content)

        for key, value in entries:
            self._items[normalize_key(key)] = value

    # Dynamic attribute access maps onto the key API. Private names never do.
    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith('_'):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith('_'):
            object.__delattr__(self, name)
        else:
            self.remove(name)

    def __str__(self) -> str:
        return self.implode()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._items!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value under ``key``, or ``default`` if `has` is false.

        Only ``int`` and ``str`` keys are accepted, even for reads: ``get(None)``
        or ``c[1.5]`` raise `CollectionTypeError` instead of returning
        ``default``.
        """
        key = normalize_key(key)
        return self._items[key] if self.has(key) else default

    def set(self, key: Any, value: Any = _UNSET) -> Self:
        """Store ``value`` under ``key``.

        Called with a single argument, that argument is appended as a value
        under the next free integer key instead.
        """
        if value is _UNSET:
            self._items[next_auto_key(self._items)] = key
        else:
            self._items[normalize_key(key)] = value
        return self

    def has(self, key: Any) -> bool:
        """Whether ``key`` is present and holds something other than ``None``."""
        key = normalize_key(key)
        return key in self._items and self._items[key] is not None

    exists = has

    def remove(self, key: Any) -> Self:
        self._items.pop(normalize_key(key), None)
        return self

    def copy(self) -> Self:
        return type(self).from_mapping(self)

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def contains(self, value: Any) -> bool:
        """Whether any stored value compares equal to ``value``."""
        return value in self._items.values()

    def search(self, value: Any) -> Key | None:
        """Return the first key whose value equals ``value``, else ``None``."""
        for key, item in self._items.items():
            if item == value:
                return key
        return None

    def map(self, callback: Callable[[Any], Any]) -> Self:
        self._items = {key: callback(value) for key, value in self._items.items()}
        return self

    def each(self, callback: Callable[..., Any]) -> Self:
        """Call ``callback(value)`` for integer keys and ``callback(key, value)`` for string keys."""
        for key, value in self._items.items():
            if isinstance(key, int):
                callback(value)
            else:
                callback(key, value)
        return self

    def filter(self, callback: Callable[[Any], Any] | None = None) -> Self:
        """Keep the entries ``callback`` accepts; without one, drop falsy values.

        Keys are preserved. See `is_falsy` for what counts as falsy.
        """
        if callback is None:
            self._items = {key: value for key, value in self._items.items() if not is_falsy(value)}
        else:
            self._items = {key: value for key, value in self._items.items() if callback(value)}
        return self

    def chunk(self, size: int) -> Self:
        """Replace the contents with nested collections of at most ``size`` values."""
        if isinstance(size, bool) or not isinstance(size, int):
            raise CollectionTypeError(f'Chunk size must be an int, got {type(size).__name__}')
        if size < 1:
            raise CollectionValueError(f'Chunk size must be at least 1, got {size}')

        values = list(self._items.values())
        chunks = [type(self).of(*values[start : start + size]) for start in range(0, len(values), size)]
        self._items = dict(enumerate(chunks))

        _logger.debug('Chunked %d values into %d chunks of size %d', len(values), len(chunks), size)
        return self

    def slice(self, offset: int = 0, length: int | None = None, preserve_keys: bool = False) -> Self:
        """Keep a contiguous run of entries.

        A negative ``offset`` counts from the end. ``length`` of ``None``
        takes the remainder; a negative ``length`` stops that many entries
        before the end. Unless ``preserve_keys`` is set, integer keys are
        renumbered from 0; string keys are always kept.
        """
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise CollectionTypeError(f'Slice offset must be an int, got {type(offset).__name__}')
        if length is not None and (isinstance(length, bool) or not isinstance(length, int)):
            raise CollectionTypeError(f'Slice length must be an int or None, got {type(length).__name__}')

        entries = list(self._items.items())
        total = len(entries)
        start = offset if offset >= 0 else max(total + offset, 0)
        if length is None:
            stop = total
        elif length < 0:
            stop = max(total + length, 0)
        else:
            stop = start + length

        self._items = _rekey(entries[start:stop], preserve_keys)
        return self

    def reverse(self, preserve_keys: bool = False) -> Self:
        self._items = _rekey(reversed(list(self._items.items())), preserve_keys)
        return self

    def keys(self) -> Self:
        """Replace the contents with the list of keys."""
        self._items = dict(enumerate(self._items))
        return self

    def values(self) -> Self:
        """Replace the contents with the list of values, dropping the keys."""
        self._items = dict(enumerate(self._items.values()))
        return self

    def sort(self) -> Self:
        self._items = dict(enumerate(self._sorted_values(descending=False)))
        return self

    def sort_desc(self) -> Self:
        self._items = dict(enumerate(self._sorted_values(descending=True)))
        return self

    def _sorted_values(self, descending: bool) -> list[Any]:
        try:
            return sorted(self._items.values(), reverse=descending)
        except TypeError as exc:
            raise CollectionTypeError(f'Values cannot be ordered: {exc}') from exc

    def sort_by_func(self, callback: Callable[[Any, Any], int]) -> Self:
        """Sort by a ``callback(a, b)`` comparator, keeping every key."""
        by_value = cmp_to_key(lambda a, b: callback(a[1], b[1]))
        self._items = dict(sorted(self._items.items(), key=by_value))
        return self

    def pop(self) -> Any:
        """Remove and return the last value, or ``None`` when empty."""
        if not self._items:
            return None
        return self._items.pop(next(reversed(self._items)))

    def shift(self) -> Any:
        """Remove and return the first value, or ``None`` when empty.

        Remaining integer keys are renumbered from 0; string keys stay.
        """
        if not self._items:
            return None
        value = self._items.pop(next(iter(self._items)))
        self._items = _rekey(self._items.items(), preserve_keys=False)
        return value

    def when(self, condition: Any, callback: Callable[[Self], Any]) -> Any:
        return callback(self) if condition else self

    def sum(self) -> Any:
        """Return the sum of all values.

        Raises
        ------
        CollectionTypeError
            If a value is not a number. ``bool`` values are rejected.
        """
        for key, value in self._items.items():
            if isinstance(value, bool) or not isinstance(value, Number):
                raise CollectionTypeError(
                    f'Cannot sum non-numeric value {value!r} under key {key!r}'
                )
        return sum(self._items.values())

    def to_array(self) -> dict[Key, Any]:
        """Return the contents as a new plain ``dict``."""
        return dict(self._items)

    def json_serialize(self) -> list[Any] | dict[str, Any]:
        """Return a list when keys are exactly 0..n-1 in order, else a dict."""
        if all(key == index for index, key in enumerate(self._items)):
            return list(self._items.values())
        return {str(key): value for key, value in self._items.items()}

    def implode(self, glue: str | None = None) -> str:
        """Join the values as strings, separated by ``glue``.

        ``glue`` defaults to the ``implode_glue`` setting. ``None`` renders
        as an empty string and nested collections as their own ``str()``.

        Raises
        ------
        CollectionTypeError
            If ``glue`` is not a string, or a value is a plain ``dict``,
            ``list``, ``tuple`` or ``set``.
        """
        if glue is None:
            glue = settings.implode_glue
        if not isinstance(glue, str):
            raise CollectionTypeError(f'Implode glue must be a str, got {type(glue).__name__}')
        return glue.join(_stringify(value) for value in self._items.values())


def is_falsy(value: Any) -> bool:
    """Whether ``filter()`` without a callback drops ``value``.

    Falsy values are ``None``, ``False``, numbers equal to zero, and empty
    sized values (``''``, ``[]``, ``{}``, an empty `Collection`, ...).
    Notably the string ``'0'`` is kept.
    """
    if value is None or value is False:
        return True
    if isinstance(value, Number):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _rekey(entries: Iterable[tuple[Key, Any]], preserve_keys: bool) -> dict[Key, Any]:
    if preserve_keys:
        return dict(entries)

    rekeyed: dict[Key, Any] = {}
    index = 0
    for key, value in entries:
        if isinstance(key, int):
            rekeyed[index] = value
            index += 1
        else:
            rekeyed[key] = value
    return rekeyed


def _stringify(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, Collection):
        return str(value)
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        raise CollectionTypeError(f'Cannot convert {type(value).__name__} to a string')
    return str(value)
