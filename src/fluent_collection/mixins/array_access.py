from abc import ABC, abstractmethod
from typing import Any, Self


class ArrayAccess(ABC):
    """Bracket access delegating to the key API.

    ``c[key]`` reads with :meth:`get`, so a missing key yields ``None`` rather
    than ``KeyError``, while a key that is neither ``int`` nor ``str`` raises
    ``CollectionTypeError``. Assigning to ``c[None]`` appends, the way ``set``
    does with a single argument; reading ``c[None]`` is an error.
    """

    @abstractmethod
    def get(self, key: Any, default: Any = None) -> Any: ...

    @abstractmethod
    def set(self, key: Any, value: Any = ...) -> Self: ...

    @abstractmethod
    def has(self, key: Any) -> bool: ...

    @abstractmethod
    def remove(self, key: Any) -> Self: ...

    def __getitem__(self, key: Any) -> Any:
        return self.get(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        if key is None:
            self.set(value)
        else:
            self.set(key, value)

    def __contains__(self, key: Any) -> bool:
        return self.has(key)

    def __delitem__(self, key: Any) -> None:
        self.remove(key)
