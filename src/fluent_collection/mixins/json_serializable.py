import json
from abc import ABC, abstractmethod
from typing import Any

from fluent_collection.errors import SerializationError
from fluent_collection.settings import settings


class JsonSerializable(ABC):
    @abstractmethod
    def json_serialize(self) -> list[Any] | dict[str, Any]:
        """Return a structure the JSON encoder can take apart.

        Nested ``JsonSerializable`` values may be returned as they are; the
        encoder calls their own hook when it reaches them.
        """

    def json(self, **overrides: Any) -> str:
        """Encode the contents as JSON text.

        Encoder options default to the ``json_*`` settings; keyword arguments
        override them for this call.

        Raises
        ------
        SerializationError
            If a value cannot be encoded, a circular reference is found, or
            a NaN/Infinity is met while ``allow_nan`` is off.
        """
        options: dict[str, Any] = {
            'indent': settings.json_indent,
            'ensure_ascii': settings.json_ensure_ascii,
            'allow_nan': settings.json_allow_nan,
        }
        options.update(overrides)

        try:
            return json.dumps(self, default=_encode_default, **options)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f'Cannot encode {type(self).__name__} as JSON: {exc}') from exc


def _encode_default(value: Any) -> Any:
    if isinstance(value, JsonSerializable):
        return value.json_serialize()
    raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')
