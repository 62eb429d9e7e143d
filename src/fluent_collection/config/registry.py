from dataclasses import dataclass
from typing import Any, Callable, Final, List


class _Missing:
    """Marker type for settings that have no default value."""

    def __repr__(self) -> str:
        return 'MISSING'


MISSING: Final = _Missing()


@dataclass(frozen=True)
class ConfigProperty:
    """Metadata for a configuration-backed property.

    Instances of this dataclass describe a single setting declared with
    :func:`~fluent_collection.config.decorator.config_setting`. The registry
    stores these entries so validation can run without importing the classes
    that declare them.

    Attributes
    ----------
    key:
        The name used in the configuration mapping. This is the property
        name unless an explicit name override was given.
    namespace:
        The name of the class that declares the property. Values may be
        scoped to it as ``{namespace}.{key}``.
    expected_type:
        The type expected for the configured value, or ``None`` when no type
        checking should be performed.
    fget:
        The original stub getter, kept for introspection.
    default:
        Value used when nothing is configured, or ``MISSING`` when the
        setting is required.
    """

    key: str
    namespace: str
    expected_type: Any
    fget: Callable[..., Any]
    default: Any = MISSING

    @property
    def required(self) -> bool:
        return self.default is MISSING


_REGISTRY: List[ConfigProperty] = []


def register(entry: ConfigProperty) -> None:
    """Register a ``ConfigProperty`` entry in the global registry.

    No uniqueness checks are performed; callers are expected to avoid
    duplicate registrations.
    """

    _REGISTRY.append(entry)


def all_registered() -> List[ConfigProperty]:
    """Return a shallow copy of all registered configuration entries."""

    return list(_REGISTRY)
