import warnings
from functools import wraps
from typing import Any, Callable, Generic, TypeVar, get_type_hints, overload

from fluent_collection.config.registry import MISSING, ConfigProperty, register
from fluent_collection.config.validation import resolve_config_value

T = TypeVar('T')


class Setting(property, Generic[T]):
    """Read-only property whose value comes from the bound configuration.

    Only a getter is ever installed, so assigning or deleting the attribute
    raises ``AttributeError``.
    """

    def __init__(self, fget: Callable[[Any], T], doc: str | None = None) -> None:
        super().__init__(fget, None, None, doc)

    @overload
    def __get__(self, instance: None, owner: type[Any]) -> 'Setting[T]': ...
    @overload
    def __get__(self, instance: Any, owner: type[Any] | None = None) -> T: ...

    def __get__(self, instance: Any, owner: type[Any] | None = None) -> 'T | Setting[T]':
        return super().__get__(instance, owner)


@overload
def config_setting(
    name: str | None = None, *, default: Any = MISSING
) -> Callable[[Callable[..., T]], Setting[T]]: ...
@overload
def config_setting(name: Callable[..., T]) -> Setting[T]: ...


def config_setting(
    name: str | Callable[..., T] | None = None,
    *,
    default: Any = MISSING,
) -> Callable[[Callable[..., T]], Setting[T]] | Setting[T]:
    '''Decorator for configuration-backed properties.

    Resolution is string-based and relies only on class names: a property
    ``value`` declared on ``Settings`` reads ``Settings.value`` first and
    ``value`` second.

    Parameters
    ----------
    name : str | None
        Explicit configuration key name to use instead of the
        property name. When omitted the property name is used, by default None
    default : Any
        Value returned when nothing is configured. Without a default the
        setting is required and reading it raises ``KeyError``.

    Returns
    -------
    Callable[[Callable[..., T]], Setting[T]]
        A decorator which converts the given function into a
        read-only ``Setting``.
    '''

    explicit_name = None if callable(name) else name

    def decorator(func: Callable[..., T]) -> Setting[T]:
        qual_parts = func.__qualname__.split('.')
        if len(qual_parts) >= 2:
            namespace: str = qual_parts[-2]
        else:
            namespace: str = qual_parts[0]
        key: str = explicit_name or func.__name__

        type_hints = get_type_hints(func)
        expected_type: Any = None
        if 'return' in type_hints:
            expected_type = type_hints['return']
        else:
            warnings.warn(
                f'Property "{namespace}.{key}" cannot be type checked because it does not declare a return type',
                RuntimeWarning,
            )

        @wraps(func)
        def wrapper(self: Any) -> T:
            try:
                return resolve_config_value(key=key, namespace=type(self).__name__)
            except KeyError:
                if default is MISSING:
                    raise
                return default

        # Registration occurs at decoration time
        register(
            ConfigProperty(
                key=key,
                namespace=namespace,
                expected_type=expected_type,
                fget=func,
                default=default,
            )
        )

        return Setting(wrapper, doc=func.__doc__)

    if callable(name):
        func = name
        return decorator(func)

    return decorator
