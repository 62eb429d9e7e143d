from logging import getLogger
from types import MappingProxyType
from typing import Any, Mapping

from fluent_collection.config.registry import all_registered

_CONFIG_CONTEXT: dict[str, Any] = {}

_logger = getLogger(__name__)


class ConfigValidationError(Exception):
    """Raised when configuration validation fails.

    This exception is raised by :func:`ensure_required_config_values` when one
    or more registered settings are missing from the configuration, or are
    bound to a value of the wrong type.
    """


def bind_config_values(**kwargs: Any) -> None:
    """Bind configuration values for later property resolution.

    The values are merged into the global configuration context that
    :func:`resolve_config_value` and properties decorated with
    ``config_setting`` read from. Existing keys are overwritten.
    """
    _logger.debug('Binding config values: %s', ', '.join(sorted(kwargs)))
    _CONFIG_CONTEXT.update(kwargs)


def reset_config() -> None:
    """Drop every bound configuration value."""
    _CONFIG_CONTEXT.clear()


def get_config() -> Mapping[str, Any]:
    """Return a read-only view of the currently bound configuration."""
    return MappingProxyType(_CONFIG_CONTEXT)


def resolve_config_value(
    *, config: Mapping[str, Any] | None = None, key: str, namespace: str | None = None
) -> Any:
    """Resolve a configuration value using string-based precedence.

    When looking up a setting the function tries keys in this order (first
    match wins):

    - ``{namespace}.{key}``, flat or nested as ``{namespace: {key: ...}}``
    - ``{key}``
    - ``{key}`` split on its first dot and looked up as a nested mapping

    Parameters
    ----------
    config:
        The mapping to search. Defaults to the bound configuration.
    key:
        The name of the setting.
    namespace:
        The name of the class declaring the setting, used to build scoped
        keys.

    Returns
    -------
    Any
        The first matching value found in ``config``.

    Raises
    ------
    KeyError
        If none of the candidate keys are present in ``config``.
    """
    if config is None:
        config = get_config()

    if namespace:
        try:
            scoped_key = f'{namespace}.{key}'
            return resolve_config_value(config=config, key=scoped_key)
        except KeyError:
            pass

    # Flat keys > nested keys
    if key in config:
        return config[key]

    parts = key.split('.', maxsplit=1)
    if len(parts) == 2:
        parent, rest = parts
        nested = config.get(parent)
        if isinstance(nested, Mapping):
            return resolve_config_value(config=nested, key=rest)  # pyright: ignore[reportUnknownArgumentType]

    raise KeyError(f'No config value for {key}')


def ensure_required_config_values(config: Mapping[str, Any] | None = None) -> None:
    """Validate a configuration mapping against registered settings.

    For each registered :class:`~fluent_collection.config.registry.ConfigProperty`
    the function attempts to resolve a value from ``config`` using the same
    precedence rules as :func:`resolve_config_value`. A required setting that
    cannot be resolved, or a value that does not match the registered
    ``expected_type``, adds an error message. After checking all entries a
    :class:`ConfigValidationError` is raised when any errors were found.

    Raises
    ------
    ConfigValidationError
        When required settings are missing or a type mismatch is detected.
    """
    if config is None:
        config = get_config()

    errors: list[str] = []

    for entry in all_registered():
        try:
            value = resolve_config_value(config=config, key=entry.key, namespace=entry.namespace)
        except KeyError as exc:
            if entry.required:
                errors.append(str(exc))
            continue

        if entry.expected_type is not None and not isinstance(value, entry.expected_type):
            expected = getattr(entry.expected_type, '__name__', str(entry.expected_type))
            errors.append(
                f'Type mismatch for {entry.namespace}.{entry.key}: '
                f'expected {expected}, '
                f'got {type(value).__name__}'
            )

    if errors:
        raise ConfigValidationError('Configuration validation failed:\n' + '\n'.join(errors))
