from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_config_and_registry() -> Iterator[None]:
    """Reset module-level state in the config modules around each test."""
    import fluent_collection.config.registry as registry
    import fluent_collection.config.validation as validation

    # Settings register themselves at import time, so restore rather than clear.
    registered = list(registry._REGISTRY)  # pyright: ignore[reportPrivateUsage]
    validation._CONFIG_CONTEXT.clear()  # pyright: ignore[reportPrivateUsage]

    yield

    registry._REGISTRY[:] = registered  # pyright: ignore[reportPrivateUsage]
    validation._CONFIG_CONTEXT.clear()  # pyright: ignore[reportPrivateUsage]
