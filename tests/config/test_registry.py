from fluent_collection.config.registry import (
    MISSING,
    ConfigProperty,
    _REGISTRY,  # pyright: ignore[reportPrivateUsage]
    all_registered,
    register,
)


def test_settings_are_registered_on_import():
    keys = {(r.namespace, r.key) for r in all_registered()}
    assert ('CollectionSettings', 'implode_glue') in keys
    assert ('CollectionSettings', 'json_indent') in keys


def test_register_and_all_registered_returns_copy():
    before = len(_REGISTRY)

    entry = ConfigProperty(
        key='x',
        namespace='A',
        expected_type=int,
        fget=lambda self: 1,  # type: ignore
    )

    register(entry)

    regs = all_registered()
    assert len(regs) == before + 1
    assert regs[-1] is entry
    assert entry.required
    assert entry.default is MISSING

    regs.clear()
    assert len(_REGISTRY) == before + 1
