from fluent_collection.config import config_setting


class CollectionSettings:
    """Defaults used by :class:`~fluent_collection.collection.Collection`.

    Every setting can be bound globally (``implode_glue``) or scoped to this
    class (``CollectionSettings.implode_glue``), either through
    :func:`~fluent_collection.config.bind_config_values` or a config file
    loaded with :func:`~fluent_collection.config.bind_config_file`.
    """

    @config_setting(default=', ')
    def implode_glue(self) -> str:
        """Separator placed between values by ``implode`` and ``str()``."""
        ...

    @config_setting(default=None)
    def json_indent(self) -> int | None:
        """Indentation passed to the JSON encoder; ``None`` is compact."""
        ...

    @config_setting(default=True)
    def json_ensure_ascii(self) -> bool: ...

    @config_setting(default=False)
    def json_allow_nan(self) -> bool: ...


settings = CollectionSettings()
