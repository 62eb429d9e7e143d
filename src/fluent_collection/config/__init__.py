# pyright: reportUnusedImport=false
from fluent_collection.config.decorator import config_setting
from fluent_collection.config.loader import bind_config_file, load_config_file
from fluent_collection.config.registry import MISSING, ConfigProperty, all_registered
from fluent_collection.config.validation import (
    ConfigValidationError,
    bind_config_values,
    ensure_required_config_values,
    get_config,
    reset_config,
    resolve_config_value,
)
