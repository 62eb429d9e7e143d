from pathlib import Path

import pytest

from fluent_collection import Collection
from fluent_collection.config import (
    ConfigValidationError,
    bind_config_file,
    get_config,
    load_config_file,
)


def test_load_json_yaml_and_toml(tmp_path: Path):
    json_file = tmp_path / 'config.json'
    json_file.write_text('{"implode_glue": "-"}', encoding='utf-8')
    yaml_file = tmp_path / 'config.yaml'
    yaml_file.write_text('CollectionSettings:\n  json_indent: 2\n', encoding='utf-8')
    toml_file = tmp_path / 'config.toml'
    toml_file.write_text('json_ensure_ascii = false\n', encoding='utf-8')

    assert load_config_file(json_file) == {'implode_glue': '-'}
    assert load_config_file(yaml_file) == {'CollectionSettings': {'json_indent': 2}}
    assert load_config_file(str(toml_file)) == {'json_ensure_ascii': False}


def test_load_rejects_missing_unsupported_and_non_mapping(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config_file(tmp_path / 'nope.json')

    ini_file = tmp_path / 'config.ini'
    ini_file.write_text('[x]', encoding='utf-8')
    with pytest.raises(RuntimeError):
        load_config_file(ini_file)

    list_file = tmp_path / 'config.json'
    list_file.write_text('[1, 2]', encoding='utf-8')
    with pytest.raises(RuntimeError):
        load_config_file(list_file)


def test_bind_config_file_changes_collection_defaults(tmp_path: Path):
    config_file = tmp_path / 'config.yaml'
    config_file.write_text('implode_glue: " | "\nCollectionSettings:\n  json_indent: 2\n', encoding='utf-8')

    bind_config_file(config_file)

    assert get_config()['implode_glue'] == ' | '
    assert Collection(1, 2).implode() == '1 | 2'
    assert Collection(1, 2).json() == '[\n  1,\n  2\n]'


def test_bind_config_file_validates(tmp_path: Path):
    config_file = tmp_path / 'config.json'
    config_file.write_text('{"json_indent": "wide"}', encoding='utf-8')

    with pytest.raises(ConfigValidationError):
        bind_config_file(config_file)


def test_rejected_config_file_leaves_bound_values_untouched(tmp_path: Path):
    good_file = tmp_path / 'good.json'
    good_file.write_text('{"json_indent": 2}', encoding='utf-8')
    bind_config_file(good_file)
    before = dict(get_config())

    bad_file = tmp_path / 'bad.json'
    bad_file.write_text('{"implode_glue": 5, "json_indent": "wide"}', encoding='utf-8')
    with pytest.raises(ConfigValidationError):
        bind_config_file(bad_file)

    assert dict(get_config()) == before
    assert Collection(1, 2).implode() == '1, 2'
    assert Collection(1, 2).json() == '[\n  1,\n  2\n]'
