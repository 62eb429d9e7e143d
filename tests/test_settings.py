from fluent_collection import Collection, CollectionSettings, settings
from fluent_collection.config import bind_config_values


def test_defaults():
    assert settings.implode_glue == ', '
    assert settings.json_indent is None
    assert settings.json_ensure_ascii is True
    assert settings.json_allow_nan is False


def test_bound_values_override_defaults():
    bind_config_values(implode_glue=';')
    assert CollectionSettings().implode_glue == ';'
    assert Collection(1, 2, 3).implode() == '1;2;3'
    assert str(Collection(1, 2)) == '1;2'
    assert Collection(1, 2).implode(' ') == '1 2'


def test_scoped_values_win_over_flat_values():
    bind_config_values(**{'implode_glue': ';', 'CollectionSettings.implode_glue': '/'})
    assert Collection('a', 'b').implode() == 'a/b'
