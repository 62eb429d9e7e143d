import pytest

from fluent_collection.errors import CollectionTypeError
from fluent_collection.keys import next_auto_key, normalize_key


@pytest.mark.parametrize(
    ('key', 'expected'),
    [
        (0, 0),
        (7, 7),
        ('7', 7),
        ('-3', -3),
        ('0', 0),
        ('07', '07'),
        ('+7', '+7'),
        ('-0', '-0'),
        (' 7', ' 7'),
        ('foo', 'foo'),
    ],
)
def test_normalize_key(key: int | str, expected: int | str):
    assert normalize_key(key) == expected
    assert type(normalize_key(key)) is type(expected)


@pytest.mark.parametrize('key', [True, None, 1.0, (1,), b'x'])
def test_normalize_key_rejects_other_types(key: object):
    with pytest.raises(CollectionTypeError):
        normalize_key(key)


def test_next_auto_key():
    assert next_auto_key([]) == 0
    assert next_auto_key(['a', 'b']) == 0
    assert next_auto_key([0, 1, 2]) == 3
    assert next_auto_key([9, 'x', 2]) == 10
    assert next_auto_key([-5]) == 0
