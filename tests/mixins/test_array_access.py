from fluent_collection import Collection


def test_item_get_set_and_missing():
    collection = Collection({'foo': 'bar'})
    assert collection['foo'] == 'bar'
    assert collection['nope'] is None

    collection['x'] = 1
    assert collection.get('x') == 1
    assert collection.x == 1


def test_assigning_to_none_appends():
    collection = Collection({'a': 'b'})
    collection[None] = 'first'
    collection[None] = 'second'

    assert collection.to_array() == {'a': 'b', 0: 'first', 1: 'second'}


def test_contains_and_delete_use_has_and_remove():
    collection = Collection({'a': 1, 'b': None})

    assert 'a' in collection
    assert 'b' not in collection
    assert 'c' not in collection

    del collection['a']
    del collection['missing']
    assert 'a' not in collection
    assert collection.count() == 1


def test_nested_item_access():
    collection = Collection([1, 2, 3, 4]).chunk(2)

    assert collection[1][0] == 3
    collection[0][None] = 2.5
    assert collection[0].to_array() == {0: 1, 1: 2, 2: 2.5}
