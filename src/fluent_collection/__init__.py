# pyright: reportUnusedImport=false
from fluent_collection.collection import Collection, is_falsy
from fluent_collection.errors import (
    CollectionError,
    CollectionTypeError,
    CollectionValueError,
    SerializationError,
)
from fluent_collection.keys import Key
from fluent_collection.settings import CollectionSettings, settings
