# pyright: reportUnusedImport=false
from fluent_collection.mixins.array_access import ArrayAccess
from fluent_collection.mixins.iterable import Iterable
from fluent_collection.mixins.json_serializable import JsonSerializable
