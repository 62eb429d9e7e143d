class CollectionError(Exception):
    """Base class for errors raised by collection operations."""


class CollectionTypeError(CollectionError, TypeError):
    """Raised when a key, bound or value has a type the operation cannot handle.

    Examples are summing non-numeric values, slicing with non-integer bounds,
    sorting values that cannot be compared, or using a ``float`` as a key.
    """


class CollectionValueError(CollectionError, ValueError):
    """Raised when an argument has the right type but an unusable value."""


class SerializationError(CollectionError, ValueError):
    """Raised by :meth:`Collection.json` when the contents cannot be encoded.

    The underlying ``TypeError`` or ``ValueError`` raised by the encoder is
    chained as ``__cause__``.
    """
