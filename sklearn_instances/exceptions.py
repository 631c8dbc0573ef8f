"""
Errors and warnings raised by the dataset/instance data model.

All errors derive from `InstancesError` and additionally from the builtin
exception callers would expect (`ValueError`, `KeyError`, `IndexError`), so
code written against plain python containers keeps working.
"""


class InstancesError(Exception):
    """Base class of all errors raised by `sklearn_instances`."""


class InvalidSchema(InstancesError, ValueError):
    """Duplicate attribute name, empty or duplicate nominal label set, or an
    attribute spec that cannot be recognized.
    """


class AttributeNotFound(InstancesError, KeyError):
    """Looking up an attribute name (or position) in a schema failed."""

    def __init__(self, name, message: str = None):
        self.name = name
        super().__init__(message or "Attribute {!r} not found".format(name))

    def __str__(self):
        # KeyError would repr() the message
        return str(self.args[0])


class UnknownCategory(InstancesError, ValueError):
    """Encoding a label not declared on a nominal attribute."""

    def __init__(self, attribute, value, message: str = None):
        self.attribute = attribute
        self.value = value
        super().__init__(
            message or "Value {!r} is not a declared category of attribute "
                       "{!r}".format(value, getattr(attribute, 'name',
                                                    attribute)))


class InvalidEncoding(InstancesError, ValueError):
    """Decoding a cell value with no matching declared label."""

    def __init__(self, attribute, value, message: str = None):
        self.attribute = attribute
        self.value = value
        super().__init__(
            message or "Cell value {!r} does not encode a category of "
                       "attribute {!r}".format(value, getattr(attribute,
                                                              'name',
                                                              attribute)))


class ShapeMismatch(InstancesError, ValueError):
    """A positional row's length (or an instance's schema) disagrees with the
    schema it is bound to.
    """

    def __init__(self, expected, actual, message: str = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message or "Expected {} values, got {}"
                         .format(expected, actual))


class IndexOutOfRange(InstancesError, IndexError):
    """A requested instance or attribute position is outside current bounds.
    """

    def __init__(self, position, size: int, message: str = None):
        self.position = position
        self.size = size
        super().__init__(message or "Position {} out of range [0, {})"
                         .format(position, size))


class NoClassSet(InstancesError, LookupError):
    """Reading the class when no class attribute is designated."""


class UncheckedNominalWarning(UserWarning):
    """A bare number was stored on a nominal attribute without validation,
    and it does not denote any declared label.
    """
