"""
Attribute schema: named, typed column definitions of a dataset.

An attribute is either numeric or nominal. Its kind is a tagged union
(`Numeric` or `Nominal`) decided once when the schema is built; nothing
downstream has to inspect the shape of user input again.
"""

from collections.abc import Mapping, Sequence as SequenceABC
from numbers import Integral
from typing import Iterable, Sequence, Tuple, Union, Dict

from sklearn_instances.exceptions import \
    InvalidSchema, AttributeNotFound, IndexOutOfRange


class Numeric:
    """Kind of a numeric attribute. Values are stored as floats unchanged."""

    nominal = False
    labels: Tuple[str, ...] = ()

    def __eq__(self, other):
        return isinstance(other, Numeric)

    def __hash__(self):
        return hash(Numeric)

    def __repr__(self):
        return 'Numeric()'


class Nominal:
    """Kind of a nominal (categorical) attribute.

    Attributes
    -----
    labels : tuple of str
        The declared categories. The index of a label in this tuple is its
        encoding, i.e. label => index is a dense bijection onto
        `range(len(labels))`.
    """

    nominal = True

    def __init__(self, labels: Iterable[str]):
        if isinstance(labels, (str, bytes)):
            raise InvalidSchema("Nominal labels must be a sequence of "
                                "strings, not a string: {!r}".format(labels))
        labels = tuple(labels)
        if not labels:
            raise InvalidSchema("Nominal label set must not be empty")
        for label in labels:
            if not isinstance(label, str):
                raise InvalidSchema("Nominal label {!r} is not a string"
                                    .format(label))
        if len(set(labels)) != len(labels):
            raise InvalidSchema("Nominal labels are not distinct: {!r}"
                                .format(labels))
        self.labels = labels

    def index_of(self, label: str) -> int:
        """:return: The index of `label`, or -1 if it is not declared."""
        # linear, label sets are small
        for i, known in enumerate(self.labels):
            if known == label:
                return i
        return -1

    def __len__(self):
        return len(self.labels)

    def __eq__(self, other):
        if not isinstance(other, Nominal):
            return NotImplemented
        return self.labels == other.labels

    def __hash__(self):
        return hash(self.labels)

    def __repr__(self):
        return 'Nominal({!r})'.format(list(self.labels))


AttributeKind = Union[Numeric, Nominal]
NUMERIC = Numeric()


class Attribute:
    """A named, typed column definition. Immutable.

    Attributes
    -----
    name : str
        Unique (within one `Schema`), case-sensitive name.

    kind : Numeric or Nominal
    """

    __slots__ = ('_name', '_kind')

    def __init__(self, name: str, kind: AttributeKind = NUMERIC):
        if not isinstance(name, str) or not name:
            raise InvalidSchema("Attribute name must be a non-empty string, "
                                "got {!r}".format(name))
        if not isinstance(kind, (Numeric, Nominal)):
            raise InvalidSchema("Unknown attribute kind {!r} for {!r}"
                                .format(kind, name))
        self._name = name
        self._kind = kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> AttributeKind:
        return self._kind

    @property
    def is_nominal(self) -> bool:
        return self._kind.nominal

    @property
    def is_numeric(self) -> bool:
        return not self._kind.nominal

    @property
    def labels(self) -> Tuple[str, ...]:
        """The declared labels, or an empty tuple for numeric attributes."""
        return self._kind.labels

    def descriptor(self) -> Union[str, Tuple[str, Tuple[str, ...]]]:
        """:return: `name` if numeric, `(name, labels)` if nominal. This is
        also an attribute spec accepted by `build_schema`.
        """
        if self.is_nominal:
            return self._name, self.labels
        return self._name

    def __eq__(self, other):
        if not isinstance(other, Attribute):
            return NotImplemented
        return self._name == other._name and self._kind == other._kind

    def __hash__(self):
        return hash((self._name, self._kind))

    def __repr__(self):
        return 'Attribute({!r}, {!r})'.format(self._name, self._kind)


def make_attribute(name: str, kind=None) -> Attribute:
    """Create an `Attribute`.

    :param name: The attribute name.
    :param kind: None or `Numeric` for a numeric attribute, a `Nominal`, or a
        sequence of labels for a nominal attribute with that label order.
    :raise InvalidSchema: If the labels are empty or not pairwise distinct.
    """
    if kind is None:
        kind = NUMERIC
    elif not isinstance(kind, (Numeric, Nominal)):
        kind = Nominal(kind)
    return Attribute(name, kind)


AttributeSpec = Union[str, Tuple[str, Sequence[str]],
                      Dict[str, Sequence[str]], Attribute]


def _parse_attribute_spec(spec: AttributeSpec) -> Attribute:
    if isinstance(spec, Attribute):
        return spec
    if isinstance(spec, str):
        return make_attribute(spec)
    if isinstance(spec, Mapping):
        # {name: labels}
        if len(spec) != 1:
            raise InvalidSchema("Mapping attribute spec must have exactly one "
                                "item, got {!r}".format(spec))
        (name, labels), = spec.items()
        return make_attribute(name, labels)
    if isinstance(spec, SequenceABC) and len(spec) == 2 \
            and isinstance(spec[0], str):
        name, labels = spec
        return make_attribute(name, labels)
    raise InvalidSchema("Cannot recognize attribute spec {!r}".format(spec))


class Schema:
    """An immutable, ordered sequence of `Attribute`s with unique names.

    Lookup by name is a linear scan, schemas are expected to hold tens of
    attributes.
    """

    def __init__(self, attributes: Iterable[Attribute]):
        attributes = tuple(attributes)
        seen = set()
        for attribute in attributes:
            if not isinstance(attribute, Attribute):
                raise InvalidSchema("Not an Attribute: {!r}"
                                    .format(attribute))
            if attribute.name in seen:
                raise InvalidSchema("Duplicate attribute name {!r}"
                                    .format(attribute.name))
            seen.add(attribute.name)
        self._attributes = attributes

    @property
    def attribute_count(self) -> int:
        return len(self._attributes)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(a.name for a in self._attributes)

    def index_of(self, name: str) -> int:
        """:return: The position of the attribute called `name`.
        :raise AttributeNotFound: If there is no such attribute.
        """
        for i, attribute in enumerate(self._attributes):
            if attribute.name == name:
                return i
        raise AttributeNotFound(name)

    def check_position(self, position: int) -> int:
        """:return: `position`, if it addresses an attribute.
        :raise IndexOutOfRange: otherwise.
        """
        if isinstance(position, bool) or not isinstance(position, Integral) \
                or not 0 <= position < len(self._attributes):
            raise IndexOutOfRange(position, len(self._attributes),
                                  "Attribute position {!r} out of range "
                                  "[0, {})".format(position,
                                                   len(self._attributes)))
        return int(position)

    def resolve(self, name_or_position: Union[str, int]) -> int:
        """:return: The position of an attribute given by name or position."""
        if isinstance(name_or_position, str):
            return self.index_of(name_or_position)
        return self.check_position(name_or_position)

    def attribute(self, name_or_position: Union[str, int]) -> Attribute:
        return self._attributes[self.resolve(name_or_position)]

    def name_at(self, position: int) -> str:
        return self._attributes[self.check_position(position)].name

    def format(self) -> list:
        """:return: The attribute descriptors, see `Attribute.descriptor`."""
        return [a.descriptor() for a in self._attributes]

    def __len__(self):
        return len(self._attributes)

    def __iter__(self):
        return iter(self._attributes)

    def __getitem__(self, position):
        return self._attributes[position]

    def __eq__(self, other):
        if not isinstance(other, Schema):
            return NotImplemented
        return self._attributes == other._attributes

    def __hash__(self):
        return hash(self._attributes)

    def __repr__(self):
        return 'Schema({!r})'.format(list(self._attributes))


def build_schema(attribute_specs: Iterable[AttributeSpec]) -> Schema:
    """Build a `Schema` from attribute specs.

    Each spec is one of
      - a bare name: numeric attribute,
      - a pair `(name, labels)` or a mapping `{name: labels}`: nominal
        attribute with that label order,
      - an `Attribute`.

    :raise InvalidSchema: On duplicate names, bad label sets or
        unrecognizable specs.
    """
    if isinstance(attribute_specs, Schema):
        return attribute_specs
    return Schema(_parse_attribute_spec(spec) for spec in attribute_specs)


def index_of(schema: Schema, name: str) -> int:
    """:return: `schema.index_of(name)`"""
    return schema.index_of(name)
