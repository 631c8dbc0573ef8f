"""
Datasets: named, ordered collections of `Instance`s sharing one `Schema`,
with an optionally designated class attribute.

A dataset is a single-threaded, in-memory structure. It does no locking;
callers sharing one between threads have to serialize access themselves.
Sequences returned by `Dataset.to_sequence` are snapshots: mutating the
dataset afterwards does not change them, and positions in an older snapshot
need not correspond to positions in the dataset anymore.
"""

import logging
from collections.abc import Sequence as SequenceABC
from numbers import Integral
from typing import Iterable, Iterator, Union, Dict, List, Sequence

from sklearn_instances.exceptions import \
    IndexOutOfRange, NoClassSet, ShapeMismatch, AttributeNotFound
from sklearn_instances.instance import Instance, make_instance, NO_CLASS
from sklearn_instances.schema import Schema, Attribute, build_schema

logger = logging.getLogger(__name__)

NOT_NOMINAL = 'not_nominal'
"""Returned by `Dataset.values_at` and `Dataset.class_values` for numeric
attributes."""


class InstanceSequence(SequenceABC):
    """Immutable, restartable view of the instances of a `Dataset` at the
    time it was created.
    """

    def __init__(self, instances: Iterable[Instance]):
        self._instances = tuple(instances)

    def __getitem__(self, position):
        return self._instances[position]

    def __len__(self):
        return len(self._instances)

    def __iter__(self) -> Iterator[Instance]:
        return iter(self._instances)

    def __repr__(self):
        return 'InstanceSequence(<{} instances>)'.format(len(self))


def _label_indices(attribute: Attribute) -> Union[Dict[str, int], str]:
    if not attribute.is_nominal:
        return NOT_NOMINAL
    return {label: i for i, label in enumerate(attribute.labels)}


class Dataset:
    """A named, ordered collection of instances sharing one schema.

    Parameters
    -----
    name : str
        The dataset (relation) name.

    attributes : iterable of attribute specs, or a Schema
        See `schema.build_schema`.

    capacity_or_rows : int or iterable of rows
        If an int, create an empty dataset and keep it as capacity hint.
        Otherwise, add one instance per row (see `instance.make_instance`).

    weight : float
        Weight of the instances built from `capacity_or_rows`.

    class_attribute : None or str or int
        Name or position of the class attribute.

    strict_nominal : None or bool
        Validate numbers stored on nominal attributes, see `codec.encode`.
        If None, use the configured default (see `set_config`).

    Attributes
    -----
    schema : Schema

    class_index : int
        Position of the class attribute, -1 if there is none.

    capacity : int
        The initial capacity hint. Only informative, the dataset grows as
        needed.
    """

    def __init__(self,
                 name: str,
                 attributes,
                 capacity_or_rows: Union[int, Iterable] = 0,
                 weight: float = 1.0,
                 class_attribute: Union[None, str, int] = None,
                 strict_nominal: bool = None):
        self._name = str(name)
        self._schema: Schema = build_schema(attributes)
        self.strict_nominal = strict_nominal
        self._class_index = NO_CLASS
        self._instances: List[Instance] = []

        if isinstance(capacity_or_rows, Integral):
            if capacity_or_rows < 0:
                raise ValueError("capacity must be non-negative, got {}"
                                 .format(capacity_or_rows))
            self.capacity = int(capacity_or_rows)
        else:
            rows = list(capacity_or_rows)
            self.capacity = len(rows)
            for row in rows:
                self._instances.append(self._build_instance(row, weight))

        if class_attribute is not None:
            self._class_index = self._resolve_class(class_attribute)
            for instance in self._instances:
                instance.set_class(self._class_index)
        logger.debug("created dataset %r with %d attributes, %d instances, "
                     "class_index %d", self._name, len(self._schema),
                     len(self._instances), self._class_index)

    def _resolve_class(self, class_attribute: Union[str, int]) -> int:
        try:
            return self._schema.resolve(class_attribute)
        except IndexOutOfRange as e:
            raise AttributeNotFound(
                class_attribute,
                "Class attribute {!r} not found in dataset {!r}"
                .format(class_attribute, self._name)) from e

    def _build_instance(self, row, weight: float) -> Instance:
        instance = make_instance(self._schema, row, weight,
                                 self.strict_nominal)
        if self._class_index != NO_CLASS:
            instance.set_class(self._class_index)
        return instance

    def _check_position(self, position: int) -> int:
        size = len(self._instances)
        if isinstance(position, bool) or not isinstance(position, Integral) \
                or not 0 <= position < size:
            raise IndexOutOfRange(
                position, size,
                "Instance position {!r} out of range [0, {}) of dataset {!r}"
                .format(position, size, self._name))
        return int(position)

    # information

    @property
    def name(self) -> str:
        return self._name

    @property
    def schema(self) -> Schema:
        return self._schema

    def format(self) -> list:
        """:return: The attribute descriptors: the bare name for numeric
        attributes, `(name, labels)` for nominal ones.
        """
        return self._schema.format()

    def index_of(self, name: str) -> int:
        return self._schema.index_of(name)

    def attribute_name_at(self, position: int) -> str:
        return self._schema.name_at(position)

    @property
    def class_index(self) -> int:
        return self._class_index

    @property
    def has_class(self) -> bool:
        return self._class_index != NO_CLASS

    @property
    def class_attribute(self) -> Attribute:
        """:raise NoClassSet: If no class attribute is designated."""
        if not self.has_class:
            raise NoClassSet("Dataset {!r} has no class attribute"
                             .format(self._name))
        return self._schema[self._class_index]

    def class_values(self) -> Union[Dict[str, int], str]:
        """:return: `{label: index}` of the class attribute, or
        `NOT_NOMINAL` if it is numeric.
        :raise NoClassSet: If no class attribute is designated.
        """
        return _label_indices(self.class_attribute)

    def values_at(self, position: int) -> Union[Dict[str, int], str]:
        """:return: `{label: index}` of the attribute at `position`, or
        `NOT_NOMINAL` if it is numeric.
        """
        return _label_indices(self._schema[self._schema.check_position(
            position)])

    def count(self) -> int:
        return len(self._instances)

    # class designation

    def set_class(self, position: Union[str, int]) -> 'Dataset':
        """Designate the attribute at `position` (or named so) as class
        attribute, for the dataset and all its instances.
        """
        class_index = self._schema.resolve(position)
        for instance in self._instances:
            instance.set_class(class_index)
        self._class_index = class_index
        logger.debug("dataset %r: class_index set to %d (%r)", self._name,
                     class_index, self._schema.name_at(class_index))
        return self

    def remove_class(self) -> 'Dataset':
        for instance in self._instances:
            instance.remove_class()
        self._class_index = NO_CLASS
        logger.debug("dataset %r: class removed", self._name)
        return self

    # instances

    def add(self, row_or_instance, weight: float = 1.0) -> 'Dataset':
        """Append an instance.

        :param row_or_instance: An `Instance` built against an equal schema,
            of which a copy is appended (`weight` is ignored then), or a row
            of domain values from which an instance is built, see
            `make_instance`.
        :return: self
        :raise ShapeMismatch: If the row or instance does not fit the schema.
        """
        if isinstance(row_or_instance, Instance):
            if row_or_instance.schema != self._schema:
                raise ShapeMismatch(
                    self._schema.attribute_count,
                    row_or_instance.schema.attribute_count,
                    "Instance schema {!r} differs from schema of dataset {!r}"
                    .format(row_or_instance.schema, self._name))
            # the dataset owns its instances, the caller keeps the original
            instance = row_or_instance.copy()
            if self._class_index != NO_CLASS:
                instance.set_class(self._class_index)
            else:
                instance.remove_class()
        else:
            instance = self._build_instance(row_or_instance, weight)
        self._instances.append(instance)
        return self

    def at(self, position: int) -> Instance:
        """:return: The instance at `position`."""
        return self._instances[self._check_position(position)]

    def extract_at(self, position: int) -> Instance:
        """Remove and return the instance at `position`. Later instances move
        down by one.
        """
        return self._instances.pop(self._check_position(position))

    def pop(self) -> Instance:
        """Remove and return the first instance."""
        return self.extract_at(0)

    def to_sequence(self) -> InstanceSequence:
        """:return: A snapshot of the current instances, in dataset order."""
        return InstanceSequence(self._instances)

    def to_rows(self) -> List[list]:
        """:return: `instance.to_sequence()` for each instance."""
        return [instance.to_sequence() for instance in self._instances]

    def __len__(self):
        return len(self._instances)

    def __iter__(self) -> Iterator[Instance]:
        return iter(self.to_sequence())

    def __getitem__(self, position: int) -> Instance:
        return self.at(position)

    def __repr__(self):
        return 'Dataset({!r}, {!r}, <{} instances>, class_index={})'.format(
            self._name, self.format(), len(self._instances),
            self._class_index)


def make_dataset(name: str,
                 attributes,
                 capacity_or_rows: Union[int, Sequence] = 0,
                 weight: float = 1.0,
                 class_attribute: Union[None, str, int] = None,
                 strict_nominal: bool = None) -> Dataset:
    """Create a `Dataset`, see there for the parameters."""
    return Dataset(name, attributes, capacity_or_rows, weight=weight,
                   class_attribute=class_attribute,
                   strict_nominal=strict_nominal)
