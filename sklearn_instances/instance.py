"""
Instances: single rows of encoded values aligned to a `Schema`.
"""

import math
from typing import Union, Dict, List

import numpy as np

from sklearn_instances.codec import encode, decode
from sklearn_instances.exceptions import NoClassSet, ShapeMismatch
from sklearn_instances.schema import Schema
from sklearn_instances.util import is_named_row

NO_CLASS = -1


def _check_weight(weight) -> float:
    weight = float(weight)
    if not math.isfinite(weight) or weight < 0:
        raise ValueError("Instance weight must be finite and non-negative, "
                         "got {!r}".format(weight))
    return weight


class Instance:
    """One row: an encoded float cell per attribute of `schema`, a weight,
    and optionally the position of the class attribute.

    Use `make_instance` (or `Dataset.add`) to build instances from domain
    values; the constructor expects already encoded cells.

    An instance refers to its schema, never to the dataset holding it. It is
    only meaningful together with a dataset of an equal schema.

    Attributes
    -----
    schema : Schema
        The (immutable, possibly shared) schema the cells are aligned to.

    weight : float
        Non-negative, default 1.

    class_index : int
        Position of the class attribute, -1 if none.
    """

    def __init__(self, schema: Schema, values, weight: float = 1.0,
                 class_index: int = None, populated=None):
        cells = np.array(values, dtype=np.float64)
        if cells.shape != (schema.attribute_count,):
            raise ShapeMismatch(schema.attribute_count, cells.size)
        if populated is None:
            populated = np.ones(schema.attribute_count, dtype=bool)
        else:
            populated = np.array(populated, dtype=bool)
            if populated.shape != cells.shape:
                raise ShapeMismatch(schema.attribute_count, populated.size)
        self._schema = schema
        self._values = cells
        self._populated = populated
        self._weight = _check_weight(weight)
        self._class_index = NO_CLASS
        if class_index is not None and class_index != NO_CLASS:
            self.set_class(class_index)

    # schema access

    @property
    def schema(self) -> Schema:
        return self._schema

    def index_of(self, name: str) -> int:
        """:return: Position of attribute `name` in this instance's schema."""
        return self._schema.index_of(name)

    def attribute_name_at(self, position: int) -> str:
        return self._schema.name_at(position)

    # values

    @property
    def values(self) -> np.ndarray:
        """The encoded cells, as read-only view."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    @property
    def num_values(self) -> int:
        """The number of populated positions, i.e. `len(self.to_sequence())`.
        """
        return int(np.count_nonzero(self._populated))

    @property
    def populated(self) -> np.ndarray:
        """Mask of the positions set at build time or with `set_value`."""
        view = self._populated.view()
        view.flags.writeable = False
        return view

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, weight: float):
        self._weight = _check_weight(weight)

    def value_at(self, position: int):
        """:return: The decoded domain value at `position`."""
        position = self._schema.check_position(position)
        return decode(self._schema[position], self._values[position])

    def set_value(self, name_or_position: Union[str, int], value,
                  strict_nominal: bool = None) -> 'Instance':
        """Encode `value` and store it at the given attribute.

        The cell is only changed if encoding succeeds.
        """
        position = self._schema.resolve(name_or_position)
        self._values[position] = encode(self._schema[position], value,
                                        strict_nominal)
        self._populated[position] = True
        return self

    def to_sequence(self) -> List:
        """:return: The decoded values of all populated positions, in schema
        order.
        """
        return [self.value_at(i)
                for i in np.flatnonzero(self._populated).tolist()]

    def to_mapping(self) -> Dict[str, object]:
        """:return: `{attribute name: decoded value}` for all populated
        positions.
        """
        return {self._schema.name_at(i): self.value_at(i)
                for i in np.flatnonzero(self._populated).tolist()}

    # class

    @property
    def class_index(self) -> int:
        return self._class_index

    @property
    def has_class(self) -> bool:
        return self._class_index != NO_CLASS

    def set_class(self, position: Union[str, int]) -> 'Instance':
        """Designate the attribute at `position` (or with that name) as class.
        """
        self._class_index = self._schema.resolve(position)
        return self

    def remove_class(self) -> 'Instance':
        self._class_index = NO_CLASS
        return self

    def get_class(self):
        """:return: The decoded class value.
        :raise NoClassSet: If no class position is designated.
        """
        if not self.has_class:
            raise NoClassSet("Instance has no class attribute set")
        return self.value_at(self._class_index)

    # misc

    def copy(self) -> 'Instance':
        """:return: An independent copy, sharing only the schema."""
        return Instance(self._schema, self._values.copy(), self._weight,
                        self._class_index, self._populated.copy())

    def __len__(self):
        return self._schema.attribute_count

    def __eq__(self, other):
        if not isinstance(other, Instance):
            return NotImplemented
        return (self._schema == other._schema
                and self._weight == other._weight
                and self._class_index == other._class_index
                and np.array_equal(self._populated, other._populated)
                and np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self):
        return 'Instance({!r}, weight={!r})'.format(self.to_mapping(),
                                                    self._weight)


def make_instance(schema: Schema, values, weight: float = 1.0,
                  strict_nominal: bool = None) -> Instance:
    """Build an `Instance` from domain values.

    :param values: Either
        - positional: a sequence with one value per attribute of `schema`, or
        - named: a mapping `{name: value}` or a sequence of `(name, value)`
          pairs. Attributes not named are set to 0.0 and not populated.

        Each value is encoded with `codec.encode`, so labels are looked up
        while numbers are stored as they are (see there).
    :param strict_nominal: bool or None, passed to `codec.encode`.
    :raise ShapeMismatch: If a positional row has the wrong length.
    :raise AttributeNotFound: If a named row refers to an unknown attribute.
    """
    n_attributes = schema.attribute_count
    cells = np.zeros(n_attributes, dtype=np.float64)
    if is_named_row(values):
        populated = np.zeros(n_attributes, dtype=bool)
        items = values.items() if hasattr(values, 'items') else values
        for name, value in items:
            position = schema.index_of(name)
            cells[position] = encode(schema[position], value, strict_nominal)
            populated[position] = True
    else:
        values = list(values)
        if len(values) != n_attributes:
            raise ShapeMismatch(n_attributes, len(values),
                                "Row has {} values, but schema has {} "
                                "attributes: {!r}".format(len(values),
                                                          n_attributes,
                                                          values))
        for position, (attribute, value) in enumerate(zip(schema, values)):
            cells[position] = encode(attribute, value, strict_nominal)
        populated = None
    return Instance(schema, cells, weight, populated=populated)
