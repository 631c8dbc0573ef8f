"""
Miscellaneous things not depending on anything else from sklearn_instances
but the schema.
"""

from numbers import Real
from typing import Iterable

import numpy as np

from sklearn_instances.schema import Schema


def is_label(value) -> bool:
    """:return: True iff `value` is symbolic, i.e. a (category) label."""
    return isinstance(value, str)


def is_number(value) -> bool:
    """:return: True iff `value` is a plain real number (including numpy
    scalars)."""
    return isinstance(value, (Real, np.number)) and not isinstance(
        value, np.complexfloating)


def is_named_row(values) -> bool:
    """:return: True iff `values` is given by attribute name, i.e. is a
    mapping or a non-empty sequence of `(name, value)` pairs.
    """
    if hasattr(values, 'keys'):
        return True
    if isinstance(values, (str, bytes, np.ndarray)):
        return False
    try:
        return len(values) > 0 and all(
            isinstance(item, (tuple, list)) and len(item) == 2
            and isinstance(item[0], str)
            for item in values)
    except TypeError:
        return False


def categorical_mask(schema: Schema, exclude: Iterable[int] = None
                     ) -> np.ndarray:
    """:return: A mask array of length `schema.attribute_count` (minus the
        number of positions in `exclude`), True for nominal attributes and
        False for numeric ones. Usable as `categorical_features` argument of
        estimators accepting such masks.
    """
    mask = np.array([attribute.is_nominal for attribute in schema],
                    dtype=bool)
    if exclude is not None:
        mask = np.delete(mask, list(exclude))
    return mask
