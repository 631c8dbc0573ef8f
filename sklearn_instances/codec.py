"""
Conversion between domain values (numbers, category labels) and the float
cells instances are stored as.

Numeric values are stored unchanged, nominal values as the index of their
label in the attribute's declared label order, cast to float.
"""

import math
import warnings
from numbers import Real

from sklearn_instances._config import resolve_strict_nominal
from sklearn_instances.exceptions import \
    UnknownCategory, InvalidEncoding, UncheckedNominalWarning
from sklearn_instances.schema import Attribute
from sklearn_instances.util import is_label, is_number


def _encode_label(attribute: Attribute, label: str) -> float:
    index = attribute.kind.index_of(label) if attribute.is_nominal else -1
    if index < 0:
        raise UnknownCategory(attribute, label)
    return float(index)


def is_label_index(attribute: Attribute, cell: float) -> bool:
    """:return: True iff `attribute` is nominal and `cell` is exactly the
    index of one of its labels."""
    return (attribute.is_nominal
            and math.isfinite(cell)
            and cell == int(cell)
            and 0 <= cell < len(attribute.labels))


def _encode_number(attribute: Attribute, number: Real,
                   strict_nominal: bool) -> float:
    cell = float(number)
    if attribute.is_nominal and not is_label_index(attribute, cell):
        if strict_nominal:
            raise UnknownCategory(
                attribute, number,
                "Number {!r} is not a label index of nominal attribute {!r} "
                "with {} labels".format(number, attribute.name,
                                        len(attribute.labels)))
        warnings.warn("Storing {!r} unchecked on nominal attribute {!r}, it "
                      "does not denote any of its {} labels"
                      .format(number, attribute.name,
                              len(attribute.labels)),
                      UncheckedNominalWarning, stacklevel=4)
    return cell


def encode(attribute: Attribute, value, strict_nominal: bool = None) -> float:
    """Encode a domain value for storage in an instance.

    The shape of `value` decides the encoding path, not the kind of
    `attribute`:

    - a label (`str`) is looked up in the declared labels, raising
      `UnknownCategory` if it is not declared (always the case for numeric
      attributes),
    - a number is stored as float. On a nominal attribute it is taken as an
      already encoded label index and only validated if `strict_nominal`.

    :param strict_nominal: bool or None
        If None, use the configured default (see `set_config`).
    :raise TypeError: If `value` is neither a label nor a real number.
    """
    if is_label(value):
        return _encode_label(attribute, value)
    if is_number(value):
        return _encode_number(attribute, value,
                              resolve_strict_nominal(strict_nominal))
    raise TypeError("Cannot encode {!r} of type {} for attribute {!r}"
                    .format(value, type(value).__name__, attribute.name))


def decode(attribute: Attribute, cell: float):
    """Decode a stored cell value.

    :return: The float `cell` for numeric attributes, the label whose index
        is `round(cell)` for nominal ones.
    :raise InvalidEncoding: If no label has that index.
    """
    cell = float(cell)
    if attribute.is_numeric:
        return cell
    if not math.isfinite(cell):
        raise InvalidEncoding(attribute, cell)
    index = int(round(cell))
    if not 0 <= index < len(attribute.labels):
        raise InvalidEncoding(attribute, cell)
    return attribute.labels[index]
