"""Tests for `sklearn_instances.codec`."""

import math

import numpy as np
import pytest

from sklearn_instances.codec import encode, decode, is_label_index
from sklearn_instances.exceptions import \
    UnknownCategory, InvalidEncoding, UncheckedNominalWarning
from sklearn_instances.schema import make_attribute

outlook = make_attribute('outlook', ['sunny', 'overcast', 'rainy'])
temperature = make_attribute('temperature')


def test_nominal_roundtrip():
    for i, label in enumerate(outlook.labels):
        cell = encode(outlook, label)
        assert cell == float(i)
        assert isinstance(cell, float)
        assert decode(outlook, cell) == label


@pytest.mark.parametrize('value', [72, 72.5, -3.25, 0, 1e300,
                                   np.float32(2.5), np.int64(7)])
def test_numeric_roundtrip(value):
    cell = encode(temperature, value)
    assert isinstance(cell, float)
    assert decode(temperature, cell) == value


def test_unknown_category():
    with pytest.raises(UnknownCategory) as excinfo:
        encode(outlook, 'cloudy')
    assert excinfo.value.value == 'cloudy'
    assert excinfo.value.attribute is outlook
    assert "'outlook'" in str(excinfo.value)
    # numeric attributes declare no labels at all
    with pytest.raises(UnknownCategory):
        encode(temperature, 'hot')


def test_unencodable_type():
    with pytest.raises(TypeError):
        encode(temperature, None)
    with pytest.raises(TypeError):
        encode(outlook, ['sunny'])


def test_number_on_nominal_unchecked():
    # the shape of the value decides: numbers skip label lookup
    assert encode(outlook, 2) == 2.0
    assert decode(outlook, encode(outlook, 1)) == 'overcast'
    with pytest.warns(UncheckedNominalWarning):
        assert encode(outlook, 7) == 7.0
    with pytest.warns(UncheckedNominalWarning):
        assert encode(outlook, 0.5) == 0.5


@pytest.mark.usefixtures('strict_nominal')
def test_number_on_nominal_strict():
    assert encode(outlook, 2) == 2.0
    for invalid in [7, -1, 0.5, math.nan]:
        with pytest.raises(UnknownCategory):
            encode(outlook, invalid)
    # explicit argument overrides the configured default
    with pytest.warns(UncheckedNominalWarning):
        assert encode(outlook, 7, strict_nominal=False) == 7.0


def test_decode_invalid():
    for cell in [3.0, -1.0, 17, math.nan, math.inf]:
        with pytest.raises(InvalidEncoding) as excinfo:
            decode(outlook, cell)
        assert excinfo.value.attribute is outlook
    # rounding to the nearest label index
    assert decode(outlook, 1.2) == 'overcast'
    assert decode(outlook, 1.8) == 'rainy'


def test_is_label_index():
    assert [is_label_index(outlook, c) for c in [0.0, 1.0, 2.0]] \
        == [True, True, True]
    for cell in [0.6, 1.5, -1.0, 3.0, math.nan, math.inf]:
        assert not is_label_index(outlook, cell)
    assert not is_label_index(temperature, 0.0)


def test_fractional_number_on_nominal():
    with pytest.warns(UncheckedNominalWarning):
        assert encode(outlook, 0.6) == 0.6
    with pytest.raises(UnknownCategory):
        encode(outlook, 0.6, strict_nominal=True)
    assert encode(outlook, 2.0, strict_nominal=True) == 2.0
