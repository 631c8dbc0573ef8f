"""Tests for `sklearn_instances.instance`."""

import numpy as np
import pytest
from numpy.testing import assert_array_equal

from sklearn_instances.exceptions import \
    ShapeMismatch, AttributeNotFound, UnknownCategory, NoClassSet, \
    IndexOutOfRange, UncheckedNominalWarning
from sklearn_instances.instance import Instance, make_instance


def test_outlook_scenario(outlook_schema):
    instance = make_instance(outlook_schema, ['sunny', 72.0])
    assert instance.to_sequence() == ['sunny', 72.0]
    assert instance.value_at(0) == 'sunny'
    assert instance.value_at(1) == 72.0
    assert_array_equal(instance.values, [0.0, 72.0])
    assert instance.weight == 1.0
    with pytest.raises(UnknownCategory):
        make_instance(outlook_schema, ['cloudy', 72.0])


def test_positional_shape(outlook_schema):
    with pytest.raises(ShapeMismatch) as excinfo:
        make_instance(outlook_schema, ['sunny'])
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 1
    with pytest.raises(ShapeMismatch):
        make_instance(outlook_schema, ['sunny', 1, 2])


def test_named_row(weather_schema):
    for named in [{'temperature': 64, 'outlook': 'rainy'},
                  [('temperature', 64), ('outlook', 'rainy')]]:
        instance = make_instance(weather_schema, named, weight=2)
        assert instance.weight == 2.0
        assert instance.num_values == 2
        # schema order, only populated positions
        assert instance.to_sequence() == ['rainy', 64.0]
        assert instance.to_mapping() == {'outlook': 'rainy',
                                         'temperature': 64.0}
        # not mentioned attributes default to 0.0
        assert_array_equal(instance.values, [2.0, 64.0, 0.0, 0.0, 0.0])
        assert_array_equal(instance.populated,
                           [True, True, False, False, False])
        assert len(instance) == 5

    with pytest.raises(AttributeNotFound):
        make_instance(weather_schema, {'Temperature': 64})


def test_to_mapping(weather_schema):
    row = ['sunny', 85, 85, 'false', 'no']
    instance = make_instance(weather_schema, row)
    assert instance.to_mapping() == {'outlook': 'sunny',
                                     'temperature': 85.0,
                                     'humidity': 85.0,
                                     'windy': 'false',
                                     'play': 'no'}
    assert instance.num_values == 5


def test_number_on_nominal(outlook_schema):
    # numbers are stored as label index without lookup
    instance = make_instance(outlook_schema, [1, 72])
    assert instance.value_at(0) == 'rainy'
    with pytest.warns(UncheckedNominalWarning):
        make_instance(outlook_schema, [5, 72])


@pytest.mark.usefixtures('strict_nominal')
def test_number_on_nominal_strict(outlook_schema):
    assert make_instance(outlook_schema, [1, 72]).value_at(0) == 'rainy'
    with pytest.raises(UnknownCategory):
        make_instance(outlook_schema, [5, 72])


def test_set_value(outlook_schema):
    instance = make_instance(outlook_schema, {'temperature': 50})
    assert instance.to_sequence() == [50.0]
    assert instance.set_value('outlook', 'rainy') is instance
    assert instance.to_sequence() == ['rainy', 50.0]
    instance.set_value(1, 51.5)
    assert instance.value_at(1) == 51.5
    with pytest.raises(UnknownCategory):
        instance.set_value(0, 'cloudy')
    assert instance.value_at(0) == 'rainy', "failed set_value changed cell"
    with pytest.raises(IndexOutOfRange):
        instance.set_value(2, 1.0)


def test_values_read_only(outlook_schema):
    instance = make_instance(outlook_schema, ['sunny', 1])
    with pytest.raises(ValueError):
        instance.values[1] = 3


def test_class(weather_schema):
    instance = make_instance(weather_schema,
                             ['sunny', 85, 85, 'false', 'no'])
    assert not instance.has_class
    assert instance.class_index == -1
    with pytest.raises(NoClassSet):
        instance.get_class()
    assert instance.set_class(4) is instance
    assert instance.class_index == 4
    assert instance.get_class() == 'no'
    instance.set_class('temperature')
    assert instance.get_class() == 85.0
    with pytest.raises(IndexOutOfRange):
        instance.set_class(5)
    instance.remove_class()
    with pytest.raises(NoClassSet):
        instance.get_class()


def test_weight(outlook_schema):
    for weight in [-1, np.inf, np.nan]:
        with pytest.raises(ValueError):
            make_instance(outlook_schema, ['sunny', 1], weight=weight)
    instance = make_instance(outlook_schema, ['sunny', 1], weight=0)
    instance.weight = 0.5
    assert instance.weight == 0.5
    with pytest.raises(ValueError):
        instance.weight = -0.5


def test_copy_and_eq(outlook_schema):
    instance = make_instance(outlook_schema, ['sunny', 1]).set_class(0)
    copy = instance.copy()
    assert copy == instance
    assert copy is not instance
    copy.set_value(1, 2)
    assert copy != instance
    assert instance.value_at(1) == 1.0, "modifying copy changed original"


def test_constructor_shape(outlook_schema):
    with pytest.raises(ShapeMismatch):
        Instance(outlook_schema, [0.0])
    with pytest.raises(ShapeMismatch):
        Instance(outlook_schema, [0.0, 1.0], populated=[True])
    assert Instance(outlook_schema, [1, 2]).to_sequence() == ['rainy', 2.0]
