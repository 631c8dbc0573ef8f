"""Typed tabular datasets of instances, for scikit-learn style learners.

A `Dataset` holds rows (`Instance`s) of named, typed attributes (a `Schema`).
Attributes are numeric or nominal (categorical, with an ordered label set);
one of them may be designated as class attribute. Rows are stored as float
arrays, nominal values as the index of their label.

Limitations / Assumptions
=====

- no missing values
- no string, date or relational attributes
- no persistence formats, see `extra` for conversion to arrays instead
- no internal synchronization, a dataset must not be mutated concurrently
- a bare number stored on a nominal attribute is taken as label index and
  only validated in strict mode (`set_config(strict_nominal=True)`)
"""

from sklearn_instances._config import get_config, set_config, config_context
from sklearn_instances.dataset import \
    Dataset, InstanceSequence, make_dataset, NOT_NOMINAL
from sklearn_instances.exceptions import \
    InstancesError, InvalidSchema, AttributeNotFound, UnknownCategory, \
    InvalidEncoding, ShapeMismatch, IndexOutOfRange, NoClassSet, \
    UncheckedNominalWarning
from sklearn_instances.instance import Instance, make_instance
from sklearn_instances.schema import \
    Attribute, Schema, Numeric, Nominal, make_attribute, build_schema, \
    index_of
from sklearn_instances.codec import encode, decode

__all__ = ['codec', 'dataset', 'exceptions', 'extra', 'instance', 'schema',
           'tests', 'util',
           'Attribute', 'Schema', 'Numeric', 'Nominal', 'make_attribute',
           'build_schema', 'index_of', 'encode', 'decode',
           'Instance', 'make_instance',
           'Dataset', 'InstanceSequence', 'make_dataset', 'NOT_NOMINAL',
           'InstancesError', 'InvalidSchema', 'AttributeNotFound',
           'UnknownCategory', 'InvalidEncoding', 'ShapeMismatch',
           'IndexOutOfRange', 'NoClassSet', 'UncheckedNominalWarning',
           'get_config', 'set_config', 'config_context']
