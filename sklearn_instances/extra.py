"""
Conversion of `Dataset`s from and to the `(X, y)` arrays scikit-learn
estimators consume.
"""

from typing import Optional, Tuple, Union

import numpy as np
from sklearn.utils import Bunch, check_array
from sklearn.utils.validation import column_or_1d

from sklearn_instances.codec import is_label_index
from sklearn_instances.dataset import Dataset
from sklearn_instances.exceptions import ShapeMismatch, InvalidEncoding
from sklearn_instances.instance import Instance
from sklearn_instances.schema import build_schema
from sklearn_instances.util import categorical_mask


def to_arrays(dataset: Dataset
              ) -> Tuple[np.ndarray, Optional[np.ndarray], np.ndarray]:
    """Convert `dataset` to arrays of encoded cells.

    :return: tuple(X, y, sample_weight)
        - X: array of shape `(n_instances, n_features)` and dtype float,
          holding all attributes except the class attribute.
        - y: array of shape `(n_instances,)`, the class attribute, or None if
          there is none.
        - sample_weight: array of shape `(n_instances,)`.
    """
    n_attributes = dataset.schema.attribute_count
    cells = np.empty((len(dataset), n_attributes), dtype=np.float64)
    for i, instance in enumerate(dataset.to_sequence()):
        cells[i] = instance.values
    sample_weight = np.array([instance.weight for instance in dataset],
                             dtype=np.float64)
    if not dataset.has_class:
        return cells, None, sample_weight
    X = np.delete(cells, dataset.class_index, axis=1)
    y = cells[:, dataset.class_index]
    return X, y, sample_weight


def to_bunch(dataset: Dataset) -> Bunch:
    """Convert `dataset` like `sklearn.datasets.load_*` return values.

    :return: A `Bunch` with
        - `data`, `target`, `sample_weight`: see `to_arrays`
        - `feature_names`: names of the attributes in `data`
        - `target_names`: labels of the class attribute, if it is nominal
        - `categorical_mask`: bool array, True for nominal columns of `data`
        - `name`: the dataset name
    """
    X, y, sample_weight = to_arrays(dataset)
    exclude = [dataset.class_index] if dataset.has_class else None
    feature_names = [name for i, name in enumerate(dataset.schema.names)
                     if i != dataset.class_index]
    target_names = None
    if dataset.has_class and dataset.class_attribute.is_nominal:
        target_names = list(dataset.class_attribute.labels)
    return Bunch(data=X,
                 target=y,
                 sample_weight=sample_weight,
                 feature_names=feature_names,
                 target_names=target_names,
                 categorical_mask=categorical_mask(dataset.schema, exclude),
                 name=dataset.name)


def from_arrays(name: str,
                attributes,
                X,
                y=None,
                sample_weight=None,
                class_attribute: Union[None, str, int] = None) -> Dataset:
    """Build a `Dataset` from already encoded arrays.

    :param attributes: Attribute specs (see `build_schema`) for the columns
        of `X` followed, if `y` is given, by the class attribute.
    :param X: array-like of shape `(n_instances, n_features)`. Cells of
        nominal attributes are label indices.
    :param y: None or array-like of shape `(n_instances,)`, appended as last
        column. Then `class_attribute` defaults to the last attribute.
    :param sample_weight: None or array-like of shape `(n_instances,)`.
    :raise ShapeMismatch: If the array shapes disagree with `attributes`.
    :raise InvalidEncoding: If a nominal cell is no label index.
    """
    schema = build_schema(attributes)
    X = check_array(X, dtype=np.float64, ensure_min_samples=0)
    if y is not None:
        y = column_or_1d(y).astype(np.float64)
        if len(y) != len(X):
            raise ShapeMismatch(len(X), len(y),
                                "X has {} rows, but y has {} values"
                                .format(len(X), len(y)))
        X = np.column_stack([X, y])
        if class_attribute is None:
            class_attribute = schema.attribute_count - 1
    if X.shape[1] != schema.attribute_count:
        raise ShapeMismatch(schema.attribute_count, X.shape[1],
                            "Arrays have {} columns, but {} attributes are "
                            "given".format(X.shape[1],
                                           schema.attribute_count))
    if sample_weight is None:
        sample_weight = np.ones(len(X))
    else:
        sample_weight = column_or_1d(sample_weight)
        if len(sample_weight) != len(X):
            raise ShapeMismatch(len(X), len(sample_weight),
                                "X has {} rows, but sample_weight has {} "
                                "values".format(len(X), len(sample_weight)))

    for position, attribute in enumerate(schema):
        if attribute.is_nominal:
            for cell in X[:, position].tolist():
                if not is_label_index(attribute, cell):
                    raise InvalidEncoding(attribute, cell)

    dataset = Dataset(name, schema, len(X), class_attribute=class_attribute)
    for row, weight in zip(X, sample_weight):
        dataset.add(Instance(schema, row, weight))
    return dataset
