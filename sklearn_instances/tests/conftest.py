"""pytest fixtures for the test cases in this directory."""

import pytest

from sklearn_instances import config_context
from sklearn_instances.schema import build_schema

from sklearn_instances.tests.datasets import \
    WEATHER_ATTRIBUTES, weather, three_rows, random_mixed


@pytest.fixture
def weather_schema():
    return build_schema(WEATHER_ATTRIBUTES)


@pytest.fixture
def outlook_schema():
    """Schema of two attributes: nominal `outlook`, numeric `temperature`."""
    return build_schema([('outlook', ['sunny', 'rainy']), 'temperature'])


@pytest.fixture
def weather_dataset():
    return weather()


@pytest.fixture
def three_rows_dataset():
    return three_rows()


@pytest.fixture(params=[weather, three_rows, random_mixed])
def any_dataset(request):
    """Fixture running for each of the datasets in `tests.datasets`."""
    return request.param()


@pytest.fixture
def strict_nominal():
    """Enable validation of numbers on nominal attributes while the test
    runs."""
    with config_context(strict_nominal=True):
        yield
