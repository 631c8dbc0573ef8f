"""Run the `weather_iris.py` example script."""

import logging
import runpy
from pathlib import Path

import pytest

from sklearn_instances.tests.datasets import weather

SCRIPT = Path(__file__).resolve().parents[2] / 'weather_iris.py'


@pytest.mark.skipif(not SCRIPT.exists(), reason="example script not present")
def test_weather_iris(capsys):
    try:
        script_globals = runpy.run_path(str(SCRIPT), run_name='__main__')
    finally:
        logging.captureWarnings(False)
    output = capsys.readouterr().out
    assert "# weather #" in output
    assert "# iris #" in output
    # the script carries its own copy of the weather data
    assert script_globals['weather'].to_rows() == weather().to_rows()
    assert script_globals['iris_ds'].count() == 149
