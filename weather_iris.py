
# script building the "weather" dataset by hand and converting the iris
# dataset, printing attribute formats, class values and some instances

import logging

from sklearn.datasets import load_iris
from sklearn.utils import Bunch

from sklearn_instances import make_dataset
from sklearn_instances.extra import from_arrays, to_bunch

logging.basicConfig(format='%(asctime)s:' + logging.BASIC_FORMAT,
                    level=logging.DEBUG)
logging.captureWarnings(True)
logger = logging.getLogger('weather_iris')

weather = make_dataset(
    'weather',
    [('outlook', ['sunny', 'overcast', 'rainy']),
     'temperature',
     'humidity',
     {'windy': ['false', 'true']},
     ('play', ['yes', 'no'])],
    [['sunny', 85, 85, 'false', 'no'],
     ['sunny', 80, 90, 'true', 'no'],
     ['overcast', 83, 86, 'false', 'yes'],
     ['rainy', 70, 96, 'false', 'yes'],
     ['rainy', 68, 80, 'false', 'yes'],
     ['rainy', 65, 70, 'true', 'no'],
     ['overcast', 64, 65, 'true', 'yes'],
     ['sunny', 72, 95, 'false', 'no'],
     ['sunny', 69, 70, 'false', 'yes'],
     ['rainy', 75, 80, 'false', 'yes'],
     ['sunny', 75, 70, 'true', 'yes'],
     ['overcast', 72, 90, 'true', 'yes'],
     ['overcast', 81, 75, 'false', 'yes'],
     ['rainy', 71, 91, 'true', 'no']],
    class_attribute='play')
print("# weather #")
print("format: {}".format(weather.format()))
print("class values: {}".format(weather.class_values()))
for instance in weather.to_sequence()[:3]:
    print(instance.to_mapping())

iris = load_iris()  # type: Bunch
iris_ds = from_arrays('iris',
                      list(iris.feature_names)
                      + [('species', list(iris.target_names))],
                      iris.data, iris.target)
logger.info("converted iris: %d instances", iris_ds.count())
print("\n# iris #")
print("format: {}".format(iris_ds.format()))
print("class values: {}".format(iris_ds.class_values()))
print(iris_ds.pop().to_mapping())
bunch = to_bunch(iris_ds)
print("back to arrays: data {}, target {}".format(bunch.data.shape,
                                                  bunch.target.shape))
