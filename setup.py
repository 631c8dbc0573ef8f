import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='sklearn_instances',
    version='0.0',
    packages=setuptools.find_packages(),
    license='BSD',
    description='Typed tabular datasets of numeric and nominal attributes, '
                'convertible to scikit-learn arrays.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    python_requires='>=3.6',
    install_requires=[
        'scikit_learn >= 0.20',
        'numpy',
    ],
    extras_require={
        'tests': ['pytest >= 3.5'],
    },
)
