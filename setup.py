"""A setuptools based setup module.

See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='jobboard',

    version='1.0.0',

    description='Job board and voting periods for a LANCER tabletop campaign',
    long_description=long_description,

    # For a list of valid classifiers, see
    # https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 4 - Beta',

        'Intended Audience :: End Users/Desktop',
        'Topic :: Games/Entertainment :: Role-Playing',
        'Environment :: Console',

        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],

    packages=find_packages(),

    # This field lists other packages that your project depends on to run.
    # Any package you put here will be installed by pip when your project is
    # installed, so they must be valid existing projects.
    install_requires=[
        'PyYAML>=5.1',
        'colorlog>=4.0',
        'jsonschema>=3.0',
        'prettytable>=0.7.2',
        'enlighten>=1.5.0',
    ],

    python_requires='>=3.8',

    extras_require={
        'test': ['pytest', 'parameterized'],
    },

    entry_points={
        'console_scripts': [
            'jobboard=jobboard:main',
        ],
    },
)
