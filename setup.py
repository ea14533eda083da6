"""signalc installation script."""

from codecs import open
from os import path

from setuptools import find_packages, setup

import signalc

f"signalc only supports Python 3.6 or later"  # f-str is Syntax Err before Py3.6

VERSION = str(signalc.__version__)

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='signalc',
    version=VERSION,

    description='A SIGNAL language lexer and syntax analyzer in Python',
    long_description=long_description,
    long_description_content_type='text/markdown',

    # Choose your license
    license='MIT',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.6',
        'Topic :: Software Development',
        'Topic :: Software Development :: Compilers',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
    ],

    keywords='signal compiler parser lexer recursive-descent',
    packages=find_packages(exclude=['tests']),
    install_requires=[],

    entry_points={
        'console_scripts': [
            'signalc=signalc.main:main',
        ],
    },
)
