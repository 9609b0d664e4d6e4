# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

from setuptools import setup, Extension
from Cython.Build import cythonize

modules = [\
    "bfh",
    "bfhcheck",
    "consts",
    "llog"\
]

# Optional so that a machine without a C compiler still gets the pure
# Python modules.
extensions = [Extension(x, [x + ".py"], optional=True) for x in modules]

setup(
    name = 'bfh',
    version = '1.0.0',
    description = 'Binary for humans: a readable, dash grouped base32 codec.',
    license = 'GPL v2',
    python_requires = '>=3.8',
    py_modules = modules,
    ext_modules = cythonize(extensions, language_level=3),
    extras_require = {
        'test': ['pytest', 'hypothesis'],
    },
)
