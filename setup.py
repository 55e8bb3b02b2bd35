import os

from Cython.Build import cythonize
from setuptools import setup, Extension, find_packages
import numpy as np


def local_file(name: str) -> str:
    """Interpret filename as relative to this file."""
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


SOURCE = local_file("backend")

with open(local_file("backend/bmsearch/__init__.py")) as o:
    for line in o:
        if line.startswith("__version__"):
            _, __version__, _ = line.split('"')


# Hot paths compiled with Cython
extensions = [
    Extension(
        name="bmsearch.alphabet.symbols",         # full dotted module path
        sources=["backend/bmsearch/alphabet/symbols.py"],
        include_dirs=[np.get_include()],
    ),
    Extension(
        name="bmsearch.heuristics.bad_character",
        sources=["backend/bmsearch/heuristics/bad_character.py"],
        include_dirs=[np.get_include()],
    ),
    Extension(
        name="bmsearch.heuristics.good_suffix",
        sources=["backend/bmsearch/heuristics/good_suffix.py"],
        include_dirs=[np.get_include()],
    ),
    Extension(
        name="bmsearch.engine.boyer_moore",
        sources=["backend/bmsearch/engine/boyer_moore.py"],
        include_dirs=[np.get_include()],
    ),
]

ext_modules = cythonize(
    extensions,
    compiler_directives={"language_level": "3"},
)
# the same modules run as plain Python when they cannot be compiled
for ext in ext_modules:
    ext.optional = True

setup(
    name="bmsearch",
    version=__version__,
    description="Boyer-Moore exact substring search with bad character and good suffix heuristics",
    packages=find_packages(SOURCE),
    package_dir={"": SOURCE},
    ext_modules=ext_modules,
    install_requires=[
        "numpy >= 1.22",
        "loguru >= 0.7.0",
        "pydantic >= 2.0",
        "pydantic-settings >= 2.0",
        "psutil >= 5.9.0",
        "fastapi >= 0.100.0",
    ],
    extras_require={
        "test": [
            "pytest >= 7.0",
            "hypothesis >= 6.80.0",
            "httpx >= 0.24.0",
        ],
        "api": [
            "uvicorn >= 0.22.0",
        ],
    },
    entry_points={"console_scripts": ["bmsearch = bmsearch.main:main"]},
    python_requires=">=3.9",
    zip_safe=False,
)
