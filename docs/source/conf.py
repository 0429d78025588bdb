# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup ----------------------------------------------------------------
from __future__ import annotations

import dataclasses
import os
import sys
from datetime import datetime

# -- Import the package to document ----------------------------------------------
sys.path.insert(0, os.path.abspath("../../src"))


# -- Autodoc event: skip dataclass fields (already in docstring Attributes) ------
_DATACLASS_FIELD_CACHE: dict[type, set[str]] = {}


def _get_dataclass_fields(cls: type) -> set[str]:
    """Get cached set of field names for a dataclass."""
    if cls not in _DATACLASS_FIELD_CACHE:
        if dataclasses.is_dataclass(cls):
            _DATACLASS_FIELD_CACHE[cls] = {f.name for f in dataclasses.fields(cls)}
        else:
            _DATACLASS_FIELD_CACHE[cls] = set()
    return _DATACLASS_FIELD_CACHE[cls]


def autodoc_skip_member_handler(app, what, name, obj, skip, options):
    """Skip estimator fields since they're documented in the Attributes section."""
    if skip or what != "attribute":
        return skip
    # slotted dataclass fields are member descriptors carrying their owner
    parent = getattr(obj, "__objclass__", None)
    if parent is not None and name in _get_dataclass_fields(parent):
        return True
    return skip


def setup(app):
    """Connect event handlers."""
    app.connect("autodoc-skip-member", autodoc_skip_member_handler)

# -- Project information -----------------------------------------------------

project = 'onlinemoments'
author = 'onlinemoments developers'
copyright = f"{datetime.now():%Y}, {author}"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.viewcode",
    "sphinx.ext.doctest",
    "numpydoc",
]

nitpicky = True
nitpick_ignore = [
    ("py:mod", "onlinemoments"),
    # Estimator is a Protocol, not a regular class
    ("py:class", "onlinemoments.base.Estimator"),
    ("py:obj", "onlinemoments.base.Estimator"),
]

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# -- Options for HTML output -------------------------------------------------

html_theme = "pydata_sphinx_theme"
html_theme_options = {
    "show_prev_next": False,
    "navigation_depth": 2,
}

# -- Autodoc / Autosummary ------------------------------------------------------
autosummary_generate = True
autosummary_imported_members = True
autodoc_member_order = "bysource"
autodoc_typehints = "signature"
autoclass_content = "class"
autodoc_default_options = {
    "members": True,
    "inherited-members": True,           # from_iter, extend, copy live on the mixin
    "show-inheritance": False,
    "undoc-members": False,
}

# -- Numpydoc ----------------------------------------------------------------
numpydoc_show_class_members = False
numpydoc_class_members_toctree = False
numpydoc_xref_param_type = True

numpydoc_xref_ignore = {
    "of", "or", "default", "optional",
    "iterable", "estimator", "estimators", "any",
}

numpydoc_xref_aliases = {
    "Mean": "onlinemoments.mean.Mean",
    "Variance": "onlinemoments.variance.Variance",
    "Skewness": "onlinemoments.skewness.Skewness",
    "Kurtosis": "onlinemoments.kurtosis.Kurtosis",
    "ndarray": "numpy.ndarray",
    "int": ":py:class:`int`",
    "float": ":py:class:`float`",
    "bool": ":py:class:`bool`",
    "dict": ":py:class:`dict`",
}

# -- Options for intersphinx extension ---------------------------------------

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
}
