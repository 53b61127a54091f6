# Sphinx configuration for the signal schedule scorer API reference.
#
# Build with:  sphinx-build -b html docs/source docs/build

import os
import sys

# conf.py lives in docs/source; the packages (sim, documents, batch) and the
# top-level modules sit two levels up.
sys.path.insert(0, os.path.abspath("../.."))

project = "Signal Schedule Scorer"
copyright = "2026, Signal Scorer Team"
author = "Signal Scorer Team"
release = "0.1"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",   # NumPy-style sections in the sim and documents docstrings
    "sphinx.ext.viewcode",
    "sphinx_rtd_dark_mode",
]

# unittest modules sit beside the code
exclude_patterns = ["**/test_*"]

autodoc_member_order = "bysource"
autodoc_typehints = "description"
# pydantic models: document the declared fields, not the BaseModel machinery
autodoc_default_options = {
    "exclude-members": "model_config, model_fields, model_computed_fields",
}
napoleon_google_docstring = True
napoleon_numpy_docstring = True

# batch.report needs pandas; the docs build should not
autodoc_mock_imports = ["pandas"]

# -- HTML output -------------------------------------------------------------

html_theme = "sphinx_rtd_theme"
default_dark_mode = True
html_title = "Signal Schedule Scorer"
