import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "Urldial"
author = "Urldial contributors"
import urldial  # noqa: E402

release = urldial.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = []

myst_heading_anchors = 3
myst_enable_extensions = ["colon_fence"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

# urldial.ConnectionError shadows the builtin and socket types are external
suppress_warnings = [
    "ref.python",
    "ref.class",
]

autodoc_default_options = {
    "imported-members": False,
    "show-inheritance": True,
}
autodoc_member_order = "bysource"

html_theme = "furo"
html_static_path = ["_static"]
html_title = "Urldial"
