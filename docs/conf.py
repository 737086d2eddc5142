# Sphinx configuration for the pylinalg API reference.

project = 'pylinalg'
author = 'Hai-Shuo'
release = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
]

# Docstrings use Google style; engine classes document __init__ separately
napoleon_google_docstrings = True
napoleon_numpy_docstrings = False
napoleon_include_init_with_doc = True

# Engines and facades read top-down: construction, access, modifiers
autodoc_member_order = 'bysource'
autodoc_typehints = 'description'

exclude_patterns = ['_build']

html_theme = 'furo'
html_title = 'pylinalg engines and facades'
