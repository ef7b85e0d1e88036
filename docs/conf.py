project = 'todoview'
copyright = '2026, todoview contributors'
author = 'todoview contributors'
extensions = ["myst_parser"]
templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']
html_theme = 'sphinx_book_theme'
html_static_path = ['_static']
