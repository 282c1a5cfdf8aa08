from __future__ import annotations

"""
Domain Constants.

Provides centralized access to the outline format rules and the
template lookup conventions.
"""

import os

# Leading spaces per nesting level
INDENT_WIDTH = 4
INDENT_CHAR = " "

TEMPLATE_EXTENSION = ".txt"
TEMPLATE_ENCODING = "utf-8"

# Bundled templates live next to the package sources
BUNDLED_TEMPLATES_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "templates",
)

DEFAULT_LOG_LEVEL = "INFO"
