from __future__ import annotations

"""
Template Locator.

Resolves template names to outline files inside a templates directory
and reads their content.
"""

import logging
import os
from typing import List, Tuple

from blueprint.domain.constants import TEMPLATE_ENCODING, TEMPLATE_EXTENSION
from blueprint.domain.outline_models import TemplateNotFoundError, TemplateReadError

logger = logging.getLogger(__name__)


def resolve_template_path(name: str, templates_dir: str) -> str:
    """Map a template name to its expected file path."""
    return os.path.join(templates_dir, f"{name}{TEMPLATE_EXTENSION}")


def load_template(name: str, templates_dir: str) -> Tuple[str, str]:
    """
    Read the outline text of a named template.

    Undecodable bytes are replaced with U+FFFD rather than rejected.

    Args:
        name: Template identifier (file name without extension).
        templates_dir: Directory holding the template files.

    Returns:
        Tuple[str, str]: (resolved path, outline text).

    Raises:
        TemplateNotFoundError: If no regular file exists at the resolved path.
        TemplateReadError: If the file exists but cannot be opened or read.
    """
    path = resolve_template_path(name, templates_dir)
    if not os.path.isfile(path):
        logger.error(f"Template '{name}' not found at: {path}")
        raise TemplateNotFoundError(name, path)

    try:
        with open(path, "r", encoding=TEMPLATE_ENCODING, errors="replace") as f:
            text = f.read()
    except OSError as e:
        logger.error(f"Template '{name}' could not be read at {path}: {e}")
        raise TemplateReadError(name, path, e.strerror or str(e)) from e

    logger.debug(f"Loaded template '{name}' from {path} ({len(text)} chars).")
    return path, text


def list_templates(templates_dir: str) -> List[str]:
    """
    Enumerate template names available in a directory.

    Returns:
        List[str]: Sorted names; empty if the directory does not exist.
    """
    if not os.path.isdir(templates_dir):
        logger.warning(f"Templates directory not found: {templates_dir}")
        return []

    names = []
    for entry in os.listdir(templates_dir):
        stem, ext = os.path.splitext(entry)
        if ext == TEMPLATE_EXTENSION and os.path.isfile(os.path.join(templates_dir, entry)):
            names.append(stem)
    return sorted(names)
