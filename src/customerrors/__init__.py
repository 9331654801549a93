from __future__ import annotations

"""
customerrors: build typed exception hierarchies at runtime, one class at a
time with ``create`` or many at once with a declarative ``Block``.
"""

import logging

from .config import CustomErrorsSettings, configure_logging, settings
from .core import Block, TypeDescriptor, create
from .exceptions import AbstractError, CircularReference, ErrorNotFound

__version__ = "0.1.5"

__all__ = [
    # Factory
    "create",
    "TypeDescriptor",

    # Registry
    "Block",

    # Built-in errors
    "AbstractError",
    "ErrorNotFound",
    "CircularReference",

    # Configuration
    "CustomErrorsSettings",
    "configure_logging",
    "settings",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
configure_logging(settings)
