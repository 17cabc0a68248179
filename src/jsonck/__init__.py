"""Validate JSON documents against JSON Schema definitions."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
