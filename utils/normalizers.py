"""
Normalization utilities for user-supplied address input.
"""
import logging

logger = logging.getLogger(__name__)

def normalize_input(value):
    """
    Cleans up a raw input line before it is handed to the validator.

    Args:
        value: The line as read, possibly None and possibly ending in a newline

    Returns:
        str: The value without surrounding whitespace
    """
    if value is None:
        return ""

    normalized = value.strip()
    if normalized != value.rstrip("\r\n"):
        logger.debug(f"Stripped surrounding whitespace from {value!r}")

    return normalized
