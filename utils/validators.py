"""
Validation utilities for IPv4 addresses in dotted-decimal notation.
"""
import logging

logger = logging.getLogger(__name__)

# "0.0.0.0" is the shortest valid address, "255.255.255.255" the longest
MIN_IP_LENGTH = 7
MAX_IP_LENGTH = 15

OCTET_COUNT = 4
MAX_OCTET_DIGITS = 3
MAX_OCTET_VALUE = 255

SEPARATOR = "."
DIGITS = frozenset("0123456789")

def validate_octet(octet):
    """
    Validate a single dotted-decimal component.

    Args:
        octet: The text between two separators

    Returns:
        bool: True if the octet is a decimal number in 0-255 without leading zeros
    """
    if not isinstance(octet, str) or not octet:
        return False

    if not all(char in DIGITS for char in octet):
        return False

    # "0" is fine, "00" and "01" are not
    if len(octet) > 1 and octet[0] == "0":
        return False

    if len(octet) > MAX_OCTET_DIGITS:
        return False

    return int(octet) <= MAX_OCTET_VALUE

def validate_ip(ip):
    """
    Validate if a string is a proper IPv4 address.

    The value is checked as given; surrounding whitespace makes it invalid.

    Args:
        ip: The IP address to validate

    Returns:
        bool: True if the IP is valid, False otherwise
    """
    if not isinstance(ip, str):
        logger.debug(f"Rejected non-string value of type {type(ip).__name__}")
        return False

    # Quick length check first
    if len(ip) < MIN_IP_LENGTH or len(ip) > MAX_IP_LENGTH:
        logger.debug(f"Rejected {ip!r}: length {len(ip)} outside {MIN_IP_LENGTH}-{MAX_IP_LENGTH}")
        return False

    # Only digits and dots are allowed
    for char in ip:
        if char != SEPARATOR and char not in DIGITS:
            logger.debug(f"Rejected {ip!r}: invalid character {char!r}")
            return False

    if ip.count(SEPARATOR) != OCTET_COUNT - 1:
        logger.debug(f"Rejected {ip!r}: expected {OCTET_COUNT - 1} separators")
        return False

    octets = ip.split(SEPARATOR)
    if len(octets) != OCTET_COUNT or not all(octets):
        logger.debug(f"Rejected {ip!r}: empty octet")
        return False

    # Check each octet
    for octet in octets:
        if not validate_octet(octet):
            logger.debug(f"Rejected {ip!r}: invalid octet {octet!r}")
            return False

    return True
