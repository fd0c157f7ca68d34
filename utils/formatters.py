"""
Formatting utilities for the IP address validator output.
"""
import logging
from colorama import Fore, Style

logger = logging.getLogger(__name__)

GUIDANCE_LINES = (
    "Note: Valid IPv4 format is xxx.xxx.xxx.xxx where each xxx is 0-255",
    "      Examples: 192.168.1.1, 10.0.0.1, 255.255.255.0",
    "      Invalid examples: 256.1.1.1, 192.168.01.1, 192.168.1",
)

def format_result(value, is_valid, use_color=False):
    """
    Formats the validation result line.

    Args:
        value: The address as it was validated
        is_valid: Result of the validation
        use_color: Wrap the verdict in terminal colors

    Returns:
        str: e.g. "Result: '10.0.0.1' is VALID"
    """
    verdict = "VALID" if is_valid else "INVALID"
    if use_color:
        color = Fore.GREEN if is_valid else Fore.RED
        verdict = f"{color}{verdict}{Style.RESET_ALL}"
    return f"Result: '{value}' is {verdict}"

def format_guidance():
    """Returns the format hint shown after an invalid address."""
    return "\n".join(GUIDANCE_LINES)

def format_banner(title):
    """Formats a title with an underline of the same width."""
    return f"{title}\n{'=' * len(title)}"

def format_summary(total, valid):
    """
    Formats the end-of-session tally.

    Args:
        total: Number of addresses checked
        valid: How many of them were valid

    Returns:
        str: Summary line
    """
    if total == 0:
        return "No addresses were checked."
    noun = "address" if total == 1 else "addresses"
    return f"Checked {total} {noun}: {valid} valid, {total - valid} invalid."
