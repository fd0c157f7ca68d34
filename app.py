"""
IP Address Validator - Main Application Class
"""
import sys
import logging
from colorama import Fore, Style

from config.settings import DEFAULT_SETTINGS
from utils.formatters import format_banner, format_guidance, format_result, format_summary
from utils.normalizers import normalize_input
from utils.validators import validate_ip

logger = logging.getLogger(__name__)

TITLE = "IP Address Validator"
ADDRESS_PROMPT = "Enter an IP address to validate: "
CONTINUE_PROMPT = "\nDo you want to validate another IP address? (y/n): "
READ_ERROR = "Error reading input."
GOODBYE = "Thank you for using the IP Address Validator!"

CONTINUE_ANSWERS = ("y", "Y")

class IPValidatorApp:
    """Interactive loop that reads addresses and reports whether they are valid."""

    def __init__(self, settings=None, input_stream=None, output_stream=None):
        self.settings = dict(DEFAULT_SETTINGS)
        if settings:
            self.settings.update(settings)
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.checked_count = 0
        self.valid_count = 0

    def _write(self, text="", end="\n"):
        print(text, end=end, file=self.output_stream, flush=True)

    def _read_line(self, prompt):
        """Prints a prompt and reads one line, or None at end of input."""
        self._write(prompt, end="")
        line = self.input_stream.readline()
        if line == "":
            return None
        return line

    def check(self, value):
        """
        Validates a single raw input line and records it in the session tally.

        Args:
            value: The line as read from the user

        Returns:
            bool: True if the address is valid
        """
        address = normalize_input(value)
        is_valid = validate_ip(address)

        self.checked_count += 1
        if is_valid:
            self.valid_count += 1

        logger.info(f"Checked {address!r}: {'valid' if is_valid else 'invalid'}")
        return is_valid

    def _wants_another(self):
        answer = self._read_line(CONTINUE_PROMPT)
        if answer is None:
            logger.info("End of input at continue prompt")
            return False
        answer = answer.strip()
        return bool(answer) and answer[0] in CONTINUE_ANSWERS

    def run(self):
        """
        Runs the prompt loop until the user declines to continue.

        Returns:
            int: Number of addresses checked during the session
        """
        use_color = self.settings.get("use_color", False)
        logger.info(f"{Fore.GREEN}IP Address Validator started{Style.RESET_ALL}")

        self._write(format_banner(TITLE))
        self._write()

        while True:
            line = self._read_line(ADDRESS_PROMPT)
            if line is None:
                # Terminate the unanswered prompt line
                self._write()
                self._write(READ_ERROR)
                logger.warning("End of input while reading an address")
            else:
                address = normalize_input(line)
                is_valid = self.check(line)
                self._write(format_result(address, is_valid, use_color=use_color))
                if not is_valid and self.settings.get("show_guidance", True):
                    self._write(format_guidance())

            keep_going = self._wants_another()
            self._write()
            if not keep_going:
                break

        self._write(format_summary(self.checked_count, self.valid_count))
        self._write(GOODBYE)
        logger.info(f"Session finished: {self.checked_count} checked, {self.valid_count} valid")
        return self.checked_count
