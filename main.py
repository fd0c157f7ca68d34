#!/usr/bin/env python3
"""
IP Address Validator - Main Entry Point
"""
import sys
import signal
import logging
from colorama import Fore, Style

from app import IPValidatorApp
from config.settings import get_log_level, load_settings
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

def signal_handler(sig, frame):
    """Handle interrupt signals for graceful shutdown."""
    print(f"\n{Fore.YELLOW}Received signal {sig}, shutting down gracefully...{Style.RESET_ALL}")
    logger.info(f"Received signal {sig}, exiting")
    sys.exit(0)

def main():
    """Run the interactive validator. Always returns 0."""
    settings = load_settings()

    # Set up logging
    setup_logging(
        log_level=get_log_level(settings),
        log_file=settings["log_file"],
        max_size_mb=settings["max_log_size_mb"],
        backup_count=settings["log_backup_count"]
    )

    # Register signal handlers
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    app = IPValidatorApp(settings)

    try:
        app.run()
    except KeyboardInterrupt:
        # This is handled by the signal handler
        pass
    except Exception as e:
        logger.error(f"{Fore.RED}Unhandled exception: {e}{Style.RESET_ALL}")
        logger.exception("Stack trace:")

    return 0

if __name__ == "__main__":
    sys.exit(main())
