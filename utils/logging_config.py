"""
Logging configuration for the IP address validator.
With automatic log rotation to control file size.
"""
import logging
from logging.handlers import RotatingFileHandler
from colorama import init

def setup_logging(log_level=logging.INFO, log_file="ip_validator.log", max_size_mb=1, backup_count=3,
                  console_level=logging.WARNING):
    """
    Configure logging for the application with log rotation.

    Args:
        log_level: The logging level for the log file (default: INFO)
        log_file: The log file name (default: "ip_validator.log")
        max_size_mb: Maximum size of the log file in megabytes before rotation (default: 1)
        backup_count: Number of backup files to keep (default: 3)
        console_level: The logging level for the console (default: WARNING)
    """
    # Initialize colorama for colored terminal output
    init()

    # Calculate max bytes (convert MB to bytes)
    max_bytes = max_size_mb * 1024 * 1024

    file_handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)

    # Keep the console quiet so log records don't interleave with prompts
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)

    logging.basicConfig(
        level=min(log_level, console_level),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[file_handler, console_handler],
        force=True
    )

    return logging.getLogger(__name__)
