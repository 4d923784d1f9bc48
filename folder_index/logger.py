#!/usr/bin/env python3
"""Terminal colors and logging setup."""

import logging


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


class CustomFormatter(logging.Formatter):
    """Custom formatter for colored logging output."""

    def __init__(self):
        super().__init__()
        time_format = f"{Colors.GREY}%(asctime)s{Colors.RESET}"
        self.FORMATS = {
            logging.DEBUG: f"{time_format} {Colors.BOLD}{Colors.CYAN}DEBG{Colors.RESET} %(message)s",
            logging.INFO: f"{time_format} {Colors.BOLD}{Colors.GREEN}INFO{Colors.RESET} %(message)s",
            logging.WARNING: f"{time_format} {Colors.BOLD}{Colors.YELLOW}WARN{Colors.RESET} %(message)s",
            logging.ERROR: f"{time_format} {Colors.BOLD}{Colors.RED}ERRR{Colors.RESET} %(message)s",
            logging.CRITICAL: f"{time_format} {Colors.BOLD}{Colors.RED}CRIT{Colors.RESET} %(message)s",
        }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt="%H:%M")
        return formatter.format(record)


def setup_logging(verbose: bool = False, silent: bool = False):
    """Configure logging with custom formatting."""
    if silent:
        logging.disable(logging.CRITICAL)
        return
    logging.disable(logging.NOTSET)

    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter())

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)
