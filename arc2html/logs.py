#!/usr/bin/env python3
"""Colored terminal logging."""

import logging

PACKAGE_LOGGER = "arc2html"
HANDLER_MARKER = "_arc2html_console"


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    @staticmethod
    def background(color: str) -> str:
        """Convert foreground color to background color."""
        return color.replace("[3", "[4", 1)


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
            logging.CRITICAL: f"{time_format} {Colors.BOLD}{Colors.background(Colors.RED)}CRIT{Colors.RESET} %(message)s",
        }

    def format(self, record: logging.LogRecord) -> str:
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt="%H:%M")
        return formatter.format(record)


def setup_logging(verbose: bool = False, silent: bool = False) -> logging.Logger:
    """
    Configure the arc2html package logger with colored console output.

    Calling it again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, HANDLER_MARKER, False):
            logger.removeHandler(handler)

    if silent:
        logger.setLevel(logging.CRITICAL + 1)
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter())
    setattr(handler, HANDLER_MARKER, True)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
