"""Logging setup for codedoc.

Engine modules log through ``logging.getLogger(__name__)``, so everything
lands under the ``codedoc`` logger. The CLI calls ``setup_logging`` once per
invocation; only that logger is configured, other libraries keep their own.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "codedoc"
FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _level(verbose: bool, quiet: bool) -> int:
	# Skipped files are warnings, so quiet still shows them.
	if quiet:
		return logging.WARNING
	return logging.DEBUG if verbose else logging.INFO


def setup_logging(
	verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
	logger = logging.getLogger(LOGGER_NAME)
	for handler in list(logger.handlers):
		logger.removeHandler(handler)
		handler.close()

	level = _level(verbose, quiet)
	logger.setLevel(level)
	logger.propagate = False

	# Analysis output may go to stdout (graph JSON), so logs use stderr.
	console = RichHandler(console=Console(stderr=True), show_path=verbose, markup=False)
	console.setFormatter(logging.Formatter("%(message)s"))
	logger.addHandler(console)

	if log_file:
		file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
		file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
		logger.addHandler(file_handler)
	return logger


def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(f"{LOGGER_NAME}.{name}")
