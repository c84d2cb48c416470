from __future__ import annotations

from typing import Optional


class CodedocError(Exception):
	"""Base for errors the analysis surfaces to its caller.

	Every error is about one filesystem location; str() reads
	``<message>: <path> (<reason>)``.
	"""

	def __init__(self, message: str, path: Optional[str] = None, reason: Optional[str] = None):
		self.message = message
		self.path = path
		self.reason = reason
		super().__init__(message)

	def __str__(self) -> str:
		text = self.message
		if self.path:
			text = f"{text}: {self.path}"
		if self.reason:
			text = f"{text} ({self.reason})"
		return text


class RootNotFoundError(CodedocError):
	"""The analysis root is missing, not a directory, or unreadable."""

	def __init__(self, root: str, reason: str):
		super().__init__("Cannot analyze root directory", root, reason)


class FileParseError(CodedocError):
	"""A single source file could not be read or parsed."""

	def __init__(self, path: str, reason: str):
		super().__init__("Cannot parse source file", path, reason)


class DocumentError(CodedocError):
	"""A serialized project document is missing or malformed."""
