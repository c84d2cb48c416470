from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from .config import AnalyzerConfig
from .errors import RootNotFoundError
from .ignore import IgnoreMatcher, build_ignore_matcher


logger = logging.getLogger(__name__)


def has_source_extension(filename: str, extensions: Iterable[str]) -> bool:
	return any(filename.endswith(ext) for ext in extensions)


def to_rel_path(root: str, path: str) -> str:
	"""Root-relative path with forward slashes."""
	return os.path.relpath(path, root).replace(os.sep, "/")


def check_root(root: str) -> str:
	root = os.path.abspath(root)
	if not os.path.exists(root):
		raise RootNotFoundError(root, "does not exist")
	if not os.path.isdir(root):
		raise RootNotFoundError(root, "not a directory")
	try:
		with os.scandir(root):
			pass
	except OSError as e:
		raise RootNotFoundError(root, str(e)) from e
	return root


def scan_repository(
	root: str,
	matcher: Optional[IgnoreMatcher] = None,
	config: Optional[AnalyzerConfig] = None,
) -> List[str]:
	"""Absolute paths of every source file under root, depth first.

	Excluded directories are pruned before descent. Subtrees that cannot be
	listed are logged and skipped.
	"""
	config = config or AnalyzerConfig()
	root = check_root(root)
	if matcher is None:
		matcher = build_ignore_matcher(root, config)

	def _on_error(err: OSError) -> None:
		logger.warning("Skipping unreadable directory %s: %s", err.filename, err.strerror or err)

	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_error):
		dirnames[:] = sorted(
			d for d in dirnames
			if not matcher.is_ignored(to_rel_path(root, os.path.join(dirpath, d)), is_dir=True)
		)
		for filename in sorted(filenames):
			if not has_source_extension(filename, config.extensions):
				continue
			path = os.path.join(dirpath, filename)
			if matcher.is_ignored(to_rel_path(root, path)):
				continue
			files.append(path)
	logger.debug("Found %d source files under %s", len(files), root)
	return files
