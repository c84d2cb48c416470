"""Gitignore-style exclusion rules.

Rules are matched segment by segment with ``fnmatch`` so that ``*`` never
crosses a ``/``. A rule without an inner slash matches at any depth; a rule
with one is anchored at the root. ``**`` spans any number of segments. The
last matching rule wins, so ``!rule`` re-includes what an earlier rule
excluded. A path is excluded when it or any of its parent directories is.
"""

from __future__ import annotations

import fnmatch
import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from .config import AnalyzerConfig


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IgnoreRule:
	pattern: str
	segments: tuple
	negated: bool = False
	anchored: bool = False
	dir_only: bool = False

	@classmethod
	def parse(cls, line: str) -> Optional[IgnoreRule]:
		text = line.rstrip("\n").rstrip()
		if not text or text.startswith("#"):
			return None
		negated = text.startswith("!")
		if negated:
			text = text[1:]
		elif text.startswith("\\"):
			text = text[1:]
		dir_only = text.endswith("/")
		text = text.rstrip("/")
		anchored = "/" in text
		text = text.lstrip("/")
		if not text:
			return None
		return cls(
			pattern=line.strip(),
			segments=tuple(s for s in text.split("/") if s),
			negated=negated,
			anchored=anchored,
			dir_only=dir_only,
		)

	def matches(self, parts: Sequence[str], is_dir: bool) -> bool:
		if self.dir_only and not is_dir:
			return False
		if not self.anchored:
			return fnmatch.fnmatchcase(parts[-1], self.segments[0])
		return _match_segments(self.segments, parts)


def _match_segments(pattern: Sequence[str], parts: Sequence[str]) -> bool:
	if not pattern:
		return not parts
	head = pattern[0]
	if head == "**":
		return any(_match_segments(pattern[1:], parts[i:]) for i in range(len(parts) + 1))
	if not parts:
		return False
	return fnmatch.fnmatchcase(parts[0], head) and _match_segments(pattern[1:], parts[1:])


class IgnoreMatcher:
	def __init__(self, rules: Iterable[IgnoreRule] = ()):
		self.rules: List[IgnoreRule] = list(rules)

	def add(self, lines: Iterable[str]) -> IgnoreMatcher:
		for line in lines:
			rule = IgnoreRule.parse(line)
			if rule is not None:
				self.rules.append(rule)
		return self

	def _decide(self, parts: Sequence[str], is_dir: bool) -> bool:
		excluded = False
		for rule in self.rules:
			if rule.negated == excluded and rule.matches(parts, is_dir):
				excluded = not rule.negated
		return excluded

	def is_ignored(self, rel_path: str, is_dir: bool = False) -> bool:
		"""Return True if the root-relative, forward-slash path is excluded."""
		parts = [p for p in rel_path.replace("\\", "/").split("/") if p and p != "."]
		if not parts:
			return False
		for depth in range(1, len(parts)):
			if self._decide(parts[:depth], True):
				return True
		return self._decide(parts, is_dir)


def load_ignore_file(root: str, filename: str = ".gitignore") -> List[str]:
	path = os.path.join(root, filename)
	if not os.path.isfile(path):
		return []
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return fh.read().splitlines()
	except (OSError, UnicodeDecodeError) as e:
		logger.warning("Could not read ignore file %s: %s", path, e)
		return []


def build_ignore_matcher(root: str, config: Optional[AnalyzerConfig] = None) -> IgnoreMatcher:
	config = config or AnalyzerConfig()
	matcher = IgnoreMatcher().add(config.always_ignore)
	if config.respect_ignore_file:
		matcher.add(load_ignore_file(root, config.ignore_file))
	matcher.add(config.extra_ignore)
	logger.debug("Loaded %d ignore rules for %s", len(matcher.rules), root)
	return matcher
