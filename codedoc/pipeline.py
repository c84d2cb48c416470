from __future__ import annotations

import asyncio
import logging
import os
from typing import List, Optional, Tuple

from .config import AnalyzerConfig
from .errors import FileParseError
from .fs_scan import check_root, scan_repository
from .graph import build_graph
from .ignore import build_ignore_matcher
from .model import FileInfo, GraphData, ProjectStructure
from .structure import build_structure
from .ts_parse import parse_source_file


logger = logging.getLogger(__name__)


def analyze_files(root: str, paths: List[str], config: AnalyzerConfig) -> List[Tuple[str, FileInfo]]:
	entries: List[Tuple[str, FileInfo]] = []
	for path in paths:
		rel_path = os.path.relpath(path, root)
		try:
			info = parse_source_file(path, rel_path, config=config)
		except FileParseError as e:
			logger.warning("Skipping %s", e)
			continue
		entries.append((rel_path, info))
	return entries


def analyze_code(root: str, config: Optional[AnalyzerConfig] = None) -> ProjectStructure:
	"""Walk, parse and fold root into a pruned project tree.

	Raises RootNotFoundError when root itself is unusable; everything below
	the root degrades to logged warnings.
	"""
	config = config or AnalyzerConfig()
	root = check_root(root)
	matcher = build_ignore_matcher(root, config)
	paths = scan_repository(root, matcher, config)
	entries = analyze_files(root, paths, config)
	logger.info("Analyzed %d of %d source files under %s", len(entries), len(paths), root)
	return build_structure(root, entries)


async def analyze_code_async(root: str, config: Optional[AnalyzerConfig] = None) -> ProjectStructure:
	return await asyncio.to_thread(analyze_code, root, config)


def analyze_graph(root: str, config: Optional[AnalyzerConfig] = None) -> GraphData:
	config = config or AnalyzerConfig()
	return build_graph(analyze_code(root, config), config)
