"""Turn a project tree into ``{nodes, links}`` for visualization.

Nodes are numbered in pre-order (directories before files at each level, the
root is 0). Internal imports are resolved in two passes: while visiting, each
specifier is turned into a best-guess root-relative path by probing known
nodes and the disk; once every node is known, guesses that name a node become
resolved links and the rest are dropped.
"""

from __future__ import annotations

import logging
import os
import posixpath
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Union

from .config import AnalyzerConfig
from .model import DirectoryNode, FileInfo, GraphData, GraphLink, GraphNode, ProjectStructure, RootNode


logger = logging.getLogger(__name__)


@dataclass
class GraphState:
	root_path: str
	config: AnalyzerConfig
	nodes: List[GraphNode] = field(default_factory=list)
	links: List[GraphLink] = field(default_factory=list)
	path_ids: Dict[str, int] = field(default_factory=dict)

	def add_node(self, node_path: str, **fields) -> int:
		node_id = len(self.nodes)
		self.nodes.append(GraphNode(id=node_id, **fields))
		if node_path:
			self.path_ids[node_path] = node_id
		return node_id

	def exists(self, rel_path: str) -> bool:
		return rel_path in self.path_ids or os.path.isfile(os.path.join(self.root_path, rel_path))


def import_base_path(importer: str, specifier: str, config: AnalyzerConfig) -> Optional[str]:
	"""Root-relative path an internal specifier points at, before extension probing."""
	if specifier.startswith("."):
		joined = posixpath.join(posixpath.dirname(importer), specifier)
	elif config.alias_prefix and specifier.startswith(config.alias_prefix):
		joined = config.alias_target + specifier[len(config.alias_prefix):]
	elif specifier.startswith("/"):
		joined = specifier.lstrip("/")
	else:
		return None
	if not joined:
		return None
	return posixpath.normpath(joined)


def candidate_paths(base: str, extensions: Sequence[str]) -> List[str]:
	candidates: List[str] = []
	if posixpath.splitext(base)[1] in extensions:
		candidates.append(base)
	candidates.extend(base + ext for ext in extensions)
	candidates.extend(posixpath.join(base, "index" + ext) for ext in extensions)
	return candidates


def guess_target(state: GraphState, importer: str, specifier: str) -> Optional[str]:
	base = import_base_path(importer, specifier, state.config)
	if base is None:
		return None
	for candidate in candidate_paths(base, state.config.extensions):
		if state.exists(candidate):
			return candidate
	return base


def _visit_file(state: GraphState, info: FileInfo, parent_id: int, depth: int) -> None:
	file_path = info.path.replace(os.sep, "/")
	node_id = state.add_node(
		file_path,
		name=info.name,
		is_directory=False,
		depth=depth,
		description=info.file_description,
		functions=len(info.functions) or None,
	)
	state.links.append(GraphLink(source=parent_id, target=node_id, type="hierarchy"))

	for specifier in info.internal_imports:
		target = guess_target(state, file_path, specifier)
		if target is None:
			continue
		known = state.path_ids.get(target)
		if known is not None:
			state.links.append(GraphLink(source=node_id, target=known, type="dependency", is_resolved=True))
		else:
			state.links.append(GraphLink(source=node_id, target=target, type="dependency", is_resolved=False))


def _visit_directory(
	state: GraphState,
	node: Union[RootNode, DirectoryNode],
	node_path: str,
	parent_id: Optional[int],
	depth: int,
) -> None:
	node_id = state.add_node(node_path, name=node.name, is_directory=True, depth=depth)
	if parent_id is not None:
		state.links.append(GraphLink(source=parent_id, target=node_id, type="hierarchy"))

	for dir_name, child in node.directories.items():
		child_path = posixpath.join(node_path, dir_name) if node_path else dir_name
		_visit_directory(state, child, child_path, node_id, depth + 1)
	for info in node.files:
		_visit_file(state, info, node_id, depth + 1)


def collect_nodes(structure: ProjectStructure, config: Optional[AnalyzerConfig] = None) -> GraphState:
	"""First pass: number every node and guess dependency targets."""
	state = GraphState(root_path=structure.root.path, config=config or AnalyzerConfig())
	_visit_directory(state, structure.root, "", None, 0)
	return state


def resolve_links(links: Sequence[GraphLink], path_ids: Dict[str, int]) -> List[GraphLink]:
	"""Second pass: resolve pending dependency links once; drop the rest."""
	resolved: List[GraphLink] = []
	for link in links:
		if link.type == "hierarchy" or link.is_resolved:
			resolved.append(link)
			continue
		target_id = path_ids.get(link.target) if isinstance(link.target, str) else None
		if target_id is None:
			logger.debug("Dropping unresolved dependency %s -> %s", link.source, link.target)
			continue
		resolved.append(link.model_copy(update={"target": target_id, "is_resolved": True}))
	return resolved


def build_graph(structure: ProjectStructure, config: Optional[AnalyzerConfig] = None) -> GraphData:
	state = collect_nodes(structure, config)
	links = resolve_links(state.links, state.path_ids)
	return GraphData(nodes=state.nodes, links=links)
