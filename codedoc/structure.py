from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

from .model import DirectoryNode, FileInfo, ProjectStructure, RootNode


def split_path(rel_path: str) -> List[str]:
	return [p for p in rel_path.replace("\\", "/").split("/") if p and p != "."]


def add_file(node: Union[RootNode, DirectoryNode], parts: Sequence[str], info: FileInfo) -> None:
	"""Place info under node, creating intermediate directories on demand."""
	for dir_name in parts[:-1]:
		child = node.directories.get(dir_name)
		if child is None:
			child = DirectoryNode(name=dir_name)
			node.directories[dir_name] = child
		node = child
	node.files.append(info)


def prune(node: Union[RootNode, DirectoryNode]) -> None:
	"""Drop every directory that is empty once its own children are pruned."""
	for name in list(node.directories):
		child = node.directories[name]
		prune(child)
		if child.is_empty():
			del node.directories[name]


def build_structure(root: str, entries: Iterable[Tuple[str, FileInfo]]) -> ProjectStructure:
	tree = RootNode(path=root)
	for rel_path, info in entries:
		parts = split_path(rel_path)
		if parts:
			add_file(tree, parts, info)
	prune(tree)
	return ProjectStructure(root=tree)
