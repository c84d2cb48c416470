from __future__ import annotations

import os
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, model_serializer
from pydantic.alias_generators import to_camel


class Record(BaseModel):
	"""Base for every emitted record.

	Fields are always present in memory. Empty values (None, empty list,
	empty mapping) are dropped when the record is serialized.
	"""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	@model_serializer(mode="wrap")
	def serialize_record(self, handler: Any) -> Dict[str, Any]:
		data = handler(self)
		return {k: v for k, v in data.items() if v is not None and v != [] and v != {}}


class ParamInfo(Record):
	name: str
	type: Optional[str] = None
	description: Optional[str] = None


class ReturnInfo(Record):
	type: Optional[str] = None
	description: Optional[str] = None


class FunctionInfo(Record):
	name: str
	description: Optional[str] = None
	params: List[ParamInfo] = []
	returns: Optional[ReturnInfo] = None


class FileInfo(Record):
	name: str
	path: str
	file_description: Optional[str] = None
	external_imports: List[str] = []
	internal_imports: List[str] = []
	functions: List[FunctionInfo] = []


class DirectoryNode(Record):
	name: str
	files: List[FileInfo] = []
	directories: Dict[str, DirectoryNode] = {}

	def is_empty(self) -> bool:
		return not self.files and not self.directories


class RootNode(Record):
	path: str
	files: List[FileInfo] = []
	directories: Dict[str, DirectoryNode] = {}

	@property
	def name(self) -> str:
		return os.path.basename(os.path.normpath(self.path)) or self.path


class ProjectStructure(Record):
	root: RootNode

	def iter_files(self) -> List[FileInfo]:
		found: List[FileInfo] = []
		stack: List[Union[RootNode, DirectoryNode]] = [self.root]
		while stack:
			node = stack.pop()
			found.extend(node.files)
			stack.extend(reversed(list(node.directories.values())))
		return found


class GraphNode(Record):
	id: int
	name: str
	is_directory: bool
	depth: int
	description: Optional[str] = None
	functions: Optional[int] = None


class GraphLink(Record):
	source: int
	target: Union[int, str]
	type: Literal["hierarchy", "dependency"]
	is_resolved: Optional[bool] = None


class GraphData(BaseModel):
	nodes: List[GraphNode] = []
	links: List[GraphLink] = []
