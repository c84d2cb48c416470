"""YAML project document: the serialized form of a ProjectStructure.

Empty optional fields never appear in the document; loading accepts the
same camelCase keys back.
"""

from __future__ import annotations

import os
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from .errors import DocumentError
from .model import ProjectStructure


def to_document(structure: ProjectStructure) -> Dict[str, Any]:
	return structure.model_dump(by_alias=True)


def dump_document(structure: ProjectStructure) -> str:
	return yaml.safe_dump(to_document(structure), indent=2, sort_keys=False, allow_unicode=True)


def write_document(structure: ProjectStructure, output_path: str) -> str:
	with open(output_path, "w", encoding="utf-8") as fh:
		fh.write(dump_document(structure))
	return output_path


def load_document(path: str) -> ProjectStructure:
	if not os.path.isfile(path):
		raise DocumentError("Project document not found", path)
	try:
		with open(path, "r", encoding="utf-8") as fh:
			data = yaml.safe_load(fh)
		return ProjectStructure.model_validate(data)
	except (OSError, yaml.YAMLError, ValidationError) as e:
		raise DocumentError("Malformed project document", path, str(e)) from e
