from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, field_validator


DEFAULT_EXTENSIONS: List[str] = [".ts", ".tsx", ".js", ".jsx"]

# Dependency installs, build output and VCS metadata are never analyzed.
ALWAYS_IGNORE: List[str] = ["node_modules", "dist", "out", "build", ".git"]


class AnalyzerConfig(BaseModel):
	extensions: List[str] = list(DEFAULT_EXTENSIONS)
	always_ignore: List[str] = list(ALWAYS_IGNORE)
	extra_ignore: List[str] = []
	ignore_file: str = ".gitignore"
	respect_ignore_file: bool = True
	alias_prefix: str = "@/"
	alias_target: str = "src/"
	directive_markers: List[str] = ["use client", "use server"]
	document_name: str = "code-document.yaml"

	@field_validator("extensions")
	@classmethod
	def _dotted(cls, value: List[str]) -> List[str]:
		return [ext if ext.startswith(".") else f".{ext}" for ext in value]

	def with_overrides(self, **overrides: Any) -> AnalyzerConfig:
		"""Return a copy with every non-None override applied."""
		data = self.model_dump()
		data.update({k: v for k, v in overrides.items() if v is not None})
		return AnalyzerConfig(**data)
