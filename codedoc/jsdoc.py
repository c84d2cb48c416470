"""Best-effort parsing of ``/** ... */`` documentation comments.

Only the free-text description, ``@param`` and ``@returns`` tags are read.
A tag that does not fit the expected shape degrades to whatever could be
recovered instead of failing the whole comment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .model import ParamInfo, ReturnInfo


PARAM_TAGS = ("param", "arg", "argument")
RETURN_TAGS = ("returns", "return")

# @param {string} name - description
PARAM_RE = re.compile(r"@(?:param|arg|argument)\s+(?:\{([^}]+)\})?\s*\[?([\w$.]+)(?:=[^\]]*)?\]?(?:\s*-\s*(.+))?")
# @returns {string} description
RETURN_RE = re.compile(r"@returns?\s+(?:\{([^}]+)\})?\s*(?:-\s*)?(.*)")
TAG_NAME_RE = re.compile(r"@(\w+)")


@dataclass
class DocComment:
	description: Optional[str] = None
	params: List[ParamInfo] = field(default_factory=list)
	returns: Optional[ReturnInfo] = None


def is_doc_comment(text: str) -> bool:
	return text.startswith("/**") and not text.startswith("/**/")


def comment_lines(text: str) -> List[str]:
	"""Comment body split into lines with delimiters and leading ``*`` removed."""
	body = text.strip()
	if body.startswith("//"):
		body = body[2:]
	else:
		body = re.sub(r"^/\*+", "", body)
		body = re.sub(r"\*+/$", "", body)
	lines = []
	for line in body.splitlines():
		line = line.strip()
		line = re.sub(r"^\*+", "", line).strip()
		lines.append(line)
	return lines


def _split_tags(lines: List[str]) -> Tuple[List[str], List[str]]:
	description: List[str] = []
	tags: List[str] = []
	for line in lines:
		if line.startswith("@"):
			tags.append(line)
		elif tags:
			if line:
				tags[-1] = f"{tags[-1]} {line}"
		else:
			description.append(line)
	return description, tags


def _tag_comment(text: str, match: Optional[re.Match]) -> str:
	if match is not None:
		rest = text[match.end():]
	else:
		rest = TAG_NAME_RE.sub("", text, count=1)
	return rest.strip().lstrip("-").strip()


def parse_param_tag(text: str) -> Optional[ParamInfo]:
	m = PARAM_RE.match(text)
	if not m:
		return None
	param_type, name, desc = m.groups()
	if desc is None:
		head = re.match(r"@\w+\s+(?:\{[^}]+\})?\s*\[?[\w$.]+(?:=[^\]]*)?\]?", text)
		desc = _tag_comment(text, head) or None
	return ParamInfo(name=name, type=param_type or None, description=(desc or "").strip() or None)


def parse_return_tag(text: str) -> Optional[ReturnInfo]:
	m = RETURN_RE.match(text)
	if m:
		return_type, desc = m.groups()
		desc = (desc or "").strip()
		if return_type or desc:
			return ReturnInfo(type=return_type or None, description=desc or None)
		return None
	comment = _tag_comment(text, None)
	if comment:
		return ReturnInfo(description=comment)
	return None


def parse_doc_comment(text: str) -> DocComment:
	description, tags = _split_tags(comment_lines(text))
	doc = DocComment(description="\n".join(description).strip() or None)
	for tag in tags:
		m = TAG_NAME_RE.match(tag)
		tag_name = m.group(1) if m else ""
		if tag_name in PARAM_TAGS:
			param = parse_param_tag(tag)
			if param is not None:
				doc.params.append(param)
		elif tag_name in RETURN_TAGS:
			returns = parse_return_tag(tag)
			if returns is not None:
				doc.returns = returns
	return doc
