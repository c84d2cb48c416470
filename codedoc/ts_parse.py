from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from .config import AnalyzerConfig
from .errors import FileParseError
from .jsdoc import comment_lines, is_doc_comment, parse_doc_comment
from .model import FileInfo, FunctionInfo


logger = logging.getLogger(__name__)

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())
TSX = Language(tree_sitter_typescript.language_tsx())

# .js/.jsx go through the TSX grammar, which accepts plain JavaScript and JSX.
GRAMMAR_BY_EXTENSION = {
	".ts": TYPESCRIPT,
	".mts": TYPESCRIPT,
	".cts": TYPESCRIPT,
}

FUNCTION_NODES = {
	"function_declaration",
	"generator_function_declaration",
	"function_expression",
	"function",
	"generator_function",
	"arrow_function",
}
CLASS_NODES = {"class_declaration", "abstract_class_declaration", "class"}
VARIABLE_NODES = {"lexical_declaration", "variable_declaration"}


@dataclass
class FunctionSite:
	"""A function-like node plus what is needed to name and document it.

	kind is one of "declaration", "variable" or "method". The node's own name
	wins over fallback_name; anchor is the statement a doc comment sits on.
	"""

	kind: str
	node: Node
	anchor: Node
	fallback_name: str = ""


def _text(node: Optional[Node]) -> str:
	if node is None or node.text is None:
		return ""
	return node.text.decode("utf-8", errors="replace")


def _string_value(node: Optional[Node]) -> str:
	raw = _text(node)
	if len(raw) >= 2 and raw[0] in "'\"`" and raw[-1] == raw[0]:
		return raw[1:-1]
	return raw


def parser_for(path: str) -> Parser:
	_, ext = os.path.splitext(path)
	return Parser(GRAMMAR_BY_EXTENSION.get(ext.lower(), TSX))


def _unwrap_export(node: Node) -> Node:
	if node.type != "export_statement":
		return node
	inner = node.child_by_field_name("declaration") or node.child_by_field_name("value")
	return inner if inner is not None else node


def get_file_description(program: Node, directive_markers: List[str]) -> Optional[str]:
	"""Cleaned text of the comments in front of the first top-level statement.

	A `"use client";` style directive counts as that statement.
	"""
	comments: List[Node] = []
	for child in program.named_children:
		if child.type == "comment":
			comments.append(child)
		elif child.type == "hash_bang_line":
			continue
		else:
			break
	else:
		# Only comments, no statement to lead.
		return None

	parts: List[str] = []
	for comment in comments:
		raw = _text(comment)
		if any(marker in raw for marker in directive_markers):
			continue
		cleaned = "\n".join(line for line in comment_lines(raw) if line)
		if cleaned:
			parts.append(cleaned)
	return "\n".join(parts) if parts else None


def _import_source(node: Node) -> Optional[str]:
	source = node.child_by_field_name("source")
	if source is None:
		for child in node.named_children:
			if child.type == "import_require_clause":
				source = child.child_by_field_name("source")
				if source is None:
					source = next((c for c in child.named_children if c.type == "string"), None)
				break
	if source is None:
		return None
	return _string_value(source)


def is_internal_specifier(specifier: str, alias_prefix: str) -> bool:
	return specifier.startswith((".", "/")) or bool(alias_prefix and specifier.startswith(alias_prefix))


def classify_imports(program: Node, alias_prefix: str) -> Tuple[List[str], List[str]]:
	external: List[str] = []
	internal: List[str] = []
	for child in program.named_children:
		if child.type != "import_statement":
			continue
		specifier = _import_source(child)
		if not specifier:
			continue
		if is_internal_specifier(specifier, alias_prefix):
			internal.append(specifier)
		else:
			external.append(specifier)
	return external, internal


def iter_function_sites(program: Node) -> Iterator[FunctionSite]:
	for statement in program.named_children:
		node = _unwrap_export(statement)
		if node.type in FUNCTION_NODES:
			yield FunctionSite("declaration", node, statement)
		elif node.type in VARIABLE_NODES:
			for declarator in node.named_children:
				if declarator.type != "variable_declarator":
					continue
				value = declarator.child_by_field_name("value")
				if value is None or value.type not in FUNCTION_NODES:
					continue
				name = declarator.child_by_field_name("name")
				fallback = _text(name) if name is not None and name.type == "identifier" else ""
				yield FunctionSite("variable", value, statement, fallback)
		elif node.type in CLASS_NODES:
			class_name = _text(node.child_by_field_name("name"))
			body = node.child_by_field_name("body")
			if body is None:
				continue
			for member in body.named_children:
				if member.type != "method_definition":
					continue
				method_name = _text(member.child_by_field_name("name"))
				if not method_name:
					continue
				full_name = f"{class_name}.{method_name}" if class_name else method_name
				yield FunctionSite("method", member, member, full_name)


def _doc_comment_for(anchor: Node) -> Optional[str]:
	prev = anchor.prev_named_sibling
	if prev is None or prev.type != "comment":
		return None
	raw = _text(prev)
	return raw if is_doc_comment(raw) else None


def function_info(site: FunctionSite) -> Optional[FunctionInfo]:
	"""Common FunctionInfo for any site; None when the function is anonymous."""
	own_name = "" if site.kind == "method" else _text(site.node.child_by_field_name("name"))
	name = own_name or site.fallback_name
	if not name:
		return None

	info = FunctionInfo(name=name)
	raw_doc = _doc_comment_for(site.anchor)
	if raw_doc is not None:
		doc = parse_doc_comment(raw_doc)
		info.description = doc.description
		info.params = doc.params
		info.returns = doc.returns
	return info


def collect_functions(program: Node) -> List[FunctionInfo]:
	functions: List[FunctionInfo] = []
	for site in iter_function_sites(program):
		info = function_info(site)
		if info is not None:
			functions.append(info)
	return functions


def parse_source_file(
	path: str,
	rel_path: str,
	text: Optional[str] = None,
	config: Optional[AnalyzerConfig] = None,
) -> FileInfo:
	config = config or AnalyzerConfig()
	if text is None:
		try:
			with open(path, "r", encoding="utf-8") as fh:
				text = fh.read()
		except (OSError, UnicodeDecodeError) as e:
			raise FileParseError(rel_path, str(e)) from e

	try:
		tree = parser_for(path).parse(text.encode("utf-8"))
	except (ValueError, RuntimeError) as e:
		raise FileParseError(rel_path, str(e)) from e
	program = tree.root_node
	if program.has_error:
		logger.warning("Syntax errors in %s; extracting what parsed", rel_path)

	external, internal = classify_imports(program, config.alias_prefix)
	return FileInfo(
		name=os.path.basename(path),
		path=rel_path,
		file_description=get_file_description(program, config.directive_markers),
		external_imports=external,
		internal_imports=internal,
		functions=collect_functions(program),
	)
