"""Analyzer package describing TypeScript/JavaScript source trees.

Modules:
- ignore.py: Gitignore-style exclusion rules.
- fs_scan.py: Filtered source file discovery.
- ts_parse.py: Tree-sitter parsing to extract descriptions, imports and functions.
- jsdoc.py: Documentation comment and tag parsing.
- structure.py: Folding analyzed files into a directory tree.
- graph.py: Nodes and hierarchy/dependency links for visualization.
- model.py: Data structures for files, directories and graphs.
- pipeline.py: End-to-end analysis entry points.
- document.py: YAML project document dump and load.
"""

__all__ = [
	"ignore",
	"fs_scan",
	"ts_parse",
	"jsdoc",
	"structure",
	"graph",
	"model",
	"pipeline",
	"document",
]
