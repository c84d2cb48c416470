from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional

import uvicorn

from codedoc.config import AnalyzerConfig
from codedoc.document import load_document, write_document
from codedoc.errors import CodedocError
from codedoc.graph import build_graph
from codedoc.logging_config import get_logger, setup_logging
from codedoc.pipeline import analyze_code


logger = get_logger("cli")


def config_from_args(args: argparse.Namespace) -> AnalyzerConfig:
	config = AnalyzerConfig().with_overrides(
		extensions=args.ext or None,
		extra_ignore=args.ignore or None,
		alias_prefix=args.alias_prefix,
		alias_target=args.alias_target,
	)
	if args.no_gitignore:
		config = config.with_overrides(respect_ignore_file=False)
	return config


def cmd_analyze(args: argparse.Namespace) -> None:
	root = os.path.abspath(args.path)
	config = config_from_args(args)
	structure = analyze_code(root, config)
	output = args.output or os.path.join(root, config.document_name)
	write_document(structure, output)
	logger.info("Code analysis written to %s", output)


def cmd_graph(args: argparse.Namespace) -> None:
	root = os.path.abspath(args.path)
	config = config_from_args(args)
	if args.document:
		structure = load_document(args.document)
	else:
		structure = analyze_code(root, config)
	graph = build_graph(structure, config)
	text = json.dumps(graph.model_dump(by_alias=True), indent=2)
	if args.output:
		with open(args.output, "w", encoding="utf-8") as fh:
			fh.write(text)
		logger.info("Graph with %d nodes and %d links written to %s", len(graph.nodes), len(graph.links), args.output)
	else:
		print(text)


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def _add_analysis_options(p: argparse.ArgumentParser) -> None:
	p.add_argument("path", help="Path to project root")
	p.add_argument("--output", "-o", help="Output file")
	p.add_argument("--ext", action="append", help="Source extension to include (repeatable)")
	p.add_argument("--ignore", action="append", help="Extra ignore rule (repeatable)")
	p.add_argument("--no-gitignore", action="store_true", help="Do not read the root .gitignore")
	p.add_argument("--alias-prefix", help="Import alias prefix (default: @/)")
	p.add_argument("--alias-target", help="Directory the alias maps to (default: src/)")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="codedoc")
	parser.add_argument("-v", "--verbose", action="store_true")
	parser.add_argument("-q", "--quiet", action="store_true")
	parser.add_argument("--log-file")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze a project and write the YAML document")
	_add_analysis_options(pa)
	pa.set_defaults(func=cmd_analyze)

	pg = sub.add_parser("graph", help="Build the dependency graph JSON")
	_add_analysis_options(pg)
	pg.add_argument("--document", help="Reuse a previously written YAML document")
	pg.set_defaults(func=cmd_graph)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default="127.0.0.1")
	ps.add_argument("--port", type=int, default=8000)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	setup_logging(verbose=args.verbose, quiet=args.quiet, log_file=args.log_file)
	try:
		args.func(args)
	except CodedocError as e:
		logger.error("%s", e)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
