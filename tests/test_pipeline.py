import asyncio

import pytest

from codedoc.config import AnalyzerConfig
from codedoc.errors import RootNotFoundError
from codedoc.pipeline import analyze_code, analyze_code_async, analyze_graph


PROJECT = {
	".gitignore": "*.gen.ts\n",
	"src/a.ts": """
		/** Entry point. */
		import { b } from "./b";
		import lodash from "lodash";

		export const run = () => b();
		""",
	"src/b.ts": """
		export function b() {
			return 1;
		}
		""",
	"src/api.gen.ts": "export const x = 1;\n",
	"node_modules/lodash/index.js": "module.exports = {};\n",
	"styles/site.css": "body {}\n",
}


def test_analyze_code_builds_tree(make_tree):
	root = make_tree(PROJECT)
	structure = analyze_code(str(root))
	assert structure.root.path == str(root)
	assert structure.root.files == []
	assert list(structure.root.directories) == ["src"]
	files = {f.name: f for f in structure.root.directories["src"].files}
	assert sorted(files) == ["a.ts", "b.ts"]
	a = files["a.ts"]
	assert a.file_description == "Entry point."
	assert a.internal_imports == ["./b"]
	assert a.external_imports == ["lodash"]
	assert [f.name for f in a.functions] == ["run"]


def test_every_file_passed_the_filters(make_tree):
	root = make_tree(PROJECT)
	names = [f.path.replace("\\", "/") for f in analyze_code(str(root)).iter_files()]
	assert sorted(names) == ["src/a.ts", "src/b.ts"]


def test_analyze_graph(make_tree):
	root = make_tree(PROJECT)
	graph = analyze_graph(str(root))
	ids = {n.name: n.id for n in graph.nodes}
	deps = [(l.source, l.target) for l in graph.links if l.type == "dependency"]
	assert deps == [(ids["a.ts"], ids["b.ts"])]
	assert graph.nodes[0].id == 0 and graph.nodes[0].is_directory


def test_unparseable_file_is_skipped(make_tree):
	root = make_tree({"ok.ts": "export const a = 1;\n"})
	(root / "bad.ts").write_bytes(b"\xff\xfe\xfa")
	structure = analyze_code(str(root))
	assert [f.name for f in structure.root.files] == ["ok.ts"]


def test_missing_root_is_fatal(tmp_path):
	with pytest.raises(RootNotFoundError):
		analyze_code(str(tmp_path / "missing"))


def test_extra_ignore_rules(make_tree):
	root = make_tree(PROJECT)
	structure = analyze_code(str(root), AnalyzerConfig(extra_ignore=["b.ts"]))
	assert [f.name for f in structure.root.directories["src"].files] == ["a.ts"]


def test_async_analysis(make_tree):
	root = make_tree(PROJECT)
	structure = asyncio.run(analyze_code_async(str(root)))
	assert "src" in structure.root.directories
