from codedoc.model import DirectoryNode, FileInfo
from codedoc.structure import build_structure, prune


def _info(rel_path):
	return FileInfo(name=rel_path.rsplit("/", 1)[-1], path=rel_path)


def test_files_are_nested_by_directory():
	paths = ["index.ts", "src/a.ts", "src/b.ts", "src/lib/c.ts"]
	structure = build_structure("/proj", [(p, _info(p)) for p in paths])
	root = structure.root
	assert root.path == "/proj"
	assert root.name == "proj"
	assert [f.name for f in root.files] == ["index.ts"]
	src = root.directories["src"]
	assert src.name == "src"
	assert [f.name for f in src.files] == ["a.ts", "b.ts"]
	assert list(src.directories) == ["lib"]
	assert [f.name for f in src.directories["lib"].files] == ["c.ts"]


def test_revisited_directory_is_reused():
	structure = build_structure("/p", [("x/a.ts", _info("x/a.ts")), ("x/b.ts", _info("x/b.ts"))])
	assert list(structure.root.directories) == ["x"]
	assert len(structure.root.directories["x"].files) == 2


def test_prune_removes_directories_emptied_by_their_children():
	structure = build_structure("/p", [("keep/a.ts", _info("keep/a.ts"))])
	root = structure.root
	root.directories["empty"] = DirectoryNode(name="empty", directories={"inner": DirectoryNode(name="inner")})
	prune(root)
	assert list(root.directories) == ["keep"]


def test_empty_root_is_kept_and_serializes_without_containers():
	structure = build_structure("/p", [])
	assert structure.root.files == []
	assert structure.model_dump(by_alias=True) == {"root": {"path": "/p"}}


def test_serialized_tree_has_no_empty_containers():
	structure = build_structure("/p", [("src/a.ts", _info("src/a.ts"))])
	doc = structure.model_dump(by_alias=True)
	assert doc == {
		"root": {
			"path": "/p",
			"directories": {
				"src": {"name": "src", "files": [{"name": "a.ts", "path": "src/a.ts"}]},
			},
		}
	}
