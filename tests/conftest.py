from textwrap import dedent

import pytest


@pytest.fixture
def make_tree(tmp_path):
	"""Write {relative path: source} into tmp_path and return the root."""

	def _make(files):
		for rel_path, text in files.items():
			p = tmp_path / rel_path
			p.parent.mkdir(parents=True, exist_ok=True)
			p.write_text(dedent(text), encoding="utf-8")
		return tmp_path

	return _make
