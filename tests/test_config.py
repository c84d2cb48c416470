from codedoc.config import AnalyzerConfig


def test_defaults():
	config = AnalyzerConfig()
	assert config.extensions == [".ts", ".tsx", ".js", ".jsx"]
	assert "node_modules" in config.always_ignore
	assert config.alias_prefix == "@/"
	assert config.alias_target == "src/"


def test_overrides_skip_none_and_normalize_extensions():
	config = AnalyzerConfig().with_overrides(extensions=["ts", ".vue"], alias_prefix=None)
	assert config.extensions == [".ts", ".vue"]
	assert config.alias_prefix == "@/"
