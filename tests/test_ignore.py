from codedoc.config import AnalyzerConfig
from codedoc.ignore import IgnoreMatcher, IgnoreRule, build_ignore_matcher


def test_baseline_dirs_ignored_at_any_depth(tmp_path):
	matcher = build_ignore_matcher(str(tmp_path))
	assert matcher.is_ignored("node_modules", is_dir=True)
	assert matcher.is_ignored("packages/web/node_modules/react/index.js")
	assert matcher.is_ignored(".git/HEAD")
	assert matcher.is_ignored("dist/main.js")
	assert not matcher.is_ignored("src/distance.ts")


def test_missing_ignore_file_is_fine(tmp_path):
	matcher = build_ignore_matcher(str(tmp_path))
	assert len(matcher.rules) == len(AnalyzerConfig().always_ignore)


def test_gitignore_rules_are_added(tmp_path):
	(tmp_path / ".gitignore").write_text(
		"# generated\n\n*.generated.ts\n/coverage\ndocs/\nsrc/**/fixtures\n!keep.generated.ts\n"
	)
	matcher = build_ignore_matcher(str(tmp_path))
	assert matcher.is_ignored("src/api.generated.ts")
	assert not matcher.is_ignored("src/keep.generated.ts")
	assert matcher.is_ignored("coverage/lcov.js")
	assert not matcher.is_ignored("src/coverage/report.ts")
	assert matcher.is_ignored("docs", is_dir=True)
	assert matcher.is_ignored("docs/intro.ts")
	assert matcher.is_ignored("src/fixtures/a.ts")
	assert matcher.is_ignored("src/deep/er/fixtures/b.ts")
	assert not matcher.is_ignored("lib/fixtures/c.ts")


def test_respect_ignore_file_off(tmp_path):
	(tmp_path / ".gitignore").write_text("*.ts\n")
	config = AnalyzerConfig(respect_ignore_file=False)
	matcher = build_ignore_matcher(str(tmp_path), config)
	assert not matcher.is_ignored("src/a.ts")


def test_dir_only_rule_does_not_match_files():
	matcher = IgnoreMatcher().add(["build/"])
	assert matcher.is_ignored("build", is_dir=True)
	assert not matcher.is_ignored("build")


def test_rule_parsing_skips_comments_and_blanks():
	assert IgnoreRule.parse("# comment") is None
	assert IgnoreRule.parse("   ") is None
	rule = IgnoreRule.parse("!/out/")
	assert rule.negated and rule.anchored and rule.dir_only
	assert rule.segments == ("out",)


def test_star_does_not_cross_slash():
	matcher = IgnoreMatcher().add(["src/*.ts"])
	assert matcher.is_ignored("src/a.ts")
	assert not matcher.is_ignored("src/nested/a.ts")
