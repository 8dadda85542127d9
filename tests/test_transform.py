from kubesite.sync.sources import CHANGELOG_REPLACEMENTS, README_REPLACEMENTS, Replacement, SyncSource
from kubesite.sync.transform import apply_replacement, apply_replacements, generated_header, render, to_python_template

CHANGELOG = """<!-- next-header -->
## [Unreleased](https://github.com/kube-rs/kube/compare/0.88.1...main)

0.88.1 / 2024-01-26
===================
"""


def test_literal_replacement_replaces_all_occurrences():
    assert apply_replacement("a.b.c", Replacement(".", "-")) == "a-b-c"


def test_literal_replacement_does_not_interpret_regex():
    assert apply_replacement("## [x]", Replacement("[x]", "y")) == "## y"


def test_regex_replacement_is_multiline():
    text = "# one\n# two\n"
    assert apply_replacement(text, Replacement(r"^# (\w+)$", "## $1", regex=True)) == "## one\n## two\n"


def test_sd_named_capture():
    assert to_python_template("${name}-$2") == r"\g<name>-\g<2>"
    assert apply_replacement("v1.2", Replacement(r"v(?P<major>\d)\.(\d)", "${major}:$2", regex=True)) == "1:2"


def test_backslashes_in_replacement_are_literal():
    assert apply_replacement("x", Replacement("x", r"a\nb", regex=True)) == r"a\nb"


def test_changelog_replacements():
    out = apply_replacements(CHANGELOG, CHANGELOG_REPLACEMENTS)
    assert out.startswith("## Unreleased\n")
    assert "next-header" not in out
    assert "0.88.1 / 2024-01-26" in out


def test_readme_title_dropped_only_at_start():
    text = "# kube-rs\n\nIntro\n# kube-rs\n"
    assert apply_replacements(text, README_REPLACEMENTS) == "Intro\n# kube-rs\n"


def test_render_prefixes_header():
    source = SyncSource("https://raw.githubusercontent.com/kube-rs/.github/main/SECURITY.md", "syncs/security.md")
    out = render(source, "# Security\n")
    assert out == (
        "<!--GENERATED FROM https://github.com/kube-rs/.github/blob/main/SECURITY.md - CHANGES MUST BE MADE THERE -->\n"
        "# Security\n"
    )
    assert out.startswith(generated_header(source))


def test_render_without_header():
    source = SyncSource("https://example.com/a.md", "a.md", header=False, replacements=(Replacement("a", "b"),))
    assert render(source, "aaa") == "bbb"


def test_sd_unbraced_named_capture_and_literal_dollar():
    assert to_python_template("$major.$$") == r"\g<major>.$"
    replacement = Replacement(r"v(?P<major>\d+)", "$$$major", regex=True)
    assert apply_replacement("v12", replacement) == "$12"
