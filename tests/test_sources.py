import pytest

from kubesite.errors import ConfigError
from kubesite.sync.sources import (
    CHANGELOG_REPLACEMENTS,
    DEFAULT_SOURCES,
    README_REPLACEMENTS,
    SyncSource,
    select_sources,
)


def test_default_sources_order_and_destinations():
    """Sources keep the upstream order and all land under syncs/."""
    dests = [source.dest for source in DEFAULT_SOURCES]
    assert dests[0] == "syncs/maintainers.md"
    assert dests[-1] == "syncs/architecture.md"
    assert len(dests) == len(set(dests)) == 10
    assert all(dest.startswith("syncs/") for dest in dests)


def test_default_sources_match_upstream_table():
    """Every upstream file lands at its fixed destination, in sync order."""
    raw = "https://raw.githubusercontent.com/kube-rs/"
    assert [(s.url, s.dest) for s in DEFAULT_SOURCES] == [
        (raw + ".github/main/maintainers.md", "syncs/maintainers.md"),
        (raw + "kube-rs/master/CONTRIBUTING.md", "syncs/contributing.md"),
        (raw + "kube-rs/master/ADOPTERS.md", "syncs/adopters.md"),
        (raw + "kube-rs/master/CHANGELOG.md", "syncs/changelog.md"),
        (raw + "kube-rs/master/README.md", "syncs/getting-started.md"),
        (raw + ".github/main/code-of-conduct.md", "syncs/code-of-conduct.md"),
        (raw + ".github/main/SECURITY.md", "syncs/security.md"),
        (raw + ".github/main/governance.md", "syncs/governance.md"),
        (raw + ".github/main/TOOLS.md", "syncs/tools.md"),
        (raw + "kube-rs/master/architecture.md", "syncs/architecture.md"),
    ]


def test_only_changelog_and_readme_are_rewritten():
    rewritten = {s.dest: s.replacements for s in DEFAULT_SOURCES if s.replacements}
    assert rewritten == {
        "syncs/changelog.md": CHANGELOG_REPLACEMENTS,
        "syncs/getting-started.md": README_REPLACEMENTS,
    }
    assert all(s.header for s in DEFAULT_SOURCES)


def test_canonical_url_for_raw_github_url():
    source = SyncSource("https://raw.githubusercontent.com/kube-rs/kube-rs/master/CHANGELOG.md", "syncs/changelog.md")
    assert source.canonical_url == "https://github.com/kube-rs/kube-rs/blob/master/CHANGELOG.md"


def test_canonical_url_keeps_other_urls():
    source = SyncSource("https://example.com/file.md", "x.md")
    assert source.canonical_url == "https://example.com/file.md"


def test_select_sources_keeps_order():
    selected = select_sources(DEFAULT_SOURCES, ["syncs/security.md", "syncs/contributing.md"])
    assert [s.dest for s in selected] == ["syncs/contributing.md", "syncs/security.md"]


def test_select_sources_empty_means_all():
    assert select_sources(DEFAULT_SOURCES, []) == DEFAULT_SOURCES


def test_select_sources_rejects_unknown():
    with pytest.raises(ConfigError, match="syncs/nope.md"):
        select_sources(DEFAULT_SOURCES, ["syncs/nope.md"])
