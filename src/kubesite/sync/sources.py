"""Upstream Markdown files mirrored into the website's docs tree."""

import re
from dataclasses import dataclass, field
from typing import List, Tuple

from kubesite.errors import ConfigError

RAW_PREFIX = "https://raw.githubusercontent.com/"

_RAW_URL = re.compile(r"^https://raw\.githubusercontent\.com/(?P<org>[^/]+)/(?P<repo>[^/]+)/(?P<ref>[^/]+)/(?P<path>.+)$")


@dataclass(frozen=True)
class Replacement:
    """One find/replace step. Literal unless regex is set."""

    find: str
    replace: str
    regex: bool = False


@dataclass(frozen=True)
class SyncSource:
    url: str
    dest: str
    header: bool = True
    replacements: Tuple[Replacement, ...] = field(default_factory=tuple)

    @property
    def canonical_url(self) -> str:
        """Browsable GitHub page for the raw URL, used in the generated header."""
        match = _RAW_URL.match(self.url)
        if not match:
            return self.url
        return "https://github.com/{org}/{repo}/blob/{ref}/{path}".format(**match.groupdict())


def _raw(org_repo: str, ref: str, path: str) -> str:
    return f"{RAW_PREFIX}{org_repo}/{ref}/{path}"


CHANGELOG_REPLACEMENTS = (
    Replacement("<!-- next-header -->\n", ""),
    Replacement(r"^## \[Unreleased\]\(.*\)$", "## Unreleased", regex=True),
    Replacement(r"^## \[Unreleased\]$", "## Unreleased", regex=True),
)

README_REPLACEMENTS = (Replacement(r"\A# kube-rs\n+", "", regex=True),)

DEFAULT_SOURCES: List[SyncSource] = [
    SyncSource(_raw("kube-rs/.github", "main", "maintainers.md"), "syncs/maintainers.md"),
    SyncSource(_raw("kube-rs/kube-rs", "master", "CONTRIBUTING.md"), "syncs/contributing.md"),
    SyncSource(_raw("kube-rs/kube-rs", "master", "ADOPTERS.md"), "syncs/adopters.md"),
    SyncSource(_raw("kube-rs/kube-rs", "master", "CHANGELOG.md"), "syncs/changelog.md", replacements=CHANGELOG_REPLACEMENTS),
    SyncSource(_raw("kube-rs/kube-rs", "master", "README.md"), "syncs/getting-started.md", replacements=README_REPLACEMENTS),
    SyncSource(_raw("kube-rs/.github", "main", "code-of-conduct.md"), "syncs/code-of-conduct.md"),
    SyncSource(_raw("kube-rs/.github", "main", "SECURITY.md"), "syncs/security.md"),
    # TODO: move governance, tools and architecture into this repo, they have no upstream interaction
    SyncSource(_raw("kube-rs/.github", "main", "governance.md"), "syncs/governance.md"),
    SyncSource(_raw("kube-rs/.github", "main", "TOOLS.md"), "syncs/tools.md"),
    SyncSource(_raw("kube-rs/kube-rs", "master", "architecture.md"), "syncs/architecture.md"),
]


def select_sources(sources: List[SyncSource], only: List[str]) -> List[SyncSource]:
    """Restrict sources to the given destinations, keeping the original order."""
    if not only:
        return list(sources)
    wanted = set(only)
    known = {source.dest for source in sources}
    unknown = sorted(wanted - known)
    if unknown:
        raise ConfigError(f"Unknown sync destination(s): {', '.join(unknown)}")
    return [source for source in sources if source.dest in wanted]
