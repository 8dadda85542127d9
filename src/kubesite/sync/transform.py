"""sd-style rewriting of downloaded Markdown."""

import re
from typing import Iterable

from kubesite.sync.sources import Replacement, SyncSource

# sd writes captures as $1, $name or ${name}; $$ is a literal dollar
_SD_CAPTURE = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))")


def _capture_ref(match) -> str:
    if match.group(1):
        return "$"
    return f"\\g<{match.group(2) or match.group(3)}>"


def to_python_template(replace: str) -> str:
    """Translate sd capture references into re.sub syntax."""
    escaped = replace.replace("\\", "\\\\")
    return _SD_CAPTURE.sub(_capture_ref, escaped)


def apply_replacement(text: str, replacement: Replacement) -> str:
    if not replacement.regex:
        return text.replace(replacement.find, replacement.replace)
    pattern = re.compile(replacement.find, re.MULTILINE)
    return pattern.sub(to_python_template(replacement.replace), text)


def apply_replacements(text: str, replacements: Iterable[Replacement]) -> str:
    for replacement in replacements:
        text = apply_replacement(text, replacement)
    return text


def generated_header(source: SyncSource) -> str:
    return f"<!--GENERATED FROM {source.canonical_url} - CHANGES MUST BE MADE THERE -->\n"


def render(source: SyncSource, text: str) -> str:
    """Apply the source's replacements, then prefix the generated-file header."""
    text = apply_replacements(text, source.replacements)
    if source.header:
        text = generated_header(source) + text
    return text
