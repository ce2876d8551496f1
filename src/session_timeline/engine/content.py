"""Content heuristics for opaque text payloads.

Pure functions that decide how a tool's input or output should be
interpreted (JSON, unified diff, line-numbered file listing, or plain
text) and make an advisory guess at its source language. None of these
functions raise on malformed input.
"""

import json
import re
from collections.abc import Callable
from typing import Any, NamedTuple

from session_timeline.models.enums import ContentShape

__all__ = [
    "LANGUAGE_RULES",
    "classify_content",
    "guess_language",
    "looks_like_diff",
    "looks_like_json",
    "looks_like_line_numbered",
    "strip_line_numbers",
    "try_parse_json",
]

DIFF_LINE_RATIO = 0.3
LINE_NUMBERED_RATIO = 0.4

_DIFF_HEADERS = ("diff --git", "---", "Index:")
_DIFF_LINE_RE = re.compile(r"^[+-][^+-]")
_LINE_NUMBER_RE = re.compile(r"^\s*\d+[→\t|:]")
_LINE_NUMBER_PREFIX_RE = re.compile(r"^[ \t]*\d+[→\t|]", re.MULTILINE)


def try_parse_json(text: str) -> Any | None:
    """Parse text as a JSON object or array.

    Args:
        text: The candidate payload.

    Returns:
        The parsed value, or None when the text is not a JSON object/array.

    """
    if not isinstance(text, str):
        return None
    trimmed = text.strip()
    if len(trimmed) < 2 or trimmed[0] not in "{[":
        return None
    try:
        return json.loads(trimmed)
    except ValueError:
        return None


def looks_like_json(text: str) -> bool:
    """Check if text is a valid JSON object or array."""
    return try_parse_json(text) is not None


def looks_like_diff(text: str) -> bool:
    """Check if text looks like a unified diff.

    True for a leading diff header, or when at least 30% of the non-empty
    lines are hunk headers or single +/- change lines.
    """
    if text.startswith(_DIFF_HEADERS):
        return True
    lines = text.split("\n")
    if len(lines) < 3:
        return False
    non_empty = [line for line in lines if line]
    if len(non_empty) < 3:
        return False
    diff_lines = sum(
        1 for line in non_empty if _DIFF_LINE_RE.match(line) or line.startswith("@@")
    )
    return diff_lines / len(non_empty) >= DIFF_LINE_RATIO


def looks_like_line_numbered(text: str) -> bool:
    """Check if text looks like a line-numbered file listing.

    Matches ``cat -n`` style output ("  42→code", "42\\tcode") and
    grep-style "42:" prefixes on at least 40% of non-empty lines.
    """
    lines = text.split("\n")
    if len(lines) < 2:
        return False
    non_empty = [line for line in lines if line.strip()]
    if len(non_empty) < 2:
        return False
    matching = sum(1 for line in non_empty if _LINE_NUMBER_RE.match(line))
    return matching / len(non_empty) >= LINE_NUMBERED_RATIO


def strip_line_numbers(text: str) -> str:
    """Remove line-number prefixes so only the listed content remains."""
    return _LINE_NUMBER_PREFIX_RE.sub("", text)


def classify_content(text: str) -> ContentShape:
    """Decide how an opaque payload should be interpreted.

    Args:
        text: The payload.

    Returns:
        The first matching shape: json, diff, line_numbered, else text.

    """
    if looks_like_json(text):
        return ContentShape.json
    if looks_like_diff(text):
        return ContentShape.diff
    if looks_like_line_numbered(text):
        return ContentShape.line_numbered
    return ContentShape.text


def _search(pattern: str, flags: int = 0) -> Callable[[str], bool]:
    compiled = re.compile(pattern, flags)
    return lambda raw: compiled.search(raw) is not None


_TS_IMPORT = _search(r"\bimport\s+.*\bfrom\s+['\"]")
_TS_EXPORT = _search(r"\bexport\s+(default\s+)?(function|const|class|interface|type)\b")
_TS_CONST = _search(r"\bconst\s+\w+\s*[:=]")
_TS_TYPES = _search(r"\b(string|number|boolean|Promise|async|await)\b")
_JSX = _search(r"\bReact\b|['\"]react['\"]|<\w+[A-Z]|className=|useState|useEffect")
_CSS_BLOCK = _search(r"[.#]\w+\s*\{[\s\S]*?[;}]")
_CSS_PROPS = _search(r"\b(color|background|margin|padding|display|flex|grid)\s*:")
_COMPONENT_TAG = _search(r"</?[A-Z]\w+[\s/>]")
_HTML_TAG = _search(
    r"<(div|span|section|header|footer|main|form|button|input)\b", re.IGNORECASE
)
_YAML_KEY = re.compile(r"^\w[\w-]*\s*[:=]\s")
_CODE_PUNCT = re.compile(r"[;{}()]")


def _is_typescript(raw: str) -> bool:
    return (
        _TS_IMPORT(raw)
        or _TS_EXPORT(raw)
        or (_TS_CONST(raw) and _TS_TYPES(raw))
    )


def _is_yaml(raw: str) -> bool:
    return bool(_YAML_KEY.match(raw)) and not _CODE_PUNCT.search(raw[:200])


class LanguageRule(NamedTuple):
    """A (language tag, predicate) pair in the detection chain."""

    language: str
    matches: Callable[[str], bool]


# Evaluated top to bottom against line-number-stripped text.
LANGUAGE_RULES: tuple[LanguageRule, ...] = (
    LanguageRule(
        "rust",
        _search(
            r"\b(use\s+(std|crate|super|self)::|fn\s+\w+\s*[<(]|impl\s+(<.*>)?\s*\w+"
            r"|pub\s+(fn|struct|enum|mod|type|trait|const|static)\b|let\s+mut\b)"
            r"|#\[derive"
        ),
    ),
    LanguageRule("tsx", lambda raw: _is_typescript(raw) and _JSX(raw)),
    LanguageRule("typescript", _is_typescript),
    LanguageRule(
        "python",
        _search(
            r"\b(def\s+\w+\s*\(|class\s+\w+[\s:(]|from\s+\w+\s+import|import\s+\w+"
            r"|self\.\w+|__\w+__|@\w+)"
        ),
    ),
    LanguageRule(
        "go",
        lambda raw: bool(re.search(r"\bpackage\s+\w+", raw) and re.search(r"\bfunc\s+", raw)),
    ),
    LanguageRule(
        "sql",
        _search(
            r"\b(SELECT|INSERT INTO|CREATE TABLE|ALTER TABLE|UPDATE\s+\w+\s+SET|DELETE FROM)\b",
            re.IGNORECASE,
        ),
    ),
    LanguageRule("tsx", lambda raw: _COMPONENT_TAG(raw) or _HTML_TAG(raw)),
    LanguageRule("css", lambda raw: _CSS_BLOCK(raw) and _CSS_PROPS(raw)),
    LanguageRule(
        "bash",
        lambda raw: raw.startswith("#!/")
        or bool(
            re.search(r"\b(echo|export|source|chmod|mkdir|cd|ls|grep|sed|awk|curl|wget)\b", raw)
        ),
    ),
    LanguageRule("json", lambda raw: bool(re.match(r'\s*["{\[]', raw.strip()))),
    LanguageRule("yaml", _is_yaml),
    LanguageRule(
        "c",
        _search(r"#include\s*<|\b(int\s+main\s*\(|void\s+\w+\(|printf\s*\()"),
    ),
    LanguageRule("java", _search(r"\b(public\s+class|private\s+|protected\s+|System\.out)")),
    LanguageRule(
        "ruby",
        _search(r"\b(require\s+['\"]|module\s+\w+|class\s+\w+\s*<)|\bend\b.*\n.*\bdef\b"),
    ),
    LanguageRule(
        "markdown",
        lambda raw: bool(re.match(r"#{1,6}\s+\w", raw) and re.search(r"\n#{1,6}\s+\w", raw)),
    ),
)


def guess_language(text: str) -> str:
    """Guess a source language tag for code-like content.

    Advisory only: the result is a hint for highlighting, never a gate.

    Args:
        text: The payload, possibly line-numbered.

    Returns:
        A language tag such as "python" or "rust"; "diff" for patches;
        "text" when nothing matches.

    """
    if looks_like_diff(text):
        return "diff"
    raw = strip_line_numbers(text)
    for rule in LANGUAGE_RULES:
        if rule.matches(raw):
            return rule.language
    return "text"
