import re
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ChromePattern:
    label: str
    regex: re.Pattern


def _pattern(label: str, source: str) -> ChromePattern:
    return ChromePattern(label, re.compile(source, re.IGNORECASE))


# Compound captions come before the single words they contain
# ("Translator" before "Translate").
CHROME_PATTERNS: Tuple[ChromePattern, ...] = (
    _pattern("product name", r"Singlish.*?Translator"),
    _pattern("language switch", r"Switch Typing Language"),
    _pattern("features menu", r"Features"),
    _pattern("suggestions toggle", r"View Suggestions"),
    _pattern("autocorrect toggle", r"Word Autocorrect"),
    _pattern("touchpad toggle", r"Singlish Touchpad"),
    _pattern("translate button", r"Translate"),
    _pattern("clear button", r"Clear"),
    _pattern("language label", r"English"),
    _pattern("swap icon", "\U0001F501"),
    _pattern("trash icon", "\U0001F5D1\uFE0F?"),
)


def strip_chrome(text: str, patterns: Tuple[ChromePattern, ...] = CHROME_PATTERNS) -> str:
    """
    Deletes UI captions, labels and icon glyphs from a candidate string.

    Every pattern is applied on every pass and passes repeat until nothing
    changes, so a deletion that exposes another caption is handled and the
    result is a fixed point.

    Args:
        text: Raw candidate text.
        patterns: Chrome patterns to delete.

    Returns:
        The text with all chrome removed and surrounding whitespace trimmed.
    """
    current = (text or "").strip()
    while True:
        stripped = current
        for pattern in patterns:
            stripped = pattern.regex.sub("", stripped)
        stripped = stripped.strip()
        if stripped == current:
            return stripped
        current = stripped


# Outside every allowed payload character, so each caption splits the text.
CHROME_SEPARATOR = "\x00"


def mask_chrome(text: str, patterns: Tuple[ChromePattern, ...] = CHROME_PATTERNS) -> str:
    """
    Replaces each chrome match with CHROME_SEPARATOR instead of deleting it.

    Text on either side of a caption stays apart, so any run of payload
    characters taken from the result is a verbatim slice of the input.
    """
    masked = text or ""
    for pattern in patterns:
        masked = pattern.regex.sub(CHROME_SEPARATOR, masked)
    return masked
