import re
from dataclasses import dataclass
from typing import Tuple

from singlish_verification.script import SCRIPT_FIRST


@dataclass(frozen=True)
class AllowedCharsetSpec:
    """
    Characters a reader accepts as part of a translated sentence.

    Attributes:
        ranges: Closed code point intervals (the Sinhala block, ZWNJ/ZWJ).
        extra: Individual characters outside those ranges (punctuation).
        ascii_letters: Whether embedded Latin words survive.
        ascii_digits: Whether digits survive.
        whitespace: Whether whitespace survives.
    """
    ranges: Tuple[Tuple[int, int], ...]
    extra: str
    ascii_letters: bool = True
    ascii_digits: bool = True
    whitespace: bool = True

    def allows(self, ch: str) -> bool:
        if self.whitespace and ch.isspace():
            return True
        if self.ascii_letters and ("a" <= ch <= "z" or "A" <= ch <= "Z"):
            return True
        if self.ascii_digits and "0" <= ch <= "9":
            return True
        if ch in self.extra:
            return True
        code = ord(ch)
        return any(first <= code <= last for first, last in self.ranges)

    def pattern(self) -> re.Pattern:
        """Compiled regex matching one maximal run of allowed characters."""
        parts = [f"\\u{first:04X}-\\u{last:04X}" for first, last in self.ranges]
        if self.ascii_letters:
            parts.append("A-Za-z")
        if self.ascii_digits:
            parts.append("0-9")
        if self.whitespace:
            parts.append("\\s")
        parts.append(re.escape(self.extra))
        return re.compile(f"[{''.join(parts)}]+")


ALLOWED_CHARSET = AllowedCharsetSpec(
    ranges=(
        (SCRIPT_FIRST, 0x0DFF),  # Sinhala letters, vowel signs, al-lakuna, anusvara
        (0x200C, 0x200D),        # ZWNJ, ZWJ (conjuncts such as ශ්‍ර)
    ),
    extra="!?.,;:-/",
)

_ALLOWED_RUN = ALLOWED_CHARSET.pattern()


def isolate_payload(text: str) -> str:
    """
    Returns the longest run of allowed characters in text, trimmed.

    Runs are compared by their trimmed length so a stretch of layout
    whitespace never beats real content. The first run wins a tie.
    """
    best = ""
    for match in _ALLOWED_RUN.finditer(text or ""):
        run = match.group(0).strip()
        if len(run) > len(best):
            best = run
    return best
