import re

# Closed interval of code points treated as Sinhala output.
SCRIPT_FIRST = 0x0D80
SCRIPT_LAST = 0x0DF8

TARGET_SCRIPT_PATTERN = re.compile(f"[\\u{SCRIPT_FIRST:04X}-\\u{SCRIPT_LAST:04X}]")


def contains_target_script(text) -> bool:
    """
    Checks whether a string holds at least one Sinhala character.

    Args:
        text: Any string. None and "" are accepted and yield False.

    Returns:
        True if some code point falls in U+0D80..U+0DF8.
    """
    if not text:
        return False
    return any(SCRIPT_FIRST <= ord(ch) <= SCRIPT_LAST for ch in text)
