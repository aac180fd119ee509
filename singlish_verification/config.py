import os
from dataclasses import dataclass, field

DEFAULT_TRANSLATOR_URL = "https://www.swifttranslator.com/"
DEFAULT_SETTLE_MS = 2000
DEFAULT_GRACE_MS = 500

# Chromium's own page-translation bar can overlay the Sinhala output
BROWSER_LAUNCH_ARGS = ("--disable-features=Translate",)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer number of milliseconds, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class SettleBudget:
    """
    Fixed waits granted to the widget's asynchronous rendering.

    Attributes:
        settle_ms: Wait after the phrase is typed, before any extraction.
        grace_ms: Extra wait before the region fallback reads the page,
            so transient suggestion popups can close.
    """
    settle_ms: int = DEFAULT_SETTLE_MS
    grace_ms: int = DEFAULT_GRACE_MS

    def __post_init__(self):
        if self.settle_ms < 0 or self.grace_ms < 0:
            raise ValueError("Settle budget waits must not be negative")


@dataclass(frozen=True)
class Settings:
    translator_url: str = DEFAULT_TRANSLATOR_URL
    budget: SettleBudget = field(default_factory=SettleBudget)
    normalize_whitespace: bool = False
    live: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Builds settings from SINGLISH_* environment variables.

        Returns:
            Settings with defaults for every unset variable.
        """
        return cls(
            translator_url=os.environ.get("SINGLISH_TRANSLATOR_URL") or DEFAULT_TRANSLATOR_URL,
            budget=SettleBudget(
                settle_ms=_env_int("SINGLISH_SETTLE_MS", DEFAULT_SETTLE_MS),
                grace_ms=_env_int("SINGLISH_GRACE_MS", DEFAULT_GRACE_MS),
            ),
            normalize_whitespace=_env_flag("SINGLISH_NORMALIZE_WHITESPACE"),
            live=_env_flag("SINGLISH_LIVE"),
        )
