import enum
import re
from dataclasses import dataclass
from typing import Optional

from singlish_verification.chrome import mask_chrome, strip_chrome
from singlish_verification.config import SettleBudget
from singlish_verification.errors import VERDICT_ERRORS
from singlish_verification.extraction import extract_candidate
from singlish_verification.payload import isolate_payload
from singlish_verification.script import contains_target_script
from singlish_verification.surface import RenderingSurface

REASON_EMPTY_OUTPUT = "empty-output"
REASON_NO_TARGET_SCRIPT = "no-target-script"
REASON_MISMATCH = "mismatch"
REASON_UNEXPECTED_OUTPUT = "expected-empty-but-got-output"
REASON_BROWSER_ERROR = "browser-error"

_WHITESPACE_RUN = re.compile(r"\s+")


class Verdict(enum.Enum):
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class VerificationResult:
    input: str
    raw_candidate: str
    cleaned_payload: str
    expected: str
    verdict: Verdict
    reason: Optional[str] = None
    provenance: str = "none"
    stripped: str = ""
    detail: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASS

    def raise_for_verdict(self) -> None:
        """
        Raises the VerdictError matching this result's reason.

        Does nothing for a passing result.
        """
        if self.passed:
            return
        raise VERDICT_ERRORS[self.reason](self)


def _comparable(text: str, normalize_whitespace: bool) -> str:
    text = text.strip()
    if normalize_whitespace:
        text = _WHITESPACE_RUN.sub(" ", text)
    return text


def judge(payload: str, expected: str, normalize_whitespace: bool = False) -> Optional[str]:
    """
    Decides the verdict for an already isolated payload.

    Args:
        payload: Output of isolate_payload.
        expected: Golden string.
        normalize_whitespace: Collapse internal whitespace runs on both sides
            before comparing. Off by default: the comparison is exact after
            trimming.

    Returns:
        None on pass, otherwise the failure reason.
    """
    payload = payload.strip()
    if not expected.strip():
        return REASON_UNEXPECTED_OUTPUT if payload else None
    if not payload:
        return REASON_EMPTY_OUTPUT
    if not contains_target_script(payload):
        return REASON_NO_TARGET_SCRIPT
    if _comparable(payload, normalize_whitespace) != _comparable(expected, normalize_whitespace):
        return REASON_MISMATCH
    return None


def verify(input: str, expected: str, surface: RenderingSurface, budget: Optional[SettleBudget] = None,
           normalize_whitespace: bool = False) -> VerificationResult:
    """
    Extracts the widget output from a surface and checks it against a golden value.

    The surface is expected to already show the output for `input`; this
    function only reads it. Failures are recorded in the result, not raised.
    The payload is always a trimmed slice of the raw candidate: chrome
    captions split it rather than being cut out of it.

    Args:
        input: The Singlish phrase that was typed.
        expected: The golden Sinhala output.
        surface: Rendering surface to read.
        budget: Waits for the extraction chain.
        normalize_whitespace: See judge().

    Returns:
        The VerificationResult for this phrase.
    """
    candidate = extract_candidate(surface, budget)
    stripped = strip_chrome(candidate.value)
    payload = isolate_payload(mask_chrome(candidate.value))
    reason = judge(payload, expected, normalize_whitespace)
    return VerificationResult(
        input=input,
        raw_candidate=candidate.value,
        cleaned_payload=payload,
        expected=expected,
        verdict=Verdict.PASS if reason is None else Verdict.FAIL,
        reason=reason,
        provenance=candidate.provenance,
        stripped=stripped,
    )


def browser_error_result(input: str, expected: str, error: Exception) -> VerificationResult:
    """
    Records a phrase that could not be typed or read because the browser failed.

    Always a Fail, even for an empty expectation: nothing was observed.
    """
    return VerificationResult(
        input=input,
        raw_candidate="",
        cleaned_payload="",
        expected=expected,
        verdict=Verdict.FAIL,
        reason=REASON_BROWSER_ERROR,
        detail=f"{type(error).__name__}: {error}",
    )
