class VerificationError(Exception):
    """Base class for everything the verification suite raises."""


class SurfaceError(VerificationError):
    """A read against the rendering surface failed.

    The extraction chain absorbs these and moves on to its next strategy.
    """


class ControlNotFound(SurfaceError):
    def __init__(self, index: int, available: int):
        super().__init__(f"Control #{index} requested but only {available} control(s) on the page")
        self.index = index
        self.available = available


class RegionNotFound(SurfaceError):
    def __init__(self, pattern: str):
        super().__init__(f"No display region matches {pattern!r}")
        self.pattern = pattern


class SurfaceReadError(SurfaceError):
    """The browser raised while reading a control or region."""


class SurfaceUnavailableError(VerificationError):
    """The translator page could not be opened at all. Fatal for a run."""


class CorpusIntegrityError(VerificationError):
    """The test corpus has a duplicate or malformed record. Fatal at load time."""


class VerdictError(VerificationError, AssertionError):
    """A failed verdict, raised only on request via raise_for_verdict()."""

    reason = None

    def __init__(self, result):
        super().__init__(
            f"[{self.reason}] input={result.input!r} "
            f"expected={result.expected!r} got={result.cleaned_payload!r} "
            f"(raw={result.raw_candidate!r}, from {result.provenance})"
        )
        self.result = result


class EmptyOutputError(VerdictError):
    reason = "empty-output"


class ScriptMismatchError(VerdictError):
    reason = "no-target-script"


class ContentMismatchError(VerdictError):
    reason = "mismatch"


class UnexpectedOutputError(VerdictError):
    reason = "expected-empty-but-got-output"


class BrowserInteractionError(VerdictError):
    reason = "browser-error"


VERDICT_ERRORS = {
    cls.reason: cls
    for cls in (EmptyOutputError, ScriptMismatchError, ContentMismatchError, UnexpectedOutputError,
                BrowserInteractionError)
}
