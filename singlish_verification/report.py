import json
import os
from typing import List, Tuple

from singlish_verification.comparator import VerificationResult
from singlish_verification.corpus import CorpusRecord


class VerificationReport:
    """Collects one VerificationResult per corpus record and summarises them."""

    def __init__(self):
        self.entries: List[Tuple[CorpusRecord, VerificationResult]] = []

    def add(self, record: CorpusRecord, result: VerificationResult):
        self.entries.append((record, result))

    @property
    def passed(self) -> int:
        return sum(1 for _, result in self.entries if result.passed)

    @property
    def failed(self) -> int:
        return len(self.entries) - self.passed

    def failures(self) -> List[dict]:
        return [
            {
                "id": record.id,
                "reason": result.reason,
                "rawCandidate": result.raw_candidate,
                "cleanedPayload": result.cleaned_payload,
                "expected": result.expected,
            }
            for record, result in self.entries
            if not result.passed
        ]

    @staticmethod
    def format_line(record: CorpusRecord, result: VerificationResult) -> str:
        if result.passed:
            return f"✅ PASS {record.label}"
        line = (f"❌ FAIL {record.label} [{result.reason}] "
                f"expected={result.expected!r} got={result.cleaned_payload!r}")
        return f"{line} ({result.detail})" if result.detail else line

    def summary(self) -> str:
        return f"{self.passed} passed, {self.failed} failed ({len(self.entries)} total)"

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "failed": self.failed,
            "failures": self.failures(),
            "results": [
                {
                    "id": record.id,
                    "input": result.input,
                    "verdict": result.verdict.value,
                    "reason": result.reason,
                    "provenance": result.provenance,
                    "rawCandidate": result.raw_candidate,
                    "cleanedPayload": result.cleaned_payload,
                    "expected": result.expected,
                    "detail": result.detail,
                }
                for record, result in self.entries
            ],
        }

    def write_json(self, path: str):
        """
        Writes the report as UTF-8 JSON, creating parent directories.

        Args:
            path: Destination file.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, ensure_ascii=False, indent=2)
