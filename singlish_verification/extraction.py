from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from singlish_verification.config import SettleBudget
from singlish_verification.errors import SurfaceError
from singlish_verification.script import TARGET_SCRIPT_PATTERN, contains_target_script
from singlish_verification.surface import RenderingSurface

OUTPUT_CONTROL_INDEX = 1


@dataclass(frozen=True)
class ExtractionCandidate:
    value: str
    provenance: str  # "control", "region" or "none"


EMPTY_CANDIDATE = ExtractionCandidate("", "none")


def read_output_control(surface: RenderingSurface, budget: SettleBudget) -> Optional[ExtractionCandidate]:
    """
    Reads the dedicated output field (the second textarea).

    Returns:
        A "control" candidate, or None if the field is missing or blank.
    """
    value = surface.read_control_value(OUTPUT_CONTROL_INDEX)
    if not value or not value.strip():
        return None
    return ExtractionCandidate(value, "control")


def read_last_script_region(surface: RenderingSurface, budget: SettleBudget) -> Optional[ExtractionCandidate]:
    """
    Falls back to free text rendered somewhere on the page.

    Waits the grace interval so suggestion popups can close, then reads the
    last region holding Sinhala text and keeps its last Sinhala line.
    Suggestion overlays render above the settled translation, so the last
    matching line is the authoritative one.

    Returns:
        A "region" candidate, or None if the region text is blank.
    """
    surface.wait(budget.grace_ms)
    text = surface.read_region_text(TARGET_SCRIPT_PATTERN)
    lines = [line for line in text.split("\n") if contains_target_script(line)]
    value = lines[-1] if lines else text
    if not value or not value.strip():
        return None
    return ExtractionCandidate(value, "region")


Strategy = Callable[[RenderingSurface, SettleBudget], Optional[ExtractionCandidate]]

STRATEGIES: Tuple[Strategy, ...] = (read_output_control, read_last_script_region)


def extract_candidate(surface: RenderingSurface, budget: Optional[SettleBudget] = None,
                      strategies: Tuple[Strategy, ...] = STRATEGIES) -> ExtractionCandidate:
    """
    Runs the strategies in order and returns the first candidate produced.

    Any failure inside a strategy is reported and skipped, never raised.

    Args:
        surface: Where the widget rendered its output.
        budget: Waits to use; defaults to SettleBudget().
        strategies: Ordered strategies to try.

    Returns:
        The winning candidate, or an empty "none" candidate.
    """
    budget = budget or SettleBudget()
    for strategy in strategies:
        try:
            candidate = strategy(surface, budget)
        except SurfaceError as e:
            print(f"Warning: {strategy.__name__} failed: {e}")
            continue
        except Exception as e:
            print(f"Warning: {strategy.__name__} failed: {type(e).__name__}: {e}")
            continue
        if candidate is not None:
            return candidate
    return EMPTY_CANDIDATE
