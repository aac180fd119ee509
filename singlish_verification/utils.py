import os
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page

from singlish_verification.comparator import VerificationResult, verify
from singlish_verification.config import SettleBudget
from singlish_verification.errors import SurfaceUnavailableError
from singlish_verification.surface import PlaywrightSurface

INPUT_SELECTOR = 'textarea[placeholder*="Singlish"]'
SCREENSHOT_DIR = os.path.join("singlish_verification", "screenshots")


def open_translator(page: Page, url: str, timeout: int = 30000):
    """
    Navigates to the translator and waits for the network to go idle.

    Args:
        page: The Playwright Page object.
        url: Translator URL.
        timeout: Navigation timeout in ms.

    Raises:
        SurfaceUnavailableError: If the page cannot be loaded or has no
            Singlish input field.
    """
    print(f"Opening translator at {url}...")
    try:
        page.goto(url, timeout=timeout)
    except PlaywrightError as e:
        raise SurfaceUnavailableError(f"Could not open {url}: {e}") from e
    try:
        page.wait_for_load_state("networkidle", timeout=timeout)
    except PlaywrightError:
        # Analytics beacons can keep the network busy; the input check below decides.
        print("Warning: Translator never reached network idle.")
    if page.locator(INPUT_SELECTOR).count() == 0:
        raise SurfaceUnavailableError(f"No Singlish input field found at {url}")


def enter_phrase(page: Page, phrase: str, budget: Optional[SettleBudget] = None) -> PlaywrightSurface:
    """
    Types a phrase into the Singlish input and waits for the widget to render.

    Args:
        page: The Playwright Page object.
        phrase: Singlish text to inject.
        budget: Settle budget; only settle_ms is used here.

    Returns:
        A surface over the page, ready for extraction.
    """
    budget = budget or SettleBudget()
    page.locator(INPUT_SELECTOR).fill(phrase)
    page.wait_for_timeout(budget.settle_ms)
    return PlaywrightSurface(page)


def translate_and_verify(page: Page, phrase: str, expected: str, budget: Optional[SettleBudget] = None,
                         normalize_whitespace: bool = False) -> VerificationResult:
    surface = enter_phrase(page, phrase, budget)
    return verify(phrase, expected, surface, budget=budget, normalize_whitespace=normalize_whitespace)


def capture_screenshot(page: Page, name: str, directory: str = SCREENSHOT_DIR) -> str:
    """
    Captures a screenshot of the current page state.
    Appends '_mobile' or '_desktop' based on viewport width.

    Args:
        page: The Playwright Page object.
        name: The filename (without extension) for the screenshot.
        directory: Where to save it.

    Returns:
        Path of the saved file.
    """
    os.makedirs(directory, exist_ok=True)

    viewport = page.viewport_size
    width = viewport['width'] if viewport else 1280
    suffix = "mobile" if width < 600 else "desktop"
    path = os.path.join(directory, f"{name}_{suffix}.png")
    page.screenshot(path=path, timeout=10000)
    return path
