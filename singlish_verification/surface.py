import re
from typing import List, Protocol

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page

from singlish_verification.errors import ControlNotFound, RegionNotFound, SurfaceReadError

CONTROL_SELECTOR = "textarea"
REGION_SELECTOR = "div"


class RenderingSurface(Protocol):
    """Read-only view of whatever the widget rendered."""

    def read_control_value(self, index: int) -> str: ...

    def read_region_text(self, pattern: re.Pattern) -> str: ...

    def wait(self, ms: int) -> None: ...


class PlaywrightSurface:
    """
    RenderingSurface backed by a live Playwright page.

    Controls are the page's textareas in document order (0 is the Singlish
    input, 1 the Sinhala output). Regions are divs whose text matches a
    pattern. Playwright errors surface as SurfaceReadError so the
    extraction chain can absorb them.
    """

    def __init__(self, page: Page):
        self.page = page

    def list_controls(self) -> List[Locator]:
        try:
            return self.page.locator(CONTROL_SELECTOR).all()
        except PlaywrightError as e:
            raise SurfaceReadError(f"Could not list controls: {e}") from e

    def list_regions_matching(self, pattern: re.Pattern) -> Locator:
        return self.page.locator(REGION_SELECTOR).filter(has_text=pattern)

    def read_control_value(self, index: int) -> str:
        controls = self.list_controls()
        if len(controls) < index + 1:
            raise ControlNotFound(index, len(controls))
        try:
            return controls[index].input_value()
        except PlaywrightError as e:
            raise SurfaceReadError(f"Could not read control #{index}: {e}") from e

    def read_region_text(self, pattern: re.Pattern) -> str:
        regions = self.list_regions_matching(pattern)
        try:
            if regions.count() == 0:
                raise RegionNotFound(pattern.pattern)
            return regions.last.text_content() or ""
        except PlaywrightError as e:
            raise SurfaceReadError(f"Could not read region text: {e}") from e

    def wait(self, ms: int) -> None:
        try:
            self.page.wait_for_timeout(ms)
        except PlaywrightError as e:
            raise SurfaceReadError(f"Could not wait {ms}ms on the page: {e}") from e
