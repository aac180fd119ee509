import re
from typing import List, Optional

from singlish_verification.errors import ControlNotFound, RegionNotFound, SurfaceReadError


class StubSurface:
    """
    In-memory RenderingSurface for exercising the pipeline without a browser.

    Args:
        controls: Values of the input-bearing controls, in order.
        regions: Text of each display region, in document order.
        broken: If True every read raises SurfaceReadError.

    The counters (control_reads, region_reads, waits) let tests check which
    strategies actually ran.
    """

    def __init__(self, controls: Optional[List[str]] = None, regions: Optional[List[str]] = None,
                 broken: bool = False):
        self.controls = list(controls or [])
        self.regions = list(regions or [])
        self.broken = broken
        self.control_reads = 0
        self.region_reads = 0
        self.waits = []

    def read_control_value(self, index: int) -> str:
        self.control_reads += 1
        if self.broken:
            raise SurfaceReadError("stub surface is broken")
        if len(self.controls) < index + 1:
            raise ControlNotFound(index, len(self.controls))
        return self.controls[index]

    def read_region_text(self, pattern: re.Pattern) -> str:
        self.region_reads += 1
        if self.broken:
            raise SurfaceReadError("stub surface is broken")
        matching = [text for text in self.regions if pattern.search(text)]
        if not matching:
            raise RegionNotFound(pattern.pattern)
        return matching[-1]

    def wait(self, ms: int) -> None:
        self.waits.append(ms)


# Minimal stand-in for the translator page: an input textarea, an output
# textarea filled asynchronously from a word table, and a Clear button.
FAKE_TRANSLATOR_HTML = """
<html>
    <body>
        <div id="app">
            <h1>Singlish to Sinhala Translator</h1>
            <textarea placeholder="Input Your Singlish Text Here."></textarea>
            <textarea id="output" readonly></textarea>
            <button id="clear">Clear</button>
        </div>
        <script>
            const words = {"mama": "මම", "yanavaa": "යනවා", "kohomadha": "කොහොමද", "saepa": "සැප", "saniipa": "සනීප"};
            const input = document.querySelector('textarea[placeholder*="Singlish"]');
            const output = document.getElementById('output');
            input.addEventListener('input', () => {
                setTimeout(() => {
                    output.value = input.value.split(' ').map(w => words[w] || w).join(' ');
                }, 100);
            });
            document.getElementById('clear').addEventListener('click', () => {
                input.value = '';
                output.value = '';
            });
        </script>
    </body>
</html>
"""
