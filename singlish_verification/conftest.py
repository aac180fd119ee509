import urllib.error
import urllib.request

import pytest
from playwright.sync_api import expect

from singlish_verification.config import BROWSER_LAUNCH_ARGS, SettleBudget, Settings


def pytest_addoption(parser):
    defaults = Settings.from_env()
    group = parser.getgroup("singlish", "Singlish translator verification")
    group.addoption("--translator-url", default=defaults.translator_url,
                    help="Translator page to drive (env: SINGLISH_TRANSLATOR_URL)")
    group.addoption("--settle-ms", type=int, default=defaults.budget.settle_ms,
                    help="Wait after typing before reading output (env: SINGLISH_SETTLE_MS)")
    group.addoption("--grace-ms", type=int, default=defaults.budget.grace_ms,
                    help="Extra wait before the region fallback (env: SINGLISH_GRACE_MS)")
    group.addoption("--normalize-whitespace", action="store_true", default=defaults.normalize_whitespace,
                    help="Collapse internal whitespace before comparing (env: SINGLISH_NORMALIZE_WHITESPACE)")
    group.addoption("--live", action="store_true", default=defaults.live,
                    help="Run the tests that drive the real translator site (env: SINGLISH_LIVE)")


def pytest_collection_modifyitems(config, items):
    # Skip live tests before any fixture, including the browser, is set up
    if config.getoption("live"):
        return
    skip_live = pytest.mark.skip(reason="Live translator tests are disabled. Pass --live or set SINGLISH_LIVE=1.")
    for item in items:
        if "translator_available" in getattr(item, "fixturenames", ()):
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def settings(pytestconfig) -> Settings:
    """
    Settings for this run, from command-line options falling back to the environment.
    """
    return Settings(
        translator_url=pytestconfig.getoption("translator_url"),
        budget=SettleBudget(
            settle_ms=pytestconfig.getoption("settle_ms"),
            grace_ms=pytestconfig.getoption("grace_ms"),
        ),
        normalize_whitespace=pytestconfig.getoption("normalize_whitespace"),
        live=pytestconfig.getoption("live"),
    )


@pytest.fixture(scope="session")
def settle_budget(settings) -> SettleBudget:
    return settings.budget


@pytest.fixture(scope="session", params=["desktop", "mobile"])
def browser_context_args(request, browser_context_args, settings):
    """
    Configures the browser context arguments for the session.
    Sets the base URL and viewport size.
    Parameterized for desktop and mobile.

    Args:
        browser_context_args: Default arguments from pytest-playwright.

    Returns:
        Updated dictionary of context arguments.
    """
    if request.param == "mobile":
        return {
            **browser_context_args,
            "base_url": settings.translator_url,
            "viewport": {"width": 375, "height": 667},
            "is_mobile": True,
            "has_touch": True,
        }
    else:
        return {
            **browser_context_args,
            "base_url": settings.translator_url,
            "viewport": {"width": 1280, "height": 720},
        }


@pytest.fixture(scope="session")
def browser_type_launch_args(browser_type_launch_args):
    """
    Configures the browser launch arguments.
    Keeps Chromium's translate bar off the page so it never adds text to the surface.

    Args:
        browser_type_launch_args: Default launch arguments.

    Returns:
        Updated dictionary of launch arguments.
    """
    return {
        **browser_type_launch_args,
        "args": [*browser_type_launch_args.get("args", []), *BROWSER_LAUNCH_ARGS],
    }


@pytest.fixture(scope="session")
def translator_available(settings):
    """
    Skips the requesting test when the translator site does not answer.
    """
    try:
        with urllib.request.urlopen(settings.translator_url, timeout=10) as response:
            status = response.status
    except urllib.error.HTTPError as e:
        status = e.code
    except (urllib.error.URLError, OSError) as e:
        pytest.skip(f"Translator at {settings.translator_url} is unreachable: {e}")
    if status >= 500:
        pytest.skip(f"Translator at {settings.translator_url} answered HTTP {status}")
    return settings.translator_url


@pytest.fixture(autouse=True)
def configure_page(request):
    """
    Configures default timeouts for the Page object and assertions.
    Only applies to tests that use the page fixture; pure logic tests never
    start a browser.

    Args:
        request: The pytest request, used to look up the page lazily.
    """
    if "page" not in request.fixturenames:
        yield
        return
    page = request.getfixturevalue("page")
    # Actions and assertions against the synthetic and live pages
    page.set_default_timeout(5000)
    page.set_default_navigation_timeout(30000)
    expect.set_options(timeout=5000)
    # Enable console logging for debugging
    page.on("console", lambda msg: print(f"PAGE LOG: {msg.text}"))
    page.on("pageerror", lambda err: print(f"PAGE ERROR: {err}"))
    yield
