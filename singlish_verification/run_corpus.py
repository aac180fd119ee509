import argparse
import sys

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from singlish_verification import utils
from singlish_verification.comparator import browser_error_result
from singlish_verification.config import BROWSER_LAUNCH_ARGS, SettleBudget, Settings
from singlish_verification.corpus import CATEGORIES, load_corpus, select
from singlish_verification.errors import CorpusIntegrityError, SurfaceUnavailableError
from singlish_verification.report import VerificationReport

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_FATAL = 2


def parse_args(argv=None):
    defaults = Settings.from_env()
    parser = argparse.ArgumentParser(description="Verify the Singlish translator against the phrase corpus.")
    parser.add_argument("--url", default=defaults.translator_url, help="Translator page URL")
    parser.add_argument("--corpus", default=None, help="Corpus JSON file (default: bundled corpus)")
    parser.add_argument("--settle-ms", type=int, default=defaults.budget.settle_ms)
    parser.add_argument("--grace-ms", type=int, default=defaults.budget.grace_ms)
    parser.add_argument("--normalize-whitespace", action="store_true", default=defaults.normalize_whitespace)
    parser.add_argument("--category", choices=CATEGORIES, default=None)
    parser.add_argument("--id", dest="ids", action="append", default=None,
                        help="Only run this test case id (repeatable)")
    parser.add_argument("--report", default=None, help="Write a JSON report to this path")
    parser.add_argument("--screenshots", action="store_true", help="Save a screenshot for every failure")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    return parser.parse_args(argv)


def verify_record(browser, record, args, budget: SettleBudget, report: VerificationReport):
    """
    Verifies one corpus record in a fresh browser context and adds it to the report.

    Browser errors while typing or reading become a failed result; only a
    translator page that cannot be opened propagates.
    """
    # Fresh context per record so no state leaks between phrases
    context = browser.new_context()
    try:
        page = context.new_page()
        utils.open_translator(page, args.url)
        try:
            result = utils.translate_and_verify(
                page, record.input, record.expected, budget,
                normalize_whitespace=args.normalize_whitespace)
        except PlaywrightError as e:
            result = browser_error_result(record.input, record.expected, e)
        report.add(record, result)
        print(report.format_line(record, result))
        if args.screenshots and not result.passed:
            try:
                path = utils.capture_screenshot(page, f"failure_{record.id}")
                print(f"Screenshot saved to {path}")
            except PlaywrightError as e:
                print(f"Warning: Could not capture screenshot for {record.id}: {e}")
    finally:
        context.close()


def run(args) -> int:
    try:
        records = select(load_corpus(args.corpus), ids=args.ids, category=args.category)
    except CorpusIntegrityError as e:
        print(f"FATAL: {e}")
        return EXIT_FATAL
    if not records:
        print("FATAL: No test cases selected.")
        return EXIT_FATAL

    budget = SettleBudget(settle_ms=args.settle_ms, grace_ms=args.grace_ms)
    report = VerificationReport()
    print(f"Running {len(records)} test case(s) against {args.url}...")

    try:
        with sync_playwright() as p:
            browser = p.chromium.launch(headless=not args.headed, args=list(BROWSER_LAUNCH_ARGS))
            try:
                for record in records:
                    verify_record(browser, record, args, budget, report)
            finally:
                browser.close()
    except (SurfaceUnavailableError, PlaywrightError) as e:
        # Only navigation or browser start-up failures end up here
        print(f"FATAL: {e}")
        return EXIT_FATAL
    finally:
        if report.entries:
            print(report.summary())
        if args.report:
            report.write_json(args.report)
            print(f"Report written to {args.report}")

    return EXIT_OK if report.failed == 0 else EXIT_FAILURES


def main(argv=None):
    sys.exit(run(parse_args(argv)))


if __name__ == "__main__":
    main()
