import os
import subprocess
import sys

from singlish_verification.config import Settings

SUITE_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    """
    Runs the Singlish verification suite with pytest, in parallel by default.

    Works from any directory, including as the installed `singlish-verify-all`
    script. Extra arguments go straight to pytest, e.g. `--live --settle-ms 3000`.
    """
    args = sys.argv[1:]
    live = "--live" in args or Settings.from_env().live
    print(f"🚀 Running Singlish verification tests ({'live site included' if live else 'offline only'})...")

    cmd = [sys.executable, "-m", "pytest", SUITE_DIR, "--rootdir", os.path.dirname(SUITE_DIR)]

    # Each xdist worker gets its own browser and context
    if not any(arg.startswith("-n") or arg.startswith("--numprocesses") for arg in args):
        cmd.extend(["-n", "auto"])

    cmd.extend(args)

    print(f"Executing: {' '.join(cmd)}")
    result = subprocess.run(cmd)
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
