"""
Lint the Amoud sources.

Runs flake8 and pylint over the interpreter package and the CLI entry point,
skipping the test suite. Each tool runs even if an earlier one reports
problems; the exit code is non-zero when any of them failed.
"""
import argparse
import os
import subprocess
import sys


# Project root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

LINT_TARGETS = [
    os.path.join(BASE_DIR, 'amoudlang'),
    os.path.join(BASE_DIR, 'amoud.py'),
]
MAX_LINE_LENGTH = 110

TOOLS = {
    'flake8': [f"--max-line-length={MAX_LINE_LENGTH}", "--exclude=tests"],
    'pylint': [f"--max-line-length={MAX_LINE_LENGTH}", "--ignore=tests"],
}


def run_tool(name: str) -> int:
    """
    Run one linter over the targets and return its exit code.

    Args:
        name (str): A key of ``TOOLS``.
    """
    print(f"Running {name}...")
    result = subprocess.run([name, *LINT_TARGETS, *TOOLS[name]], check=False)
    if result.returncode != 0:
        print(f"{name} reported problems (exit code {result.returncode})")
    return result.returncode


def main(argv: list[str] | None = None) -> int:
    """
    Parse arguments and run the selected linters.
    """
    parser = argparse.ArgumentParser(
        description="Lint the Amoud sources.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "tools",
        nargs="*",
        help=f"Linters to run, any of {', '.join(TOOLS)} (default: all)",
    )
    args = parser.parse_args(argv)
    unknown = [name for name in args.tools if name not in TOOLS]
    if unknown:
        parser.error(f"unknown linter(s): {', '.join(unknown)}")

    failed = [name for name in (args.tools or TOOLS) if run_tool(name) != 0]
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
