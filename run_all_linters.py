#!/usr/bin/env python3
"""Run the formatters, linters and the test suite in one go.

Steps: black, isort, ruff, pylint, pytest. Output of failing steps is
repeated at the end.
"""

from pathlib import Path
import subprocess
import sys

TARGETS = ["photo_classifier", "tests"]

COMMANDS = [
    (["python", "-m", "black", *TARGETS, "--check"], "black"),
    (["python", "-m", "isort", *TARGETS, "--check-only"], "isort"),
    (["python", "-m", "ruff", "check", *TARGETS], "ruff"),
    (["python", "-m", "pylint", "photo_classifier"], "pylint"),
    (["python", "-m", "pytest", "-q"], "pytest"),
]


def run_command(cmd: list[str], name: str) -> tuple[bool, str]:
    """Run `cmd` from the project root and return (success, combined output)."""
    print(f"\n{'=' * 60}\n{name}: {' '.join(cmd)}\n{'=' * 60}")
    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, check=False, cwd=Path(__file__).parent
        )
    except OSError as e:
        print(f"could not start {name}: {e}")
        return False, str(e)

    output = result.stdout + result.stderr
    ok = result.returncode == 0
    print("ok" if ok else "FAILED")
    if output.strip():
        print(output)
    return ok, output


def main() -> None:
    results = [(name, *run_command(cmd, name)) for cmd, name in COMMANDS]

    print(f"\n{'=' * 60}\nsummary\n{'=' * 60}")
    for name, ok, _ in results:
        print(f"{name:<8} {'passed' if ok else 'FAILED'}")

    failed = [(name, output) for name, ok, output in results if not ok]
    for name, output in failed:
        if output.strip():
            print(f"\n--- {name} ---\n{output}")

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
