#!/usr/bin/env python3
"""
Kazuyomi — Demo
================

Runs the reading pipeline over a fixed set of numeric strings and prints
each reading with the mode the pipeline chose.

Usage:
    python main.py
"""

from __future__ import annotations

import logging
import sys

from kazuyomi.models import ReadingMode, ReadingReport
from kazuyomi.pipeline import NumberReader


# ─── Sample Inputs: One Per Rule ─────────────────────────────────────

SAMPLES = [
    "0",
    "100",
    "666",
    "8888",
    "1_0000_0000",
    "1,234,567,890",
    "1_0000_0000_0000",
    "10_0000_0000_0000_0000",
    "0.10",
    "10.1",
    ".1",
    "0.",
    "-42.195",
    "+1",
    "0120",
    "127.0.0.1",
    "1_2345_6789_0123_4567_8901",
]


# ─── ANSI Color Constants ───────────────────────────────────────────

_YELLOW = "\033[93m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_report(report: ReadingReport) -> None:
    """Print one reading, colored by mode."""
    if report.mode is ReadingMode.LITERAL:
        mode = f"{_YELLOW}LITERAL ({report.reason.value}){_RESET}"
    else:
        mode = f"{_GREEN}STRUCTURED{_RESET}"
    print(f"  {_BOLD}{report.input}{_RESET}  {_DIM}→{_RESET}  {mode}")
    print(f"    {report.reading}")


# ─── Main ────────────────────────────────────────────────────────────


def main():
    """Read every sample and print the results."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print(f"\n{'=' * _WIDTH}")
    print(f"{_BOLD}{_CYAN}  KAZUYOMI READINGS{_RESET}")
    print(f"{'=' * _WIDTH}")

    reader = NumberReader()
    for sample in SAMPLES:
        print_report(reader.run(sample))

    print(f"{'=' * _WIDTH}\n")
    sys.exit(0)


if __name__ == "__main__":
    main()
