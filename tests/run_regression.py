"""Run dice duel regression scenarios outside pytest.

Usage:
    python tests/run_regression.py                 # every scenario
    python tests/run_regression.py crit knockout   # names containing a fragment
    python tests/run_regression.py --list
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from regression_suite import SCENARIOS, run_all, select


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run dice duel regression scenarios.")
    parser.add_argument("fragments", nargs="*", help="run only scenarios whose name contains one of these")
    parser.add_argument("--list", action="store_true", help="print scenario names and exit")
    args = parser.parse_args(argv)

    if args.list:
        for scenario in SCENARIOS:
            print(scenario.__name__)
        return 0

    chosen, unmatched = select(args.fragments)
    if unmatched:
        print(f"No scenario matches: {', '.join(unmatched)}", file=sys.stderr)
        return 2

    results = run_all(chosen)
    for name, ok, reason in results:
        print(f"PASS: {name}" if ok else f"FAIL: {name} -> {reason}")

    failed = sum(1 for _, ok, _ in results if not ok)
    if failed:
        print(f"{failed} of {len(results)} scenarios failed.")
        return 1
    print(f"All {len(results)} scenarios passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
