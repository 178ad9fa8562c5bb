"""Compute payroll for one month, e.g. ``python scripts/run_payroll.py 202406 12345 20001``.

Re-running a month overwrites the previous results for those employees.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.jinji_system.jinji_system.container import build_container
from src.jinji_system.jinji_system.core.exceptions import DomainError


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("month", help="YYYYMM")
    parser.add_argument("employee_ids", nargs="+", type=int)
    parser.add_argument("--basic-salary", type=int, help="set the basic salary instead of resolving it")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    failures = 0
    for employee_id in args.employee_ids:
        try:
            record = container.payroll_service.run_payroll(employee_id, args.month, basic_salary=args.basic_salary)
        except DomainError as e:
            failures += 1
            print(f"FAIL {employee_id}: {e}")
            continue
        print(
            f"OK {employee_id} {record.year_month}: basic={record.basic_salary} "
            f"overtime={record.overtime_pay} deductions={record.total_deduction} net={record.net_salary}"
        )
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
