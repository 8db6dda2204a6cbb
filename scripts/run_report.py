#!/usr/bin/env python3
"""Print organisation reports for a company.

Usage locally:
    python -m scripts.run_report                              # every report, sample company
    python -m scripts.run_report --report leaderboard         # one report
    python -m scripts.run_report --report top-sales --top-n 5
    python -m scripts.run_report --report search --departments Sales Engineering --min-total 10000

Reports:
    roster      employees of each department, by name
    totals      total sales per employee, highest first
    top         top salesperson of each department
    idle        employees with no sales
    headcount   departments by number of employees
    top-sales   the N largest individual sales
    leaderboard every sale ranked, with totals
    search      employees in given departments above a sales threshold

The sample company is loaded first when SEED_SAMPLE_DATA is true (default);
loading is idempotent.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

# Ensure the project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from orgledger.config import Settings
from orgledger.facade import OrgLedgerFacade
from orgledger.utils.formatting import format_amount

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("report")

VALID_REPORTS = (
    "roster", "totals", "top", "idle", "headcount",
    "top-sales", "leaderboard", "search", "all",
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print organisation reports.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--report",
        choices=VALID_REPORTS,
        default="all",
        help="Which report to print (default: all)",
    )
    parser.add_argument(
        "--company",
        default=None,
        help="Company name (default: SAMPLE_COMPANY_NAME setting)",
    )
    parser.add_argument("--top-n", type=int, default=None, help="Number of top sales")
    parser.add_argument(
        "--departments",
        nargs="+",
        default=[],
        help="Department names for --report search",
    )
    parser.add_argument("--min-total", type=float, default=0.0, help="Sales threshold for search")
    parser.add_argument("--limit", type=int, default=None, help="Row limit for search/leaderboard")
    return parser.parse_args()


def _print_roster(report: Dict[str, Any], currency: str) -> None:
    print("Employees by department")
    for roster in report["rosters"]:
        print(f"  {roster['department']}")
        if not roster["has_employees"]:
            print("    (no employees)")
        for e in roster["employees"]:
            print(f"    {e['name']} ({e['role']})")


def _print_totals(rows: List[Dict[str, Any]], title: str, currency: str) -> None:
    print(title)
    if not rows:
        print("  (none)")
    for r in rows:
        print(f"  {r['employee']:<20} {r['department'] or '-':<18} "
              f"{format_amount(r['total_sales'], currency):>14}")


def _print_top(report: Dict[str, Any], currency: str) -> None:
    print("Top salesperson per department")
    for t in report["top_salespeople"]:
        if t["employee"] is None:
            print(f"  {t['department']:<18} (no employees)")
        else:
            print(f"  {t['department']:<18} {t['employee']:<20} "
                  f"{format_amount(t['total_sales'], currency):>14}")


def _print_headcount(report: Dict[str, Any]) -> None:
    print("Departments by headcount")
    for h in report["headcount"]:
        print(f"  {h['department']:<18} {h['employee_count']}")


def _print_top_sales(rows: List[Dict[str, Any]], currency: str) -> None:
    print(f"Top {len(rows)} sales")
    for i, s in enumerate(rows, 1):
        print(f"  {i}. {format_amount(s['amount'], currency):>14}  {s['date']}  {s['employee']}")


def _print_leaderboard(board: Dict[str, Any]) -> None:
    print("Sales leaderboard")
    for row in board["rows"]:
        marker = "*" if row["is_podium"] else " "
        print(f" {marker}{row['rank']:>3}. {row['amount_display']:>14}  "
              f"{row['date_display']}  {row['employee']}")
    print(f"  {board['sale_count']} sales, total {board['total_display']}, "
          f"mean {board['mean_display']}")


def main():
    args = parse_args()
    settings = Settings()
    company = args.company or settings.sample_company_name
    currency = settings.currency_symbol
    report_name = args.report

    logger.info("=" * 60)
    logger.info("ORG LEDGER reports")
    logger.info("  Company: %s", company)
    logger.info("  Report:  %s", report_name)
    logger.info("=" * 60)

    with OrgLedgerFacade(settings=settings) as ledger:
        if settings.seed_sample_data:
            ledger.seed_sample_data()

        report = ledger.get_full_report(company)
        if report is None:
            logger.error("Company %r not found", company)
            sys.exit(1)

        if report_name in ("roster", "all"):
            _print_roster(report, currency)
        if report_name in ("totals", "all"):
            _print_totals(report["sales_per_employee"], "Total sales per employee", currency)
        if report_name in ("top", "all"):
            _print_top(report, currency)
        if report_name in ("idle", "all"):
            _print_totals(report["employees_without_sales"], "Employees without sales", currency)
        if report_name in ("headcount", "all"):
            _print_headcount(report)
        if report_name in ("top-sales", "all"):
            _print_top_sales(ledger.get_top_sales(company, n=args.top_n), currency)
        if report_name in ("leaderboard", "all"):
            _print_leaderboard(ledger.get_leaderboard(company, limit=args.limit))
        if report_name == "search":
            rows = ledger.search_employees(
                company, args.departments, min_total=args.min_total, limit=args.limit
            )
            _print_totals(rows, "Matching employees", currency)


if __name__ == "__main__":
    main()
