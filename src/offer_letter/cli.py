"""Offer letter command line interface.

Provides quick access to the compensation calculator:
- Breakdown of monthly components into annual totals
- Allocation of an annual CTC into monthly components
- The salary structure table as it appears in the letter annexure

Usage:
    python -m offer_letter.cli breakdown --basic 30000 --hra 9666 --special 14500
    python -m offer_letter.cli breakdown --basic 30000 --bonus "Joining Bonus=50000"
    python -m offer_letter.cli allocate 650000
    python -m offer_letter.cli table --name "Jane Doe" --position Consultant --annual-ctc 650000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable

from offer_letter.calculators.compensation import CompensationCalculator
from offer_letter.calculators.salary_table import SalaryTableBuilder
from offer_letter.calculators.types import BonusField, CompensationInput
from offer_letter.config import get_settings

logger = logging.getLogger(__name__)


def parse_bonus(s: str) -> BonusField:
    """Parse a LABEL=AMOUNT bonus argument."""
    label, sep, amount = s.rpartition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"bonus must look like LABEL=AMOUNT, got {s!r}")
    return BonusField(label=label.strip(), amount=amount.strip())


class OfferLetterCli:
    """Offer letter Command Line Interface."""

    def __init__(self, calculator: CompensationCalculator | None = None) -> None:
        self.calculator = calculator or CompensationCalculator(get_settings().allocation)
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        parser = argparse.ArgumentParser(
            prog="python -m offer_letter.cli",
            description="Offer letter compensation tools",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Log calculation details to stderr",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # breakdown command
        breakdown = subparsers.add_parser(
            "breakdown",
            help="Compute annual figures and totals from monthly components",
        )
        self._add_compensation_arguments(breakdown)

        # allocate command
        allocate = subparsers.add_parser(
            "allocate",
            help="Split an annual CTC into monthly components",
        )
        allocate.add_argument(
            "annual_ctc",
            type=str,
            help="Annual cost to company",
        )

        # table command
        table = subparsers.add_parser(
            "table",
            help="Print the salary structure table",
        )
        self._add_compensation_arguments(table)
        table.add_argument("--name", type=str, default="", help="Employee name")
        table.add_argument("--position", type=str, default="", help="Designation")
        table.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )

        return parser

    @staticmethod
    def _add_compensation_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--basic", type=str, default="", help="Monthly basic pay")
        parser.add_argument("--hra", type=str, default="", help="Monthly house rent allowance")
        parser.add_argument("--special", type=str, default="", help="Monthly special allowance")
        parser.add_argument(
            "--annual-ctc",
            type=str,
            help="Annual CTC. Alone, it is split into monthly components; "
            "it is always shown as the final total",
        )
        parser.add_argument(
            "--bonus",
            type=parse_bonus,
            action="append",
            default=[],
            help="Annual bonus as LABEL=AMOUNT (repeatable)",
        )

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)

        if parsed.verbose:
            logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

        if not parsed.command:
            self.parser.print_help()
            return 1

        # Dispatch to command handler
        handlers: dict[str, Callable[..., int]] = {
            "breakdown": self._cmd_breakdown,
            "allocate": self._cmd_allocate,
            "table": self._cmd_table,
        }

        handler = handlers.get(parsed.command)
        if handler:
            return handler(parsed)

        print(f"Unknown command: {parsed.command}", file=sys.stderr)
        return 1

    def _compensation_input(self, args: argparse.Namespace) -> CompensationInput:
        """Build calculator input, allocating from the annual CTC when no components are given."""
        basic, hra, special = args.basic, args.hra, args.special
        if args.annual_ctc and not (basic or hra or special):
            split = self.calculator.allocate_annual_to_monthly(args.annual_ctc)
            if not split.is_blank:
                logger.debug("No monthly components given, allocating %s", args.annual_ctc)
                basic = str(split.basic_monthly)
                hra = str(split.hra_monthly)
                special = str(split.special_monthly)

        return CompensationInput(
            basic_pay_monthly=basic,
            house_rent_allowance_monthly=hra,
            special_allowance_monthly=special,
            annual_total_override=args.annual_ctc,
            bonuses=tuple(args.bonus),
        )

    def _cmd_breakdown(self, args: argparse.Namespace) -> int:
        """Print the compensation breakdown as JSON."""
        breakdown = self.calculator.breakdown(self._compensation_input(args))
        self._print_json(breakdown.to_dict())
        return 0

    def _cmd_allocate(self, args: argparse.Namespace) -> int:
        """Print the monthly split as JSON."""
        split = self.calculator.allocate_annual_to_monthly(args.annual_ctc)
        self._print_json(
            {
                "basic_monthly": None if split.is_blank else str(split.basic_monthly),
                "hra_monthly": None if split.is_blank else str(split.hra_monthly),
                "special_monthly": None if split.is_blank else str(split.special_monthly),
            }
        )
        return 0

    def _cmd_table(self, args: argparse.Namespace) -> int:
        """Print the salary structure table."""
        builder = SalaryTableBuilder(self.calculator)
        table = builder.build(
            self._compensation_input(args),
            employee_name=args.name,
            designation=args.position,
        )

        if args.format == "json":
            self._print_json(table.to_dict())
            return 0

        print(table.TITLE)
        print(f"Name: {table.employee_name}    Designation: {table.designation}")
        print("-" * 72)
        print(f"{'(i) Monthly Payments:':<32}{'Per Month':>20}{'Per Annum':>20}")
        for row in table.rows:
            print(f"{row.label:<32}{row.monthly_display:>20}{row.annual_display:>20}")
        return 0

    @staticmethod
    def _print_json(payload: dict[str, Any]) -> None:
        print(json.dumps(payload, indent=2))


def main() -> int:
    """CLI entry point."""
    cli = OfferLetterCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
