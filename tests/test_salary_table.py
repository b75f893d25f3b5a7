"""Tests for the salary structure table."""

import dataclasses
from decimal import Decimal

import pytest

from offer_letter.calculators.salary_table import RowKind, SalaryTable
from offer_letter.calculators.types import BonusField, CompensationInput


class TestSalaryTableBuilder:
    """Test salary table layout."""

    def test_rows_without_bonuses(self, table_builder, consultant_input):
        table = table_builder.build(consultant_input, "Roshan Saroj", "Digital Consultant")

        assert table.employee_name == "Roshan Saroj"
        assert table.designation == "Digital Consultant"
        assert [row.label for row in table.rows] == [
            "Basic Pay",
            "House Rent Allowance",
            "Special Allowance",
            "Total Gross Fixed CTC(I)",
            "Total CTC(RO):",
        ]

        basic = table.rows[0]
        assert basic.monthly_display == "30,000"
        assert basic.annual_display == "3,60,000"

        fixed = table.row(RowKind.FIXED_TOTAL)
        assert fixed.monthly_display == "54,166"
        assert fixed.annual_display == "6,49,992"

        grand = table.row(RowKind.GRAND_TOTAL)
        assert grand.monthly_display == ""
        assert grand.annual_display == "6,49,992"

    def test_bonus_rows_and_subtotal(self, table_builder, consultant_input, mixed_bonuses):
        data = CompensationInput(
            basic_pay_monthly=consultant_input.basic_pay_monthly,
            house_rent_allowance_monthly=consultant_input.house_rent_allowance_monthly,
            special_allowance_monthly=consultant_input.special_allowance_monthly,
            bonuses=mixed_bonuses,
        )
        table = table_builder.build(data)

        bonus_rows = [row for row in table.rows if row.kind == RowKind.BONUS]
        assert [row.label for row in bonus_rows] == ["Y"]
        assert bonus_rows[0].annual_display == "1,000"

        subtotal = table.row(RowKind.BONUS_TOTAL)
        assert subtotal.label == "Total CTC(I+II):"
        assert subtotal.annual == Decimal("650992")

        # Bonuses stay out of the rounded total
        assert table.row(RowKind.GRAND_TOTAL).annual == Decimal("649992")
        assert table.rows[-1].kind == RowKind.GRAND_TOTAL

    def test_override_shown_as_grand_total(self, table_builder, consultant_input):
        data = CompensationInput(
            basic_pay_monthly=consultant_input.basic_pay_monthly,
            house_rent_allowance_monthly=consultant_input.house_rent_allowance_monthly,
            special_allowance_monthly=consultant_input.special_allowance_monthly,
            annual_total_override="700000",
        )
        table = table_builder.build(data)

        assert table.row(RowKind.GRAND_TOTAL).annual_display == "7,00,000"
        assert table.row(RowKind.FIXED_TOTAL).annual_display == "6,49,992"

    def test_blank_input_shows_placeholders(self, table_builder):
        table = table_builder.build(CompensationInput(bonuses=(BonusField("Retention Bonus", ""),)))

        assert table.employee_name == "—"
        assert table.designation == "—"
        assert table.row(RowKind.BONUS) is None
        assert table.row(RowKind.BONUS_TOTAL) is None
        for row in table.rows:
            assert row.annual_display == "—"
            if row.monthly is not None:
                assert row.monthly_display == "—"

    def test_to_dict(self, table_builder, consultant_input):
        data = table_builder.build(consultant_input).to_dict()

        assert data["title"] == SalaryTable.TITLE
        assert data["rows"][0] == {
            "kind": "COMPONENT",
            "label": "Basic Pay",
            "monthly": "30000",
            "annual": "360000",
            "monthly_display": "30,000",
            "annual_display": "3,60,000",
        }
        assert data["rows"][-1]["monthly"] is None

    def test_table_is_immutable(self, table_builder, consultant_input):
        """Rows come back as a tuple on a frozen table."""
        table = table_builder.build(consultant_input)

        assert isinstance(table.rows, tuple)
        with pytest.raises(AttributeError):
            table.rows.append(table.rows[0])
        with pytest.raises(dataclasses.FrozenInstanceError):
            table.rows = ()
