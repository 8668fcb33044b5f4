"""Tests for the payroll calculator."""

from decimal import Decimal, localcontext

import pytest

from holerite.core.calculators.payroll import (
    calculate_absence_deduction,
    calculate_family_allowance,
    calculate_fgts,
    calculate_overtime,
    calculate_payroll,
    calculate_transportation_voucher,
    calculate_weekly_rest,
)

CENTS = Decimal("0.01")


class TestOvertime:
    """Tests for calculate_overtime."""

    def test_documented_example(self):
        """3000 / 220h with 10 overtime hours at 150%."""
        total = calculate_overtime(Decimal("3000"), 220, 10)
        assert (Decimal("3000") / 220).quantize(Decimal("0.001")) == Decimal("13.636")
        assert (total / 10).quantize(Decimal("0.0001")) == Decimal("20.4545")
        assert total.quantize(CENTS) == Decimal("204.55")

    def test_no_overtime_hours(self):
        assert calculate_overtime(Decimal("3000"), 220, 0) == 0

    def test_no_working_hours(self):
        assert calculate_overtime(Decimal("3000"), 0, 10) == 0


class TestWeeklyRest:
    """Tests for calculate_weekly_rest (DSR)."""

    def test_four_of_twenty_six_days(self):
        assert calculate_weekly_rest(Decimal("260")) == Decimal("40")

    def test_zero_without_overtime(self):
        assert calculate_weekly_rest(Decimal("0")) == 0


class TestTransportationVoucher:
    """Tests for calculate_transportation_voucher."""

    def test_opt_in(self):
        assert calculate_transportation_voucher(Decimal("5000"), True) == Decimal("300.00")

    def test_opt_out(self):
        assert calculate_transportation_voucher(Decimal("5000"), False) == 0


class TestFamilyAllowance:
    """Tests for calculate_family_allowance."""

    @pytest.mark.parametrize(
        "salario,filhos,esperado",
        [
            (Decimal("800"), 2, Decimal("82.74")),
            (Decimal("806.80"), 1, Decimal("41.37")),
            (Decimal("1000"), 2, Decimal("58.32")),
            (Decimal("1212.64"), 1, Decimal("29.16")),
            (Decimal("1212.65"), 3, Decimal("0")),
            (Decimal("500"), 0, Decimal("0")),
        ],
    )
    def test_bands(self, salario, filhos, esperado):
        assert calculate_family_allowance(salario, filhos) == esperado


class TestAbsenceAndFGTS:
    """Tests for absence deduction and FGTS."""

    def test_absence_over_thirty_day_month(self):
        assert calculate_absence_deduction(Decimal("3000"), 3) == Decimal("300")

    def test_no_absences(self):
        assert calculate_absence_deduction(Decimal("3000"), 0) == 0

    def test_fgts_eight_percent(self):
        assert calculate_fgts(Decimal("1000")) == Decimal("80.00")


class TestCalculatePayroll:
    """Tests for the full calculation chain."""

    def test_full_chain(self, make_input):
        """5000 base, 10 overtime hours, 2 dependents, 1 child, voucher."""
        result = calculate_payroll(make_input())

        assert result.total_overtime == Decimal("340.91")
        assert result.weekly_rest == Decimal("52.45")
        assert result.gross_salary == Decimal("5393.36")
        assert result.transportation_voucher_deduction == Decimal("300.00")
        assert result.inss == Decimal("570.88")
        assert result.dependent_deduction == Decimal("379.18")
        assert result.irrf == Decimal("363.61")
        assert result.family_allowance == Decimal("0.00")
        assert result.absence_deduction == Decimal("0.00")
        assert result.fgts == Decimal("431.47")
        assert result.net_salary == Decimal("4158.86")

    def test_net_uses_unrounded_chain(self, make_input):
        """Net is rounded once at the end, not summed from rounded parts."""
        result = calculate_payroll(make_input())
        soma_arredondada = (
            result.gross_salary
            - result.inss
            - result.irrf
            - result.transportation_voucher_deduction
            - result.absence_deduction
        )
        assert soma_arredondada == Decimal("4158.87")
        assert result.net_salary == Decimal("4158.86")

    def test_with_absences_and_no_dependents(self, make_input):
        """3000 base, 10 overtime hours, 3 absences, no voucher."""
        result = calculate_payroll(
            make_input(
                base_salary=Decimal("3000"),
                absence_days=3,
                dependent_count=0,
                child_count=0,
                transportation_voucher_opt_in=False,
            )
        )

        assert result.total_overtime == Decimal("204.55")
        assert result.weekly_rest == Decimal("31.47")
        assert result.gross_salary == Decimal("3236.01")
        assert result.inss == Decimal("355.96")
        assert result.irrf == Decimal("77.21")
        assert result.absence_deduction == Decimal("300.00")
        assert result.fgts == Decimal("258.88")
        assert result.net_salary == Decimal("2502.84")

    def test_family_allowance_and_fgts_not_in_net(self, make_input):
        """Low income: salário família is reported but never added to net."""
        result = calculate_payroll(
            make_input(
                base_salary=Decimal("1000"),
                overtime_hours=0,
                dependent_count=2,
                child_count=2,
            )
        )

        assert result.gross_salary == Decimal("1000.00")
        assert result.inss == Decimal("80.00")
        assert result.irrf == Decimal("0.00")
        assert result.family_allowance == Decimal("58.32")
        assert result.transportation_voucher_deduction == Decimal("60.00")
        assert result.fgts == Decimal("80.00")
        assert result.net_salary == Decimal("860.00")

    def test_without_overtime_gross_equals_base(self, make_input):
        result = calculate_payroll(make_input(overtime_hours=0))

        assert result.total_overtime == Decimal("0.00")
        assert result.weekly_rest == Decimal("0.00")
        assert result.gross_salary == Decimal("5000.00")

    def test_gross_is_sum_of_earnings(self, make_input):
        payroll_input = make_input(base_salary=Decimal("4321.09"), overtime_hours=7)
        overtime = calculate_overtime(payroll_input.base_salary, 220, 7)
        bruto = payroll_input.base_salary + overtime + calculate_weekly_rest(overtime)

        result = calculate_payroll(payroll_input)

        assert result.gross_salary == bruto.quantize(CENTS)

    def test_monetary_fields_have_two_decimals(self, make_input):
        result = calculate_payroll(make_input(absence_days=1))

        for campo in ("gross_salary", "net_salary", "irrf", "absence_deduction", "fgts"):
            assert getattr(result, campo).as_tuple().exponent == -2

    def test_result_keeps_input_fields(self, make_input):
        payroll_input = make_input()
        result = calculate_payroll(payroll_input)

        assert result.payroll_input == payroll_input
        assert result.employee_id == "00123"
        assert result.base_salary == Decimal("5000.00")

    def test_idempotent(self, make_input):
        """Same input gives an identical result every time."""
        payroll_input = make_input()
        primeiro = calculate_payroll(payroll_input)
        segundo = calculate_payroll(payroll_input)

        assert primeiro == segundo
        assert primeiro.model_dump_json() == segundo.model_dump_json()

    def test_recalculating_a_result_gives_same_result(self, make_input):
        result = calculate_payroll(make_input())
        assert calculate_payroll(result) == result

    def test_caller_decimal_context_does_not_leak(self, make_input):
        """A low-precision caller context does not change the outcome."""
        esperado = calculate_payroll(make_input())

        with localcontext() as ctx:
            ctx.prec = 6
            result = calculate_payroll(make_input())

        assert result == esperado

    def test_does_not_mutate_input(self, make_input):
        payroll_input = make_input()
        antes = payroll_input.model_dump()
        calculate_payroll(payroll_input)
        assert payroll_input.model_dump() == antes
