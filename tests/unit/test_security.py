"""Unit tests for the security projection."""

import pytest

from roi_engine.domain.calculator.security import project_security


class TestProjectSecurity:

    def test_length_is_years_plus_one(self, security_params):
        assert len(project_security(security_params, 10)) == 11

    def test_zero_years(self, security_params):
        assert project_security(security_params, 0) == [10000]

    def test_known_compounding(self, security_params):
        params = security_params.model_copy(update={"annual_return": 0.1})
        values = project_security(params, 3)
        assert values == pytest.approx([10000, 11000, 12100, 13310])

    def test_year_zero_is_net_of_fee(self, security_params):
        params = security_params.model_copy(update={"one_time_fee": 250})
        assert project_security(params, 5)[0] == 9750

    def test_fee_above_investment_is_not_clamped(self, security_params):
        """Bounds belong to validation; the projector just computes."""
        params = security_params.model_copy(update={"one_time_fee": 12000})
        assert project_security(params, 1)[0] == -2000

    def test_zero_return_is_flat(self, security_params):
        params = security_params.model_copy(update={"annual_return": 0.0, "one_time_fee": 100})
        assert project_security(params, 5) == pytest.approx([9900] * 6)

    def test_expense_ratio_drags_return(self, security_params):
        params = security_params.model_copy(update={"annual_return": 0.08, "expense_ratio": 0.01})
        values = project_security(params, 2)
        assert values[2] == pytest.approx(10000 * 1.07 ** 2)

    def test_reinvested_dividends_compound(self, security_params):
        params = security_params.model_copy(update={"annual_return": 0.05, "dividend_yield": 0.02})
        values = project_security(params, 10)
        assert values[10] == pytest.approx(10000 * 1.07 ** 10)

    def test_cash_dividends_use_prior_year_balance(self, security_params):
        params = security_params.model_copy(
            update={"annual_return": 0.1, "dividend_yield": 0.02, "reinvest_dividends": False}
        )
        values = project_security(params, 2)
        # Year 1: principal 11000, dividend 2% of 10000 = 200
        assert values[1] == pytest.approx(11200)
        # Year 2: principal 12100, dividends 200 + 2% of 11000 = 420
        assert values[2] == pytest.approx(12520)

    def test_reinvesting_beats_cash_dividends(self, security_params):
        reinvest = security_params.model_copy(update={"dividend_yield": 0.03})
        cash = reinvest.model_copy(update={"reinvest_dividends": False})
        reinvested = project_security(reinvest, 20)
        held = project_security(cash, 20)
        assert reinvested[0] == held[0]
        for year in range(2, 21):
            assert reinvested[year] > held[year]

    def test_total_loss_rate_does_not_break(self, security_params):
        """-100% return with cash dividends must not divide by zero."""
        params = security_params.model_copy(
            update={"annual_return": -1.0, "dividend_yield": 0.02, "reinvest_dividends": False}
        )
        values = project_security(params, 3)
        assert values == pytest.approx([10000, 200, 200, 200])

    def test_input_not_mutated(self, security_params):
        before = security_params.model_dump()
        project_security(security_params, 5)
        assert security_params.model_dump() == before
