# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Sale tax estimator unit tests."""

import pytest

from rentwise.core.primitives import (
    FEDERAL_INCOME_BRACKETS_SINGLE,
    LTCG_BRACKETS_SINGLE,
    FilingStatusEnum,
    GlobalSettings,
    TaxSettings,
)
from rentwise.valuation import calculate_tax_estimate, get_marginal_tax_rate, progressive_tax
from tests.conftest import create_test_property, create_test_tax_inputs


class TestMarginalTaxRate:
    @pytest.mark.parametrize(
        "income, status, expected",
        [
            (10_000.0, FilingStatusEnum.SINGLE, 0.10),
            (75_000.0, FilingStatusEnum.SINGLE, 0.22),
            (50_000.0, FilingStatusEnum.MARRIED_FILING_JOINTLY, 0.12),
            (300_000.0, FilingStatusEnum.MARRIED_FILING_JOINTLY, 0.24),
            (1_000_000.0, FilingStatusEnum.SINGLE, 0.37),
            (0.0, FilingStatusEnum.SINGLE, 0.10),
        ],
    )
    def test_bracket_lookup(self, income, status, expected):
        assert get_marginal_tax_rate(income, status) == expected

    def test_lower_bound_belongs_to_upper_bracket(self):
        assert get_marginal_tax_rate(11_600.0, FilingStatusEnum.SINGLE) == 0.12

    def test_accepts_status_value(self):
        assert get_marginal_tax_rate(75_000.0, "single") == 0.22

    @pytest.mark.parametrize(
        "status",
        [FilingStatusEnum.HEAD_OF_HOUSEHOLD, FilingStatusEnum.MARRIED_FILING_SEPARATELY],
    )
    def test_other_statuses_use_single_table(self, status):
        assert get_marginal_tax_rate(50_000.0, status) == 0.22


class TestProgressiveTax:
    def test_zero_income(self):
        assert progressive_tax(0.0, LTCG_BRACKETS_SINGLE) == 0.0

    def test_fills_brackets_in_order(self):
        # 10% of 11,600 plus 12% of the remaining 8,400
        assert progressive_tax(20_000.0, FEDERAL_INCOME_BRACKETS_SINGLE) == pytest.approx(2_168.0)

    def test_top_bracket_is_unbounded(self):
        tax = progressive_tax(1_000_000.0, LTCG_BRACKETS_SINGLE)
        assert tax == pytest.approx(0.15 * (518_900 - 47_025) + 0.20 * (1_000_000 - 518_900))


class TestDepreciation:
    def test_straight_line_depreciation(self):
        property = create_test_property(years_owned=5.0)
        tax_inputs = create_test_tax_inputs(
            depreciable_value=350_000.0, land_value=70_000.0, improvements_cost=0.0
        )

        result = calculate_tax_estimate(property, tax_inputs)

        # 280,000 / 27.5 * 5
        assert result.depreciation_taken == pytest.approx(50_909.09, abs=0.01)

    def test_depreciation_capped_at_base(self):
        property = create_test_property(years_owned=30.0)
        tax_inputs = create_test_tax_inputs(
            depreciable_value=280_000.0, land_value=0.0, improvements_cost=0.0
        )

        result = calculate_tax_estimate(property, tax_inputs)

        assert result.depreciation_taken == 280_000.0

    def test_adjusted_basis(self):
        property = create_test_property(purchase_price=300_000.0, years_owned=5.0)
        tax_inputs = create_test_tax_inputs(
            depreciable_value=280_000.0, land_value=60_000.0, improvements_cost=20_000.0
        )

        result = calculate_tax_estimate(property, tax_inputs)

        assert result.adjusted_basis == pytest.approx(276_363.64, abs=0.01)

    def test_custom_recovery_period(self):
        settings = GlobalSettings(tax=TaxSettings(depreciation_years=39.0))
        property = create_test_property(years_owned=1.0)
        tax_inputs = create_test_tax_inputs(
            depreciable_value=390_000.0, land_value=0.0, improvements_cost=0.0
        )

        result = calculate_tax_estimate(property, tax_inputs, settings)

        assert result.depreciation_taken == pytest.approx(10_000.0)


class TestSaleEstimate:
    @pytest.fixture
    def gain_estimate(self):
        property = create_test_property(
            purchase_price=300_000.0, current_market_value=500_000.0, years_owned=5.0
        )
        tax_inputs = create_test_tax_inputs(
            annual_income=85_000.0,
            depreciable_value=280_000.0,
            land_value=60_000.0,
            improvements_cost=0.0,
            selling_costs=30_000.0,
            state_income_tax_rate=0.05,
        )
        return calculate_tax_estimate(property, tax_inputs)

    def test_gain_split(self, gain_estimate):
        assert gain_estimate.net_sale_price == pytest.approx(470_000.0)
        assert gain_estimate.depreciation_taken == pytest.approx(40_000.0)
        assert gain_estimate.adjusted_basis == pytest.approx(260_000.0)
        assert gain_estimate.capital_gain == pytest.approx(170_000.0)
        assert gain_estimate.depreciation_recapture == pytest.approx(40_000.0)
        assert gain_estimate.total_taxable_gain == pytest.approx(210_000.0)

    def test_federal_components(self, gain_estimate):
        # LTCG: all 170k at 15%; NIIT: 3.8% of the 55k above the single threshold
        assert gain_estimate.estimated_capital_gains_tax == pytest.approx(25_500.0 + 2_090.0)
        # Recapture at the 22% marginal rate, below the 25% cap
        assert gain_estimate.estimated_depreciation_recapture_tax == pytest.approx(8_800.0)
        assert gain_estimate.estimated_total_tax == pytest.approx(36_390.0)

    def test_state_tax_and_net_proceeds(self, gain_estimate):
        assert gain_estimate.estimated_state_tax == pytest.approx(10_500.0)
        assert gain_estimate.net_proceeds_after_tax == pytest.approx(470_000.0 - 36_390.0 - 10_500.0)

    def test_recapture_rate_capped(self):
        property = create_test_property(
            purchase_price=300_000.0, current_market_value=500_000.0, years_owned=5.0
        )
        tax_inputs = create_test_tax_inputs(
            annual_income=400_000.0,
            depreciable_value=280_000.0,
            land_value=60_000.0,
            improvements_cost=0.0,
            selling_costs=30_000.0,
        )

        result = calculate_tax_estimate(property, tax_inputs)

        assert result.estimated_depreciation_recapture_tax == pytest.approx(40_000.0 * 0.25)

    def test_married_filing_jointly_pays_less(self):
        property = create_test_property(
            purchase_price=300_000.0, current_market_value=500_000.0, years_owned=5.0
        )
        single = create_test_tax_inputs(annual_income=85_000.0)
        joint = single.model_copy(update={"filing_status": FilingStatusEnum.MARRIED_FILING_JOINTLY})

        single_tax = calculate_tax_estimate(property, single).estimated_total_tax
        joint_tax = calculate_tax_estimate(property, joint).estimated_total_tax

        assert joint_tax < single_tax

    def test_loss_has_no_gain_or_tax(self):
        property = create_test_property(
            purchase_price=300_000.0, current_market_value=250_000.0, years_owned=2.0
        )
        tax_inputs = create_test_tax_inputs(
            depreciable_value=280_000.0,
            land_value=60_000.0,
            improvements_cost=0.0,
            selling_costs=15_000.0,
        )

        result = calculate_tax_estimate(property, tax_inputs)

        assert result.capital_gain == 0.0
        assert result.depreciation_recapture == 0.0
        assert result.estimated_total_tax == 0.0
        assert result.estimated_state_tax == 0.0
        assert result.net_proceeds_after_tax == pytest.approx(235_000.0)

    def test_net_proceeds_bounded_by_market_value(self):
        property = create_test_property(
            purchase_price=300_000.0, current_market_value=400_000.0, years_owned=3.0
        )
        tax_inputs = create_test_tax_inputs(
            depreciable_value=280_000.0,
            land_value=60_000.0,
            improvements_cost=0.0,
            selling_costs=24_000.0,
            state_income_tax_rate=0.0,
            annual_income=50_000.0,
        )

        result = calculate_tax_estimate(property, tax_inputs)

        assert 0 < result.net_proceeds_after_tax < 400_000.0
        assert result.estimated_state_tax == 0.0
