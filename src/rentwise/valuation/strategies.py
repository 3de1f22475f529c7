# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Catalog of common strategies for deferring or reducing tax on a rental sale."""

from __future__ import annotations

from typing import Optional, Tuple

from ..core.primitives import Model


class TaxStrategy(Model):
    """Educational summary of one tax mitigation strategy."""

    id: str
    name: str
    summary: str
    description: str
    requirements: Tuple[str, ...] = ()
    benefits: Tuple[str, ...] = ()
    considerations: Tuple[str, ...] = ()
    learn_more_url: Optional[str] = None


TAX_MITIGATION_STRATEGIES: Tuple[TaxStrategy, ...] = (
    TaxStrategy(
        id="1031-exchange",
        name="1031 Exchange (Like-Kind Exchange)",
        summary="Defer capital gains by reinvesting in similar property",
        description=(
            "Defers capital gains taxes when an investment property is sold and the "
            "proceeds are reinvested into another like-kind property. The tax is "
            "postponed until a later sale without another exchange."
        ),
        requirements=(
            "Must be investment or business property (not primary residence)",
            "Must identify replacement property within 45 days",
            "Must close on replacement property within 180 days",
            "Must use a qualified intermediary (cannot touch the funds)",
            "Replacement property must be of equal or greater value",
            "All equity must be reinvested to fully defer taxes",
        ),
        benefits=(
            "Defer 100% of capital gains and depreciation recapture taxes",
            "Can be repeated throughout a lifetime",
            "Heirs receive a stepped-up basis",
            "Allows portfolio rebalancing without immediate tax impact",
        ),
        considerations=(
            "Strict timelines must be followed exactly",
            "Complex rules; professional guidance recommended",
            "Boot (cash received) is taxable",
            "State tax treatment may vary",
        ),
        learn_more_url="https://www.irs.gov/pub/irs-pdf/p544.pdf",
    ),
    TaxStrategy(
        id="primary-residence-conversion",
        name="Primary Residence Conversion",
        summary="Convert rental to primary residence for tax exclusion",
        description=(
            "Living in the property as a primary residence for at least 2 of the 5 "
            "years before selling may qualify for the capital gains exclusion of up "
            "to $250,000 (single) or $500,000 (married filing jointly)."
        ),
        requirements=(
            "Must live in property as primary residence for 2 of last 5 years",
            "Cannot have used the exclusion in the past 2 years",
            "Depreciation taken while a rental is still recaptured",
            "Gain from post-2008 non-qualified use periods is still taxed",
        ),
        benefits=(
            "Exclude up to $250K (single) or $500K (MFJ) of capital gains",
            "Can be combined with a 1031 exchange strategy",
        ),
        considerations=(
            "Requires actually living in the property for 2+ years",
            "Non-qualified use periods reduce the exclusion",
            "Lifestyle and market timing considerations",
        ),
        learn_more_url="https://www.irs.gov/publications/p523",
    ),
    TaxStrategy(
        id="installment-sale",
        name="Installment Sale",
        summary="Spread tax liability over multiple years",
        description=(
            "Receiving the sale price over time means gain is taxed as each payment "
            "arrives, which can keep the seller in lower brackets."
        ),
        requirements=(
            "Must receive at least one payment after the tax year of sale",
            "Interest must be charged on deferred payments (AFR minimum)",
            "Depreciation recapture recognized in year of sale",
        ),
        benefits=(
            "Spread capital gains over multiple years",
            "Potentially stay in lower tax brackets",
            "Create a steady income stream",
        ),
        considerations=(
            "Depreciation recapture still taxed in year 1",
            "Risk if buyer defaults on payments",
            "Interest income is fully taxable",
            "NIIT may still apply to investment income",
        ),
        learn_more_url="https://www.irs.gov/publications/p537",
    ),
    TaxStrategy(
        id="opportunity-zone",
        name="Qualified Opportunity Zone Investment",
        summary="Invest gains in designated opportunity zones for tax benefits",
        description=(
            "Investing capital gains into a Qualified Opportunity Fund defers the "
            "original gain, and QOF appreciation is untaxed if held 10+ years."
        ),
        requirements=(
            "Must invest capital gains (not full sale proceeds)",
            "Must invest within 180 days of the gain",
            "Must invest through a Qualified Opportunity Fund",
        ),
        benefits=(
            "Defer original capital gains",
            "No tax on QOF appreciation if held 10+ years",
        ),
        considerations=(
            "Limited time remaining for deferral benefits",
            "Illiquid investment for 10+ years for maximum benefit",
            "QOF investments carry their own risks",
        ),
        learn_more_url=(
            "https://www.irs.gov/credits-deductions/opportunity-zones-frequently-asked-questions"
        ),
    ),
    TaxStrategy(
        id="charitable-remainder-trust",
        name="Charitable Remainder Trust (CRT)",
        summary="Donate property to charity while receiving income",
        description=(
            "Donating appreciated property to a charitable remainder trust avoids "
            "immediate capital gains, provides an income stream for life or a term "
            "of years, and passes the remainder to charity."
        ),
        requirements=(
            "Irrevocable contribution to the trust",
            "Minimum 10% of initial value must go to charity",
            "Payout must be at least 5% annually",
        ),
        benefits=(
            "Avoid immediate capital gains tax",
            "Immediate charitable income tax deduction",
            "Remove assets from estate",
        ),
        considerations=(
            "Assets permanently leave the estate",
            "Complex setup and administration",
            "Income from the CRT is taxable",
        ),
        learn_more_url="https://www.irs.gov/charities-non-profits/charitable-remainder-trusts",
    ),
)


def get_tax_strategy(strategy_id: str) -> TaxStrategy:
    """Look up a strategy by id. Raises KeyError for unknown ids."""
    for strategy in TAX_MITIGATION_STRATEGIES:
        if strategy.id == strategy_id:
            return strategy
    raise KeyError(f"Unknown tax strategy: {strategy_id!r}")
