"""Built-in fee schedules.

General jurisdiction courts follow art. 333.19 of the Tax Code of the Russian
Federation, arbitration (commercial) courts follow art. 333.21. Each bracket
covers ``(lower_bound, upper_bound]``, so an amount exactly on a boundary is
charged by the lower tier.
"""

from courtfee.schemas.fee import FeeBracket, FeeSchedule, JurisdictionType

GENERAL_SCHEDULE = FeeSchedule(
    jurisdiction=JurisdictionType.GENERAL,
    applicable_article="ст. 333.19 НК РФ",
    brackets=(
        FeeBracket(
            lower_bound=0,
            upper_bound=20_000,
            marginal_rate=0.04,
            minimum_fee=400,
            formula="4% of the claim amount, not less than 400",
            legal_citation="пп. 1 п. 1 ст. 333.19 НК РФ",
        ),
        FeeBracket(
            lower_bound=20_000,
            upper_bound=100_000,
            marginal_rate=0.03,
            base_offset=800,
            formula="800 + 3% of the amount exceeding 20,000",
            legal_citation="пп. 2 п. 1 ст. 333.19 НК РФ",
        ),
        FeeBracket(
            lower_bound=100_000,
            upper_bound=200_000,
            marginal_rate=0.02,
            base_offset=3_200,
            formula="3,200 + 2% of the amount exceeding 100,000",
            legal_citation="пп. 3 п. 1 ст. 333.19 НК РФ",
        ),
        FeeBracket(
            lower_bound=200_000,
            upper_bound=1_000_000,
            marginal_rate=0.01,
            base_offset=5_200,
            formula="5,200 + 1% of the amount exceeding 200,000",
            legal_citation="пп. 4 п. 1 ст. 333.19 НК РФ",
        ),
        FeeBracket(
            lower_bound=1_000_000,
            base_offset=60_000,
            maximum_fee=60_000,
            formula="60,000",
            legal_citation="пп. 5 п. 1 ст. 333.19 НК РФ",
        ),
    ),
)

ARBITRATION_SCHEDULE = FeeSchedule(
    jurisdiction=JurisdictionType.ARBITRATION,
    applicable_article="ст. 333.21 НК РФ",
    brackets=(
        FeeBracket(
            lower_bound=0,
            upper_bound=100_000,
            marginal_rate=0.04,
            minimum_fee=2_000,
            formula="4% of the claim amount, not less than 2,000",
            legal_citation="пп. 1 п. 1 ст. 333.21 НК РФ",
        ),
        FeeBracket(
            lower_bound=100_000,
            upper_bound=500_000,
            marginal_rate=0.03,
            base_offset=4_000,
            formula="4,000 + 3% of the amount exceeding 100,000",
            legal_citation="пп. 2 п. 1 ст. 333.21 НК РФ",
        ),
        FeeBracket(
            lower_bound=500_000,
            upper_bound=1_500_000,
            marginal_rate=0.02,
            base_offset=16_000,
            formula="16,000 + 2% of the amount exceeding 500,000",
            legal_citation="пп. 3 п. 1 ст. 333.21 НК РФ",
        ),
        FeeBracket(
            lower_bound=1_500_000,
            upper_bound=10_000_000,
            marginal_rate=0.01,
            base_offset=36_000,
            formula="36,000 + 1% of the amount exceeding 1,500,000",
            legal_citation="пп. 4 п. 1 ст. 333.21 НК РФ",
        ),
        FeeBracket(
            lower_bound=10_000_000,
            upper_bound=500_000_000,
            marginal_rate=0.005,
            base_offset=121_000,
            formula="121,000 + 0.5% of the amount exceeding 10,000,000",
            legal_citation="пп. 5 п. 1 ст. 333.21 НК РФ",
        ),
        FeeBracket(
            lower_bound=500_000_000,
            base_offset=200_000,
            maximum_fee=200_000,
            formula="200,000",
            legal_citation="пп. 6 п. 1 ст. 333.21 НК РФ",
        ),
    ),
)
