"""Built-in exemption catalog (arts. 333.36, 333.37 of the Tax Code)."""

from courtfee.schemas.fee import DiscountType, ExemptionCategory, JurisdictionType

EXEMPTION_CATEGORIES: tuple[ExemptionCategory, ...] = (
    ExemptionCategory(
        id="disabled_1_2",
        name="Disabled persons, group I-II",
        description="Disabled persons of group I or II, disabled children, disabled since childhood",
        applicable_courts=(JurisdictionType.GENERAL,),
        discount_type=DiscountType.FIXED,
        discount_value=25_000,
        legal_citation="п.2 ст.333.36 НК РФ",
    ),
    ExemptionCategory(
        id="veterans",
        name="Combat veterans",
        description="Combat veterans and veterans of military service",
        applicable_courts=(JurisdictionType.GENERAL,),
        discount_type=DiscountType.EXEMPT,
        legal_citation="п.3 ст.333.36 НК РФ",
    ),
    ExemptionCategory(
        id="consumer_disputes",
        name="Consumer disputes",
        description="Claims for violation of consumer rights",
        applicable_courts=(JurisdictionType.GENERAL,),
        discount_type=DiscountType.EXEMPT,
        legal_citation="п.2 ст.333.36 НК РФ",
    ),
    ExemptionCategory(
        id="pensioners",
        name="Pensioners",
        description="Pensioners in claims against the state and non-state pension funds",
        applicable_courts=(JurisdictionType.GENERAL,),
        discount_type=DiscountType.EXEMPT,
        legal_citation="п.2 ст.333.36 НК РФ",
    ),
    ExemptionCategory(
        id="disabled_arbitration",
        name="Disabled persons, group I-II (arbitration)",
        description="Disabled persons of group I or II in arbitration courts",
        applicable_courts=(JurisdictionType.ARBITRATION,),
        discount_type=DiscountType.FIXED,
        discount_value=55_000,
        legal_citation="п.2 ст.333.37 НК РФ",
    ),
)
