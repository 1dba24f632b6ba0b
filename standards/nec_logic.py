import logging
from typing import Optional

from core.errors import TableLookupError
from core.models import (
    ConductiveMetal, Insulation, Location, NECEdition, RacewayMaterial, RacewayType, Size, TemperatureRating, TradeSize,
)
from standards.nec_tables import (
    AC_RESISTANCE_COLUMN, FILL_NIPPLE, FILL_ONE_CONDUCTOR, FILL_OVER_TWO_CONDUCTORS, FILL_TWO_CONDUCTORS,
    INSULATION_RATINGS, NEC_310_16, RATING_INSULATIONS, ROOFTOP_ADDER_2017, ROOFTOP_ADDERS_2014,
    ROOFTOP_EXEMPT_INSULATIONS, ROOFTOP_THRESHOLD_IN, SIZES, TABLE_250_122, TABLE_4_AREAS, TABLE_5_AREAS,
    TABLE_5A_AREAS, TABLE_5A_BARE_AREAS, TABLE_8_PROPERTIES, TABLE_9_AC_RESISTANCE, TABLE_9_REACTANCE, TRADES,
    WET_LOCATION_DOWNGRADES, get_grouping_factor, get_temp_correction,
)

logger = logging.getLogger(__name__)

DEFAULT_EDITION = NECEdition.NEC2014


class ReferenceTables:
    """
    Read-only lookups over the NEC tables, bound to one code edition.
    The edition only changes the rooftop rules; every other table is shared.
    """

    def __init__(self, edition: NECEdition = DEFAULT_EDITION):
        if not isinstance(edition, NECEdition):
            raise TypeError(f"edition must be a NECEdition, got {edition!r}")
        self._edition = edition

    @property
    def edition(self) -> NECEdition:
        return self._edition

    def __repr__(self) -> str:
        return f"ReferenceTables(edition={self._edition.name})"

    # --- Table 310.16 ---

    def ampacity(self, size: Size, metal: ConductiveMetal, rating: TemperatureRating) -> float:
        return float(NEC_310_16[metal][size][rating.value])

    def min_size_for_current(self, current: float, metal: ConductiveMetal,
                             rating: TemperatureRating) -> Optional[Size]:
        """Smallest size whose table ampacity is >= current, or None if even 2000 kcmil is too small."""
        if current <= 0:
            raise TableLookupError(f"current must be > 0, got {current}")
        for size in SIZES:
            if NEC_310_16[metal][size][rating.value] >= current:
                return size
        return None

    # --- Table 310.104(A) ---

    def temperature_rating(self, insulation: Insulation, location: Location = Location.DRY) -> TemperatureRating:
        if location is Location.WET and insulation in WET_LOCATION_DOWNGRADES:
            return TemperatureRating.T75
        return INSULATION_RATINGS[insulation]

    @staticmethod
    def insulation_for_rating(rating: TemperatureRating) -> Insulation:
        return RATING_INSULATIONS[rating]

    # --- Chapter 9, Tables 5, 5A and 8 ---

    def insulated_area(self, size: Size, insulation: Insulation) -> float:
        """Approximate area in in², 0 for sizes or insulations Table 5 does not list."""
        return TABLE_5_AREAS.get(insulation, {}).get(size, 0.0)

    def compact_insulated_area(self, size: Size, insulation: Insulation) -> float:
        return TABLE_5A_AREAS.get(insulation, {}).get(size, 0.0)

    def compact_bare_area(self, size: Size) -> float:
        return TABLE_5A_BARE_AREAS.get(size, 0.0)

    def area_circular_mils(self, size: Size) -> int:
        return TABLE_8_PROPERTIES[size][0]

    def size_for_area(self, area_cm: float) -> Optional[Size]:
        """Smallest size whose cross-section (circular mils) is >= area_cm."""
        if area_cm <= 0:
            raise TableLookupError(f"area must be > 0, got {area_cm}")
        for size in SIZES:
            if TABLE_8_PROPERTIES[size][0] >= area_cm:
                return size
        return None

    def dc_resistance(self, size: Size, metal: ConductiveMetal, copper_coated: bool = False) -> float:
        """Ohms per 1000 ft at 75°C."""
        _, cu_uncoated, cu_coated, al = TABLE_8_PROPERTIES[size]
        if metal is ConductiveMetal.ALUMINUM:
            return al
        return cu_coated if copper_coated else cu_uncoated

    # --- Chapter 9, Table 9 ---

    def ac_resistance(self, size: Size, metal: ConductiveMetal, material: RacewayMaterial) -> float:
        """Ohms to neutral per 1000 ft at 75°C."""
        return TABLE_9_AC_RESISTANCE[size][metal][AC_RESISTANCE_COLUMN[material]]

    def reactance(self, size: Size, magnetic: bool) -> float:
        non_magnetic_xl, magnetic_xl = TABLE_9_REACTANCE[size]
        return magnetic_xl if magnetic else non_magnetic_xl

    # --- Table 310.15(B)(2)(a) and 310.15(B)(3)(c) ---

    def rooftop_threshold(self) -> float:
        return ROOFTOP_THRESHOLD_IN[self._edition]

    def is_rooftop_condition(self, distance: float) -> bool:
        return 0 < distance <= self.rooftop_threshold()

    def rooftop_adder(self, distance: float, insulation: Optional[Insulation] = None) -> int:
        """Temperature adder in °F for a raceway or cable ``distance`` inches above a rooftop."""
        if insulation in ROOFTOP_EXEMPT_INSULATIONS or not self.is_rooftop_condition(distance):
            return 0
        if self._edition is NECEdition.NEC2014:
            for max_distance, adder in ROOFTOP_ADDERS_2014.items():
                if distance <= max_distance:
                    return adder
            return 0
        return ROOFTOP_ADDER_2017

    def correction_factor(self, ambient_f: float, rating: TemperatureRating) -> float:
        return get_temp_correction(ambient_f, rating.value)

    # --- Table 310.15(B)(3)(a) ---

    def adjustment_factor(self, current_carrying: int) -> float:
        if current_carrying < 0:
            raise TableLookupError(f"current-carrying count cannot be negative, got {current_carrying}")
        return get_grouping_factor(current_carrying)

    # --- Chapter 9, Tables 1 and 4 ---

    @staticmethod
    def max_fill_percent(member_count: int, nipple: bool = False) -> int:
        if nipple:
            return FILL_NIPPLE
        if member_count <= 1:
            return FILL_ONE_CONDUCTOR
        if member_count == 2:
            return FILL_TWO_CONDUCTORS
        return FILL_OVER_TWO_CONDUCTORS

    def raceway_area(self, raceway_type: RacewayType, trade_size: TradeSize) -> float:
        """Total internal area in in², 0 if the raceway is not made in that trade size."""
        return TABLE_4_AREAS[raceway_type].get(trade_size, 0.0)

    def trade_size_for_area(self, area: float, raceway_type: RacewayType,
                            minimum: TradeSize = TradeSize.T3_8) -> Optional[TradeSize]:
        """Smallest trade size, not below ``minimum``, whose total area is >= area."""
        if area < 0:
            raise TableLookupError(f"area cannot be negative, got {area}")
        areas = TABLE_4_AREAS[raceway_type]
        for trade in TRADES[TRADES.index(minimum):]:
            if trade in areas and areas[trade] >= area:
                return trade
        logger.debug("No %s trade size holds %.4f in²", raceway_type.label, area)
        return None

    # --- Table 250.122 ---

    def egc_size(self, ocpd_rating: float, metal: ConductiveMetal) -> Size:
        """
        Minimum equipment grounding conductor for an overcurrent device rating.
        Rows are "not exceeding" limits, so a 30 A device takes the 60 A row.
        """
        if ocpd_rating < TABLE_250_122[0][0] or ocpd_rating > TABLE_250_122[-1][0]:
            raise TableLookupError(f"OCPD rating must be within 15 and 6000 A, got {ocpd_rating}")
        for rating, cu_size, al_size in TABLE_250_122:
            if ocpd_rating <= rating:
                return al_size if metal is ConductiveMetal.ALUMINUM else cu_size
        raise TableLookupError(f"No Table 250.122 row for {ocpd_rating} A")
