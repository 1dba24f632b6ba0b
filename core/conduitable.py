from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from core.errors import ContainmentError
from core.messages import ResultMessages
from core.models import ConductiveMetal, Insulation, Location, Size, TemperatureRating
from standards.nec_logic import ReferenceTables
from standards.nec_tables import BUNDLE_MAX_LENGTH_IN, RELAXED_RULE_5_FACTOR

if TYPE_CHECKING:
    from core.bundle import Bundle
    from core.conduit import Conduit

MIN_AMBIENT_F = 5
MAX_AMBIENT_F = 185
DEFAULT_AMBIENT_F = 86


def ambient_out_of_range(temperature) -> bool:
    return temperature is None or not MIN_AMBIENT_F <= temperature <= MAX_AMBIENT_F


class Conduitable(ABC):
    """
    Capability shared by a single conductor and a cable: anything that can be placed
    in a conduit or a bundle and derated for ambient temperature and grouping.

    A conduitable is free, in exactly one conduit, or in exactly one bundle. The
    container is recorded when the conduitable is admitted and is never cleared.
    """

    def __init__(self, tables: Optional[ReferenceTables] = None):
        self._tables = tables or ReferenceTables()
        self._conduit: Optional["Conduit"] = None
        self._bundle: Optional["Bundle"] = None
        self.messages = ResultMessages()

    # --- Attributes every conduitable exposes ---

    @property
    @abstractmethod
    def size(self) -> Optional[Size]:
        """Size of the (phase) conductor."""

    @property
    @abstractmethod
    def metal(self) -> Optional[ConductiveMetal]:
        pass

    @property
    @abstractmethod
    def insulation(self) -> Optional[Insulation]:
        pass

    @property
    @abstractmethod
    def length(self) -> float:
        """Length in feet."""

    @property
    @abstractmethod
    def ambient_temperature_f(self) -> float:
        pass

    @abstractmethod
    def insulated_area(self) -> float:
        """Cross-section area in in² used for raceway fill."""

    @abstractmethod
    def current_carrying_count(self) -> int:
        pass

    @abstractmethod
    def copy(self) -> "Conduitable":
        """A duplicate of this object in free air (no conduit, no bundle)."""

    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def _own_rooftop_distance(self) -> float:
        pass

    # --- Containment ---

    @property
    def tables(self) -> ReferenceTables:
        """The container's tables while contained, so every member derates under one edition."""
        if self._conduit is not None:
            return self._conduit.tables
        if self._bundle is not None:
            return self._bundle.tables
        return self._tables

    @property
    def conduit(self) -> Optional["Conduit"]:
        return self._conduit

    @property
    def bundle(self) -> Optional["Bundle"]:
        return self._bundle

    def has_conduit(self) -> bool:
        return self._conduit is not None

    def has_bundle(self) -> bool:
        return self._bundle is not None

    def is_free(self) -> bool:
        return self._conduit is None and self._bundle is None

    def _ensure_free(self, action: str) -> None:
        if not self.is_free():
            raise ContainmentError(
                f"Cannot {action} of {self.description()}: it belongs to a conduit or bundle."
            )

    def _attach_conduit(self, conduit: "Conduit") -> None:
        self._ensure_free("add to a conduit")
        self._conduit = conduit

    def _attach_bundle(self, bundle: "Bundle") -> None:
        self._ensure_free("add to a bundle")
        self._bundle = bundle

    # --- Derating ---

    def has_errors(self) -> bool:
        return self.messages.has_errors()

    def temperature_rating(self, location: Location = Location.DRY) -> Optional[TemperatureRating]:
        if self.insulation is None:
            return None
        return self.tables.temperature_rating(self.insulation, location)

    def rooftop_distance_in_effect(self) -> float:
        if self._conduit is not None:
            return self._conduit.rooftop_distance
        return self._own_rooftop_distance()

    def is_rooftop_condition(self) -> bool:
        if self._conduit is not None:
            return self._conduit.is_rooftop_condition()
        return self.tables.is_rooftop_condition(self._own_rooftop_distance())

    def rooftop_adder(self, insulation: Optional[Insulation] = None) -> int:
        return self.tables.rooftop_adder(self.rooftop_distance_in_effect(), insulation or self.insulation)

    def correction_factor(self, insulation: Optional[Insulation] = None) -> float:
        """
        NEC 310.15(B)(2)(a) multiplier at the ambient temperature plus any rooftop adder.
        ``insulation`` substitutes the insulation whose rating column is read, and whose
        rooftop exemption applies.
        """
        if self.has_errors():
            return 0.0
        insulation = insulation or self.insulation
        rating = self.tables.temperature_rating(insulation)
        return self.tables.correction_factor(self.ambient_temperature_f + self.rooftop_adder(insulation), rating)

    def adjustment_factor(self) -> float:
        """NEC 310.15(B)(3)(a) multiplier for the grouping this object is part of."""
        if self.has_errors():
            return 0.0
        if self._conduit is not None:
            if self._conduit.is_nipple:
                return 1.0
            return self.tables.adjustment_factor(self._conduit.current_carrying_count())
        if self._bundle is not None:
            return self._bundle_adjustment_factor()
        return 1.0

    def _bundle_adjustment_factor(self) -> float:
        if self._bundle.complies_with_relaxed_rule_4():
            return 1.0
        if self._bundle.complies_with_relaxed_rule_5():
            return RELAXED_RULE_5_FACTOR
        if (self._bundle.bundling_length or 0) <= BUNDLE_MAX_LENGTH_IN:
            return 1.0
        return self.tables.adjustment_factor(self._bundle.current_carrying_count())

    def compound_factor(self, termination_rating: Optional[TemperatureRating] = None) -> float:
        """
        Correction times adjustment. With a termination rating, the correction factor is read
        for the insulation representative of that rating (TW, THW or THHW).
        """
        if termination_rating is None:
            return self.correction_factor() * self.adjustment_factor()
        insulation = self.tables.insulation_for_rating(termination_rating)
        return self.correction_factor(insulation) * self.adjustment_factor()

    def table_ampacity(self, rating: Optional[TemperatureRating] = None) -> float:
        if self.has_errors():
            return 0.0
        return self.tables.ampacity(self.size, self.metal, rating or self.temperature_rating())

    def corrected_and_adjusted_ampacity(self, termination_rating: Optional[TemperatureRating] = None) -> float:
        """
        Table 310.16 ampacity times the compound factor. A termination rating below the
        insulation rating limits both the ampacity column and the correction column.
        """
        if self.has_errors():
            return 0.0
        if termination_rating is None:
            return self.table_ampacity() * self.compound_factor()
        rating = min(self.temperature_rating(), termination_rating)
        return self.table_ampacity(rating) * self.compound_factor(rating)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.description()}>"
