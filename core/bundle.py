import logging
from typing import List, Optional

from core.cable import Cable
from core.conductor import Conductor
from core.conduitable import DEFAULT_AMBIENT_F, Conduitable, ambient_out_of_range
from core.errors import ContainmentError
from core.messages import ERROR150, ERROR151, ResultMessages
from core.models import ConductiveMetal, Size
from standards.nec_logic import ReferenceTables
from standards.nec_tables import BUNDLE_MAX_LENGTH_IN

logger = logging.getLogger(__name__)

RELAXED_RULE_4_MAX_CCC = 20
RELAXED_RULE_4_MAX_CABLE_CCC = 3


class Bundle:
    """
    Conductors and cables grouped in free air (no raceway), e.g. cables stacked
    or bundled along their run for ``bundling_length`` inches.
    """

    def __init__(self, ambient_temperature_f: float = DEFAULT_AMBIENT_F, bundling_length: float = 0,
                 tables: Optional[ReferenceTables] = None):
        if ambient_out_of_range(ambient_temperature_f):
            raise ValueError(f"Ambient temperature must be >= 5°F and <= 185°F, got {ambient_temperature_f}")
        self._ambient_temperature_f = ambient_temperature_f
        self.tables = tables or ReferenceTables()
        self.messages = ResultMessages()
        self._members: List[Conduitable] = []
        self.bundling_length = bundling_length

    @property
    def ambient_temperature_f(self) -> float:
        return self._ambient_temperature_f

    @property
    def bundling_length(self) -> float:
        """Inches."""
        return self._bundling_length

    @bundling_length.setter
    def bundling_length(self, value: float):
        self.messages.check(value is None or value < 0, ERROR151)
        self._bundling_length = value

    def add(self, conduitable: Optional[Conduitable]) -> None:
        """Same admission contract as Conduit.add."""
        if conduitable is None:
            self.messages.add(ERROR150)
            return
        if self.has_conduitable(conduitable):
            return
        if not conduitable.is_free():
            raise ContainmentError(f"{conduitable.description()} already belongs to a conduit or bundle.")
        conduitable.ambient_temperature_f = self._ambient_temperature_f
        conduitable._attach_bundle(self)
        self._members.append(conduitable)
        logger.debug("Added %s to bundle", conduitable.description())

    def has_conduitable(self, conduitable: Conduitable) -> bool:
        return any(member is conduitable for member in self._members)

    def conduitables(self) -> List[Conduitable]:
        return list(self._members)

    def is_empty(self) -> bool:
        return not self._members

    def conductor_count(self) -> int:
        return len(self._members)

    def current_carrying_count(self) -> int:
        return sum(member.current_carrying_count() for member in self._members)

    def _cables(self) -> List[Cable]:
        return [m for m in self._members if isinstance(m, Cable)]

    @staticmethod
    def _is_eligible_cable(cable: Cable) -> bool:
        return cable.cable_type is not None and cable.cable_type.relaxed_rule_eligible and not cable.jacketed

    def complies_with_relaxed_rule_4(self) -> bool:
        """
        NEC 310.15(B)(3)(a)(4): no more than 20 current-carrying conductors, all cables AC or MC
        without an overall jacket and with at most 3 current-carrying conductors, and every
        cable and bare conductor 12 AWG copper.
        """
        if self.current_carrying_count() > RELAXED_RULE_4_MAX_CCC:
            return False
        for member in self._members:
            if member.size is not Size.AWG_12 or member.metal is not ConductiveMetal.COPPER:
                return False
            if isinstance(member, Cable):
                if not self._is_eligible_cable(member):
                    return False
                if member.current_carrying_count() > RELAXED_RULE_4_MAX_CABLE_CCC:
                    return False
        return True

    def complies_with_relaxed_rule_5(self) -> bool:
        """
        NEC 310.15(B)(3)(a)(5): bundled longer than 24 in, more than 20 current-carrying
        conductors, and all cables AC or MC without an overall jacket.
        """
        if self._bundling_length is None or self._bundling_length <= BUNDLE_MAX_LENGTH_IN:
            return False
        if self.current_carrying_count() <= RELAXED_RULE_4_MAX_CCC:
            return False
        return all(self._is_eligible_cable(cable) for cable in self._cables())

    def conductors(self) -> List[Conductor]:
        return [m for m in self._members if isinstance(m, Conductor)]

    def __repr__(self) -> str:
        return f"<Bundle members={len(self._members)} length={self._bundling_length}>"
