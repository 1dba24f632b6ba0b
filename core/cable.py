import math
from typing import List, Optional

from core.conductor import Conductor
from core.conduitable import Conduitable, ambient_out_of_range
from core.errors import VoltageSystemError
from core.messages import (
    ERROR050, ERROR051, ERROR052, ERROR053, ERROR054, ERROR055, ERROR058, ERROR059, ERROR060, ERROR062, ERROR063,
    ERROR064,
)
from core.models import CableType, ConductiveMetal, Insulation, Role, Size
from core.voltage import VoltageSystem
from standards.nec_logic import ReferenceTables

MINIMUM_OUTER_DIAMETER = 0.5  # inches
NO_ROOFTOP = -1.0


class Cable(Conduitable):
    """
    A factory-assembled cable: phase A, optional phases B and C, an optional neutral and
    a grounding conductor, laid out by the voltage system given at construction.

    Cable-level setters fan out to every sub-conductor. Sub-conductor errors are mirrored
    into the cable's own ``messages`` under cable-level codes.
    """

    def __init__(self, voltage_system: VoltageSystem, cable_type: Optional[CableType] = CableType.MC,
                 tables: Optional[ReferenceTables] = None):
        if voltage_system is None:
            raise VoltageSystemError("A cable requires a voltage system.")
        super().__init__(tables)
        self._voltage_system = voltage_system
        self._phase_a = Conductor(tables=self._tables)
        self._phase_b = Conductor(tables=self._tables) if voltage_system.has_phase_b else None
        self._phase_c = Conductor(tables=self._tables) if voltage_system.has_phase_c else None
        self._neutral = None
        if voltage_system.has_neutral:
            role = Role.NEUTRAL_CC if voltage_system.neutral_current_carrying else Role.NEUTRAL_NCC
            self._neutral = Conductor(role=role, tables=self._tables)
        self._grounding = Conductor(role=Role.GROUNDING, tables=self._tables)
        self._jacketed = False
        self._outer_diameter = MINIMUM_OUTER_DIAMETER
        self._rooftop_distance = NO_ROOFTOP
        self.cable_type = cable_type

    def _all_conductors(self) -> List[Conductor]:
        return [c for c in (self._phase_a, self._phase_b, self._phase_c, self._neutral, self._grounding) if c]

    def _phases(self) -> List[Conductor]:
        return [c for c in (self._phase_a, self._phase_b, self._phase_c) if c]

    # --- Sizes and metals ---

    @property
    def size(self) -> Optional[Size]:
        return self._phase_a.size

    @property
    def phase_conductor_size(self) -> Optional[Size]:
        return self._phase_a.size

    @phase_conductor_size.setter
    def phase_conductor_size(self, value: Optional[Size]):
        for phase in self._phases():
            phase.size = value
        if self._voltage_system.hot_and_neutral_only:
            self._neutral.size = value
            self.messages.check(self._neutral.messages.contains(ERROR050.code), ERROR063)
        self.messages.check(self._phase_a.messages.contains(ERROR050.code), ERROR062)

    @property
    def neutral_conductor_size(self) -> Optional[Size]:
        return self._neutral.size if self._neutral else None

    @neutral_conductor_size.setter
    def neutral_conductor_size(self, value: Optional[Size]):
        self._require_neutral()
        self._neutral.size = value
        if self._voltage_system.hot_and_neutral_only:
            self._phase_a.size = value
            self.messages.check(self._phase_a.messages.contains(ERROR050.code), ERROR062)
        self.messages.check(self._neutral.messages.contains(ERROR050.code), ERROR063)

    @property
    def grounding_conductor_size(self) -> Optional[Size]:
        return self._grounding.size

    @grounding_conductor_size.setter
    def grounding_conductor_size(self, value: Optional[Size]):
        self._grounding.size = value
        self.messages.check(value is None, ERROR064)

    @property
    def metal(self) -> Optional[ConductiveMetal]:
        """Metal of the phase and neutral conductors."""
        return self._phase_a.metal

    @metal.setter
    def metal(self, value: Optional[ConductiveMetal]):
        for conductor in self._phases() + ([self._neutral] if self._neutral else []):
            conductor.metal = value
        self.messages.check(value is None, ERROR051)

    @property
    def grounding_metal(self) -> Optional[ConductiveMetal]:
        return self._grounding.metal

    @grounding_metal.setter
    def grounding_metal(self, value: Optional[ConductiveMetal]):
        self._grounding.metal = value
        self.messages.check(value is None, ERROR058)

    # --- Attributes shared by every sub-conductor ---

    @property
    def insulation(self) -> Optional[Insulation]:
        return self._phase_a.insulation

    @insulation.setter
    def insulation(self, value: Optional[Insulation]):
        for conductor in self._all_conductors():
            conductor.insulation = value
        self.messages.check(value is None, ERROR052)

    @property
    def length(self) -> float:
        return self._phase_a.length

    @length.setter
    def length(self, value: float):
        for conductor in self._all_conductors():
            conductor.length = value
        self.messages.check(value is None or value <= 0, ERROR053)

    @property
    def ambient_temperature_f(self) -> float:
        return self._phase_a.ambient_temperature_f

    @ambient_temperature_f.setter
    def ambient_temperature_f(self, value: float):
        self._ensure_free("set the ambient temperature")
        for conductor in self._all_conductors():
            conductor.ambient_temperature_f = value
        self.messages.check(ambient_out_of_range(value), ERROR054)

    @property
    def copper_coated(self) -> Optional[bool]:
        return self._phase_a.copper_coated

    @copper_coated.setter
    def copper_coated(self, value: Optional[bool]):
        for conductor in self._all_conductors():
            conductor.copper_coated = value
        self.messages.check(value is None, ERROR055)

    # --- Cable-only attributes ---

    @property
    def cable_type(self) -> Optional[CableType]:
        return self._cable_type

    @cable_type.setter
    def cable_type(self, value: Optional[CableType]):
        self.messages.check(value is None, ERROR059)
        self._cable_type = value

    @property
    def jacketed(self) -> bool:
        return self._jacketed

    @jacketed.setter
    def jacketed(self, value: bool):
        self._jacketed = bool(value)

    @property
    def outer_diameter(self) -> float:
        """Inches."""
        return self._outer_diameter

    @outer_diameter.setter
    def outer_diameter(self, value: float):
        self.messages.check(value is None or value < MINIMUM_OUTER_DIAMETER, ERROR060)
        self._outer_diameter = value

    @property
    def rooftop_distance(self) -> float:
        """Inches above the roof; negative when the cable is not on a rooftop."""
        return self._rooftop_distance

    @rooftop_distance.setter
    def rooftop_distance(self, value: float):
        self._ensure_free("set the rooftop distance")
        self._rooftop_distance = value

    def reset_rooftop_condition(self) -> None:
        self.rooftop_distance = NO_ROOFTOP

    def _own_rooftop_distance(self) -> float:
        return self._rooftop_distance

    # --- Voltage system and neutral ---

    @property
    def voltage_system(self) -> VoltageSystem:
        return self._voltage_system

    def has_neutral(self) -> bool:
        return self._neutral is not None

    def _require_neutral(self) -> None:
        if self._neutral is None:
            raise VoltageSystemError(f"A {self._voltage_system} cable has no neutral conductor.")

    def is_neutral_current_carrying(self) -> bool:
        return self._neutral is not None and self._neutral.role is Role.NEUTRAL_CC

    def set_neutral_as_current_carrying(self) -> None:
        self._require_neutral()
        self._neutral.role = Role.NEUTRAL_CC

    def set_neutral_as_non_current_carrying(self) -> None:
        self._require_neutral()
        self._neutral.role = Role.NEUTRAL_NCC

    def hot_count(self) -> int:
        return len(self._phases())

    @property
    def phase_conductor(self) -> Conductor:
        """A free copy of phase A."""
        return self._phase_a.copy()

    @property
    def neutral_conductor(self) -> Optional[Conductor]:
        return self._neutral.copy() if self._neutral else None

    @property
    def grounding_conductor(self) -> Conductor:
        return self._grounding.copy()

    # --- Derived quantities ---

    def insulated_area(self) -> float:
        if self.has_errors():
            return 0.0
        return math.pi * 0.25 * self._outer_diameter ** 2

    def current_carrying_count(self) -> int:
        # Phase A always counts, whatever its role says
        count = 1
        for conductor in (self._phase_b, self._phase_c, self._neutral):
            if conductor is not None and conductor.role.is_current_carrying:
                count += 1
        return count

    def copy(self) -> "Cable":
        cable = Cable(self._voltage_system, self._cable_type, tables=self._tables)
        cable._phase_a = self._phase_a.copy()
        cable._phase_b = self._phase_b.copy() if self._phase_b else None
        cable._phase_c = self._phase_c.copy() if self._phase_c else None
        cable._neutral = self._neutral.copy() if self._neutral else None
        cable._grounding = self._grounding.copy()
        cable._jacketed = self._jacketed
        cable._outer_diameter = self._outer_diameter
        cable._rooftop_distance = self._rooftop_distance
        for message in self.messages:
            cable.messages.add(message)
        return cable

    def description(self) -> str:
        cable_type = self._cable_type.label if self._cable_type else "?"
        text = f"{cable_type} Cable: ({self.hot_count()}) {self._phase_a.description()}"
        if self._neutral is not None:
            text += f" + (1) {self._neutral.description()}"
        return text + f" + (1) {self._grounding.description()}"
