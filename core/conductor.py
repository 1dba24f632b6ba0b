from typing import Optional

from core.conduitable import DEFAULT_AMBIENT_F, Conduitable, ambient_out_of_range
from core.messages import ERROR050, ERROR051, ERROR052, ERROR053, ERROR054, ERROR055, ERROR056
from core.models import ConductiveMetal, Insulation, Role, Size
from standards.nec_logic import ReferenceTables

# Conductors carry no rooftop distance of their own; only a conduit can put them on a rooftop
NO_ROOFTOP = -1.0


class Conductor(Conduitable):
    """
    A single insulated conductor.

    Setters never raise for bad values: the value is stored and a coded message is
    recorded in ``messages``, which blanks every derived quantity until corrected.
    Setting the ambient temperature of a contained conductor raises ContainmentError.
    """

    def __init__(self, size: Optional[Size] = Size.AWG_12,
                 metal: Optional[ConductiveMetal] = ConductiveMetal.COPPER,
                 insulation: Optional[Insulation] = Insulation.THW,
                 length: float = 100.0,
                 ambient_temperature_f: float = DEFAULT_AMBIENT_F,
                 copper_coated: Optional[bool] = False,
                 role: Optional[Role] = Role.HOT,
                 tables: Optional[ReferenceTables] = None):
        super().__init__(tables)
        self.size = size
        self.metal = metal
        self.insulation = insulation
        self.length = length
        self.ambient_temperature_f = ambient_temperature_f
        self.copper_coated = copper_coated
        self.role = role

    @property
    def size(self) -> Optional[Size]:
        return self._size

    @size.setter
    def size(self, value: Optional[Size]):
        self.messages.check(value is None, ERROR050)
        self._size = value

    @property
    def metal(self) -> Optional[ConductiveMetal]:
        return self._metal

    @metal.setter
    def metal(self, value: Optional[ConductiveMetal]):
        self.messages.check(value is None, ERROR051)
        self._metal = value

    @property
    def insulation(self) -> Optional[Insulation]:
        return self._insulation

    @insulation.setter
    def insulation(self, value: Optional[Insulation]):
        self.messages.check(value is None, ERROR052)
        self._insulation = value

    @property
    def length(self) -> float:
        return self._length

    @length.setter
    def length(self, value: float):
        self.messages.check(value is None or value <= 0, ERROR053)
        self._length = value

    @property
    def ambient_temperature_f(self) -> float:
        return self._ambient_temperature_f

    @ambient_temperature_f.setter
    def ambient_temperature_f(self, value: float):
        self._ensure_free("set the ambient temperature")
        self.messages.check(ambient_out_of_range(value), ERROR054)
        self._ambient_temperature_f = value

    @property
    def copper_coated(self) -> Optional[bool]:
        return self._copper_coated

    @copper_coated.setter
    def copper_coated(self, value: Optional[bool]):
        self.messages.check(value is None, ERROR055)
        self._copper_coated = value

    @property
    def role(self) -> Optional[Role]:
        return self._role

    @role.setter
    def role(self, value: Optional[Role]):
        self.messages.check(value is None, ERROR056)
        self._role = value

    def _own_rooftop_distance(self) -> float:
        return NO_ROOFTOP

    def insulated_area(self) -> float:
        if self.has_errors():
            return 0.0
        return self.tables.insulated_area(self._size, self._insulation)

    def current_carrying_count(self) -> int:
        if self.has_errors():
            return 0
        return 1 if self._role.is_current_carrying else 0

    def dc_resistance(self) -> float:
        """Ohms for the whole length, 0 while the conductor holds errors."""
        if self.has_errors():
            return 0.0
        per_kft = self.tables.dc_resistance(self._size, self._metal, self._copper_coated)
        return per_kft * self._length / 1000

    def copy(self) -> "Conductor":
        return Conductor(
            size=self._size,
            metal=self._metal,
            insulation=self._insulation,
            length=self._length,
            ambient_temperature_f=self._ambient_temperature_f,
            copper_coated=self._copper_coated,
            role=self._role,
            tables=self._tables,
        )

    def description(self) -> str:
        size = f"#{self._size.label}" if self._size else "#?"
        insulation = self._insulation.label if self._insulation else "?"
        metal = self._metal.symbol if self._metal else "?"
        role = self._role.value if self._role else "?"
        return f"{size} {insulation} ({metal})({role})"
