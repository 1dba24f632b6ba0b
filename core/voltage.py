import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from core.errors import VoltageSystemError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VoltageSystem:
    """An AC distribution system: how many hots a circuit carries and whether it has a neutral."""
    name: str
    voltage: int
    phases: int  # 1 or 3
    wires: int
    hots: int
    has_neutral: bool

    @property
    def neutral_current_carrying(self) -> bool:
        # A balanced 3-phase 4-wire neutral is not counted as current-carrying by default
        return self.has_neutral and self.wires != 4

    @property
    def hot_and_neutral_only(self) -> bool:
        return self.hots == 1 and self.has_neutral

    @property
    def has_phase_b(self) -> bool:
        return self.hots >= 2

    @property
    def has_phase_c(self) -> bool:
        return self.hots == 3

    def __str__(self) -> str:
        return self.name


V120_1PH_2W = VoltageSystem("120v 1Ø 2W", 120, 1, 2, 1, True)
V208_1PH_2W = VoltageSystem("208v 1Ø 2W", 208, 1, 2, 2, False)
V208_1PH_2W_HIGH_LEG = VoltageSystem("208v 1Ø 2W High leg", 208, 1, 2, 1, True)
V208_1PH_3W = VoltageSystem("208v 1Ø 3W", 208, 1, 3, 2, True)
V208_3PH_3W = VoltageSystem("208v 3Ø 3W", 208, 3, 3, 3, False)
V208_3PH_4W = VoltageSystem("208v 3Ø 4W", 208, 3, 4, 3, True)
V240_1PH_2W = VoltageSystem("240v 1Ø 2W", 240, 1, 2, 2, False)
V240_1PH_3W = VoltageSystem("240v 1Ø 3W", 240, 1, 3, 2, True)
V240_3PH_3W = VoltageSystem("240v 3Ø 3W", 240, 3, 3, 3, False)
V240_3PH_4W = VoltageSystem("240v 3Ø 4W", 240, 3, 4, 3, True)
V277_1PH_2W = VoltageSystem("277v 1Ø 2W", 277, 1, 2, 1, True)
V480_1PH_2W = VoltageSystem("480v 1Ø 2W", 480, 1, 2, 2, False)
V480_1PH_3W = VoltageSystem("480v 1Ø 3W", 480, 1, 3, 2, True)
V480_3PH_3W = VoltageSystem("480v 3Ø 3W", 480, 3, 3, 3, False)
V480_3PH_4W = VoltageSystem("480v 3Ø 4W", 480, 3, 4, 3, True)
V575_3PH_3W = VoltageSystem("575v 3Ø 3W", 575, 3, 3, 3, False)

STANDARD_VOLTAGE_SYSTEMS = [
    V120_1PH_2W, V208_1PH_2W, V208_1PH_2W_HIGH_LEG, V208_1PH_3W, V208_3PH_3W, V208_3PH_4W,
    V240_1PH_2W, V240_1PH_3W, V240_3PH_3W, V240_3PH_4W, V277_1PH_2W,
    V480_1PH_2W, V480_1PH_3W, V480_3PH_3W, V480_3PH_4W, V575_3PH_3W,
]


def _layout(voltage: int, phases: int, wires: int, neutral: Optional[bool]):
    """Returns (hots, has_neutral) for a custom system, validating the combination."""
    if voltage <= 0:
        raise VoltageSystemError(f"voltage must be > 0, got {voltage}")
    if phases == 3:
        if wires not in (3, 4):
            raise VoltageSystemError(f"a 3-phase system has 3 or 4 wires, got {wires}")
        return 3, wires == 4
    if phases == 1:
        if wires == 3:
            return 2, True
        if wires == 2:
            # Line-to-neutral below 277 V, line-to-line above, unless stated
            with_neutral = voltage <= 277 if neutral is None else neutral
            return (1, True) if with_neutral else (2, False)
        raise VoltageSystemError(f"a 1-phase system has 2 or 3 wires, got {wires}")
    raise VoltageSystemError(f"phases must be 1 or 3, got {phases}")


class VoltageSystemRegistry:
    """Named voltage systems, seeded with the standard ones and extensible with custom ones."""

    def __init__(self, systems: Iterable[VoltageSystem] = STANDARD_VOLTAGE_SYSTEMS):
        self._systems: Dict[str, VoltageSystem] = {}
        for system in systems:
            self._systems[system.name] = system

    def get(self, name: str) -> VoltageSystem:
        try:
            return self._systems[name]
        except KeyError:
            raise VoltageSystemError(f"Unknown voltage system: {name!r}") from None

    def find(self, voltage: int, phases: int, wires: int, hots: int, has_neutral: bool) -> Optional[VoltageSystem]:
        for system in self._systems.values():
            if (system.voltage, system.phases, system.wires, system.hots, system.has_neutral) == \
                    (voltage, phases, wires, hots, has_neutral):
                return system
        return None

    def lookup_or_add(self, voltage: int, phases: int, wires: int,
                      neutral: Optional[bool] = None) -> VoltageSystem:
        """
        Returns the registered system matching the parameters, registering a new one if none does.
        ``neutral`` only matters for 1-phase 2-wire systems, which can be hot-hot or hot-neutral.
        """
        hots, has_neutral = _layout(voltage, phases, wires, neutral)
        existing = self.find(voltage, phases, wires, hots, has_neutral)
        if existing is not None:
            return existing
        name = f"{voltage}v {phases}Ø {wires}W"
        if name in self._systems:
            name += " (hot-neutral)" if has_neutral else " (hot-hot)"
        system = VoltageSystem(name, voltage, phases, wires, hots, has_neutral)
        self._systems[name] = system
        logger.debug("Registered custom voltage system %s", name)
        return system

    def names(self) -> List[str]:
        return list(self._systems)

    def __contains__(self, name) -> bool:
        return name in self._systems

    def __iter__(self) -> Iterator[VoltageSystem]:
        return iter(list(self._systems.values()))

    def __len__(self) -> int:
        return len(self._systems)
