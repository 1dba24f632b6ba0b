import logging
from typing import List, Optional

from core.conductor import Conductor
from core.conduitable import DEFAULT_AMBIENT_F, Conduitable, ambient_out_of_range
from core.errors import ContainmentError
from core.messages import ERROR101, ERROR102, ERROR103, ERROR104, ResultMessages
from core.models import RacewayType, Role, TradeSize
from standards.nec_logic import ReferenceTables

logger = logging.getLogger(__name__)

NO_ROOFTOP = -1.0


class Conduit:
    """
    An ordered raceway run holding conductors and cables.

    The ambient temperature is fixed at construction and pushed onto every member
    when it is added. Members are never removed.
    """

    def __init__(self, ambient_temperature_f: float = DEFAULT_AMBIENT_F,
                 raceway_type: Optional[RacewayType] = RacewayType.PVC_40,
                 minimum_trade_size: Optional[TradeSize] = TradeSize.T1_2,
                 nipple: bool = False,
                 rooftop_distance: float = NO_ROOFTOP,
                 tables: Optional[ReferenceTables] = None):
        if ambient_out_of_range(ambient_temperature_f):
            raise ValueError(f"Ambient temperature must be >= 5°F and <= 185°F, got {ambient_temperature_f}")
        self._ambient_temperature_f = ambient_temperature_f
        self.tables = tables or ReferenceTables()
        self.messages = ResultMessages()
        self._members: List[Conduitable] = []
        self.raceway_type = raceway_type
        self.minimum_trade_size = minimum_trade_size
        self.is_nipple = nipple
        self.rooftop_distance = rooftop_distance

    @property
    def ambient_temperature_f(self) -> float:
        return self._ambient_temperature_f

    @property
    def raceway_type(self) -> Optional[RacewayType]:
        return self._raceway_type

    @raceway_type.setter
    def raceway_type(self, value: Optional[RacewayType]):
        self.messages.check(value is None, ERROR102)
        self._raceway_type = value

    @property
    def minimum_trade_size(self) -> Optional[TradeSize]:
        return self._minimum_trade_size

    @minimum_trade_size.setter
    def minimum_trade_size(self, value: Optional[TradeSize]):
        self.messages.check(value is None, ERROR101)
        self._minimum_trade_size = value

    def set_nipple(self) -> None:
        self.is_nipple = True

    def set_non_nipple(self) -> None:
        self.is_nipple = False

    def reset_rooftop_condition(self) -> None:
        self.rooftop_distance = NO_ROOFTOP

    def is_rooftop_condition(self) -> bool:
        return self.tables.is_rooftop_condition(self.rooftop_distance)

    # --- Members ---

    def add(self, conduitable: Optional[Conduitable]) -> None:
        """
        Admits a conductor or cable. Adding a member twice is a no-op; adding one that
        already belongs to another conduit or bundle raises ContainmentError.
        """
        if conduitable is None:
            self.messages.add(ERROR103)
            return
        if self.has_conduitable(conduitable):
            return
        if not conduitable.is_free():
            raise ContainmentError(f"{conduitable.description()} already belongs to a conduit or bundle.")
        # Temperature first: once linked, the member refuses temperature changes
        conduitable.ambient_temperature_f = self._ambient_temperature_f
        conduitable._attach_conduit(self)
        self._members.append(conduitable)
        logger.debug("Added %s to %s conduit", conduitable.description(), self._type_label())

    def has_conduitable(self, conduitable: Conduitable) -> bool:
        return any(member is conduitable for member in self._members)

    def conduitables(self) -> List[Conduitable]:
        return list(self._members)

    def is_empty(self) -> bool:
        return not self._members

    def filling_conductor_count(self) -> int:
        return len(self._members)

    def current_carrying_count(self) -> int:
        return sum(member.current_carrying_count() for member in self._members)

    def conduitables_area(self) -> float:
        return sum(member.insulated_area() for member in self._members)

    # --- Trade size ---

    def max_allowed_fill_percent(self) -> int:
        return self.tables.max_fill_percent(len(self._members), self.is_nipple)

    def _resolve(self, area: float) -> Optional[TradeSize]:
        if self._raceway_type is None or self._minimum_trade_size is None:
            return None
        fill = self.max_allowed_fill_percent()
        return self.tables.trade_size_for_area(area / (fill * 0.01), self._raceway_type, self._minimum_trade_size)

    def trade_size(self) -> Optional[TradeSize]:
        """
        Smallest trade size, not below the minimum, that holds all members within the
        Chapter 9 Table 1 fill limit. None (with ERROR104 recorded) when nothing fits.
        """
        trade = self._resolve(self.conduitables_area())
        if trade is None:
            self.messages.add(ERROR104)
            logger.warning("No %s trade size holds %.4f in² of conductors", self._type_label(),
                           self.conduitables_area())
        else:
            self.messages.remove(ERROR104)
            logger.debug("%s conduit resolved to %s", self._type_label(), trade.label)
        return trade

    def biggest_egc(self) -> Optional[Conductor]:
        """The largest bare equipment grounding conductor; grounds inside cables are not considered."""
        biggest = None
        for member in self._members:
            if isinstance(member, Conductor) and member.role is Role.GROUNDING and member.size is not None:
                if biggest is None or member.size > biggest.size:
                    biggest = member
        return biggest

    def trade_size_for_one_egc(self) -> Optional[TradeSize]:
        """
        Trade size if every bare grounding conductor were replaced by the single largest one.
        None for an empty conduit, a conduit without bare grounding conductors, or no fit.
        """
        egc = self.biggest_egc()
        if egc is None:
            return None
        others = [m for m in self._members if not (isinstance(m, Conductor) and m.role is Role.GROUNDING)]
        area = egc.insulated_area() + sum(member.insulated_area() for member in others)
        return self._resolve(area)

    def area(self) -> float:
        """Total internal area of the resolved trade size, 0 when unsizable."""
        trade = self.trade_size()
        if trade is None:
            return 0.0
        return self.tables.raceway_area(self._raceway_type, trade)

    def fill_percentage(self) -> float:
        area = self.area()
        if area == 0:
            return 0.0
        return self.conduitables_area() / area * 100

    def _type_label(self) -> str:
        return self._raceway_type.label if self._raceway_type else "?"

    def __repr__(self) -> str:
        return f"<Conduit {self._type_label()} members={len(self._members)}>"
