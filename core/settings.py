import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from core.conduitable import DEFAULT_AMBIENT_F
from core.models import NECEdition, RacewayType, TradeSize
from standards.nec_logic import ReferenceTables


@dataclass(frozen=True)
class DesignSettings:
    """Project-wide defaults for the CLI and the web app."""
    edition: NECEdition = NECEdition.NEC2014
    ambient_temperature_f: float = DEFAULT_AMBIENT_F
    conductor_length_ft: float = 100.0
    raceway_type: RacewayType = RacewayType.PVC_40
    minimum_trade_size: TradeSize = TradeSize.T1_2

    def tables(self) -> ReferenceTables:
        return ReferenceTables(edition=self.edition)

    @classmethod
    def from_mapping(cls, data: Mapping) -> "DesignSettings":
        """Builds settings from plain values, e.g. {"edition": 2017, "raceway_type": "EMT"}."""
        settings = cls()
        if data.get("edition") is not None:
            edition = data["edition"]
            settings = replace(settings, edition=edition if isinstance(edition, NECEdition)
                               else NECEdition.from_year(edition))
        if data.get("ambient_temperature_f") is not None:
            settings = replace(settings, ambient_temperature_f=float(data["ambient_temperature_f"]))
        if data.get("conductor_length_ft") is not None:
            settings = replace(settings, conductor_length_ft=float(data["conductor_length_ft"]))
        if data.get("raceway_type") is not None:
            raceway = data["raceway_type"]
            settings = replace(settings, raceway_type=raceway if isinstance(raceway, RacewayType)
                               else RacewayType.from_label(raceway))
        if data.get("minimum_trade_size") is not None:
            trade = data["minimum_trade_size"]
            settings = replace(settings, minimum_trade_size=trade if isinstance(trade, TradeSize)
                               else TradeSize.from_label(trade))
        return settings

    @classmethod
    def from_env(cls, environ: Optional[Mapping] = None) -> "DesignSettings":
        environ = os.environ if environ is None else environ
        return cls.from_mapping({
            "edition": environ.get("NEC_EDITION"),
            "ambient_temperature_f": environ.get("NEC_AMBIENT_F"),
        })
