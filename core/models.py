from enum import Enum
from typing import Optional


class _OrderedEnum(Enum):
    """Enum whose members compare by declaration order."""

    @property
    def ordinal(self) -> int:
        return self.__class__._member_names_.index(self.name)

    def __lt__(self, other):
        if self.__class__ is other.__class__:
            return self.ordinal < other.ordinal
        return NotImplemented

    def __le__(self, other):
        if self.__class__ is other.__class__:
            return self.ordinal <= other.ordinal
        return NotImplemented

    def __gt__(self, other):
        if self.__class__ is other.__class__:
            return self.ordinal > other.ordinal
        return NotImplemented

    def __ge__(self, other):
        if self.__class__ is other.__class__:
            return self.ordinal >= other.ordinal
        return NotImplemented


class Size(_OrderedEnum):
    AWG_14 = "14 AWG"
    AWG_12 = "12 AWG"
    AWG_10 = "10 AWG"
    AWG_8 = "8 AWG"
    AWG_6 = "6 AWG"
    AWG_4 = "4 AWG"
    AWG_3 = "3 AWG"
    AWG_2 = "2 AWG"
    AWG_1 = "1 AWG"
    AWG_1_0 = "1/0 AWG"
    AWG_2_0 = "2/0 AWG"
    AWG_3_0 = "3/0 AWG"
    AWG_4_0 = "4/0 AWG"
    KCMIL_250 = "250 KCMIL"
    KCMIL_300 = "300 KCMIL"
    KCMIL_350 = "350 KCMIL"
    KCMIL_400 = "400 KCMIL"
    KCMIL_500 = "500 KCMIL"
    KCMIL_600 = "600 KCMIL"
    KCMIL_700 = "700 KCMIL"
    KCMIL_750 = "750 KCMIL"
    KCMIL_800 = "800 KCMIL"
    KCMIL_900 = "900 KCMIL"
    KCMIL_1000 = "1000 KCMIL"
    KCMIL_1250 = "1250 KCMIL"
    KCMIL_1500 = "1500 KCMIL"
    KCMIL_1750 = "1750 KCMIL"
    KCMIL_2000 = "2000 KCMIL"

    @property
    def label(self) -> str:
        return self.value

    @property
    def short_label(self) -> str:
        """Size without the unit, as used by table headers ("12", "1/0", "250")."""
        return self.value.split(" ")[0]

    def next_size_up(self) -> Optional["Size"]:
        members = list(Size)
        if self.ordinal + 1 < len(members):
            return members[self.ordinal + 1]
        return None

    def is_smaller_than(self, other: "Size") -> bool:
        return self < other

    def is_larger_than(self, other: "Size") -> bool:
        return self > other

    def is_between(self, lower: "Size", upper: "Size") -> bool:
        """True if lower <= self <= upper."""
        return lower <= self <= upper

    @classmethod
    def from_label(cls, label: str) -> "Size":
        text = label.strip().upper().replace("#", "")
        for size in cls:
            if text in (size.value.upper(), size.short_label):
                return size
        raise ValueError(f"Unknown conductor size: {label!r}")


class ConductiveMetal(Enum):
    COPPER = "CU"
    ALUMINUM = "AL"

    @property
    def symbol(self) -> str:
        return self.value


class TemperatureRating(_OrderedEnum):
    T60 = 60
    T75 = 75
    T90 = 90


class Insulation(Enum):
    TW = "TW"
    RHW = "RHW"
    THW = "THW"
    THWN = "THWN"
    USE = "USE"
    ZW = "ZW"
    TBS = "TBS"
    SA = "SA"
    SIS = "SIS"
    FEP = "FEP"
    FEPB = "FEPB"
    MI = "MI"
    RHH = "RHH"
    RHW_2 = "RHW-2"
    THHN = "THHN"
    THHW = "THHW"
    THW_2 = "THW-2"
    THWN_2 = "THWN-2"
    USE_2 = "USE-2"
    XHH = "XHH"
    XHHW = "XHHW"
    XHHW_2 = "XHHW-2"
    ZW_2 = "ZW-2"

    @property
    def label(self) -> str:
        return self.value


class Location(Enum):
    DRY = "Dry"
    DAMP = "Damp"
    WET = "Wet"


class RacewayMaterial(Enum):
    PVC = "PVC"
    ALUMINUM = "Aluminum"
    STEEL = "Steel"

    @property
    def is_magnetic(self) -> bool:
        return self is RacewayMaterial.STEEL


class RacewayType(Enum):
    EMT = ("EMT", "Electrical Metallic Tubing", RacewayMaterial.STEEL)
    EMT_AL = ("EMT-AL", "Electrical Metallic Tubing, Aluminum", RacewayMaterial.ALUMINUM)
    ENT = ("ENT", "Electrical Nonmetallic Tubing", RacewayMaterial.PVC)
    FMC = ("FMC", "Flexible Metal Conduit", RacewayMaterial.STEEL)
    FMC_AL = ("FMC-AL", "Flexible Metal Conduit, Aluminum", RacewayMaterial.ALUMINUM)
    IMC = ("IMC", "Intermediate Metal Conduit", RacewayMaterial.STEEL)
    LFNC_A = ("LFNC-A", "Liquidtight Flexible Nonmetallic Conduit (Type A)", RacewayMaterial.PVC)
    LFNC_B = ("LFNC-B", "Liquidtight Flexible Nonmetallic Conduit (Type B)", RacewayMaterial.PVC)
    LFMC = ("LFMC", "Liquidtight Flexible Metal Conduit", RacewayMaterial.STEEL)
    LFMC_AL = ("LFMC-AL", "Liquidtight Flexible Metal Conduit, Aluminum", RacewayMaterial.ALUMINUM)
    RMC = ("RMC", "Rigid Metal Conduit", RacewayMaterial.STEEL)
    RMC_AL = ("RMC-AL", "Rigid Metal Conduit, Aluminum", RacewayMaterial.ALUMINUM)
    PVC_80 = ("PVC-80", "Rigid PVC Conduit, Schedule 80", RacewayMaterial.PVC)
    PVC_40 = ("PVC-40", "Rigid PVC Conduit, Schedule 40", RacewayMaterial.PVC)
    HDPE = ("HDPE", "High Density Polyethylene Conduit", RacewayMaterial.PVC)
    PVC_A = ("PVC-A", "Rigid PVC Conduit, Type A", RacewayMaterial.PVC)
    PVC_EB = ("PVC-EB", "Rigid PVC Conduit, Type EB", RacewayMaterial.PVC)

    def __init__(self, label: str, description: str, material: RacewayMaterial):
        self.label = label
        self.description = description
        self.material = material

    @property
    def is_magnetic(self) -> bool:
        return self.material.is_magnetic

    @classmethod
    def from_label(cls, label: str) -> "RacewayType":
        for raceway in cls:
            if raceway.label == label.strip().upper():
                return raceway
        raise ValueError(f"Unknown raceway type: {label!r}")


class TradeSize(_OrderedEnum):
    T3_8 = "3/8"
    T1_2 = "1/2"
    T3_4 = "3/4"
    T1 = "1"
    T1_1_4 = "1-1/4"
    T1_1_2 = "1-1/2"
    T2 = "2"
    T2_1_2 = "2-1/2"
    T3 = "3"
    T3_1_2 = "3-1/2"
    T4 = "4"
    T5 = "5"
    T6 = "6"

    @property
    def label(self) -> str:
        return f'{self.value}"'

    @classmethod
    def from_label(cls, label: str) -> "TradeSize":
        text = label.strip().rstrip('"')
        for trade in cls:
            if trade.value == text:
                return trade
        raise ValueError(f"Unknown trade size: {label!r}")


class CableType(Enum):
    AC = ("AC", "Armored Cable", RacewayMaterial.STEEL)
    MC = ("MC", "Metal Clad Cable", RacewayMaterial.STEEL)
    NM = ("NM", "Non-Metallic-Sheathed Cable", RacewayMaterial.PVC)
    NMC = ("NMC", "Non-Metallic-Sheathed Cable, Corrosion Resistant", RacewayMaterial.PVC)
    NMS = ("NMS", "Non-Metallic-Sheathed Cable, Signaling", RacewayMaterial.PVC)

    def __init__(self, label: str, description: str, outer_material: RacewayMaterial):
        self.label = label
        self.description = description
        self.outer_material = outer_material

    @property
    def relaxed_rule_eligible(self) -> bool:
        """AC and MC cables are the types NEC 310.15(B)(3)(a)(4) and (5) apply to."""
        return self in (CableType.AC, CableType.MC)


class Role(Enum):
    HOT = "HOT"
    NEUTRAL_CC = "NEUCC"
    NEUTRAL_NCC = "NEUNCC"
    GROUNDING = "GND"
    NON_CONCURRENT_HOT = "NCONC"

    @property
    def is_current_carrying(self) -> bool:
        return self in (Role.HOT, Role.NEUTRAL_CC)


class NECEdition(Enum):
    NEC2014 = 2014
    NEC2017 = 2017
    NEC2020 = 2020

    @classmethod
    def from_year(cls, year) -> "NECEdition":
        for edition in cls:
            if edition.value == int(year):
                return edition
        raise ValueError(f"Unsupported NEC edition: {year!r}")
