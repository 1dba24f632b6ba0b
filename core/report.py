import datetime
from typing import List, Optional, Union

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill

from core.bundle import Bundle
from core.cable import MINIMUM_OUTER_DIAMETER, Cable
from core.conductor import Conductor
from core.conduit import Conduit
from core.conduitable import Conduitable
from core.errors import NECModelError
from core.models import CableType, ConductiveMetal, Insulation, Role, Size
from core.voltage import VoltageSystemRegistry
from standards.nec_tables import NEC_310_16_ALUMINUM, NEC_310_16_COPPER

SCHEDULE_COLUMNS = [
    "Description", "Size", "Insulation", "Metal", "CCC", "Area (in²)", "Rating (°C)",
    "Table Ampacity (A)", "Correction", "Adjustment", "Ampacity (A)",
]

INPUT_COLUMNS = [
    "Kind", "Qty", "Size", "Insulation", "Metal", "Role",
    "Voltage System", "Cable Type", "Diameter (in)", "Jacketed",
]

Container = Union[Conduit, Bundle]


def member_schedule(container: Container) -> pd.DataFrame:
    """One row per conductor or cable with its derating."""
    rows = []
    for member in container.conduitables():
        rating = member.temperature_rating()
        rows.append({
            "Description": member.description(),
            "Size": member.size.label if member.size else None,
            "Insulation": member.insulation.label if member.insulation else None,
            "Metal": member.metal.symbol if member.metal else None,
            "CCC": member.current_carrying_count(),
            "Area (in²)": round(member.insulated_area(), 4),
            "Rating (°C)": rating.value if rating else None,
            "Table Ampacity (A)": member.table_ampacity(),
            "Correction": round(member.correction_factor(), 2),
            "Adjustment": round(member.adjustment_factor(), 2),
            "Ampacity (A)": round(member.corrected_and_adjusted_ampacity(), 1),
        })
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def conduit_summary(conduit: Conduit) -> dict:
    trade = conduit.trade_size()
    one_egc = conduit.trade_size_for_one_egc()
    return {
        "Raceway": conduit.raceway_type.label if conduit.raceway_type else None,
        "Edition": conduit.tables.edition.value,
        "Ambient (°F)": conduit.ambient_temperature_f,
        "Nipple": conduit.is_nipple,
        "Rooftop": conduit.is_rooftop_condition(),
        "Members": conduit.filling_conductor_count(),
        "CCC": conduit.current_carrying_count(),
        "Conductors Area (in²)": round(conduit.conduitables_area(), 4),
        "Allowed Fill (%)": conduit.max_allowed_fill_percent(),
        "Trade Size": trade.label if trade else "Not available",
        "Fill (%)": round(conduit.fill_percentage(), 1),
        "Trade Size (one EGC)": one_egc.label if one_egc else "-",
    }


def bundle_summary(bundle: Bundle) -> dict:
    return {
        "Edition": bundle.tables.edition.value,
        "Ambient (°F)": bundle.ambient_temperature_f,
        "Bundling Length (in)": bundle.bundling_length,
        "Members": bundle.conductor_count(),
        "CCC": bundle.current_carrying_count(),
        "310.15(B)(3)(a)(4)": bundle.complies_with_relaxed_rule_4(),
        "310.15(B)(3)(a)(5)": bundle.complies_with_relaxed_rule_5(),
    }


def _style_header(ws) -> None:
    header_fill = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
    header_font = Font(bold=True)
    for cell in ws[1]:
        cell.font = header_font
        cell.fill = header_fill


def build_workbook(container: Container) -> Workbook:
    wb = Workbook()

    # --- Sheet 1: Schedule ---
    ws1 = wb.active
    ws1.title = "Schedule"
    schedule = member_schedule(container)
    ws1.append(SCHEDULE_COLUMNS)
    _style_header(ws1)
    for row in schedule.itertuples(index=False):
        ws1.append([None if pd.isna(value) else value for value in row])
    for col in ws1.columns:
        ws1.column_dimensions[col[0].column_letter].width = 15
    ws1.column_dimensions["A"].width = 60

    # --- Sheet 2: Summary ---
    ws2 = wb.create_sheet("Summary")
    ws2.append(["Parameter", "Value"])
    _style_header(ws2)
    ws2.append(["Date", datetime.datetime.now().strftime("%Y-%m-%d %H:%M")])
    summary = conduit_summary(container) if isinstance(container, Conduit) else bundle_summary(container)
    for key, value in summary.items():
        ws2.append([key, value])
    for message in container.messages:
        ws2.append(["Message", str(message)])
    ws2.column_dimensions["A"].width = 28

    # --- Sheet 3: NEC Reference ---
    ws3 = wb.create_sheet("NEC 310.16")
    ws3.append(["Size", "Cu 60°C", "Cu 75°C", "Cu 90°C", "Al 60°C", "Al 75°C", "Al 90°C"])
    _style_header(ws3)
    for size, cu in NEC_310_16_COPPER.items():
        al = NEC_310_16_ALUMINUM[size]
        ws3.append([size.label, cu[60], cu[75], cu[90], al[60], al[75], al[90]])

    return wb



def _cell(row, column, default=None):
    value = row.get(column, default)
    if value is None or (not isinstance(value, str) and pd.isna(value)) or value == "":
        return default
    return value


def members_from_frame(df: pd.DataFrame, tables, length_ft: float = 100.0,
                       registry: Optional[VoltageSystemRegistry] = None) -> List[Conduitable]:
    """
    Builds conductors and cables from a table with INPUT_COLUMNS, one object per unit
    of "Qty". A row that cannot be parsed raises ValueError naming the row.
    """
    registry = registry or VoltageSystemRegistry()
    members = []
    for idx, row in df.iterrows():
        try:
            quantity = int(_cell(row, "Qty", 1))
            size = Size.from_label(str(_cell(row, "Size", "12")))
            insulation = Insulation(str(_cell(row, "Insulation", "THHN")).strip().upper())
            metal = ConductiveMetal(str(_cell(row, "Metal", "CU")).strip().upper())
            if _cell(row, "Kind", "Conductor") == "Cable":
                template = Cable(registry.get(str(_cell(row, "Voltage System", "120v 1Ø 2W"))),
                                 CableType[str(_cell(row, "Cable Type", "MC"))], tables=tables)
                template.phase_conductor_size = size
                template.metal = metal
                template.insulation = insulation
                template.length = length_ft
                template.outer_diameter = float(_cell(row, "Diameter (in)", MINIMUM_OUTER_DIAMETER))
                template.jacketed = bool(_cell(row, "Jacketed", False))
            else:
                role = Role[str(_cell(row, "Role", "HOT"))]
                template = Conductor(size, metal, insulation, length_ft, role=role, tables=tables)
        except (KeyError, ValueError, NECModelError) as e:
            raise ValueError(f"Row {idx + 1}: {e}") from e
        members.append(template)
        members.extend(template.copy() for _ in range(quantity - 1))
    return members
