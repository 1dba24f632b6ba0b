import io
import streamlit as st
import pandas as pd
from core.bundle import Bundle
from core.conduit import Conduit
from core.converters import convert_distance_unit, convert_temperature
from core.models import CableType, Insulation, NECEdition, RacewayType, Role, TradeSize
from core.report import (
    INPUT_COLUMNS, build_workbook, bundle_summary, conduit_summary, member_schedule, members_from_frame,
)
from core.settings import DesignSettings
from core.voltage import VoltageSystemRegistry
from standards.nec_tables import NEC_310_16_COPPER

REGISTRY = VoltageSystemRegistry()

# --- Page Config ---
st.set_page_config(
    page_title="Conduit Fill & Ampacity (NEC)",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded"
)

# --- Custom CSS ---
st.markdown("""
<style>
    .main-header { font-family: 'Inter', sans-serif; color: #1E3A8A; font-weight: 700; }
    .stDataFrame { border-radius: 10px; overflow: hidden; }
</style>
""", unsafe_allow_html=True)

# --- Session State Init ---
if 'members_df' not in st.session_state:
    st.session_state.members_df = pd.DataFrame([{
        "Kind": "Conductor", "Qty": 3, "Size": "12", "Insulation": "THHN", "Metal": "CU", "Role": "HOT",
        "Voltage System": None, "Cable Type": None, "Diameter (in)": None, "Jacketed": False,
    }], columns=INPUT_COLUMNS)
else:
    # Keep only input columns after hot-reloads
    for col in INPUT_COLUMNS:
        if col not in st.session_state.members_df.columns:
            st.session_state.members_df[col] = None
    st.session_state.members_df = st.session_state.members_df[INPUT_COLUMNS]

# --- Sidebar ---
with st.sidebar:
    st.title("Installation")
    edition = st.selectbox("NEC Edition", [e.value for e in NECEdition])

    c_t1, c_t2 = st.columns([2, 1])
    temp = c_t1.number_input("Ambient Temp.", value=86.0, step=1.0)
    temp_unit = c_t2.selectbox("Unit", ["F", "C"])

    length_ft = st.number_input("Conductor length (ft)", min_value=1.0, value=100.0, step=10.0)

    st.markdown("---")
    mode = st.radio("Grouping", ["Conduit", "Bundle"], horizontal=True)
    if mode == "Conduit":
        raceway_label = st.selectbox("Raceway", [r.label for r in RacewayType],
                                     index=[r for r in RacewayType].index(RacewayType.PVC_40))
        min_trade = st.selectbox("Minimum trade size", [t.value for t in TradeSize], index=1)
        nipple = st.toggle("Nipple (24 in or shorter)", False)
        on_roof = st.toggle("Exposed on rooftop", False)
        rooftop_in = st.number_input("Height above roof (in)", 0.0, 120.0, 6.0, 0.125, disabled=not on_roof)
    else:
        c_b1, c_b2 = st.columns([2, 1])
        bundling = c_b1.number_input("Bundling length", 0.0, step=1.0)
        bundling_unit = c_b2.selectbox("Unit ", ["in", "ft"])

settings = DesignSettings.from_mapping({
    "edition": edition,
    "ambient_temperature_f": convert_temperature(temp, temp_unit),
    "conductor_length_ft": length_ft,
})

# --- Main Area ---
st.markdown("<h1 class='main-header'>⚡ Conduit Fill & Ampacity Derating (NEC)</h1>", unsafe_allow_html=True)
st.markdown("---")
st.markdown("### 📋 Conductors and Cables (Editable)")
st.caption("One row per group of identical conductors or cables. Cable rows need a voltage system.")

column_config = {
    "Kind": st.column_config.SelectboxColumn(options=["Conductor", "Cable"], width="small"),
    "Qty": st.column_config.NumberColumn("Qty", min_value=1, step=1, width="small"),
    "Size": st.column_config.SelectboxColumn(options=[s.short_label for s in NEC_310_16_COPPER], width="small"),
    "Insulation": st.column_config.SelectboxColumn(options=[i.value for i in Insulation], width="small"),
    "Metal": st.column_config.SelectboxColumn(options=["CU", "AL"], width="small"),
    "Role": st.column_config.SelectboxColumn(options=[r.name for r in Role], width="medium"),
    "Voltage System": st.column_config.SelectboxColumn(options=REGISTRY.names(), width="medium"),
    "Cable Type": st.column_config.SelectboxColumn(options=[c.name for c in CableType], width="small"),
    "Diameter (in)": st.column_config.NumberColumn(min_value=0.0, step=0.05, format="%.3f"),
    "Jacketed": st.column_config.CheckboxColumn(),
}

edited_df = st.data_editor(
    st.session_state.members_df,
    column_config=column_config,
    num_rows="dynamic",
    use_container_width=True,
    key="members_editor",
)
st.session_state.members_df = edited_df

if st.button("🗑️ Clear Table", type="secondary"):
    st.session_state.members_df = pd.DataFrame(columns=INPUT_COLUMNS)
    st.rerun()

# --- Calculation ---
try:
    members = members_from_frame(edited_df.dropna(how="all"), settings.tables(), settings.conductor_length_ft,
                                 REGISTRY)
except ValueError as e:
    st.error(str(e))
    st.stop()

if mode == "Conduit":
    container = Conduit(settings.ambient_temperature_f, RacewayType.from_label(raceway_label),
                        TradeSize.from_label(min_trade), nipple=nipple,
                        rooftop_distance=rooftop_in if on_roof else -1, tables=settings.tables())
    summary = conduit_summary
else:
    container = Bundle(settings.ambient_temperature_f, convert_distance_unit(bundling, bundling_unit),
                       tables=settings.tables())
    summary = bundle_summary

for member in members:
    container.add(member)

st.markdown("---")
st.subheader("🧮 Derating Schedule")
st.dataframe(member_schedule(container), use_container_width=True, hide_index=True)

for member in members:
    for message in member.messages:
        st.warning(f"{member.description()}: {message}")

st.subheader("📦 Summary")
if not container.is_empty():
    summary_data = summary(container)
    cols = st.columns(4)
    for i, (key, value) in enumerate(summary_data.items()):
        cols[i % 4].metric(key, str(value))
    for message in container.messages:
        st.error(str(message))

    output = io.BytesIO()
    build_workbook(container).save(output)
    st.download_button(
        "📥 Excel",
        data=output.getvalue(),
        file_name="conduit_fill.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
else:
    st.info("Add conductors or cables to the table.")
