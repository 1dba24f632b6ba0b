import sys
import logging
import datetime
from core.bundle import Bundle
from core.cable import Cable
from core.conductor import Conductor
from core.conduit import Conduit
from core.converters import convert_distance_unit, convert_temperature
from core.models import CableType, ConductiveMetal, Insulation, NECEdition, RacewayType, Role, Size
from core.report import build_workbook, bundle_summary, conduit_summary, member_schedule
from core.settings import DesignSettings
from core.voltage import VoltageSystemRegistry

logger = logging.getLogger(__name__)


def ask(prompt, default):
    answer = input(f"{prompt} [{default}]: ").strip()
    return answer or str(default)


def option_label(option):
    return getattr(option, "label", None) or getattr(option, "value", option)


def choose(prompt, options, default):
    labels = ", ".join(f"({i + 1}) {option_label(o)}" for i, o in enumerate(options))
    print(f"{prompt}: {labels}")
    choice = ask("Select", default)
    try:
        return options[int(choice) - 1]
    except (ValueError, IndexError):
        print(f"Invalid choice, using {options[default - 1]}")
        return options[default - 1]


def get_installation_params(settings):
    print("\n--- Installation Parameters ---")

    edition = choose("NEC edition", [e.value for e in NECEdition],
                     [e.value for e in NECEdition].index(settings.edition.value) + 1)
    settings = DesignSettings.from_mapping({
        "edition": edition,
        "ambient_temperature_f": settings.ambient_temperature_f,
        "conductor_length_ft": settings.conductor_length_ft,
        "raceway_type": settings.raceway_type,
        "minimum_trade_size": settings.minimum_trade_size,
    })

    try:
        raw = ask("Ambient temperature (e.g. 86 F, 30 C)", f"{settings.ambient_temperature_f:g} F").split()
        temp_f = convert_temperature(float(raw[0]), raw[1] if len(raw) > 1 else "F")
    except ValueError:
        temp_f = settings.ambient_temperature_f

    mode = choose("Grouping", ["Conduit", "Bundle (free air)"], 1)
    if mode == "Conduit":
        labels = [r.label for r in RacewayType]
        raceway = RacewayType.from_label(
            choose("Raceway type", labels, labels.index(settings.raceway_type.label) + 1)
        )
        conduit = Conduit(temp_f, raceway, settings.minimum_trade_size, tables=settings.tables())
        if ask("Nipple, 24 in or shorter? (y/n)", "n").lower() == "y":
            conduit.set_nipple()
        rooftop = ask("Height above rooftop, blank if not on a roof (e.g. 6 in)", "").split()
        if rooftop:
            conduit.rooftop_distance = convert_distance_unit(float(rooftop[0]), rooftop[1] if len(rooftop) > 1 else "in")
        return settings, conduit

    length = ask("Bundling length (e.g. 30 in)", "0 in").split()
    bundle = Bundle(temp_f, convert_distance_unit(float(length[0]), length[1] if len(length) > 1 else "in"),
                    tables=settings.tables())
    return settings, bundle


def get_conductor(settings):
    size = Size.from_label(ask("Size (e.g. 12, 1/0, 250)", "12"))
    insulation = Insulation(ask("Insulation (TW, THW, THHN, XHHW-2...)", "THHN").upper())
    metal = ConductiveMetal.ALUMINUM if ask("Metal (cu/al)", "cu").lower() == "al" else ConductiveMetal.COPPER
    role = choose("Role", [r for r in Role], 1)
    return Conductor(size, metal, insulation, settings.conductor_length_ft, role=role, tables=settings.tables())


def get_cable(settings, registry):
    system = registry.get(choose("Voltage system", registry.names(), 1))
    cable_type = choose("Cable type", [t for t in CableType], 2)
    cable = Cable(system, cable_type, tables=settings.tables())
    cable.phase_conductor_size = Size.from_label(ask("Phase size", "12"))
    cable.insulation = Insulation(ask("Insulation", "THHN").upper())
    cable.length = settings.conductor_length_ft
    cable.outer_diameter = float(ask("Outer diameter (in)", "0.5"))
    cable.jacketed = ask("Jacketed? (y/n)", "n").lower() == "y"
    return cable


def get_members_input(settings, container):
    print("\n--- Conductors and Cables ---")
    registry = VoltageSystemRegistry()

    while True:
        count = container.conductor_count() if isinstance(container, Bundle) else container.filling_conductor_count()
        print(f"\n[Item #{count + 1}]")
        kind = choose("Kind", ["Conductor", "Cable", "Done"], 1)
        if kind == "Done":
            break

        try:
            quantity = int(ask("Quantity", 1))
            template = get_conductor(settings) if kind == "Conductor" else get_cable(settings, registry)
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue

        for i in range(quantity):
            container.add(template if i == 0 else template.copy())
        for message in template.messages:
            print(f"  (!) {message}")


def export_to_excel(container):
    filename = f"Conduit_Fill_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    build_workbook(container).save(filename)
    print(f"\n[INFO] Excel saved: {filename}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("==========================================================")
    print(" NEC CONDUCTOR DERATING AND CONDUIT FILL CALCULATOR")
    print("==========================================================")

    # 1. Installation
    settings, container = get_installation_params(DesignSettings.from_env())
    logger.info("Using NEC %s tables", settings.edition.value)

    # 2. Members
    get_members_input(settings, container)
    if container.is_empty():
        print("No conductors were entered.")
        sys.exit()

    # 3. Results
    print("\n" + member_schedule(container).to_string(index=False))
    print("-" * 120)
    summary = conduit_summary(container) if isinstance(container, Conduit) else bundle_summary(container)
    for key, value in summary.items():
        print(f"{key:<24} {value}")
    for message in container.messages:
        print(f"(!) {message}")

    # 4. Export
    if ask("\nExport report to Excel? (y/n)", "n").lower() == "y":
        export_to_excel(container)


if __name__ == "__main__":
    main()
