def convert_temperature(val: float, unit: str) -> float:
    """Returns temperature in °F."""
    unit = unit.strip().upper().replace("°", "")
    if unit in ["F", "FAHRENHEIT"]: return val
    if unit in ["C", "CELSIUS"]: return val * 9.0 / 5.0 + 32.0
    if unit in ["K", "KELVIN"]: return (val - 273.15) * 9.0 / 5.0 + 32.0
    raise ValueError(f"Unknown temperature unit: {unit!r}")


def convert_length_unit(val: float, unit: str) -> float:
    """Returns length in feet."""
    unit = unit.strip().lower()
    if unit in ["ft", "feet", "foot"]: return val
    if unit in ["m", "meter", "meters"]: return val / 0.3048
    if unit in ["yd", "yard", "yards"]: return val * 3.0
    if unit in ["in", "inch", "inches"]: return val / 12.0
    raise ValueError(f"Unknown length unit: {unit!r}")


def convert_distance_unit(val: float, unit: str) -> float:
    """Returns a short distance (rooftop height, bundling length) in inches."""
    unit = unit.strip().lower()
    if unit in ["in", "inch", "inches"]: return val
    if unit in ["ft", "feet", "foot"]: return val * 12.0
    if unit in ["cm"]: return val / 2.54
    if unit in ["mm"]: return val / 25.4
    if unit in ["m", "meter", "meters"]: return val / 0.0254
    raise ValueError(f"Unknown distance unit: {unit!r}")
