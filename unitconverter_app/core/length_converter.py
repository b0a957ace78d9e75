from typing import Dict

# Metres per unit
UNIT_FACTORS: Dict[str, float] = {
    "Meter": 1.0,
    "Kilometer": 1000.0,
    "Centimeter": 0.01,
    "Millimeter": 0.001,
    "Inch": 0.0254,
    "Foot": 0.3048,
}


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    """Convert through metres: value * factor(from) / factor(to)."""
    for unit in (from_unit, to_unit):
        if unit not in UNIT_FACTORS:
            raise ValueError(f"Unknown unit: {unit}")
    return value * UNIT_FACTORS[from_unit] / UNIT_FACTORS[to_unit]


def parse_value(text: str) -> float:
    text = (text or "").strip()
    if not text:
        raise ValueError("Please enter a value")
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Not a number: {text}") from None
