"""
Company logo icons.

Records name their logo with free text (``logoIcon``).  ``resolve_icon``
turns that text into one of the known ``IconKind`` members and falls
back to ``IconKind.PACKAGE`` for anything it does not recognise, so an
unknown name never breaks rendering.
"""

from enum import Enum
from typing import Optional


class IconKind(Enum):
    BRIEFCASE = "Briefcase"
    BUILDING = "Building"
    BUILDING2 = "Building2"
    CPU = "Cpu"
    CODE = "Code"
    HEART_PULSE = "HeartPulse"
    STETHOSCOPE = "Stethoscope"
    COFFEE = "Coffee"
    UTENSILS = "Utensils"
    LANDMARK = "Landmark"
    DOLLAR_SIGN = "DollarSign"
    GLOBE = "Globe"
    ROCKET = "Rocket"
    LIGHTBULB = "Lightbulb"
    FACTORY = "Factory"
    PACKAGE = "Package"


DEFAULT_ICON = IconKind.PACKAGE

_GLYPHS = {
    IconKind.BRIEFCASE: "💼",
    IconKind.BUILDING: "🏢",
    IconKind.BUILDING2: "🏬",
    IconKind.CPU: "💻",
    IconKind.CODE: "⌨",
    IconKind.HEART_PULSE: "❤",
    IconKind.STETHOSCOPE: "⚕",
    IconKind.COFFEE: "☕",
    IconKind.UTENSILS: "🍴",
    IconKind.LANDMARK: "🏛",
    IconKind.DOLLAR_SIGN: "$",
    IconKind.GLOBE: "🌐",
    IconKind.ROCKET: "🚀",
    IconKind.LIGHTBULB: "💡",
    IconKind.FACTORY: "🏭",
    IconKind.PACKAGE: "📦",
}

# Case-insensitive lookup; "heart-pulse" and "heart_pulse" also match.
_BY_NAME = {kind.value.lower(): kind for kind in IconKind}


def resolve_icon(name: Optional[str]) -> IconKind:
    if not name:
        return DEFAULT_ICON
    key = name.strip().replace("-", "").replace("_", "").lower()
    return _BY_NAME.get(key, DEFAULT_ICON)


def glyph_for(kind: IconKind) -> str:
    return _GLYPHS[kind]
