DEFAULT_ICON = "🌤️"

# Checked in order, first substring match wins
_ICONS = (
    ("rain", "🌧️"),
    ("snow", "❄️"),
    ("thunder", "⛈️"),
    ("fog", "🌫️"),
    ("cloudy", "☁️"),
    ("fair", "🌤️"),
    ("clear", "☀️"),
)


def weather_icon(symbol_code: str | None) -> str:
    """Map a YR symbol code (e.g. "lightrainshowers_day") to a display glyph."""
    if not symbol_code:
        return DEFAULT_ICON
    for needle, icon in _ICONS:
        if needle in symbol_code:
            return icon
    return DEFAULT_ICON
