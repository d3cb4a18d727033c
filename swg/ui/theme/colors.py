# Colour themes. Severity colours are looked up by role (see swg.core.messages.COLOR_ROLES).
THEMES = {
    "Light": {
        "bg": "#F2F2F7",
        "panel": "#FFFFFF",
        "panel_border": "#D8D8DE",
        "text": "#1C1C1E",
        "text_muted": "#6E6E73",
        "accent": "#007AFF",
        "button_text": "#FFFFFF",
        "start": "#34C759",
        "stop": "#FF3B30",
        "again": "#007AFF",
        "favorable": "#34C759",
        "neutral": "#007AFF",
        "cautionary": "#FF9500",
        "unfavorable": "#FF3B30",
    },
    "Dark": {
        "bg": "#1C1C1E",
        "panel": "#2C2C2E",
        "panel_border": "#3A3A3C",
        "text": "#F2F2F7",
        "text_muted": "#8E8E93",
        "accent": "#0A84FF",
        "button_text": "#FFFFFF",
        "start": "#30D158",
        "stop": "#FF453A",
        "again": "#0A84FF",
        "favorable": "#30D158",
        "neutral": "#0A84FF",
        "cautionary": "#FF9F0A",
        "unfavorable": "#FF453A",
    },
}
