import json
from swg.common.logger import log
from swg.common.setup import PATHS
from swg.core.messages import LANGUAGES
from swg.core.session import snap_target, DEFAULT_TARGET
from swg.util import now_iso


_SCHEMA_VERSION = 1

#region === Helpers and Paths ===

SETTINGS_PATH = PATHS.current / "settings.json"

THEME_NAMES = ("Light", "Dark")

# Default values for the settings section of the preferences dict.
_SETTINGS_DEFAULTS = {
    "target_seconds": DEFAULT_TARGET,
    "language": "en",
    "theme": "Light",
    "always_on_top": False,
}
# Helper to return a truly fresh, default preferences dict.
def build_default_settings():
    return {
        "schema_version": _SCHEMA_VERSION,
        "saved_at": now_iso(),
        "settings": dict(_SETTINGS_DEFAULTS),
    }

# Checks a single settings value, returning (value, was_defaulted).
def _validate_setting(key, value):
    if key == "target_seconds":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return _SETTINGS_DEFAULTS[key], True
        snapped = snap_target(value)
        return snapped, snapped != value
    if key == "language":
        return (value, False) if value in LANGUAGES else (_SETTINGS_DEFAULTS[key], True)
    if key == "theme":
        return (value, False) if value in THEME_NAMES else (_SETTINGS_DEFAULTS[key], True)
    if key == "always_on_top":
        return (value, False) if isinstance(value, bool) else (_SETTINGS_DEFAULTS[key], True)
    return value, False

#endregion === Helpers and Paths ===

#region === Saving and Loading Settings ===

# Loads preferences from PATHS.current / settings.json, filling in defaults for anything missing or invalid.
# Never raises: any read problem falls back to a fresh default dict.
def load_settings():
    try:
        if not SETTINGS_PATH.exists():
            prefs = build_default_settings()
            save_settings(prefs)
            log.info("No existing settings.json found in `current`, loading fresh settings dict.")
            return prefs

        with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
            prefs = json.load(f)
        defaulted_values = set()

        if not isinstance(prefs, dict):
            raise TypeError(f"Expected a JSON object in settings.json, got {type(prefs).__name__}")
        if "schema_version" not in prefs or not isinstance(prefs["schema_version"], int):
            defaulted_values.add("schema_version")
            prefs["schema_version"] = _SCHEMA_VERSION

        # Validate the settings dict, fill in any necessary defaults
        if "settings" not in prefs or not isinstance(prefs["settings"], dict):
            defaulted_values.add("settings")
            prefs["settings"] = dict(_SETTINGS_DEFAULTS)
        else:
            for key, default in _SETTINGS_DEFAULTS.items():
                if key not in prefs["settings"]:
                    defaulted_values.add(f"settings.{key}")
                    prefs["settings"][key] = default
                    continue
                value, defaulted = _validate_setting(key, prefs["settings"][key])
                if defaulted:
                    defaulted_values.add(f"settings.{key}")
                prefs["settings"][key] = value

        if defaulted_values:
            log.warning(f"Loaded settings from '{SETTINGS_PATH}', but with missing or invalid values that were defaulted: {', '.join(sorted(defaulted_values))}")
        else:
            log.info(f"Successfully loaded settings from '{SETTINGS_PATH}'.")
        return prefs
    # Fall back to fresh settings in case of error, but warn in log
    except (json.JSONDecodeError, OSError, TypeError):
        log.warning("Ran into an error while trying to load settings.json, falling back to default settings.", exc_info=True)
        return build_default_settings()

# Write the given preferences dict to disk under PATHS.current / settings.json
def save_settings(prefs):
    prefs["saved_at"] = now_iso()
    with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(prefs, f, indent=2, ensure_ascii=False)
    log.info(f"Successfully saved settings to '{SETTINGS_PATH}'")

#endregion === Saving and Loading Settings ===
