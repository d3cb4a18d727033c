import os
from pathlib import Path
from dataclasses import dataclass

APP_DIR_NAME = "StopWatchGame"

# Creates the directory if missing. A file sitting where the directory should be is an error.
def ensure_directory(path: Path):
    if path.exists() and not path.is_dir():
        raise NotADirectoryError(f"Expected a directory, got a file: {path}")
    path.mkdir(parents=True,exist_ok=True)
    return path

# Picks the per-user base folder. APPDATA on Windows, XDG data home everywhere else.
def user_data_base() -> Path:
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata)
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".local" / "share"

# Dataclass for accessing paths across program.
@dataclass(frozen=False)
class ProjectPaths:

    data: Path
    logs: Path
    current: Path

    @staticmethod
    def build(base: Path | None = None):
        # Folder for all user-specific stuff (logs, preferences)
        data = ensure_directory((base or user_data_base()) / APP_DIR_NAME)
        return ProjectPaths(
            data = data,
            logs = ensure_directory(data / "logs"),
            current = ensure_directory(data / "current"),
        )
PATHS = ProjectPaths.build()
