import logging
from logging.handlers import RotatingFileHandler
from swg.common.setup import PATHS
from datetime import datetime

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# stopwatchgame.log rolls over at 5 MB, keeping 5 old files
ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_COUNT = 5

# Attaches the handler built by `make` unless one with this name is already on the logger, so importing
# twice (or calling get_logger again) never doubles output.
def _attach(logger, handler_name, level, fmt, make):
    if any(h.get_name() == handler_name for h in logger.handlers):
        return
    handler = make()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    handler.set_name(handler_name)
    logger.addHandler(handler)

# Deletes all but the newest `keep` per-run debug logs.
def _prune_runs(debug_dir, name, keep):
    runs = sorted(debug_dir.glob(f"{name}_*.log"),key=lambda p: p.stat().st_mtime,reverse=True)
    for run in runs[keep:]:
        try: run.unlink()
        except OSError: pass

def get_logger(name = "stopwatchgame", level = logging.INFO, console = False, historical_debugs: int = 10) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    logger.setLevel(level)
    fmt = logging.Formatter(LOG_FORMAT,LOG_DATE_FORMAT)
    log_dir = PATHS.logs

    # Attempt results and warnings across runs; per-transition debug chatter stays out of it
    _attach(logger, f"{name}:persistent", max(level, logging.INFO), fmt,
            lambda: RotatingFileHandler(log_dir / f"{name}.log", maxBytes=ROTATE_BYTES,
                                        backupCount=ROTATE_COUNT, encoding="utf-8"))
    # Overwritten every launch
    _attach(logger, f"{name}:latest", level, fmt,
            lambda: logging.FileHandler(log_dir / "latest.log", mode="w", encoding="utf-8"))

    if historical_debugs > 0:
        debug_dir = log_dir / "debug"
        debug_dir.mkdir(parents=True,exist_ok=True)
        _attach(logger, f"{name}:historical_debug", logging.DEBUG, fmt,
                lambda: logging.FileHandler(debug_dir / f"{name}_{datetime.now():%Y-%m-%d_%H-%M-%S}.log",
                                            encoding="utf-8"))
        _prune_runs(debug_dir, name, historical_debugs)

    if console:
        _attach(logger, f"{name}:console", level, fmt, logging.StreamHandler)

    return logger

log = get_logger(level=logging.DEBUG)
log.info("=== STOPWATCH GAME STARTED ===")
