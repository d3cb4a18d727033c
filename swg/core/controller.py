from swg.common.logger import log
from swg.core.messages import resolve_language, result_message
from swg.core.session import Phase, Session, classify, clamp_target, DEFAULT_TARGET

# One tick adds TICK_SECONDS to the elapsed time, and ticks are requested every TICK_INTERVAL_MS.
TICK_SECONDS = 0.01
TICK_INTERVAL_MS = 10


# Drives a single Session through Idle -> Running -> Result -> Idle. The repeating tick is a handle built by
# `ticker_factory(interval_ms, callback)`; anything with start(), stop() and an `is_active` property works
# (QtTicker in the app, a hand-fired fake in tests).
class GameController:

    def __init__(self, ticker_factory, target_seconds=DEFAULT_TARGET, language="en"):
        self.session = Session(target_seconds)
        self.language = resolve_language(language)
        self._ticker = ticker_factory(TICK_INTERVAL_MS, self.tick)
        self._subscribers = []
        log.debug(f"Initialized game controller with target {self.session.target_seconds}s, language '{self.language}'")

    @property
    def phase(self):
        return self.session.phase

    @property
    def ticking(self):
        return self._ticker.is_active

    # Registers a zero-argument callable run after every state change.
    def subscribe(self, callback):
        self._subscribers.append(callback)
        return callback

    def _notify(self):
        for callback in list(self._subscribers):
            callback()

    #region === Operations ===

    def start(self):
        if self.session.is_running:
            log.debug("Ignored start() while already running")
            return
        s = self.session
        s.elapsed_seconds = 0.0
        s.has_result = False
        s.is_running = True
        self._ticker.start()
        log.debug(f"Started attempt with target {s.target_seconds}s")
        self._notify()

    def stop(self):
        if not self.session.is_running:
            log.debug(f"Ignored stop() in phase '{self.phase.value}'")
            return
        # Cancel first so no tick lands after the result is computed
        self._ticker.stop()
        s = self.session
        s.is_running = False

        diff = abs(s.elapsed_seconds - s.target_seconds)
        s.result_diff = diff
        s.result_severity = classify(diff)
        s.result_message = result_message(s.result_severity, diff, self.language)
        s.has_result = True
        log.info(f"Attempt finished: target {s.target_seconds}s, elapsed {s.elapsed_seconds:.2f}s, "
                 f"diff {s.result_diff:.2f}s -> {s.result_severity.value}")
        self._notify()

    def reset(self):
        self._ticker.stop()
        s = self.session
        s.elapsed_seconds = 0.0
        s.has_result = False
        s.is_running = False
        log.debug("Reset session to idle")
        self._notify()

    def set_target(self, value):
        if self.phase is not Phase.IDLE:
            log.debug(f"Ignored set_target({value}) in phase '{self.phase.value}'")
            return
        clamped = clamp_target(value)
        if clamped != float(value):
            log.debug(f"Clamped target {value} to {clamped}")
        self.session.target_seconds = clamped
        self._notify()

    def set_language(self, language):
        self.language = resolve_language(language)
        log.debug(f"Language set to '{self.language}'")

    # Called by the ticker. Rounded to the tick size so a long run doesn't drift from float error.
    def tick(self):
        if not self.session.is_running:
            return
        self.session.elapsed_seconds = round(self.session.elapsed_seconds + TICK_SECONDS, 2)
        self._notify()

    #endregion === Operations ===
