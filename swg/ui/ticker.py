from PySide6.QtCore import Qt, QTimer


# QTimer-backed repeating tick handle for GameController. stop() is synchronous on the GUI thread, so once it
# returns no further timeout will be delivered.
class QtTicker:

    def __init__(self, interval_ms, callback, parent=None):
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.setTimerType(Qt.PreciseTimer)
        self._timer.timeout.connect(callback)

    @property
    def is_active(self):
        return self._timer.isActive()

    def start(self):
        self._timer.start()
    def stop(self):
        self._timer.stop()


# Factory usable as GameController(ticker_factory=...), binding every ticker to the given Qt parent.
def qt_ticker_factory(parent=None):
    def factory(interval_ms, callback):
        return QtTicker(interval_ms, callback, parent)
    return factory
