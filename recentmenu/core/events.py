from .logger import get_logger

logger = get_logger("events")

ITEM_ACTIVATED = "item_activated"
OPEN_ALL_ACTIVATED = "open_all_activated"
CLEAR_ALL_ACTIVATED = "clear_all_activated"


class EventEmitter:
    """
    Simple event hook system. Register callbacks with on(), emit with emit().
    No GUI dependency. Used by RecentFilesMenu to publish item_activated,
    open_all_activated and clear_all_activated to the host application.
    """
    def __init__(self):
        self._handlers = {}  # event_name -> list of callables

    def on(self, event_name: str, callback):
        """Register a callback for event_name. Callback receives keyword arguments from emit()."""
        if event_name not in self._handlers:
            self._handlers[event_name] = []
        self._handlers[event_name].append(callback)

    def off(self, event_name: str, callback=None):
        """Remove one callback, or all callbacks for event_name if callback is None."""
        if event_name not in self._handlers:
            return
        if callback is None:
            self._handlers[event_name] = []
        else:
            self._handlers[event_name] = [h for h in self._handlers[event_name] if h != callback]

    def emit(self, event_name: str, **payload):
        """Invoke all callbacks registered for event_name with **payload. Errors are logged, not raised."""
        for h in list(self._handlers.get(event_name, ())):
            try:
                h(**payload)
            except Exception as e:
                logger.exception("Event handler error [%s]: %s", event_name, e)
