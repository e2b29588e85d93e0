import threading
import time

_lock = threading.Lock()
_last_token = 0


def now_ms() -> int:
    return int(time.time() * 1000)


def time_token(suffix: str = "") -> str:
    """Epoch-millis id, bumped so ids issued in the same millisecond stay distinct."""
    global _last_token
    with _lock:
        token = max(now_ms(), _last_token + 1)
        _last_token = token
    return f"{token}{suffix}"
