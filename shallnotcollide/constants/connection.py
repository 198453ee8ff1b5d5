# shallnotcollide/constants/connection.py

class ServerConstants:
    """Shared constants for the traffic server and its pollers."""

    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 3000
    BROADCAST_INTERVAL_SEC = 2.0
    ALERT_HISTORY = 100
    WORKER_RETRY_SEC = 5.0
