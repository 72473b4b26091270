SAMPLE_LOGS = (
    "[INFO] 2025-06-13T14:22:31Z - User logged in",
    "[ERROR] 2025-06-13T14:23:05Z - Failed to fetch profile",
    "[INFO] 2025-06-13T14:25:00Z - User logged out",
)


class LogStore:
    """Read-only store serving the fixed sample log lines."""

    def __init__(self, logs=SAMPLE_LOGS):
        self._logs = tuple(logs)

    def get_logs(self):
        """Return the log lines as a new list, oldest first."""
        return list(self._logs)

    @property
    def count(self):
        """Number of log lines held in the store."""
        return len(self._logs)
