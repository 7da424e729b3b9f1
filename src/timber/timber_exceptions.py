class TimberError(Exception):
    pass


class SnapshotDecodeError(TimberError, ValueError):
    def __init__(self, reason, record=None):
        self.reason = reason
        self.record = record
        super().__init__(reason)
