"""
Error types raised while loading an access log.
"""


class LogError(Exception):
    """Base class for everything that aborts a log load"""


class FileAccessError(LogError):
    """The log path does not exist or cannot be read"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class DecodeError(LogError):
    """A line is not valid JSON or does not look like a log record"""

    def __init__(self, line_num: int, message: str, line: str = ""):
        self.line_num = line_num
        self.message = message
        self.line = line
        super().__init__(f"line {line_num}: {message}")
