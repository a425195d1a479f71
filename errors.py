# errors.py
class LexicalError(Exception):
    """Base class for every error raised by the analyzer"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class InputUnavailable(LexicalError):
    def __init__(self, source, reason=None):
        message = f"input '{source}' is unavailable"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.source = source


class ReferenceSetUnavailable(LexicalError):
    def __init__(self, path, reason=None):
        message = f"reference set '{path}' is unavailable"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path


class MalformedSymbolRequest(LexicalError):
    def __init__(self, message: str = "no symbol given to search for"):
        super().__init__(message)
