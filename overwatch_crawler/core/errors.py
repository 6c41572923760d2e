"""
Fetch error classification for playoverwatch.com responses
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    PROFILE_NOT_FOUND = 'PROFILE_NOT_FOUND'
    STRUCTURE_CHANGED = 'TECHNICAL_EXCEPTION_HTML_STRUCTURE_MAY_HAVE_CHANGED'
    UNCLASSIFIED = 'TECHNICAL_EXCEPTION_NOT_IDENTIFIED'


def classify(status_code: Optional[int]) -> ErrorKind:
    """
    Map an HTTP status code to an error kind.

    A server error is read as the page markup having changed under us.
    None stands for a transport failure with no response at all.
    """
    if status_code == 404:
        return ErrorKind.PROFILE_NOT_FOUND
    if status_code is not None and 500 <= status_code < 600:
        return ErrorKind.STRUCTURE_CHANGED
    return ErrorKind.UNCLASSIFIED


class OverwatchError(Exception):
    """Base error for failed profile or search fetches"""

    kind = ErrorKind.UNCLASSIFIED

    def __init__(self, url: str, status_code: Optional[int] = None, detail: str = ''):
        self.url = url
        self.status_code = status_code
        message = f"{self.kind.value} (HTTP {status_code}) for {url}" if status_code else f"{self.kind.value} for {url}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ProfileNotFound(OverwatchError):
    kind = ErrorKind.PROFILE_NOT_FOUND


class StructureChanged(OverwatchError):
    kind = ErrorKind.STRUCTURE_CHANGED


class UnclassifiedFailure(OverwatchError):
    kind = ErrorKind.UNCLASSIFIED


ERROR_CLASSES = {
    ErrorKind.PROFILE_NOT_FOUND: ProfileNotFound,
    ErrorKind.STRUCTURE_CHANGED: StructureChanged,
    ErrorKind.UNCLASSIFIED: UnclassifiedFailure,
}


def error_for(status_code: Optional[int], url: str, detail: str = '') -> OverwatchError:
    """Build the exception matching a failed response"""
    return ERROR_CLASSES[classify(status_code)](url, status_code, detail)
