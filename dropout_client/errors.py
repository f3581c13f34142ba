# client error taxonomy
# every failure the client raises derives from ClientError


class ClientError(Exception):
    """base class for all client-side failures"""


class Unauthenticated(ClientError):
    """an authenticated call was attempted with no stored token"""

    def __init__(self, message: str = "No authentication token found"):
        super().__init__(message)


class NetworkFailure(ClientError):
    """transport-level failure, or a response body that could not be decoded"""

    def __init__(self, message: str = "Network error occurred"):
        super().__init__(message)


class RemoteRejected(ClientError):
    """the backend answered with a non-success status"""

    def __init__(self, status_code: int, message: str = "Something went wrong"):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class EmptyInputError(ClientError):
    """an aggregator was given zero records where at least one is required"""


class UnknownRiskLabel(ClientError):
    """a risk label matched none of the known buckets"""

    def __init__(self, label: str):
        super().__init__(f"Unknown risk label: {label!r}")
        self.label = label


class WeakPassword(ClientError):
    """a new password failed the strength rules"""
