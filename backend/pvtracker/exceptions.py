class PvTrackerError(Exception):
    """Base class for errors raised by the service layer."""


class ValidationError(PvTrackerError):
    """Raised when a request field is malformed or out of range."""


class InstallationNotFound(PvTrackerError):
    """Raised when the referenced installation does not exist."""

    def __init__(self, installation_id: int):
        self.installation_id = installation_id
        super().__init__(f"Installation {installation_id} not found")
