class ConfigurationError(Exception):
    """Raised when a required setting (such as the Wolfram AppID) is missing."""


class IntegrationError(Exception):
    """Raised when an external API call fails."""


class TransportError(IntegrationError):
    """Raised when the external API answers with a non-2xx status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class QueryUnsuccessfulError(IntegrationError):
    """Raised when a well-formed response reports that the query itself failed."""
