class CoordinateResolutionError(Exception):
    """Trail name could not be mapped to coordinates."""


class ProviderError(Exception):
    """An upstream data provider failed or returned unusable data."""

    def __init__(self, provider, message):
        super().__init__(message)
        self.provider = provider
