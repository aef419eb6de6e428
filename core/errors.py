"""Exception hierarchy for the resampling engine."""


class SeriesError(Exception):
    """Base class for every engine failure."""


class InvalidRange(SeriesError, ValueError):
    """Unknown range token."""

    def __init__(self, token: str) -> None:
        super().__init__(f"unknown range token: {token!r}")
        self.token = token


class EmptyInput(SeriesError):
    """No observation is available to anchor the bucket grid."""


class InvalidBucketWidth(SeriesError, ValueError):
    pass


class InvalidCapacity(SeriesError, ValueError):
    pass


class InvalidWindow(SeriesError, ValueError):
    pass
