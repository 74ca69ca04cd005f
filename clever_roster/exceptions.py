from typing import Union


class CleverError(Exception):
    """Base class of every error raised by this package."""


class CleverConnectionError(CleverError, ConnectionError):

    """
    Raised when a Clever endpoint answers with a status outside of the
    2xx range, either while fetching district tokens or while walking
    the pages of a listing.
    """

    def __init__(self, status: int = None, endpoint: str = None):
        self.status = status
        self.endpoint = endpoint

    def __str__(self):
        if self.endpoint is None:
            return 'The Clever API endpoint could not be reached.'
        return (f'The Clever API endpoint "{self.endpoint}" returned '
                f'status {self.status}.')


class DistrictNotFoundError(CleverError):
    """Used when none of the district tokens belongs to the app id."""
    def __init__(self, app_id: Union[int, str]):
        self.app_id = app_id

    def __str__(self):
        return f'No district token was issued for application "{self.app_id}".'
