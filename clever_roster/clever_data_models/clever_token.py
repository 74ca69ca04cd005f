from typing import Optional, TYPE_CHECKING

from .clever_data_object import CleverRecord
if TYPE_CHECKING:
    from ..clever_client import CleverClient


class CleverToken(CleverRecord):

    """
    Represents a district token returned by the Clever tokens endpoint.
    Each district that authorized the application is issued one.

    :param dict item: the raw token object
    :ivar dict owner: the district owning the token, {"type", "id"}
    :ivar str access_token: the bearer token for that district
    :ivar list scopes: the scopes the token was granted
    :ivar str created: when the token was issued
    """

    fields = ('owner', 'access_token', 'scopes', 'created')

    def __init__(self, item: dict, client: Optional['CleverClient'] = None):
        data = self.unwrap(item)
        self.owner = data.get('owner') or {}
        self.access_token = data.get('access_token')
        self.scopes = data.get('scopes') or []
        self.created = data.get('created')

    @property
    def owner_id(self) -> Optional[str]:
        return self.owner.get('id') if self.owner else None

    def __str__(self):
        # Keep the token itself out of logs
        return f'district {self.owner_id}, scopes {self.scopes}'
