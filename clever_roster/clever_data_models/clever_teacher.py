from typing import Optional, TYPE_CHECKING

from .clever_data_object import CleverRecord, PROVIDER, dig
if TYPE_CHECKING:
    from ..clever_client import CleverClient


class CleverTeacher(CleverRecord):

    """
    Represents a teacher in the Clever database.

    :param dict item: the raw listing item, {"data": {...}}
    """

    fields = ('uid', 'email', 'first_name', 'last_name', 'provider')

    def __init__(self, item: dict, client: Optional['CleverClient'] = None):
        data = self.unwrap(item)
        self.uid = data.get('id')
        self.email = data.get('email')
        self.first_name = dig(data, 'name', 'first')
        self.last_name = dig(data, 'name', 'last')
        self.provider = PROVIDER
