from typing import Optional, TYPE_CHECKING

from .clever_data_object import CleverRecord, PROVIDER, dig
if TYPE_CHECKING:
    from ..clever_client import CleverClient

# Fields a username can be taken from, in order of preference
USERNAME_SOURCES = ('sis_id', 'email', 'district_username')


class CleverStudent(CleverRecord):

    """
    Represents a student in the Clever database.

    The username is taken from the field named by the client's
    `username_source` when the student has a value there. Otherwise it
    falls back to the first of `sis_id`, `email` and
    `district_username` that is present.

    :param dict item: the raw listing item, {"data": {...}}
    :param CleverClient client: the client that fetched the item
    """

    fields = ('uid', 'first_name', 'last_name', 'username', 'provider')

    def __init__(self, item: dict, client: Optional['CleverClient'] = None):
        data = self.unwrap(item)
        self.uid = data.get('id')
        self.first_name = dig(data, 'name', 'first')
        self.last_name = dig(data, 'name', 'last')
        self.sis_id = data.get('sis_id')
        self.email = data.get('email')
        self.district_username = dig(data, 'credentials', 'district_username')
        username_source = getattr(client, 'username_source', None)
        self.username = self.select_username(username_source)
        self.provider = PROVIDER

    def select_username(self, username_source: str = None) -> Optional[str]:
        """
        Picks the username for this student.

        :param username_source: one of `USERNAME_SOURCES`, or None for
            the default order
        :return: the chosen value, None if the student has none of them
        """
        if username_source in USERNAME_SOURCES:
            username = getattr(self, username_source, None)
            if username:
                return username

        for source in USERNAME_SOURCES:
            username = getattr(self, source, None)
            if username:
                return username
        return None
