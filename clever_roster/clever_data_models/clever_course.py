from typing import Optional, TYPE_CHECKING

from .clever_data_object import CleverRecord
if TYPE_CHECKING:
    from ..clever_client import CleverClient


class CleverCourse(CleverRecord):

    fields = ('uid', 'district', 'name', 'number')

    def __init__(self, item: dict, client: Optional['CleverClient'] = None):
        data = self.unwrap(item)
        self.uid = data.get('id')
        self.district = data.get('district')
        self.name = data.get('name')
        self.number = data.get('number')
