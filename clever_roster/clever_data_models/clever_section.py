from typing import List, Optional, TYPE_CHECKING

from .clever_data_object import CleverRecord, PROVIDER
if TYPE_CHECKING:
    from ..clever_client import CleverClient


class CleverSection(CleverRecord):

    """
    Represents a section in the Clever database, which carries its
    roster as lists of uids.

    Clever reports both the primary teacher of a section ("teacher")
    and everyone teaching it ("teachers"). Unless the client has
    `shared_classes` turned on, only the primary teacher is kept, so
    that a shared section only shows up for the teacher who owns it.

    :param dict item: the raw listing item, {"data": {...}}
    :param CleverClient client: the client that fetched the item
    :ivar str course: uid of the section's course
    :ivar List[str] teachers: uids of the section's teachers
    :ivar List[str] students: uids of the section's students
    """

    fields = ('uid', 'name', 'grades', 'period', 'course', 'teachers',
              'students', 'provider')

    def __init__(self, item: dict, client: Optional['CleverClient'] = None):
        data = self.unwrap(item)
        self.uid = data.get('id')
        self.name = data.get('name')
        self.grades = data.get('grade')
        self.period = data.get('period')
        self.course = data.get('course')
        shared_classes = bool(getattr(client, 'shared_classes', False))
        self.teachers = self._parse_teachers(data, shared_classes)
        self.students = list(data.get('students') or [])
        self.provider = PROVIDER

    @staticmethod
    def _parse_teachers(data: dict, shared_classes: bool) -> List[str]:
        if not shared_classes and data.get('teacher'):
            return [data['teacher']]
        return list(data.get('teachers') or [])
