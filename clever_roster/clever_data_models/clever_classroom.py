from typing import Optional

from .clever_data_object import CleverDataObject, PROVIDER
from .clever_course import CleverCourse
from .clever_section import CleverSection


class CleverClassroom(CleverDataObject):

    """
    A classroom is not fetched from Clever on its own. It is a section
    joined with the course it belongs to, from which it takes the
    course number.

    :param str uid: the section's uid
    :param str name: the section's name
    :param str period: the section's period
    :param str course_number: the number of the section's course, None
        if the course was not found
    :param grades: the section's grade
    """

    fields = ('uid', 'name', 'period', 'course_number', 'grades',
              'provider')

    def __init__(self, uid: str, name: str = None, period: str = None,
                 course_number: str = None, grades=None,
                 provider: str = PROVIDER):
        self.uid = uid
        self.name = name
        self.period = period
        self.course_number = course_number
        self.grades = grades
        self.provider = provider

    @classmethod
    def from_section(cls, section: CleverSection,
                     course: Optional[CleverCourse] = None) \
            -> 'CleverClassroom':
        return cls(uid=section.uid, name=section.name,
                   period=section.period,
                   course_number=course.number if course else None,
                   grades=section.grades)
