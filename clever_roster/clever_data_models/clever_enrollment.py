from typing import Dict, Iterable, List

from .clever_data_object import CleverDataObject
from .clever_section import CleverSection

ROLES = ('student', 'teacher')


class CleverEnrollment(CleverDataObject):
    """Membership of one user, student or teacher, in one classroom."""

    fields = ('classroom_uid', 'user_uid')

    def __init__(self, classroom_uid: str, user_uid: str):
        self.classroom_uid = classroom_uid
        self.user_uid = user_uid


def parse_enrollments(sections: Iterable[CleverSection],
                      classroom_uids: Iterable[str] = None) \
        -> Dict[str, List[CleverEnrollment]]:
    """
    Expands the rosters of `sections` into enrollments, keyed by role.

    :param sections: the sections to expand
    :param classroom_uids: if not empty, only sections whose uid is in
        this collection are expanded
    :return: {"student": [...], "teacher": [...]}, in section order
    """
    classroom_uids = set(classroom_uids or ())
    enrollments = {role: [] for role in ROLES}
    for section in sections:
        if classroom_uids and section.uid not in classroom_uids:
            continue

        for student_uid in section.students:
            enrollments['student'].append(
                CleverEnrollment(classroom_uid=section.uid,
                                 user_uid=student_uid)
            )
        for teacher_uid in section.teachers:
            enrollments['teacher'].append(
                CleverEnrollment(classroom_uid=section.uid,
                                 user_uid=teacher_uid)
            )

    return enrollments
