"""
The :mod:`clever_data_models` package defines the records that are
built from the payloads of the Clever API, along with the
:class:`Paginator` that walks the paginated listings they come from.

The base :class:`CleverDataObject` class defines the serialization
shared by every record. It is abstract and as such cannot be
instantiated on its own. Records fetched straight from a listing
subclass :class:`CleverRecord` and are initialized from a single raw
item:

    - :class:`CleverToken`
    - :class:`CleverStudent`
    - :class:`CleverTeacher`
    - :class:`CleverCourse`
    - :class:`CleverSection`

The two remaining records are derived by joining the others:

    - :class:`CleverClassroom`, a section joined with its course
    - :class:`CleverEnrollment`, a user's membership in a section

Each of these classes is defined in its own submodule.
"""

from .clever_data_object import CleverDataObject, CleverRecord
from .clever_token import CleverToken
from .clever_student import CleverStudent, USERNAME_SOURCES
from .clever_teacher import CleverTeacher
from .clever_course import CleverCourse
from .clever_section import CleverSection
from .clever_classroom import CleverClassroom
from .clever_enrollment import CleverEnrollment, parse_enrollments
from .page_walker import Paginator
