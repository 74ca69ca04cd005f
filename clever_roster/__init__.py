"""
A client for the Clever roster API. The :class:`CleverClient` fetches
students, teachers, courses and sections for the district an
application is installed in, and derives classrooms and enrollments
from them. The records themselves live in the `clever_data_models`
subpackage, imported here as `cdm`.
"""

from . import clever_data_models as cdm
from . import exceptions
from .clever_client import CleverClient
from .clever_session import CleverConnection, CleverResponse
from .utils import (API_URL, COURSES_ENDPOINT, ENDPOINTS, GRADES_ENDPOINT,
                    PAGE_LIMIT, SECTIONS_ENDPOINT, STUDENTS_ENDPOINT,
                    TEACHERS_ENDPOINT, TOKENS_ENDPOINT)
