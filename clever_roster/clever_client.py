"""
The :class:`CleverClient` is the entry point of the package. It holds
the vendor credentials, exchanges them for the token of the district
the application belongs to, and exposes one method for each kind of
record Clever lists:

    - :meth:`CleverClient.students`
    - :meth:`CleverClient.teachers`
    - :meth:`CleverClient.courses`
    - :meth:`CleverClient.sections`

plus two views derived from those listings, :meth:`classrooms` and
:meth:`enrollments`, and :meth:`send_grade` for posting to the grades
API. Every one of these authenticates first if needed.

The client is not thread-safe: two threads authenticating at once may
both request tokens.
"""

from os import environ
from typing import Dict, Iterable, List, Type, Union
import logging

from . import clever_data_models as cdm
from .clever_data_models.page_walker import Paginator
from .clever_session import CleverConnection, CleverResponse
from .exceptions import CleverConnectionError, DistrictNotFoundError
from .utils import API_URL, ENDPOINTS

UidFilter = Union[str, Iterable[str], None]

TRUE_STRINGS = {'1', 'true', 'yes', 'on'}
FALSE_STRINGS = {'', '0', 'false', 'no', 'off'}

RECORD_TYPES = {
    'students': cdm.CleverStudent,
    'teachers': cdm.CleverTeacher,
    'courses': cdm.CleverCourse,
    'sections': cdm.CleverSection
}


class CleverClient(object):

    """
    :ivar str app_id: the application id, used to pick the district
        token
    :ivar str vendor_key: the vendor's Clever client id
    :ivar str vendor_secret: the vendor's Clever client secret
    :ivar str username_source: where student usernames come from, one
        of `sis_id`, `email`, `district_username` or None
    :ivar bool shared_classes: whether sections keep every teacher
        rather than only their primary one
    :ivar sync_id: an identifier of the caller's sync run, shown in
        the log
    :ivar str app_token: the district token, None until authenticated
    """

    def __init__(self, app_id: str = None, vendor_key: str = None,
                 vendor_secret: str = None, username_source: str = None,
                 shared_classes: bool = False, sync_id=None,
                 logger: logging.Logger = None,
                 connection: CleverConnection = None):
        self.app_id = app_id
        self.vendor_key = vendor_key
        self.vendor_secret = vendor_secret
        self.username_source = username_source
        self.shared_classes = shared_classes
        self.sync_id = sync_id
        if logger is None:
            self.logger = logging.getLogger(__name__)
        else:
            self.logger = logger
        self.app_token = None
        self.api_url = API_URL
        self.endpoints = dict(ENDPOINTS)
        self.tokens_endpoint = self.endpoints['tokens']
        self.record_types = dict(RECORD_TYPES)
        self._connection = connection

    @classmethod
    def configure(cls, **attributes) -> 'CleverClient':
        """Creates a client and sets each of `attributes` on it."""
        client = cls()
        for name, value in attributes.items():
            if name not in vars(client) and not hasattr(cls, name):
                raise AttributeError(f'CleverClient has no attribute "{name}".')
            setattr(client, name, value)
        return client

    @classmethod
    def from_environment(cls) -> 'CleverClient':
        """
        Creates a client from the following environment variables:

            - CLEVER_APP_ID
            - CLEVER_VENDOR_KEY
            - CLEVER_VENDOR_SECRET
            - CLEVER_USERNAME_SOURCE (optional)
            - CLEVER_SHARED_CLASSES (optional: 1/0, true/false, yes/no
              or on/off)
            - CLEVER_SYNC_ID (optional)
        """
        try:
            app_id = environ['CLEVER_APP_ID']
            vendor_key = environ['CLEVER_VENDOR_KEY']
            vendor_secret = environ['CLEVER_VENDOR_SECRET']
        except KeyError:
            raise EnvironmentError('Clever app id, vendor key or vendor '
                                   'secret are not in the environment.')

        shared_classes = environ.get('CLEVER_SHARED_CLASSES', '')
        if shared_classes.strip().lower() in TRUE_STRINGS:
            shared_classes = True
        elif shared_classes.strip().lower() in FALSE_STRINGS:
            shared_classes = False
        else:
            raise EnvironmentError('CLEVER_SHARED_CLASSES must be a boolean, '
                                   f'not "{shared_classes}".')

        return cls(
            app_id=app_id, vendor_key=vendor_key,
            vendor_secret=vendor_secret,
            username_source=environ.get('CLEVER_USERNAME_SOURCE') or None,
            shared_classes=shared_classes,
            sync_id=environ.get('CLEVER_SYNC_ID')
        )

    @property
    def connection(self) -> CleverConnection:
        if self._connection is None:
            self._connection = CleverConnection(
                api_url=self.api_url, vendor_key=self.vendor_key,
                vendor_secret=self.vendor_secret, logger=self.logger
            )
        return self._connection

    @connection.setter
    def connection(self, connection: CleverConnection):
        self._connection = connection

    @property
    def authenticated(self) -> bool:
        return self.app_token is not None

    def authenticate(self, app_id: str = None):
        """
        Fetches the district tokens and installs the one belonging to
        `app_id` on the connection. Does nothing if already
        authenticated.

        :param app_id: defaults to the client's `app_id`
        :raises CleverConnectionError: if the tokens could not be fetched
        :raises DistrictNotFoundError: if no token belongs to `app_id`
        """
        if self.app_token is not None:
            return

        if app_id is None:
            app_id = self.app_id
        response = self.tokens()
        if not response.success:
            self._log(f'Tokens endpoint returned with status '
                      f'{response.status}.', level=logging.ERROR)
            raise CleverConnectionError(response.status, self.tokens_endpoint)

        self._set_token(response, app_id)

    def tokens(self) -> CleverResponse:
        """
        Fetches the tokens of every district that authorized the
        application. The body of a successful response is mapped to
        :class:`CleverToken` objects; an unsuccessful one is returned
        as is.
        """
        response = self.connection.execute(self.tokens_endpoint)
        self._map_response(response, cdm.CleverToken)
        return response

    def students(self, record_uids: UidFilter = None) \
            -> List[cdm.CleverStudent]:
        return self._fetch_records('students', record_uids)

    def teachers(self, record_uids: UidFilter = None) \
            -> List[cdm.CleverTeacher]:
        return self._fetch_records('teachers', record_uids)

    def courses(self, record_uids: UidFilter = None) \
            -> List[cdm.CleverCourse]:
        return self._fetch_records('courses', record_uids)

    def sections(self, record_uids: UidFilter = None) \
            -> List[cdm.CleverSection]:
        return self._fetch_records('sections', record_uids)

    def classrooms(self, *args, **kwargs) -> List[cdm.CleverClassroom]:
        """
        Builds a classroom for every section, taking the course number
        from the section's course. Sections whose course is not found
        get a `course_number` of None.

        Any arguments are ignored; they are accepted so that this
        method can be called the same way as the record methods.
        """
        self.authenticate()

        fetched_courses = self.courses()
        course_for_uid = {}
        for course in fetched_courses:
            course_for_uid.setdefault(course.uid, course)

        return [cdm.CleverClassroom.from_section(
                    section, course_for_uid.get(section.course))
                for section in self.sections()]

    def enrollments(self, classroom_uids: Iterable[str] = None) \
            -> Dict[str, List[cdm.CleverEnrollment]]:
        """
        Expands section rosters into enrollments.

        :param classroom_uids: if given and not empty, only these
            sections are expanded
        :return: the enrollments keyed by role, "student" and "teacher"
        """
        self.authenticate()

        fetched_sections = self.sections()
        enrollments = cdm.parse_enrollments(fetched_sections, classroom_uids)

        n_enrollments = sum(len(e) for e in enrollments.values())
        self._log(f'Found {n_enrollments} enrollments.')
        return enrollments

    def send_grade(self, request_body: dict) -> CleverResponse:
        """Posts `request_body` to the grades API."""
        self.authenticate()

        grades_endpoint = self.endpoints['grades']
        return self.connection.execute(grades_endpoint, 'post', None,
                                       request_body)

    def _fetch_records(self, record_kind: str, record_uids: UidFilter) \
            -> List[cdm.CleverRecord]:
        """
        Fetches every record of a kind, then keeps those in
        `record_uids` if it is not empty.

        :param record_kind: a key of `endpoints` and `record_types`
        :param record_uids: uids to keep, a single uid may be passed as
            a string
        :return: the records in the order Clever listed them
        """
        self.authenticate()

        endpoint = self.endpoints[record_kind]
        record_type: Type[cdm.CleverRecord] = self.record_types[record_kind]
        walker = Paginator(self.connection, endpoint, 'get', record_type,
                           client=self, logger=self.logger)
        records = list(walker.fetch())
        self._log(f'Fetched {len(records)} {record_kind}.')

        if isinstance(record_uids, str):
            record_uids = [record_uids]
        if not record_uids:
            return records

        record_uids = set(record_uids)
        return [record for record in records if record.uid in record_uids]

    def _set_token(self, response: CleverResponse, app_id: str):
        district_token = next(
            (token for token in response.body or []
             if token.owner_id == app_id),
            None
        )
        if district_token is None:
            raise DistrictNotFoundError(app_id)

        self.connection.set_token(district_token.access_token)
        self.app_token = district_token.access_token
        self._log(f'Authenticated for district {app_id}.')

    @staticmethod
    def _map_response(response: CleverResponse,
                      record_type: Type[cdm.CleverRecord]):
        if response.success:
            response.body = [record_type(item) for item in response.body or []]

    def _log(self, msg: str, level: int = logging.INFO):
        if self.sync_id is not None:
            msg = f'sync {self.sync_id}: {msg}'
        self.logger.log(level, msg)
