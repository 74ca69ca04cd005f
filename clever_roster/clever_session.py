from typing import Any, Optional
from urllib.parse import urljoin
import logging

from requests.auth import AuthBase, HTTPBasicAuth
import requests

from .utils import API_URL, get_header

# Seconds to wait for the connection to open and for the response
OPEN_TIMEOUT = 60
TIMEOUT = 120


class CleverResponse(object):

    """
    Envelope around every call made to the Clever API.

    :ivar int status: the HTTP status code
    :ivar raw_body: the decoded JSON body, or the text of a non-JSON
        body, or None when the body was empty
    :ivar body: the "data" array of the JSON body. Replaced by mapped
        record objects when the response is successful and the caller
        maps it.
    :ivar List[dict] links: the "links" array of the JSON body
    """

    def __init__(self, status: int, raw_body: Any = None):
        self.status = status
        self.raw_body = raw_body
        if isinstance(raw_body, dict):
            self.body = raw_body.get('data')
            self.links = raw_body.get('links') or []
        else:
            self.body = None
            self.links = []

    @classmethod
    def from_requests(cls, r: requests.Response) -> 'CleverResponse':
        """Wraps a response returned by :mod:`requests`."""
        content_type = r.headers.get('Content-Type', '')
        if not r.content:
            raw_body = None
        elif 'json' in content_type:
            raw_body = r.json()
        else:
            raw_body = r.text
        return cls(r.status_code, raw_body)

    @property
    def success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def next_uri(self) -> Optional[str]:
        """The URI of the following page, None on the last page."""
        for link in self.links:
            if link.get('rel') == 'next':
                return link.get('uri')
        return None

    def __str__(self):
        return f'{self.status}: {self.raw_body}'

    def __repr__(self):
        return f'CleverResponse({self.status})'


class CleverConnection(requests.Session):

    """
    Extends the regular :class:`requests.Session` class to speak to the
    Clever API. Requests are authorized with the vendor credentials via
    HTTP basic auth until a district token is installed with
    :meth:`set_token`, after which every request carries that bearer
    token instead.

    :ivar str api_url: base URL that relative endpoints are joined to
    :ivar logging.Logger logger: module-wide logger unless one is given
    """

    def __init__(self, api_url: str = API_URL, vendor_key: str = None,
                 vendor_secret: str = None, logger: logging.Logger = None):
        super().__init__()
        if logger is None:
            self.logger = logging.getLogger(__name__)
        else:
            self.logger = logger
        self.api_url = api_url
        self.headers.update({'Accept': 'application/json'})
        if vendor_key is not None or vendor_secret is not None:
            self.auth = HTTPBasicAuth(vendor_key, vendor_secret)
        self.logger.debug('Session opened.')

    def execute(self, endpoint: str, method: str = 'get',
                query_params: dict = None, body: Any = None) \
            -> CleverResponse:
        """
        Performs one call against the Clever API.

        :param endpoint: a path relative to `api_url` or an absolute URL
        :param method: the HTTP verb
        :param query_params: parameters appended to the query string
        :param body: an object to send as the JSON body
        :return: the wrapped response, whatever its status
        """
        url = urljoin(self.api_url, endpoint)
        self.logger.debug(f'{method.upper()} {url} {query_params or ""}')
        r = self.request(method.upper(), url, params=query_params, json=body,
                         timeout=(OPEN_TIMEOUT, TIMEOUT))
        self.logger.debug(f'{url} returned with status {r.status_code}')
        return CleverResponse.from_requests(r)

    def set_token(self, access_token: str):
        """Authorizes all subsequent calls with `access_token`."""
        self.auth = BearerAuth(access_token)
        self.logger.debug('District token installed.')


class BearerAuth(AuthBase):

    """
    Attaches a district token to each request. Set as the session's
    `auth` so that neither the vendor credentials nor a .netrc entry
    for the host can take its place.
    """

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r: requests.PreparedRequest) \
            -> requests.PreparedRequest:
        r.headers.update(get_header(self.token))
        return r

    def __eq__(self, other):
        return self.token == getattr(other, 'token', None)

    def __ne__(self, other):
        return not self == other
