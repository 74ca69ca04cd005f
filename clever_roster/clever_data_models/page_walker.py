from typing import Generator, Optional, Type, TYPE_CHECKING
import logging

from .clever_data_object import CleverRecord
from ..exceptions import CleverConnectionError
from ..utils import PAGE_LIMIT, split_next_uri
if TYPE_CHECKING:
    from ..clever_client import CleverClient
    from ..clever_session import CleverConnection


class Paginator(object):
    """
    A class designed to abstract the process of walking over the pages
    of a Clever listing. Each page is requested with the same limit and
    the cursor Clever hands back in the "next" link of the previous
    page. A page is only requested once the records of the previous
    one have been consumed.
    """
    def __init__(self, connection: 'CleverConnection', endpoint: str,
                 method: str, record_type: Type[CleverRecord],
                 client: Optional['CleverClient'] = None,
                 logger: logging.Logger = None):
        """
        :param connection: anything exposing `execute`
        :param endpoint: the first page to request
        :param method: the HTTP verb used for every page
        :param record_type: the record each item is converted to
        :param client: passed along to every record
        :param logger: custom logger
        """
        if logger is None:
            self.logger = logging.getLogger(__name__)
        else:
            self.logger = logger
        self.connection = connection
        self.endpoint = endpoint
        self.method = method
        self.record_type = record_type
        self.client = client

    def fetch(self) -> Generator[CleverRecord, None, None]:
        """
        A generator over every record of the listing, in the order the
        server returns them.

        :raises CleverConnectionError: when a page comes back with a
            status outside of the 2xx range
        """
        path, params = self.endpoint, {}
        current_page = 1
        while path is not None:
            params['limit'] = PAGE_LIMIT
            r = self.connection.execute(path, self.method, params)
            if not r.success:
                raise CleverConnectionError(r.status, path)

            items = r.body or []
            self.logger.info(f'Reading page {current_page} of {self.endpoint}'
                             f' ({len(items)} records).')
            for item in items:
                yield self.record_type(item, client=self.client)

            next_uri = r.next_uri
            if not items or next_uri is None:
                break
            path, params = split_next_uri(next_uri)
            current_page += 1

    def __iter__(self):
        return self.fetch()


def fetch(connection: 'CleverConnection', endpoint: str, method: str,
          record_type: Type[CleverRecord],
          client: Optional['CleverClient'] = None) \
        -> Generator[CleverRecord, None, None]:
    """Shorthand for `Paginator(...).fetch()`."""
    return Paginator(connection, endpoint, method, record_type,
                     client=client).fetch()
