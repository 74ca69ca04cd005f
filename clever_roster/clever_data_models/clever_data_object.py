from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, TYPE_CHECKING
if TYPE_CHECKING:
    from ..clever_client import CleverClient

PROVIDER = 'clever'


class CleverDataObject(ABC):

    """
    The base class from which every Clever record inherits. Defines
    the serialization shared by all records: `to_dict` enumerates
    exactly the names listed in the class's `fields` attribute, in that
    order, and `from_dict` rebuilds a record from such a dictionary.
    """

    def __eq__(self, other: 'CleverDataObject'):
        return (isinstance(other, self.__class__)
                and self.to_dict() == other.to_dict())

    @property
    @abstractmethod
    def fields(self) -> Tuple[str, ...]:
        """The serialized attributes, in order."""
        pass

    @staticmethod
    def unwrap(item: dict) -> dict:
        """
        Listing items come wrapped as {"data": {...}, "uri": ...};
        anything else is taken to be the record itself.
        """
        if item is None:
            return {}
        if isinstance(item.get('data'), dict):
            return item['data']
        return item

    @classmethod
    def from_dict(cls, obj: dict) -> 'CleverDataObject':
        """Creates a record from the output of :meth:`to_dict`."""
        record = cls.__new__(cls)
        for field in cls.fields:
            setattr(record, field, obj.get(field))
        return record

    def to_dict(self) -> dict:
        """Converts the serialized attributes to a dictionary."""
        return {field: getattr(self, field) for field in self.fields}

    def __str__(self):
        return str(self.to_dict())

    def __repr__(self):
        return f'{self.__class__.__name__}({str(self)})'

    def __hash__(self):
        return hash((self.__class__.__name__,
                     tuple(_hashable(v) for v in self.to_dict().values())))


class CleverRecord(CleverDataObject, ABC):

    """
    A record fetched from one of the Clever listing endpoints, as
    opposed to one derived by joining other records. Initialized from
    a single raw item and, optionally, the client that fetched it,
    which some records consult for their configuration.
    """

    @abstractmethod
    def __init__(self, item: dict, client: Optional['CleverClient'] = None):
        pass


def dig(obj: dict, *keys: str) -> Any:
    """Follows `keys` into nested dictionaries, None if any is absent."""
    for key in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def _hashable(value):
    if isinstance(value, list):
        return tuple(_hashable(v) for v in value)
    if isinstance(value, dict):
        return tuple(sorted((k, _hashable(v)) for k, v in value.items()))
    return value
