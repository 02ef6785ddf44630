import abc
import json

from uuid import UUID

from appdoc import logger
from appdoc.error import ApplicationNotFoundError
from appdoc.model import Application


def as_identifier(application_id):
    if isinstance(application_id, UUID):
        return application_id

    try:
        return UUID(str(application_id))
    except ValueError:
        return None


class ApplicationStore(abc.ABC):
    """Narrow lookup contract the document generator depends on."""

    @abc.abstractmethod
    def fetch(self, application_id: UUID) -> Application:
        ''' Return the application, or raise `ApplicationNotFoundError`. '''


class InMemoryApplicationStore(ApplicationStore):
    def __init__(self, applications=None):
        self._store = {}
        if applications:
            self.add(*applications)

    def add(self, *applications):
        ''' Store application records (models or mappings).

            A record whose id is already stored replaces the previous one.
        '''
        for item in applications:
            if not isinstance(item, Application):
                item = Application.create(item)

            self._store[item.id] = item

        return self

    def fetch(self, application_id):
        try:
            return self._store[as_identifier(application_id)]
        except KeyError:
            raise ApplicationNotFoundError(
                "D01.404", f"Application not found: {application_id}"
            )

    def find(self, **criteria):
        def _match(item):
            return all(getattr(item, k, None) == v for k, v in criteria.items())

        return [item for item in self._store.values() if _match(item)]

    def load_json(self, path):
        with open(path, "r", encoding="utf-8") as fp:
            entries = json.load(fp)

        if not isinstance(entries, list):
            raise ValueError(f"Application fixture must be a list of records: {path}")

        self.add(*entries)
        logger.info("Loaded %d application(s) from [%s]", len(entries), path)
        return self

    @classmethod
    def from_json(cls, path):
        return cls().load_json(path)

    def __contains__(self, application_id):
        return as_identifier(application_id) in self._store

    def __len__(self):
        return len(self._store)
