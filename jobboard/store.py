"""JSON-file storage for job board collections.

Each collection lives in its own JSON document. Reads fail open: a missing or
unreadable document reads as the collection's default value. Writes replace
the whole document and let errors propagate. There is no locking; the last
write wins.
"""
import copy
import json
import logging
import os

from jobboard.exceptions import RecordNotFound
from jobboard.schemas import COLLECTIONS

logger = logging.getLogger(__name__)

VOTING_PERIODS_FILE = COLLECTIONS["voting-periods"].filename


def dumps(data):
    return json.dumps(data, indent=2)


class StoreBase:
    """A single JSON document with a default value"""

    def __init__(self, default):
        self.default = default

    @property
    def name(self):
        raise NotImplementedError

    def load_text(self):
        """ Returns the raw document, raising FileNotFoundError if there is none """
        raise NotImplementedError

    def save_text(self, text):
        raise NotImplementedError

    def read(self):
        try:
            return json.loads(self.load_text())
        except FileNotFoundError:
            logger.debug("%s does not exist yet; using an empty document", self.name)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, treating it as empty: %s", self.name, e)
        return copy.deepcopy(self.default)

    def write(self, data):
        self.save_text(dumps(data))


class FileStore(StoreBase):
    def __init__(self, path, default):
        super().__init__(default)
        self.path = path

    @property
    def name(self):
        return self.path

    def load_text(self):
        with open(self.path, encoding="utf-8") as f:
            return f.read()

    def save_text(self, text):
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)


class MemoryStore(StoreBase):
    """Keeps the serialized document in memory; handy for tests"""

    def __init__(self, default, text=None):
        super().__init__(default)
        self.text = text

    @property
    def name(self):
        return "<memory>"

    def load_text(self):
        if self.text is None:
            raise FileNotFoundError(self.name)
        return self.text

    def save_text(self, text):
        self.text = text


class VotingPeriodRepository:
    """Reads and writes the ``{"periods": [...]}`` voting period document"""

    def __init__(self, store):
        self.store = store

    def read(self):
        doc = self.store.read()
        if not isinstance(doc, dict) or not isinstance(doc.get("periods"), list):
            logger.warning("%s is not a voting period document; treating it as empty",
                           self.store.name)
            return {"periods": []}
        return doc

    def write(self, doc):
        self.store.write(doc)


def voting_period_repository(path):
    return VotingPeriodRepository(
        FileStore(path, COLLECTIONS["voting-periods"].default)
    )


def read_voting_periods(path=VOTING_PERIODS_FILE):
    return voting_period_repository(path).read()


def write_voting_periods(doc, path=VOTING_PERIODS_FILE):
    voting_period_repository(path).write(doc)


class Collections:
    """Access to every collection in a data directory"""

    def __init__(self, data_dir):
        self.data_dir = data_dir

    def path(self, name):
        return os.path.join(self.data_dir, COLLECTIONS[name].filename)

    def store(self, name):
        return FileStore(self.path(name), COLLECTIONS[name].default)

    def read(self, name):
        return self.store(name).read()

    def write(self, name, data):
        self.store(name).write(data)

    def voting_periods(self):
        return VotingPeriodRepository(self.store("voting-periods"))

    def initialize(self, overwrite=False):
        """Create missing collection files with their default contents.

        Returns the names of the collections that were written.
        """
        os.makedirs(self.data_dir, exist_ok=True)
        created = []
        for name, collection in COLLECTIONS.items():
            if overwrite or not os.path.exists(self.path(name)):
                self.write(name, copy.deepcopy(collection.default))
                created.append(name)
        return created


def find_record(records, key, fields=("id",)):
    """Return the first record whose id (or any other of ``fields``) equals ``key``."""
    for record in records:
        if any(record.get(field) == key for field in fields):
            return record
    raise RecordNotFound("No record matching {}".format(key))
