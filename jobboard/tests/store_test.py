import json
import os
from datetime import datetime, timedelta, timezone

from jobboard.exceptions import RecordNotFound
from jobboard.helpers import generate_id
from jobboard.schemas import COLLECTIONS
from jobboard.store import (
    Collections,
    FileStore,
    MemoryStore,
    VotingPeriodRepository,
    find_record,
    read_voting_periods,
    write_voting_periods,
)
from jobboard.tests.utils import JobBoardTestCase
from jobboard.voting import get_ongoing_voting_period


def iso_in(**kwargs):
    return (datetime.now(timezone.utc) + timedelta(**kwargs)).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def new_period(state, end_time, votes_per_job):
    return {
        "id": generate_id(),
        "state": state,
        "jobVotes": [
            {"jobId": generate_id(), "votes": [generate_id() for _ in range(count)]}
            for count in votes_per_job
        ],
        "endTime": end_time,
    }


class VotingPeriodFileTestCase(JobBoardTestCase):
    def setUp(self):
        self.path = os.path.join(self._create_tempdir(), "voting-periods.json")

    def test_missing_file_reads_empty(self):
        with self.assertLogs("jobboard.store", level="DEBUG") as logs:
            self.assertEqual(read_voting_periods(self.path), {"periods": []})
        self.assertEqual(logs.records[0].levelname, "DEBUG")

    def test_corrupt_file_reads_empty(self):
        with open(self.path, "w") as f:
            f.write('{"periods": [')

        with self.assertLogs("jobboard.store", level="DEBUG") as logs:
            self.assertEqual(read_voting_periods(self.path), {"periods": []})
        self.assertEqual(logs.records[0].levelname, "WARNING")

    def test_wrong_shape_reads_empty(self):
        with open(self.path, "w") as f:
            json.dump([1, 2, 3], f)

        self.assertEqual(read_voting_periods(self.path), {"periods": []})

    def test_write_is_pretty_printed(self):
        write_voting_periods({"periods": []}, self.path)
        with open(self.path) as f:
            self.assertEqual(f.read(), '{\n  "periods": []\n}')

    def test_write_replaces_file(self):
        write_voting_periods({"periods": [new_period("Archived", None, [1])]}, self.path)
        write_voting_periods({"periods": []}, self.path)
        self.assertEqual(read_voting_periods(self.path), {"periods": []})

    def test_write_to_missing_directory_raises(self):
        path = os.path.join(os.path.dirname(self.path), "nope", "voting-periods.json")
        with self.assertRaises(OSError):
            write_voting_periods({"periods": []}, path)

    def test_round_trip(self):
        doc = {"periods": [
            new_period("Ongoing", iso_in(days=7), [2, 1]),
            new_period("Archived", None, []),
        ]}
        write_voting_periods(doc, self.path)
        self.assertEqual(read_voting_periods(self.path), doc)

    def test_scenario(self):
        write_voting_periods({"periods": []}, self.path)
        self.assertEqual(read_voting_periods(self.path), {"periods": []})

        ongoing = new_period("Ongoing", iso_in(days=7), [2, 1])
        write_voting_periods({"periods": [ongoing]}, self.path)

        read_back = read_voting_periods(self.path)
        self.assertEqual(len(read_back["periods"]), 1)
        self.assertEqual(read_back["periods"][0]["id"], ongoing["id"])
        self.assertEqual(read_back["periods"][0]["state"], "Ongoing")
        self.assertEqual(len(read_back["periods"][0]["jobVotes"]), 2)
        self.assertEqual(get_ongoing_voting_period(read_back["periods"])["id"], ongoing["id"])

        archived = new_period("Archived", iso_in(days=-1), [1])
        write_voting_periods({"periods": [ongoing, archived]}, self.path)

        periods = read_voting_periods(self.path)["periods"]
        self.assertEqual(len(periods), 2)
        self.assertEqual(len([p for p in periods if p["state"] == "Ongoing"]), 1)
        self.assertEqual(len([p for p in periods if p["state"] == "Archived"]), 1)

    def test_file_removed_between_reads(self):
        write_voting_periods({"periods": [new_period("Ongoing", None, [])]}, self.path)
        os.remove(self.path)
        self.assertEqual(read_voting_periods(self.path), {"periods": []})


class MemoryStoreTestCase(JobBoardTestCase):
    def setUp(self):
        self.repo = VotingPeriodRepository(MemoryStore({"periods": []}))

    def test_empty(self):
        self.assertEqual(self.repo.read(), {"periods": []})

    def test_reads_are_independent_copies(self):
        doc = self.repo.read()
        doc["periods"].append({"id": "x"})
        self.assertEqual(self.repo.read(), {"periods": []})

        self.repo.write(doc)
        read_back = self.repo.read()
        read_back["periods"][0]["id"] = "y"
        self.assertEqual(self.repo.read(), {"periods": [{"id": "x"}]})

    def test_corrupt(self):
        self.repo.store.text = "not json"
        with self.assertLogs("jobboard.store", level="WARNING"):
            self.assertEqual(self.repo.read(), {"periods": []})


class CollectionsTestCase(JobBoardTestCase):
    def setUp(self):
        self.data_dir = os.path.join(self._create_tempdir(), "data")
        self.collections = Collections(self.data_dir)

    def test_initialize(self):
        created = self.collections.initialize()

        self.assertEqual(sorted(created), sorted(COLLECTIONS))
        for name, collection in COLLECTIONS.items():
            self.assertEqual(self.collections.read(name), collection.default)

    def test_initialize_keeps_existing(self):
        self.collections.initialize()
        self.collections.write("jobs", [{"id": "job-1"}])

        created = self.collections.initialize()

        self.assertEqual(created, [])
        self.assertEqual(self.collections.read("jobs"), [{"id": "job-1"}])

        self.collections.initialize(overwrite=True)
        self.assertEqual(self.collections.read("jobs"), [])

    def test_defaults_are_not_shared(self):
        jobs = self.collections.read("jobs")
        jobs.append({"id": "job-1"})
        self.assertEqual(COLLECTIONS["jobs"].default, [])

    def test_voting_periods(self):
        os.makedirs(self.data_dir)
        repo = self.collections.voting_periods()
        self.assertIsInstance(repo.store, FileStore)
        self.assertEqual(repo.store.path, os.path.join(self.data_dir, "voting-periods.json"))


class FindRecordTestCase(JobBoardTestCase):
    RECORDS = [
        {"id": "1", "callsign": "HAWK"},
        {"id": "2", "callsign": "ROOK"},
    ]

    def test_by_id(self):
        self.assertIs(find_record(self.RECORDS, "2"), self.RECORDS[1])

    def test_by_other_field(self):
        self.assertIs(find_record(self.RECORDS, "HAWK", ("id", "callsign")), self.RECORDS[0])

    def test_missing(self):
        with self.assertRaises(RecordNotFound):
            find_record(self.RECORDS, "HAWK")
