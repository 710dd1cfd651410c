"""Voting periods: validation, lookup and lifecycle.

A voting period is a plain dict shaped like the records in
``voting-periods.json``::

    {
        "id": "<uuid>",
        "state": "Ongoing" | "Archived",
        "jobVotes": [{"jobId": "<uuid>", "votes": ["<pilot uuid>", ...]}],
        "endTime": "<ISO-8601>" | None,
    }

The validators never raise; they return a bool or a ValidationResult.
The lifecycle functions keep the single-ongoing-period and one-vote-per-pilot
invariants and raise VotingPeriodError when an operation would break them.
"""
import logging
from collections.abc import Mapping
from datetime import datetime, timezone

from jobboard.exceptions import VotingPeriodError
from jobboard.helpers import ValidationResult, generate_id

logger = logging.getLogger(__name__)

ONGOING = "Ongoing"
ARCHIVED = "Archived"
VOTING_PERIOD_STATES = (ONGOING, ARCHIVED)

# Only jobs in this state may receive votes
VOTABLE_JOB_STATE = "Active"


def validate_voting_period_state(state):
    return isinstance(state, str) and state in VOTING_PERIOD_STATES


def parse_end_time(value):
    """Parse an ISO-8601 end time; a trailing ``Z`` means UTC.

    Raises ValueError for anything that isn't a date or date-time.
    """
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def validate_end_time(value):
    """``None`` is an open-ended period; strings must parse as ISO-8601."""
    if value is None:
        return True
    if not isinstance(value, str):
        return False

    try:
        parse_end_time(value)
    except ValueError:
        return False
    return True


def validate_job_votes(job_votes, jobs=None):
    """Check the shape of a period's job votes and the one-vote-per-pilot rule.

    When ``jobs`` (a list of job records) is given, every voted job must also
    exist there and be Active. Without it those checks are skipped.
    """
    if not isinstance(job_votes, list):
        return ValidationResult(False, "jobVotes must be a list")

    jobs_by_id = None
    if jobs is not None:
        jobs_by_id = {
            job["id"]: job for job in jobs
            if isinstance(job, Mapping) and isinstance(job.get("id"), str)
        }

    voters = set()
    for idx, job_vote in enumerate(job_votes):
        if not isinstance(job_vote, Mapping) or not job_vote.get("jobId"):
            return ValidationResult(
                False, "Job vote at index {} is missing a jobId".format(idx)
            )

        job_id = job_vote["jobId"]
        if not isinstance(job_id, str):
            return ValidationResult(
                False, "Job vote at index {} has a jobId that is not a string".format(idx)
            )

        votes = job_vote.get("votes")
        if not isinstance(votes, list):
            return ValidationResult(
                False, "Votes for job {} must be a list".format(job_id)
            )

        entry_voters = set()
        for pilot_id in votes:
            if not isinstance(pilot_id, str):
                return ValidationResult(
                    False, "Votes for job {} must be a list of pilot ids".format(job_id)
                )
            if pilot_id in entry_voters:
                return ValidationResult(
                    False,
                    "Pilot {} is listed twice for job {}".format(pilot_id, job_id)
                )
            if pilot_id in voters:
                return ValidationResult(
                    False,
                    "Pilot {} has voted for more than one job".format(pilot_id)
                )
            entry_voters.add(pilot_id)
        voters.update(entry_voters)

        if jobs_by_id is not None:
            job = jobs_by_id.get(job_id)
            if job is None:
                return ValidationResult(
                    False, "Job {} does not exist".format(job_id)
                )
            if job.get("state") != VOTABLE_JOB_STATE:
                return ValidationResult(
                    False,
                    "Job {} is not Active (state: {})".format(job_id, job.get("state"))
                )

    return ValidationResult(True)


def validate_voting_period_data(period):
    """Validate a single period: state, then end time, then job votes.

    The first failing check is reported.
    """
    if not isinstance(period, Mapping):
        return ValidationResult(False, "A voting period must be an object")

    if not validate_voting_period_state(period.get("state")):
        return ValidationResult(
            False, "Invalid voting period state. Must be Ongoing or Archived"
        )

    if not validate_end_time(period.get("endTime")):
        return ValidationResult(
            False, "Invalid end time. Must be an ISO-8601 date/time or null"
        )

    result = validate_job_votes(period.get("jobVotes"))
    if not result.valid:
        return result

    return ValidationResult(True)


def get_ongoing_voting_period(periods):
    """Return the first Ongoing period, or None."""
    for period in periods:
        if period.get("state") == ONGOING:
            return period
    return None


def count_ongoing(periods):
    return sum(1 for p in periods if p.get("state") == ONGOING)


def check_single_ongoing(periods):
    ongoing = count_ongoing(periods)
    if ongoing > 1:
        raise VotingPeriodError(
            "Found {} ongoing voting periods; at most one is allowed".format(ongoing)
        )


def find_voting_period(periods, period_id):
    for period in periods:
        if period.get("id") == period_id:
            return period
    return None


def create_voting_period(doc, job_ids=(), end_time=None):
    """Start a new Ongoing period and append it to ``doc["periods"]``.

    Refuses while another period is still Ongoing.
    """
    periods = doc.setdefault("periods", [])
    check_single_ongoing(periods)

    current = get_ongoing_voting_period(periods)
    if current is not None:
        raise VotingPeriodError(
            "Voting period {} is still ongoing; archive it first".format(current["id"])
        )

    if not validate_end_time(end_time):
        raise VotingPeriodError("Invalid end time: {}".format(end_time))

    job_votes = []
    for job_id in job_ids:
        if job_id not in [jv["jobId"] for jv in job_votes]:
            job_votes.append({"jobId": job_id, "votes": []})

    period = {
        "id": generate_id(),
        "state": ONGOING,
        "jobVotes": job_votes,
        "endTime": end_time,
    }
    periods.append(period)

    logger.info("Started voting period %s", period["id"])
    return period


def has_voted(period, pilot_id):
    return any(pilot_id in jv.get("votes", []) for jv in period.get("jobVotes", []))


def cast_vote(period, job_id, pilot_id, jobs=None):
    """Record ``pilot_id``'s vote for ``job_id`` in an Ongoing period.

    A pilot gets one vote per period. If ``jobs`` is given, the job must
    exist there and be Active.
    """
    if period.get("state") != ONGOING:
        raise VotingPeriodError(
            "Voting period {} is not ongoing".format(period.get("id"))
        )

    job_votes = period.setdefault("jobVotes", [])
    result = validate_job_votes(job_votes)
    if not result.valid:
        raise VotingPeriodError(result.message)

    if has_voted(period, pilot_id):
        raise VotingPeriodError(
            "Pilot {} has already voted in this period".format(pilot_id)
        )

    if jobs is not None:
        # Only the job being voted for has to be Active right now
        result = validate_job_votes([{"jobId": job_id, "votes": [pilot_id]}], jobs)
        if not result.valid:
            logger.debug("Rejected vote by %s: %s", pilot_id, result.message)
            raise VotingPeriodError(result.message)

    for job_vote in job_votes:
        if job_vote["jobId"] == job_id:
            job_vote["votes"].append(pilot_id)
            break
    else:
        job_votes.append({"jobId": job_id, "votes": [pilot_id]})

    logger.debug("Pilot %s voted for job %s", pilot_id, job_id)


def archive_voting_period(period):
    if period.get("state") != ONGOING:
        raise VotingPeriodError(
            "Voting period {} is already archived".format(period.get("id"))
        )
    period["state"] = ARCHIVED
    logger.info("Archived voting period %s", period.get("id"))


def tally_votes(period):
    """(jobId, vote count) pairs, most votes first."""
    counts = [(jv["jobId"], len(jv["votes"])) for jv in period.get("jobVotes", [])]
    return sorted(counts, key=lambda c: -c[1])


def is_expired(period, now=None):
    end_time = period.get("endTime")
    if end_time is None:
        return False

    end = parse_end_time(end_time)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)

    if now is None:
        now = datetime.now(timezone.utc)
    return now >= end
