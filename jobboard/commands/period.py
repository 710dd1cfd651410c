import logging
from datetime import datetime, timedelta, timezone

from prettytable import PrettyTable

from jobboard import make_help_parser
from jobboard.config import requires_store
from jobboard.exceptions import VotingPeriodError
from jobboard.store import find_record
from jobboard.voting import (
    archive_voting_period,
    cast_vote,
    create_voting_period,
    find_voting_period,
    get_ongoing_voting_period,
    is_expired,
    tally_votes,
)


help = "Run voting periods for choosing the next job"

logger = logging.getLogger(__name__)


def end_time_from_args(args):
    if args.days is not None:
        end = datetime.now(timezone.utc) + timedelta(days=args.days)
        return end.strftime("%Y-%m-%dT%H:%M:%S.000Z")
    return args.end_time


def require_ongoing(doc):
    period = get_ongoing_voting_period(doc["periods"])
    if period is None:
        raise VotingPeriodError("There is no ongoing voting period.")
    return period


@requires_store
def start(conf, store, args):
    """Open a voting period on the given jobs, or on every Active job
    """
    end_time = end_time_from_args(args)
    jobs = store.read("jobs")
    if args.jobs:
        job_ids = [find_record(jobs, j, ("id", "name"))["id"] for j in args.jobs]
    else:
        job_ids = [j["id"] for j in jobs if j.get("state") == "Active"]

    if not job_ids:
        logger.warning("No jobs to vote on; pilots can still vote for any Active job.")

    repo = store.voting_periods()
    doc = repo.read()
    period = create_voting_period(doc, job_ids, end_time)
    repo.write(doc)

    print("Started voting period {} (ends {})".format(
        period["id"], period["endTime"] or "never"))


@requires_store
def vote(conf, store, args):
    """Cast a pilot's vote for a job in the ongoing period
    """
    pilot = find_record(store.read("pilots"), args.pilot, ("id", "callsign"))
    if not pilot.get("active", True):
        raise VotingPeriodError("Pilot {} is not active".format(pilot["callsign"]))

    jobs = store.read("jobs")
    job = find_record(jobs, args.job, ("id", "name"))

    repo = store.voting_periods()
    doc = repo.read()
    period = require_ongoing(doc)
    if is_expired(period):
        raise VotingPeriodError("Voting period {} has ended".format(period["id"]))

    cast_vote(period, job["id"], pilot["id"], jobs)
    repo.write(doc)

    logger.info("%s voted for %s", pilot["callsign"], job["name"])


@requires_store
def archive(conf, store, args):
    """Close the ongoing (or a given) voting period
    """
    repo = store.voting_periods()
    doc = repo.read()

    if args.period:
        period = find_voting_period(doc["periods"], args.period)
        if period is None:
            raise VotingPeriodError("No voting period {}".format(args.period))
    else:
        period = require_ongoing(doc)

    archive_voting_period(period)
    repo.write(doc)

    print("Archived voting period {}".format(period["id"]))


def print_tally(period, jobs):
    names = {j["id"]: j["name"] for j in jobs}

    output = PrettyTable(["#", "Job", "Votes"])
    output.align["Job"] = "l"
    for idx, (job_id, count) in enumerate(tally_votes(period)):
        output.add_row((idx+1, names.get(job_id, job_id), count))
    print(output)


@requires_store
def status(conf, store, args):
    """Show the vote tally of the ongoing (or a given) period
    """
    doc = store.voting_periods().read()
    if args.period:
        period = find_voting_period(doc["periods"], args.period)
        if period is None:
            raise VotingPeriodError("No voting period {}".format(args.period))
    else:
        period = require_ongoing(doc)

    ended = " (ended)" if period["state"] == "Ongoing" and is_expired(period) else ""
    print("Voting period {}: {}{}, ends {}".format(
        period["id"], period["state"], ended, period["endTime"] or "never"))
    print_tally(period, store.read("jobs"))


@requires_store
def list_periods(conf, store, args):
    output = PrettyTable(["#", "ID", "State", "Jobs", "Votes", "End time"])
    for idx, period in enumerate(store.voting_periods().read()["periods"]):
        votes = sum(count for _, count in tally_votes(period))
        output.add_row((idx+1, period["id"], period["state"], len(period["jobVotes"]),
                        votes, period["endTime"] or "never"))

    print(output)


def setup_parser(parser):
    subparsers = parser.add_subparsers(title='Voting period commands')

    start_parser = subparsers.add_parser('start', help='Start a voting period')
    start_parser.add_argument("jobs", nargs="*",
                              help="IDs or names of jobs to vote on (default: all Active jobs)")
    end_group = start_parser.add_mutually_exclusive_group()
    end_group.add_argument("--end-time", help="ISO-8601 time the period ends")
    end_group.add_argument("--days", type=float, help="Days until the period ends")
    start_parser.set_defaults(run=start)

    vote_parser = subparsers.add_parser('vote', help='Vote for a job')
    vote_parser.add_argument("pilot", help="ID or callsign of the voting pilot")
    vote_parser.add_argument("job", help="ID or name of the job")
    vote_parser.set_defaults(run=vote)

    archive_parser = subparsers.add_parser('archive', help='Archive a voting period')
    archive_parser.add_argument("--period", help="ID of the period (default: the ongoing one)")
    archive_parser.set_defaults(run=archive)

    status_parser = subparsers.add_parser('status', help='Show the current vote tally')
    status_parser.add_argument("--period", help="ID of the period (default: the ongoing one)")
    status_parser.set_defaults(run=status)

    list_parser = subparsers.add_parser('list', help='List all voting periods')
    list_parser.set_defaults(run=list_periods)

    make_help_parser(parser, subparsers, "Show help for period or one of its commands")
