import logging

from prettytable import PrettyTable

from jobboard import make_help_parser
from jobboard.config import requires_store
from jobboard.helpers import generate_id, validate_integer, validate_required_string
from jobboard.schemas import JOB_STATES
from jobboard.store import find_record


help = "Manage jobs on the board"

logger = logging.getLogger(__name__)


@requires_store
def list_jobs(conf, store, args):
    """List jobs, optionally only those in one state
    """
    jobs = store.read("jobs")
    if args.state:
        jobs = [j for j in jobs if j.get("state") == args.state]

    output = PrettyTable(["#", "ID", "Name", "Rank", "State", "Pay"])
    output.align["Name"] = "l"
    for idx, job in enumerate(jobs):
        output.add_row((idx+1, job["id"], job["name"], job.get("rank", ""),
                        job.get("state", ""), job.get("currencyPay", "")))

    print(output)


@requires_store
def add_job(conf, store, args):
    """Post a new job
    """
    name = validate_required_string(args.name, "Job name", 100)
    if not name.valid:
        raise ValueError(name.message)

    rank = validate_integer(args.rank, "Rank", 1, 3)
    if not rank.valid:
        raise ValueError(rank.message)

    pay = validate_integer(args.pay, "Pay", 0)
    if not pay.valid:
        raise ValueError(pay.message)

    faction_id = None
    if args.faction:
        faction_id = find_record(store.read("factions"), args.faction, ("id", "title"))["id"]

    jobs = store.read("jobs")

    job = {
        "id": generate_id(),
        "name": name.value,
        "rank": rank.value,
        "jobType": args.type,
        "description": args.description,
        "clientBrief": "",
        "currencyPay": pay.value,
        "additionalPay": "",
        "factionId": faction_id,
        "emblem": "",
        "state": args.state,
    }
    jobs.append(job)
    store.write("jobs", jobs)

    logger.info("Added job %s (%s)", job["name"], job["id"])


@requires_store
def set_state(conf, store, args):
    """Move a job to another state
    """
    jobs = store.read("jobs")
    job = find_record(jobs, args.job, ("id", "name"))
    job["state"] = args.state
    store.write("jobs", jobs)

    logger.info("Job %s is now %s", job["name"], args.state)


@requires_store
def remove_job(conf, store, args):
    """Remove a job from the board
    """
    jobs = store.read("jobs")
    job = find_record(jobs, args.job, ("id", "name"))
    jobs.remove(job)
    store.write("jobs", jobs)

    logger.info("Removed job %s", job["name"])


def setup_parser(parser):
    subparsers = parser.add_subparsers(title='Job commands')

    list_parser = subparsers.add_parser('list', help='Print the jobs')
    list_parser.add_argument("--state", choices=JOB_STATES, help="Only list jobs in this state")
    list_parser.set_defaults(run=list_jobs)

    add_parser = subparsers.add_parser('add', help='Post a new job')
    add_parser.add_argument("name", help="Name of the job")
    add_parser.add_argument("--rank", default="1", help="Job rank (1-3)")
    add_parser.add_argument("--type", default="", help="Kind of job")
    add_parser.add_argument("--description", default="", help="Job description")
    add_parser.add_argument("--pay", default="0", help="Manna paid on completion")
    add_parser.add_argument("--faction", help="ID or title of the faction offering the job")
    add_parser.add_argument("--state", default="Pending", choices=JOB_STATES,
                            help="Initial state")
    add_parser.set_defaults(run=add_job)

    state_parser = subparsers.add_parser('state', help='Change the state of a job')
    state_parser.add_argument("job", help="ID or name of the job")
    state_parser.add_argument("state", choices=JOB_STATES, help="New state")
    state_parser.set_defaults(run=set_state)

    remove_parser = subparsers.add_parser('remove', help='Remove a job')
    remove_parser.add_argument("job", help="ID or name of the job")
    remove_parser.set_defaults(run=remove_job)

    make_help_parser(parser, subparsers, "Show help for job or one of its commands")
