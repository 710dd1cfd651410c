import logging

from prettytable import PrettyTable

from jobboard import progress
from jobboard.config import requires_store
from jobboard.exceptions import VotingPeriodError
from jobboard.schemas import COLLECTIONS
from jobboard.validation import validate_collection
from jobboard.voting import (
    check_single_ongoing,
    get_ongoing_voting_period,
    validate_job_votes,
    validate_voting_period_data,
)

help = "Check the data files against their schemas"

logger = logging.getLogger(__name__)


def check_voting_periods(store):
    """Rules the voting period schema can't express"""
    errors = []
    periods = store.voting_periods().read()["periods"]

    for idx, period in enumerate(periods):
        result = validate_voting_period_data(period)
        if not result.valid:
            errors.append("voting-periods.periods[{}]: {}".format(idx, result.message))

    try:
        check_single_ongoing(periods)
    except VotingPeriodError as e:
        errors.append("voting-periods: {}".format(e))

    ongoing = get_ongoing_voting_period(periods)
    if ongoing is not None:
        result = validate_job_votes(ongoing["jobVotes"], store.read("jobs"))
        if not result.valid:
            errors.append("voting-periods: ongoing period: {}".format(result.message))

    return errors


@requires_store
def validate(conf, store, args):
    names = args.collections or list(COLLECTIONS)
    unknown = [n for n in names if n not in COLLECTIONS]
    if unknown:
        raise ValueError("Unknown collection(s): {}".format(", ".join(unknown)))

    output = PrettyTable(["Collection", "Result"])
    output.align["Collection"] = "l"
    failures = 0

    for name in progress.iterate(names, "Validating"):
        errors = validate_collection(name, store.data_dir)
        if name == "voting-periods" and not errors:
            errors = check_voting_periods(store)

        for error in errors:
            logger.error(error)

        output.add_row((name, "{} error(s)".format(len(errors)) if errors else "valid"))
        failures += bool(errors)

    print(output)

    if failures:
        raise ValueError("{} of {} collections failed validation".format(failures, len(names)))


def setup_parser(parser):
    parser.add_argument("collections", nargs="*",
                        help="Collections to check (default: all of {})".format(", ".join(COLLECTIONS)))
    parser.set_defaults(run=validate)
