import logging

from prettytable import PrettyTable

from jobboard import make_help_parser
from jobboard.config import requires_store
from jobboard.exceptions import DuplicateRecordError
from jobboard.helpers import generate_id, validate_integer, validate_required_string
from jobboard.store import find_record


help = "Manage the pilot roster"

logger = logging.getLogger(__name__)


@requires_store
def list_pilots(conf, store, args):
    """List pilots in the roster
    """
    output = PrettyTable(["#", "ID", "Callsign", "Name", "LL", "Active"])
    for idx, pilot in enumerate(store.read("pilots")):
        if args.active and not pilot.get("active", True):
            continue
        output.add_row((idx+1, pilot["id"], pilot["callsign"], pilot["name"],
                        pilot.get("ll", 0), "yes" if pilot.get("active", True) else "no"))

    print(output)


def add_to_roster(pilots, name, callsign, ll):
    name = validate_required_string(name, "Pilot name", 100)
    if not name.valid:
        raise ValueError(name.message)

    callsign = validate_required_string(callsign, "Callsign", 50)
    if not callsign.valid:
        raise ValueError(callsign.message)

    ll = validate_integer(ll, "License level", 0, 12)
    if not ll.valid:
        raise ValueError(ll.message)

    if any(p["callsign"].lower() == callsign.value.lower() for p in pilots):
        raise DuplicateRecordError("Pilot {} already exists!".format(callsign.value))

    pilot = {
        "id": generate_id(),
        "name": name.value,
        "callsign": callsign.value,
        "ll": ll.value,
        "reserves": "",
        "relatedJobs": [],
        "personalOperationProgress": 0,
        "active": True,
    }
    pilots.append(pilot)
    return pilot


@requires_store
def add_pilot(conf, store, args):
    """Add a pilot to the roster
    """
    pilots = store.read("pilots")
    try:
        pilot = add_to_roster(pilots, args.name, args.callsign, args.ll)
    except DuplicateRecordError as e:
        logger.error(e)
        return

    store.write("pilots", pilots)
    logger.info("Added pilot %s (%s)", pilot["callsign"], pilot["id"])


@requires_store
def set_active(conf, store, args):
    pilots = store.read("pilots")
    pilot = find_record(pilots, args.pilot, ("id", "callsign"))
    pilot["active"] = args.active
    store.write("pilots", pilots)

    logger.info("Pilot %s is now %s", pilot["callsign"], "active" if args.active else "inactive")


@requires_store
def remove_pilot(conf, store, args):
    """Remove a pilot from the roster
    """
    pilots = store.read("pilots")
    pilot = find_record(pilots, args.pilot, ("id", "callsign"))
    pilots.remove(pilot)
    store.write("pilots", pilots)

    logger.info("Removed pilot %s", pilot["callsign"])


def setup_parser(parser):
    subparsers = parser.add_subparsers(title='Pilot commands')

    list_parser = subparsers.add_parser('list', help='Print the roster')
    list_parser.add_argument("--active", action="store_true", help="Only list active pilots")
    list_parser.set_defaults(run=list_pilots)

    add_parser = subparsers.add_parser('add', help='Add a pilot to the roster')
    add_parser.add_argument("name", help="Name of the pilot")
    add_parser.add_argument("callsign", help="Pilot callsign")
    add_parser.add_argument("--ll", default="0", help="License level (0-12)")
    add_parser.set_defaults(run=add_pilot)

    activate_parser = subparsers.add_parser('activate', help='Mark a pilot active')
    activate_parser.add_argument("pilot", help="ID or callsign of the pilot")
    activate_parser.set_defaults(run=set_active, active=True)

    deactivate_parser = subparsers.add_parser('deactivate', help='Mark a pilot inactive')
    deactivate_parser.add_argument("pilot", help="ID or callsign of the pilot")
    deactivate_parser.set_defaults(run=set_active, active=False)

    remove_parser = subparsers.add_parser('remove', help='Remove a pilot from the roster')
    remove_parser.add_argument("pilot", help="ID or callsign of the pilot")
    remove_parser.set_defaults(run=remove_pilot)

    make_help_parser(parser, subparsers, "Show help for pilot or one of its commands")
