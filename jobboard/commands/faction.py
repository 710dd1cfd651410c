import logging
import os

from prettytable import PrettyTable

from jobboard import make_help_parser
from jobboard.config import requires_store
from jobboard.helpers import (
    format_emblem_title,
    generate_id,
    get_standing_label,
    sanitize_emblem_base_name,
    validate_emblem,
    validate_integer,
    validate_required_string,
)
from jobboard.store import find_record


help = "Manage factions and their standing"

logger = logging.getLogger(__name__)


def emblem_filename(name):
    """Normalise an emblem file name the way uploads are stored: a safe base name plus .svg."""
    if not name:
        return ""

    extension = os.path.splitext(name)[1].lower()
    if extension not in ("", ".svg"):
        raise ValueError("Emblems must be .svg files, not {}".format(name))

    base = sanitize_emblem_base_name(name)
    if base is None:
        raise ValueError("Invalid emblem filename")
    return base + ".svg"


@requires_store
def list_factions(conf, store, args):
    output = PrettyTable(["#", "ID", "Title", "Standing", "Completed", "Failed", "Emblem"])
    output.align["Title"] = "l"
    for idx, faction in enumerate(store.read("factions")):
        emblem = faction.get("emblem", "")
        output.add_row((idx+1, faction["id"], faction["title"],
                        get_standing_label(faction.get("standing")),
                        faction.get("jobsCompleted", 0), faction.get("jobsFailed", 0),
                        format_emblem_title(emblem) if emblem else ""))

    print(output)


@requires_store
def add_faction(conf, store, args):
    """Add a faction
    """
    title = validate_required_string(args.title, "Faction title", 100)
    if not title.valid:
        raise ValueError(title.message)

    standing = validate_integer(args.standing, "Standing", 0, 4)
    if not standing.valid:
        raise ValueError(standing.message)

    emblem = emblem_filename(args.emblem)
    result = validate_emblem(emblem, conf.upload_dir)
    if not result.valid:
        raise ValueError(result.message)

    factions = store.read("factions")
    faction = {
        "id": generate_id(),
        "title": title.value,
        "brief": args.brief,
        "emblem": emblem,
        "jobsCompleted": 0,
        "jobsFailed": 0,
        "standing": standing.value,
    }
    factions.append(faction)
    store.write("factions", factions)

    logger.info("Added faction %s (%s)", faction["title"], faction["id"])


@requires_store
def set_standing(conf, store, args):
    """Change a faction's standing
    """
    standing = validate_integer(args.standing, "Standing", 0, 4)
    if not standing.valid:
        raise ValueError(standing.message)

    factions = store.read("factions")
    faction = find_record(factions, args.faction, ("id", "title"))
    faction["standing"] = standing.value
    store.write("factions", factions)

    logger.info("%s standing is now %s", faction["title"], get_standing_label(standing.value))


def setup_parser(parser):
    subparsers = parser.add_subparsers(title='Faction commands')

    list_parser = subparsers.add_parser('list', help='Print the factions')
    list_parser.set_defaults(run=list_factions)

    add_parser = subparsers.add_parser('add', help='Add a faction')
    add_parser.add_argument("title", help="Faction title")
    add_parser.add_argument("--brief", default="", help="Short description")
    add_parser.add_argument("--standing", default="2", help="Standing (0-4)")
    add_parser.add_argument("--emblem", default="", help="Emblem file name in the upload directory; normalised to a safe .svg name")
    add_parser.set_defaults(run=add_faction)

    standing_parser = subparsers.add_parser('standing', help="Change a faction's standing")
    standing_parser.add_argument("faction", help="ID or title of the faction")
    standing_parser.add_argument("standing", help="New standing (0-4)")
    standing_parser.set_defaults(run=set_standing)

    make_help_parser(parser, subparsers, "Show help for faction or one of its commands")
