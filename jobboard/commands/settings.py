import logging

from prettytable import PrettyTable

from jobboard import make_help_parser
from jobboard.config import requires_store
from jobboard.helpers import (
    VALID_COLOR_SCHEMES,
    ValidationResult,
    is_valid_color_scheme,
    validate_date,
    validate_required_string,
)


help = "Show and change the dashboard settings"

logger = logging.getLogger(__name__)


def check_color_scheme(value):
    if not is_valid_color_scheme(value):
        return ValidationResult(
            False, "Invalid color scheme. Must be one of: {}".format(", ".join(VALID_COLOR_SCHEMES))
        )
    return ValidationResult(True)


# setting -> validator returning a ValidationResult
SETTINGS = {
    "portalHeading": lambda value: validate_required_string(value, "Portal heading", 100),
    "unt": validate_date,
    "currentGalacticPos": lambda value: ValidationResult(True),
    "colorScheme": check_color_scheme,
}


def read_settings(store):
    settings = store.read("settings")
    if not isinstance(settings, dict):
        raise ValueError("{} is not a settings object".format(store.path("settings")))
    return settings


@requires_store
def show_settings(conf, store, args):
    settings = read_settings(store)

    output = PrettyTable(["Setting", "Value"])
    output.align = "l"
    for key in SETTINGS:
        output.add_row((key, settings.get(key, "")))

    print(output)


@requires_store
def set_setting(conf, store, args):
    """Change one dashboard setting
    """
    if args.key not in SETTINGS:
        raise ValueError("Unknown setting {}. Choose from: {}".format(
            args.key, ", ".join(SETTINGS)
        ))

    value = args.value.strip()
    result = SETTINGS[args.key](value)
    if not result.valid:
        raise ValueError(result.message)

    settings = read_settings(store)
    settings[args.key] = value
    store.write("settings", settings)

    logger.info("Set %s to %r", args.key, value)


def setup_parser(parser):
    subparsers = parser.add_subparsers(title='Settings commands')

    show_parser = subparsers.add_parser('show', help='Print the dashboard settings')
    show_parser.set_defaults(run=show_settings)

    set_parser = subparsers.add_parser('set', help='Change a dashboard setting')
    set_parser.add_argument("key", help="Setting to change: {}".format(", ".join(SETTINGS)))
    set_parser.add_argument("value", help="New value")
    set_parser.set_defaults(run=set_setting)

    make_help_parser(parser, subparsers, "Show help for settings or one of its commands")
