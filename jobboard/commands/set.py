import logging
import yaml

from jobboard.config import requires_config
from jobboard.config.versions import validate, ValidationError, VersionError


help = "Set configuration values"

logger = logging.getLogger(__name__)


@requires_config
def set_conf(conf, args):
    """Sets <key> to <value> in the config.

    <value> is read as YAML, so `set version 1` stores an integer.
    """
    previous = conf.get(args.key)
    conf[args.key] = yaml.safe_load(args.value)

    try:
        validate(conf.data)
    except (ValidationError, VersionError) as e:
        if previous is None:
            del conf[args.key]
        else:
            conf[args.key] = previous
        raise ValueError("Not setting {}: {}".format(args.key, getattr(e, "message", e))) from e


def setup_parser(parser):
    parser.add_argument("key", help="Key to set")
    parser.add_argument("value", help="Value to set")
    parser.set_defaults(run=set_conf)
