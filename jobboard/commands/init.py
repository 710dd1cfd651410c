import logging

from jobboard.config import requires_config
from jobboard.config.versions import LATEST_VERSION
from jobboard.store import Collections

help = "Initialize a configuration and an empty data directory"

logger = logging.getLogger(__name__)


def prompt(explanation, default=None):
    prompt_string = ''
    if default is not None:
        prompt_string = "{} (default: {}): ".format(explanation, default)
    else:
        prompt_string = "{}: ".format(explanation)
    value = input(prompt_string)

    if value == '':
        if default is not None:
            return default

        return prompt(explanation, default)

    return value


@requires_config
def init(conf, args):
    conf['version'] = LATEST_VERSION
    if args.defaults:
        conf['data-dir'] = conf.data_dir
        conf['upload-dir'] = conf.upload_dir
    else:
        conf['data-dir'] = prompt("Directory to keep job board data in", conf.data_dir)
        conf['upload-dir'] = prompt("Directory holding emblem images", conf.upload_dir)

    created = Collections(conf.data_dir).initialize(overwrite=args.reset)
    for name in created:
        logger.info("Created %s collection", name)

    print("Job board ready in {}".format(conf.data_dir))


def setup_parser(parser):
    parser.add_argument("--defaults", action="store_true",
                        help="Don't prompt; keep the configured (or default) directories")
    parser.add_argument("--reset", action="store_true",
                        help="Overwrite existing collections with empty ones")
    parser.set_defaults(run=init)
