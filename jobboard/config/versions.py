import jsonschema
import logging

from jobboard.config.schemas import SCHEMAS

logger = logging.getLogger(__name__)

LATEST_VERSION = len(SCHEMAS) - 1


class ValidationError(jsonschema.ValidationError):
    pass


class VersionError(Exception):
    pass


def get_version(config):
    return config.get("version", LATEST_VERSION)


def validate(config, version=None):
    if version is None:
        version = get_version(config)

    if not isinstance(version, int) or isinstance(version, bool):
        raise ValidationError("Configuration version must be an integer, not %r" % (version,))

    if version > LATEST_VERSION:
        raise VersionError(
            "Configuration version %d is newer than latest known configuration version %d" % (version, LATEST_VERSION)
        )
    if SCHEMAS[version] is None:
        raise VersionError("Configuration version %d is not supported" % version)

    try:
        jsonschema.validate(config, SCHEMAS[version])
    except jsonschema.ValidationError as e:
        raise ValidationError(e.message) from e
