import json
import logging
import os

import jsonschema

from jobboard.schemas import COLLECTIONS

logger = logging.getLogger(__name__)


def format_path(root, path):
    formatted = root
    for part in path:
        if isinstance(part, int):
            formatted += "[{}]".format(part)
        else:
            formatted += ".{}".format(part)
    return formatted


def validate(data, schema, root="root"):
    """Return every way ``data`` violates ``schema`` as "<path>: <message>" strings."""
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    return [
        "{}: {}".format(format_path(root, e.absolute_path), e.message)
        for e in errors
    ]


def validate_collection(name, data_dir):
    """Validate one collection file in ``data_dir`` against its schema.

    Unlike the stores, an unreadable file is reported as an error here.
    """
    collection = COLLECTIONS[name]
    path = os.path.join(data_dir, collection.filename)

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        return ["{}: could not load {}: {}".format(name, path, e)]

    if not collection.is_list:
        return validate(data, collection.schema, name)

    if not isinstance(data, list):
        return ["{}: Expected a list of records".format(name)]

    errors = []
    for idx, item in enumerate(data):
        errors.extend(validate(item, collection.schema, "{}[{}]".format(name, idx)))

    logger.debug("Checked %d %s records", len(data), name)
    return errors
