# Configuration schema, version 1

V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        # Config version
        "version": {
            "type": "integer",
        },

        # Directory holding the collection JSON files
        "data-dir": {
            "type": "string",
            "minLength": 1,
        },

        # Directory holding uploaded faction/job emblems
        "upload-dir": {
            "type": "string",
            "minLength": 1,
        },
    },
    "additionalProperties": False,
}

SCHEMAS = [
    None,  # unversioned configs predate the schema
    V1,
]
