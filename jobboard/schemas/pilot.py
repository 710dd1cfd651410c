# Pilots in the campaign

PILOT = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        "id": {
            "type": "string",
        },
        "name": {
            "type": "string",
            "minLength": 1,
        },
        "callsign": {
            "type": "string",
            "minLength": 1,
        },

        # License level
        "ll": {
            "type": "integer",
            "minimum": 0,
            "maximum": 12,
        },
        "reserves": {
            "type": "string",
        },

        # Ids of jobs this pilot has taken part in
        "relatedJobs": {
            "type": "array",
            "items": {
                "type": "string",
            },
        },

        # Progress toward the pilot's personal operation
        "personalOperationProgress": {
            "type": "integer",
            "minimum": 0,
            "maximum": 3,
        },

        # Inactive pilots are kept but cannot vote
        "active": {
            "type": "boolean",
        },
    },
    "required": ["id", "name", "callsign", "ll"],
}
