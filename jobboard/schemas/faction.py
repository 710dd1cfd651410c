# Factions offering jobs

FACTION = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        "id": {
            "type": "string",
        },
        "title": {
            "type": "string",
            "minLength": 1,
        },
        "brief": {
            "type": "string",
        },
        "emblem": {
            "type": "string",
            "pattern": r"^([A-Za-z0-9_-]+\.svg)?$",
        },
        "jobsCompleted": {
            "type": "integer",
            "minimum": 0,
        },
        "jobsFailed": {
            "type": "integer",
            "minimum": 0,
        },

        # Index into STANDING_LABELS (DISTRUSTED .. TRUSTED)
        "standing": {
            "type": "integer",
            "minimum": 0,
            "maximum": 4,
        },
    },
    "required": ["id", "title", "standing"],
}
