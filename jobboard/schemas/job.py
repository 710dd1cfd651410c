# Jobs posted on the board

JOB_STATES = ["Pending", "Active", "Complete", "Failed", "Ignored"]

JOB = {
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

        # Mission rank, 1 (low risk) to 3 (high risk)
        "rank": {
            "type": "integer",
            "minimum": 1,
            "maximum": 3,
        },

        # Free-form job category (Recon, Extraction, ...)
        "jobType": {
            "type": "string",
        },
        "description": {
            "type": "string",
        },
        "clientBrief": {
            "type": "string",
        },

        # Manna paid on completion
        "currencyPay": {
            "type": "integer",
            "minimum": 0,
            "multipleOf": 1,
        },
        "additionalPay": {
            "type": "string",
        },

        # Faction offering the job
        "factionId": {
            "type": ["string", "null"],
        },
        "emblem": {
            "type": "string",
            "pattern": r"^([A-Za-z0-9_-]+\.svg)?$",
        },
        "state": {
            "type": "string",
            "enum": JOB_STATES,
        },
    },
    "required": ["id", "name", "rank", "state"],
}
