# Voting periods, stored as a single {"periods": [...]} document

VOTING_PERIOD = {
    "type": "object",
    "properties": {
        "id": {
            "type": "string",
        },
        "state": {
            "type": "string",
            "enum": ["Ongoing", "Archived"],
        },
        "jobVotes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "jobId": {
                        "type": "string",
                    },
                    # Pilot ids
                    "votes": {
                        "type": "array",
                        "items": {
                            "type": "string",
                        },
                        "uniqueItems": True,
                    },
                },
                "required": ["jobId", "votes"],
            },
        },

        # ISO-8601, or null for an open-ended period
        "endTime": {
            "type": ["string", "null"],
        },
    },
    "required": ["id", "state", "jobVotes", "endTime"],
}

VOTING_PERIODS = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        "periods": {
            "type": "array",
            "items": VOTING_PERIOD,
        },
    },
    "required": ["periods"],
}
