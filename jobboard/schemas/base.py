# The pilots' home base

BASE = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        "name": {
            "type": "string",
        },
        "modules": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "minLength": 1,
                    },
                    "description": {
                        "type": "string",
                    },
                },
                "required": ["name"],
            },
        },
    },
    "required": ["name", "modules"],
}
