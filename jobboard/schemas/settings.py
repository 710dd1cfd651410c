# Dashboard settings

SETTINGS = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        "portalHeading": {
            "type": "string",
        },

        # Universal Navigational Time, DD/MM/YYYY
        "unt": {
            "type": "string",
            "pattern": r"^(\d{2}/\d{2}/\d{4})?$",
        },
        "currentGalacticPos": {
            "type": "string",
        },
        "colorScheme": {
            "type": "string",
            "enum": ["grey", "orange", "green", "blue"],
        },
    },
    "required": ["portalHeading", "colorScheme"],
}
