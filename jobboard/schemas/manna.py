# The campaign's manna ledger

MANNA = {
    "$schema": "http://json-schema.org/draft-07/schema#",

    "type": "object",
    "properties": {
        "balance": {
            "type": "integer",
        },
        "transactions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    # DD/MM/YYYY in-universe date
                    "date": {
                        "type": "string",
                        "pattern": r"^(\d{2}/\d{2}/\d{4})?$",
                    },
                    "amount": {
                        "type": "integer",
                    },
                    "description": {
                        "type": "string",
                    },
                },
                "required": ["amount", "description"],
            },
        },
    },
    "required": ["balance", "transactions"],
}
