from collections import namedtuple

from jobboard.schemas.base import BASE
from jobboard.schemas.faction import FACTION
from jobboard.schemas.job import JOB, JOB_STATES
from jobboard.schemas.manna import MANNA
from jobboard.schemas.pilot import PILOT
from jobboard.schemas.settings import SETTINGS
from jobboard.schemas.voting_periods import VOTING_PERIOD, VOTING_PERIODS

pyflakes = [JOB_STATES, VOTING_PERIOD]

# is_list: the document is a list of records, each validated against schema
Collection = namedtuple("Collection", ["filename", "schema", "is_list", "default"])

COLLECTIONS = {
    "jobs": Collection("jobs.json", JOB, True, []),
    "pilots": Collection("pilots.json", PILOT, True, []),
    "factions": Collection("factions.json", FACTION, True, []),
    "manna": Collection("manna.json", MANNA, False, {"balance": 0, "transactions": []}),
    "base": Collection("base.json", BASE, False, {"name": "", "modules": []}),
    "settings": Collection("settings.json", SETTINGS, False, {
        "portalHeading": "JOB BOARD",
        "unt": "",
        "currentGalacticPos": "",
        "colorScheme": "grey",
    }),
    "voting-periods": Collection("voting-periods.json", VOTING_PERIODS, False, {"periods": []}),
}
