import logging
import yaml

from collections import UserDict

from jobboard.config.versions import validate, ValidationError, VersionError, LATEST_VERSION
from jobboard.store import Collections


DEFAULTS = {
    "data-dir": "data",
    "upload-dir": "logo_art",
}


def requires_config(func):
    def wrapper(cmdargs, *args):
        with Config(cmdargs.config) as conf:
            return func(conf, cmdargs, *args)
    return wrapper


def requires_store(func):
    """Provides the data directory's collections alongside the config."""
    @requires_config
    def wrapper(conf, cmdargs, *args):
        return func(conf, Collections(conf.data_dir), cmdargs, *args)
    return wrapper


class Config(UserDict):
    """Context manager for config; automatically saves changes"""

    def __init__(self, filename):
        super().__init__()
        self._filename = filename

        try:
            with open(filename) as f:
                self.data = yaml.safe_load(f) or {}

            validate(self.data)

        except FileNotFoundError:
            self.data = {"version": LATEST_VERSION}  # create on __exit__()
        except ValidationError as e:
            logging.warning("Your configuration is not valid: %s", e.message)
        except VersionError as e:
            logging.warning(e)
            logging.warning("Is your installation of jobboard up to date?")
            logging.warning("Attempting to continue anyway...")

    def __enter__(self):
        return self

    def __exit__(self, *args):
        with open(self._filename, "w") as f:
            yaml.dump(self.data, f, indent=2, default_flow_style=False)

        return False  # propagate exceptions from the calling context

    def __getattr__(self, key):
        if key.startswith("_") or key == "data":
            raise AttributeError(key)
        # Keys containing dashes can be accessed using an underscore
        key = key.replace("_", "-")

        if key in DEFAULTS and key not in self.data:
            return DEFAULTS[key]

        return self.data[key]
