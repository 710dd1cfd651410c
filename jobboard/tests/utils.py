import json
import os
import tempfile
from unittest import TestCase
from unittest.mock import patch

import yaml

from jobboard import main


class JobBoardTestCase(TestCase):
    def _create_patch(self, target, **kwargs):
        """
        Shortcut for creating a patch and having it cleaned up
        properly.
        """
        target_patch = patch(target, **kwargs)
        target_mock = target_patch.start()
        self.addCleanup(target_patch.stop)

        return target_mock

    def _create_tempdir(self):
        tempdir = tempfile.TemporaryDirectory()
        self.addCleanup(tempdir.cleanup)
        return tempdir.name


class JobBoardIntegrationTestCase(JobBoardTestCase):
    """
    Runs commands through main() against a config and data directory
    in a temporary directory.
    """

    def setUp(self):
        self.mock_configure = self._create_patch(
            "jobboard.configure_logging", autospec=True
        )

        self.root = self._create_tempdir()
        self.data_dir = os.path.join(self.root, "data")
        self.upload_dir = os.path.join(self.root, "logo_art")
        os.makedirs(self.upload_dir)

        self.config_path = os.path.join(self.root, "_config.yml")
        with open(self.config_path, "w") as f:
            yaml.dump({
                "version": 1,
                "data-dir": self.data_dir,
                "upload-dir": self.upload_dir,
            }, f)

    def run_command(self, *args):
        main(["--config", self.config_path] + list(args))

    def read(self, filename):
        with open(os.path.join(self.data_dir, filename)) as f:
            return json.load(f)

    def write(self, filename, data):
        with open(os.path.join(self.data_dir, filename), "w") as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
