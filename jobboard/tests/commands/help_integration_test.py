from parameterized import parameterized

from jobboard import main, subcommands
from jobboard.tests.utils import JobBoardIntegrationTestCase


class HelpIntegrationTestCase(JobBoardIntegrationTestCase):
    integration = True

    def test_jobboard(self):
        """
        The top level jobboard module should respond to help
        without errors.
        """
        with self.assertRaisesRegex(SystemExit, r"^0$"):
            main(["--help"])

    @parameterized.expand(subcommands)
    def test_subcommand(self, command):
        ("The {} subcommand should respond to help without errors."
         .format(command))
        with self.assertRaisesRegex(SystemExit, r"^0$"):
            main([command, "--help"])

    @parameterized.expand(["job", "pilot", "faction", "period"])
    def test_help_subcommand(self, command):
        with self.assertRaisesRegex(SystemExit, r"^0$"):
            main([command, "help", "list"])

    def test_settings_help_subcommand(self):
        with self.assertRaisesRegex(SystemExit, r"^0$"):
            main(["settings", "help", "show"])
