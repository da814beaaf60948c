"""
Tests for the command line interface.
"""

import json
from unittest.mock import MagicMock, patch

from ssp_blueprints import cli


class TestCli:
    """Tests for CLI commands."""

    def test_list_addons_pretty(self, capsys):
        """Test the add-on catalogue is printed."""
        cli.list_addons()

        out = capsys.readouterr().out
        assert "metrics-server" in out
        assert "depends on: AwsLoadBalancerControllerAddOn" in out

    def test_list_addons_json(self, capsys):
        """Test JSON output of the add-on catalogue."""
        cli.list_addons("json")

        addons = json.loads(capsys.readouterr().out)
        assert {a["name"] for a in addons} == {"metrics-server", "aws-load-balancer-controller", "nginx"}

    def test_main_addons(self):
        """Test the addons command exits cleanly."""
        assert cli.main(["addons"]) == 0

    def test_main_without_command(self):
        """Test help is shown without a command."""
        assert cli.main([]) == 1

    def test_list_stacks(self, capsys):
        """Test tracked stacks are printed."""
        service = MagicMock()
        service.list_tracked_stacks.return_value = [
            {
                "stack_name": "blueprint-a",
                "status": "CREATE_COMPLETE",
                "usage_identifier": "qs-1s1r465hk",
                "description": "SSP tracking (qs-1s1r465hk)",
                "created_at": None,
            }
        ]

        with patch("ssp_blueprints.services.cloudformation.CloudFormationService", return_value=service):
            stacks = cli.list_stacks("qs-1s1r465hk")

        service.list_tracked_stacks.assert_called_once_with("qs-1s1r465hk")
        assert len(stacks) == 1
        assert "blueprint-a" in capsys.readouterr().out

    def test_blueprint_errors_exit_nonzero(self, capsys):
        """Test blueprint errors are reported with a non-zero exit code."""
        from ssp_blueprints.errors import ConfigurationError

        with patch.object(cli, "list_addons", side_effect=ConfigurationError("bad addon")):
            assert cli.main(["addons"]) == 1

        assert "bad addon" in capsys.readouterr().err
