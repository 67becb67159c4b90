"""
Unit tests for the 'init' command.
"""

from unittest.mock import patch

import pytest
import yaml
from click.testing import CliRunner

from nodescope.cli.commands.initialize import init


class TestInitCommand:
    """Test the init command."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture
    def mock_cwd(self, tmp_path):
        """Mock current working directory to a temp path."""
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            yield tmp_path

    def test_init_creates_config(self, runner, mock_cwd):
        result = runner.invoke(init, ["--page-size", "20"])

        assert result.exit_code == 0
        assert "Initialized successfully" in result.output

        config_path = mock_cwd / ".nodescope/config.yaml"
        with open(config_path) as f:
            config = yaml.safe_load(f)

        assert config["explorer"]["page_size"] == 20
        assert config["site"]["content_root"] == "src"

    @patch("nodescope.cli.commands.initialize.Confirm.ask")
    def test_existing_config_declined(self, mock_confirm, runner, mock_cwd):
        mock_confirm.return_value = False
        config_path = mock_cwd / ".nodescope/config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("explorer:\n  page_size: 3\n")

        result = runner.invoke(init)

        assert result.exit_code == 0
        assert "Aborted" in result.output
        assert yaml.safe_load(config_path.read_text())["explorer"]["page_size"] == 3

    @patch("nodescope.cli.commands.initialize.Confirm.ask")
    def test_force_skips_prompt(self, mock_confirm, runner, mock_cwd):
        config_path = mock_cwd / ".nodescope/config.yaml"
        config_path.parent.mkdir()
        config_path.write_text("explorer:\n  page_size: 3\n")

        result = runner.invoke(init, ["--force"])

        assert result.exit_code == 0
        mock_confirm.assert_not_called()
        assert yaml.safe_load(config_path.read_text())["explorer"]["page_size"] == 10

    def test_rejects_zero_page_size(self, runner, mock_cwd):
        result = runner.invoke(init, ["--page-size", "0"])
        assert result.exit_code == 2
