"""
Unit tests for the 'nodes', 'neighbors' and 'sankey' commands.
"""

import json

import pytest
from click.testing import CliRunner

from nodescope.cli.commands.neighbors import neighbors
from nodescope.cli.commands.nodes import nodes
from nodescope.cli.commands.sankey import sankey
from nodescope.cli.main import main


@pytest.fixture
def runner():
    return CliRunner()


class TestNodesCommand:
    def test_json_output(self, runner, data_dir):
        result = runner.invoke(nodes, [str(data_dir), "--filter", "vnet", "--page-size", "2", "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "success"
        data = payload["data"]
        assert [n["id"] for n in data["items"]] == ["hub", "spoke-a"]
        assert data["total_pages"] == 2
        assert data["has_next"] is True
        assert data["items"][0]["displayName"] == "VNet Hub"

    def test_page_is_clamped(self, runner, data_dir):
        result = runner.invoke(nodes, [str(data_dir), "--page", "99", "--page-size", "2", "--json"])

        data = json.loads(result.output)["data"]
        assert data["page"] == 3
        assert [n["id"] for n in data["items"]] == ["dns"]

    def test_table_output(self, runner, data_dir):
        result = runner.invoke(nodes, [str(data_dir), "--filter", "firewall"])

        assert result.exit_code == 0
        assert "Azure Firewall" in result.output
        assert "Page 1 of 1" in result.output

    def test_no_matches(self, runner, data_dir):
        result = runner.invoke(nodes, [str(data_dir), "--filter", "storage"])

        assert result.exit_code == 0
        assert "No nodes match" in result.output

    def test_explicit_files(self, runner, data_dir):
        nodes_file = data_dir / "data" / "idList.json"
        links_file = data_dir / "data" / "linkList.json"
        result = runner.invoke(nodes, [str(nodes_file), "--links", str(links_file), "--json"])

        assert result.exit_code == 0
        assert len(json.loads(result.output)["data"]["items"]) == 5

    def test_file_without_links_is_usage_error(self, runner, data_dir):
        result = runner.invoke(nodes, [str(data_dir / "data" / "idList.json")])
        assert result.exit_code == 2

    def test_missing_data_reports_error(self, runner, tmp_path):
        result = runner.invoke(nodes, [str(tmp_path), "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["meta"]["status"] == "error"
        assert payload["error"]["type"] == "GraphDataError"


class TestNeighborsCommand:
    def test_json_output(self, runner, data_dir):
        result = runner.invoke(neighbors, [str(data_dir), "hub", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["primary"] == "hub"
        assert data["adjacent"] == ["fw", "spoke-a", "spoke-b"]
        assert data["count"] == 3

    def test_isolated_node(self, runner, data_dir):
        result = runner.invoke(neighbors, [str(data_dir), "dns"])

        assert result.exit_code == 0
        assert "No adjacent nodes" in result.output

    def test_unknown_node(self, runner, data_dir):
        result = runner.invoke(neighbors, [str(data_dir), "ghost"])

        assert result.exit_code == 1
        assert "Unknown node" in result.output


class TestSankeyCommand:
    @pytest.fixture
    def sankey_file(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({
            "nodes": [{"name": "Internet"}, {"name": "Gateway"}, {"name": "App"}],
            "links": [{"source": 0, "target": 1, "value": 5}, {"source": 1, "target": 2, "value": 5}],
        }))
        return path

    def test_json_output(self, runner, sankey_file):
        result = runner.invoke(sankey, [str(sankey_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert [(n["name"], n["sources"]) for n in data["nodes"]] == [
            ("Internet", []), ("Gateway", ["Internet"]), ("App", ["Gateway"]),
        ]
        assert data["stats"]["total_edges"] == 2

    def test_repeated_names(self, runner, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({
            "nodes": [{"name": "Azure"}, {"name": "VM"}, {"name": "Azure"}],
            "links": [{"source": 0, "target": 1}, {"source": 1, "target": 2}],
        }))

        result = runner.invoke(sankey, [str(path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert [n["id"] for n in data["nodes"]] == ["0", "1", "2"]
        assert data["nodes"][2] == {"id": "2", "name": "Azure", "sources": ["VM"]}

    def test_bad_document(self, runner, tmp_path):
        path = tmp_path / "data.json"
        path.write_text(json.dumps({"links": []}))

        result = runner.invoke(sankey, [str(path)])
        assert result.exit_code == 1


class TestMainGroup:
    def test_commands_registered(self, runner):
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        for command in ("nodes", "neighbors", "explore", "sankey", "pages", "init"):
            assert command in result.output

    def test_verbose_flag(self, runner, data_dir, restore_logging):
        result = runner.invoke(main, ["-v", "nodes", str(data_dir), "--json"])
        assert result.exit_code == 0
