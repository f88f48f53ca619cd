import shutil
from pathlib import Path

from click.testing import CliRunner

from example_docs.cli import main

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliIndex:
    def test_index(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--docs-dir", str(FIXTURES), "index"])
        assert result.exit_code == 0
        assert "## Orders" in result.output

    def test_docs_dir_from_env(self):
        runner = CliRunner()
        result = runner.invoke(main, ["index", "--title", "Shop"], env={"EXAMPLE_DOCS_DIR": str(FIXTURES)})
        assert result.exit_code == 0
        assert result.output.startswith("# Shop\n")

    def test_missing_index_fails(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["--docs-dir", str(tmp_path), "index"])
        assert result.exit_code == 1
        assert "cannot read" in result.output


class TestCliShow:
    def test_show_by_href(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--docs-dir", str(FIXTURES), "show", "orders/creating_an_order"])
        assert result.exit_code == 0
        assert "## Creating an order" in result.output

    def test_show_missing_field(self, tmp_path):
        (tmp_path / "bad.json").write_text('{"resource": "Orders"}', encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["--docs-dir", str(tmp_path), "show", "bad"])
        assert result.exit_code == 1
        assert "missing required field 'description'" in result.output


class TestCliCheck:
    def test_check_docs_dir(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--docs-dir", str(FIXTURES), "check"])
        assert result.exit_code == 0
        assert result.output.count("OK    ") == 3
        assert "Checked 3 files, 0 failed." in result.output

    def test_check_files(self):
        runner = CliRunner()
        result = runner.invoke(main, ["check", str(FIXTURES / "index.json"), str(FIXTURES / "broken.json")])
        assert result.exit_code == 1
        assert "FAIL  " in result.output
        assert "Checked 2 files, 1 failed." in result.output

    def test_check_reports_broken_link(self, tmp_path):
        shutil.copy(FIXTURES / "index.json", tmp_path / "index.json")
        (tmp_path / "orders").mkdir()
        shutil.copy(FIXTURES / "orders" / "creating_an_order.json", tmp_path / "orders")
        runner = CliRunner()
        result = runner.invoke(main, ["--docs-dir", str(tmp_path), "check"])
        assert result.exit_code == 1
        assert "getting_a_list_of_orders.json: cannot read" in result.output
