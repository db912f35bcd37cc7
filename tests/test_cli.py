#
# BigNotation - CLI Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bignotation.cli import EXIT_LOAD_ERROR, EXIT_OK, EXIT_PARSE_ERROR, build_parser, main


# Tests ----------------------------------------------------------------------------------------------------------------

class TestCli:

    @pytest.fixture
    def table_file(self, tmp_path):
        path = tmp_path / "numbers.txt"
        path.write_text("1k = 1e3\n1Qa = 1e45\n1QiD = 1e48\n", encoding="utf-8")
        return str(path)

    def test_parser_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_lookup(self, capsys, table_file):
        assert main(["--table", table_file, "lookup", "e45"]) == EXIT_OK
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Exact: 1Qa = 1e45"
        assert out[1] == "1 result"
        assert out[2].strip() == "1Qa = 1e45  (45)"

    def test_lookup_no_match(self, capsys, table_file):
        assert main(["--table", table_file, "lookup", "zz"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines()[:2] == ["No exact match", "0 results"]

    def test_lookup_default_table(self, capsys):
        assert main(["lookup", "QaD"]) == EXIT_OK
        assert capsys.readouterr().out.startswith("Exact: 1QaD = 1e45")

    def test_calc(self, capsys, table_file):
        assert main(["--table", table_file, "calc", "1QiD", "2.5Qa", "--mode", "div"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "A / B:         4e2" in out
        assert "A is larger" in out

    def test_calc_parse_error(self, capsys, table_file):
        assert main(["--table", table_file, "calc", "1QiD", "5Zz"]) == EXIT_PARSE_ERROR
        assert "B: Unknown abbreviation: Zz" in capsys.readouterr().out

    def test_format(self, capsys):
        assert main(["format", "12345e45", "--digits", "3", "--decimals", "3"]) == EXIT_OK
        out = capsys.readouterr().out.splitlines()
        assert out == ["Scientific:  1.23…e49", "Abbreviated: 12.345QiD"]

    def test_format_parse_error(self, capsys):
        assert main(["format", "1.2.3e4"]) == EXIT_PARSE_ERROR
        assert "Invalid coefficient" in capsys.readouterr().err

    def test_config(self, capsys, tmp_path, table_file):
        conf = tmp_path / "conf.toml"
        conf.write_text("[arithmetic]\ndisplay_digits = 2\n", encoding="utf-8")
        args = ["--table", table_file, "--config", str(conf), "calc", "1.234e10", "1", "--mode", "mul"]
        assert main(args) == EXIT_OK
        assert "Notes:" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "content, name",
        [
            pytest.param(None, "missing.txt", id="missing-table"),
            pytest.param("[[entry]]\nexponent = 3\n", "bad.toml", id="invalid-toml-entry"),
            pytest.param("[[entry\n", "broken.toml", id="toml-syntax"),
            pytest.param('entry = ["x"]\n', "strings.toml", id="entry-not-tables"),
            pytest.param('[entry]\nabbreviation = "1k"\nexponent = 3\n', "single.toml", id="single-entry-table"),
        ],
    )
    def test_load_errors(self, capsys, tmp_path, content, name):
        path = tmp_path / name
        if content is not None:
            path.write_text(content, encoding="utf-8")
        assert main(["--table", str(path), "lookup", "k"]) == EXIT_LOAD_ERROR
        assert capsys.readouterr().err.startswith("error: ")

    def test_bad_config_key(self, capsys, tmp_path):
        conf = tmp_path / "conf.toml"
        conf.write_text("[arithmetic]\nprecision = 2\n", encoding="utf-8")
        assert main(["--config", str(conf), "lookup", "k"]) == EXIT_LOAD_ERROR
