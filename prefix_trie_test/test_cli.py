from click.testing import CliRunner

from prefix_trie.cli import main

COLORS_CSV = """id,name_en,hex,name_de,name_fr,name_it
1,Red,#FF0000,Rot,Rouge,Rosso
2,Green,#00FF00,Grün,Vert,Verde
"""


class TestCLI:
    def setup_method(self, method):
        self.runner = CliRunner()

    def words_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("hello hell world hi wonder helloing hello", encoding="utf-8")
        return str(path)

    def colors_file(self, tmp_path):
        path = tmp_path / "colors.csv"
        path.write_text(COLORS_CSV, encoding="utf-8")
        return str(path)

    def test_requires_one_dataset(self, tmp_path):
        result = self.runner.invoke(main, [])
        assert result.exit_code == 2

        path = self.words_file(tmp_path)
        result = self.runner.invoke(main, ["--words", path, "--colors", path])
        assert result.exit_code == 2

    def test_language_needs_colors(self, tmp_path):
        result = self.runner.invoke(main, ["--words", self.words_file(tmp_path), "--language", "de"])
        assert result.exit_code == 2
        assert "--language only applies to --colors" in result.output

    def test_missing_dataset_is_fatal(self, tmp_path):
        result = self.runner.invoke(main, ["--words", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1

    def test_lookup_words(self, tmp_path):
        result = self.runner.invoke(
            main, ["--words", self.words_file(tmp_path), "--lookup", "hello", "--lookup", "hel", "--lookup", "xyz"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "hello: 2",
            "hel: not found, but 3 word(s) start with it",
            "xyz: not found",
        ]

    def test_print_tree(self, tmp_path):
        result = self.runner.invoke(main, ["--words", self.words_file(tmp_path), "--print-tree"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "├── h"
        assert "END (2)" in result.output

    def test_lookup_colors(self, tmp_path):
        args = ["--colors", self.colors_file(tmp_path), "--language", "de"]
        args += ["--lookup", "#ff0000", "--lookup", "0000ff", "--lookup", "nothex"]
        result = self.runner.invoke(main, args)
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "#ff0000 Rot (R=255, G=0, B=0)",
            "#0000ff: not found",
            "invalid hex value entered",
        ]

    def test_language_prompt(self, tmp_path):
        result = self.runner.invoke(
            main, ["--colors", self.colors_file(tmp_path), "--lookup", "00FF00"], input="xx\nFR\n"
        )
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "#00ff00 Vert (R=0, G=255, B=0)"

    def test_interactive_words(self, tmp_path):
        result = self.runner.invoke(
            main, ["--words", self.words_file(tmp_path), "--interactive"], input="hello\nwonder\n\n"
        )
        assert result.exit_code == 0
        assert "hello: 2" in result.output
        assert "wonder: 1" in result.output

    def test_interactive_colors_until_eof(self, tmp_path):
        result = self.runner.invoke(
            main,
            ["--colors", self.colors_file(tmp_path), "--language", "en", "--interactive"],
            input="ff0000\n12345g\n",
        )
        assert result.exit_code == 0
        assert "#ff0000 Red (R=255, G=0, B=0)" in result.output
        assert "invalid hex value entered" in result.output
