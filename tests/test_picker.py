import click
import pytest
from click.testing import CliRunner

from dir2prompt.selection.picker import IndexSelection, list_choices, select_paths


@pytest.fixture
def workdir(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.py").write_text("a")
    (tmp_path / ".hidden").write_text("h")
    return tmp_path


def test_list_choices_hides_dotfiles_and_marks_dirs(workdir):
    choices = list_choices(workdir)

    assert [label for label, _ in choices] == ["a.py", "b.txt", "src/"]
    assert all(path.is_absolute() for _, path in choices)
    assert choices[2][1] == workdir / "src"


@pytest.mark.parametrize("text, expected", [
    ("1", [0]),
    ("3,1", [0, 2]),
    ("1-3", [0, 1, 2]),
    ("3-2", [1, 2]),
    ("2, 2 ,2", [1]),
    ("all", [0, 1, 2]),
])
def test_index_selection_parses(text, expected):
    assert IndexSelection(3).convert(text, None, None) == expected


@pytest.mark.parametrize("text", ["0", "4", "x", "1-a", ",", "-1"])
def test_index_selection_rejects(text):
    with pytest.raises(click.BadParameter):
        IndexSelection(3).convert(text, None, None)


def _run_picker(cwd, user_input):
    """Runs select_paths inside a throwaway click command, feeding `user_input` to the prompt."""
    picked = []

    @click.command()
    def pick():
        picked.extend(select_paths(cwd))

    result = CliRunner().invoke(pick, input=user_input)
    return result, picked


def test_select_paths_returns_menu_order(workdir):
    result, picked = _run_picker(workdir, "3,1\n")

    assert result.exit_code == 0, result.output
    assert "1) a.py" in result.output
    assert "3) src/" in result.output
    assert picked == [workdir / "a.py", workdir / "src"]


def test_select_paths_reprompts_until_valid(workdir):
    result, picked = _run_picker(workdir, "9\n,\n2\n")

    assert result.exit_code == 0, result.output
    assert "out of range" in result.output
    assert "At least one entry must be selected" in result.output
    assert picked == [workdir / "b.txt"]


def test_select_paths_aborts_on_eof(workdir):
    result, picked = _run_picker(workdir, "")

    assert result.exit_code == 1
    assert picked == []


def test_select_paths_on_empty_directory(tmp_path):
    result, _ = _run_picker(tmp_path, "")

    assert result.exit_code == 2
    assert "Nothing to select" in result.output
