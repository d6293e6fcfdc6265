"""
Tests for wallow.picker

fzf is never started: 'run' is replaced with a fake that plays fzf's part by writing the
selection into the redirect target of the shell command.
"""

import shlex
import subprocess
from pathlib import Path

import pytest

from wallow import picker
from wallow.errors import ExternalToolFailedError, ExternalToolMissingError, NoResults


def all_tools(name):
    return f"/usr/bin/{name}"


class FakeFzf:
    """
    Records the shell command and the candidate lines fed to fzf, and writes selection to the
    file fzf's stdout goes to.
    """

    def __init__(self, selection="", returncode=0, stderr=""):
        self.selection = selection
        self.returncode = returncode
        self.stderr = stderr
        self.calls = []
        self.kwargs = []
        self.lines = []
        self.list_file = None
        self.selection_file = None

    def __call__(self, args, **kwargs):
        self.calls.append(args)
        self.kwargs.append(kwargs)

        words = shlex.split(args[2])
        self.list_file = Path(words[1])
        self.selection_file = Path(words[-1])

        self.lines = self.list_file.read_text().splitlines()
        self.selection_file.write_text(self.selection)
        return subprocess.CompletedProcess(args, self.returncode, None, self.stderr)


@pytest.fixture
def wallpapers(tmp_path):
    directory = tmp_path / "wallpapers"
    converted = directory / "converted"
    converted.mkdir(parents=True)

    for path in (
        directory / "wallow-wallhaven-b.png",
        directory / "wallow-wallhaven-a.jpg",
        directory / "readme.txt",
        converted / "wallow-nord-wallhaven-a.jpg",
    ):
        path.write_bytes(b"")

    return directory, converted


def test_collect_candidates_order_and_filter(wallpapers, tmp_path):
    directory, converted = wallpapers

    candidates = picker.collect_candidates([directory, converted, tmp_path / "missing"])

    assert candidates == [
        directory / "wallow-wallhaven-a.jpg",
        directory / "wallow-wallhaven-b.png",
        converted / "wallow-nord-wallhaven-a.jpg",
    ]


def test_pick_empty_raises_no_results_without_process(tmp_path):
    run = FakeFzf()

    with pytest.raises(NoResults):
        picker.pick([tmp_path], environ={}, which=all_tools, run=run)

    assert run.calls == []


def test_pick_requires_fzf(wallpapers):
    run = FakeFzf()

    with pytest.raises(ExternalToolMissingError) as info:
        picker.pick(wallpapers, environ={}, which=lambda name: None, run=run)

    assert info.value.tool == "fzf"
    assert run.calls == []


def test_pick_wezterm_requires_chafa(wallpapers):
    def only_fzf(name):
        return "/usr/bin/fzf" if name == "fzf" else None

    with pytest.raises(ExternalToolMissingError) as info:
        picker.pick(wallpapers, environ={"TERM_PROGRAM": "WezTerm"}, which=only_fzf, run=FakeFzf())

    assert info.value.tool == "chafa"


def test_pick_returns_selection_and_removes_temp_file(wallpapers):
    directory, _ = wallpapers
    chosen = directory / "wallow-wallhaven-b.png"
    run = FakeFzf(selection=f"{chosen}\n")

    result = picker.pick(wallpapers, environ={"TERM_PROGRAM": "WezTerm"}, which=all_tools, run=run)

    assert result == chosen
    assert run.calls[0][:2] == ["sh", "-c"]
    assert "chafa -f iterm" in run.calls[0][2]
    assert not run.selection_file.exists()


@pytest.mark.parametrize("returncode, selection", [(130, ""), (1, ""), (0, ""), (0, "\n")])
def test_pick_cancelled(wallpapers, returncode, selection):
    run = FakeFzf(selection=selection, returncode=returncode)

    assert picker.pick(wallpapers, environ={}, which=all_tools, run=run) is None
    assert not run.selection_file.exists()


def test_pick_fzf_failure_carries_stderr_and_removes_temp_files(wallpapers):
    run = FakeFzf(returncode=2, stderr="unknown option: --bogus\n")

    with pytest.raises(ExternalToolFailedError) as info:
        picker.pick(wallpapers, environ={}, which=all_tools, run=run)

    assert info.value.returncode == 2
    assert info.value.reason == "unknown option: --bogus\n"
    assert run.kwargs[0]["stderr"] == subprocess.PIPE
    assert not run.selection_file.exists()
    assert not run.list_file.exists()


def test_pick_feeds_candidates_through_list_file(wallpapers):
    directory, converted = wallpapers
    run = FakeFzf()

    picker.pick(wallpapers, environ={}, which=all_tools, run=run)

    assert run.lines == [
        str(directory / "wallow-wallhaven-a.jpg"),
        str(directory / "wallow-wallhaven-b.png"),
        str(converted / "wallow-nord-wallhaven-a.jpg"),
    ]
    assert str(directory) not in run.calls[0][2]
    assert not run.list_file.exists()


def test_pick_large_collection_keeps_command_short(tmp_path):
    directory = tmp_path / ("deeply-nested-wallpaper-folder-" * 3)
    directory.mkdir()
    for index in range(3000):
        (directory / f"wallow-wallhaven-{index:05d}-{'x' * 40}.jpg").write_bytes(b"")

    chosen = directory / f"wallow-wallhaven-02999-{'x' * 40}.jpg"
    run = FakeFzf(selection=f"{chosen}\n")

    result = picker.pick([directory], environ={}, which=all_tools, run=run)

    assert result == chosen
    assert len(run.lines) == 3000
    assert len(run.calls[0][2]) < 1024


def test_shell_command_quotes_paths(tmp_path):
    list_file = tmp_path / "it's a list.txt"
    selection_file = tmp_path / "selection.txt"

    command = picker.build_shell_command(list_file, "echo {}", selection_file)
    words = shlex.split(command)

    assert words[:3] == ["cat", str(list_file), "|"]
    assert words[-2:] == [">", str(selection_file)]
    assert "echo {}" in words


def test_write_candidates(tmp_path):
    awkward = tmp_path / "it's a wallpaper.jpg"
    list_file = tmp_path / "candidates.list"

    picker.write_candidates([awkward, tmp_path / "b.png"], list_file)

    assert list_file.read_text().splitlines() == [str(awkward), str(tmp_path / "b.png")]
