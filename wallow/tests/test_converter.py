"""
Tests for wallow.converter

subprocess.run and shutil.which are patched; gowall is never actually invoked.
"""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from wallow import converter
from wallow.errors import ExternalToolFailedError, ExternalToolMissingError


def completed(args=None, returncode=0, stdout="", stderr=""):
    return subprocess.CompletedProcess(args or [], returncode, stdout, stderr)


@patch("wallow.converter.subprocess.run")
def test_convert_arguments(mock_run):
    mock_run.return_value = completed()

    converter.convert(Path("/tmp/wallow-a.jpg"), "dracula", Path("/tmp/out.jpg"))

    args = mock_run.call_args.args[0]
    assert args == [
        "gowall",
        "convert",
        "/tmp/wallow-a.jpg",
        "-t",
        "dracula",
        "--output",
        "/tmp/out.jpg",
    ]


@patch("wallow.converter.subprocess.run")
def test_convert_without_output(mock_run):
    mock_run.return_value = completed()

    converter.convert("/tmp/wallow-a.jpg", "nord")

    assert "--output" not in mock_run.call_args.args[0]


@patch("wallow.converter.subprocess.run")
def test_convert_failure_carries_stderr(mock_run):
    mock_run.return_value = completed(returncode=1, stderr="unknown theme: nope\n")

    with pytest.raises(ExternalToolFailedError) as info:
        converter.convert("/tmp/wallow-a.jpg", "nope")

    assert info.value.reason == "unknown theme: nope\n"
    assert info.value.returncode == 1


@patch("wallow.converter.subprocess.run", side_effect=FileNotFoundError("gowall"))
def test_convert_binary_vanished(mock_run):
    with pytest.raises(ExternalToolMissingError):
        converter.convert("/tmp/wallow-a.jpg", "nord")


@patch("wallow.converter.subprocess.run")
def test_list_themes(mock_run):
    mock_run.return_value = completed(stdout="catppuccin\n  dracula\n\nnord\n")

    assert converter.list_themes() == ["catppuccin", "dracula", "nord"]
    assert mock_run.call_args.args[0] == ["gowall", "list"]


def test_check_installed():
    with patch("wallow.converter.shutil.which", return_value="/usr/bin/gowall"):
        converter.check_installed()

    with patch("wallow.converter.shutil.which", return_value=None):
        with pytest.raises(ExternalToolMissingError) as info:
            converter.check_installed()

    assert info.value.tool == "gowall"
