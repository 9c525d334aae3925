import os

import pytest

from aorta.completion import (
    CommandCompleter,
    Completion,
    PathCompleter,
    ShellCompleter,
)
from aorta.highlight import ColorSupport, SyntaxHighlighter


@pytest.fixture
def bin_dir(tmp_path, monkeypatch):
    directory = tmp_path / "bin"
    directory.mkdir()
    (directory / "aortatool").write_text("")
    (directory / "aortatest").write_text("")
    (directory / "aortadir").mkdir()
    monkeypatch.setenv("PATH", str(directory))
    return directory


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    directory = tmp_path / "work"
    directory.mkdir()
    (directory / "notes.txt").write_text("")
    (directory / "other").write_text("")
    (directory / "nested").mkdir()
    (directory / "nested" / "inner.md").write_text("")
    monkeypatch.chdir(directory)
    return directory


def displays(matches):
    return [match.display for match in matches]


def test_path_commands_are_completed(bin_dir):
    completer = CommandCompleter()
    assert displays(completer.complete_command("aorta")) == ["aortatest", "aortatool"]


def test_builtins_always_present(bin_dir):
    completer = CommandCompleter()
    assert completer.complete_command("c") == [Completion("cd", "cd")]
    assert completer.complete_command("ex") == [Completion("exit", "exit")]


def test_symlinks_are_commands(bin_dir):
    os.symlink(bin_dir / "aortadir", bin_dir / "aortalink")
    completer = CommandCompleter()
    assert "aortalink" in displays(completer.complete_command("aorta"))
    assert "aortadir" not in displays(completer.complete_command("aorta"))


def test_refresh_picks_up_new_programs(bin_dir):
    completer = CommandCompleter()
    (bin_dir / "aortanew").write_text("")
    assert "aortanew" not in displays(completer.complete_command("aorta"))
    completer.refresh_commands()
    assert "aortanew" in displays(completer.complete_command("aorta"))


def test_aliases_follow_commands(bin_dir):
    completer = CommandCompleter()
    completer.update_aliases({"aortall": "ls -la"})
    matches = completer.complete_command("  aorta  ")
    assert matches[-1] == Completion("aortall (alias)", "aortall")
    assert displays(matches[:-1]) == ["aortatest", "aortatool"]


def test_file_completion_adds_space(work_dir):
    assert PathCompleter().complete_path("no") == [Completion("notes.txt", "notes.txt ")]


def test_directory_completion_adds_slash(work_dir):
    assert PathCompleter().complete_path("ne") == [Completion("nested/", "nested/")]


def test_empty_input_lists_directory_sorted(work_dir):
    matches = PathCompleter().complete_path("")
    assert displays(matches) == ["nested/", "notes.txt", "other"]


def test_completion_inside_directory(work_dir):
    assert PathCompleter().complete_path("nested/") == [
        Completion("nested/inner.md", "nested/inner.md ")
    ]


def test_absolute_paths_stay_absolute(work_dir):
    matches = PathCompleter().complete_path(f"{work_dir}/no")
    assert matches == [Completion(f"{work_dir}/notes.txt", f"{work_dir}/notes.txt ")]


def test_tilde_is_preserved(work_dir, monkeypatch):
    monkeypatch.setenv("HOME", str(work_dir))
    assert PathCompleter().complete_path("~/no") == [
        Completion("~/notes.txt", "~/notes.txt ")
    ]
    assert PathCompleter().complete_path("~/nested/") == [
        Completion("~/nested/inner.md", "~/nested/inner.md ")
    ]


def test_missing_directory_gives_nothing(work_dir):
    assert PathCompleter().complete_path("missing/x") == []


def test_shell_completes_first_word_as_command(bin_dir, work_dir):
    completer = ShellCompleter(SyntaxHighlighter(ColorSupport.NONE))
    start, matches = completer.complete("  aorta", 7)
    assert start == 2
    assert displays(matches) == ["aortatest", "aortatool"]


def test_shell_empty_line_lists_commands(bin_dir, work_dir):
    completer = ShellCompleter(SyntaxHighlighter(ColorSupport.NONE))
    start, matches = completer.complete("", 0)
    assert start == 0
    assert matches == completer.command_completer.complete_command("")


def test_shell_completes_later_words_as_paths(bin_dir, work_dir):
    completer = ShellCompleter(SyntaxHighlighter(ColorSupport.NONE))
    assert completer.complete("cat no", 6) == (4, [Completion("notes.txt", "notes.txt ")])
    start, matches = completer.complete("cat ", 4)
    assert start == 4
    assert matches == PathCompleter().complete_path("")


def test_shell_uses_text_before_cursor(bin_dir, work_dir):
    completer = ShellCompleter(SyntaxHighlighter(ColorSupport.NONE))
    assert completer.complete("cat notes.txt", 6) == completer.complete("cat no", 6)


def test_shell_aliases_update(bin_dir, work_dir):
    completer = ShellCompleter(SyntaxHighlighter(ColorSupport.NONE))
    completer.update_aliases({"aortagg": "git log"})
    _, matches = completer.complete("aortag", 6)
    assert matches == [Completion("aortagg (alias)", "aortagg")]


def test_highlight_without_colour_is_identity(bin_dir):
    completer = ShellCompleter(SyntaxHighlighter(ColorSupport.NONE))
    assert completer.highlight("ls -la /tmp", 3) == "ls -la /tmp"
    assert completer.highlight_hint("hint") == "hint"


def test_highlight_with_colour_uses_highlighter(bin_dir):
    highlighter = SyntaxHighlighter(ColorSupport.BASIC)
    completer = ShellCompleter(highlighter)
    coloured = completer.highlight("ls -la /tmp", 3)
    assert coloured == highlighter.highlight_command("ls -la /tmp")
    assert "\x1b[" in coloured
    assert completer.highlight_hint("hint") == highlighter.highlight_hint("hint")