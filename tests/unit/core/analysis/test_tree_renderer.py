from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies exact output (indentation, colors, resets, line terminators) for
reference folder layouts, hidden-entry handling, invalid roots, unreadable
directories and custom color sequences.
"""

import io
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pytest

from truffula.core.analysis.tree_renderer import TreePrinter, capture_tree, render_tree
from truffula.domain.colors import ColorSequenceError, ConsoleColor
from truffula.domain.tree_models import RenderConfig
from truffula.infra.fs import FileSystem

NL = os.linesep
RESET = ConsoleColor.RESET
WHITE = ConsoleColor.WHITE
PURPLE = ConsoleColor.PURPLE
YELLOW = ConsoleColor.YELLOW


def expected_output(lines: Sequence[Tuple[ConsoleColor, str]]) -> str:
    """Assemble the exact byte stream for (color, text) pairs."""
    return "".join(f"{color.value}{text}{NL}{RESET.value}" for color, text in lines)


def render(root: Path, show_hidden: bool = False, use_color: bool = True,
           colors: Optional[List[ConsoleColor]] = None) -> str:
    out = io.StringIO()
    config = RenderConfig(root_path=str(root), show_hidden=show_hidden, use_color=use_color)
    TreePrinter(config, out=out, color_sequence=colors).print_tree()
    return out.getvalue()


# -----------------------------------------------------------------------------
# Reference layouts
# -----------------------------------------------------------------------------

def test_print_tree_exact_output_with_colors(my_folder: Path) -> None:
    output = render(my_folder, show_hidden=True)

    assert output == expected_output([
        (WHITE, "myFolder/"),
        (PURPLE, "   Apple.txt"),
        (PURPLE, "   banana.txt"),
        (PURPLE, "   Documents/"),
        (YELLOW, "      images/"),
        (WHITE, "         Cat.png"),
        (WHITE, "         cat.png"),
        (WHITE, "         Dog.png"),
        (YELLOW, "      notes.txt"),
        (YELLOW, "      README.md"),
        (PURPLE, "   zebra.txt"),
    ])


def test_print_tree_without_color_uses_first_color(my_folder: Path) -> None:
    output = render(my_folder, show_hidden=True, use_color=False)

    lines = output.split(RESET.value)
    assert lines[-1] == ""
    assert all(line.startswith(WHITE.value) for line in lines[:-1])
    assert len(lines) - 1 == 11


def test_color_disabled_uses_index_zero_of_custom_sequence(my_folder: Path) -> None:
    output = render(my_folder, use_color=False, colors=[ConsoleColor.RED, ConsoleColor.GREEN])

    chunks = [c for c in output.split(RESET.value) if c]
    assert chunks
    assert all(c.startswith(ConsoleColor.RED.value) for c in chunks)


def test_custom_color_sequence_cycles_by_depth(tmp_path: Path) -> None:
    root = tmp_path / "root"
    (root / "a" / "b").mkdir(parents=True)
    (root / "a" / "b" / "leaf.txt").touch()

    output = render(root, colors=[ConsoleColor.RED, ConsoleColor.GREEN])

    assert output == expected_output([
        (ConsoleColor.RED, "root/"),
        (ConsoleColor.GREEN, "   a/"),
        (ConsoleColor.RED, "      b/"),
        (ConsoleColor.GREEN, "         leaf.txt"),
    ])


def test_single_color_sequence(tmp_path: Path) -> None:
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)

    output = render(root, colors=[ConsoleColor.CYAN])

    assert output == expected_output([
        (ConsoleColor.CYAN, "root/"),
        (ConsoleColor.CYAN, "   sub/"),
    ])


def test_deep_nesting_cycles_colors(tmp_path: Path) -> None:
    deep = tmp_path / "documents" / "images" / "deep1" / "deep2" / "deep3"
    deep.mkdir(parents=True)
    (deep / "hi.txt").touch()

    output = render(tmp_path)

    assert output == expected_output([
        (WHITE, f"{tmp_path.name}/"),
        (PURPLE, "   documents/"),
        (YELLOW, "      images/"),
        (WHITE, "         deep1/"),
        (PURPLE, "            deep2/"),
        (YELLOW, "               deep3/"),
        (WHITE, "                  hi.txt"),
    ])


def test_alphabetical_ordering(tmp_path: Path) -> None:
    root = tmp_path / "Document"
    root.mkdir()
    for name in ("Found.txt", "eggs.txt", "Deep.txt", "center.txt", "Bees.txt", "alphabet.txt"):
        (root / name).touch()

    output = render(root)

    assert output == expected_output([
        (WHITE, "Document/"),
        (PURPLE, "   alphabet.txt"),
        (PURPLE, "   Bees.txt"),
        (PURPLE, "   center.txt"),
        (PURPLE, "   Deep.txt"),
        (PURPLE, "   eggs.txt"),
        (PURPLE, "   Found.txt"),
    ])


def test_empty_directory(tmp_path: Path) -> None:
    root = tmp_path / "myFolder"
    root.mkdir()

    assert render(root) == expected_output([(WHITE, "myFolder/")])


def test_directory_name_with_space(tmp_path: Path) -> None:
    root = tmp_path / " "
    root.mkdir()

    assert render(root) == expected_output([(WHITE, " /")])


# -----------------------------------------------------------------------------
# Hidden entries
# -----------------------------------------------------------------------------

def test_only_hidden_files_prints_root_only(tmp_path: Path) -> None:
    root = tmp_path / "myFolder"
    root.mkdir()
    for name in (".hidden1", ".hidden2", ".hidden3"):
        (root / name).touch()

    assert render(root, show_hidden=False) == expected_output([(WHITE, "myFolder/")])


def test_hidden_files_shown_when_enabled(tmp_path: Path) -> None:
    root = tmp_path / "myFolder"
    root.mkdir()
    (root / ".env").touch()
    (root / "app.py").touch()

    assert render(root, show_hidden=True) == expected_output([
        (WHITE, "myFolder/"),
        (PURPLE, "   .env"),
        (PURPLE, "   app.py"),
    ])


def test_hidden_directory_line_suppressed_but_children_printed(tmp_path: Path) -> None:
    root = tmp_path / "myFolder"
    hidden_dir = root / ".config"
    hidden_dir.mkdir(parents=True)
    (hidden_dir / "settings.ini").touch()
    (hidden_dir / ".secret").touch()
    (root / "visible.txt").touch()

    output = render(root, show_hidden=False)

    assert output == expected_output([
        (WHITE, "myFolder/"),
        (YELLOW, "      settings.ini"),
        (PURPLE, "   visible.txt"),
    ])
    assert ".config" not in output
    assert ".secret" not in output


# -----------------------------------------------------------------------------
# Failure paths
# -----------------------------------------------------------------------------

def test_missing_root_prints_invalid_directory(tmp_path: Path) -> None:
    output = render(tmp_path / "does_not_exist")

    assert output == expected_output([(WHITE, "invalid directory")])


def test_file_root_prints_invalid_directory(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.touch()

    assert render(target) == expected_output([(WHITE, "invalid directory")])


class UnreadableFS(FileSystem):
    """Filesystem double whose listing of one directory always fails."""

    def __init__(self, unreadable: str) -> None:
        self.unreadable = unreadable

    def list_entries(self, path: str):
        if path == self.unreadable:
            return None
        return super().list_entries(path)


def test_unreadable_directory_is_treated_as_empty(tmp_path: Path) -> None:
    root = tmp_path / "root"
    locked = root / "locked"
    locked.mkdir(parents=True)
    (locked / "inside.txt").touch()
    (root / "z.txt").touch()

    out = io.StringIO()
    printer = TreePrinter(RenderConfig(str(root)), out=out, fs=UnreadableFS(str(locked)))
    printer.print_tree()

    assert out.getvalue() == expected_output([
        (WHITE, "root/"),
        (PURPLE, "   locked/"),
        (PURPLE, "   z.txt"),
    ])


def test_empty_color_sequence_fails_at_construction(tmp_path: Path) -> None:
    with pytest.raises(ColorSequenceError):
        TreePrinter(RenderConfig(str(tmp_path)), out=io.StringIO(), color_sequence=[])


# -----------------------------------------------------------------------------
# Public helpers
# -----------------------------------------------------------------------------

def test_render_twice_is_identical(my_folder: Path) -> None:
    first = capture_tree(str(my_folder), show_hidden=True)
    second = capture_tree(str(my_folder), show_hidden=True)

    assert first == second
    assert first.startswith(f"{WHITE.value}myFolder/")


def test_render_tree_writes_to_stdout(tmp_path: Path, capsys) -> None:
    root = tmp_path / "solo"
    root.mkdir()

    render_tree(str(root))

    assert capsys.readouterr().out == expected_output([(WHITE, "solo/")])


def test_render_tree_to_custom_sink(tmp_path: Path) -> None:
    root = tmp_path / "root"
    root.mkdir()
    (root / "one.txt").touch()
    out = io.StringIO()

    render_tree(str(root), show_hidden=False, use_color=False, out=out)

    assert out.getvalue() == expected_output([(WHITE, "root/"), (WHITE, "   one.txt")])


class EmptyRootFS(FileSystem):
    """Filesystem double that lists no children under any directory."""

    def list_entries(self, path: str):
        return []


def test_filesystem_root_prints_single_slash() -> None:
    out = io.StringIO()
    TreePrinter(RenderConfig("/"), out=out, fs=EmptyRootFS()).print_tree()

    assert out.getvalue() == expected_output([(WHITE, "/")])
