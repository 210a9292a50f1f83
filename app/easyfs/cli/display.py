"""Shared Rich display functions for directory listings and snapshots."""

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from easyfs.filesystem.models import DirStructure
from easyfs.filesystem.path import FsPath
from easyfs.utils.formatting import create_entry_table, entry_kind, format_entry, format_size


def create_listing_table(title: str, entries: list[FsPath]) -> Table:
    """Create a Rich table listing entries by name.

    Args:
        title: Table title.
        entries: Entries to list, already in display order.

    Returns:
        Rich Table with one row per entry.
    """
    table = create_entry_table(title)
    for entry in entries:
        kind = entry_kind(entry)
        size = "-"
        if kind == "file":
            try:
                size = format_size(entry.stat().st_size)
            except OSError:
                size = "?"
        table.add_row(f"[{kind}]{kind}[/]", format_entry(entry, entry.name), size)
    return table


def build_tree(label: str, structure: DirStructure) -> Tree:
    """Render a DirStructure snapshot as a Rich tree.

    Directories come first, then files, each in snapshot order.
    """
    tree = Tree(f"[directory]{escape(label)}/[/]", guide_style="border")
    _add_branch(tree, structure)
    return tree


def _add_branch(node: Tree, structure: DirStructure) -> None:
    for name, sub in structure.dirs.items():
        branch = node.add(f"[directory]{escape(name)}/[/]")
        _add_branch(branch, sub)
    for file in structure.files:
        node.add(format_entry(file, file.name))
