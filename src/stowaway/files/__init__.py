"""Filesystem operations for stowaway."""

from stowaway.files.discover import discover_files
from stowaway.files.discover import walk_tree
from stowaway.files.paths import ancestors
from stowaway.files.paths import exists
from stowaway.files.paths import is_empty_dir
from stowaway.files.symlinks import create_symlink
from stowaway.files.symlinks import read_symlink
from stowaway.files.symlinks import remove_path

__all__ = [
    "ancestors",
    "create_symlink",
    "discover_files",
    "exists",
    "is_empty_dir",
    "read_symlink",
    "remove_path",
    "walk_tree",
]
