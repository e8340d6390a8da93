"""
# Gitdown: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import os

from gitdown.constants import GIT_DIRECTORY_NAME
from gitdown.exceptions import RepositoryNotFoundException

FILE_SIZE_UNITS = ('kB', 'MB', 'GB', 'TB')


def locate_git_directory(start_path: str) -> str:
    """
    Locate the `.git` path by walking up from a starting directory to the filesystem root.
    """
    directory = os.path.realpath(start_path)

    while True:
        git_path = os.path.join(directory, GIT_DIRECTORY_NAME)
        if os.path.exists(git_path):
            return git_path

        parent_directory = os.path.dirname(directory)
        if parent_directory == directory:
            raise RepositoryNotFoundException(start_path)

        directory = parent_directory


def locate_repository_root(start_path: str) -> str:
    return os.path.dirname(locate_git_directory(start_path))


def format_file_size(byte_count: int) -> str:
    """
    Format a file size in 1024-based units, e.g. `512 B` or `3.41 kB`.
    """
    if byte_count < 1024:
        return f'{byte_count} B'

    size = float(byte_count)
    for unit in FILE_SIZE_UNITS:
        size /= 1024
        if size < 1024 or unit == FILE_SIZE_UNITS[-1]:
            break

    return f'{size:.2f} {unit}'
