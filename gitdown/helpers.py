"""
# Gitdown: helpers.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Standard helpers, exposed to documents via directives.
"""

import gzip
import os
from typing import Any, Optional, Union

from gitdown.bases import Helper, HelperWithRepositoryFiles
from gitdown.registry import HelperRegistry
from gitdown.utilities import format_file_size


class TestHelper(Helper):
    """
    A helper producing the string `test`, for checking that expansion works at all.

    Document syntax:
    ````
    <<{"gitdown": "test"}>>
    ````
    """
    def priority(self) -> Union[int, float]:
        return 10

    def invoke(self, markdown: str, parameters: dict[str, Any]) -> str:
        return 'test'


class IncludeHelper(HelperWithRepositoryFiles):
    """
    A helper inlining the content of a file.

    Document syntax:
    ````
    <<{"gitdown": "include", "file": "«file_name»"}>>
    ````

    «file_name» is relative to the repository root.
    Directives in the included content are discovered by the next scan;
    including runs before every other standard helper so that they see the included content.
    """
    @property
    def name(self) -> str:
        return 'include'

    def priority(self) -> Union[int, float]:
        return 0

    def invoke(self, markdown: str, parameters: dict[str, Any]) -> str:
        file_name = self.resolve_file_name(self.extract_required_parameter(parameters, 'file'))

        with open(file_name, 'r', encoding='utf-8') as included_file:
            return included_file.read()


class FilesizeHelper(HelperWithRepositoryFiles):
    """
    A helper producing the human-readable size of a file.

    Document syntax:
    ````
    <<{"gitdown": "filesize", "file": "«file_name»", "gzip": (def) false | true}>>
    ````

    With `"gzip": true`, the size is that of the gzip-compressed content of the file.
    """
    @property
    def name(self) -> str:
        return 'filesize'

    def priority(self) -> Union[int, float]:
        return 10

    def invoke(self, markdown: str, parameters: dict[str, Any]) -> str:
        file_name = self.resolve_file_name(self.extract_required_parameter(parameters, 'file'))

        if parameters.get('gzip', False):
            with open(file_name, 'rb') as measured_file:
                byte_count = len(gzip.compress(measured_file.read()))
        else:
            byte_count = os.path.getsize(file_name)

        return format_file_size(byte_count)


def build_standard_helper_registry(repository_path: Optional[str] = None) -> 'HelperRegistry':
    helper_registry = HelperRegistry()
    helper_registry.register('test', TestHelper())
    helper_registry.register('include', IncludeHelper(repository_path))
    helper_registry.register('filesize', FilesizeHelper(repository_path))

    return helper_registry
