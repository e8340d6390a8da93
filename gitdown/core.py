"""
# Gitdown: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core expansion logic.

Gitdown documents are markdown with embedded directives of the form
````
<<{"gitdown": "«helper_name»", "«parameter_name»": «json_value», [...]}>>
````
Each directive is replaced by the output of the named helper.
Helper output may contain further directives, which are expanded in turn
until the document no longer changes.
"""

import asyncio
from typing import Optional

from gitdown.authorities import ResolutionAuthority
from gitdown.helpers import build_standard_helper_registry
from gitdown.registry import HelperRegistry


async def expand_markdown_async(markdown: str, helper_registry: Optional['HelperRegistry'] = None,
                                verbose_mode_enabled: bool = False, max_iterations: Optional[int] = None) -> str:
    """
    Expand every directive in a markdown document.

    If no helper registry is given, the standard helpers are used.
    """
    if helper_registry is None:
        helper_registry = build_standard_helper_registry()

    resolution_authority = ResolutionAuthority(helper_registry, verbose_mode_enabled, max_iterations)

    return await resolution_authority.run(markdown)


def expand_markdown(markdown: str, helper_registry: Optional['HelperRegistry'] = None,
                    verbose_mode_enabled: bool = False, max_iterations: Optional[int] = None) -> str:
    return asyncio.run(expand_markdown_async(markdown, helper_registry, verbose_mode_enabled, max_iterations))


def read_markdown_file(file_name: str) -> str:
    with open(file_name, 'r', encoding='utf-8') as markdown_file:
        return markdown_file.read()


def write_markdown_file(file_name: str, markdown: str):
    with open(file_name, 'w', encoding='utf-8') as markdown_file:
        markdown_file.write(markdown)


def expand_markdown_file(input_file_name: str, output_file_name: Optional[str] = None,
                         helper_registry: Optional['HelperRegistry'] = None,
                         verbose_mode_enabled: bool = False, max_iterations: Optional[int] = None) -> str:
    """
    Expand a markdown file, writing the result if an output file name is given.
    """
    markdown = read_markdown_file(input_file_name)
    markdown = expand_markdown(markdown, helper_registry, verbose_mode_enabled, max_iterations)

    if output_file_name is not None:
        write_markdown_file(output_file_name, markdown)

    return markdown
