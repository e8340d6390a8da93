"""
# Gitdown: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the expansion logic.
"""

import asyncio
import copy
import inspect
from typing import Optional

from gitdown.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from gitdown.directives import Directive, DocumentState
from gitdown.exceptions import HelperInvocationException, IterationLimitExceededException
from gitdown.placeholders import PlaceholderMaster
from gitdown.registry import HelperRegistry
from gitdown.scanner import DirectiveScanner


class ResolutionAuthority:
    """
    Object governing the discovery and resolution of directives.

    ## `run`

    Iterates scanning of the document and resolution rounds
    until a scan discovers no new directive and every discovered directive has been resolved.
    Helper output may itself contain directives, which are discovered by the next scan.

    ## `resolve_round`

    Resolves, concurrently, all unresolved directives whose helper has the lowest priority.
    Each helper is passed the document as it stood when the round began,
    and its output replaces its directive's placeholder as soon as it arrives.
    """
    _helper_registry: 'HelperRegistry'
    _scanner: 'DirectiveScanner'
    _verbose_mode_enabled: bool
    _max_iterations: Optional[int]

    def __init__(self, helper_registry: 'HelperRegistry', verbose_mode_enabled: bool = False,
                 max_iterations: Optional[int] = None):
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f'error: `max_iterations` must be at least 1 (got {max_iterations})')

        self._helper_registry = helper_registry.committed_copy()
        self._scanner = DirectiveScanner(self._helper_registry)
        self._verbose_mode_enabled = verbose_mode_enabled
        self._max_iterations = max_iterations

    @staticmethod
    def select_round_directives(directives: list['Directive']) -> list['Directive']:
        """
        Select the unresolved directives whose helper has the numerically lowest priority.
        """
        unresolved_directives = [directive for directive in directives if not directive.resolved]
        if len(unresolved_directives) == 0:
            return []

        lowest_priority = min(directive.helper.priority() for directive in unresolved_directives)

        return [
            directive
            for directive in unresolved_directives
            if directive.helper.priority() == lowest_priority
        ]

    def substitute(self, state: 'DocumentState', directive: 'Directive', value: str):
        value = PlaceholderMaster.replace_marker_occurrences(value)

        string_before = state.text
        state.text, _ = PlaceholderMaster.substitute_binding(state.text, directive.binding_id, value)
        directive.mark_resolved()
        string_after = state.text

        if self._verbose_mode_enabled:
            try:
                print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE #{directive.binding_id}')
                print(string_before)
                print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' `{directive.name}`')
                print(string_after)
                print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER #{directive.binding_id}')
                print('\n\n\n\n')
            except UnicodeEncodeError as unicode_encode_error:
                # caused by Private Use Area code points used for placeholders
                error_message = (
                    'bad print due to non-Unicode terminal encoding, likely `cp1252` on Git BASH for Windows. '
                    'Try setting the `PYTHONIOENCODING` environment variable to `utf-8` '
                    '(add `export PYTHONIOENCODING=utf-8` to `.bash_profile` and then source it). '
                    'See <https://stackoverflow.com/a/7865013>.'
                )
                raise UnicodeError(error_message) from unicode_encode_error

    async def resolve_directive(self, state: 'DocumentState', directive: 'Directive', markdown: str):
        try:
            value = await asyncio.to_thread(directive.helper.invoke, markdown, copy.deepcopy(directive.parameters))
            if inspect.isawaitable(value):
                value = await value

            if not isinstance(value, str):
                raise TypeError(f'expected helper output of type `str`, got `{type(value).__name__}`')
        except Exception as exception:
            raise HelperInvocationException(directive.binding_id, directive.name, exception) from exception

        self.substitute(state, directive, value)

    async def resolve_round(self, state: 'DocumentState') -> 'DocumentState':
        round_directives = ResolutionAuthority.select_round_directives(state.directives)
        if len(round_directives) == 0:
            return state

        if self._verbose_mode_enabled:
            round_directive_ids = [
                f'#{directive.binding_id} `{directive.name}`'
                for directive in round_directives
            ]
            pending_binding_ids = PlaceholderMaster.extract_binding_ids(state.text)
            print(f'Resolution round: {round_directive_ids} (pending placeholders: {pending_binding_ids})\n\n\n\n')

        markdown = state.text
        tasks = [
            asyncio.ensure_future(self.resolve_directive(state, directive, markdown))
            for directive in round_directives
        ]

        try:
            await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        return state

    async def run(self, markdown: str) -> str:
        state = DocumentState(PlaceholderMaster.replace_marker_occurrences(markdown), [], False)

        iteration_count = 0
        while True:
            scan_result = self._scanner.scan(state.text, state.directives)
            state = DocumentState(
                scan_result.text,
                state.directives + scan_result.new_directives,
                scan_result.discovered_new,
            )
            state = await self.resolve_round(state)
            iteration_count += 1

            if state.is_fixpoint():
                break

            if self._max_iterations is not None and iteration_count >= self._max_iterations:
                raise IterationLimitExceededException(self._max_iterations)

        return PlaceholderMaster.unprotect(state.text)
