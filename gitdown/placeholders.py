"""
# Gitdown: placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Placeholder tokens binding directives to their eventual output.
"""

import re
import warnings
from typing import Optional


class PlaceholderMaster:
    """
    Static class providing placeholder tokens.

    While a directive awaits resolution, its span in the document is replaced by a placeholder
    consisting of code points in the main Unicode Private Use Area.
    Specifically, the placeholder shall be of the form `«marker»«run_characters»«marker»`,
    where «marker» is `U+F8FF`, and «run_characters» are between `U+E000` and `U+E0FF`
    each representing a Unicode byte of the protected string.
    For a directive, the protected string is the decimal form of its binding identifier.

    Placeholders are free of `<`, `>`, `{` and `}`, so they can never be matched as a directive.

    The very first call to PlaceholderMaster should be to the `replace_marker_occurrences(...)` method;
    this replaces occurrences of «marker» themselves with a placeholder,
    lest those occurrences of «marker» be confounding.
    The very last call to PlaceholderMaster should be to unprotect the text
     (restoring the strings that were protected with a placeholder).
    """
    def __new__(cls):
        raise TypeError('PlaceholderMaster cannot be instantiated')

    MARKER = '\uF8FF'
    _RUN_CHARACTER_MIN = '\uE000'
    _RUN_CHARACTER_MAX = '\uE100'
    _REPLACEMENT_CHARACTER = '\uFFFD'

    _RUN_CODE_POINT_MIN = ord(_RUN_CHARACTER_MIN)
    _REPLACEMENT_CODE_POINT = ord(_REPLACEMENT_CHARACTER)

    _PLACEHOLDER_PATTERN_COMPILED = re.compile(
        pattern=f'{MARKER} (?P<run_characters> [{_RUN_CHARACTER_MIN}-{_RUN_CHARACTER_MAX}]* ) {MARKER}',
        flags=re.VERBOSE,
    )

    @staticmethod
    def _unprotect_substitute_function(placeholder_match: re.Match) -> str:
        run_characters = placeholder_match.group('run_characters')
        string_bytes = bytes(
            ord(character) - PlaceholderMaster._RUN_CODE_POINT_MIN
            for character in run_characters
        )

        try:
            string = string_bytes.decode()
        except UnicodeDecodeError:
            warnings.warn(
                f'warning: placeholder encountered with run characters '
                f'representing invalid byte sequence {string_bytes}; '
                f'substituted with U+{PlaceholderMaster._REPLACEMENT_CODE_POINT:X} '
                f'REPLACEMENT CHARACTER as a fallback\n\n'
                f'Possible causes:\n'
                f'- Confounding occurrences of «marker» have not been removed '
                f'by calling PlaceholderMaster.replace_marker_occurrences(...)\n'
                f'- A helper has tampered with '
                f'strings of the form `«marker»«run_characters»«marker»`'
            )
            string = PlaceholderMaster._REPLACEMENT_CHARACTER

        return string

    @staticmethod
    def replace_marker_occurrences(string: str) -> str:
        """
        Replace occurrences of «marker» with a placeholder.

        Applied to the input document and to every helper output,
        so that the only bare «marker» characters in the text are those of placeholders.
        """
        return re.sub(
            pattern=PlaceholderMaster.MARKER,
            repl=PlaceholderMaster.protect(PlaceholderMaster.MARKER),
            string=string,
        )

    @staticmethod
    def protect(string: str) -> str:
        """
        Protect a string by converting it to a placeholder.
        """
        marker = PlaceholderMaster.MARKER

        string = PlaceholderMaster.unprotect(string)
        string_bytes = string.encode()
        run_characters = ''.join(
            chr(byte + PlaceholderMaster._RUN_CODE_POINT_MIN)
            for byte in string_bytes
        )

        placeholder = f'{marker}{run_characters}{marker}'

        return placeholder

    @staticmethod
    def unprotect(string: str) -> str:
        """
        Unprotect a string by restoring placeholders to their strings.
        """
        return re.sub(
            pattern=PlaceholderMaster._PLACEHOLDER_PATTERN_COMPILED,
            repl=PlaceholderMaster._unprotect_substitute_function,
            string=string,
        )

    @staticmethod
    def bind(binding_id: int) -> str:
        """
        Build the placeholder standing in for the directive with the given binding identifier.
        """
        return PlaceholderMaster.protect(str(binding_id))

    @staticmethod
    def _extract_binding_id(placeholder_match: re.Match) -> Optional[int]:
        protected_string = PlaceholderMaster._unprotect_substitute_function(placeholder_match)
        if re.fullmatch(pattern=r'[0-9]+', string=protected_string, flags=re.ASCII):
            return int(protected_string)

        return None

    @staticmethod
    def extract_binding_ids(string: str) -> list[int]:
        """
        Extract, in order of appearance, the binding identifiers of the directive placeholders in a string.

        Placeholders protecting anything other than a decimal integer (such as occurrences of «marker») are skipped.
        """
        binding_ids = []
        for placeholder_match in PlaceholderMaster._PLACEHOLDER_PATTERN_COMPILED.finditer(string):
            binding_id = PlaceholderMaster._extract_binding_id(placeholder_match)
            if binding_id is not None:
                binding_ids.append(binding_id)

        return binding_ids

    @staticmethod
    def substitute_binding(string: str, binding_id: int, value: str) -> tuple[str, int]:
        """
        Replace the placeholder of the given binding identifier by a value.

        Placeholders are parsed left to right from their markers,
        so run characters occurring in content between two placeholders are never mistaken for one.
        Returns the new string and the number of substitutions made.
        """
        substitution_count = 0

        def substitute_function(placeholder_match: re.Match) -> str:
            nonlocal substitution_count

            if PlaceholderMaster._extract_binding_id(placeholder_match) == binding_id:
                substitution_count += 1
                return value

            return placeholder_match.group()

        string = PlaceholderMaster._PLACEHOLDER_PATTERN_COMPILED.sub(substitute_function, string)

        return string, substitution_count
