"""
# Gitdown: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

DIRECTIVE_DISCRIMINATOR_KEY = 'gitdown'

GIT_DIRECTORY_NAME = '.git'
