"""
# Gitdown

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.
"""
