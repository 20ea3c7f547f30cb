"""
# Chain-Tags: __main__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.
"""

from chaintags.cli import main

main()
