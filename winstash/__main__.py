"""Allow `python -m winstash`."""

from .command import main

main()
