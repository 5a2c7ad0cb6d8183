"""Allow ``python -m onemax``."""

from onemax.cli.main import main

main()
