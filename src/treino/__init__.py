"""treino: command-line client for the Treino workout API."""

import logging

__version__ = "0.1.0"

# Library modules log through this hierarchy; the CLI attaches a handler with --verbose
logging.getLogger(__name__).addHandler(logging.NullHandler())
