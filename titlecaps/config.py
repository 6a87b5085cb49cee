"""Command-line defaults loaded from the environment and .env.

WHY: Users who always pass the same wordlist or always disable boundary
forcing should not have to repeat the flag on every call. These defaults
only feed the CLI; the library functions never read the environment.

HOW: python-dotenv loads a .env file from the working directory on import.
Each setting is a module-level constant read with os.getenv().

RULES:
- TITLECAPS_WORDLIST: default wordlist path ("" means none)
- TITLECAPS_BOUNDARY_FORCING: "true" (default) or "false"
- TITLECAPS_LOG_LEVEL: logging level name for the CLI (default WARNING)
- Explicit command-line flags always win over these values
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_WORDLIST = os.getenv("TITLECAPS_WORDLIST", "").strip()
DEFAULT_BOUNDARY_FORCING = os.getenv("TITLECAPS_BOUNDARY_FORCING", "true").lower() == "true"
LOG_LEVEL = os.getenv("TITLECAPS_LOG_LEVEL", "WARNING").upper()
