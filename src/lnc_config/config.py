"""Static configuration for the challenge config generator.

Everything here is a plain constant; the generator has no environment or
file based configuration.
"""

from __future__ import annotations

APP_NAME = "LNC Challenge Config Generator"
APP_VERSION = "0.1.0"

FLAG_PREFIX = "LNC25"
FLAG_PATTERN = rf"^{FLAG_PREFIX}\{{.*\}}$"
FLAG_PLACEHOLDER = f"{FLAG_PREFIX}{{...}}"

CATEGORIES = ("crypto", "forensics", "misc", "osint", "pwn", "re", "web")
DIFFICULTIES = ("easy", "medium", "hard", "insane")
DEFAULT_CATEGORY = "misc"
DEFAULT_DIFFICULTY = "easy"

PORT_MIN = 1
PORT_MAX = 65535

JSON_INDENT = 4
DIST_PREFIX = "dist"

STRUCTURED_FILENAME = "chall.json"
SUMMARY_FILENAME = "README.md"

NAME_PLACEHOLDER = "[Challenge Name]"
DESCRIPTION_PLACEHOLDER = "Description here."
AUTHOR_PLACEHOLDER = "[Author]"
DISCORD_PLACEHOLDER = "[Discord]"
EMPTY_SECTION = "None"

FLAG_ERROR = f"Must match {FLAG_PLACEHOLDER}"
PORT_ERROR = f"Port must be a number between {PORT_MIN} and {PORT_MAX}"
HINT_ERROR = "Hint cost must be a non-negative number"
