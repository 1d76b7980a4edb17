"""Anagram finder constants: alphabet, input bounds and runtime defaults."""

import string

# Letters accepted in search input (after lowercasing)
ALPHABET: frozenset[str] = frozenset(string.ascii_lowercase)

# Frontend limits on the number of input letters
MIN_INPUT_LENGTH = 3
MAX_INPUT_LENGTH = 15

# Shortest word reported when the caller doesn't ask for a minimum
DEFAULT_MIN_LENGTH = 3

# Word-hunt boards: path length limits and largest accepted board
GRID_MIN_LENGTH = 3
GRID_MAX_LENGTH = 8
MAX_GRID_SIZE = 6

# Recursion steps between deadline checks during a search
CHECK_INTERVAL = 512

# Seconds a single HTTP search may run
DEFAULT_SEARCH_TIMEOUT = 10.0

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8081

# Environment variables read by load_default_dictionary() and the web app
ENV_DICTIONARY = "ANAGRAM_DICTIONARY"
ENV_SEARCH_TIMEOUT = "ANAGRAM_SEARCH_TIMEOUT"
ENV_HOST = "ANAGRAM_HOST"
ENV_PORT = "ANAGRAM_PORT"
