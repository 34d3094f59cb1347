"""
Game-wide constants (single source of truth).

Everything that sizes the game lives here so the engine, the leaderboard
and the CLI agree on the same rules.
"""

# Letters per word. Fixed for the whole game.
WORD_LENGTH = 5

# Turn budget for one game.
MAX_GUESSES = 6

# Number of records the leaderboard keeps.
LEADERBOARD_CAPACITY = 5

# Usernames are stored as a single whitespace-free token.
USERNAME_LENGTH = 5

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Resource layout for persisted state.
RESOURCE_DIR_NAME = "wc_resources"
LEADERBOARD_FILE_NAME = "highscore.txt"
