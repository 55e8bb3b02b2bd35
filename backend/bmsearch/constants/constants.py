# One table slot per possible byte value
NUM_CHARS = 256

# Sentinel stored in the bad character table for symbols absent from the pattern
ABSENT = -1

# Heuristic labels reported with every shift decision
BAD_CHARACTER = "Bad Character"
GOOD_SUFFIX = "Good Suffix"

# Step kinds
MATCH = "match"
MISMATCH = "mismatch"

# Demo input used by the CLI when nothing is given
DEFAULT_TEXT = "AAAAAAB"
DEFAULT_PATTERN = "AB"
