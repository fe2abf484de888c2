# linediff/config.py

APP_NAME = "linediff"
APP_AUTHOR = "linediff"

# User preferences file (lives in the platform config dir)
PREFS_FILENAME = "prefs.json"

# Caller-side budget for guarded_diff: largest line count accepted per side
DIFF_MAX_LINES = 20000
# ...and largest LCS table (cells after the common prefix), about 40 MB
DIFF_MAX_CELLS = 5_000_000

# Encoding detection reads this many bytes from the head of a file
ENCODING_SNIFF_BYTES = 10000

# Refuse to segment files larger than this
READ_MAX_BYTES = 50 * 1024 * 1024      # 50 MB
