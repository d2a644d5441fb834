APP_ORG = "tabpad"
APP_NAME = "tabpad"

MAX_RECENTS = 5
RECENTS_FILE_NAME = "recent_files.txt"

DEFAULT_FONT_FAMILY = "Consolas"
DEFAULT_FONT_SIZE = 10
DEFAULT_LOG_LEVEL = "WARNING"

FILE_FILTER = "Text files (*.txt);;All files (*)"
DEFAULT_SUFFIX = ".txt"
