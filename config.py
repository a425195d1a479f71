# config.py
import os
import sys

LINE_MARKER = "$"         # line-boundary word in the intermediate text
SYMBOL_TERMINATOR = "$"   # end of input for symbol extraction
SYMBOL_OPERATORS = "+-*/=()"

KEYWORDS_FILE_NAME = "keywords.txt"
OPERATORS_FILE_NAME = "operators.txt"
DEFAULT_INTERMEDIATE_NAME = "inter.txt"
DATA_DIR_NAME = os.path.join("share", "minilex")  # under sys.prefix for installed copies

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_base_path():
    """
    Directory the bundled resources live in.
    - frozen executable: the executable's directory
    - plain script: this module's directory
    """
    if getattr(sys, 'frozen', False):
        return os.path.dirname(sys.executable)
    else:
        return os.path.dirname(os.path.abspath(__file__))


def get_data_dirs():
    """Places the bundled reference lists are looked up in, in order"""
    return [get_base_path(), os.path.join(sys.prefix, DATA_DIR_NAME)]


def find_data_file(name):
    # falls back to the first location so a missing file is reported there
    dirs = get_data_dirs()
    for d in dirs:
        path = os.path.join(d, name)
        if os.path.isfile(path):
            return path
    return os.path.join(dirs[0], name)


def default_keywords_path():
    return find_data_file(KEYWORDS_FILE_NAME)


def default_operators_path():
    return find_data_file(OPERATORS_FILE_NAME)
