import csv
import logging
import os
import re

from prefix_trie.colors import HEX_COLUMN, language_column, strip_hash
from prefix_trie.index import ColorIndex, WordIndex

log = logging.getLogger(__name__)

# runs of letters only
WORD_RE = re.compile(r"[^\W\d_]+")


class DatasetError(Exception):
    pass


def tokenize(text):
    # "Hello, World!" => "hello", "world"
    for match in WORD_RE.finditer(text):
        yield match.group(0).lower()


def _check_exists(path):
    if not os.path.isfile(path):
        raise DatasetError(f"Dataset file not found: {path}")


def load_words(path, index=None) -> WordIndex:
    _check_exists(path)
    index = index if index is not None else WordIndex()
    total = 0
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            for word in tokenize(line):
                index.add(word)
                total += 1
    log.info(f"Loaded {total} words ({len(index)} distinct) from {path}")
    return index


def load_colors(path, language="en", index=None) -> ColorIndex:
    """Load a color table into a ColorIndex.

    The file is comma separated. Column 2 holds the "#rrggbb" code and the
    column picked by `language` (see colors.LANGUAGES) holds the name, e.g.

        id,name_en,hex,name_de,name_fr,name_it
        1,Red,#FF0000,Rot,Rouge,Rosso

    The first non-blank row is taken as a header when its hex column has no "#".
    """
    _check_exists(path)
    name_column = language_column(language)
    width = max(HEX_COLUMN, name_column) + 1
    index = index if index is not None else ColorIndex()

    with open(path, "r", encoding="utf-8", newline="") as fh:
        first_row = True
        for lineno, row in enumerate(csv.reader(fh), start=1):
            if not any(cell.strip() for cell in row):
                continue
            is_first, first_row = first_row, False
            if len(row) < width:
                raise DatasetError(f"{path}:{lineno}: expected at least {width} columns, got {len(row)}")
            code = row[HEX_COLUMN].strip()
            if not code.startswith("#"):
                if is_first:
                    # header
                    continue
                raise DatasetError(f"{path}:{lineno}: hex code must start with '#', got {code!r}")
            index.add(strip_hash(code), row[name_column].strip())

    log.info(f"Loaded {len(index)} colors ({language}) from {path}")
    return index
