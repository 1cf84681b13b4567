import importlib
import itertools
import typing

from prefix_trie.colors import Color, hex_to_rgb, strip_hash
from prefix_trie.trie import Trie, TrieNode


class BaseIndex:
    """A Trie plus the rules for turning raw input into keys.

    Subclasses override `clean_key` to normalize what callers hand in, so that
    "Hello" and "hello" (or "#FF0000" and "ff0000") land on the same node.
    """

    mode = None

    def __init__(self):
        super().__init__()
        self.trie = Trie()

    def clean_key(self, key: str):
        return key

    def add(self, key: str, label=None):
        self.trie.insert(self.clean_key(key), label)

    def remove(self, key: str) -> bool:
        return self.trie.delete(self.clean_key(key))

    def get(self, key: str) -> typing.Union[None, TrieNode]:
        return self.trie.get(self.clean_key(key))

    def contains(self, key: str) -> bool:
        return self.trie.search(self.clean_key(key))

    def has_prefix(self, prefix: str) -> bool:
        return self.trie.starts_with(self.clean_key(prefix))

    def complete(self, prefix: str, limit=None) -> typing.List[str]:
        keys = self.trie.keys(self.clean_key(prefix))
        return list(itertools.islice(keys, limit))

    def lines(self):
        return self.trie.lines()

    def __len__(self):
        return len(self.trie)


class WordIndex(BaseIndex):
    mode = "words"

    def clean_key(self, key: str):
        return key.strip().lower()

    def count(self, word: str) -> int:
        node = self.get(word)
        return node.count if node else 0

    def most_common(self, n=None) -> typing.List[typing.Tuple[str, int]]:
        counts = [(word, node.count) for word, node in self.trie.items()]
        counts.sort(key=lambda item: item[1], reverse=True)
        return counts[:n] if n is not None else counts


class ColorIndex(BaseIndex):
    mode = "colors"

    def clean_key(self, key: str):
        return strip_hash(key).lower()

    def lookup(self, hex_code: str) -> typing.Union[None, Color]:
        # raises InvalidHexError for anything that isn't 6 hex digits
        key = self.clean_key(hex_code)
        rgb = hex_to_rgb(key)
        node = self.trie.get(key)
        if node is None:
            return None
        return Color(key, node.label, rgb)


INDEXES = {cls.mode: cls for cls in (WordIndex, ColorIndex)}


def load_index(options):
    backend = options.get("index_backend")
    if isinstance(backend, str):
        backend_import = backend.split(".")
        backend_module = ".".join(backend_import[:-1])
        backend_clsname = backend_import[-1]
        if backend_module == "":
            raise AssertionError(f"Unknown index backend provided '{backend}'")
        backend = getattr(importlib.import_module(backend_module), backend_clsname)
    elif backend is None:
        mode = options.get("mode") or WordIndex.mode
        if mode not in INDEXES:
            raise AssertionError(f"Unknown index mode provided '{mode}'")
        backend = INDEXES[mode]

    return backend()
