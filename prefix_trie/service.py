import typing

from tornado.web import Application

from prefix_trie import log
from prefix_trie.colors import Color
from prefix_trie.handlers import ColorHandler, KeysHandler, TreeHandler
from prefix_trie.index import ColorIndex, load_index
from prefix_trie.loaders import load_colors, load_words
from prefix_trie.trie import TrieNode


class TrieService:
    def __init__(self, options=()):
        super().__init__()
        self.options = options = dict(options)

        self.log = self.options.get("log")
        if not self.log:
            self.log = log

        self.index = load_index(self.options)
        self.language = self.options.get("language") or "en"
        self.auth_token = self.options.get("auth_token")

        dataset = self.options.get("dataset")
        if dataset:
            self.load(dataset)

        self.api_app = Application(
            [
                (r"^\/api\/keys(?:\/(.*))?$", KeysHandler, {"service": self}),
                (r"^\/api\/colors\/(.*)$", ColorHandler, {"service": self}),
                (r"^\/api\/tree\/?$", TreeHandler, {"service": self}),
            ]
        )

    @property
    def mode(self):
        return self.index.mode

    def load(self, path):
        # fill the index from a dataset file, raises DatasetError
        if isinstance(self.index, ColorIndex):
            load_colors(path, self.language, index=self.index)
        else:
            load_words(path, index=self.index)

    def add_key(self, key, label=None):
        self.log.info(f"Adding key {key!r}" + (f" -> {label}" if label is not None else ""))
        self.index.add(key, label)

    def remove_key(self, key) -> bool:
        removed = self.index.remove(key)
        if removed:
            self.log.info(f"Removed key {key!r}")
        else:
            self.log.debug(f"Key {key!r} not found, nothing removed")
        return removed

    def get_key(self, key) -> typing.Union[None, TrieNode]:
        return self.index.get(key)

    def has_prefix(self, prefix) -> bool:
        return self.index.has_prefix(prefix)

    def complete(self, prefix, limit=None):
        return self.index.complete(prefix, limit)

    def lookup_color(self, hex_code) -> typing.Union[None, Color]:
        # raises InvalidHexError
        if not isinstance(self.index, ColorIndex):
            raise AssertionError(f"Color lookups need a color index, not '{self.mode}'")
        return self.index.lookup(hex_code)

    def tree(self):
        return "\n".join(self.index.lines())
