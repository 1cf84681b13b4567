import sys
import typing


class TrieNode:
    def __init__(self):
        self.children: typing.Dict[str, TrieNode] = {}
        self.is_terminal = False
        self.count = 0
        self.label = None

    def mark(self, label=None):
        # first insertion makes the node terminal, later ones only count
        if self.is_terminal:
            self.count += 1
            return
        self.is_terminal = True
        self.count = 1
        self.label = label

    def unmark(self):
        self.is_terminal = False
        self.count = 0
        self.label = None

    def __repr__(self):
        return f"<TrieNode terminal={self.is_terminal} count={self.count} label={self.label!r}>"


class Trie:
    """Character trie with per-key occurrence counts and an optional label.

    Usage:

        trie = Trie()
        trie.insert("hello")
        trie.insert("ff0000", "Red")

        trie.search("hello")     => True
        trie.search("hell")      => False
        trie.starts_with("hell") => True
        trie.get("ff0000").label => "Red"

    The tree never keeps a node that is neither terminal nor the parent of
    another node (the root excepted): `delete` prunes such nodes on the way
    back up.
    """

    def __init__(self):
        self.root = TrieNode()
        self.size = 0

    def insert(self, key, label=None):
        node = self.root
        for ch in key:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            self.size += 1
        node.mark(label)

    def search(self, key) -> bool:
        node = self._walk(key)
        return node is not None and node.is_terminal

    def starts_with(self, prefix) -> bool:
        return self._walk(prefix) is not None

    def get(self, key) -> typing.Union[None, TrieNode]:
        # return the terminal node for key, otherwise None
        node = self._walk(key)
        if node is None or not node.is_terminal:
            return None
        return node

    def delete(self, key) -> bool:
        # remove `key` from the trie, returns whether it was there
        path: typing.List[typing.Tuple[TrieNode, str]] = []
        node = self.root
        for ch in key:
            child = node.children.get(ch)
            if child is None:
                # path breaks here, consider it already removed
                return False
            path.append((node, ch))
            node = child
        if not node.is_terminal:
            # only a path to longer keys, nothing to delete
            return False

        node.unmark()
        self.size -= 1
        # prune nodes that are no longer terminal and lead nowhere
        while path and not node.is_terminal and not node.children:
            parent, ch = path.pop()
            del parent.children[ch]
            node = parent
        return True

    def _walk(self, key) -> typing.Union[None, TrieNode]:
        node = self.root
        for ch in key:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def items(self, prefix=""):
        # yield (key, node) for every terminal node below prefix, sorted by key
        start = self._walk(prefix)
        if start is None:
            return
        stack = [(prefix, start)]
        while stack:
            key, node = stack.pop()
            if node.is_terminal:
                yield key, node
            for ch in sorted(node.children, reverse=True):
                stack.append((key + ch, node.children[ch]))

    def keys(self, prefix=""):
        for key, _ in self.items(prefix):
            yield key

    def lines(self):
        """Render the trie as a tree, one line at a time.

        Every child edge gets a connector line with its character and every
        terminal node an ``END`` line with its count (and label, if any):

            └── h
                ├── e
                │   └── l
                │       └── l
                │           ├── END (1)
                │           └── o
                │               └── END (2)
                └── i
                    └── END (1)
        """
        yield from self._lines(self.root, "")

    def _lines(self, node, indent):
        # explicit stack of pending lines and (node, indent) pairs
        stack = [(node, indent)]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                yield item
                continue
            node, indent = item
            children = sorted(node.children)
            pending = []
            if node.is_terminal:
                connector = "├── " if children else "└── "
                marker = f"END ({node.count})"
                if node.label is not None:
                    marker += f" {node.label}"
                pending.append(indent + connector + marker)

            for i, ch in enumerate(children):
                last = i == len(children) - 1
                pending.append(indent + ("└── " if last else "├── ") + ch)
                pending.append((node.children[ch], indent + ("    " if last else "│   ")))
            stack.extend(reversed(pending))

    def print(self, file=None):
        file = file or sys.stdout
        for line in self.lines():
            file.write(line + "\n")

    def __len__(self):
        return self.size

    def __contains__(self, key):
        return self.search(key)

    def __iter__(self):
        return self.keys()
