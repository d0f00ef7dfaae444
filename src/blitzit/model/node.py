"""Reactive tree nodes with change notification, bubbling and freezing."""

from __future__ import annotations

from typing import Any, Callable, Iterable

Callback = Callable[["Node | ListNode", str, Any, Any], None]


class FrozenNodeError(AttributeError):
    """Raised when a frozen tree is written to outside a mutation."""


def _wrap(value: Any, parent: Node | ListNode, key: str) -> Any:
    """Auto-wrap dicts as Nodes. Reparent existing Nodes/ListNodes."""
    if isinstance(value, dict):
        return Node(_parent=parent, _key=key, **value)
    if isinstance(value, (Node, ListNode)):
        object.__setattr__(value, "_parent", parent)
        object.__setattr__(value, "_key", key)
    return value


def _emit(node: Node | ListNode, key: str, old: Any, new: Any) -> None:
    """Fire local watchers for key, then bubble up the parent chain."""
    for cb in list(node._watchers.get(key, ())):
        cb(node, key, old, new)
    child = node
    while child._parent is not None:
        parent = child._parent
        for cb in list(parent._watchers.get(child._key, ())):
            cb(node, key, old, new)
        child = parent


def root_of(node: Node | ListNode) -> Node | ListNode:
    """Walk the parent chain up to the root."""
    while node._parent is not None:
        node = node._parent
    return node


def _check_writable(node: Node | ListNode) -> None:
    if root_of(node)._frozen:
        raise FrozenNodeError(f"{node!r} is read-only outside a mutation")


def freeze(node: Node | ListNode, frozen: bool = True) -> None:
    """Mark a root node (and so its whole tree) frozen or writable."""
    object.__setattr__(node, "_frozen", frozen)


class Node:
    """Reactive dict-like tree node.

    Stores data in an internal dict, accessed via attribute syntax.
    Setting a value to None deletes the key. Dict values are
    auto-wrapped as child Nodes. Changes fire watchers and bubble
    up through the parent chain. Writes raise FrozenNodeError while
    the root of the tree is frozen.
    """

    def __init__(
        self,
        _parent: Node | ListNode | None = None,
        _key: str | None = None,
        **data: Any,
    ) -> None:
        object.__setattr__(self, "_children", {})
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_parent", None)
        object.__setattr__(self, "_key", _key)
        object.__setattr__(self, "_version", 0)
        object.__setattr__(self, "_frozen", False)
        for k, v in data.items():
            setattr(self, k, v)
        object.__setattr__(self, "_parent", _parent)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._children.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        _check_writable(self)
        old = self._children.get(name)
        if value is None:
            self._children.pop(name, None)
        else:
            value = _wrap(value, parent=self, key=name)
            self._children[name] = value
        if old != value:
            self._version += 1
            _emit(self, name, old, value)

    def __contains__(self, key: str) -> bool:
        return key in self._children

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch a key for changes. Returns an unwatch callable."""
        self._watchers.setdefault(key, []).append(callback)
        return lambda: self._watchers.get(key, []) and self._watchers[key].remove(callback)

    def keys(self):
        """Return children keys."""
        return self._children.keys()

    def items(self):
        """Return children items."""
        return self._children.items()

    def values(self):
        """Return children values."""
        return self._children.values()

    @property
    def path(self) -> str:
        """Dotted path from root to this node."""
        parts: list[str] = []
        current: Node | ListNode | None = self
        while current is not None and current._key is not None:
            parts.append(current._key)
            current = current._parent
        return ".".join(reversed(parts))

    def __repr__(self) -> str:
        p = self.path
        keys = ", ".join(self._children.keys())
        label = f"Node({p})" if p else "Node"
        return f"<{label} [{keys}]>"


class ListNode:
    """Ordered, id-keyed collection with change notification.

    Items are accessed by string id. Setting to None deletes.
    Dicts are auto-wrapped as Nodes. Changes fire watchers and
    bubble up through the parent chain. Reorders fire the "*" key.
    """

    def __init__(
        self,
        _parent: Node | None = None,
        _key: str | None = None,
    ) -> None:
        object.__setattr__(self, "_items", [])
        object.__setattr__(self, "_by_id", {})
        object.__setattr__(self, "_watchers", {})
        object.__setattr__(self, "_parent", _parent)
        object.__setattr__(self, "_key", _key)
        object.__setattr__(self, "_version", 0)
        object.__setattr__(self, "_frozen", False)

    def __getitem__(self, key: str) -> Any:
        return self._by_id.get(str(key))

    def index(self, key: str) -> int:
        """Position of key in the list, or -1 if absent."""
        key = str(key)
        for i, k in enumerate(self._by_id):
            if k == key:
                return i
        return -1

    def at(self, index: int) -> Any:
        """Item at index, or None when out of range. Negative indexes never wrap."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def __setitem__(self, key: str, value: Any) -> None:
        key = str(key)
        _check_writable(self)
        old = self._by_id.get(key)
        if value is None:
            if old is not None:
                idx = self.index(key)
                del self._items[idx]
                del self._by_id[key]
            self._version += 1
            _emit(self, key, old, None)
        else:
            value = _wrap(value, parent=self, key=key)
            if old is not None:
                idx = self.index(key)
                self._items[idx] = value
            else:
                self._items.append(value)
            self._by_id[key] = value
            if old != value:
                self._version += 1
                _emit(self, key, old, value)

    def insert(self, index: int, key: str, value: Any) -> None:
        """Insert a new item before index, like list.insert."""
        key = str(key)
        _check_writable(self)
        if key in self._by_id:
            self.pop(key)
        value = _wrap(value, parent=self, key=key)
        index = max(0, min(index, len(self._items)))
        self._items.insert(index, value)
        keys = list(self._by_id.keys())
        keys.insert(index, key)
        object.__setattr__(self, "_by_id", {k: self._by_id.get(k, value) for k in keys})
        self._version += 1
        _emit(self, key, None, value)

    def pop(self, key: str) -> Any:
        """Remove an item and return it, or None if absent."""
        old = self._by_id.get(str(key))
        if old is not None:
            self[key] = None
        return old

    def reorder(self, keys: Iterable[str]) -> None:
        """Rearrange items to follow keys, which must be a permutation."""
        new_keys = [str(k) for k in keys]
        old_keys = self.keys()
        if new_keys == old_keys:
            return
        if sorted(new_keys) != sorted(old_keys):
            raise KeyError("reorder keys must match the existing keys")
        _check_writable(self)
        new_by_id = {k: self._by_id[k] for k in new_keys}
        object.__setattr__(self, "_by_id", new_by_id)
        object.__setattr__(self, "_items", list(new_by_id.values()))
        self._version += 1
        _emit(self, "*", old_keys, new_keys)

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: str) -> bool:
        return str(key) in self._by_id

    def watch(self, key: str, callback: Callback) -> Callable[[], None]:
        """Watch an item id for changes. Returns an unwatch callable."""
        key = str(key)
        self._watchers.setdefault(key, []).append(callback)
        return lambda: self._watchers.get(key, []) and self._watchers[key].remove(callback)

    @property
    def path(self) -> str:
        """Dotted path from root to this node."""
        parts: list[str] = []
        current: Node | ListNode | None = self
        while current is not None and current._key is not None:
            parts.append(current._key)
            current = current._parent
        return ".".join(reversed(parts))

    def keys(self):
        """Return ordered keys."""
        return list(self._by_id.keys())

    def items(self):
        """Return ordered (key, value) pairs."""
        return list(zip(self._by_id.keys(), self._items))

    def __repr__(self) -> str:
        p = self.path
        ids = ", ".join(self._by_id.keys())
        label = f"ListNode({p})" if p else "ListNode"
        return f"<{label} [{ids}]>"
