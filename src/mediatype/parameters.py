"""Case-insensitive, insertion-ordered mapping for media type parameters.

Parameter names of a media type are case-insensitive (``charset`` and
``Charset`` name the same parameter) but the casing a caller first used
is kept for rendering. :class:`CaseInsensitiveOrderedDict` stores each
entry under its folded key together with the first-seen original key,
so lookups ignore case while iteration and ``repr`` show the original
spelling in first-insertion order.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any, Dict, Iterable, Iterator, Tuple, Union


def _fold(key: str) -> str:
    return key.lower()


class CaseInsensitiveOrderedDict(MutableMapping):
    """Mapping of ``str`` to ``str`` with case-insensitive keys.

    Overwriting an existing key replaces its value in place: the entry
    keeps its position and the casing of the key that created it.

    Two instances compare equal when they hold the same
    (case-insensitive key, value) pairs, regardless of order. Values are
    compared case-sensitively.

    :param data: Optional mapping or iterable of ``(key, value)`` pairs
    :type data: Union[Mapping[str, str], Iterable[Tuple[str, str]], None]
    """

    def __init__(
        self,
        data: Union[Mapping, Iterable[Tuple[str, str]], None] = None,
    ) -> None:
        self._store: Dict[str, Tuple[str, str]] = {}
        if data is not None:
            self.update(data)

    def __setitem__(self, key: str, value: str) -> None:
        folded = _fold(key)
        existing = self._store.get(folded)
        if existing is not None:
            self._store[folded] = (existing[0], value)
        else:
            self._store[folded] = (key, value)

    def __getitem__(self, key: str) -> str:
        return self._store[_fold(key)][1]

    def __delitem__(self, key: str) -> None:
        del self._store[_fold(key)]

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._store.values())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: Any) -> bool:
        if not isinstance(key, str):
            return False
        return _fold(key) in self._store

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CaseInsensitiveOrderedDict):
            return dict(self.lower_items()) == dict(other.lower_items())
        if isinstance(other, Mapping):
            return dict(self.lower_items()) == dict(
                (_fold(k), v) for k, v in other.items()
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def lower_items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over ``(folded_key, value)`` pairs in insertion order."""
        return ((folded, value) for folded, (_, value) in self._store.items())

    def copy(self) -> "CaseInsensitiveOrderedDict":
        """Return an independent copy keeping order and key casing."""
        clone = CaseInsensitiveOrderedDict()
        clone._store = dict(self._store)
        return clone

    def __repr__(self) -> str:
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._store.values())
        return f"{self.__class__.__name__}({{{inner}}})"
