"""Iterators over the elements of a sparse Oracle collection.

A collection here is any object with ``first_index()``, ``last_index()``,
``next_index(index)``, ``prev_index(index)`` and ``get(index)`` methods,
where the index methods raise :class:`NoDataFoundError` when there is no
such index. Each iterator walks forward with ``next()`` and backward with
``next_back()``; once exhausted in a direction it stays exhausted.
"""

from __future__ import annotations

from oratypes.errors import NoDataFoundError

_BEGIN = object()
_END = object()


class _CollectionCursor:
    """Shared stepping logic over the collection's indices."""

    def __init__(self, collection):
        self._collection = collection
        self._state = _BEGIN

    def __iter__(self):
        return self

    def _forward_state(self):
        state = self._state
        if state is _END:
            return _END
        try:
            if state is _BEGIN:
                return self._collection.first_index()
            return self._collection.next_index(state)
        except NoDataFoundError:
            return _END

    def _backward_state(self):
        state = self._state
        if state is _BEGIN:
            return _BEGIN
        try:
            if state is _END:
                return self._collection.last_index()
            return self._collection.prev_index(state)
        except NoDataFoundError:
            return _BEGIN

    def _produce(self, index):
        raise NotImplementedError

    def _step(self, new_state):
        if new_state is _BEGIN or new_state is _END:
            self._state = new_state
            raise StopIteration
        result = self._produce(new_state)
        self._state = new_state
        return result

    def __next__(self):
        return self._step(self._forward_state())

    def next_back(self):
        """Return the previous element, raising StopIteration before the first."""
        return self._step(self._backward_state())


class CollectionIndices(_CollectionCursor):
    """Iterates over the indices that hold elements."""

    def __init__(self, collection):
        super().__init__(collection)

    def __iter__(self):
        return self

    def _produce(self, index):
        return index

    def __next__(self):
        return super().__next__()

    def next_back(self):
        """Return the previous index, raising StopIteration before the first."""
        return super().next_back()


class CollectionValues(_CollectionCursor):
    """Iterates over the element values."""

    def __init__(self, collection):
        super().__init__(collection)

    def __iter__(self):
        return self

    def _produce(self, index):
        return self._collection.get(index)

    def __next__(self):
        return super().__next__()

    def next_back(self):
        """Return the previous value, raising StopIteration before the first."""
        return super().next_back()


class CollectionItems(_CollectionCursor):
    """Iterates over ``(index, value)`` pairs."""

    def __init__(self, collection):
        super().__init__(collection)

    def __iter__(self):
        return self

    def _produce(self, index):
        return index, self._collection.get(index)

    def __next__(self):
        return super().__next__()

    def next_back(self):
        """Return the previous pair, raising StopIteration before the first."""
        return super().next_back()