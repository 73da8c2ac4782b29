from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


class TextView:
    """
    Read-only view over a byte buffer.

    The view borrows the caller's buffer through a ``memoryview`` cast to
    unsigned bytes, so building one never copies the data and indexing yields
    ints in ``0..255``. The underlying buffer must stay unchanged for as long as
    a search over the view is running.

    Args:
        data (bytes | bytearray | memoryview): Any C-contiguous buffer.

    Attributes:
        data (memoryview): Read-only, format ``B`` view of the buffer.
        length (int): Number of bytes in the view.
    """
    __slots__ = ("_data", "_length")

    def __init__(self, data: BytesLike):
        if isinstance(data, TextView):
            view = data.data
        else:
            view = memoryview(data)
            if view.format != "B" or view.ndim != 1:
                view = view.cast("B")
            view = view.toreadonly()
        self._data = view
        self._length = len(view)

    @property
    def data(self) -> memoryview:
        return self._data

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        return self._data[index]

    def tobytes(self) -> bytes:
        return self._data.tobytes()

    def __repr__(self) -> str:
        return f"TextView(length={self._length})"
