"""Signal-aware output sink used by the printing actions."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from pyfind.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes paths to a file descriptor, stopping once the reader has gone away.

    Output is unbuffered: each write goes straight to the descriptor, so it
    interleaves correctly with the output of commands run by ``-exec``. Text is
    encoded with the filesystem encoding, which round-trips file names that are
    not valid UTF-8.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     target = Path(tmpdir) / "out.txt"
        ...     with SafeWriter(target) as writer:
        ...         writer.write("./abbbc\\n")
        ...     target.read_text()
        './abbbc\\n'
    """

    def __init__(self, file: Union[int, str, os.PathLike]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor or a path to open for writing.

        Raises:
            TypeError: If ``file`` is neither.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._owns_fd = False
        elif isinstance(file, (str, os.PathLike)):
            self.fd = os.open(Path(file), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
            self._owns_fd = True
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write data, refusing to continue after SIGPIPE or SIGINT.

        Raises:
            BrokenPipeError: If a signal was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If the writer has been closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        encoded = os.fsencode(data)
        try:
            while encoded:
                written = os.write(self.fd, encoded)
                encoded = encoded[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError() from e
            raise

    def close(self) -> None:
        """Close the descriptor if this writer opened it. Closing twice is harmless."""
        if self._closed:
            return

        if self._owns_fd:
            try:
                os.close(self.fd)
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer; an exception from the with block takes priority over one from closing."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
