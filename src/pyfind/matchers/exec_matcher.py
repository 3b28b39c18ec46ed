"""The -exec and -execdir actions."""

import logging
import os
import subprocess
from typing import List, Optional, Sequence

from pyfind.file_system_tree.file_system_node import FileSystemNode
from pyfind.types import OutputSink

from .base_matcher import Matcher

logger = logging.getLogger(__name__)

PLACEHOLDER = "{}"


class SingleExecMatcher(Matcher):
    """Runs a command once per entry and matches if the command succeeds.

    Every occurrence of ``{}`` in the arguments is replaced with the entry's path.
    With ``exec_in_parent_dir`` (``-execdir``) the command runs in the directory
    containing the entry and ``{}`` becomes ``./<name>`` instead.

    The command runs synchronously and inherits the standard streams. Anything
    printed earlier by the expression is flushed first so output stays in order.
    A command that exits with a non-zero status, or cannot be started at all,
    makes the matcher return False.

    Attributes:
        executable (str): The command to run.
        args (List[str]): Its arguments, possibly containing ``{}``.
        exec_in_parent_dir (bool): Run in the entry's directory.
    """

    def __init__(
        self,
        executable: str,
        args: Sequence[str],
        exec_in_parent_dir: bool = False,
        output: Optional[OutputSink] = None,
    ) -> None:
        """Initialize a SingleExecMatcher.

        Args:
            executable: The command to run, looked up on PATH if it has no slash.
            args: Arguments passed to the command.
            exec_in_parent_dir: Run the command in the entry's parent directory.
            output: The shared output sink, flushed before the command runs if it
                supports flushing.
        """
        self.executable = executable
        self.args: List[str] = list(args)
        self.exec_in_parent_dir = exec_in_parent_dir
        self.output = output

    def matches(self, entry: FileSystemNode) -> bool:
        if self.exec_in_parent_dir:
            cwd: Optional[str] = os.path.dirname(entry.file_path) or "."
            path = f"./{entry.name}"
        else:
            cwd = None
            path = entry.file_path

        command = [self.executable] + [arg.replace(PLACEHOLDER, path) for arg in self.args]

        flush = getattr(self.output, "flush", None)
        if callable(flush):
            flush()

        try:
            completed = subprocess.run(command, cwd=cwd, check=False)
        except OSError as e:
            logger.warning("Failed to run '%s': %s", self.executable, e.strerror or e)
            return False
        return completed.returncode == 0

    def has_side_effects(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"SingleExecMatcher({self.executable!r}, {self.args!r}, exec_in_parent_dir={self.exec_in_parent_dir})"
