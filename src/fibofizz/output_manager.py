# output_manager.py

import os

from fibofizz.fmt import strip_ansi


def resolve_output_path(path: str) -> str:
    """
    Resolve user-provided output path.

    Rules:
    - '~' expanded to user home
    - Absolute paths unchanged
    - Relative paths are relative to the current directory
    """
    if not path:
        raise ValueError("Output path is empty")

    path = os.path.expanduser(path)
    return os.path.normpath(os.path.abspath(path))


class OutputManager:
    """
    Handles all printing/output, including to screen and/or file.

    Usage:
        om = OutputManager(output_file="runs/fizz.txt")
        om.write("Hello")   # prints and appends (ANSI stripped) to the file
        om.close()          # blank line between runs
    """

    def __init__(self, output_file: str | None = None, quiet: bool = False):
        """
        Parameters:
            output_file:
                None or ""       => screen only
                path/to/file.txt => append all runs to this file
            quiet: if True, no output to screen (only to file)
        """
        self.quiet = quiet
        self.output_file = output_file or ""
        self._wrote = False
        self._path: str | None = None
        self._closed = False

        if self.output_file:
            path = resolve_output_path(self.output_file)
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._path = path

    def write(self, *args, sep: str = " ", end: str = "\n") -> None:
        """Write to screen and file (if configured)."""
        text = sep.join(str(a) for a in args) + end
        self._wrote = True

        if not self.quiet:
            print(text, end="")

        if self._path:
            with open(self._path, "a", encoding="utf-8") as fh:
                fh.write(strip_ansi(text))

    def close(self) -> None:
        """Add a separator between runs in the output file."""
        if self._closed:
            return
        self._closed = True
        if self._path and self._wrote:
            with open(self._path, "a", encoding="utf-8") as fh:
                fh.write("\n")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False
