"""An indenting line writer for generated code."""

from __future__ import annotations


class GenWriter:
    """Collects lines of code, indenting nested blocks with a fixed prefix."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self._depth = 0
        self._lines: list[str] = []

    def _write(self, mesg: str, args: tuple) -> None:
        text = mesg % args if args else mesg
        self._lines.append(self.prefix * self._depth + text if text else "")

    def code(self) -> str:
        """Return everything written so far, one line per statement."""
        return "".join(line + "\n" for line in self._lines)

    def inc(self, mesg: str, *args) -> None:
        """Write a line, then indent the lines that follow."""
        self._write(mesg, args)
        self._depth += 1

    def dec(self, mesg: str, *args) -> None:
        """Outdent, then write a line unless the message is empty."""
        if self._depth > 0:
            self._depth -= 1
        if mesg:
            self._write(mesg, args)

    def put(self, mesg: str, *args) -> None:
        """Write a line at the current indentation."""
        self._write(mesg, args)