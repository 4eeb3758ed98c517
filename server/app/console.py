"""Line-oriented operator console over text streams."""

import sys
from typing import Optional, TextIO


class Console:
    """
    Reads single lines from the operator and writes status and diagnostic lines.

    Diagnostics go to the error stream, everything else to the output stream.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def read_line(self, prompt: str = "") -> str:
        """
        Print the prompt and read one line without its trailing newline.

        Raises:
            EOFError: If the input stream is exhausted.
        """
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def write(self, text: str = ""):
        print(text, file=self.stdout)

    def error(self, text: str):
        print(text, file=self.stderr)
