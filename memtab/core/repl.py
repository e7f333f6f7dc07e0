"""
REPL - Interactive command shell for memtab

Reads one command per line and prints each command's output. A line that
is exactly `exit` (or end of input) ends the session.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from .interpreter import CommandInterpreter

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


class REPL:
    """
    Interactive REPL (Read-Eval-Print Loop) for memtab.

    Every line other than `exit` is handed to the interpreter unchanged.
    """

    BANNER = "memtab in-memory database. Type 'exit' to quit."
    PROMPT = ">> "

    def __init__(self, interpreter: Optional[CommandInterpreter] = None,
                 stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        """Initialize REPL with an interpreter and its streams."""
        self.interpreter = interpreter if interpreter is not None else CommandInterpreter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.running = False
        self.failures = 0

    def run(self, show_banner: bool = True) -> None:
        """Start the REPL loop."""
        self.running = True
        if show_banner:
            self._write(self.BANNER)

        while self.running:
            self.stdout.write(self.PROMPT)
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                self._write("")
                self.running = False
                break
            self.feed(line.rstrip("\r\n"))

    def run_lines(self, lines: Iterable[str]) -> int:
        """Run lines without prompting; returns how many commands failed."""
        self.running = True
        for line in lines:
            if not self.running:
                break
            self.feed(line.rstrip("\r\n"))
        self.running = False
        return self.failures

    def feed(self, line: str) -> None:
        """Handle one input line."""
        if line == EXIT_COMMAND:
            self.running = False
            return

        result = self.interpreter.execute(line)
        if not result.ok:
            self.failures += 1
        self._write(result.render())

    def _write(self, text: str) -> None:
        self.stdout.write(text + "\n")


def main(argv=None):
    """Entry point for the REPL."""
    import argparse

    parser = argparse.ArgumentParser(
        description="memtab - an in-memory record store driven by a small command language"
    )
    parser.add_argument(
        '-e', '--execute',
        help='Execute one command and exit'
    )
    parser.add_argument(
        '-f', '--file',
        help='Execute commands from file, one per line, and exit'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug output to stderr'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Execute single command
    if args.execute:
        result = CommandInterpreter().execute(args.execute)
        print(result.render())
        if not result.ok:
            sys.exit(1)
        return

    # Execute from file
    if args.file:
        try:
            with open(args.file, 'r') as f:
                failures = REPL().run_lines(f)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        logger.debug("%s finished with %d failed command(s)", args.file, failures)
        if failures:
            sys.exit(1)
        return

    # Start interactive REPL
    repl = REPL()
    repl.run()


if __name__ == '__main__':
    main()
