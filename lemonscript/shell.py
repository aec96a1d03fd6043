# Author:   LemonScript developers
# Date:     10/19/2026

"""Read-eval-print loop for LemonScript. Uses cmd as backend, so readline
provides line editing and history when it is available.
"""

import cmd
from typing import Iterable, Optional

from termcolor import colored

from lemonscript import __version__
from lemonscript.grammar import LemonSyntaxError
from lemonscript.values import Error

RESULT_PREFIX = "=> "
ERROR = "red"


class Shell(cmd.Cmd):
    """LemonScript interpreter shell."""
    intro = f"LemonScript Version {__version__}\nPress Ctrl+c to Exit\n"
    prompt = "lemons> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess
        self.line_num = 0

    def cmdloop(self, intro=None):
        """Reads and evaluates lines until the input really ends.

        cmd.Cmd reports end of input as the line 'EOF', which is also a valid
        variable name, so lines are read here and end of input is None.
        """
        self.preloop()
        if self.use_rawinput:
            try:
                import readline  # noqa: F401  line editing and history for input()
            except ImportError:
                pass

        if intro is not None:
            self.intro = intro
        if self.intro:
            self.write(str(self.intro))

        stop = None
        while not stop:
            line = self.read_line()
            if line is None:
                stop = self.do_EOF("")
            else:
                stop = self.postcmd(self.onecmd(self.precmd(line)), line)
        self.postloop()

    def read_line(self) -> Optional[str]:
        """Returns the next input line, or None at end of input."""
        if self.use_rawinput:
            try:
                return input(self.prompt)
            except EOFError:
                return None

        self.stdout.write(self.prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def onecmd(self, line):
        # every line is LemonScript source, there are no shell commands
        return self.default(line)

    def default(self, line):
        """Evaluates one line and prints its value or a syntax error."""
        self.line_num += 1
        if not line.strip():
            return self.emptyline()

        try:
            value = self.sess.run(line, self.line_num)
        except LemonSyntaxError as e:
            self.write(self.highlight(e))
            return
        except RecursionError:
            self.write(colored("error: ", ERROR, attrs=["bold"]) + "expression is nested too deeply")
            return

        text = str(value)
        if isinstance(value, Error):
            text = colored(text, ERROR, attrs=["bold"])
        self.write(RESULT_PREFIX + text)

    def run_lines(self, lines: Iterable[str]) -> None:
        """Evaluates each line of a script in turn, as if typed at the prompt."""
        for line in lines:
            self.onecmd(line.rstrip("\n"))

    @staticmethod
    def highlight(error):
        """Colors the 'error:' label and caret of a syntax error."""
        lines = str(error).split("\n")
        lines[0] = lines[0].replace("error: ", colored("error: ", ERROR, attrs=["bold"]), 1)
        lines[-1] = colored(lines[-1], ERROR, attrs=["bold"])
        return "\n".join(lines)

    def write(self, text):
        self.stdout.write(text + "\n")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        if self.use_rawinput:
            self.stdout.write("\n")
        return True
