import importlib
import os
import re
import subprocess
from typing import Iterable, List, Optional

from pfhardening import constants


class ExecutionFailed(Exception):

    """An external command exited non-zero or could not be started"""

    def __init__(self, cmd: List[str], returncode: Optional[int] = None) -> None:
        self.cmd = cmd
        self.returncode = returncode
        super().__init__(
            "Execution failed: %s (exit status %s)"
            % (subprocess.list2cmdline(cmd), returncode)
        )


def _load_class(classname):
    """ Import a class from a dotted path """
    (module_name, class_name) = classname.rsplit(".", 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def is_privileged() -> bool:
    """ Are we running as root? """
    return os.geteuid() == 0


def anchor_reference(name: str) -> str:
    """ Text whose presence in the main config marks the anchor as wired in """
    return constants.INCLUDE_ANCHOR % {"name": name}


def include_block(name: str, path: str) -> str:
    """ The comment, declaration and load directive appended on install """
    values = {"name": name, "path": path}
    return "\n".join(
        [
            constants.INCLUDE_COMMENT % values,
            constants.INCLUDE_ANCHOR % values,
            constants.INCLUDE_LOAD % values,
        ]
    ) + "\n"


def include_patterns(name: str) -> List[str]:
    """ Regular expressions matching the lines of the include block """
    quoted = re.escape(name)
    return [
        r"# Load custom security rules from '%s' anchor" % quoted,
        r'anchor "%s"' % quoted,
        r'load anchor "%s" from .*' % quoted,
    ]


def remove_matching_lines(content: str, patterns: Iterable[str]) -> str:
    """Drop every line in which any of the patterns is found.

    Patterns are searched anywhere in the line, so a pattern deletes all
    lines containing it, not only the first one. Line endings of the
    remaining lines are left untouched.
    """
    compiled = [re.compile(pattern) for pattern in patterns]

    def matches(line: str) -> bool:
        return any(regex.search(line) for regex in compiled)

    lines = content.split("\n")
    # Text after the final newline (empty when the file ends with one)
    tail = lines.pop()
    kept = [line + "\n" for line in lines if not matches(line)]
    if tail and not matches(tail):
        kept.append(tail)
    return "".join(kept)
