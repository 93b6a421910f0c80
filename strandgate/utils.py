"""Useful classes and functions."""

import os
import sys

# For debugging and unittests, set to True to raise an exception on error
# instead of sys.exit(1). Also turned on by STRANDGATE_DEBUG=1.
DEBUG = os.environ.get("STRANDGATE_DEBUG", "") not in ("", "0")


def print_linenums(text, file=None):
    """Print text with line numbers prepended. Start counting at line 1 to fit with pyparsings line numberings"""
    if file is None:
        file = sys.stdout
    for n, line in enumerate(text.split("\n")):
        print("%3d:%s" % (n + 1, line), file=file)


## ANSI Colors
red_tag = "\033[31;1m"   # ANSI color code for bold red
reset_tag = "\033[m"     # ANSI color code for reset color

def red(text):
    return red_tag + text + reset_tag


## Error messages
def error(text):
    """Print a formatted error message and exit."""
    if not DEBUG:
        sys.stderr.write(red("ERROR: %s\n" % text))
        sys.exit(1)
    else:
        raise Exception(red("ERROR: %s\n" % text))


## Generic Objects
class PrintObject(object):
    """Generic default-printable value object.

    Attributes are set once in __init__; two objects are equal when they
    have the same class and the same attribute values.
    """
    def __str__(self):
        attribs = ["%s=%r" % (name, value) for (name, value) in self.__dict__.items()]
        return "%s(%s)" % (self.__class__.__name__, ", ".join(attribs))
    __repr__ = __str__

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__
    def __ne__(self, other):
        return not self == other
    def __hash__(self):
        return hash((self.__class__.__name__,) + tuple(self.__dict__.values()))
