"""Gate description classes: segments, join trees and species.

A gate is drawn as a row of segments. Each segment has a double-stranded
core (`middle`, stored once, its partner is made when the gate is melted)
and single-stranded overhangs on the upper and lower strands. The ends of
a hairpin segment are closed by a loop. Neighbouring segments are fused
along their lower edge (`JoinLower`, written `:`) or upper edge
(`JoinUpper`, written `::`).
"""
from .utils import PrintObject


## Segments
class HairpinLeft(PrintObject):
    """A segment closed on its left by a hairpin loop."""
    def __init__(self, loop, middle, upper_right=(), lower_right=()):
        self.loop = tuple(loop)
        self.middle = tuple(middle)
        self.upper_right = tuple(upper_right)
        self.lower_right = tuple(lower_right)

class Middle(PrintObject):
    """A segment open on both sides."""
    def __init__(self, middle, upper_left=(), lower_left=(), upper_right=(), lower_right=()):
        self.upper_left = tuple(upper_left)
        self.lower_left = tuple(lower_left)
        self.middle = tuple(middle)
        self.upper_right = tuple(upper_right)
        self.lower_right = tuple(lower_right)

class HairpinRight(PrintObject):
    """A segment closed on its right by a hairpin loop."""
    def __init__(self, loop, middle, upper_left=(), lower_left=()):
        self.loop = tuple(loop)
        self.middle = tuple(middle)
        self.upper_left = tuple(upper_left)
        self.lower_left = tuple(lower_left)


## Join trees
class Singleton(PrintObject):
    def __init__(self, segment):
        self.segment = segment

class JoinLower(PrintObject):
    """Fuse left and right along the lower strand."""
    def __init__(self, left, right):
        self.left = left
        self.right = right

class JoinUpper(PrintObject):
    """Fuse left and right along the upper strand."""
    def __init__(self, left, right):
        self.left = left
        self.right = right


def segments(gate):
    """Returns the segments of gate from left to right."""
    found = []
    stack = [gate]
    while stack:
        node = stack.pop()
        if isinstance(node, Singleton):
            found.append(node.segment)
        else:
            stack.append(node.right)
            stack.append(node.left)
    return found


## Species
class Strand(PrintObject):
    """A plain single strand."""
    def __init__(self, sites):
        self.sites = tuple(sites)

class Gate(PrintObject):
    def __init__(self, tree):
        self.tree = tree
