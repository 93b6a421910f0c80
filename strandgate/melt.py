"""Melt gates into plain strands.

Every double-stranded region of a gate gets a synthesized complementary
strand, and the segments are then followed along their joins until each
physical strand is traced from end to end. The result is the flat list of
strands the reaction enumerator works with.
"""
from .bindings import BindingAllocator
from .gate_classes import (HairpinLeft, Middle, HairpinRight,
                           Singleton, JoinLower, JoinUpper, Strand, Gate)
from .site_classes import reverse
from .utils import PrintObject


class UnsupportedCircularStructure(Exception):
    """For when a join would close a strand into a ring."""


def melt_double(strand, bindings):
    """Split a double-stranded region into its upper and lower strands.

    Each site of the upper strand gets a fresh binding. The lower strand is
    the complement of the upper one read in the opposite direction, so
    upper[i] is bound to lower[-1 - i].
    """
    upper = tuple(site.with_binding(bindings.allocate()) for site in strand)
    lower = tuple(site.complement() for site in reversed(upper))
    return upper, lower


## Views
class One(PrintObject):
    """Both open ends of the structure belong to one strand."""
    def __init__(self, strand):
        self.strand = strand

class Two(PrintObject):
    """The structure is still open: an upper and a lower strand."""
    def __init__(self, upper, lower):
        self.upper = upper
        self.lower = lower

def finalize(view):
    """Returns the strands of an open view, upper before lower."""
    if isinstance(view, One):
        return [view.strand]
    return [view.upper, view.lower]


def view_segment(segment, bindings):
    """Trace the strands of one segment."""
    if not isinstance(segment, (HairpinLeft, Middle, HairpinRight)):
        raise TypeError("Not a segment: %r" % (segment,))
    upper, lower = melt_double(segment.middle, bindings)
    if isinstance(segment, HairpinLeft):
        return One(reverse(segment.lower_right) + reverse(lower) + segment.loop
                   + upper + segment.upper_right)
    elif isinstance(segment, Middle):
        return Two(segment.upper_left + upper + segment.upper_right,
                   reverse(segment.lower_right) + lower + reverse(segment.lower_left))
    else:
        return One(segment.upper_left + upper + reverse(segment.loop)
                   + lower + reverse(segment.lower_left))


def _join_lower(left, right):
    """Fuse two views along the lower strand. Returns the view and the strand sealed off, if any."""
    if isinstance(left, One) and isinstance(right, Two):
        return Two(right.upper, right.lower + left.strand), None
    elif isinstance(left, Two) and isinstance(right, One):
        return One(right.strand + left.lower), left.upper
    else:
        return Two(right.upper, right.lower + left.lower), left.upper

def _join_upper(left, right):
    """Fuse two views along the upper strand."""
    if isinstance(left, One) and isinstance(right, Two):
        return Two(left.strand + right.upper, right.lower), None
    elif isinstance(left, Two) and isinstance(right, One):
        return One(left.upper + right.strand), left.lower
    else:
        return Two(left.upper + right.upper, right.lower), left.lower

def _join(gate, left, right):
    if isinstance(left, One) and isinstance(right, One):
        edge = "lower" if isinstance(gate, JoinLower) else "upper"
        raise UnsupportedCircularStructure(
            "Joining two closed segments along the %s strand would make a circular strand, "
            "which is not supported" % edge)
    if isinstance(gate, JoinLower):
        return _join_lower(left, right)
    return _join_upper(left, right)


def view(gate, bindings):
    """Fold a gate into its open view and the list of strands sealed so far.

    The left subtree is folded before the right one. A strand is sealed when
    its end has nothing left to attach to; the sealed list holds the newest
    seal first, then the seals of the left and right subtrees.

    The tree is walked with an explicit stack, so long chains of segments
    do not hit the recursion limit.
    """
    folded = []
    stack = [(gate, False)]
    while stack:
        node, children_done = stack.pop()
        if isinstance(node, Singleton):
            folded.append((view_segment(node.segment, bindings), []))
        elif not isinstance(node, (JoinLower, JoinUpper)):
            raise TypeError("Not a gate: %r" % (node,))
        elif not children_done:
            # Popped in order: left subtree, right subtree, then the join
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))
        else:
            right, right_sealed = folded.pop()
            left, left_sealed = folded.pop()
            fused, seal = _join(node, left, right)
            sealed = left_sealed + right_sealed
            if seal is not None:
                sealed = [seal] + sealed
            folded.append((fused, sealed))
    return folded.pop()


def melt(gate, bindings):
    """Returns all strands of gate: the sealed ones, then the open view."""
    v, sealed = view(gate, bindings)
    return sealed + finalize(v)


## Species and complexes
def to_basic_species(species, bindings):
    if isinstance(species, Strand):
        return [species.sites]
    elif isinstance(species, Gate):
        return melt(species.tree, bindings)
    raise TypeError("Not a species: %r" % (species,))

def to_basic_complexes(complexes, bindings):
    """Replace every species of every complex by its plain strands, keeping multiplicities."""
    basic = []
    for count, species in complexes:
        strands = []
        for s in species:
            strands.extend(to_basic_species(s, bindings))
        basic.append((count, strands))
    return basic

def to_basic(model, bindings=None):
    """Melt every gate of a (toeholds, complexes) model.

    Args:
        model: A (toeholds, complexes) pair as returned by gate_parser.parse
        bindings: The BindingAllocator of this run. (Default: a new one)
    Returns:
        A (toeholds, complexes) pair where every complex holds plain strands.
    """
    if bindings is None:
        bindings = BindingAllocator()
    toeholds, complexes = model
    return toeholds, to_basic_complexes(complexes, bindings)
