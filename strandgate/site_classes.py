"""Site and domain container classes"""
from .utils import PrintObject


class Domain(PrintObject):
    """A named domain, possibly the Watson-Crick complement of that name."""
    def __init__(self, name, complemented=False):
        self.name = name
        self.complemented = complemented

    def complement(self):
        """Returns the same domain with its polarity flipped."""
        return Domain(self.name, not self.complemented)
    def __invert__(self):
        return self.complement()

    def __str__(self):
        if self.complemented:
            return self.name + "*"
        return self.name


class Site(PrintObject):
    """A binding position on a strand: a domain and an optional binding name.

    Two sites with the same binding are hybridized to each other.
    """
    def __init__(self, domain, binding=None):
        self.domain = domain
        self.binding = binding

    def complement(self):
        """Complement the domain, keep the binding."""
        return Site(self.domain.complement(), self.binding)

    def with_binding(self, binding):
        return Site(self.domain, binding)

    def __str__(self):
        if self.binding is None:
            return str(self.domain)
        return "%s!%s" % (self.domain, self.binding)


class Toehold(PrintObject):
    """A toehold declaration. Opaque to the melting pass."""
    def __init__(self, name):
        self.name = name
    def __str__(self):
        return "toehold %s" % self.name


class Nick(PrintObject):
    """A nicking enzyme directive, nick(left, right). Passed through untouched."""
    def __init__(self, left, right):
        self.left = tuple(left)
        self.right = tuple(right)
    def __str__(self):
        return "nick(%s, %s)" % (" ".join(map(str, self.left)),
                                 " ".join(map(str, self.right)))


def reverse(strand):
    """Reverse the order of the sites of a strand."""
    return tuple(reversed(strand))

def complement(strand):
    """Returns the sites of strand with every domain complemented, in the same order."""
    return tuple(site.complement() for site in strand)
