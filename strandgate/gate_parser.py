"""Gate notation grammar with pyparsing"""
import re

from pyparsing import (Empty, FollowedBy, Group, Keyword, Literal, OneOrMore,
                       Optional, Regex, StringEnd, Suppress, Word, ZeroOrMore,
                       nums, python_style_comment)

from .gate_classes import (HairpinLeft, Middle, HairpinRight, Singleton,
                           JoinLower, JoinUpper, Strand, Gate)
from .melt import to_basic
from .site_classes import Domain, Site, Toehold, Nick, reverse

## Some globals
# Pyparsing shortcuts
K = Keyword
S = Suppress
O = Optional

def List(expr, delim=""):
    """My delimited list. Allows for length zero list and uses no delimiter by default."""
    if not delim:
        return Group(ZeroOrMore(expr))
    else:
        return Group(Optional(expr + ZeroOrMore(Suppress(delim) + expr)))

def Separated(expr, delim):
    """Delimited list of at least one expr, as a Python list token."""
    p = Group(expr + ZeroOrMore(Suppress(delim) + expr))
    p.set_parse_action(lambda t: [list(t[0])])
    return p

def bracket(open_, close, expr):
    return S(open_) + expr + S(close)


toehold = "toehold"
enzymes = "enzymes"
nick = "nick"

# Names and user bindings. Fresh bindings start with "_" so they can never be
# written by hand. Sites and domains must be followed by whitespace or
# a closing bracket, so "<a*b>" is rejected rather than read as two sites.
name_re = r"[A-Za-z][A-Za-z0-9_]*"
site_re = re.compile(r"(%s)(\*?)(?:!([A-Za-z0-9]+))?\Z" % name_re)

def make_domain(text):
    return Domain(text.rstrip("*"), text.endswith("*"))

def make_site(text):
    name, star, binding = site_re.match(text).groups()
    return Site(Domain(name, bool(star)), binding)


## Define Grammar
var = Regex(name_re)
integer = Word(nums).set_parse_action(lambda t: [int(t[0])])

domain = Regex(name_re + r"\*?(?=[\s,)])").set_parse_action(lambda t: [make_domain(t[0])])
site = Regex(name_re + r"\*?(?:![A-Za-z0-9]+)?(?=[\s>}\]])").set_parse_action(lambda t: [make_site(t[0])])

# A run of sites becomes one strand token (a tuple of sites)
sites = Group(OneOrMore(site)).set_parse_action(lambda t: [tuple(t[0])])

upper = bracket("<", ">", sites)
lower = bracket("{", "}", sites)
double = bracket("[", "]", sites)
left_hp = bracket("<", "}", sites)
right_hp = bracket("{", ">", sites)

# Overhangs become one (upper, lower) token
overhangs = ( (upper + lower).set_parse_action(lambda t: [(t[0], t[1])]) |
              (lower + upper).set_parse_action(lambda t: [(t[1], t[0])]) |
              upper.copy().add_parse_action(lambda t: [(t[0], ())]) |
              lower.copy().add_parse_action(lambda t: [((), t[0])]) |
              Empty().set_parse_action(lambda t: [((), ())]) )

# <loop} [middle] <upper}{lower}
hpl = (left_hp + double + overhangs).set_parse_action(
    lambda t: [Singleton(HairpinLeft(t[0], t[1], upper_right=t[2][0], lower_right=t[2][1]))])
# <upper>{lower} [middle] <upper>{lower}
m = (overhangs + double + overhangs).set_parse_action(
    lambda t: [Singleton(Middle(t[1], upper_left=t[0][0], lower_left=t[0][1],
                                upper_right=t[2][0], lower_right=t[2][1]))])
# <upper>{lower} [middle] {loop>
hpr = (overhangs + double + right_hp).set_parse_action(
    lambda t: [Singleton(HairpinRight(t[2], t[1], upper_left=t[0][0], lower_left=t[0][1]))])
# A right hairpin also reads as a middle segment up to its loop, so try it first.
segment = hpl | hpr | m

connect_upper = Literal("::").set_parse_action(lambda t: [JoinUpper])
connect_lower = Literal(":").set_parse_action(lambda t: [JoinLower])
connect = connect_upper | connect_lower

def join_segments(t):
    """Fold segment (connect segment)* to the left."""
    tokens = list(t)
    tree = tokens[0]
    for join, right in zip(tokens[1::2], tokens[2::2]):
        tree = join(tree, right)
    return [Gate(tree)]

gate = (segment + ZeroOrMore(connect + segment)).set_parse_action(join_segments)
strand = ( upper.copy().add_parse_action(lambda t: [Strand(t[0])]) |
           lower.copy().add_parse_action(lambda t: [Strand(reverse(t[0]))]) )
species = gate | strand

# Species of one complex, separated by |
strands = Separated(species, "|")

# [2] [ <species> | <species> ]
complex_ = (O(integer, default=1) + bracket("[", "]", strands)).set_parse_action(lambda t: [(t[0], t[1])])
complex_.add_condition(lambda t: t[0][0] > 0, message="Complex multiplicity must be positive")
complexes = Separated(complex_, "|")

# A bare list of species is one complex
single_complex = (strands + FollowedBy(StringEnd())).set_parse_action(lambda t: [[(1, t[0])]])
species_section = single_complex | complexes

toehold_stat = (S(K(toehold)) + var).set_parse_action(lambda t: [Toehold(t[0])])
toeholds = List(toehold_stat).set_parse_action(lambda t: [list(t[0])])

# enzymes [ nick(a b, c d); ... ]
domains = Group(OneOrMore(domain)).set_parse_action(lambda t: [tuple(t[0])])
nick_stat = (S(K(nick)) + bracket("(", ")", domains + S(",") + domains)).set_parse_action(
    lambda t: [Nick(t[0], t[1])])
enzymes_stat = (S(K(enzymes)) + bracket("[", "]", Group(ZeroOrMore(nick_stat + S(";")) + O(nick_stat)))
                ).set_parse_action(lambda t: [list(t[0])])

document = toeholds + species_section + StringEnd()
document.ignore(python_style_comment)

enzymes_document = O(enzymes_stat, default=()) + document
enzymes_document.ignore(python_style_comment)


def parse_species(text):
    """Parse a single strand or gate."""
    return (species + StringEnd()).parse_string(text, parse_all=True)[0]

def parse(text):
    """Parse a document into a (toeholds, complexes) model with gates intact."""
    ts, cs = document.parse_string(text, parse_all=True)
    return ts, cs

def parse_basic(text, bindings=None):
    """Parse a document and melt its gates into plain strands."""
    return to_basic(parse(text), bindings)

def parse_enzymes(text, bindings=None):
    """Parse a document with an optional leading enzymes block.

    Returns:
        A (nicks, model) pair, the model already melted into plain strands.
    """
    es, ts, cs = enzymes_document.parse_string(text, parse_all=True)
    return list(es), to_basic((ts, cs), bindings)
