from .bindings import BindingAllocator
from .melt import melt, to_basic, UnsupportedCircularStructure
from .gate_parser import parse, parse_basic, parse_enzymes, parse_species

__version__ = '0.1a'
