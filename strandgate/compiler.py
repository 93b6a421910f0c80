#!/usr/bin/env python
"""Melt the gates of a strand-notation file into plain strands."""

import argparse
import os
import sys

from pyparsing import ParseBaseException

from . import gate_parser, utils
from .bindings import BindingAllocator
from .melt import UnsupportedCircularStructure
from .writer import format_model


def load_file(filename, enzymes=False, bindings=None):
    """Parse and melt a file.

    Returns:
        A (nicks, model) pair; nicks is empty unless enzymes is set.
    """
    if not os.path.isfile(filename):
        utils.error("Cannot melt. No such file '%s'." % filename)
    with open(filename) as f:
        doc = f.read()

    if bindings is None:
        bindings = BindingAllocator()
    try:
        if enzymes:
            return gate_parser.parse_enzymes(doc, bindings)
        return [], gate_parser.parse_basic(doc, bindings)
    except ParseBaseException as e:
        utils.print_linenums(doc, file=sys.stderr)
        print("Parsing error in:", filename, file=sys.stderr)
        utils.error(str(e))
    except UnsupportedCircularStructure as e:
        utils.error("%s: %s" % (filename, e))


def compiler(filename, outputname=None, enzymes=False, quiet=False):
    """Melt filename and write the plain strand model to outputname (Default: stdout)."""
    if outputname is None:
        quiet = True
    if not quiet:
        print("Melting '%s' ..." % filename)
    bindings = BindingAllocator()
    nicks, model = load_file(filename, enzymes, bindings)
    text = format_model(model, nicks)

    if outputname is None:
        sys.stdout.write(text)
    else:
        with open(outputname, "w") as outfile:
            outfile.write(text)
    if not quiet:
        toeholds, complexes = model
        n_strands = sum(len(strands) for count, strands in complexes)
        print("%d complexes, %d strands, %d bindings made" % (len(complexes), n_strands, bindings.allocated))
        print("Melted model written into '%s'" % outputname)
    return model


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Melt junction gates into the plain strands they are made of.")
    parser.add_argument("input", metavar="INPUT", help="Strand notation file")
    parser.add_argument("-o", "--output", metavar="FILE", default=None,
                        help="Output file [defaults to standard output]")
    parser.add_argument("--enzymes", action="store_true",
                        help="Allow a leading enzymes [ nick(...); ... ] block")
    parser.add_argument("--debug", action="store_true",
                        help="Raise exceptions instead of exiting on error")
    parser.add_argument("-q", "--quiet", action="store_true", help="Print nothing but errors")
    args = parser.parse_args(argv)

    if args.debug:
        utils.DEBUG = True
    compiler(args.input, args.output, args.enzymes, args.quiet)


if __name__ == "__main__":
    main()
