"""Shared helpers for building and reading strands in tests."""
from ..site_classes import Domain, Site


def strand(text):
    """Build a strand from "a b*!x c!_0" notation, fresh bindings included."""
    sites = []
    for token in text.split():
        domain, _, binding = token.partition("!")
        sites.append(Site(Domain(domain.rstrip("*"), domain.endswith("*")), binding or None))
    return tuple(sites)

def show(strands):
    """Strands as a list of space separated site strings."""
    return [" ".join(str(site) for site in s) for s in strands]

def rename(strands):
    """Rename fresh bindings in order of first appearance."""
    names = {}
    renamed = []
    for s in strands:
        sites = []
        for site in s:
            if site.binding is not None and site.binding.startswith("_"):
                site = site.with_binding(names.setdefault(site.binding, "_%d" % len(names)))
            sites.append(site)
        renamed.append(tuple(sites))
    return renamed
