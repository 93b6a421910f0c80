"""Write melted models back out in strand notation."""


def format_strand(strand):
    return "<%s>" % " ".join(str(site) for site in strand)

def format_complex(count, strands):
    body = "[ %s ]" % " | ".join(format_strand(s) for s in strands)
    if count != 1:
        return "%d %s" % (count, body)
    return body

def format_enzymes(nicks):
    return "enzymes [ %s ]" % " ".join("%s;" % n for n in nicks)

def format_model(model, nicks=None):
    """Returns the text of a melted (toeholds, complexes) model.

    Toehold declarations come first, then the enzymes block if any nicks
    are given, then one complex per line.
    """
    toeholds, complexes = model
    lines = [str(t) for t in toeholds]
    if nicks:
        lines.append(format_enzymes(nicks))
    lines.extend(format_complex(count, strands) for count, strands in complexes)
    return "\n".join(lines) + "\n"
