"""Fresh binding names for one melting run."""


class BindingAllocator(object):
    """Issues binding names that are unique within one run.

    User written bindings are alphanumeric, so a leading underscore puts
    every name issued here out of their reach. Pass the same allocator to
    every call of a run; a new allocator starts a new run.
    """
    prefix = "_"

    def __init__(self, start=0):
        self.next = start
        self.start = start

    def allocate(self):
        """Returns a binding name never returned before by this allocator."""
        binding = "%s%d" % (self.prefix, self.next)
        self.next += 1
        return binding

    def is_fresh(self, binding):
        """True if binding looks like a name issued by an allocator."""
        return binding is not None and binding.startswith(self.prefix)

    @property
    def allocated(self):
        return self.next - self.start

    def __repr__(self):
        return "BindingAllocator(%r)" % self.next
