from idgen.encoder import encode


class IDNamespace:
    """Binds one namespace to a generator."""

    __slots__ = ("namespace", "generator")

    def __init__(self, namespace, generator):
        self.namespace = namespace
        self.generator = generator

    def init_generator(self):
        self.generator.init(self.namespace)

    def make_id(self, block_id, unixtime=None):
        return self.generator.make(self.namespace, block_id, unixtime)

    def gen_id(self, calendar_time, block_id):
        return encode(calendar_time, block_id, self.generator.next_seed(self.namespace))

    def __repr__(self):
        return f"IDNamespace({self.namespace!r})"
