"""ID minting: validate inputs, draw a seed, encode."""

from core.errors import InvalidBlockID, InvalidTimestamp
from idgen.counter import SeedRegistry
from idgen.encoder import CalendarTime, encode
from utils.timestamp import now_unix, to_datetime


class MakeResult:
    """Outcome of IDGenerator.make().

    Unpacks as ("ok", id) or ("error", message).
    """

    __slots__ = ("value", "error")

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def __iter__(self):
        if self.ok:
            return iter(("ok", self.value))
        return iter(("error", self.error.message))

    def __eq__(self, other):
        if isinstance(other, tuple):
            return tuple(self) == other
        if isinstance(other, MakeResult):
            return tuple(self) == tuple(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        if self.ok:
            return f"MakeResult(ok, {self.value})"
        return f"MakeResult(error, {self.error.message!r})"


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_block_id(block_id):
    """Return an InvalidBlockID for anything but an int in (0, 100), else None."""
    if not _is_int(block_id) or not 0 < block_id < 100:
        return InvalidBlockID(block_id)
    return None


def to_calendar(unixtime):
    """Convert epoch seconds to a UTC CalendarTime, or raise InvalidTimestamp."""
    if not _is_int(unixtime):
        raise InvalidTimestamp(unixtime)
    try:
        return CalendarTime.from_datetime(to_datetime(unixtime))
    except (OverflowError, ValueError) as exc:
        raise InvalidTimestamp(unixtime, cause=exc) from exc


class IDGenerator:
    """Mints IDs for namespaces registered in a SeedRegistry."""

    encode = staticmethod(encode)

    def __init__(self, registry=None, clock=now_unix):
        self.registry = registry if registry is not None else SeedRegistry()
        self._clock = clock

    def init(self, namespace):
        self.registry.init(namespace)

    def next_seed(self, namespace):
        return self.registry.next_seed(namespace)

    def make(self, namespace, block_id, unixtime=None):
        """Mint one ID.

        Validation failures come back as a failed MakeResult and leave the
        counter untouched. An uninitialized namespace raises
        NamespaceNotInitialized.
        """
        error = validate_block_id(block_id)
        if error is not None:
            return MakeResult.failure(error)

        if unixtime is None:
            unixtime = self._clock()
        try:
            calendar_time = to_calendar(unixtime)
        except InvalidTimestamp as exc:
            return MakeResult.failure(exc)

        seed = self.next_seed(namespace)
        return MakeResult.success(encode(calendar_time, block_id, seed))
