from idgen.counter import SEED_DIV, Counter, SeedRegistry
from idgen.encoder import CalendarTime, encode
from idgen.generator import IDGenerator, MakeResult, to_calendar, validate_block_id
from idgen.namespace import IDNamespace

__all__ = [
    "SEED_DIV",
    "Counter",
    "SeedRegistry",
    "CalendarTime",
    "encode",
    "IDGenerator",
    "MakeResult",
    "to_calendar",
    "validate_block_id",
    "IDNamespace",
]
