from dataclasses import dataclass, field
from typing import Iterable, Tuple


def as_components(values: Iterable[float]) -> Tuple[float, ...]:
    return tuple(float(v) for v in values)


def check_id(id: object) -> int:
    # bool is an int subclass; True would otherwise match record 1
    if isinstance(id, bool) or not isinstance(id, int):
        raise ValueError(f"Record id must be an integer, got {id!r}")
    if id < 0:
        raise ValueError(f"Record id must be non-negative, got {id}")
    return id


@dataclass(frozen=True)
class VectorRecord:
    """A numeric vector identified by a caller-assigned, non-negative integer id.

    Records are immutable: the store hands them out as read-only views and
    replaces them wholesale on update.
    """

    id: int
    components: Tuple[float, ...] = field(default_factory=tuple)

    def __post_init__(self):
        check_id(self.id)
        object.__setattr__(self, "components", as_components(self.components))

    def __len__(self) -> int:
        return len(self.components)
