from dataclasses import replace
from math import inf
from typing import Iterator, List, Optional, Sequence, Tuple

from loguru import logger

from .config import DIMENSION_POLICIES, Config
from .distance import VectorLike, euclidean_distance
from .errors import ConfigError, EmptyStoreError
from .records import VectorRecord, as_components, check_id


class VectorStore:
    """An in-memory, insertion-ordered collection of vector records.

    Lookups and nearest-neighbour queries are linear scans. Ids are not required
    to be unique: ``get`` and ``update`` act on the first match, ``delete`` on all.

    ``dimension_policy`` selects how queries of a different length are handled:
    ``"strict"`` raises ``DimensionMismatchError``, ``"truncate"`` compares the
    shared prefix. It defaults to ``Config.DIMENSION_POLICY``.
    """

    def __init__(self, dimension_policy: Optional[str] = None):
        policy = (dimension_policy or Config.DIMENSION_POLICY).lower()
        if policy not in DIMENSION_POLICIES:
            raise ConfigError(
                f"Unknown dimension policy '{policy}'; expected one of {DIMENSION_POLICIES}"
            )
        self.dimension_policy = policy
        self._records: List[VectorRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VectorRecord]:
        return iter(tuple(self._records))

    def __contains__(self, id: object) -> bool:
        if isinstance(id, bool):
            return False
        return any(r.id == id for r in self._records)

    @property
    def records(self) -> Tuple[VectorRecord, ...]:
        return tuple(self._records)

    def insert(self, record: VectorRecord) -> None:
        if record.id in self:
            logger.warning(
                f"Inserting duplicate record id {record.id}; get/update will keep returning the earlier one."
            )
        self._records.append(record)
        logger.debug(f"Inserted record {record.id} ({len(record)} components)")

    def update(self, id: int, new_components: Sequence[float]) -> None:
        """Replace the components of the first record with ``id``.

        Later records sharing the id are left alone. Missing ids are a no-op.
        """
        check_id(id)
        for i, record in enumerate(self._records):
            if record.id == id:
                self._records[i] = replace(record, components=as_components(new_components))
                logger.debug(f"Updated record {id}")
                return
        logger.debug(f"Update skipped: no record with id {id}")

    def delete(self, id: int) -> None:
        """Remove every record with ``id``, keeping the order of the rest."""
        check_id(id)
        before = len(self._records)
        self._records = [r for r in self._records if r.id != id]
        removed = before - len(self._records)
        if removed:
            logger.debug(f"Deleted {removed} record(s) with id {id}")
        else:
            logger.debug(f"Delete skipped: no record with id {id}")

    def get(self, id: int) -> Optional[VectorRecord]:
        check_id(id)
        return next((r for r in self._records if r.id == id), None)

    def clear(self):
        """Clear all records."""
        self._records = []

    def nearest_neighbour(self, query: VectorLike) -> VectorRecord:
        """Return the stored record closest to ``query`` by Euclidean distance.

        Ties go to the record inserted first. If no distance compares below
        infinity (for instance all are NaN) the first record is returned.
        Raises ``EmptyStoreError`` when the store holds no records.
        """
        if not self._records:
            raise EmptyStoreError("Cannot find a nearest neighbour in an empty store")

        strict = self.dimension_policy == "strict"
        closest = self._records[0]
        min_distance = inf
        for record in self._records:
            # stored record first: a mismatch reports its length as expected
            distance = euclidean_distance(record, query, strict=strict)
            if distance < min_distance:
                min_distance = distance
                closest = record

        logger.debug(f"Nearest neighbour is record {closest.id} at distance {min_distance}")
        return closest
