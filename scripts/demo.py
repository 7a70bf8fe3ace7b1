import sys

from loguru import logger

from tinyvectordb.config import Config
from tinyvectordb.errors import VectorStoreError
from tinyvectordb.records import VectorRecord
from tinyvectordb.vector_store import VectorStore

logger.remove()
logger.add(sys.stderr, level=Config.LOG_LEVEL)

store = VectorStore()
store.insert(VectorRecord(1, [1.0, 2.0, 3.0]))
store.insert(VectorRecord(2, [4.0, 5.0, 6.0]))
store.insert(VectorRecord(3, [7.0, 8.0, 9.0]))

query = VectorRecord(4, [3.0, 4.0, 5.0])
try:
    nearest = store.nearest_neighbour(query)
    print("Nearest neighbour:", nearest)
except VectorStoreError as e:
    print("No nearest neighbour found:", e)
