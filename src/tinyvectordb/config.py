import os

from dotenv import load_dotenv

load_dotenv(override=True)

DIMENSION_POLICIES = ("strict", "truncate")


class Config:
    """Store defaults taken from TINYVECTORDB_* variables, read once at import.

    Pass an explicit value to VectorStore to override a default per instance.
    """

    # "strict" rejects vectors of unequal length; "truncate" compares the shared prefix.
    DIMENSION_POLICY = os.getenv("TINYVECTORDB_DIMENSION_POLICY", "strict").lower()
    LOG_LEVEL = os.getenv("TINYVECTORDB_LOG_LEVEL", "INFO").upper()
