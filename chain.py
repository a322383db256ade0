# chain.py
import logging
import threading
from typing import Callable, List, Optional

from block import Block
from crypto_utils import hash_block, now_ts
from errors import ChainInitError, HashComputationError

logger = logging.getLogger(__name__)

GENESIS_DATA = "Genesis Block"


class ChainStore:
    """
    In-memory, append-only chain of blocks.
    append() is the only mutation and runs under a single lock, so height
    assignment and previous_hash linkage happen as one step.
    """
    def __init__(
        self,
        clock: Callable[[], int] = now_ts,
        hasher: Callable[..., str] = hash_block,
        genesis_data: str = GENESIS_DATA,
    ):
        self.clock = clock
        self.hasher = hasher
        self.genesis_data = genesis_data
        self.lock = threading.Lock()
        self._chain: List[Block] = []

    def initialize(self) -> None:
        """Create the genesis block. No-op once the chain has one."""
        if self.height() >= 0:
            return
        try:
            self.append(Block.from_data({"data": self.genesis_data}))
        except Exception as err:
            raise ChainInitError(f"could not create genesis block: {err}") from err

    def append(self, block: Block) -> Block:
        with self.lock:
            height = len(self._chain)
            timestamp = self.clock()
            previous_hash = self._chain[-1].hash if self._chain else None
            try:
                digest = self.hasher(height, timestamp, previous_hash, block.body)
            except Exception as err:
                logger.warning("hashing failed for block at height %d: %s", height, err)
                raise HashComputationError(f"block {height}: {err}") from err

            block.height = height
            block.timestamp = timestamp
            block.previous_hash = previous_hash
            block.hash = digest
            self._chain.append(block)

        logger.info("appended block height=%d hash=%s", height, digest)
        return block

    def height(self) -> int:
        """Index of the last block, -1 before initialize()."""
        return len(self._chain) - 1

    def last_block(self) -> Optional[Block]:
        with self.lock:
            return self._chain[-1] if self._chain else None

    def snapshot(self) -> List[Block]:
        """Consistent copy of the chain for readers."""
        with self.lock:
            return list(self._chain)

    def __len__(self) -> int:
        return len(self._chain)
