# queries.py
from typing import Any, List, Optional

from block import Block
from chain import ChainStore


class ChainQueries:
    """Read-only lookups. A miss is None, never an exception."""
    def __init__(self, store: ChainStore):
        self.store = store

    def get_block_by_hash(self, block_hash: str) -> Optional[Block]:
        for block in self.store.snapshot():
            if block.hash == block_hash:
                return block
        return None

    def get_block_by_height(self, height: int) -> Optional[Block]:
        if isinstance(height, bool) or not isinstance(height, int):
            return None
        chain = self.store.snapshot()
        if 0 <= height < len(chain):
            return chain[height]
        return None

    def get_stars_by_wallet_address(self, address: str) -> List[Any]:
        """Decoded star payloads owned by address, in chain order."""
        if not isinstance(address, str):
            return []
        stars = []
        for block in self.store.snapshot():
            if block.owner == address:
                stars.append(block.decode_payload().get("star"))
        return stars
