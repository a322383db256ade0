# block.py
from dataclasses import dataclass, asdict
from typing import Any, Optional

from crypto_utils import decode_payload, encode_payload, hash_block


@dataclass
class Block:
    """
    One ledger entry. height, timestamp, previous_hash and hash are
    assigned by ChainStore.append; body is the encoded payload.
    """
    body: str
    height: Optional[int] = None
    timestamp: Optional[int] = None
    previous_hash: Optional[str] = None
    hash: Optional[str] = None

    @classmethod
    def from_data(cls, data: Any) -> "Block":
        return cls(body=encode_payload(data))

    def decode_payload(self) -> Any:
        return decode_payload(self.body)

    @property
    def owner(self) -> Optional[str]:
        try:
            data = self.decode_payload()
        except (TypeError, ValueError):
            return None
        if isinstance(data, dict):
            return data.get("owner")
        return None

    def recompute_hash(self) -> str:
        return hash_block(self.height, self.timestamp, self.previous_hash, self.body)

    def validate(self) -> bool:
        """True iff the stored hash still matches the block's fields."""
        try:
            return self.recompute_hash() == self.hash
        except (TypeError, ValueError):
            # fields tampered into something unhashable
            return False

    def to_dict(self) -> dict:
        return asdict(self)
