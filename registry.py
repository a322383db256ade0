# registry.py
"""
StarRegistry: the library entry point.

Wires the chain store, ownership verifier, queries and validator
together from a RegistryConfig and bootstraps genesis on construction.
"""
from typing import Any, Callable, List, Optional

from block import Block
from chain import ChainStore
from config import RegistryConfig
from crypto_utils import hash_block, now_ts, verify_address_signature
from ownership import OwnershipVerifier
from queries import ChainQueries
from validator import ChainValidator, Finding


class StarRegistry:
    def __init__(
        self,
        config: Optional[RegistryConfig] = None,
        verifier: Optional[Callable[[str, str, str], bool]] = None,
        clock: Optional[Callable[[], int]] = None,
        hasher: Optional[Callable[..., str]] = None,
    ):
        self.config = config or RegistryConfig()
        clock = clock or now_ts

        self.store = ChainStore(
            clock=clock,
            hasher=hasher or hash_block,
            genesis_data=self.config.genesis_data,
        )
        self.ownership = OwnershipVerifier(
            self.store,
            verifier=verifier or verify_address_signature,
            clock=clock,
            window_seconds=self.config.verification_window_seconds,
            registry_tag=self.config.registry_tag,
        )
        self.queries = ChainQueries(self.store)
        self.validator = ChainValidator(self.store)
        self.initialize()

    def initialize(self) -> None:
        self.store.initialize()

    def height(self) -> int:
        return self.store.height()

    def request_verification_message(self, address: str) -> str:
        return self.ownership.request_verification_message(address)

    def submit_star(self, address: str, message: str, signature: str, star: Any) -> Block:
        return self.ownership.submit_star(address, message, signature, star)

    def get_block_by_hash(self, block_hash: str) -> Optional[Block]:
        return self.queries.get_block_by_hash(block_hash)

    def get_block_by_height(self, height: int) -> Optional[Block]:
        return self.queries.get_block_by_height(height)

    def get_stars_by_wallet_address(self, address: str) -> List[Any]:
        return self.queries.get_stars_by_wallet_address(address)

    def validate_chain(self) -> List[Finding]:
        return self.validator.validate_chain()
