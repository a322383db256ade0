# ownership.py
import logging
from typing import Any, Callable, Tuple

from block import Block
from chain import ChainStore
from crypto_utils import now_ts, verify_address_signature
from errors import ExpiredVerificationWindow, InvalidSignature, MalformedVerificationMessage

logger = logging.getLogger(__name__)

VERIFICATION_WINDOW_SECONDS = 300
REGISTRY_TAG = "starRegistry"


class OwnershipVerifier:
    """
    Issues ownership messages and gates star submissions.

    A wallet signs the message returned by request_verification_message()
    and submits it back within the window. Checks are pure; only the final
    append touches the chain.
    """
    def __init__(
        self,
        store: ChainStore,
        verifier: Callable[[str, str, str], bool] = verify_address_signature,
        clock: Callable[[], int] = now_ts,
        window_seconds: int = VERIFICATION_WINDOW_SECONDS,
        registry_tag: str = REGISTRY_TAG,
    ):
        self.store = store
        self.verifier = verifier
        self.clock = clock
        self.window_seconds = window_seconds
        self.registry_tag = registry_tag

    def request_verification_message(self, address: str) -> str:
        return f"{address}:{self.clock()}:{self.registry_tag}"

    def parse_message(self, address: str, message: str) -> Tuple[str, int]:
        """Split message into (address, timestamp), checking it was issued for address."""
        parts = message.rsplit(":", 2) if isinstance(message, str) else []
        if len(parts) != 3:
            raise MalformedVerificationMessage(message, "expected address:timestamp:tag")
        msg_address, raw_ts, tag = parts
        if tag != self.registry_tag:
            raise MalformedVerificationMessage(message, f"unknown registry tag {tag!r}")
        if msg_address != address:
            raise MalformedVerificationMessage(message, "issued for a different address")
        try:
            issued_at = int(raw_ts)
        except ValueError:
            raise MalformedVerificationMessage(message, f"bad timestamp {raw_ts!r}") from None
        return msg_address, issued_at

    def submit_star(self, address: str, message: str, signature: str, star: Any) -> Block:
        try:
            _, issued_at = self.parse_message(address, message)

            elapsed = self.clock() - issued_at
            if elapsed > self.window_seconds:
                raise ExpiredVerificationWindow(elapsed, self.window_seconds)

            if not self.verifier(address, message, signature):
                raise InvalidSignature(address)
        except (MalformedVerificationMessage, ExpiredVerificationWindow, InvalidSignature) as err:
            logger.warning("star submission rejected for %s: %s", address, err)
            raise

        block = Block.from_data({"owner": address, "star": star})
        return self.store.append(block)
