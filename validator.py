# validator.py
import logging
from dataclasses import dataclass
from typing import List, Union

from chain import ChainStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TamperedBlock:
    """Stored hash no longer matches the block's fields."""
    height: int

    def describe(self) -> str:
        return f"Error - Block Height: {self.height} - Has been Tampered."


@dataclass(frozen=True)
class BrokenLink:
    """previous_hash does not match the predecessor's hash."""
    height: int

    def describe(self) -> str:
        return f"Error - Block Height: {self.height} - Previous Hash Doesn't Match."


Finding = Union[TamperedBlock, BrokenLink]


class ChainValidator:
    def __init__(self, store: ChainStore):
        self.store = store

    def validate_chain(self) -> List[Finding]:
        """
        Walk the chain once, start to end, and return every finding.
        An empty list means the chain is consistent.
        """
        findings: List[Finding] = []
        previous = None
        for index, block in enumerate(self.store.snapshot()):
            if not block.validate():
                findings.append(TamperedBlock(index))
            if previous is not None and block.previous_hash != previous.hash:
                findings.append(BrokenLink(index))
            previous = block

        for finding in findings:
            logger.warning(finding.describe())
        return findings

    def is_valid(self) -> bool:
        return not self.validate_chain()
