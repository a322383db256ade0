# errors.py
"""
Failures raised by the star registry.

Query misses (None) and validation findings are data, not exceptions;
see queries.py and validator.py.
"""


class StarRegistryError(Exception):
    """Base class for everything the registry raises."""


class ChainInitError(StarRegistryError):
    """Genesis could not be created. The registry must not be used."""


class HashComputationError(StarRegistryError):
    """A block digest could not be computed; the append was aborted."""


# =============================
# SUBMISSION GATING
# =============================

class SubmissionRejected(StarRegistryError):
    """A star submission failed ownership verification. No block was created."""


class MalformedVerificationMessage(SubmissionRejected):
    def __init__(self, message: str, reason: str):
        self.message = message
        self.reason = reason
        super().__init__(f"malformed verification message {message!r}: {reason}")


class ExpiredVerificationWindow(SubmissionRejected):
    def __init__(self, elapsed: int, window: int):
        self.elapsed = elapsed
        self.window = window
        super().__init__(f"verification message is {elapsed}s old (window {window}s)")


class InvalidSignature(SubmissionRejected):
    def __init__(self, address: str):
        self.address = address
        super().__init__(f"signature does not match address {address}")
