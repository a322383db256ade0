"""Shared fixtures: a hand-driven clock, real Ed25519 wallets, a registry."""

import pytest

from crypto_utils import address_for, generate_keypair, sign_message
from registry import StarRegistry

START_TS = 1690000000


class FakeClock:
    def __init__(self, now: int = START_TS):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


class Wallet:
    """Off-registry signer standing in for a user's wallet."""

    def __init__(self):
        self.sk, self.vk = generate_keypair()
        self.address = address_for(self.vk)

    def sign(self, message: str) -> str:
        return sign_message(self.sk, message)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def wallet():
    return Wallet()


@pytest.fixture
def other_wallet():
    return Wallet()


@pytest.fixture
def registry(clock):
    return StarRegistry(clock=clock)


@pytest.fixture
def star():
    return {"dec": "-26° 29'", "ra": "16h 29m", "story": "test"}


@pytest.fixture
def submit(registry):
    """Request, sign and submit in one step."""
    def _submit(wallet, star):
        message = registry.request_verification_message(wallet.address)
        return registry.submit_star(wallet.address, message, wallet.sign(message), star)
    return _submit
