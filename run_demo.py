# run_demo.py
import logging

from config import RegistryConfig
from crypto_utils import address_for, generate_keypair, sign_message
from errors import SubmissionRejected
from registry import StarRegistry


def submit(registry: StarRegistry, sk, address: str, star: dict, tamper_sig: bool = False):
    message = registry.request_verification_message(address)
    signature = sign_message(sk, message if not tamper_sig else message[::-1])
    try:
        block = registry.submit_star(address, message, signature, star)
    except SubmissionRejected as err:
        print(f"[REJECTED] {address[:10]}… | {err}")
        return None
    print(f"[ACCEPTED] height={block.height:03d} | {address[:10]}… | hash={block.hash[:12]}…")
    return block


def main(config_path=None) -> StarRegistry:
    cfg = RegistryConfig.load(config_path)
    logging.basicConfig(level=cfg.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    registry = StarRegistry(cfg)

    alice_sk, alice_vk = generate_keypair()
    bob_sk, bob_vk = generate_keypair()
    alice = address_for(alice_vk)
    bob = address_for(bob_vk)

    print("=== PHASE 1: HONEST SUBMISSIONS ===")
    submit(registry, alice_sk, alice, {"dec": "-26° 29'", "ra": "16h 29m", "story": "first light"})
    submit(registry, bob_sk, bob, {"dec": "68° 52'", "ra": "16h 29m", "story": "bob's star"})
    submit(registry, alice_sk, alice, {"dec": "12° 01'", "ra": "03h 11m", "story": "second"})

    print("\n=== PHASE 2: FORGED SIGNATURE ===")
    submit(registry, bob_sk, alice, {"story": "bob claims alice's address"})
    submit(registry, alice_sk, alice, {"story": "signed the wrong message"}, tamper_sig=True)

    print(f"\nheight={registry.height()}")
    print("alice's stars:", registry.get_stars_by_wallet_address(alice))

    print("\n=== PHASE 3: TAMPER WITH BLOCK 1 ===")
    print("findings before:", [f.describe() for f in registry.validate_chain()] or "none")
    victim = registry.get_block_by_height(1)
    victim.body = victim.body[:-2] + "00"
    print("findings after: ", [f.describe() for f in registry.validate_chain()])

    print("\n=== STAR REGISTRY DEMO COMPLETE ===")
    return registry


if __name__ == "__main__":
    main()
