"""Tests for sharing one engine across threads."""

import random
from concurrent.futures import ThreadPoolExecutor


def test_concurrent_calls_match_serial(engine):
    """Test that concurrent calls on one engine match serial results."""
    rng = random.Random(42)
    addrs = [rng.getrandbits(32).to_bytes(4, "big") for _ in range(64)]
    addrs += [rng.getrandbits(128).to_bytes(16, "big") for _ in range(16)]

    serial = [engine.anonymize(a) for a in addrs]

    with ThreadPoolExecutor(max_workers=8) as pool:
        parallel = list(pool.map(engine.anonymize, addrs))

    assert parallel == serial
