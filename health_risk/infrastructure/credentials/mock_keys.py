import random
import string
from typing import Optional

from health_risk.application.ports import CredentialGeneratorPort
from health_risk.domain.models import AccessCredential


ACCESS_KEY_ALPHABET = string.ascii_uppercase + string.digits
MOCK_HASH_ALPHABET = "0123456789abcdef"

ACCESS_KEY_GROUPS = 4
ACCESS_KEY_GROUP_LENGTH = 4
MOCK_HASH_LENGTH = 64


def generate_access_key(rng: Optional[random.Random] = None) -> AccessCredential:
    """
    Generate a display-only access key and a mock SHA-256 style digest.

    The key hash is random hex, not a hash of the key or anything else.
    Uses the general-purpose ``random`` module, so neither value is fit to
    guard real data.

    Args:
        rng: Optional Random instance, e.g. seeded in tests

    Returns:
        AccessCredential with access_key (XXXX-XXXX-XXXX-XXXX) and key_hash
    """
    rng = rng or random
    groups = [
        "".join(rng.choice(ACCESS_KEY_ALPHABET) for _ in range(ACCESS_KEY_GROUP_LENGTH))
        for _ in range(ACCESS_KEY_GROUPS)
    ]
    key_hash = "".join(rng.choice(MOCK_HASH_ALPHABET) for _ in range(MOCK_HASH_LENGTH))
    return AccessCredential(access_key="-".join(groups), key_hash=key_hash)


class MockCredentialAdapter(CredentialGeneratorPort):
    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng

    def generate_access_key(self) -> AccessCredential:
        return generate_access_key(self._rng)
