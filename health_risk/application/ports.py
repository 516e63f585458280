from typing import Protocol
from health_risk.domain.models import AccessCredential


class CredentialGeneratorPort(Protocol):
    def generate_access_key(self) -> AccessCredential:
        """
        Returns a fresh display credential (access key plus mock key hash).
        """
        ...
