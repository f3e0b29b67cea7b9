"""Credential repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List

from forum.domain.model.credential import Credential
from forum.domain.value import CredentialId


class CredentialRepository(ABC):
    """Read access to user credentials."""

    @abstractmethod
    async def find_by_ids(
        self, credential_ids: Iterable[CredentialId]
    ) -> List[Credential]:
        """Find credentials by a batch of IDs.

        Args:
            credential_ids: Credential IDs to look up

        Returns:
            Credentials found, in no particular order
        """
        pass
