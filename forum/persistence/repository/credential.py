"""PostgreSQL implementation of Credential repository."""

from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Credential
from forum.domain.repository import CredentialRepository
from forum.domain.value import CredentialId
from forum.persistence.mappers import row_to_credential
from forum.persistence.tables import credentials_table


class PostgresCredentialRepository(CredentialRepository):
    """PostgreSQL implementation of CredentialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_ids(
        self, credential_ids: Iterable[CredentialId]
    ) -> List[Credential]:
        """Find credentials by a batch of IDs."""
        ids = list(credential_ids)
        if not ids:
            return []
        stmt = select(credentials_table).where(credentials_table.c.id.in_(ids))
        result = await self.session.execute(stmt)
        return [row_to_credential(dict(row)) for row in result.mappings().all()]
