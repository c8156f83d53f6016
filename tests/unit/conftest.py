import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.dependents import DEPENDENT_KEYS


def make_dependent_repository():
    repository = MagicMock()
    repository.find_owned = AsyncMock(return_value=[])
    repository.count_owned = AsyncMock(return_value=0)
    repository.delete_owned = AsyncMock(return_value=0)
    repository.insert_many = AsyncMock(side_effect=lambda records: len(records))
    return repository


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.dependents = {key: make_dependent_repository() for key in DEPENDENT_KEYS}
    uow.communities.delete_by_id = AsyncMock(return_value=1)
    uow.audit_logs.create = AsyncMock(side_effect=lambda entry: entry)
    return uow
