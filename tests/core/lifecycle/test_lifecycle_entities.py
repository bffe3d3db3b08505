"""
Testes para LifecycleEntity e mappers genéricos.
"""

import pytest
from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime, timedelta, timezone

from src.core.lifecycle.entities import LifecycleEntity
from src.core.lifecycle.mappers import EntityAsModelMapper, IdentityConversion, audit_fields
from src.core.shared.interfaces import HasId, HasVersion, SequentialIdGenerator

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class FooEntity(LifecycleEntity):
    """Tipo mínimo usado apenas nos testes."""

    label: str


class FooMapper(EntityAsModelMapper):
    """Mapper cujo model é a própria entidade."""

    def entity_to_be_created_from(self, intent, now):
        return FooEntity(
            id=self.new_id(),
            version=0,
            created_at=now,
            updated_at=now,
            deleted_at=None,
            label=intent,
        )

    def updated_entity_with(self, entity, intent):
        return entity.next_version(entity.updated_at, label=intent)


@pytest.fixture
def foo():
    return FooEntity(id=1, version=0, created_at=T0, updated_at=T0, deleted_at=None, label="a")


class TestLifecycleEntity:
    """Testes para LifecycleEntity."""

    def test_imutavel(self, foo):
        """Entidades são snapshots imutáveis."""
        with pytest.raises(FrozenInstanceError):
            foo.version = 5

    def test_versao_negativa_invalida(self):
        """Versão deve ser >= 0."""
        with pytest.raises(ValueError):
            FooEntity(id=1, version=-1, created_at=T0, updated_at=T0, deleted_at=None, label="a")

    def test_next_version(self, foo):
        """Próxima versão incrementa 1 e renova updated_at."""
        later = T0 + timedelta(hours=1)

        nxt = foo.next_version(later, label="b")

        assert nxt.version == 1
        assert nxt.updated_at == later
        assert nxt.created_at == T0
        assert nxt.label == "b"
        assert foo.version == 0

    def test_soft_deleted(self, foo):
        """Remoção lógica preenche deleted_at e gera nova versão."""
        later = T0 + timedelta(days=1)

        deleted = foo.soft_deleted(later)

        assert deleted.is_deleted
        assert deleted.deleted_at == later
        assert deleted.version == 1
        assert not foo.is_deleted

    def test_capacidades(self, foo):
        """Entidades satisfazem HasId e HasVersion."""
        assert isinstance(foo, HasId)
        assert isinstance(foo, HasVersion)


class TestGenericMappers:
    """Testes para IdentityConversion e EntityAsModelMapper."""

    def test_identity_conversion(self, foo):
        assert IdentityConversion()(foo) is foo

    def test_entity_as_model(self):
        """Model é a própria entidade."""
        mapper = FooMapper(id_generator=SequentialIdGenerator())

        entity = mapper.entity_to_be_created_from("x", T0)

        assert entity.id == 1
        assert mapper.entity_to_model(entity) is entity

    def test_audit_fields(self, foo):
        assert audit_fields(foo) == {
            "id": 1,
            "version": 0,
            "created_at": T0,
            "updated_at": T0,
            "deleted_at": None,
        }
