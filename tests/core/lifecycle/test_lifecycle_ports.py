"""
Testes para InMemoryLifecycleRepository.

Verifica a semântica que qualquer adapter de persistência deve
fornecer: duplicidade, update condicionado à versão e remoção lógica.
"""

import threading
from datetime import date, datetime, timedelta, timezone

import pytest

from src.core.lifecycle.ports import InMemoryLifecycleRepository, LifecycleRepository
from src.core.shared.exceptions import DuplicateEntityError
from src.core.users.entities import UserEntity
from src.core.users.ports import InMemoryUserRepository

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_user(id, name, version=0, deleted_at=None):
    return UserEntity(
        id=id,
        version=version,
        created_at=T0,
        updated_at=T0,
        deleted_at=deleted_at,
        name=name,
        birth_date=date(1990, 1, 1),
    )


class TestInMemoryRepository:
    """Testes do repositório de referência."""

    def test_implementa_protocolo(self):
        """Deve satisfazer o LifecycleRepository."""
        assert isinstance(InMemoryUserRepository(), LifecycleRepository)

    def test_insert_e_find(self):
        """Deve inserir e recuperar entidade."""
        repo = InMemoryUserRepository()
        user = make_user("1", "Alice")

        repo.insert(user)

        assert repo.find_non_deleted("1") == user

    def test_insert_duplicado(self):
        """Deve sinalizar duplicidade sem gravar."""
        repo = InMemoryUserRepository([make_user("1", "Alice")])

        with pytest.raises(DuplicateEntityError) as exc_info:
            repo.insert(make_user("2", "Alice"))

        assert exc_info.value.type_name == "User"
        assert "2" not in repo.entities

    def test_removido_nao_conta_como_duplicado(self):
        """Dados de registro removido podem ser reutilizados."""
        repo = InMemoryUserRepository([make_user("1", "Alice", version=1, deleted_at=T0)])

        repo.insert(make_user("2", "Alice"))

        assert repo.find_non_deleted("2") is not None

    def test_update_if_version_sucesso(self):
        """Versão armazenada confere: grava e retorna 1."""
        repo = InMemoryUserRepository([make_user("1", "Alice")])

        affected = repo.update_if_version(make_user("1", "Alicia", version=1), expected_version=0)

        assert affected == 1
        assert repo.find_non_deleted("1").name == "Alicia"

    def test_update_if_version_obsoleta(self):
        """E1 e E2 em v0; segundo update com v0 obsoleta afeta 0 linhas."""
        repo = InMemoryUserRepository([make_user("1", "E1"), make_user("2", "E2")])

        first = repo.update_if_version(make_user("1", "E1 v1", version=1), expected_version=0)
        second = repo.update_if_version(make_user("1", "E1 stale", version=1), expected_version=0)

        assert first == 1
        assert second == 0
        assert repo.entities["1"].name == "E1 v1"
        assert repo.entities["2"].version == 0

    def test_update_if_version_inexistente(self):
        """Id desconhecido afeta 0 linhas."""
        repo = InMemoryUserRepository()

        assert repo.update_if_version(make_user("9", "X", version=1), expected_version=0) == 0

    def test_update_duplicado(self):
        """Update que colide com outro registro sinaliza duplicidade."""
        repo = InMemoryUserRepository([make_user("1", "Alice"), make_user("2", "Bob")])

        with pytest.raises(DuplicateEntityError):
            repo.update_if_version(make_user("2", "Alice", version=1), expected_version=0)

        assert repo.entities["2"].name == "Bob"

    def test_remocao_logica_mantem_registro(self):
        """Registro removido some das buscas mas permanece armazenado."""
        repo = InMemoryUserRepository([make_user("1", "Alice")])

        repo.update_if_version(make_user("1", "Alice", version=1, deleted_at=T0), expected_version=0)

        assert repo.find_non_deleted("1") is None
        assert repo.entities["1"].is_deleted

    def test_page_non_deleted(self):
        """Pagina apenas não removidos em ordem de inserção."""
        repo = InMemoryUserRepository([
            make_user("1", "A"),
            make_user("2", "B", version=1, deleted_at=T0),
            make_user("3", "C"),
            make_user("4", "D"),
        ])

        page = repo.page_non_deleted(0, 2)

        assert [u.id for u in page.items] == ["1", "3"]
        assert page.total_pages == 2

    def test_reset_e_clear(self):
        """reset/clear restauram o estado para testes."""
        repo = InMemoryUserRepository([make_user("1", "A")])

        repo.reset([make_user("2", "B")])
        assert list(repo.entities) == ["2"]

        repo.clear()
        assert repo.entities == {}

    def test_entities_e_snapshot(self):
        """Alterar o snapshot não afeta o repositório."""
        repo = InMemoryUserRepository([make_user("1", "A")])

        snapshot = repo.entities
        snapshot.clear()

        assert "1" in repo.entities

    def test_sem_predicado_nunca_duplica(self):
        """Sem predicado de duplicidade qualquer valor é aceito."""
        repo = InMemoryLifecycleRepository()
        repo.insert(make_user("1", "A"))
        repo.insert(make_user("2", "A"))

        assert len(repo.entities) == 2

    @pytest.mark.slow
    def test_update_concorrente_apenas_um_vence(self):
        """Escritores concorrentes com a mesma versão: exatamente um grava."""
        repo = InMemoryUserRepository([make_user("1", "Alice")])
        results = []
        barrier = threading.Barrier(8)

        def writer(i):
            barrier.wait()
            results.append(
                repo.update_if_version(
                    make_user("1", f"Writer {i}", version=1),
                    expected_version=0,
                )
            )

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == [0] * 7 + [1]
        assert repo.entities["1"].version == 1
