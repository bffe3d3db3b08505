"""
Unit of Work - Implementação Django.

Delimita a transação de cada mutação do ciclo de vida
(busca + escrita versionada + flush).

Responsabilidades:
- Iniciar/finalizar transações
- Commit/Rollback coordenado

ACID Guarantees:
- Atomicidade: Tudo ou nada
- Isolamento: Cada mutação tem sua transação
- Durabilidade: Garantida pelo banco
"""

from typing import Optional
import logging
import threading

from django.db import DEFAULT_DB_ALIAS, transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Usa transaction.atomic, de modo que um UoW aberto dentro de outra
    transação vira um savepoint.

    O estado da transação é mantido por thread: um mesmo UoW (e o
    service que o recebe) pode ser compartilhado entre threads, cada uma
    com sua própria conexão e seu próprio bloco atomic.

    Example:
        with DjangoUnitOfWork() as uow:
            repo.insert(entity)
            repo.flush()
        # Commit automático

    Example com rollback:
        with DjangoUnitOfWork():
            repo.insert(entity)
            raise Exception("Erro!")
        # Rollback automático
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        """
        Inicializa Unit of Work.

        Args:
            using: Alias do banco de dados
        """
        self._using = using
        self._local = threading.local()

    @property
    def _atomic(self) -> Optional[transaction.Atomic]:
        return getattr(self._local, "atomic", None)

    @_atomic.setter
    def _atomic(self, atomic: Optional[transaction.Atomic]) -> None:
        self._local.atomic = atomic

    def _begin_transaction(self) -> None:
        if self._atomic is not None:
            raise RuntimeError("Transaction already started")
        self._local.committed = False
        self._local.rolled_back = False
        atomic = transaction.atomic(using=self._using)
        atomic.__enter__()
        self._atomic = atomic
        logger.debug("Transaction started")

    def commit(self) -> None:
        if self._atomic is None:
            logger.warning("Transaction already finalized")
            return

        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._local.committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        transaction.set_rollback(True, using=self._using)
        atomic.__exit__(None, None, None)
        self._local.rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        """Verifica se a última transação desta thread foi comitada."""
        return getattr(self._local, "committed", False)

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se a última transação desta thread foi revertida."""
        return getattr(self._local, "rolled_back", False)


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas registra quantas transações
    foram abertas, comitadas e revertidas.

    Example:
        uow = InMemoryUnitOfWork()
        service = UserService(repo, uow=uow)
        service.create(intent)

        assert uow.commits == 1
    """

    def __init__(self):
        self.begins = 0
        self.commits = 0
        self.rollbacks = 0

    def _begin_transaction(self) -> None:
        self.begins += 1

    def commit(self) -> None:
        self.commits += 1

    def rollback(self) -> None:
        self.rollbacks += 1

    @property
    def committed(self) -> bool:
        """Verifica se houve commit."""
        return self.commits > 0

    @property
    def rolled_back(self) -> bool:
        """Verifica se houve rollback."""
        return self.rollbacks > 0

    def reset(self) -> None:
        """Reset para próximo teste."""
        self.begins = 0
        self.commits = 0
        self.rollbacks = 0
