"""
Instant Providers - Fonte do "instante atual".

O orquestrador nunca chama datetime.now() diretamente; recebe um
InstantProvider injetado, o que torna os timestamps de auditoria
determinísticos em testes.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)


class SystemInstantProvider:
    """Instante atual do relógio do sistema em UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedInstantProvider:
    """Sempre retorna o mesmo instante."""

    def __init__(self, instant: datetime):
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


class AdjustableInstantProvider:
    """
    Provider ajustável para simular passagem de tempo em testes.

    Example:
        clock = AdjustableInstantProvider()
        before = clock.now()
        clock.adjust(lambda now: now + timedelta(seconds=1))
        assert clock.now() - before == timedelta(seconds=1)
    """

    def __init__(self, instant: Optional[datetime] = None):
        base = instant or datetime.now(timezone.utc)
        self._instant = base.replace(microsecond=0)
        self._adjustment = timedelta(0)

    def now(self) -> datetime:
        return self._instant + self._adjustment

    def adjust(self, f: Callable[[datetime], datetime]) -> None:
        """
        Ajusta o tempo pela função dada.

        Args:
            f: Recebe o instante atual e retorna o instante ajustado
        """
        before = self.now()
        after = f(before)
        self._adjustment += after - before
        logger.debug(f"Adjusted instant provider, it was {before} and it is now {after}")

    def reset(self) -> None:
        """Desfaz todos os ajustes."""
        self._adjustment = timedelta(0)
        logger.debug(f"Reset instant provider, it is now {self.now()}")
