"""
Django Models para o domínio de Usuários.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/users/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Registros nunca são apagados fisicamente (deleted_at)
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models


class UserModel(models.Model):
    """
    Model Django para persistência de Usuários.

    Fields:
        id: UUID como primary key (gerado pelo mapper do Core)
        version: Versão para lock otimista
        created_at: Timestamp de criação
        updated_at: Timestamp da última atualização
        deleted_at: Timestamp da remoção lógica (null = ativo)
        name: Nome (único entre não removidos)
        birth_date: Data de nascimento
    """

    # Primary Key - UUID gerado pelo Core
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do usuário"
    )

    # Controle do ciclo de vida
    version = models.PositiveIntegerField(
        default=0,
        help_text="Versão para lock otimista"
    )

    created_at = models.DateTimeField(
        db_index=True,
        help_text="Data/hora de criação"
    )

    updated_at = models.DateTimeField(
        help_text="Data/hora da última atualização"
    )

    deleted_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Data/hora da remoção lógica"
    )

    # Dados do usuário
    name = models.CharField(
        max_length=100,
        help_text="Nome do usuário"
    )

    birth_date = models.DateField(
        help_text="Data de nascimento"
    )

    class Meta:
        db_table = 'users'
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        ordering = ['created_at', 'id']
        constraints = [
            # Nome único apenas entre usuários não removidos
            models.UniqueConstraint(
                fields=['name'],
                condition=models.Q(deleted_at__isnull=True),
                name='users_unique_active_name',
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} (v{self.version})"
