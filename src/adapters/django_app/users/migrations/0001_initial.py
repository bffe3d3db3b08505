"""
Migration inicial para o domínio de Usuários.

Cria a tabela users com a constraint de nome único
entre registros não removidos.
"""

from django.db import migrations, models


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='UserModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='UUID único do usuário'
                )),
                ('version', models.PositiveIntegerField(
                    default=0,
                    help_text='Versão para lock otimista'
                )),
                ('created_at', models.DateTimeField(
                    db_index=True,
                    help_text='Data/hora de criação'
                )),
                ('updated_at', models.DateTimeField(
                    help_text='Data/hora da última atualização'
                )),
                ('deleted_at', models.DateTimeField(
                    null=True,
                    blank=True,
                    help_text='Data/hora da remoção lógica'
                )),
                ('name', models.CharField(
                    max_length=100,
                    help_text='Nome do usuário'
                )),
                ('birth_date', models.DateField(
                    help_text='Data de nascimento'
                )),
            ],
            options={
                'db_table': 'users',
                'verbose_name': 'Usuário',
                'verbose_name_plural': 'Usuários',
                'ordering': ['created_at', 'id'],
            },
        ),
        migrations.AddConstraint(
            model_name='usermodel',
            constraint=models.UniqueConstraint(
                fields=('name',),
                condition=models.Q(deleted_at__isnull=True),
                name='users_unique_active_name',
            ),
        ),
    ]
