import uuid

from django.db import migrations

from wallets.domain.constants import SEED_WALLET_BALANCE, SEED_WALLET_COUNT


def seed_wallets(apps, schema_editor):
    Wallet = apps.get_model("wallets", "Wallet")
    db_alias = schema_editor.connection.alias
    Wallet.objects.using(db_alias).bulk_create(
        [
            Wallet(id=uuid.uuid4(), balance=SEED_WALLET_BALANCE)
            for _ in range(SEED_WALLET_COUNT)
        ]
    )


class Migration(migrations.Migration):
    dependencies = [
        ("wallets", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_wallets, migrations.RunPython.noop),
    ]
