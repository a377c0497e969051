import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from ledger.config import normalize_bind_address, redact_database_url
from wallets.domain.exceptions import StorageUnavailable
from wallets.domain.store import LedgerStore

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Initialize the ledger store, then serve the wallet API."

    def add_arguments(self, parser):
        parser.add_argument(
            "--addrport",
            default=None,
            help="Bind address such as :8080 (defaults to LEDGER_BIND_ADDRESS)",
        )
        parser.add_argument(
            "--init-only",
            action="store_true",
            help="Initialize the store and exit without serving requests",
        )

    def handle(self, *args, **options):
        try:
            addrport = normalize_bind_address(
                options["addrport"] or settings.LEDGER_BIND_ADDRESS
            )
        except ImproperlyConfigured as exc:
            raise CommandError(str(exc)) from exc

        store = LedgerStore(using=settings.LEDGER_DATABASE_ALIAS)
        try:
            store.initialize()
        except StorageUnavailable as exc:
            raise CommandError(f"ledger store is unusable: {exc}") from exc

        self.stdout.write(
            self.style.SUCCESS(
                f"ledger store initialized: database={store.using} "
                f"url={redact_database_url(settings.DATABASE_URL) or 'local'}"
            )
        )
        if options["init_only"]:
            return

        logger.info("event=server_starting addrport=%s", addrport)
        call_command("runserver", addrport, use_reloader=False, use_threading=True)
