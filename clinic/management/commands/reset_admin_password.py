from django.conf import settings
from django.core.management.base import BaseCommand

from clinic.services.site_config import set_admin_password


class Command(BaseCommand):
    help = "Ensure the site configuration exists and set the admin password (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--password', help='new admin password (defaults to ADMIN_DEFAULT_PASSWORD)')

    def handle(self, *args, **options):
        password = options.get('password') or settings.ADMIN_DEFAULT_PASSWORD
        site = set_admin_password(password)
        self.stdout.write(self.style.SUCCESS(f"Admin password updated for {site.name}."))
