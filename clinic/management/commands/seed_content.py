from django.core.management.base import BaseCommand

from clinic.services.seed import seed_content


class Command(BaseCommand):
    help = "Insert the starter services/FAQs/testimonials/doctors if the content collection is empty (idempotent)."

    def handle(self, *args, **options):
        added = seed_content()
        if added:
            self.stdout.write(self.style.SUCCESS(f"Seeded {added} content items."))
        else:
            self.stdout.write("Content already present; nothing to seed.")
