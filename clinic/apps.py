from django.apps import AppConfig
from django.conf import settings
from django.db.models.signals import post_migrate


def seed_after_migrate(sender, **kwargs):
    if not settings.CONTENT_SEED_ON_MIGRATE:
        return
    from .services.seed import seed_content
    seed_content()


class ClinicConfig(AppConfig):
    name = 'clinic'
    verbose_name = 'Clinic website'
    default_auto_field = 'django.db.models.BigAutoField'

    def ready(self):
        post_migrate.connect(seed_after_migrate, sender=self, dispatch_uid='clinic.seed_content')
