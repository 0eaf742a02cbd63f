"""
The singleton site configuration: lazy creation, login, password change.
"""
import logging
from typing import Optional

from django.conf import settings
from django.contrib.auth.hashers import check_password, make_password
from django.db import IntegrityError, transaction

from clinic.models import SiteConfig

logger = logging.getLogger(__name__)


def find_config() -> Optional[SiteConfig]:
    return SiteConfig.objects.filter(key=SiteConfig.MAIN_KEY).first()


def get_or_create_config() -> SiteConfig:
    """Return the configuration, creating it with the default password if absent.

    Two concurrent first reads may both try to create it; the unique key
    makes the second insert fail, and that caller re-fetches instead.
    """
    config = find_config()
    if config is not None:
        return config
    try:
        with transaction.atomic():
            config = SiteConfig.objects.create(
                key=SiteConfig.MAIN_KEY,
                admin_password=make_password(settings.ADMIN_DEFAULT_PASSWORD),
            )
        logger.info('created site configuration with the default admin password')
        return config
    except IntegrityError:
        return SiteConfig.objects.get(key=SiteConfig.MAIN_KEY)


def check_admin_password(password: str) -> bool:
    """One-way comparison against the stored hash; fails closed without a config."""
    config = find_config()
    if config is None or not password:
        return False
    return check_password(password, config.admin_password)


def set_admin_password(new_password: str) -> SiteConfig:
    config = get_or_create_config()
    config.admin_password = make_password(new_password)
    config.save(update_fields=['admin_password', 'updated_at'])
    return config
