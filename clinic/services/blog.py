import re
import time
from typing import Optional

from clinic.models import BlogPost

OBJECT_ID_RE = re.compile(r'^[0-9a-fA-F]{24}$')


def slugify_title(title: str) -> str:
    """Lowercase, runs of anything but ``a-z0-9`` become ``-``, no edge hyphens."""
    slug = re.sub(r'[^a-z0-9]+', '-', (title or '').lower()).strip('-')
    return slug or 'post'


def unique_slug(title: str) -> str:
    """``<slug>-<epoch millis>``; bumps the suffix on the rare collision."""
    base = slugify_title(title)
    suffix = int(time.time() * 1000)
    while BlogPost.objects.filter(slug=f"{base}-{suffix}").exists():
        suffix += 1
    return f"{base}-{suffix}"


def find_post(id_or_slug: str) -> Optional[BlogPost]:
    """Look a post up by id when the value is id-shaped, else (or on a miss) by slug."""
    post = None
    if OBJECT_ID_RE.match(id_or_slug or ''):
        post = BlogPost.objects.filter(pk=id_or_slug.lower()).first()
    if post is None:
        post = BlogPost.objects.filter(slug=id_or_slug).first()
    return post
