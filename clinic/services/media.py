"""
Media host adapter (Cloudinary upload API over HTTPS).

Images arrive from the admin screens as base64 data-URIs.  ``upload``
pushes one to the image CDN and returns the hosted URL together with
the reference id needed to delete it later; ``destroy`` removes a
hosted asset by that id.  Callers decide whether an upload failure is
fatal; ``discard`` is the best-effort delete used when an entity is
replaced or removed.
"""
import hashlib
import logging
import time
from dataclasses import dataclass
from typing import Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = 'data:image'
API_BASE = 'https://api.cloudinary.com/v1_1'


class MediaHostError(RuntimeError):
    """The media host is unreachable, misconfigured or rejected a call."""


@dataclass
class UploadResult:
    url: str
    reference_id: str


def is_data_uri(value) -> bool:
    """True for a fresh upload, False for an already-hosted URL."""
    return isinstance(value, str) and value.startswith(DATA_URI_PREFIX)


def folder(name: str) -> str:
    root = (settings.MEDIA_HOST_FOLDER or '').strip('/')
    return f"{root}/{name}" if root else name


def _credentials() -> tuple[str, str, str]:
    cloud = settings.CLOUDINARY_CLOUD_NAME
    key = settings.CLOUDINARY_API_KEY
    secret = settings.CLOUDINARY_API_SECRET
    if not (cloud and key and secret):
        raise MediaHostError('media host is not configured')
    return cloud, key, secret


def sign(params: dict, secret: str) -> str:
    """Cloudinary request signature: sorted ``k=v`` pairs joined by ``&``, plus the secret, SHA-1."""
    payload = '&'.join(f"{k}={params[k]}" for k in sorted(params) if params[k] not in (None, ''))
    return hashlib.sha1((payload + secret).encode('utf-8')).hexdigest()


def _call(action: str, params: dict) -> dict:
    cloud, key, secret = _credentials()
    params = {**params, 'timestamp': int(time.time())}
    # the file itself is never part of the signature
    signed = {k: v for k, v in params.items() if k != 'file'}
    form = {**params, 'api_key': key, 'signature': sign(signed, secret)}
    url = f"{API_BASE}/{cloud}/image/{action}"
    try:
        r = requests.post(url, data=form, timeout=settings.MEDIA_HOST_TIMEOUT)
        r.raise_for_status()
        data = r.json()
    except (requests.RequestException, ValueError) as exc:
        raise MediaHostError(f"media host {action} failed: {exc}") from exc
    if 'error' in data:
        message = data['error'].get('message') if isinstance(data['error'], dict) else data['error']
        raise MediaHostError(f"media host {action} error: {message}")
    return data


def upload(image_data: str, folder_name: str) -> UploadResult:
    """Upload a data-URI and return its hosted URL and reference id."""
    if not image_data:
        raise MediaHostError('no image provided')
    data = _call('upload', {'file': image_data, 'folder': folder_name})
    url = data.get('secure_url') or data.get('url')
    reference_id = data.get('public_id')
    if not url or not reference_id:
        raise MediaHostError('invalid response from media host: missing url/public_id')
    return UploadResult(url=url, reference_id=reference_id)


def destroy(reference_id: str) -> None:
    data = _call('destroy', {'public_id': reference_id})
    if data.get('result') not in ('ok', 'not found'):
        raise MediaHostError(f"media host refused to delete {reference_id}: {data.get('result')}")


def discard(reference_id: Optional[str]) -> bool:
    """Best-effort delete; returns whether a delete call was made."""
    if not reference_id:
        return False
    try:
        destroy(reference_id)
    except MediaHostError as exc:
        # The asset is orphaned on the host; a sweep can reclaim it later.
        logger.warning('could not delete hosted image %s: %s', reference_id, exc)
    return True
