"""
HTTP client for the clinic website API.

Used by the public pages and the admin screens (and by scripts) to talk
to the API.  Every method maps to one endpoint and returns wire objects
normalised by :func:`clinic.mapper.to_wire`.

Reads fail soft: a network error, an error status or an undecodable
body gives an empty list, the default configuration or ``None``, so a
page can render a "no data" state.  Writes fail loud by raising
:class:`ClinicAPIError`.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from .mapper import to_wire, to_wire_list

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://localhost:8000/api'

# Shown while the API is unreachable.
DEFAULT_CONFIG: Dict[str, Any] = {
    'id': '',
    'name': "Dr. Sonil Women's Care Centre",
    'doctorName': 'Dr. Sonil Srivastava',
    'designation': 'Best Gynecologist & IVF Specialist',
    'logo': '',
    'favicon': '',
    'doctorImage': '',
    'reasonsImage': '',
    'aboutVideo': '',
    'phone': '',
    'email': '',
    'address': '',
    'whatsapp': '',
    'timings': '',
    'googleMapLink': '',
    'googlePlaceId': '',
    'socials': {'instagram': '', 'facebook': '', 'youtube': ''},
    'announcement': '',
}


class ClinicAPIError(Exception):
    """A write was rejected by the API or never reached it."""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code


class ClinicClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, session: Optional[requests.Session] = None,
                 timeout: float = 30):
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token: Optional[str] = None

    # ------------------------------------------------------------------
    # transport
    # ------------------------------------------------------------------
    def _headers(self) -> Dict[str, str]:
        headers = {'Content-Type': 'application/json'}
        if self.token:
            headers['Authorization'] = f"Bearer {self.token}"
        return headers

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        return self.session.request(
            method, f"{self.base_url}{path}", headers=self._headers(), timeout=self.timeout, **kwargs,
        )

    @staticmethod
    def _session_rejected(response) -> bool:
        if response.status_code != 401:
            return False
        try:
            body = response.json()
        except ValueError:
            return False
        return isinstance(body, dict) and body.get('code') == 'not_authenticated'

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send a request; an expired or rejected session token is dropped and the call repeated once without it."""
        response = self._send(method, path, **kwargs)
        if self.token and self._session_rejected(response):
            logger.info('admin session rejected on %s %s, continuing signed out', method, path)
            self.token = None
            response = self._send(method, path, **kwargs)
        return response

    def _read(self, path: str, params: Optional[dict] = None):
        """GET ``path``; ``None`` on any transport, status or decode failure."""
        try:
            response = self._request('GET', path, params=params)
            if response.status_code >= 400:
                logger.info('GET %s answered %s', path, response.status_code)
                return None
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning('GET %s failed: %s', path, exc)
            return None

    def _read_list(self, path: str, params: Optional[dict] = None, kind: Optional[str] = None) -> List[dict]:
        data = self._read(path, params)
        if not isinstance(data, list):
            return []
        return to_wire_list(data, kind)

    def _write(self, method: str, path: str, payload: Optional[dict] = None):
        try:
            response = self._request(method, path, json=payload)
        except requests.RequestException as exc:
            raise ClinicAPIError(f"Could not reach the server: {exc}") from exc
        try:
            body = response.json()
        except ValueError:
            body = None
        if response.status_code >= 400:
            message = body.get('message') if isinstance(body, dict) else None
            code = body.get('code') if isinstance(body, dict) else None
            raise ClinicAPIError(message or f"Request failed with status {response.status_code}",
                                 status=response.status_code, code=code)
        return body

    # ------------------------------------------------------------------
    # appointments
    # ------------------------------------------------------------------
    def get_appointments(self, status: Optional[str] = None) -> List[dict]:
        return self._read_list('/appointments', {'status': status} if status else None)

    def add_appointment(self, appointment: dict) -> dict:
        return to_wire(self._write('POST', '/appointments', appointment))

    def update_appointment_status(self, appointment_id: str, status: str) -> dict:
        return to_wire(self._write('PUT', f"/appointments/{appointment_id}", {'status': status}))

    # ------------------------------------------------------------------
    # gallery
    # ------------------------------------------------------------------
    def get_gallery(self, category: Optional[str] = None, featured: Optional[bool] = None) -> List[dict]:
        params = {}
        if category:
            params['category'] = category
        if featured is not None:
            params['featured'] = 'true' if featured else 'false'
        return self._read_list('/gallery', params or None)

    def add_gallery_item(self, item: dict) -> dict:
        return to_wire(self._write('POST', '/gallery', item))

    def delete_gallery_item(self, item_id: str) -> dict:
        return self._write('DELETE', f"/gallery/{item_id}")

    def toggle_gallery_feature(self, item_id: str) -> dict:
        return to_wire(self._write('PUT', f"/gallery/{item_id}/feature"))

    # ------------------------------------------------------------------
    # hero slides
    # ------------------------------------------------------------------
    def get_hero_slides(self) -> List[dict]:
        return self._read_list('/hero')

    def add_hero_slide(self, slide: dict) -> dict:
        return to_wire(self._write('POST', '/hero', slide))

    def update_hero_slide(self, slide_id: str, slide: dict) -> dict:
        return to_wire(self._write('PUT', f"/hero/{slide_id}", slide))

    def delete_hero_slide(self, slide_id: str) -> dict:
        return self._write('DELETE', f"/hero/{slide_id}")

    # ------------------------------------------------------------------
    # site configuration & admin session
    # ------------------------------------------------------------------
    def get_config(self) -> dict:
        data = self._read('/config')
        if not isinstance(data, dict):
            return to_wire(dict(DEFAULT_CONFIG), 'config')
        return to_wire(data, 'config')

    def update_config(self, changes: dict) -> dict:
        return to_wire(self._write('PUT', '/config', changes), 'config')

    def login(self, password: str) -> bool:
        """Exchange the admin password for a session token; False when refused."""
        try:
            body = self._write('POST', '/config/login', {'password': password})
        except ClinicAPIError as exc:
            if exc.status in (400, 401):
                return False
            raise
        if not (isinstance(body, dict) and body.get('success') and body.get('token')):
            return False
        self.token = body['token']
        return True

    def logout(self) -> None:
        self.token = None

    def is_authenticated(self) -> bool:
        return bool(self.token)

    def change_password(self, new_password: str) -> dict:
        return self._write('PUT', '/config/password', {'newPassword': new_password})

    # ------------------------------------------------------------------
    # content
    # ------------------------------------------------------------------
    def get_content(self, content_type: Optional[str] = None) -> List[dict]:
        return self._read_list('/content', {'type': content_type} if content_type else None, 'content')

    def add_content(self, content_type: str, data: dict, order: int = 0) -> dict:
        body = self._write('POST', '/content', {'type': content_type, 'data': data, 'order': order})
        return to_wire(body, 'content')

    def update_content(self, content_id: str, data: dict, order: Optional[int] = None) -> dict:
        payload: Dict[str, Any] = {'data': data}
        if order is not None:
            payload['order'] = order
        return to_wire(self._write('PUT', f"/content/{content_id}", payload), 'content')

    def delete_content(self, content_id: str) -> dict:
        return self._write('DELETE', f"/content/{content_id}")

    # ------------------------------------------------------------------
    # blogs
    # ------------------------------------------------------------------
    def get_blogs(self) -> List[dict]:
        return self._read_list('/blogs')

    def get_blog(self, id_or_slug: str) -> Optional[dict]:
        """The post, or ``None`` when it does not exist (or cannot be fetched)."""
        data = self._read(f"/blogs/{id_or_slug}")
        if not isinstance(data, dict):
            return None
        return to_wire(data)

    def create_blog(self, post: dict) -> dict:
        return to_wire(self._write('POST', '/blogs', post))

    def update_blog(self, id_or_slug: str, changes: dict) -> dict:
        return to_wire(self._write('PUT', f"/blogs/{id_or_slug}", changes))

    def delete_blog(self, id_or_slug: str) -> dict:
        return self._write('DELETE', f"/blogs/{id_or_slug}")

    # ------------------------------------------------------------------
    # media
    # ------------------------------------------------------------------
    def upload(self, image: str, folder: Optional[str] = None) -> dict:
        payload = {'image': image}
        if folder:
            payload['folder'] = folder
        return self._write('POST', '/upload', payload)
