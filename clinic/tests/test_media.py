import hashlib

import pytest
import requests
from django.core.management import call_command

from clinic.models import Content, SiteConfig
from clinic.services import media
from clinic.services.seed import INITIAL_CONTENT, seed_content
from clinic.services.site_config import check_admin_password


class FakeHTTPResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} error')

    def json(self):
        return self.payload


@pytest.fixture
def cloudinary(settings):
    settings.CLOUDINARY_CLOUD_NAME = 'demo'
    settings.CLOUDINARY_API_KEY = 'key'
    settings.CLOUDINARY_API_SECRET = 'secret'
    return settings


def test_sign_matches_cloudinary_scheme():
    expected = hashlib.sha1(b'folder=dr_sonil/hero&timestamp=1700000000secret').hexdigest()
    assert media.sign({'timestamp': 1700000000, 'folder': 'dr_sonil/hero'}, 'secret') == expected


def test_upload_posts_signed_form(cloudinary, monkeypatch):
    calls = []

    def fake_post(url, data=None, timeout=None):
        calls.append((url, data))
        return FakeHTTPResponse({'secure_url': 'https://res.cloudinary.com/demo/a.png', 'public_id': 'dr_sonil/hero/a'})

    monkeypatch.setattr(media.requests, 'post', fake_post)
    result = media.upload('data:image/png;base64,AAAA', 'dr_sonil/hero')
    assert result == media.UploadResult(url='https://res.cloudinary.com/demo/a.png', reference_id='dr_sonil/hero/a')
    url, form = calls[0]
    assert url == 'https://api.cloudinary.com/v1_1/demo/image/upload'
    assert form['api_key'] == 'key'
    assert form['signature'] == media.sign({'folder': 'dr_sonil/hero', 'timestamp': form['timestamp']}, 'secret')


def test_upload_error_payload_raises(cloudinary, monkeypatch):
    monkeypatch.setattr(media.requests, 'post', lambda *a, **k: FakeHTTPResponse({'error': {'message': 'Invalid image'}}))
    with pytest.raises(media.MediaHostError):
        media.upload('data:image/png;base64,AAAA', 'dr_sonil/hero')


def test_unconfigured_host_raises(settings):
    settings.CLOUDINARY_CLOUD_NAME = ''
    with pytest.raises(media.MediaHostError):
        media.upload('data:image/png;base64,AAAA', 'dr_sonil/hero')


def test_discard_swallows_host_errors(cloudinary, monkeypatch):
    def unreachable(*args, **kwargs):
        raise requests.ConnectionError('down')

    monkeypatch.setattr(media.requests, 'post', unreachable)
    assert media.discard('dr_sonil/hero/a') is True
    assert media.discard(None) is False


def test_destroy_accepts_not_found(cloudinary, monkeypatch):
    monkeypatch.setattr(media.requests, 'post', lambda *a, **k: FakeHTTPResponse({'result': 'not found'}))
    media.destroy('dr_sonil/hero/gone')


def test_data_uri_detection():
    assert media.is_data_uri('data:image/jpeg;base64,AAAA')
    assert not media.is_data_uri('https://res.cloudinary.com/demo/a.png')
    assert not media.is_data_uri(None)


@pytest.mark.django_db
def test_seeding_is_idempotent():
    Content.objects.all().delete()
    assert seed_content() == len(INITIAL_CONTENT)
    assert seed_content() == 0
    assert Content.objects.count() == len(INITIAL_CONTENT)


@pytest.mark.django_db
def test_seed_command_leaves_existing_content():
    Content.objects.all().delete()
    Content.objects.create(type='faq', data={'question': 'Q', 'answer': 'A'})
    call_command('seed_content')
    assert Content.objects.count() == 1


@pytest.mark.django_db
def test_reset_admin_password_command():
    call_command('reset_admin_password', '--password', 'Sunrise-Clinic-2026')
    assert SiteConfig.objects.count() == 1
    assert check_admin_password('Sunrise-Clinic-2026')
    assert not check_admin_password('admin123')
