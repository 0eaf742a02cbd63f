import pytest
from django.urls import reverse
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from clinic.authentication import issue_admin_token
from clinic.models import GalleryItem, HeroSlide, SiteConfig
from clinic.services.site_config import check_admin_password

pytestmark = pytest.mark.django_db

DATA_URI = 'data:image/png;base64,iVBORw0KGgo='


def admin_client():
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_admin_token()}')
    return client


def login(client, password):
    return client.post(reverse('config-login'), {'password': password}, format='json')


def test_login_with_default_password_after_first_read():
    client = APIClient()
    assert client.get(reverse('config')).status_code == 200
    r = login(client, 'admin123')
    assert r.status_code == 200
    assert r.data['success'] is True
    assert r.data['token']
    bad = login(client, 'wrong')
    assert bad.status_code == 401
    assert bad.data == {'success': False, 'message': 'Invalid password'}


def test_login_fails_closed_before_config_exists():
    assert not SiteConfig.objects.exists()
    r = login(APIClient(), 'admin123')
    assert r.status_code == 401
    assert r.data['message'] == 'Invalid password'


def test_login_without_password_is_unauthorized():
    r = APIClient().post(reverse('config-login'), {}, format='json')
    assert r.status_code == 401


def test_password_is_stored_hashed():
    APIClient().get(reverse('config'))
    stored = SiteConfig.objects.get().admin_password
    assert stored != 'admin123'
    assert check_admin_password('admin123')


def test_token_from_login_unlocks_admin_endpoints():
    client = APIClient()
    client.get(reverse('config'))
    token = login(client, 'admin123').data['token']
    assert client.get(reverse('appointments')).status_code == 401
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
    assert client.get(reverse('appointments')).status_code == 200


@pytest.mark.parametrize('header', ['Bearer not-a-token', 'Bearer', 'Token abc'])
def test_bad_credentials_are_rejected(header):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=header)
    r = client.post(reverse('hero'), {'image': 'https://x/y.png', 'title': 't', 'subtitle': 's'}, format='json')
    assert r.status_code == 401
    assert r.data['ok'] is False
    assert not HeroSlide.objects.exists()


def test_token_without_admin_scope_is_rejected():
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken()}')
    assert client.get(reverse('appointments')).status_code == 401


def test_change_password_rotates_login():
    client = admin_client()
    r = client.put(reverse('config-password'), {'newPassword': 'Sunrise-Clinic-2026'}, format='json')
    assert r.status_code == 200
    assert r.data == {'success': True, 'message': 'Password updated'}
    anon = APIClient()
    assert login(anon, 'admin123').status_code == 401
    assert login(anon, 'Sunrise-Clinic-2026').status_code == 200


def test_weak_password_is_refused():
    client = admin_client()
    r = client.put(reverse('config-password'), {'newPassword': '1234'}, format='json')
    assert r.status_code == 400
    assert r.data['code'] == 'validation_error'


def test_change_password_requires_session():
    r = APIClient().put(reverse('config-password'), {'newPassword': 'Sunrise-Clinic-2026'}, format='json')
    assert r.status_code == 401


def test_login_is_throttled():
    client = APIClient()
    statuses = [login(client, 'wrong').status_code for _ in range(11)]
    assert statuses[:10] == [401] * 10
    assert statuses[10] == 429


def test_featured_video_cap(settings, media_host):
    settings.GALLERY_MAX_FEATURED_VIDEOS = 3
    for n in range(3):
        GalleryItem.objects.create(url=f'https://youtube.com/watch?v={n}', title=f'v{n}', type='video', featured=True)
    r = admin_client().post(reverse('gallery'), {
        'url': 'https://instagram.com/reel/x', 'title': 'reel', 'type': 'reel', 'featured': True,
    }, format='json')
    assert r.status_code == 400
    assert 'featured' in r.data['errors']
    assert GalleryItem.objects.count() == 3


def test_featured_image_cap_on_toggle(settings):
    settings.GALLERY_MAX_FEATURED_IMAGES = 2
    for n in range(2):
        GalleryItem.objects.create(url=f'https://cdn.example.com/{n}.png', title=f'i{n}', featured=True)
    extra = GalleryItem.objects.create(url='https://cdn.example.com/x.png', title='x')
    client = admin_client()
    assert client.put(reverse('gallery-feature', args=[extra.pk])).status_code == 400
    # un-featuring is always allowed
    featured = GalleryItem.objects.filter(featured=True).first()
    r = client.put(reverse('gallery-feature', args=[featured.pk]))
    assert r.status_code == 200 and r.data['featured'] is False
    assert client.put(reverse('gallery-feature', args=[extra.pk])).status_code == 200


def test_upload_failure_aborts_create(media_host):
    media_host.fail_uploads = True
    r = admin_client().post(reverse('hero'), {'image': DATA_URI, 'title': 't', 'subtitle': 's'}, format='json')
    assert r.status_code == 502
    assert r.data == {'ok': False, 'message': 'Image upload failed', 'code': 'upstream_error'}
    assert not HeroSlide.objects.exists()


def test_config_branding_upload_failure_keeps_previous_value(media_host):
    client = admin_client()
    client.get(reverse('config'))
    SiteConfig.objects.update(logo='https://cdn.example.com/logo.png')
    media_host.fail_uploads = True
    r = client.put(reverse('config'), {'logo': DATA_URI, 'name': 'Sonil Clinic'}, format='json')
    assert r.status_code == 200
    assert r.data['name'] == 'Sonil Clinic'
    assert r.data['logo'] == 'https://cdn.example.com/logo.png'


def test_hero_image_replaced_before_old_one_is_deleted(media_host):
    slide = HeroSlide.objects.create(
        image='https://cdn.example.com/old.png', public_id='dr_sonil/hero/old', title='t', subtitle='s',
    )
    r = admin_client().put(reverse('hero-detail', args=[slide.pk]), {'image': DATA_URI}, format='json')
    assert r.status_code == 200
    slide.refresh_from_db()
    assert slide.public_id == 'dr_sonil/hero/img1'
    assert slide.title == 't'
    assert media_host.destroyed == ['dr_sonil/hero/old']


def test_failed_save_discards_new_upload_and_keeps_old(media_host, monkeypatch):
    from django.db import DatabaseError

    slide = HeroSlide.objects.create(
        image='https://cdn.example.com/old.png', public_id='dr_sonil/hero/old', title='t', subtitle='s',
    )

    def broken_save(self, *args, **kwargs):
        raise DatabaseError('disk full')

    monkeypatch.setattr(HeroSlide, 'save', broken_save)
    r = admin_client().put(reverse('hero-detail', args=[slide.pk]), {'image': DATA_URI}, format='json')
    assert r.status_code == 500
    assert r.data['code'] == 'server_error'
    assert media_host.destroyed == ['dr_sonil/hero/img1']
    assert HeroSlide.objects.get(pk=slide.pk).public_id == 'dr_sonil/hero/old'


def test_generic_upload_requires_data_uri(media_host):
    client = admin_client()
    bad = client.post(reverse('upload'), {'image': 'https://example.com/a.png'}, format='json')
    assert bad.status_code == 400
    ok = client.post(reverse('upload'), {'image': DATA_URI, 'folder': 'blogs'}, format='json')
    assert ok.status_code == 200
    assert ok.data['public_id'] == 'dr_sonil/blogs/img1'
    assert media_host.uploads == ['dr_sonil/blogs']


def test_healthz():
    r = APIClient().get('/healthz')
    assert r.status_code == 200
    assert r.json()['db'] is True
