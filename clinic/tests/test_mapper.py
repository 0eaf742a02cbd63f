from datetime import datetime, timezone

from clinic.mapper import camelize, serialize, to_record, to_wire, to_wire_list
from clinic.models import BlogPost, Content, SiteConfig


def test_camelize():
    assert camelize('doctor_name') == 'doctorName'
    assert camelize('google_map_link') == 'googleMapLink'
    assert camelize('title') == 'title'


def test_id_copied_from_native_id():
    wire = to_wire({'_id': 'a' * 24, 'title': 'x'})
    assert wire == {'id': 'a' * 24, 'title': 'x'}


def test_explicit_id_wins_and_is_stringified():
    wire = to_wire({'_id': 'b' * 24, 'id': 7})
    assert wire['id'] == '7'


def test_to_wire_is_idempotent():
    once = to_wire({'_id': 'c' * 24, 'socials': {'instagram': 'https://instagram.com/x'}}, 'config')
    assert to_wire(once, 'config') == once


def test_config_socials_are_always_present():
    wire = to_wire({'_id': 'd' * 24, 'name': 'Clinic'}, 'config')
    assert wire['socials'] == {'instagram': '', 'facebook': '', 'youtube': ''}
    partial = to_wire({'_id': 'd' * 24, 'socials': {'facebook': 'fb', 'x': 'tw'}}, 'config')
    assert partial['socials'] == {'instagram': '', 'facebook': 'fb', 'youtube': '', 'x': 'tw'}


def test_doctor_content_gets_socials():
    wire = to_wire({'_id': 'e' * 24, 'type': 'doctor', 'data': {'name': 'Dr. A'}}, 'content')
    assert wire['data']['socials'] == {'instagram': ''}
    faq = to_wire({'_id': 'e' * 24, 'type': 'faq', 'data': {'question': 'q'}}, 'content')
    assert 'socials' not in faq['data']


def test_none_passes_through():
    assert to_wire(None) is None
    assert to_wire_list([]) == []


def test_dates_become_iso_strings():
    when = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)
    assert to_wire({'_id': 'f' * 24, 'createdAt': when})['createdAt'] == '2025-03-01T09:30:00+00:00'


def test_record_hides_secrets():
    config = SiteConfig(admin_password='pbkdf2_sha256$hash')
    record = to_record(config)
    assert record['_id'] == config.pk
    assert 'adminPassword' not in record
    assert 'key' not in record
    assert record['doctorName'] == 'Dr. Sonil Srivastava'


def test_serialize_blog_hides_media_reference():
    post = BlogPost(title='T', slug='t-1', summary='s', content='c', image='https://x/y.png', public_id='ref')
    wire = serialize(post)
    assert wire['id'] == post.pk
    assert 'publicId' not in wire
    assert '_id' not in wire


def test_serialize_content_with_kind():
    item = Content(type='doctor', data={'name': 'Dr. A', 'socials': {'instagram': 'ig'}})
    assert serialize(item, 'content')['data']['socials'] == {'instagram': 'ig'}
