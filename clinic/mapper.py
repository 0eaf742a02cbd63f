"""
Mapping between stored records and the JSON shape clients consume.

A *record* is the storage view of a document: snake_case column names
turned into camelCase keys, with the store's native identifier under
``_id``.  The *wire* view is what every endpoint returns and what the
client hands to UI code: a flat string ``id`` and nested objects that
are always present.

This module has no Django imports so that :mod:`clinic.client` can use
it outside the server process.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Optional

# Optional nested objects and the defaults they get on the wire.
NESTED_DEFAULTS: dict[str, dict[str, dict[str, str]]] = {
    'config': {
        'socials': {'instagram': '', 'facebook': '', 'youtube': ''},
    },
}

DOCTOR_SOCIALS_DEFAULT = {'instagram': ''}


def camelize(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def _plain(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def to_record(obj) -> dict:
    """Return the storage record of a model instance.

    Works on anything exposing Django's ``_meta.concrete_fields``; fields
    named in ``HIDDEN_FIELDS`` (password hash, media reference ids) are
    never part of a record.
    """
    hidden = set(getattr(obj, 'HIDDEN_FIELDS', ()))
    pk_name = obj._meta.pk.attname
    record: dict[str, Any] = {'_id': getattr(obj, pk_name)}
    for field in obj._meta.concrete_fields:
        if field.attname == pk_name or field.name in hidden:
            continue
        record[camelize(field.attname)] = _plain(getattr(obj, field.attname))
    return record


def to_wire(record: Optional[dict], kind: Optional[str] = None) -> Optional[dict]:
    """Normalise one record for clients.

    ``id`` is copied from ``_id`` when the record has no explicit id, and
    the nested objects registered for ``kind`` are filled in with empty
    string defaults.  Applying it to an already-normalised object is a
    no-op, so the server and the client can both run it.
    """
    if record is None:
        return None
    wire = {k: _plain(v) for k, v in record.items() if k != '_id'}
    if not wire.get('id'):
        native = record.get('_id')
        wire['id'] = '' if native is None else str(native)
    else:
        wire['id'] = str(wire['id'])

    for key, defaults in NESTED_DEFAULTS.get(kind or '', {}).items():
        current = wire.get(key) if isinstance(wire.get(key), dict) else {}
        wire[key] = {name: (current.get(name) or default) for name, default in defaults.items()}
        # keep any extra keys the store may carry
        for name, value in current.items():
            wire[key].setdefault(name, value)

    if kind == 'content' and wire.get('type') == 'doctor' and isinstance(wire.get('data'), dict):
        data = dict(wire['data'])
        socials = data.get('socials') if isinstance(data.get('socials'), dict) else {}
        data['socials'] = {**DOCTOR_SOCIALS_DEFAULT, **socials}
        wire['data'] = data
    return wire


def to_wire_list(records: Iterable[dict], kind: Optional[str] = None) -> list[dict]:
    return [to_wire(r, kind) for r in records]


def serialize(obj, kind: Optional[str] = None) -> dict:
    """Model instance straight to its wire object."""
    return to_wire(to_record(obj), kind)


def serialize_many(objs: Iterable, kind: Optional[str] = None) -> list[dict]:
    return [serialize(o, kind) for o in objs]
