import pytest
from django.core.cache import cache

from clinic.services import media


@pytest.fixture(autouse=True)
def _reset_throttles():
    # throttle counters live in the local-memory cache
    cache.clear()
    yield
    cache.clear()


class FakeMediaHost:
    """Records uploads and deletes instead of calling the media host."""

    def __init__(self):
        self.uploads = []
        self.destroyed = []
        self.fail_uploads = False

    def upload(self, image_data, folder_name):
        if self.fail_uploads:
            raise media.MediaHostError('upload rejected')
        n = len(self.uploads) + 1
        self.uploads.append(folder_name)
        return media.UploadResult(
            url=f"https://res.cloudinary.com/demo/image/upload/{folder_name}/img{n}.png",
            reference_id=f"{folder_name}/img{n}",
        )

    def destroy(self, reference_id):
        self.destroyed.append(reference_id)


@pytest.fixture
def media_host(monkeypatch):
    host = FakeMediaHost()
    monkeypatch.setattr(media, 'upload', host.upload)
    monkeypatch.setattr(media, 'destroy', host.destroy)
    return host
