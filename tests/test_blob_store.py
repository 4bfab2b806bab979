import io

import pytest
from botocore.exceptions import ClientError
from fastapi import UploadFile
from starlette.datastructures import Headers

import jobboard.services.blob_store as blob_mod
from jobboard.core.errors import UpstreamFailureError, ValidationError
from jobboard.services.blob_store import BlobPayload, BlobStore, build_key, read_upload, store_payload


def _upload(data: bytes, filename: str, content_type: str) -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class _FailingClient:
    def put_object(self, **kwargs):
        raise ClientError({"Error": {"Code": "500", "Message": "boom"}}, "PutObject")

    def delete_object(self, **kwargs):
        raise ClientError({"Error": {"Code": "500", "Message": "boom"}}, "DeleteObject")


def test_put_returns_public_url(blob_store, s3_client):
    url = blob_store.put("logos/u1/a.png", b"png", "image/png")
    assert url == "https://blobs.example.test/logos/u1/a.png"
    assert s3_client.objects["logos/u1/a.png"] == (b"png", "image/png")


def test_delete_by_url(blob_store, s3_client):
    url = blob_store.put("portfolios/s1/cv.pdf", b"%PDF", "application/pdf")
    blob_store.delete(url)
    assert s3_client.deleted == ["portfolios/s1/cv.pdf"]
    assert "portfolios/s1/cv.pdf" not in s3_client.objects


def test_delete_skips_foreign_url(blob_store, s3_client):
    blob_store.delete("https://elsewhere.example.com/x.png")
    blob_store.delete("")
    assert s3_client.deleted == []


def test_default_base_url_uses_bucket_and_region(monkeypatch):
    monkeypatch.setattr(blob_mod.settings, "aws_region", "eu-west-1")
    store = BlobStore(object(), "my-bucket")
    assert store.url_for("k") == "https://my-bucket.s3.eu-west-1.amazonaws.com/k"


def test_put_failure_raises_upstream_and_delete_failure_is_swallowed():
    store = BlobStore(_FailingClient(), "b", "https://blobs.example.test")
    with pytest.raises(UpstreamFailureError):
        store.put("k", b"x", "text/plain")
    store.delete("https://blobs.example.test/k")


def test_build_key_keeps_extension():
    key = build_key("portfolios", "s1", "My CV.PDF")
    assert key.startswith("portfolios/s1/")
    assert key.endswith(".pdf")


def test_read_upload_none_and_validation(monkeypatch):
    assert read_upload(None) is None
    payload = read_upload(_upload(b"abc", "cv.pdf", "application/pdf"))
    assert payload == BlobPayload(data=b"abc", content_type="application/pdf", filename="cv.pdf")

    with pytest.raises(ValidationError):
        read_upload(_upload(b"", "empty.pdf", "application/pdf"))
    with pytest.raises(ValidationError):
        read_upload(_upload(b"abc", "cv.pdf", "application/pdf"), image_only=True)

    monkeypatch.setattr(blob_mod.settings, "max_upload_mb", 0)
    with pytest.raises(ValidationError):
        read_upload(_upload(b"abc", "a.png", "image/png"), image_only=True)


def test_store_payload_uses_folder_and_owner(blob_store, s3_client):
    url = store_payload(blob_store, BlobPayload(b"img", "image/png", "me.png"), "profile_photos", "u9")
    key = blob_store.key_for(url)
    assert key.startswith("profile_photos/u9/")
    assert key in s3_client.objects
