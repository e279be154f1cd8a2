# tests/resources/test_image_gallery_client.py
from datetime import UTC, datetime

import pytest

from shelfloom.client import BookStackClient
from shelfloom.constants import ImageType
from shelfloom.models import CreateImageArgs, ImageItem, ImageSummary, UpdateImageArgs

BASE_URL = "https://wiki.example.org/api/"
TS = "2024-05-01T10:20:30.000000Z"


def image_item(image_id: int) -> dict:
    return {
        "id": image_id,
        "name": "diagram.png",
        "url": "https://wiki.example.org/uploads/images/gallery/diagram.png",
        "path": "/uploads/images/gallery/diagram.png",
        "type": "gallery",
        "uploaded_to": 8,
        "thumbs": {"gallery": "g.png", "display": "d.png"},
        "content": {"html": "<img>", "markdown": "![diagram](d.png)"},
        "created_at": "2024-05-01 10:11:12",
        "updated_at": "2024-05-02 08:00:00",
        "created_by": {"id": 1, "name": "Admin"},
        "updated_by": {"id": 1, "name": "Admin"},
    }


@pytest.mark.asyncio
async def test_read_image_parses_zoneless_timestamps_as_utc(
    client: BookStackClient, httpx_mock
):
    httpx_mock.add_response(url=f"{BASE_URL}image-gallery/12", json=image_item(12))

    image = await client.image_gallery.read(12)

    assert isinstance(image, ImageItem)
    assert image.created_at == datetime(2024, 5, 1, 10, 11, 12, tzinfo=UTC)
    assert image.updated_at.tzinfo is not None


@pytest.mark.asyncio
async def test_create_image_uploads_multipart(client: BookStackClient, httpx_mock):
    httpx_mock.add_response(
        method="POST", url=f"{BASE_URL}image-gallery", json=image_item(12)
    )

    await client.image_gallery.create(
        CreateImageArgs(uploaded_to=8, type=ImageType.DRAWIO),
        ("diagram.png", b"\x89PNG"),
    )

    body = httpx_mock.get_request().read()
    assert b'name="uploaded_to"\r\n\r\n8' in body
    assert b'name="type"\r\n\r\ndrawio' in body
    assert b'name="image"; filename="diagram.png"' in body


@pytest.mark.asyncio
async def test_rename_image_without_file_sends_put(client: BookStackClient, httpx_mock):
    httpx_mock.add_response(
        method="PUT", url=f"{BASE_URL}image-gallery/12", json=image_item(12)
    )

    await client.image_gallery.update(12, UpdateImageArgs(name="renamed.png"))

    request = httpx_mock.get_request()
    assert request.headers["Content-Type"] == "application/json"


@pytest.mark.asyncio
async def test_list_images(client: BookStackClient, httpx_mock):
    httpx_mock.add_response(
        url=f"{BASE_URL}image-gallery",
        json={
            "data": [
                {
                    "id": 12,
                    "name": "diagram.png",
                    "url": "u",
                    "path": "p",
                    "type": "gallery",
                    "uploaded_to": 8,
                    "created_at": TS,
                    "updated_at": TS,
                    "created_by": 1,
                    "updated_by": 1,
                }
            ],
            "total": 1,
        },
    )

    result = await client.image_gallery.list()

    assert result.total == 1
    assert isinstance(result.data[0], ImageSummary)
