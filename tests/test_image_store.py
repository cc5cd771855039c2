import io
import re

import pytest
from PIL import Image

from Models.allImgsModel import AllImgs
from Services.imageStore import GridFSImageStore, normalize_image

from conftest import png_bytes


def write_image(tmp_path, name, size=(32, 32), fmt="PNG"):
    path = tmp_path / name
    path.write_bytes(png_bytes(size, fmt).getvalue())
    return str(path)


def test_normalize_png_keeps_format(tmp_path):
    path = write_image(tmp_path, "wallet.png")

    data, extension, mime_type, size = normalize_image(path)

    assert extension == "png"
    assert mime_type == "image/png"
    assert size == (32, 32)
    assert Image.open(data).format == "PNG"


def test_normalize_jpeg_keeps_format(tmp_path):
    path = write_image(tmp_path, "keys.jpg", fmt="JPEG")

    _, extension, mime_type, _ = normalize_image(path)

    assert (extension, mime_type) == ("jpg", "image/jpeg")


def test_normalize_shrinks_large_images(tmp_path):
    path = write_image(tmp_path, "big.png", size=(400, 200))

    _, _, _, size = normalize_image(path, max_size=100)

    assert size == (100, 50)


def test_normalize_rejects_other_formats(tmp_path):
    path = write_image(tmp_path, "anim.gif", fmt="GIF")

    with pytest.raises(ValueError):
        normalize_image(path)


def test_upload_returns_none_for_missing_file(tmp_path):
    store = GridFSImageStore()

    assert store.upload(str(tmp_path / "gone.png")) is None
    assert store.upload(None) is None


def test_upload_returns_none_for_non_image(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("definitely not a picture")

    assert GridFSImageStore().upload(str(path)) is None


def test_upload_stores_image_and_serves_it(tmp_path, client):
    path = write_image(tmp_path, "wallet.png", size=(64, 48))

    url = GridFSImageStore(base_url="").upload(path)

    assert url == "/uploads/wallet.png"
    res = client.get(url)
    assert res.status_code == 200
    assert res.mimetype == "image/png"
    assert Image.open(io.BytesIO(res.data)).size == (64, 48)


def test_upload_with_taken_filename_gets_suffix(tmp_path):
    first_dir = tmp_path / "first"
    second_dir = tmp_path / "second"
    first_dir.mkdir()
    second_dir.mkdir()
    store = GridFSImageStore(base_url="https://cdn.test/")

    first = store.upload(write_image(first_dir, "keys.jpg", fmt="JPEG"))
    second = store.upload(write_image(second_dir, "keys.jpg", fmt="JPEG"))

    assert first == "https://cdn.test/uploads/keys.jpg"
    assert re.fullmatch(r"https://cdn\.test/uploads/keys_[0-9a-f]{8}\.jpg", second)
    assert AllImgs.objects.count() == 2


def test_unknown_image_is_404(client):
    res = client.get("/uploads/missing.png")

    assert res.status_code == 404
    assert res.get_json() == {"success": False, "message": "Image not found"}
