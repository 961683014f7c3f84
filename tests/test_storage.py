"""Tests for the upload store."""

from pathlib import Path

import pytest
from litestar.datastructures import UploadFile

from app.storage import UploadStore


def test_generate_filename_uses_millis_and_sanitized_name():
    name = UploadStore.generate_filename("my birthday  photo.jpg", now=1700000000.123)
    assert name == "1700000000123-my_birthday_photo.jpg"


def test_generate_filename_strips_directories():
    assert UploadStore.generate_filename("../../etc/passwd", now=1).endswith("-passwd")
    assert UploadStore.generate_filename("C:\\Users\\me\\clip.mp4", now=1) == "1000-clip.mp4"


def test_generate_filename_without_name():
    assert UploadStore.generate_filename(None, now=2) == "2000-upload"
    assert UploadStore.generate_filename("..", now=2) == "2000-upload"


def test_public_url():
    store = UploadStore(Path("uploads"))
    assert store.public_url("http://host:5000/", "1-a.png") == "http://host:5000/uploads/1-a.png"


def test_ensure_directory_creates_parents(tmp_path: Path):
    store = UploadStore(tmp_path / "a" / "b")
    store.ensure_directory()
    store.ensure_directory()
    assert (tmp_path / "a" / "b").is_dir()


def test_resolve(tmp_path: Path):
    store = UploadStore(tmp_path)
    (tmp_path / "1-clip.mp4").write_bytes(b"video")

    assert store.resolve("http://host/uploads/1-clip.mp4") == tmp_path / "1-clip.mp4"
    assert store.resolve("1-clip.mp4") == tmp_path / "1-clip.mp4"
    assert store.resolve("http://host/uploads/2-gone.mp4") is None
    assert store.resolve("http://host/uploads/") is None


@pytest.mark.asyncio
async def test_save_writes_file(tmp_path: Path):
    store = UploadStore(tmp_path)
    upload = UploadFile(content_type="image/png", filename="cat pic.png", file_data=b"pixels")

    filename = await store.save(upload)

    assert filename.endswith("-cat_pic.png")
    assert (tmp_path / filename).read_bytes() == b"pixels"
