from pathlib import Path

import pytest
from fastapi.testclient import TestClient

RAW_API_KEY = "test-raw-api-key-0123456789abcdef"


class RecordingStorage:
    """Object store double that remembers every mutation."""

    backend = "memory"

    def __init__(self, fail_put: bool = False, fail_delete: bool = False) -> None:
        self.objects: dict[str, bytes] = {}
        self.content_types: dict[str, str] = {}
        self.put_calls: list[str] = []
        self.delete_calls: list[str] = []
        self.fail_put = fail_put
        self.fail_delete = fail_delete

    def put_object(self, object_key: str, content: bytes, content_type: str) -> str:
        from reflections_api.services.storage import StorageError

        self.put_calls.append(object_key)
        if self.fail_put:
            raise StorageError("bucket unavailable")
        self.objects[object_key] = content
        self.content_types[object_key] = content_type
        return self.public_url(object_key)

    def delete_object(self, object_key: str) -> None:
        from reflections_api.services.storage import StorageError

        self.delete_calls.append(object_key)
        if self.fail_delete:
            raise StorageError("access denied")
        self.objects.pop(object_key, None)

    def public_url(self, object_key: str) -> str:
        return f"https://bucket.test/{object_key}"

    def presigned_url(self, object_key: str, expires_in: int = 900) -> str:
        return f"{self.public_url(object_key)}?expires={expires_in}"


@pytest.fixture()
def app_client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    db_file = tmp_path / "test.db"
    media_dir = tmp_path / "media"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+pysqlite:///{db_file.as_posix()}")
    monkeypatch.setenv("STORAGE_BACKEND", "local")
    monkeypatch.setenv("MEDIA_DIR", str(media_dir))
    monkeypatch.setenv("MEDIA_BASE_URL", "http://testserver/media")
    monkeypatch.setenv("AUTO_CREATE_TABLES", "true")

    from reflections_api.core.config import clear_settings_cache
    from reflections_api.db.base import Base
    from reflections_api.db.session import get_engine, reset_engine
    from reflections_api.main import create_app

    clear_settings_cache()
    reset_engine()
    Base.metadata.create_all(bind=get_engine())

    app = create_app()
    with TestClient(app) as client:
        yield client

    Base.metadata.drop_all(bind=get_engine())
    reset_engine()
    clear_settings_cache()


@pytest.fixture()
def db_session(app_client: TestClient):
    from reflections_api.db.session import get_session_factory

    with get_session_factory()() as db:
        yield db


@pytest.fixture()
def api_key(app_client: TestClient) -> str:
    from reflections_api.core.security import hash_api_key
    from reflections_api.db.session import get_session_factory
    from reflections_api.models.api_key import ApiKey

    with get_session_factory()() as db:
        db.add(ApiKey(key_hash=hash_api_key(RAW_API_KEY), name="tests"))
        db.commit()
    return RAW_API_KEY


@pytest.fixture()
def storage(app_client: TestClient) -> RecordingStorage:
    from reflections_api.api.deps import get_storage

    recording = RecordingStorage()
    app_client.app.dependency_overrides[get_storage] = lambda: recording
    yield recording
    app_client.app.dependency_overrides.pop(get_storage, None)


def auth_headers(api_key: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {api_key}"}
