import re
import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1] / "src"))

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from ebsite.app import create_app
from ebsite.config import Settings

SECRET = "s3cr3t"
ACCESS_CODE = "1234"

_COOKIE_RE = re.compile(r"eb_session=([^;]*)")


def session_cookie_from(response) -> str:
    """Pull the eb_session value out of a Set-Cookie header."""
    m = _COOKIE_RE.search(response.headers.get("set-cookie", ""))
    assert m, f"no eb_session in {response.headers.get('set-cookie')!r}"
    return m.group(1).strip('"')


def cookie_header(value: str) -> dict:
    return {"Cookie": f"eb_session={value}"}


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        session_secret=SECRET,
        admin_code=ACCESS_CODE,
        db_path=str(tmp_path / "eb.sqlite3"),
    )


def make_client(settings: Settings) -> TestClient:
    # Secure cookies are only sent back over https
    return TestClient(create_app(settings), base_url="https://testserver")


@pytest.fixture()
def client(settings: Settings) -> TestClient:
    return make_client(settings)


@pytest.fixture()
def admin_cookie(client: TestClient) -> str:
    r = client.post("/api/admin/login", json={"password": ACCESS_CODE})
    assert r.status_code == 200
    client.cookies.clear()
    return session_cookie_from(r)


@pytest.fixture()
def admin(admin_cookie: str) -> dict:
    """Headers for an authenticated admin request."""
    return cookie_header(admin_cookie)
