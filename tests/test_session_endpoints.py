import re

from conftest import ACCESS_CODE, SECRET, cookie_header, make_client, session_cookie_from

from ebsite.auth.signer import verify
from ebsite.auth.token import decode
from ebsite.config import Settings

UUID_RE = r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"


def test_login_with_correct_code_sets_signed_cookie(client):
    r = client.post("/api/admin/login", json={"password": ACCESS_CODE})
    assert r.status_code == 200
    assert r.json() == {"success": True}

    value = session_cookie_from(r)
    assert re.fullmatch(UUID_RE + r"\.[0-9a-f]{64}", value)
    # the token travels only in the cookie
    assert value not in r.text

    tok = decode(value)
    assert verify(SECRET, tok.session_id, tok.signature)


def test_login_cookie_attributes(client):
    r = client.post("/api/admin/login", json={"password": ACCESS_CODE})
    header = r.headers["set-cookie"].lower()
    assert "path=/" in header
    assert "httponly" in header
    assert "secure" in header
    assert "samesite=strict" in header
    assert "max-age=604800" in header

    # exact wire text as emitted by starlette (attributes sorted, samesite lowercase)
    value = session_cookie_from(r)
    assert r.headers["set-cookie"] == (
        f"eb_session={value}; HttpOnly; Max-Age=604800; Path=/; SameSite=strict; Secure"
    )


def test_each_login_mints_a_new_session(client):
    a = session_cookie_from(client.post("/api/admin/login", json={"password": ACCESS_CODE}))
    b = session_cookie_from(client.post("/api/admin/login", json={"password": ACCESS_CODE}))
    assert decode(a).session_id != decode(b).session_id


def test_login_with_wrong_code_is_401_without_cookie(client):
    for candidate in ["0000", " 1234", "1234 ", "", None, 1234]:
        r = client.post("/api/admin/login", json={"password": candidate})
        assert r.status_code == 401, candidate
        assert r.json() == {"error": "Código de acceso incorrecto"}
        assert "set-cookie" not in r.headers


def test_login_without_body_is_401(client):
    r = client.post("/api/admin/login")
    assert r.status_code == 401
    assert r.json()["error"] == "Código de acceso incorrecto"


def test_unparsable_login_body_gets_the_generic_answer(client):
    attempts = [
        {"content": "{bad", "headers": {"Content-Type": "application/json"}},
        {"content": b"\xff\xfe\x00", "headers": {"Content-Type": "application/json"}},
        {"data": {"password": ACCESS_CODE}},
        {"json": [ACCESS_CODE]},
        # a bare JSON string equal to the code is still not an object with `password`
        {"json": ACCESS_CODE},
    ]
    for kwargs in attempts:
        r = client.post("/api/admin/login", **kwargs)
        assert r.status_code == 401, kwargs
        assert r.json() == {"error": "Código de acceso incorrecto"}
        assert "set-cookie" not in r.headers


def test_login_fails_closed_when_unconfigured(tmp_path):
    for secret, code in [(None, "1234"), ("s3cr3t", None), (None, None)]:
        c = make_client(Settings(session_secret=secret, admin_code=code, db_path=str(tmp_path / "x.sqlite3")))
        # an unset code must not match an absent password
        r = c.post("/api/admin/login", json={})
        assert r.status_code == 500
        assert "ADMIN_CODE o SESSION_SECRET" in r.json()["error"]
        assert "set-cookie" not in r.headers

        r = c.post("/api/admin/login", json={"password": "1234"})
        assert r.status_code == 500


def test_logout_clears_cookie(client, admin):
    r = client.post("/api/admin/logout", headers=admin)
    assert r.status_code == 200
    assert r.json() == {"success": True}

    header = r.headers["set-cookie"].lower()
    assert session_cookie_from(r) == ""
    assert "max-age=0" in header
    assert "path=/" in header
    assert "httponly" in header
    assert "secure" in header
    assert "samesite=strict" in header
    assert r.headers["set-cookie"] == 'eb_session=""; HttpOnly; Max-Age=0; Path=/; SameSite=strict; Secure'


def test_logout_then_guarded_request_is_401(client, admin):
    r = client.post("/api/admin/logout", headers=admin)
    cleared = session_cookie_from(r)

    r = client.get("/api/admin/leads", headers=cookie_header(cleared))
    assert r.status_code == 401


def test_cookie_jar_flow(client):
    client.post("/api/admin/login", json={"password": ACCESS_CODE})
    assert client.get("/api/admin/me").status_code == 200

    client.post("/api/admin/logout")
    assert client.get("/api/admin/me").status_code == 401


def test_reference_scenario(client):
    r = client.post("/api/admin/login", json={"password": "1234"})
    assert r.status_code == 200
    value = session_cookie_from(r)
    client.cookies.clear()

    r = client.post("/api/admin/login", json={"password": "0000"})
    assert r.status_code == 401
    assert r.json() == {"error": "Código de acceso incorrecto"}

    r = client.get("/api/admin/me")
    assert r.status_code == 401
    assert r.json()["authenticated"] is False

    r = client.get("/api/admin/me", headers=cookie_header(value))
    assert r.status_code == 200
    assert r.json() == {"authenticated": True}

    last = value[-1]
    tampered = value[:-1] + ("0" if last != "0" else "1")
    r = client.get("/api/admin/me", headers=cookie_header(tampered))
    assert r.status_code == 401
    assert r.json()["authenticated"] is False


def test_session_from_another_secret_is_rejected(tmp_path, admin_cookie):
    other = make_client(
        Settings(session_secret="different", admin_code=ACCESS_CODE, db_path=str(tmp_path / "o.sqlite3"))
    )
    r = other.get("/api/admin/me", headers=cookie_header(admin_cookie))
    assert r.status_code == 401


def test_session_is_accepted_by_any_app_sharing_the_secret(tmp_path, admin_cookie):
    other = make_client(
        Settings(session_secret=SECRET, admin_code=ACCESS_CODE, db_path=str(tmp_path / "o.sqlite3"))
    )
    r = other.get("/api/admin/me", headers=cookie_header(admin_cookie))
    assert r.status_code == 200
