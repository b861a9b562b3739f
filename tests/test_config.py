from datastudio.config import Settings, _parse_list


def test_parse_list_with_value(monkeypatch):
    monkeypatch.setenv("DEFAULT_HEADERS", "Id, Name ,Email")
    assert _parse_list("DEFAULT_HEADERS", "Name,Email") == ["Id", "Name", "Email"]


def test_parse_list_unset_uses_default(monkeypatch):
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    assert _parse_list("CORS_ALLOW_ORIGINS", "*") == ["*"]


def test_parse_list_empty_uses_default(monkeypatch):
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", " , ")
    assert _parse_list("CORS_ALLOW_ORIGINS", "*") == ["*"]


def test_settings_explicit_values():
    s = Settings(default_headers=["A"], default_row_count=2, max_upload_bytes=10)
    assert s.default_headers == ["A"]
    assert s.default_row_count == 2
    assert s.max_upload_bytes == 10
