import sys
from pathlib import Path

from fastapi.testclient import TestClient

sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from greeting_service import server as greeting_server  # noqa: E402
from upload_service import server as upload_server  # noqa: E402


def test_upload_openapi_lists_only_upload_route():
    with TestClient(upload_server.create_app()) as client:
        resp = client.get("/api-doc/openapi.json")
    assert resp.status_code == 200
    doc = resp.json()
    assert doc["openapi"].startswith("3.")
    assert set(doc["paths"]) == {"/upload"}
    assert set(doc["paths"]["/upload"]) == {"post"}

    op = doc["paths"]["/upload"]["post"]
    assert op["tags"] == ["upload"]
    body = op["requestBody"]
    assert body["description"] == "Upload an audio file"
    schema = body["content"]["multipart/form-data"]["schema"]
    assert schema == {"$ref": "#/components/schemas/AudioUpload"}
    audio = doc["components"]["schemas"]["AudioUpload"]
    assert audio["properties"]["file"]["format"] == "binary"
    assert audio["required"] == ["file"]

    ok = op["responses"]["200"]
    assert ok["description"] == "File uploaded successfully"
    assert ok["content"]["application/json"]["schema"]["$ref"].endswith("/UploadResponse")
    assert "saved" in doc["components"]["schemas"]["UploadResponse"]["properties"]


def test_upload_docs_ui_is_served():
    with TestClient(upload_server.create_app()) as client:
        ui = client.get("/docs")
        assert client.get("/redoc").status_code == 404
        assert client.get("/openapi.json").status_code == 404
    assert ui.status_code == 200
    assert "swagger-ui" in ui.text
    assert "/api-doc/openapi.json" in ui.text


def test_greeting_openapi_lists_only_greeting_routes():
    with TestClient(greeting_server.create_app()) as client:
        resp = client.get("/api-docs/openapi.json")
    assert resp.status_code == 200
    doc = resp.json()
    assert set(doc["paths"]) == {"/hello", "/mveng"}
    assert all(set(item) == {"get"} for item in doc["paths"].values())
    for item in doc["paths"].values():
        assert item["get"]["tags"] == ["greeting"]

    schemas = doc["components"]["schemas"]
    assert set(schemas["HelloResponse"]["properties"]) == {"message", "status"}
    assert set(schemas["MvengResponse"]["properties"]) == {"greeting", "wisdom", "from"}


def test_greeting_swagger_ui_is_served():
    with TestClient(greeting_server.create_app()) as client:
        ui = client.get("/swagger-ui")
        assert client.get("/docs").status_code == 404
    assert ui.status_code == 200
    assert "/api-docs/openapi.json" in ui.text
