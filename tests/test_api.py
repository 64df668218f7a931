"""API tests using the FastAPI test client."""

import pytest
from fastapi.testclient import TestClient

from schemabridge import app


@pytest.fixture
def client():
    return TestClient(app)


USER_COLUMNS = [
    {"name": "id", "type": "BIGINT(20)", "isPrimaryKey": True, "nullable": False},
    {"name": "name", "type": "VARCHAR(100)", "length": 100, "nullable": True, "comment": "display name"},
]


def test_detect(client, doris_users_ddl):
    assert client.post("/api/v1/ddl/detect", json={"ddl": doris_users_ddl}).json() == {"dialect": "doris"}
    assert client.post("/api/v1/ddl/detect", json={"ddl": ""}).json() == {"dialect": "mysql"}


def test_convert_with_columns(client):
    response = client.post(
        "/api/v1/ddl/convert",
        json={"table_name": "users", "columns": USER_COLUMNS, "ddl": "ENGINE=InnoDB COMMENT='users table'"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["source_dialect"] == "mysql"
    assert body["target_dialect"] == "doris"
    assert "UNIQUE KEY(id) COMMENT 'users table'" in body["ddl"]


def test_convert_from_ddl_only(client, mysql_users_ddl):
    response = client.post("/api/v1/ddl/convert", json={"ddl": mysql_users_ddl, "target": "olap"})
    assert response.status_code == 200
    assert response.json()["table_name"] == "users"


def test_convert_requires_columns_or_ddl(client):
    response = client.post("/api/v1/ddl/convert", json={"table_name": "users"})
    assert response.status_code == 400


def test_convert_rejects_unknown_target(client):
    response = client.post(
        "/api/v1/ddl/convert", json={"table_name": "users", "columns": USER_COLUMNS, "target": "oracle"}
    )
    assert response.status_code == 400


def test_parse_reports_display_types(client, mysql_users_ddl):
    response = client.post("/api/v1/ddl/parse", json={"ddl": mysql_users_ddl})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "users"
    assert body["dialect"] == "mysql"
    assert [c["name"] for c in body["columns"]] == ["id", "name", "price"]
    assert all("display_type" in c for c in body["columns"])


def test_parse_requires_ddl(client):
    assert client.post("/api/v1/ddl/parse", json={"ddl": ""}).status_code == 400


def test_batch_convert(client):
    response = client.post(
        "/api/v1/ddl/batch-convert",
        json={"tables": [{"name": "users", "columns": USER_COLUMNS}, {"name": "empty"}]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "partial_success"
    assert "duration_s" in body


def test_batch_convert_requires_tables(client):
    assert client.post("/api/v1/ddl/batch-convert", json={"tables": []}).status_code == 400


def test_generate_sql(client):
    response = client.post("/api/v1/sql/generate", json={"table_name": "users", "columns": USER_COLUMNS})
    assert response.status_code == 200
    assert set(response.json()) == {"select", "insert", "update", "delete"}

    response = client.post(
        "/api/v1/sql/generate", json={"table_name": "users", "columns": USER_COLUMNS, "kind": "delete"}
    )
    assert response.json() == {"delete": "DELETE FROM `users` WHERE `id` = 0;"}


def test_generate_sql_rejects_unknown_kind(client):
    response = client.post("/api/v1/sql/generate", json={"table_name": "t", "columns": [], "kind": "merge"})
    assert response.status_code == 400


def test_mapping_check(client):
    response = client.post("/api/v1/mapping/check", json={"source_type": "varchar(50)", "target_type": "int"})
    assert response.json() == {"compatible": False, "warning": "String -> Number risk"}


def test_mapping_batch(client):
    response = client.post(
        "/api/v1/mapping/batch",
        json={
            "text": "id\tuser_id\nname\tuser_name",
            "source_columns": [{"name": "id", "type": "bigint"}, {"name": "name", "type": "varchar(50)"}],
            "target_columns": [{"name": "user_id", "type": "int"}, {"name": "user_name", "type": "text"}],
        },
    )
    body = response.json()
    assert body["incompatible"] == 1
    assert [m["compatible"] for m in body["mappings"]] == [False, True]


def test_mapping_auto(client):
    response = client.post(
        "/api/v1/mapping/auto",
        json={
            "source_columns": [{"name": "ID", "type": "bigint"}, {"name": "name", "type": "varchar(50)"}],
            "target_columns": [{"name": "id", "type": "int"}, {"name": "Name", "type": "text"}],
            "mappings": [
                {"source_field": "name", "source_type": "varchar(50)", "target_field": "Name", "target_type": "text"}
            ],
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["added"] == 1
    assert [(m["source_field"], m["target_field"]) for m in body["mappings"]] == [("name", "Name"), ("ID", "id")]
    assert body["incompatible"] == 1


def test_mapping_auto_rejects_bad_existing_mappings(client):
    response = client.post("/api/v1/mapping/auto", json={"mappings": "id id"})
    assert response.status_code == 400


@pytest.mark.parametrize(
    "path, body",
    [
        ("/api/v1/ddl/detect", {"ddl": 42}),
        ("/api/v1/ddl/convert", {"ddl": ["CREATE TABLE t (a INT)"]}),
        ("/api/v1/mapping/check", {"source_type": 1, "target_type": "int"}),
        ("/api/v1/mapping/check", {"source_type": "int", "target_type": {"type": "int"}}),
        ("/api/v1/sql/generate", {"table_name": "t", "columns": ["id int"]}),
        ("/api/v1/sql/generate", {"table_name": "t", "columns": [{"name": "a", "type": "int", "nullable": "maybe"}]}),
    ],
)
def test_wrongly_typed_fields_are_bad_requests(client, path, body):
    assert client.post(path, json=body).status_code == 400
