"""Unit tests for client dataset loading"""

import json
import pytest
from pathlib import Path
from decision_engine.domain.exceptions import ClientDataError
from decision_engine.domain.models import ClientRecord
from decision_engine.infrastructure.data.client_data import (
    DEFAULT_CLIENT_DATA_PATH,
    load_client_registry,
    read_client_records,
)


def write_dataset(path: Path, document) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def test_read_client_records(tmp_path: Path):
    path = write_dataset(
        tmp_path / "clients.json",
        {
            "Clients_Information": [
                {"Personal_ID": "49002010976", "Age": "", "CM": 100},
                {"Personal_ID": "49002010987", "Age": "01.02.1990", "CM": 300},
            ]
        },
    )

    assert read_client_records(path) == [
        ClientRecord("49002010976", "", 100),
        ClientRecord("49002010987", "01.02.1990", 300),
    ]


def test_missing_age_defaults_to_empty(tmp_path: Path):
    path = write_dataset(tmp_path / "clients.json", {"Clients_Information": [{"Personal_ID": "1", "CM": 5}]})
    assert read_client_records(path) == [ClientRecord("1", "", 5)]


@pytest.mark.parametrize(
    "document",
    [
        {"Clients_Information": [{"Personal_ID": "1", "Age": ""}]},  # no CM
        {"Clients_Information": [{"Personal_ID": "1", "Age": "", "CM": "lots"}]},
        {"Clients_Information": [{"Personal_ID": "1", "Age": "", "CM": -1}]},
        {"Clients_Information": "not a list"},
    ],
)
def test_invalid_dataset_raises(tmp_path: Path, document):
    path = write_dataset(tmp_path / "clients.json", document)
    with pytest.raises(ClientDataError):
        read_client_records(path)


def test_load_registry_missing_file_is_empty(tmp_path: Path):
    registry = load_client_registry(tmp_path / "missing.json")
    assert len(registry) == 0
    assert registry.credit_modifier_of("49002010976") == 0


def test_load_registry_malformed_json_is_empty(tmp_path: Path):
    path = tmp_path / "clients.json"
    path.write_text("{not json", encoding="utf-8")
    assert len(load_client_registry(path)) == 0


def test_packaged_dataset_loads():
    registry = load_client_registry()
    assert DEFAULT_CLIENT_DATA_PATH.exists()
    assert registry.credit_modifier_of("49002010965") == 0
    assert registry.credit_modifier_of("49002010976") == 100
    assert registry.credit_modifier_of("49002010987") == 300
    assert registry.credit_modifier_of("49002010998") == 1000
