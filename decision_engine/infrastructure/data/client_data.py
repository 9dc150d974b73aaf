"""Client dataset loading from the JSON resource file"""

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from decision_engine.domain.exceptions import ClientDataError
from decision_engine.domain.models import ClientRecord
from decision_engine.domain.registry import ClientRegistry

DEFAULT_CLIENT_DATA_PATH = Path(__file__).resolve().parents[2] / "data" / "client_data.json"


class ClientEntry(BaseModel):
    """Single client in the dataset file"""

    model_config = ConfigDict(populate_by_name=True)

    personal_id: str = Field(..., alias="Personal_ID", min_length=1)
    age: str = Field("", alias="Age")
    credit_modifier: int = Field(..., alias="CM", ge=0)

    def to_record(self) -> ClientRecord:
        return ClientRecord(personal_id=self.personal_id, age=self.age, credit_modifier=self.credit_modifier)


class ClientDataFile(BaseModel):
    """Top-level dataset document"""

    model_config = ConfigDict(populate_by_name=True)

    clients: List[ClientEntry] = Field(default_factory=list, alias="Clients_Information")


def read_client_records(path: Path) -> List[ClientRecord]:
    """
    Parse the dataset file into client records.

    Raises:
        ClientDataError: If the file is missing, unreadable or does not match the schema
    """
    try:
        document = ClientDataFile.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ClientDataError(f"Client data file not readable: {path}") from e
    except ValidationError as e:
        raise ClientDataError(f"Invalid client data in {path}: {e.error_count()} error(s)") from e

    return [entry.to_record() for entry in document.clients]


def load_client_registry(path: Optional[Path] = None) -> ClientRegistry:
    """
    Load the client registry once at startup.

    A missing or malformed dataset is logged and yields an empty registry,
    so every request is answered with "no valid loan" instead of failing.
    """
    path = path or DEFAULT_CLIENT_DATA_PATH
    logging.info("Attempting to load client data...", extra={"path": str(path)})

    try:
        records = read_client_records(path)
    except ClientDataError as e:
        logging.error(f"Failed to load client data: {e}")
        return ClientRegistry()

    registry = ClientRegistry(records)
    logging.info("Client data loaded successfully", extra={"client_count": len(registry)})
    return registry
