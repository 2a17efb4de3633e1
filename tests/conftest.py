import json
import os
from pathlib import Path
from typing import Callable, Optional

import pytest
from pydantic import TypeAdapter

from systemmap import CelestialBodyRecord, SystemTopology, build_system_topology

TEST_FOLDER_ROOT = Path(os.path.realpath(__file__)).parent
_TEST_ASSETS_DIR = TEST_FOLDER_ROOT / "assets"

TEST_ASSETS_SYSTEMS = _TEST_ASSETS_DIR / "systems"
BINARY_SYSTEM_NAME = "Synuefe XR-H d11-102"
SYSTEM_NAME = "Col 285 Sector AB-C d12"

_BODY_LIST_ADAPTER = TypeAdapter(list[CelestialBodyRecord])

BodyFactory = Callable[..., CelestialBodyRecord]


def load_test_system(file_name: str) -> list[CelestialBodyRecord]:
    """Load the body records stored in TEST_ASSETS_SYSTEMS/<file_name>.json"""
    with open(TEST_ASSETS_SYSTEMS / f"{file_name}.json", "rb") as f:
        return _BODY_LIST_ADAPTER.validate_json(f.read())


@pytest.fixture(scope="module")
def binary_system_bodies() -> list[CelestialBodyRecord]:
    return load_test_system("binary_system")


@pytest.fixture(scope="module")
def binary_system_topology(binary_system_bodies) -> SystemTopology:
    return build_system_topology(binary_system_bodies, BINARY_SYSTEM_NAME)


@pytest.fixture
def make_body() -> BodyFactory:
    """Factory of body records named after SYSTEM_NAME, with an optional Parents list"""

    def _make_body(
        body_id: int,
        suffix: str,
        body_type: str = "Planet",
        parents: Optional[list[dict[str, int]]] = None,
        mass: Optional[float] = None,
        sub_type: str = "",
        raw_json: Optional[str] = None,
        **kwargs,
    ) -> CelestialBodyRecord:
        if raw_json is None and parents is not None:
            raw_json = json.dumps({"Parents": parents})
        return CelestialBodyRecord(
            body_id=body_id,
            name=f"{SYSTEM_NAME} {suffix}".strip(),
            body_type=body_type,
            sub_type=sub_type,
            mass=mass,
            raw_json=raw_json,
            **kwargs,
        )

    return _make_body


@pytest.fixture
def system_name() -> str:
    return SYSTEM_NAME


@pytest.fixture
def binary_system_name() -> str:
    return BINARY_SYSTEM_NAME
