"""Pytest configuration and fixtures

Provides shared sample data (a shared options document and family
manifests), in-memory stores pre-loaded with it, and the cache, pipeline
and service built on top of them.
"""

import copy
import json
import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bimprops.editing import EditPipeline
from bimprops.families import FamilyService
from bimprops.logger import Logger, session_logger
from bimprops.options import OptionCache
from bimprops.storage import MemoryTextStore


# ============================================================================
# SAMPLE DATA
# ============================================================================

OPTIONS_PATH = "lib/family-options.json"
FAMILIES_DIR = "lib/Families"

SAMPLE_OPTIONS = {
    "FamilyOptions": [
        {
            "Id": "g1",
            "OptionProperties": [
                {
                    "Id": "p1",
                    "PropertyName": "Width",
                    "Description": "Overall width",
                    "ValueType": "Double",
                    "CategoryName": "Dimensions",
                    "Value": 123.45,
                },
                {
                    "Id": "p2",
                    "PropertyName": "Material",
                    "Description": None,
                    "ValueType": "String",
                    "CategoryName": "Материалы",
                    "Value": "Сталь",
                },
            ],
        },
        {
            "Id": "g2",
            "OptionProperties": [
                {
                    "Id": "p3",
                    "PropertyName": "Finish",
                    "ValueType": "Enumeration",
                    "CategoryName": "General",
                    "Value": None,
                },
                {
                    "Id": "p4",
                    "PropertyName": "Height",
                    "ValueType": "число",
                    "CategoryName": "Dimensions",
                    "Value": "2,500.5",
                },
            ],
        },
    ]
}

SAMPLE_MANIFESTS = {
    "f1": {
        "Id": "f1",
        "Name": "Door",
        "FamilyOptionIds": ["g1", "g2"],
        "CategoryOrder": ["Dimensions", "General"],
    },
    "broken": {
        "Id": "broken",
        "Name": "Broken Family",
        "FamilyOptionIds": ["g1", "g9"],
        "CategoryOrder": [],
    },
}


def to_json(document) -> str:
    return json.dumps(document, ensure_ascii=False, indent=2)


def manifest_path(family_id: str) -> str:
    return f"{FAMILIES_DIR}/{family_id}.json"


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def logger() -> Logger:
    return session_logger


@pytest.fixture
def options_path() -> str:
    return OPTIONS_PATH


@pytest.fixture
def families_dir() -> str:
    return FAMILIES_DIR


@pytest.fixture
def sample_options() -> dict:
    """A deep copy of the sample shared options document."""
    return copy.deepcopy(SAMPLE_OPTIONS)


@pytest.fixture
def options_text(sample_options) -> str:
    return to_json(sample_options)


@pytest.fixture
def memory_store(options_text) -> MemoryTextStore:
    """In-memory store holding the shared options file and all sample manifests."""
    documents = {OPTIONS_PATH: options_text}
    for family_id, manifest in SAMPLE_MANIFESTS.items():
        documents[manifest_path(family_id)] = to_json(manifest)
    return MemoryTextStore(documents)


@pytest.fixture
def option_cache(memory_store, logger) -> OptionCache:
    return OptionCache(memory_store, OPTIONS_PATH, logger=logger, current_locale="de_DE")


@pytest.fixture
def edit_pipeline(memory_store, option_cache, logger) -> EditPipeline:
    return EditPipeline(memory_store, OPTIONS_PATH, option_cache, logger=logger)


@pytest.fixture
def family_service(memory_store, option_cache, edit_pipeline, logger) -> FamilyService:
    return FamilyService(
        store=memory_store,
        families_dir=FAMILIES_DIR,
        option_cache=option_cache,
        edit_pipeline=edit_pipeline,
        logger=logger,
    )
