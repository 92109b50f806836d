from pathlib import Path

import pytest

from ts_oas_generator.generator.template_engine import TypeScriptCodeGenerator
from ts_oas_generator.parser.oas_parser import OASParser

SPECS_DIR = Path(__file__).parent / "specs"


@pytest.fixture
def specs_dir() -> Path:
    """Directory holding the fixture specifications."""
    return SPECS_DIR


@pytest.fixture
def parser() -> OASParser:
    return OASParser()


@pytest.fixture
def generator() -> TypeScriptCodeGenerator:
    return TypeScriptCodeGenerator()


@pytest.fixture
def petstore_v2_path(specs_dir: Path) -> Path:
    return specs_dir / "petstore_v2.yaml"


@pytest.fixture
def petstore_v3_path(specs_dir: Path) -> Path:
    return specs_dir / "petstore_v3.json"
