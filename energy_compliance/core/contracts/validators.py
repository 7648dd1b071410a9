"""
JSON Schema Contract Validators

Validates raw JSON payloads crossing the engine boundary against the JSON
Schema (Draft 2020-12) documents shipped in core/contracts/schema/:
- measurement_input.json   (duct blaster readings from the field app)
- pressure_conversion.json (airflow reading to re-express at another pressure)
- compliance_result.json   (ComplianceResult.model_dump(mode="json"))

Schemas express per-field types and ranges only; cross-field invariants
(cfm25_outside <= cfm25_total, overall == tdl and dlo) are enforced by the
Pydantic models in core.domain.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loads and meta-validates JSON Schema files.

    Loaded schemas are cached per loader instance.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a schema by name.

        Args:
            schema_name: File name without extension, e.g. 'measurement_input'

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: No such schema file
            ValueError: The file is not a valid Draft 2020-12 schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Validates data against one named schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: data does not conform to the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def get_errors(self, data: Dict[str, Any]) -> list[str]:
        """
        All violations as "path: message" strings, sorted by path.

        An empty path (top-level violation) is rendered as "<root>".
        """
        messages = []
        for error in self.iter_errors(data):
            path = ".".join(str(part) for part in error.absolute_path) or "<root>"
            messages.append(f"{path}: {error.message}")
        return sorted(messages)


class MeasurementInputValidator(ContractValidator):
    def __init__(self):
        super().__init__("measurement_input")


class PressureConversionValidator(ContractValidator):
    def __init__(self):
        super().__init__("pressure_conversion")


class ComplianceResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("compliance_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_measurement_input(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: data does not conform to measurement_input.json
    """
    MeasurementInputValidator().validate(data)


def validate_pressure_conversion(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: data does not conform to pressure_conversion.json
    """
    PressureConversionValidator().validate(data)


def validate_compliance_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: data does not conform to compliance_result.json
    """
    ComplianceResultValidator().validate(data)
