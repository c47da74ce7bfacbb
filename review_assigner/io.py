import json
from pathlib import Path
from typing import Any, Optional

import yaml

from .models import FileError, Person, PoolMode, ValidationError


YAML_SUFFIXES = (".yaml", ".yml")


def load_document(filepath: str) -> dict:
    """Load a pool document from a JSON or YAML file."""
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except FileNotFoundError:
        raise FileError(f"Input file not found: {filepath}")
    except json.JSONDecodeError as e:
        raise FileError(f"Error parsing JSON in {filepath}: {e}")
    except yaml.YAMLError as e:
        raise FileError(f"Error parsing YAML in {filepath}: {e}")
    except OSError as e:
        raise FileError(f"Error reading input file: {e}")

    if not isinstance(data, dict):
        raise FileError(f"Input file {filepath} must contain an object at the top level")
    return data


def parse_people(entries: Any, pool_name: str) -> list[Person]:
    """Convert raw people entries to Person objects."""
    if entries is None:
        raise FileError(f"{pool_name}: missing 'people' list")
    if not isinstance(entries, list):
        raise FileError(f"{pool_name}: 'people' must be a list")

    people = []
    for idx, entry in enumerate(entries, start=1):
        if not isinstance(entry, dict):
            raise FileError(f"{pool_name} entry {idx}: expected an object with name and employeeId")
        try:
            people.append(Person.from_dict(entry))
        except ValidationError as e:
            raise ValidationError(f"{pool_name} entry {idx}: {e.message}", e.employee_ids)
    return people


def detect_mode(document: dict) -> PoolMode:
    """Guess the pool mode from the document shape."""
    if "poolA" in document or "poolB" in document:
        return PoolMode.DUAL
    return PoolMode.SINGLE


def get_pool_section(document: dict, pool_name: str) -> Any:
    section = document.get(pool_name)
    if section is None:
        raise FileError(f"Dual-pool document is missing '{pool_name}'")
    if not isinstance(section, dict):
        raise FileError(f"'{pool_name}' must be an object with a 'people' list")
    return section.get("people")


def load_single_pool(filepath: str) -> list[Person]:
    document = load_document(filepath)
    return parse_people(document.get("people"), "people")


def load_dual_pool(filepath: str) -> dict[str, list[Person]]:
    document = load_document(filepath)
    return {
        "poolA": parse_people(get_pool_section(document, "poolA"), "poolA"),
        "poolB": parse_people(get_pool_section(document, "poolB"), "poolB"),
    }


def load_pools(filepath: str, mode: Optional[PoolMode] = None) -> tuple[PoolMode, dict[str, list[Person]]]:
    """Load pools from file, detecting the mode when it is not given.

    Returns: (mode, pools) where pools maps "people" in single mode and
    "poolA" / "poolB" in dual mode to lists of Person.
    """
    document = load_document(filepath)
    if mode is None:
        mode = detect_mode(document)

    if mode == PoolMode.SINGLE:
        return mode, {"people": parse_people(document.get("people"), "people")}

    return mode, {
        "poolA": parse_people(get_pool_section(document, "poolA"), "poolA"),
        "poolB": parse_people(get_pool_section(document, "poolB"), "poolB"),
    }
