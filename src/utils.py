import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Union

import boto3
import yaml
from pydantic import constr

# Pydantic fields:
NonEmptyString = constr(min_length=1, strip_whitespace=True)
StrippedString = constr(strip_whitespace=True)


@lru_cache(None)
def create_session(region: Optional[str] = None) -> boto3.session.Session:
    # Credentials are resolved by boto3 (env.vars, web identity, instance profile etc.):
    return boto3.session.Session(region_name=region)


def create_lambda_client(region: Optional[str] = None):
    return create_session(region).client("lambda")


def create_iam_client(region: Optional[str] = None):
    return create_session(region).client("iam")


def read_archive(path: Union[str, Path]) -> bytes:
    # If missing raises FileNotFoundError, which is a perfectly fine error message
    with Path(path).open("rb") as f:
        return f.read()


def parse_key_value_document(text: Optional[str]) -> Dict[str, str]:
    """Parse a JSON (or, failing that, YAML) mapping of environment variables.

    Lambda only accepts string values, so scalars like numbers and booleans are stringified.
    An empty document gives an empty mapping.
    """
    if text is None or not text.strip():
        return {}
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        parsed = yaml.safe_load(text)
    if not parsed:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a key-value mapping, got: {type(parsed).__name__}")

    variables = {}
    for key, value in parsed.items():
        if isinstance(value, (dict, list)):
            raise ValueError(f"Value of environment variable '{key}' must be a scalar, got: {type(value).__name__}")
        if isinstance(value, bool):
            value = str(value).lower()  # YAML 'true' should stay 'true', not 'True'
        variables[str(key)] = "" if value is None else str(value)
    return variables
