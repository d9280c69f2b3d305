import logging
from typing import Dict

logger = logging.getLogger(__name__)


def create_or_update_alias(client, function_name: str, version: str, alias_name: str, description: str) -> Dict:
    params = {
        "FunctionName": function_name,
        "Name": alias_name,
        "FunctionVersion": version,
        "Description": description,
    }
    logger.info(f"Creating alias '{alias_name}' pointing to version {version}")
    try:
        return client.create_alias(**params)
    except client.exceptions.ResourceConflictException as e:
        logger.info(f"- Alias already exists: {e}")

    logger.info(f"Updating alias '{alias_name}' to point to version {version}")
    return client.update_alias(**params)
