import logging
from typing import Dict

from configs import DeployConfig
from exceptions import MissingCodeSourceError
from utils import read_archive

logger = logging.getLogger(__name__)


def function_exists(client, name: str) -> bool:
    try:
        client.get_function(FunctionName=name)
    except client.exceptions.ResourceNotFoundException:
        logger.info(f"Function '{name}' does not exist")
        return False
    logger.info(f"Function '{name}' exists")
    return True


def check_can_create(config: DeployConfig) -> None:
    if config.image_uri is None:
        raise MissingCodeSourceError(
            f"Function '{config.function_name}' does not exist and can only be created from an image: "
            "'image-uri' must be set ('zip-path' is only used to update existing functions)"
        )


def create_function(client, config: DeployConfig, role_arn: str) -> Dict:
    fn_name = config.function_name
    logger.info(f"Trying to create function '{fn_name}' from image {config.image_uri}...")
    if variables := config.environment_variables:
        logger.info(f"...with {len(variables)} environment variable(s) named: {list(variables)}")
    else:
        logger.info("...with no environment variables")

    resp = client.create_function(**config.create_fn_params(role_arn))
    logger.info(f"Function '{fn_name}' created successfully!")
    return resp


def update_function_code(client, config: DeployConfig) -> Dict:
    fn_name = config.function_name
    if config.time_out is not None or config.memory_size is not None:
        logger.info("Ignoring 'time-out' and 'memory-size': only used when creating a new function")

    if (zip_path := config.zip_path) is not None:
        logger.info(f"Updating function '{fn_name}' to archive {zip_path}")
        return client.update_function_code(FunctionName=fn_name, ZipFile=read_archive(zip_path), Publish=True)

    if (image_uri := config.image_uri) is not None:
        logger.info(f"Updating function '{fn_name}' to image {image_uri}")
        return client.update_function_code(FunctionName=fn_name, ImageUri=image_uri, Publish=True)

    raise MissingCodeSourceError("either 'image-uri' or 'zip-path' must be set")
