import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

from humanize.time import precisedelta

from access import resolve_execution_role
from alias import create_or_update_alias
from configs import DeployConfig
from exceptions import UnexpectedResponseError
from function import check_can_create, create_function, function_exists, update_function_code

logger = logging.getLogger(__name__)


@dataclass
class DeployOutputs:
    function_version: str
    function_version_arn: str
    function_alias_arn: Optional[str] = None

    def as_action_outputs(self) -> Dict[str, str]:
        outputs = {
            "function-version": self.function_version,
            "function-version-arn": self.function_version_arn,
        }
        if self.function_alias_arn is not None:
            outputs["function-alias-arn"] = self.function_alias_arn
        return outputs


def require_field(resp: Dict, key: str) -> str:
    if not (value := resp.get(key)):
        raise UnexpectedResponseError(f"internal error: '{key}' is missing from the API response")
    return value


def publish_function(lambda_client, iam_client, config: DeployConfig) -> Dict:
    if function_exists(lambda_client, config.function_name):
        return update_function_code(lambda_client, config)

    check_can_create(config)
    role_arn = resolve_execution_role(iam_client, config)
    return create_function(lambda_client, config, role_arn)


def deploy(lambda_client, iam_client, config: DeployConfig) -> DeployOutputs:
    start_time = time.time()
    published = publish_function(lambda_client, iam_client, config)

    outputs = DeployOutputs(
        function_version=require_field(published, "Version"),
        function_version_arn=require_field(published, "FunctionArn"),
    )
    logger.info(
        f"Published version {outputs.function_version} in {precisedelta(time.time() - start_time)} "
        f"(ARN: {outputs.function_version_arn})"
    )
    if not config.wants_alias:
        logger.info("No alias requested, skipping alias update!")
        return outputs

    alias = create_or_update_alias(
        lambda_client,
        function_name=config.function_name,
        version=outputs.function_version,
        alias_name=config.alias_name,
        description=config.alias_description,
    )
    outputs.function_alias_arn = require_field(alias, "AliasArn")
    logger.info(f"Alias '{config.alias_name}' available (ARN: {outputs.function_alias_arn})")
    return outputs
