import json
import logging
from typing import Dict, Optional

from configs import DeployConfig
from defaults import (
    BASIC_EXECUTION_ACTIONS,
    BASIC_EXECUTION_POLICY_NAME,
    BASIC_EXECUTION_RESOURCE,
    IAM_POLICY_VERSION,
    LAMBDA_SERVICE_PRINCIPAL,
)
from exceptions import UnexpectedResponseError

logger = logging.getLogger(__name__)


def lambda_trust_policy() -> Dict:
    return {
        "Version": IAM_POLICY_VERSION,
        "Statement": [
            {
                "Effect": "Allow",
                "Principal": {"Service": LAMBDA_SERVICE_PRINCIPAL},
                "Action": "sts:AssumeRole",
            }
        ],
    }


def basic_execution_policy() -> Dict:
    return {
        "Version": IAM_POLICY_VERSION,
        "Statement": [
            {
                "Effect": "Allow",
                "Action": list(BASIC_EXECUTION_ACTIONS),
                "Resource": BASIC_EXECUTION_RESOURCE,
            }
        ],
    }


def retrieve_role_arn(iam_client, role_name: str) -> Optional[str]:
    try:
        role = iam_client.get_role(RoleName=role_name)
    except iam_client.exceptions.NoSuchEntityException:
        logger.info(f"- No existing role named '{role_name}' found")
        return None
    return role["Role"]["Arn"]


def create_basic_execution_role(iam_client, role_name: str) -> str:
    logger.info(f"Creating execution role '{role_name}' with basic logging permissions...")
    resp = iam_client.create_role(
        RoleName=role_name,
        AssumeRolePolicyDocument=json.dumps(lambda_trust_policy()),
    )
    iam_client.put_role_policy(
        RoleName=role_name,
        PolicyName=BASIC_EXECUTION_POLICY_NAME,
        PolicyDocument=json.dumps(basic_execution_policy()),
    )
    if not (role_arn := resp.get("Role", {}).get("Arn")):
        raise UnexpectedResponseError(f"Role '{role_name}' was created, but no ARN was returned")
    logger.info(f"- Role created successfully! (ARN: {role_arn})")
    return role_arn


def resolve_execution_role(iam_client, config: DeployConfig) -> str:
    if (role := config.role) is not None:
        logger.info(f"Using given execution role: {role}")
        return role

    role_name = config.function_name  # Role is named after the function
    if (role_arn := retrieve_role_arn(iam_client, role_name)) is not None:
        logger.info(f"Using existing execution role '{role_name}' (ARN: {role_arn})")
        return role_arn
    return create_basic_execution_role(iam_client, role_name)
