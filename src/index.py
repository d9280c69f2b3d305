import logging
import os
from typing import Dict

from configs import DeployConfig, running_in_github_action
from orchestrator import DeployOutputs, deploy
from setup_logging import configure_logging
from utils import create_iam_client, create_lambda_client

configure_logging()
logger = logging.getLogger(__name__)


def write_outputs(outputs: Dict[str, str]) -> None:
    if running_in_github_action():
        with open(os.environ["GITHUB_OUTPUT"], "a") as fh:
            for name, value in outputs.items():
                print(f"{name}={value}", file=fh)
    else:
        for name, value in outputs.items():
            print(f"{name}={value}")


def main(config: DeployConfig) -> DeployOutputs:
    lambda_client = create_lambda_client(config.aws_region)
    iam_client = create_iam_client(config.aws_region)

    outputs = deploy(lambda_client, iam_client, config)
    write_outputs(outputs.as_action_outputs())
    return outputs


def run() -> DeployOutputs:
    try:
        return main(DeployConfig.from_envvars())
    except Exception as e:
        # Both pydantic and AWS errors carry their details in the message, keep them in the annotation:
        logger.error(f"Deployment failed! {type(e).__name__}: {e}")
        raise


if __name__ == "__main__":
    run()
