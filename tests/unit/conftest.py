from datetime import datetime, timezone

import boto3
import pytest
from botocore.stub import Stubber

from configs import DeployConfig

REGION = "us-east-1"
ACCOUNT = "123456789012"


@pytest.fixture
def gh_actions_env(monkeypatch):
    monkeypatch.setenv("GITHUB_ACTIONS", "true")
    yield


@pytest.fixture
def local_env(monkeypatch):
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    yield


def _stubbed_client(service):
    session = boto3.session.Session(
        region_name=REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    return Stubber(session.client(service))


@pytest.fixture
def lambda_stub():
    with _stubbed_client("lambda") as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def iam_stub():
    with _stubbed_client("iam") as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def make_config():
    def make(**kwargs):
        kwargs.setdefault("function_name", "fn1")
        return DeployConfig(**kwargs)

    return make


def function_arn(name, version=None):
    arn = f"arn:aws:lambda:{REGION}:{ACCOUNT}:function:{name}"
    return arn if version is None else f"{arn}:{version}"


def role_arn(name):
    return f"arn:aws:iam::{ACCOUNT}:role/{name}"


def published_response(name, version):
    return {"FunctionName": name, "FunctionArn": function_arn(name, version), "Version": version}


def alias_response(name, alias, version):
    return {"AliasArn": f"{function_arn(name)}:{alias}", "Name": alias, "FunctionVersion": version}


def role_response(name):
    return {
        "Role": {
            "Path": "/",
            "RoleName": name,
            "RoleId": "AROAEXAMPLEROLEID0001",
            "Arn": role_arn(name),
            "CreateDate": datetime(2024, 1, 1, tzinfo=timezone.utc),
        }
    }
