import pytest
from botocore.exceptions import ClientError
from conftest import alias_response

from alias import create_or_update_alias

ALIAS_PARAMS = {"FunctionName": "fn1", "Name": "prod", "FunctionVersion": "7", "Description": "Production"}


def test_alias_is_created(lambda_stub):
    lambda_stub.add_response("create_alias", alias_response("fn1", "prod", "7"), ALIAS_PARAMS)

    resp = create_or_update_alias(lambda_stub.client, "fn1", "7", "prod", "Production")

    assert resp["FunctionVersion"] == "7"


def test_existing_alias_is_updated_on_conflict(lambda_stub):
    lambda_stub.add_client_error(
        "create_alias",
        service_error_code="ResourceConflictException",
        service_message="Alias already exists: prod",
        http_status_code=409,
        expected_params=ALIAS_PARAMS,
    )
    lambda_stub.add_response("update_alias", alias_response("fn1", "prod", "7"), ALIAS_PARAMS)

    resp = create_or_update_alias(lambda_stub.client, "fn1", "7", "prod", "Production")

    assert resp["AliasArn"].endswith(":fn1:prod")
    assert resp["FunctionVersion"] == "7"


def test_other_create_errors_do_not_fall_back_to_update(lambda_stub):
    lambda_stub.add_client_error("create_alias", service_error_code="TooManyRequestsException", http_status_code=429)

    with pytest.raises(ClientError) as exc_info:
        create_or_update_alias(lambda_stub.client, "fn1", "7", "prod", "Production")
    assert exc_info.value.response["Error"]["Code"] == "TooManyRequestsException"


def test_update_errors_after_conflict_propagate(lambda_stub):
    lambda_stub.add_client_error("create_alias", service_error_code="ResourceConflictException", http_status_code=409)
    lambda_stub.add_client_error("update_alias", service_error_code="ResourceNotFoundException", http_status_code=404)

    with pytest.raises(lambda_stub.client.exceptions.ResourceNotFoundException):
        create_or_update_alias(lambda_stub.client, "fn1", "7", "prod", "Production")
