DEFAULT_ALIAS_NAME = ""
DEFAULT_ALIAS_DESCRIPTION = ""
DEFAULT_ENVIRONMENT_VARIABLES = "{}"

# Minimal execution role, created only when none is given or found:
LAMBDA_SERVICE_PRINCIPAL = "lambda.amazonaws.com"
BASIC_EXECUTION_POLICY_NAME = "LambdaBasicExecution"
BASIC_EXECUTION_ACTIONS = ("logs:CreateLogGroup", "logs:CreateLogStream", "logs:PutLogEvents")
BASIC_EXECUTION_RESOURCE = "arn:aws:logs:*:*:*"
IAM_POLICY_VERSION = "2012-10-17"
