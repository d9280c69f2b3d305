import logging
from os import getenv
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PositiveInt, field_validator, model_validator
from pydantic.fields import FieldInfo

from defaults import DEFAULT_ALIAS_DESCRIPTION, DEFAULT_ALIAS_NAME, DEFAULT_ENVIRONMENT_VARIABLES
from utils import NonEmptyString, StrippedString, parse_key_value_document

logger = logging.getLogger(__name__)


def running_in_github_action() -> bool:
    return getenv("GITHUB_ACTIONS") == "true"


def env_var_name(parameter: str) -> str:
    if running_in_github_action():
        # Github keeps dashes in input names, e.g. 'INPUT_FUNCTION-NAME':
        return f"INPUT_{parameter.upper()}"
    return parameter.upper().replace("-", "_")


def parameter_names(name: str, field: FieldInfo) -> List[str]:
    if isinstance(field.validation_alias, AliasChoices):
        return [choice for choice in field.validation_alias.choices if isinstance(choice, str)]
    return [field.alias or name]


class GithubActionModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_envvars(cls):
        """Magic parameter-load from env.vars. (Github Action Syntax)"""

        def get_parameter(key):
            # Missing args passed as empty strings, load as `None` instead:
            return getenv(env_var_name(key), "").strip() or None

        params = {}
        for name, field in cls.model_fields.items():
            for key in parameter_names(name, field):
                if (value := get_parameter(key)) is not None:
                    params[key] = value
                    break
        return cls.model_validate(params)


class DeployConfig(GithubActionModel):
    function_name: NonEmptyString = Field(alias="function-name")
    image_uri: Optional[NonEmptyString] = Field(None, alias="image-uri")
    zip_path: Optional[Path] = Field(None, alias="zip-path")
    alias_name: StrippedString = Field(DEFAULT_ALIAS_NAME, alias="alias-name")
    alias_description: str = Field(DEFAULT_ALIAS_DESCRIPTION, alias="alias-description")
    time_out: Optional[PositiveInt] = Field(None, alias="time-out")
    memory_size: Optional[PositiveInt] = Field(None, alias="memory-size")
    role: Optional[NonEmptyString] = Field(None, alias="role")
    environment_variables: Dict[str, str] = Field(
        DEFAULT_ENVIRONMENT_VARIABLES,
        validate_default=True,
        validation_alias=AliasChoices("environment-variables", "environmentVariables", "environment_variables"),
    )
    aws_region: Optional[NonEmptyString] = Field(None, alias="aws-region")

    @field_validator("environment_variables", mode="before")
    @classmethod
    def parse_environment_variables(cls, value):
        if isinstance(value, str):
            try:
                return parse_key_value_document(value)
            except Exception as e:
                raise ValueError(
                    "Invalid 'environment-variables', must be a JSON (or YAML) mapping of names to values"
                ) from e
        return value

    @model_validator(mode="after")
    def check_code_sources(self):
        if self.zip_path is not None and self.image_uri is not None:
            logger.warning(
                f"Both 'zip-path' and 'image-uri' given, the archive '{self.zip_path}' will be used when "
                "updating an existing function, the image only when creating a new one!"
            )
        return self

    @property
    def wants_alias(self) -> bool:
        return bool(self.alias_name)

    def create_fn_params(self, role_arn: str) -> Dict:
        params = {
            "FunctionName": self.function_name,
            "PackageType": "Image",
            "Code": {"ImageUri": self.image_uri},
            "Role": role_arn,
            "Timeout": self.time_out,
            "MemorySize": self.memory_size,
            "Environment": {"Variables": self.environment_variables},
            "Publish": True,
        }
        # botocore rejects explicit `None`s:
        return {k: v for k, v in params.items() if v is not None}
