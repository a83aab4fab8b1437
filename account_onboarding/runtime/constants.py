# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0


# pylint: disable=too-few-public-methods
class EnvVarsNames:
    SECRET_ARN = "SECRET_ARN"
    CONTACT_PARAMETER_NAMESPACE = "CONTACT_PARAMETER_NAMESPACE"
    LOG_GROUP_NAME = "LOG_GROUP_NAME"
    LOG_STREAM_NAME = "LOG_STREAM_NAME"
    AWS_LAMBDA_FUNCTION_NAME = "AWS_LAMBDA_FUNCTION_NAME"
    POWERTOOLS_SERVICE_NAME = "POWERTOOLS_SERVICE_NAME"
    POWERTOOLS_LOG_LEVEL = "POWERTOOLS_LOG_LEVEL"


SERVICE_NAME = "account-onboarding"

DEFAULT_CONTACT_PARAMETER_NAMESPACE = "iam"
CONTACT_PARAMETER_SUFFIX = "email"
DEFAULT_LOG_STREAM_NAME = "test"
LAMBDA_LOG_GROUP_PREFIX = "/aws/lambda/"

REQUEST_PARAMETERS_EVENT_KEY = "requestParameters"
USER_NAME_EVENT_KEY = "userName"

SUCCESS_RESPONSE_BODY = "Successfully logged user creation details"


def contact_parameter_name(namespace: str, account_name: str) -> str:
    return f"/{namespace}/{account_name}/{CONTACT_PARAMETER_SUFFIX}"
