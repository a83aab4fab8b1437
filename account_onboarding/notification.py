# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import os
from typing import Any

import aws_cdk as cdk
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as _lambda
from aws_cdk import aws_logs as logs
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

import cdk_constants as constants
from account_onboarding.runtime.constants import LAMBDA_LOG_GROUP_PREFIX
from account_onboarding.runtime.constants import SERVICE_NAME
from account_onboarding.runtime.constants import EnvVarsNames

RUNTIME_PATH = os.path.join(os.path.dirname(os.path.realpath(__file__)), "runtime")
LAMBDA_FUNCTION_CODE_ASSET = _lambda.Code.from_asset(RUNTIME_PATH)

NOTIFY_USER_CREATION_LAMBDA_FUNCTION_HANDLER = "notify_user_creation.lambda_handler"

# AWS-published layer, see https://docs.powertools.aws.dev/lambda/python/latest/#lambda-layer
POWERTOOLS_LAYER_ACCOUNT_ID = "017000801446"
POWERTOOLS_LAYER_NAME = "AWSLambdaPowertoolsPythonV3-python312-x86_64"
POWERTOOLS_LAYER_VERSION = 7

LOG_LEVEL = "INFO"


class Notification(Construct):
    def __init__(
        self,
        scope: Construct,
        _id: str,
        temporary_password: secretsmanager.ISecret,
        contact_parameter_namespace: str,
        function_name: str = constants.NOTIFICATION_FUNCTION_NAME,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, _id, **kwargs)

        # Created up front with a static name so retention applies before the first invocation
        self.log_group = logs.LogGroup(
            self,
            "LogGroup",
            log_group_name=f"{LAMBDA_LOG_GROUP_PREFIX}{function_name}",
            retention=constants.NOTIFICATION_LOG_RETENTION,
            removal_policy=cdk.RemovalPolicy.DESTROY,
        )

        # The handler appends to this stream but never creates it
        self.log_stream = logs.LogStream(
            self,
            "LogStream",
            log_group=self.log_group,
            log_stream_name=constants.NOTIFICATION_LOG_STREAM_NAME,
            removal_policy=cdk.RemovalPolicy.DESTROY,
        )

        self.notify_lambda_function = _lambda.Function(
            self,
            "NotifyLambdaFunction",
            function_name=function_name,
            runtime=_lambda.Runtime.PYTHON_3_12,
            code=LAMBDA_FUNCTION_CODE_ASSET,
            handler=NOTIFY_USER_CREATION_LAMBDA_FUNCTION_HANDLER,
            timeout=cdk.Duration.seconds(30),
            layers=[self._create_powertools_layer()],
            environment={
                EnvVarsNames.SECRET_ARN: temporary_password.secret_arn,
                EnvVarsNames.CONTACT_PARAMETER_NAMESPACE: contact_parameter_namespace,
                EnvVarsNames.LOG_GROUP_NAME: self.log_group.log_group_name,
                EnvVarsNames.LOG_STREAM_NAME: constants.NOTIFICATION_LOG_STREAM_NAME,
                EnvVarsNames.POWERTOOLS_SERVICE_NAME: SERVICE_NAME,
                EnvVarsNames.POWERTOOLS_LOG_LEVEL: LOG_LEVEL,
            },
        )
        self.notify_lambda_function.node.add_dependency(self.log_group)

        self.allow_role_to_notify(
            self.notify_lambda_function.role,
            temporary_password,
            contact_parameter_namespace,
        )

    def _create_powertools_layer(self) -> _lambda.ILayerVersion:
        return _lambda.LayerVersion.from_layer_version_arn(
            self,
            "PowertoolsLayer",
            layer_version_arn=(
                f"arn:{cdk.Aws.PARTITION}:lambda:{cdk.Aws.REGION}:{POWERTOOLS_LAYER_ACCOUNT_ID}"
                f":layer:{POWERTOOLS_LAYER_NAME}:{POWERTOOLS_LAYER_VERSION}"
            ),
        )

    def allow_role_to_notify(
        self,
        lambda_role: iam.IRole | None,
        temporary_password: secretsmanager.ISecret,
        contact_parameter_namespace: str,
    ) -> None:
        if lambda_role is None:
            raise ValueError("Lambda role is None")

        contact_parameters_arn = cdk.Stack.of(self).format_arn(
            service="ssm",
            resource="parameter",
            resource_name=f"{contact_parameter_namespace}/*",
        )

        lambda_role.attach_inline_policy(
            iam.Policy(
                self,
                "AllowNotify",
                document=iam.PolicyDocument(
                    statements=[
                        iam.PolicyStatement(
                            actions=["ssm:GetParameter"],
                            effect=iam.Effect.ALLOW,
                            resources=[contact_parameters_arn],
                        ),
                        iam.PolicyStatement(
                            actions=["secretsmanager:GetSecretValue"],
                            effect=iam.Effect.ALLOW,
                            resources=[temporary_password.secret_arn],
                        ),
                        iam.PolicyStatement(
                            actions=[
                                "logs:CreateLogStream",
                                "logs:PutLogEvents",
                                "logs:DescribeLogStreams",
                            ],
                            effect=iam.Effect.ALLOW,
                            resources=[self.log_group.log_group_arn],
                        ),
                    ]
                ),
            )
        )
