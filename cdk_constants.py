# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

# This file is named cdk_constants.py to avoid conflict with the runtime constants file.

import os
from dataclasses import dataclass

import aws_cdk as cdk
from aws_cdk import aws_logs as logs

from account_onboarding.runtime.constants import DEFAULT_CONTACT_PARAMETER_NAMESPACE
from account_onboarding.runtime.constants import DEFAULT_LOG_STREAM_NAME

ENVIRONMENT = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION"),
)


@dataclass(frozen=True)
class AccountDefinition:
    user_name: str
    group_name: str
    managed_policy_name: str
    email: str
    # Prefix of the stack output holding the user name
    output_id: str


ONBOARDED_ACCOUNTS = [
    AccountDefinition(
        user_name="s3-user",
        group_name="S3ReadOnlyGroup",
        managed_policy_name="AmazonS3ReadOnlyAccess",
        email="s3user@kponyojdk.com",
        output_id="S3User",
    ),
    AccountDefinition(
        user_name="ec2-user",
        group_name="EC2ReadOnlyGroup",
        managed_policy_name="AmazonEC2ReadOnlyAccess",
        email="ec2user@kponyojdk.com",
        output_id="EC2User",
    ),
]

NOTIFICATION_FUNCTION_NAME = "UserCreationNotificationFunction"
NOTIFICATION_LOG_RETENTION = logs.RetentionDays.TWO_WEEKS
NOTIFICATION_LOG_STREAM_NAME = DEFAULT_LOG_STREAM_NAME

CONTACT_PARAMETER_NAMESPACE = DEFAULT_CONTACT_PARAMETER_NAMESPACE

TEMPORARY_PASSWORD_LENGTH = 16
TEMPORARY_PASSWORD_EXCLUDE_CHARACTERS = '"@/\\'
