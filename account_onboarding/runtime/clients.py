# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from functools import cache
from typing import TYPE_CHECKING

import boto3

if TYPE_CHECKING:
    from mypy_boto3_logs import CloudWatchLogsClient
    from mypy_boto3_secretsmanager import SecretsManagerClient
    from mypy_boto3_ssm import SSMClient


@cache
def ssm() -> "SSMClient":
    return boto3.client("ssm")


@cache
def secretsmanager() -> "SecretsManagerClient":
    return boto3.client("secretsmanager")


@cache
def logs() -> "CloudWatchLogsClient":
    return boto3.client("logs")
