# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import json
import os
import time
from collections.abc import Callable
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from constants import DEFAULT_CONTACT_PARAMETER_NAMESPACE
from constants import DEFAULT_LOG_STREAM_NAME
from constants import LAMBDA_LOG_GROUP_PREFIX
from constants import EnvVarsNames
from constants import contact_parameter_name
from logger import logger

if TYPE_CHECKING:
    from mypy_boto3_logs import CloudWatchLogsClient
    from mypy_boto3_logs.type_defs import InputLogEventTypeDef
    from mypy_boto3_secretsmanager import SecretsManagerClient
    from mypy_boto3_ssm import SSMClient


# pylint: disable=too-few-public-methods
class LogMessageKeys:
    AccountName = "username"
    ContactIdentifier = "email"
    Credential = "temporaryPassword"


LOG_MESSAGE_INDENT = 2


def current_time_millis() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class NotifierSettings:
    secret_id: str
    contact_parameter_namespace: str
    log_group_name: str
    log_stream_name: str

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> Self:
        """
        Creates settings from the Lambda environment variables set at deployment time.
        The log group falls back to the function's own log group when not configured.
        """

        environ = os.environ if environ is None else environ

        secret_id = environ.get(EnvVarsNames.SECRET_ARN)
        if not secret_id:
            raise ValueError(f"{EnvVarsNames.SECRET_ARN} is required")

        log_group_name = environ.get(EnvVarsNames.LOG_GROUP_NAME) or default_log_group_name(
            environ.get(EnvVarsNames.AWS_LAMBDA_FUNCTION_NAME)
        )

        return cls(
            secret_id=secret_id,
            contact_parameter_namespace=environ.get(
                EnvVarsNames.CONTACT_PARAMETER_NAMESPACE, DEFAULT_CONTACT_PARAMETER_NAMESPACE
            ),
            log_group_name=log_group_name,
            log_stream_name=environ.get(EnvVarsNames.LOG_STREAM_NAME, DEFAULT_LOG_STREAM_NAME),
        )

    def contact_parameter_name(self, account_name: str) -> str:
        return contact_parameter_name(self.contact_parameter_namespace, account_name)


def default_log_group_name(function_name: str | None) -> str:
    if not function_name:
        raise ValueError(
            f"{EnvVarsNames.LOG_GROUP_NAME} or {EnvVarsNames.AWS_LAMBDA_FUNCTION_NAME} is required"
        )
    return f"{LAMBDA_LOG_GROUP_PREFIX}{function_name}"


@dataclass(frozen=True)
class LogEntry:
    timestamp: int
    account_name: str
    contact_identifier: str
    credential: str

    def to_message(self) -> str:
        return json.dumps(
            {
                LogMessageKeys.AccountName: self.account_name,
                LogMessageKeys.ContactIdentifier: self.contact_identifier,
                LogMessageKeys.Credential: self.credential,
            },
            indent=LOG_MESSAGE_INDENT,
        )

    def to_log_event(self) -> "InputLogEventTypeDef":
        return {"timestamp": self.timestamp, "message": self.to_message()}


class AccountNotifier:
    """
    Looks up the contact and temporary password of a newly created account
    and appends them as a single entry to the notification log stream.

    Every invocation is independent: nothing is cached between calls and a
    repeated call for the same account appends another entry.
    """

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        settings: NotifierSettings,
        ssm_client: "SSMClient",
        secretsmanager_client: "SecretsManagerClient",
        logs_client: "CloudWatchLogsClient",
        clock: Callable[[], int] = current_time_millis,
    ) -> None:
        self.settings = settings
        self.ssm_client = ssm_client
        self.secretsmanager_client = secretsmanager_client
        self.logs_client = logs_client
        self.clock = clock

    def notify(self, account_name: str) -> LogEntry:
        contact_identifier = self.get_contact_identifier(account_name)
        credential = self.get_credential(account_name)

        log_entry = LogEntry(
            timestamp=self.clock(),
            account_name=account_name,
            contact_identifier=contact_identifier,
            credential=credential,
        )
        self.append_log_entry(log_entry)

        return log_entry

    def get_contact_identifier(self, account_name: str) -> str:
        parameter_name = self.settings.contact_parameter_name(account_name)
        try:
            response = self.ssm_client.get_parameter(Name=parameter_name)
        except Exception:
            logger.exception(
                "Failed to read contact parameter",
                extra={"account_name": account_name, "parameter_name": parameter_name},
            )
            raise

        return response["Parameter"]["Value"]

    def get_credential(self, account_name: str) -> str:
        try:
            response = self.secretsmanager_client.get_secret_value(SecretId=self.settings.secret_id)
        except Exception:
            logger.exception(
                "Failed to read temporary password secret",
                extra={"account_name": account_name, "secret_id": self.settings.secret_id},
            )
            raise

        return response["SecretString"]

    def append_log_entry(self, log_entry: LogEntry) -> None:
        try:
            self.logs_client.put_log_events(
                logGroupName=self.settings.log_group_name,
                logStreamName=self.settings.log_stream_name,
                logEvents=[log_entry.to_log_event()],
            )
        except Exception:
            logger.exception(
                "Failed to append notification log entry",
                extra={
                    "account_name": log_entry.account_name,
                    "log_group_name": self.settings.log_group_name,
                    "log_stream_name": self.settings.log_stream_name,
                },
            )
            raise

        logger.info(
            "Appended notification log entry",
            extra={"account_name": log_entry.account_name, "log_stream_name": self.settings.log_stream_name},
        )
