# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from functools import cache
from typing import Any

import clients
from aws_lambda_powertools.utilities.data_classes import EventBridgeEvent
from aws_lambda_powertools.utilities.data_classes import event_source
from aws_lambda_powertools.utilities.typing import LambdaContext
from constants import REQUEST_PARAMETERS_EVENT_KEY
from constants import SUCCESS_RESPONSE_BODY
from constants import USER_NAME_EVENT_KEY
from logger import logger
from notification import AccountNotifier
from notification import NotifierSettings


@cache
def notifier() -> AccountNotifier:
    return AccountNotifier(
        settings=NotifierSettings.from_environment(),
        ssm_client=clients.ssm(),
        secretsmanager_client=clients.secretsmanager(),
        logs_client=clients.logs(),
    )


# pylint: disable=unused-argument
@logger.inject_lambda_context(log_event=True, clear_state=True)
@event_source(data_class=EventBridgeEvent)
def lambda_handler(event: EventBridgeEvent, context: LambdaContext) -> dict[str, Any] | None:
    account_name = get_account_name(event)
    # Events without a user name carry nothing to notify about
    if not account_name:
        return None

    logger.append_keys(account_name=account_name)
    notifier().notify(account_name)

    return {
        "statusCode": 200,
        "body": SUCCESS_RESPONSE_BODY,
    }


def get_account_name(event: EventBridgeEvent) -> str | None:
    request_parameters = (event.get("detail") or {}).get(REQUEST_PARAMETERS_EVENT_KEY) or {}
    return request_parameters.get(USER_NAME_EVENT_KEY)
