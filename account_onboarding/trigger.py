# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from typing import Any

from aws_cdk import aws_events as events
from aws_cdk import aws_events_targets as targets
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

RULE_DESCRIPTION = "Rule to detect IAM user creation"

# IAM publishes CloudTrail management events to EventBridge in us-east-1 only
USER_CREATION_EVENT_PATTERN = events.EventPattern(
    source=["aws.iam"],
    detail_type=["AWS API Call via CloudTrail"],
    detail={
        "eventSource": ["iam.amazonaws.com"],
        "eventName": ["CreateUser"],
    },
)


class Trigger(Construct):
    def __init__(self, scope: Construct, _id: str, target_function: _lambda.IFunction, **kwargs: Any) -> None:
        super().__init__(scope, _id, **kwargs)

        # LambdaFunction target also grants events.amazonaws.com permission to invoke
        self.rule = events.Rule(
            self,
            "UserCreationRule",
            description=RULE_DESCRIPTION,
            event_pattern=USER_CREATION_EVENT_PATTERN,
            enabled=True,
            targets=[targets.LambdaFunction(target_function)],
        )
