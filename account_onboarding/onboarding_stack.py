# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from typing import Any

import aws_cdk as cdk
import cdk_nag
from constructs import Construct

import cdk_constants as constants
from account_onboarding.contacts import Contacts
from account_onboarding.identity import Identity
from account_onboarding.notification import Notification
from account_onboarding.trigger import Trigger


class AccountOnboardingStack(cdk.Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs: Any) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.identity = Identity(self, "Identity", constants.ONBOARDED_ACCOUNTS)
        self.contacts = Contacts(
            self,
            "Contacts",
            constants.ONBOARDED_ACCOUNTS,
            namespace=constants.CONTACT_PARAMETER_NAMESPACE,
        )
        self.notification = Notification(
            self,
            "Notification",
            temporary_password=self.identity.temporary_password,
            contact_parameter_namespace=self.contacts.namespace,
        )
        Trigger(self, "Trigger", self.notification.notify_lambda_function)

        self._add_outputs()
        self._add_cdk_nag_suppressions()

    def _add_outputs(self) -> None:
        cdk.CfnOutput(
            self,
            "TemporaryPasswordSecret",
            description="ARN of the secret containing the temporary password",
            value=self.identity.temporary_password.secret_arn,
        )

        for account in constants.ONBOARDED_ACCOUNTS:
            cdk.CfnOutput(
                self,
                f"{account.output_id}Name",
                description=f"Name of the {account.user_name} user",
                value=self.identity.users[account.user_name].user_name,
            )

        cdk.CfnOutput(
            self,
            "LambdaFunctionName",
            description="Name of the created Lambda function",
            value=self.notification.notify_lambda_function.function_name,
        )

    def _add_cdk_nag_suppressions(self) -> None:
        aws_managed_policies_suppression = cdk_nag.NagPackSuppression(
            id="AwsSolutions-IAM4",
            reason="Allow AWS managed policies",
        )
        cdk_nag.NagSuppressions.add_stack_suppressions(
            stack=self, suppressions=[aws_managed_policies_suppression]
        )

        cdk_nag.NagSuppressions.add_resource_suppressions(
            self.identity,
            suppressions=[
                cdk_nag.NagPackSuppression(
                    id="AwsSolutions-SMG4",
                    reason="Temporary password is issued once and replaced by each user at first login",
                )
            ],
            apply_to_children=True,
        )

        cdk_nag.NagSuppressions.add_resource_suppressions(
            self.notification,
            suppressions=[
                cdk_nag.NagPackSuppression(
                    id="AwsSolutions-IAM5",
                    reason="Allow wildcard policies scoped to the contact parameter namespace and log group",
                ),
                cdk_nag.NagPackSuppression(
                    id="AwsSolutions-L1",
                    reason="Runtime is pinned to the Powertools layer build",
                ),
            ],
            apply_to_children=True,
        )
