# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from typing import Any

from aws_cdk import aws_ssm as ssm
from constructs import Construct

from account_onboarding.runtime.constants import contact_parameter_name
from cdk_constants import AccountDefinition


class Contacts(Construct):
    def __init__(
        self,
        scope: Construct,
        _id: str,
        accounts: list[AccountDefinition],
        namespace: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, _id, **kwargs)

        self.namespace = namespace
        self.parameters = [
            ssm.StringParameter(
                self,
                f"{account.user_name}-email",
                parameter_name=contact_parameter_name(namespace, account.user_name),
                string_value=account.email,
                description=f"Email address for {account.user_name}",
            )
            for account in accounts
        ]
