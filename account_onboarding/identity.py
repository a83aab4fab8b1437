# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from typing import Any

from aws_cdk import aws_iam as iam
from aws_cdk import aws_secretsmanager as secretsmanager
from constructs import Construct

import cdk_constants as constants
from cdk_constants import AccountDefinition

TEMPORARY_PASSWORD_DESCRIPTION = "Temporary password for IAM users"


class Identity(Construct):
    def __init__(
        self,
        scope: Construct,
        _id: str,
        accounts: list[AccountDefinition],
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, _id, **kwargs)

        # Every account shares one generated password and must change it at first login
        self.temporary_password = secretsmanager.Secret(
            self,
            "TemporaryPassword",
            description=TEMPORARY_PASSWORD_DESCRIPTION,
            generate_secret_string=secretsmanager.SecretStringGenerator(
                password_length=constants.TEMPORARY_PASSWORD_LENGTH,
                exclude_characters=constants.TEMPORARY_PASSWORD_EXCLUDE_CHARACTERS,
            ),
        )

        self.groups: dict[str, iam.Group] = {}
        self.users: dict[str, iam.User] = {}
        for account in accounts:
            self.users[account.user_name] = self._create_user(account)

    def _create_user(self, account: AccountDefinition) -> iam.User:
        group = self._get_or_create_group(account)

        return iam.User(
            self,
            account.user_name,
            user_name=account.user_name,
            groups=[group],
            password=self.temporary_password.secret_value,
            password_reset_required=True,
        )

    def _get_or_create_group(self, account: AccountDefinition) -> iam.Group:
        group = self.groups.get(account.group_name)
        if group is None:
            group = iam.Group(
                self,
                account.group_name,
                group_name=account.group_name,
                managed_policies=[iam.ManagedPolicy.from_aws_managed_policy_name(account.managed_policy_name)],
            )
            self.groups[account.group_name] = group

        return group
