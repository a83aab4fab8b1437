# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

import unittest

import aws_cdk as cdk
from aws_cdk.assertions import Match
from aws_cdk.assertions import Template

import cdk_constants as constants
from account_onboarding.onboarding_stack import AccountOnboardingStack
from account_onboarding.runtime.constants import DEFAULT_CONTACT_PARAMETER_NAMESPACE
from account_onboarding.runtime.constants import DEFAULT_LOG_STREAM_NAME
from account_onboarding.runtime.constants import contact_parameter_name

FUNCTION_NAME = "UserCreationNotificationFunction"


def managed_policy_arn(policy_name: str) -> dict:
    return {"Fn::Join": ["", ["arn:", {"Ref": "AWS::Partition"}, f":iam::aws:policy/{policy_name}"]]}


class TestAccountOnboardingStack(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        app = cdk.App()
        stack = AccountOnboardingStack(app, "AccountOnboarding")
        cls.template = Template.from_stack(stack)

    def test_temporary_password_secret(self):
        self.template.resource_count_is("AWS::SecretsManager::Secret", 1)
        self.template.has_resource_properties(
            "AWS::SecretsManager::Secret",
            {
                "Description": "Temporary password for IAM users",
                "GenerateSecretString": {
                    "PasswordLength": 16,
                    "ExcludeCharacters": '"@/\\',
                },
            },
        )

    def test_read_only_groups(self):
        self.template.resource_count_is("AWS::IAM::Group", 2)
        for group_name, policy_name in (
            ("S3ReadOnlyGroup", "AmazonS3ReadOnlyAccess"),
            ("EC2ReadOnlyGroup", "AmazonEC2ReadOnlyAccess"),
        ):
            with self.subTest(group_name=group_name):
                self.template.has_resource_properties(
                    "AWS::IAM::Group",
                    {
                        "GroupName": group_name,
                        "ManagedPolicyArns": [managed_policy_arn(policy_name)],
                    },
                )

    def test_users_must_reset_temporary_password(self):
        self.template.resource_count_is("AWS::IAM::User", 2)
        for user_name in ("s3-user", "ec2-user"):
            with self.subTest(user_name=user_name):
                self.template.has_resource_properties(
                    "AWS::IAM::User",
                    {
                        "UserName": user_name,
                        "Groups": [Match.any_value()],
                        "LoginProfile": {
                            "Password": Match.any_value(),
                            "PasswordResetRequired": True,
                        },
                    },
                )

    def test_contact_parameters(self):
        self.template.resource_count_is("AWS::SSM::Parameter", 2)
        for user_name, email in (
            ("s3-user", "s3user@kponyojdk.com"),
            ("ec2-user", "ec2user@kponyojdk.com"),
        ):
            with self.subTest(user_name=user_name):
                self.template.has_resource_properties(
                    "AWS::SSM::Parameter",
                    {
                        "Name": f"/iam/{user_name}/email",
                        "Type": "String",
                        "Value": email,
                        "Description": f"Email address for {user_name}",
                    },
                )

    def test_contact_parameter_name(self):
        self.assertEqual(contact_parameter_name("iam", "s3-user"), "/iam/s3-user/email")

    def test_deploy_defaults_match_runtime_defaults(self):
        self.assertEqual(constants.CONTACT_PARAMETER_NAMESPACE, DEFAULT_CONTACT_PARAMETER_NAMESPACE)
        self.assertEqual(constants.NOTIFICATION_LOG_STREAM_NAME, DEFAULT_LOG_STREAM_NAME)

    def test_log_group_and_stream(self):
        self.template.has_resource_properties(
            "AWS::Logs::LogGroup",
            {
                "LogGroupName": f"/aws/lambda/{FUNCTION_NAME}",
                "RetentionInDays": 14,
            },
        )
        self.template.has_resource_properties("AWS::Logs::LogStream", {"LogStreamName": "test"})

    def test_notification_function(self):
        self.template.has_resource_properties(
            "AWS::Lambda::Function",
            {
                "FunctionName": FUNCTION_NAME,
                "Handler": "notify_user_creation.lambda_handler",
                "Runtime": "python3.12",
                "Timeout": 30,
                "Layers": [Match.any_value()],
                "Environment": {
                    "Variables": Match.object_like(
                        {
                            "SECRET_ARN": {"Ref": Match.any_value()},
                            "CONTACT_PARAMETER_NAMESPACE": "iam",
                            "LOG_GROUP_NAME": Match.any_value(),
                            "LOG_STREAM_NAME": "test",
                            "POWERTOOLS_SERVICE_NAME": "account-onboarding",
                        }
                    )
                },
            },
        )

    def test_notification_function_permissions(self):
        log_group_ids = list(
            self.template.find_resources(
                "AWS::Logs::LogGroup", {"Properties": {"LogGroupName": f"/aws/lambda/{FUNCTION_NAME}"}}
            )
        )
        secret_ids = list(self.template.find_resources("AWS::SecretsManager::Secret"))
        self.assertEqual(len(log_group_ids), 1)
        self.assertEqual(len(secret_ids), 1)

        self.template.has_resource_properties(
            "AWS::IAM::Policy",
            {
                "PolicyDocument": {
                    "Statement": Match.array_with(
                        [
                            {
                                "Action": "ssm:GetParameter",
                                "Effect": "Allow",
                                "Resource": {"Fn::Join": ["", Match.array_with([":parameter/iam/*"])]},
                            },
                            {
                                "Action": "secretsmanager:GetSecretValue",
                                "Effect": "Allow",
                                "Resource": {"Ref": secret_ids[0]},
                            },
                            {
                                "Action": [
                                    "logs:CreateLogStream",
                                    "logs:PutLogEvents",
                                    "logs:DescribeLogStreams",
                                ],
                                "Effect": "Allow",
                                "Resource": {"Fn::GetAtt": [log_group_ids[0], "Arn"]},
                            },
                        ]
                    )
                }
            },
        )

    def test_notification_function_has_no_wildcard_resources(self):
        for policy in self.template.find_resources("AWS::IAM::Policy").values():
            for statement in policy["Properties"]["PolicyDocument"]["Statement"]:
                with self.subTest(action=statement["Action"]):
                    self.assertNotEqual(statement["Resource"], "*")

    def test_user_creation_rule_invokes_function(self):
        self.template.has_resource_properties(
            "AWS::Events::Rule",
            {
                "Description": "Rule to detect IAM user creation",
                "State": "ENABLED",
                "EventPattern": {
                    "source": ["aws.iam"],
                    "detail-type": ["AWS API Call via CloudTrail"],
                    "detail": {
                        "eventSource": ["iam.amazonaws.com"],
                        "eventName": ["CreateUser"],
                    },
                },
                "Targets": [Match.object_like({"Arn": Match.any_value()})],
            },
        )
        self.template.has_resource_properties(
            "AWS::Lambda::Permission",
            {
                "Action": "lambda:InvokeFunction",
                "Principal": "events.amazonaws.com",
            },
        )

    def test_outputs(self):
        for output_id in ("TemporaryPasswordSecret", "LambdaFunctionName"):
            with self.subTest(output_id=output_id):
                self.template.has_output(output_id, {"Value": Match.any_value()})

    def test_user_name_outputs_use_declared_output_ids(self):
        for output_id, user_name in (("S3UserName", "s3-user"), ("EC2UserName", "ec2-user")):
            with self.subTest(output_id=output_id):
                self.template.has_output(
                    output_id,
                    {
                        "Description": f"Name of the {user_name} user",
                        "Value": {"Ref": Match.any_value()},
                    },
                )


if __name__ == "__main__":
    unittest.main()
