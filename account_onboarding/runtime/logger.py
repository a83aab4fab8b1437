# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: MIT-0

from aws_lambda_powertools import Logger
from constants import SERVICE_NAME

# Shared by every runtime module so structured keys stay consistent
logger = Logger(service=SERVICE_NAME)
