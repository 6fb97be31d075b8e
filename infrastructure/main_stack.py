"""
Main CDK Stack for the pool-service scheduling API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.network import NetworkConstruct
from infrastructure.constructs.data_layer import DataLayerConstruct
from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class PoolServiceStack(Stack):
    """Main stack wiring all constructs together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "pool-service-scheduling")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Shared VPC.
        network = NetworkConstruct(self, "Network", environment=settings.environment)

        # 2) Data layer.
        data_construct = DataLayerConstruct(
            self,
            "DataLayer",
            environment=settings.environment,
            vpc=network.vpc,
            db_instance_class=settings.db_instance_class,
            db_allocated_storage=settings.db_allocated_storage,
            db_name=settings.db_name,
        )

        # 3) API layer (single Lambda).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            vpc=network.vpc,
            security_groups=[data_construct.client_security_group],
            db_secret_arn=data_construct.db_secret.secret_arn,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
            log_level=settings.log_level,
            cors_origins=settings.cors_origins,
        )

        # Permissions for the API Lambda.
        data_construct.db_secret.grant_read(api_construct.main_lambda)

        # Outputs to quickly find resources.
        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "DbSecretArn", value=data_construct.db_secret.secret_arn)
        CfnOutput(
            self,
            "DbEndpoint",
            value=data_construct.db_instance.db_instance_endpoint_address,
        )
