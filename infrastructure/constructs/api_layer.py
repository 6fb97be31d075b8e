"""
API layer construct: shared Lambda + HTTP API routes.

A single Lambda keeps the database pool warm and reduces cold start costs.
Uses Docker bundling for dependencies (runs in CI/CD pipeline).
"""

from typing import Sequence

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_ec2 as ec2,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct

# Routes served by handlers.main; keep in step with its route table.
ROUTE_DEFS = [
    (apigw.HttpMethod.GET, "/health"),
    (apigw.HttpMethod.GET, "/api/customers"),
    (apigw.HttpMethod.POST, "/api/customers"),
    (apigw.HttpMethod.GET, "/api/customers/{id}"),
    (apigw.HttpMethod.PUT, "/api/customers/{id}"),
    (apigw.HttpMethod.DELETE, "/api/customers/{id}"),
    (apigw.HttpMethod.GET, "/api/customers/{id}/history"),
    (apigw.HttpMethod.GET, "/api/services"),
    (apigw.HttpMethod.POST, "/api/services"),
    (apigw.HttpMethod.GET, "/api/services/{id}"),
    (apigw.HttpMethod.PUT, "/api/services/{id}"),
    (apigw.HttpMethod.DELETE, "/api/services/{id}"),
    (apigw.HttpMethod.POST, "/api/services/{id}/start"),
    (apigw.HttpMethod.POST, "/api/services/{id}/complete"),
    (apigw.HttpMethod.POST, "/api/services/{id}/skip"),
    (apigw.HttpMethod.GET, "/api/recurring-services"),
    (apigw.HttpMethod.POST, "/api/recurring-services"),
    (apigw.HttpMethod.GET, "/api/recurring-services/{id}"),
    (apigw.HttpMethod.PUT, "/api/recurring-services/{id}"),
    (apigw.HttpMethod.DELETE, "/api/recurring-services/{id}"),
    (apigw.HttpMethod.POST, "/api/recurring-services/{id}/activate"),
    (apigw.HttpMethod.POST, "/api/recurring-services/{id}/deactivate"),
]


class ApiLayerConstruct(Construct):
    """Expose the scheduling endpoints via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        vpc: ec2.IVpc,
        security_groups: Sequence[ec2.ISecurityGroup],
        db_secret_arn: str,
        lambda_memory_mb: int = 512,
        lambda_timeout_seconds: int = 30,
        log_level: str = "INFO",
        cors_origins: Sequence[str] = ("*",),
    ) -> None:
        super().__init__(scope, construct_id)

        # Bundle Lambda code with dependencies using Docker (works in CI/CD)
        # Installs sqlalchemy, psycopg2-binary, pydantic and the JSON logger.
        bundled_code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )

        self.main_lambda = _lambda.Function(
            self,
            "ApiHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=bundled_code,
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=_lambda.Architecture.X86_64,
            vpc=vpc,
            security_groups=list(security_groups),
            environment={
                "ENVIRONMENT": environment,
                "DB_SECRET_ARN": db_secret_arn,
                "LOG_LEVEL": log_level,
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"pool-service-api-{environment}",
            cors_preflight=apigw.CorsPreflightOptions(
                allow_origins=list(cors_origins),
                allow_methods=[apigw.CorsHttpMethod.ANY],
                allow_headers=["Content-Type"],
            ),
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )

        for method, path in ROUTE_DEFS:
            self.api.add_routes(
                path=path,
                methods=[method],
                integration=integration,
            )
