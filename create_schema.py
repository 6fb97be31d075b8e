#!/usr/bin/env python3
"""Create the customers, services and recurring_services tables."""

import os
import sys
from pathlib import Path

import boto3

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from repositories.schema import create_all  # noqa: E402
from utils.database import create_db_engine, secret_to_db_url  # noqa: E402


def _db_url_from_stack(stack_name: str, region: str) -> str:
    """Resolve the database URL through the stack's DbSecretArn output."""
    cf = boto3.client("cloudformation", region_name=region)
    resp = cf.describe_stacks(StackName=stack_name)
    outputs = {o["OutputKey"]: o["OutputValue"] for o in resp["Stacks"][0]["Outputs"]}
    return secret_to_db_url(outputs["DbSecretArn"])


def main():
    db_url = os.environ.get("DATABASE_URL")
    if not db_url:
        environment = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", "eu-west-2")
        stack_name = f"PoolServiceStack-{environment}"
        try:
            db_url = _db_url_from_stack(stack_name, region)
        except Exception as e:
            print(f"Error reading database secret from {stack_name}: {e}")
            sys.exit(1)
    if not db_url:
        print("Could not build a database URL; set DATABASE_URL")
        sys.exit(1)

    engine = create_db_engine(db_url)
    try:
        create_all(engine)
    except Exception as e:
        print(f"Error creating tables: {e}")
        sys.exit(1)
    finally:
        engine.dispose()
    print("Tables created (existing tables left untouched).")


if __name__ == "__main__":
    main()
