import argparse
import sys
from typing import List, Optional

import aws_cdk as cdk
from dotenv import load_dotenv
from loguru import logger

from utils.logger import configure_logger

from .config.server_config import DeploymentConfig, load_deployment_config
from .preflight.checks import PreflightError, run_preflight
from .preflight.client_factory import AwsClient
from .stack import AIOServerStack


def make_parser():
    parser = argparse.ArgumentParser(description="Synthesize the AIO server CDK app")
    parser.add_argument(
        "-c", "--server-config",
        type=str,
        default="./server_config.toml",
        help="Server configuration file path"
    )
    parser.add_argument(
        "--stack-name",
        type=str,
        default="AIOServerStack",
        help="CloudFormation stack name"
    )
    parser.add_argument(
        "--preflight",
        action="store_true",
        help="Check that the key pair and hosted zones exist before synthesizing"
    )
    return parser


def build_app(config: DeploymentConfig, stack_name: str = "AIOServerStack") -> cdk.App:
    app = cdk.App()
    AIOServerStack(
        app,
        stack_name,
        config,
        env=cdk.Environment(account=config.env.resolved_account(), region=config.env.resolved_region()),
    )
    return app


def main(argv: Optional[List[str]] = None):
    parser = make_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    configure_logger()

    config = load_deployment_config(args.server_config)

    if args.preflight:
        client = AwsClient.new(config.env.resolved_region())
        try:
            run_preflight(client.ec2(), client.route53(), config)
        except PreflightError as e:
            logger.error(f"Preflight failed: {e}")
            sys.exit(1)

    app = build_app(config, args.stack_name)
    app.synth()
    logger.success(f"Synthesized {args.stack_name}")


if __name__ == "__main__":
    main()
