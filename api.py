import argparse
import logging

import uvicorn
from config import ApplicationConfig
from src.api.app import create_app

app = create_app(ApplicationConfig)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Invoice Service: create and list invoices")
    parser.add_argument(
        "--basic-auth.enable", dest="basic_auth_enable", action="store_true",
        default=ApplicationConfig.BASIC_AUTH_ENABLE,
        help="Enable basic authentication or not",
    )
    parser.add_argument(
        "--basic-auth.username", dest="basic_auth_username",
        default=ApplicationConfig.BASIC_AUTH_USERNAME,
        help="Username for basic authentication",
    )
    parser.add_argument(
        "--basic-auth.password", dest="basic_auth_password",
        default=ApplicationConfig.BASIC_AUTH_PASSWORD,
        help="Password for basic authentication",
    )
    return parser.parse_args(argv)


def build_config(args) -> type:
    """Return ApplicationConfig with command line overrides applied"""

    class CommandLineConfig(ApplicationConfig):
        BASIC_AUTH_ENABLE = args.basic_auth_enable
        BASIC_AUTH_USERNAME = args.basic_auth_username
        BASIC_AUTH_PASSWORD = args.basic_auth_password

    return CommandLineConfig


def main(argv=None):
    args = parse_args(argv)
    config = build_config(args)

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        create_app(config),
        host=config.API_HOST,
        port=config.API_PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
