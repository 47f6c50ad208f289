from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any, List, Optional

import requests
from dotenv import load_dotenv

from .api.apex_api import ApexAPI
from .api.auth_api import AuthAPI
from .api.sobject_api import DEFAULT_API_VERSION, SObjectAPI
from .models import Lead, lead_from_apex_result
from .utils.config import load_credentials
from .utils.errors import AuthenticationError, ConfigurationError, PersistenceError, ResourceCallError
from .utils.file_utils import DEFAULT_TEMPLATE, persist_json
from .utils.http_client import LOGIN_URL, SANDBOX_LOGIN_URL, HttpClient

load_dotenv()

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _env_bool(name: str) -> bool:
    value = _env_str(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _json_arg(value: str) -> Any:
    try:
        return json.loads(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid JSON: {exc}") from exc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Authenticate against Salesforce and create, fetch, or enrich Lead records."
    )
    parser.add_argument("--config", default=_env_str("SF_CONFIG") or "config.json", help="JSON file holding the OAuth credentials")
    parser.add_argument("--login-url", default=_env_str("SF_LOGIN_URL"), help="OAuth login host (overrides --sandbox)")
    parser.add_argument("--sandbox", action="store_true", default=_env_bool("SF_SANDBOX"), help=f"Authenticate against {SANDBOX_LOGIN_URL}")
    parser.add_argument("--api-version", default=_env_str("SF_API_VERSION") or DEFAULT_API_VERSION, help="REST API version, e.g. 57.0")
    parser.add_argument("--timeout", type=float, default=_env_float("SF_TIMEOUT"), help="Per-request timeout in seconds (none by default)")

    parser.add_argument("--apex-path", help="Apex REST resource to invoke, relative to /services/apexrest/")
    parser.add_argument("--apex-body", type=_json_arg, help="JSON body sent to the Apex REST resource")
    parser.add_argument("--apex-method", default="POST", choices=["GET", "POST"], help="HTTP method for the Apex call")
    parser.add_argument("--apex-to-lead", action="store_true", help="Create a Lead from the Apex response")

    parser.add_argument("--create-lead", action="store_true", help="Create a Lead from the --first-name/--last-name/... options")
    parser.add_argument("--first-name")
    parser.add_argument("--last-name")
    parser.add_argument("--company")
    parser.add_argument("--email")
    parser.add_argument("--phone")
    parser.add_argument("--title")
    parser.add_argument("--lead-source")
    parser.add_argument("--get-lead", metavar="LEAD_ID", help="Retrieve an existing Lead by id")
    parser.add_argument("--fetch-created", action="store_true", help="Retrieve the Lead created in this run")

    parser.add_argument("--save", action="store_true", default=_env_bool("SAVE_RESULT"), help="Write the last response to a timestamped JSON file")
    parser.add_argument("--output-dir", default=_env_str("OUTPUT_DIR") or "output", help="Directory for saved results")
    parser.add_argument(
        "--output-template",
        default=_env_str("OUTPUT_TEMPLATE") or DEFAULT_TEMPLATE,
        help="Filename template; {timestamp} is replaced with the current UTC time",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    if args.apex_to_lead and not args.apex_path:
        parser.error("--apex-to-lead requires --apex-path")
    if args.create_lead and not args.apex_to_lead and not (args.last_name and args.company):
        parser.error("--create-lead requires --last-name and --company")
    if args.fetch_created and not (args.create_lead or args.apex_to_lead):
        parser.error("--fetch-created requires --create-lead or --apex-to-lead")
    return args


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def resolve_login_url(args: argparse.Namespace) -> str:
    if args.login_url:
        return args.login_url
    return SANDBOX_LOGIN_URL if args.sandbox else LOGIN_URL


def lead_from_args(args: argparse.Namespace) -> Lead:
    return Lead(
        FirstName=args.first_name,
        LastName=args.last_name,
        Company=args.company,
        Email=args.email,
        Phone=args.phone,
        Title=args.title,
        LeadSource=args.lead_source,
    )


def run_pipeline(args: argparse.Namespace) -> Any:
    """Authenticates, then runs the requested steps in order.

    Returns the last response body, or ``None`` when only authentication
    was requested.
    """

    credentials = load_credentials(args.config)

    with HttpClient(timeout=args.timeout) as auth_client:
        session = AuthAPI(auth_client, login_url=resolve_login_url(args)).authenticate(credentials)

    result: Any = None
    with HttpClient(session=session, timeout=args.timeout) as http_client:
        sobject_api = SObjectAPI(http_client, api_version=args.api_version)

        lead: Optional[Lead] = None
        if args.apex_path:
            result = ApexAPI(http_client).invoke(args.apex_path, args.apex_body, method=args.apex_method)
            if args.apex_to_lead:
                lead = lead_from_apex_result(result if isinstance(result, dict) else {})
                logging.info("Mapped Apex response to Lead %s %s", lead.LastName, lead.Company)

        if lead is None and args.create_lead:
            lead = lead_from_args(args)

        created_id: Optional[str] = None
        if lead is not None:
            created = sobject_api.create_lead(lead)
            created_id = created.id
            result = created.raw

        lead_id = args.get_lead or (created_id if args.fetch_created else None)
        if lead_id:
            result = sobject_api.get_lead(lead_id)

    if result is None:
        logging.info("Authentication succeeded; no resource calls requested.")
        return None

    logging.info("Result:\n%s", json.dumps(result, indent=2, ensure_ascii=False))
    if args.save:
        persist_json(result, output_dir=args.output_dir, template=args.output_template)
    return result


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        run_pipeline(args)
    except ConfigurationError as exc:
        logging.error("%s", exc)
        return EXIT_CONFIG
    except AuthenticationError as exc:
        logging.error("%s", exc)
        return EXIT_FAILURE
    except ResourceCallError as exc:
        logging.error("Salesforce rejected the request: %s", exc)
        return EXIT_FAILURE
    except PersistenceError as exc:
        logging.error("%s", exc)
        return EXIT_FAILURE
    except requests.RequestException as exc:
        logging.error("Request to Salesforce failed: %s", exc)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
