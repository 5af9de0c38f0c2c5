import argparse
import json
import sys

from config.settings import get_settings
from pipelines.lookup import lookup_email
from services.errors import LookupFailure
from sources.registry import available_sources
from utils.logging_setup import init_logging


def cmd_lookup(args):
    try:
        result = lookup_email(args.email, args.name, args.country)
    except LookupFailure as e:
        print(e.public_message, file=sys.stderr)
        return 1
    print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


def cmd_serve(args):
    import uvicorn
    from api.app import create_app

    settings = get_settings()
    uvicorn.run(create_app(settings), host=args.host or settings.host, port=args.port or settings.port)
    return 0


def cmd_sources(args):
    settings = get_settings()
    configured = {
        "apollo": settings.apollo_enabled,
        "github": True,
        "gravatar": True,
    }
    for name in available_sources():
        state = "configured" if configured.get(name, True) else "not configured (skipped)"
        print(f"{name}: {state}")
    print(f"google: {'configured' if settings.google_enabled else 'not configured (search skipped)'}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Email to LinkedIn lookup CLI")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_look = sub.add_parser("lookup", help="Resolve an email to probable LinkedIn profiles")
    p_look.add_argument("email", help="Email address to look up")
    p_look.add_argument("--name", help="Known full name (improves matching)")
    p_look.add_argument("--country", help="Known country or location")
    p_look.set_defaults(func=cmd_lookup)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=None, help="Bind address (default from settings)")
    p_serve.add_argument("--port", type=int, default=None, help="Port (default from settings)")
    p_serve.set_defaults(func=cmd_serve)

    p_src = sub.add_parser("sources", help="List identity sources and whether they are configured")
    p_src.set_defaults(func=cmd_sources)

    args = parser.parse_args(argv)
    # Handler level is fixed on first init, so the verbose choice must come first
    init_logging("DEBUG" if args.verbose else get_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
