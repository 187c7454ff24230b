"""
Local runner for the Lambda handlers.

Invokes a handler with a synthesized API Gateway event, or serves all routes
over HTTP so the dashboard can be developed without a deployment.

Usage:
    python -m inequality_dashboard.api.local_runner earnings-gap --query "format=weekly"
    python -m inequality_dashboard.api.local_runner --serve --port 8000
"""

import json
import logging
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qsl, urlsplit

from inequality_dashboard.api import HANDLERS, build_routes
from inequality_dashboard.config import Settings


logger = logging.getLogger(__name__)


@dataclass
class LambdaContext:
    function_name: str = "local"
    function_version: str = "local"
    aws_request_id: str = "local-request"
    memory_limit_in_mb: int = 128


def build_event(path: str, query: str = "") -> dict:
    """API Gateway proxy event for a GET request."""
    params = dict(parse_qsl(query, keep_blank_values=True))
    return {
        "httpMethod": "GET",
        "path": path,
        "queryStringParameters": params or None,
        "headers": {},
        "body": None,
    }


def invoke(routes: dict, path: str, query: str = "") -> dict:
    """Dispatch a path to its handler, returning the proxy response."""
    route = path.strip("/")
    if route not in routes:
        return {
            "statusCode": 404,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"error": f"Unknown route: /{route}"}),
        }
    return routes[route](build_event(path, query), LambdaContext())


def make_request_handler(routes: dict) -> type[BaseHTTPRequestHandler]:
    class RequestHandler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:
            url = urlsplit(self.path)
            response = invoke(routes, url.path, url.query)
            body = response.get("body", "").encode("utf-8")

            self.send_response(response["statusCode"])
            for name, value in response.get("headers", {}).items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args) -> None:
            logger.info(f"{self.address_string()} {format % args}")

    return RequestHandler


def serve(port: int, settings: Settings | None = None) -> None:
    routes = build_routes(settings)
    server = ThreadingHTTPServer(("127.0.0.1", port), make_request_handler(routes))
    logger.info(f"Serving {', '.join('/' + r for r in routes)} on http://127.0.0.1:{port}")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        server.server_close()


def main() -> None:
    """CLI entry point."""
    import argparse

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Run the inequality API handlers locally")
    parser.add_argument(
        "route",
        nargs="?",
        choices=list(HANDLERS),
        help="Handler to invoke once",
    )
    parser.add_argument(
        "--query",
        type=str,
        default="",
        help="Query string, e.g. 'years=2019,2021'",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve all routes over HTTP",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for --serve (default: 8000)",
    )
    args = parser.parse_args()

    if args.serve:
        serve(args.port)
        return

    if not args.route:
        parser.error("a route is required unless --serve is given")

    response = invoke(build_routes(), args.route, args.query)
    print(f"Status: {response['statusCode']}")
    print(json.dumps(json.loads(response["body"]), indent=2))
    if response["statusCode"] >= 400:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
