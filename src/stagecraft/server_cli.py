"""CLI entry point for the Stagecraft API server."""

import argparse
import os


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="stagecraft-server",
        description="Stagecraft API server: issue templates to deployment pipelines",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8080, help="Bind port (default: 8080)")
    parser.add_argument(
        "--local",
        action="store_true",
        help="Local dev mode: colored console logs instead of JSON",
    )
    args = parser.parse_args(argv)

    # Must be set before stagecraft.config is first imported
    if args.local:
        os.environ["STAGECRAFT_LOCAL_MODE"] = "1"

    import uvicorn

    uvicorn.run("stagecraft.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
