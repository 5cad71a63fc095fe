"""Serve the HTTP API with uvicorn."""

import argparse
import os


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from nameclutch.config import settings

    # The app builds its store from the environment.
    if args.data:
        os.environ["NAMECLUTCH_DATA_PATH"] = args.data
    if args.fallback:
        os.environ["NAMECLUTCH_FALLBACK_PATH"] = args.fallback

    uvicorn.run(
        "nameclutch.web.main:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
        reload=args.reload,
    )
    return 0
