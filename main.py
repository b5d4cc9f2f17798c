"""Living Chronicle: dev launcher. Prints a chronicle or starts the API server."""

import argparse
import logging
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def main():
    parser = argparse.ArgumentParser(description="Living Chronicle dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: ./data)")
    parser.add_argument("--demo", action="store_true",
                        help="Clean and create demo civilization data")
    parser.add_argument("--print", dest="civ_id", metavar="CIV_ID", default=None,
                        help="Print the chronicle of one civilization and exit")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    data_dir = args.data_dir or Path(os.getenv("DATA_DIR", str(ROOT / "data")))

    if args.demo or args.civ_id:
        from living_chronicle.storage import Storage
        storage = Storage(data_dir)
        if args.demo:
            from living_chronicle.demo import create_demo_data
            create_demo_data(storage)
        if args.civ_id:
            from living_chronicle.ingest import MalformedEventError
            from living_chronicle.service import ChronicleService, CivilizationNotFound
            try:
                chronicle = ChronicleService(storage).compile_chronicle(args.civ_id)
            except (CivilizationNotFound, MalformedEventError) as e:
                print(f"Could not compile the chronicle: {e}", file=sys.stderr)
                sys.exit(1)
            print(chronicle.text)
            return

    # Build env for the server so it picks up the same data dir
    env = os.environ.copy()
    env["DATA_DIR"] = str(data_dir.resolve())

    print(f"Starting backend on http://localhost:{BACKEND_PORT} ...")
    proc = subprocess.Popen(
        ["uvicorn", "living_chronicle.app:create_app", "--factory", "--reload",
         "--host", HOST, "--port", BACKEND_PORT],
        cwd=ROOT, env=env,
    )
    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
