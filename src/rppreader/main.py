import json
import sys
import time
import logging
from dataclasses import asdict
from pathlib import Path

from .ast import PrettyPrintVisitor
from .errors import RPPError
from .workspace import RPPWorkspace


# Configure logging
logger = logging.getLogger(__name__)

MODES = ("tree", "json", "info", "watch")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(log_file: Path = None, level: str = "INFO"):
    """
    Configure logging to both file and console.

    Args:
        log_file: Path to log file (optional)
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    root_logger.handlers = []

    # Console goes to stderr so query output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")

    return root_logger


def print_usage():
    print("Usage: rppreader <path-to-rpp> [OPTIONS]")
    print("\nModes:")
    print("  --mode=tree       - Pretty-print the project tree (default)")
    print("  --mode=json       - Output the tree as JSON")
    print("  --mode=info       - Show project info summary")
    print("  --mode=watch      - Reload and report changes whenever the file is saved")
    print("\nQuery Options:")
    print("  --query=TAG[,TAG] - Print nodes matching a tag chain, e.g. TRACK,ITEM")
    print("  --track=NAME      - Print the items of the track named NAME")
    print("\nLogging Options:")
    print("  --log-file=PATH   - Log to file (default: stderr only)")
    print("  --log-level=LEVEL - Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)")


def run_watch(workspace: RPPWorkspace):
    """Block until interrupted, logging the changes of every save."""
    def on_reload(changes):
        for change in changes:
            logger.info(f"  {change['type']}: {'/'.join(change['path'])}")

    workspace.start_watching(on_reload)
    print("Watching for changes. Press Ctrl+C to stop.")
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nStopping watcher...")
    finally:
        workspace.stop_watching()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print_usage()
        return 1

    path = Path(argv[0])
    mode = "tree"
    query = None
    track = None
    log_file = None
    log_level = "INFO"

    for arg in argv[1:]:
        if arg.startswith("--mode="):
            mode = arg.split("=", 1)[1]
        elif arg.startswith("--query="):
            query = [tag for tag in arg.split("=", 1)[1].split(",") if tag]
        elif arg.startswith("--track="):
            track = arg.split("=", 1)[1]
        elif arg.startswith("--log-file="):
            log_file = Path(arg.split("=", 1)[1])
        elif arg.startswith("--log-level="):
            log_level = arg.split("=", 1)[1]
        else:
            print(f"Unknown option: {arg}")
            print_usage()
            return 1

    if mode not in MODES:
        print(f"Unknown mode: {mode}")
        print_usage()
        return 1

    if log_level.upper() not in LOG_LEVELS:
        print(f"Unknown log level: {log_level}")
        print_usage()
        return 1

    setup_logging(log_file=log_file, level=log_level)

    workspace = RPPWorkspace()
    try:
        workspace.load_project(path)
        if query:
            print(json.dumps(workspace.query(*query), indent=2))
        elif track is not None:
            items = workspace.get_track_items(track)
            print(json.dumps([dict(asdict(item), end=item.end) for item in items], indent=2))
        elif mode == "info":
            print(json.dumps(workspace.get_project_info(), indent=2))
        elif mode == "json":
            print(workspace.get_ast_json())
        elif mode == "watch":
            run_watch(workspace)
        else:  # tree
            print(PrettyPrintVisitor().print(workspace.current_document.root))
    except (RPPError, FileNotFoundError, ValueError) as e:
        logger.error(f"{path}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
