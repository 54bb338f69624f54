# cli.py
#
# Command-line entry point. Reads the employee (and optional previous year)
# CSV, runs the SecretSantaAPI and reports the outcome.
import argparse
import logging
import sys
from typing import List, Optional

from .assignment_service import AssignmentError, AssignmentService
from .config_loader import ConfigError, ConfigLoader
from .constants import MAX_ATTEMPTS
from .participant_repository import RepositoryError
from .secret_santa_api import STATUS_ASSIGNED, SecretSantaAPI

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='secret-santa',
        description="Generate Secret Santa assignments from an employee CSV file."
    )
    parser.add_argument(
        '-c', '--config',
        dest='config_path',
        help='Path to a key = value configuration file'
    )
    parser.add_argument(
        '-e', '--employees',
        dest='employee_file',
        help='Employee CSV file (prompted for when omitted)'
    )
    parser.add_argument(
        '-p', '--previous',
        dest='previous_file',
        help="Previous year's assignment CSV file"
    )
    parser.add_argument(
        '-o', '--output-dir',
        dest='output_dir',
        help='Directory for the generated assignment file (default: .)'
    )
    parser.add_argument(
        '--max-attempts',
        type=int,
        help=f'Number of shuffles to try before giving up (default: {MAX_ATTEMPTS})'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed the random source for a reproducible draw'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def prompt(message: str) -> str:
    return input(f"{message} ").strip()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point: merges config and arguments, then runs the assignment.
    Returns the process exit code.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        employee_file = args.employee_file
        previous_file = args.previous_file
        output_dir = args.output_dir
        max_attempts = args.max_attempts

        # Command-line values win over the config file
        if args.config_path:
            logger.info(f"Loading configuration from: {args.config_path}")
            config = ConfigLoader(args.config_path)
            config.load_config()
            employee_file = employee_file or config.get_employee_path()
            previous_file = previous_file or config.get_previous_path()
            output_dir = output_dir or str(config.get_output_dir())
            if max_attempts is None:
                max_attempts = config.get_max_attempts()

        service = AssignmentService(max_attempts=MAX_ATTEMPTS if max_attempts is None else max_attempts, seed=args.seed)
        api = SecretSantaAPI(service=service, default_output_dir=output_dir or '.')

        ask_previous_file = None
        if not employee_file:
            employee_file = prompt("Enter the employee CSV file name:")
            if previous_file is None:
                # Asked only after the employee file passed validation
                ask_previous_file = lambda: prompt(
                    "\nEnter the previous year assignment CSV file name (or press Enter to skip):"
                ) or None

        result = api.run(employee_file, previous_file, ask_previous_file=ask_previous_file)

    except (ConfigError, RepositoryError, AssignmentError, ValueError) as e:
        print(f"Error: {e}")
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nAborted.")
        return 1

    if result["status"] != STATUS_ASSIGNED:
        for err in result["errors"]:
            print(f"  ✗ {err}")
        return 1

    print(f'Assignments saved to "{result["output_file"]}"')
    return 0


if __name__ == '__main__':
    sys.exit(main())
