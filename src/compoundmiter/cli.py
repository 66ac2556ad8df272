# cli entrypoint
from __future__ import annotations

import logging
from typing import List, Optional

from .config import RunConfig, build_arg_parser, load_config_and_args
from .logging_utils import setup_logging
from .report import build_report, format_report
from .validation import validate_inputs

log = logging.getLogger(__name__)


def _validate(run_config: RunConfig) -> None:
    validation_errors = validate_inputs(run_config.inputs)
    if validation_errors:
        for error in validation_errors:
            print(f"ERROR: {error}")
        raise SystemExit("Validation failed; fix the inputs and try again.")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the compound miter calculator."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    run_config = load_config_and_args(args)
    _validate(run_config)

    report = build_report(run_config.inputs)
    for line in format_report(report, show_metrics=run_config.show_metrics):
        print(line)


if __name__ == "__main__":
    main()
