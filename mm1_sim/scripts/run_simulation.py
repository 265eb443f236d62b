#!/usr/bin/env python3
"""Command-line interface for running the single-server queueing simulation."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Union

from mm1_sim.core import EmptyEventList, QueueOverflow, RunConfig, SimulationError
from mm1_sim.distributions.random_variables import SeededUniform
from mm1_sim.system import (
    RunStatus,
    SimulationMetrics,
    SimulationOutcome,
    SingleServerSystem,
    mm1_theoretical_metrics,
)

logger = logging.getLogger(__name__)

EXIT_CODES = {
    RunStatus.COMPLETED: 0,
    RunStatus.EMPTY_EVENT_LIST: 1,
    RunStatus.QUEUE_OVERFLOW: 2,
}

CONFIG_KEYS = ('mean_interarrival', 'mean_service', 'required_customers')


def load_config(path: Union[str, Path]) -> RunConfig:
    """
    Read run parameters from a file.

    A `.json` file holds an object with the keys mean_interarrival,
    mean_service and required_customers; any other file holds the three
    values separated by whitespace, in that order.
    """
    path = Path(path)
    text = path.read_text()
    logger.info("Loading run parameters from %s", path)

    if path.suffix == '.json':
        data = json.loads(text)
        missing = [key for key in CONFIG_KEYS if key not in data]
        if missing:
            raise ValueError(f"{path}: missing keys {', '.join(missing)}")
        values = [data[key] for key in CONFIG_KEYS]
    else:
        values = text.split()
        if len(values) != 3:
            raise ValueError(f"{path}: expected 3 values, found {len(values)}")

    try:
        mean_interarrival = float(values[0])
        mean_service = float(values[1])
        required_customers = int(values[2])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{path}: {exc}") from exc

    return RunConfig(mean_interarrival, mean_service, required_customers)


def format_header(config: RunConfig) -> str:
    """Report heading with the input parameters."""
    return (
        "Single-server queueing system\n\n"
        f"Mean interarrival time{config.mean_interarrival:11.3f} minutes\n\n"
        f"Mean service time{config.mean_service:16.3f} minutes\n\n"
        f"Number of customers{config.required_customers:14d}\n\n"
    )


def format_report(config: RunConfig, metrics: SimulationMetrics) -> str:
    """Full text report of a completed run."""
    return (
        format_header(config)
        + f"\n\nAverage delay in queue{metrics.average_delay_in_queue:11.3f} minutes\n\n"
        + f"Average number in queue{metrics.average_number_in_queue:10.3f}\n\n"
        + f"Server utilization{metrics.server_utilization:15.3f}\n\n"
        + f"Time simulation ended{metrics.simulation_end_time:12.3f} minutes"
    )


def format_failure(error: SimulationError) -> str:
    """Diagnostic line of an aborted run."""
    if isinstance(error, QueueOverflow):
        return f"\nOverflow of the array time_arrival at time {error.sim_time:f}"
    if isinstance(error, EmptyEventList):
        return f"\nEvent list empty at time {error.sim_time:f}"
    return f"\n{error}"


def results_to_dict(config: RunConfig, outcome: SimulationOutcome) -> Dict:
    """Collect the config, status and metrics of a run into a JSON-ready dict."""
    return {
        'config': {key: getattr(config, key) for key in CONFIG_KEYS},
        'status': outcome.status.value,
        'sim_time': outcome.sim_time,
        'metrics': outcome.metrics.as_dict() if outcome.metrics is not None else None,
        'error': str(outcome.error) if outcome.error is not None else None,
    }


def save_results(results: Dict, output_path: Union[str, Path]) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2)


def print_comparison(config: RunConfig, metrics: SimulationMetrics) -> None:
    """Print simulated estimates next to the M/M/1 steady-state values."""
    try:
        theory = mm1_theoretical_metrics(config.mean_interarrival, config.mean_service)
    except ValueError as exc:
        print(f"\nNo analytic comparison: {exc}")
        return

    print("\n=== Simulated vs. analytic ===")
    print(f"  Average delay in queue:  {metrics.average_delay_in_queue:.4f}  (Wq = {theory.Wq:.4f})")
    print(f"  Average number in queue: {metrics.average_number_in_queue:.4f}  (Lq = {theory.Lq:.4f})")
    print(f"  Server utilization:      {metrics.server_utilization:.4f}  (rho = {theory.rho:.4f})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Simulate a single-server (M/M/1) queueing system')

    # Run parameters
    parser.add_argument('-i', '--input', type=str,
                       help='Parameter file (three values, or JSON)')
    parser.add_argument('--mean-interarrival', type=float,
                       help='Mean interarrival time')
    parser.add_argument('--mean-service', type=float,
                       help='Mean service time')
    parser.add_argument('-n', '--customers', type=int,
                       help='Number of customers whose delay is observed')
    parser.add_argument('-s', '--seed', type=int, default=None,
                       help='Random seed (default: unseeded)')

    # Output options
    parser.add_argument('-o', '--output', type=str,
                       help='Write the text report to this file')
    parser.add_argument('--json', type=str,
                       help='Write results as JSON to this file')
    parser.add_argument('-c', '--compare', action='store_true',
                       help='Print analytic M/M/1 values next to the estimates')
    parser.add_argument('-q', '--quiet', action='store_true',
                       help='Suppress console output')
    parser.add_argument('--log-level', default='WARNING',
                       choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                       help='Logging level (default: WARNING)')
    return parser


def resolve_config(args: argparse.Namespace) -> RunConfig:
    """Merge the parameter file with command-line overrides."""
    values = {'mean_interarrival': None, 'mean_service': None, 'required_customers': None}

    if args.input:
        loaded = load_config(args.input)
        values = {key: getattr(loaded, key) for key in CONFIG_KEYS}

    if args.mean_interarrival is not None:
        values['mean_interarrival'] = args.mean_interarrival
    if args.mean_service is not None:
        values['mean_service'] = args.mean_service
    if args.customers is not None:
        values['required_customers'] = args.customers

    missing = [key for key, value in values.items() if value is None]
    if missing:
        raise ValueError(f"missing parameters: {', '.join(missing)}")

    return RunConfig(**values)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    system = SingleServerSystem(config, uniform=SeededUniform(args.seed))
    outcome = system.simulate()

    if outcome.ok:
        report = format_report(config, outcome.metrics)
    else:
        report = format_header(config) + format_failure(outcome.error)

    if not args.quiet:
        print(report)
        if args.compare and outcome.ok:
            print_comparison(config, outcome.metrics)

    if args.output:
        with open(args.output, 'w') as f:
            f.write(report)
        if not args.quiet:
            print(f"\nReport saved to: {args.output}")

    if args.json:
        save_results(results_to_dict(config, outcome), args.json)
        if not args.quiet:
            print(f"Results saved to: {args.json}")

    return EXIT_CODES[outcome.status]


if __name__ == '__main__':
    sys.exit(main())
