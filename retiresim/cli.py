"""
Command-line interface for the Monte Carlo retirement simulator.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple
from retiresim.config import load_settings
from retiresim.engine import results_to_frame, run_monte_carlo_simulation, summarize
from retiresim.model import SimulationParams, validate_form_inputs
from retiresim.simulation.random_source import NumpyUniformSource
from retiresim.visualization import format_currency, plot_retirement_bands


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list of str, optional
        Arguments to parse; defaults to ``sys.argv[1:]``

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        description="Monte Carlo Retirement Simulator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --current-age 40 --retirement-age 67 --initial-investment 120000
  %(prog)s --mean-return 6 --std-dev 12 --seed 7 --no-plot --csv bands.csv
        """,
    )

    parser.add_argument(
        "--current-age",
        type=int,
        default=30,
        help="Current age in years (default: 30)",
    )

    parser.add_argument(
        "--retirement-age",
        type=int,
        default=65,
        help="Retirement age in years (default: 65)",
    )

    parser.add_argument(
        "--initial-investment",
        type=float,
        default=50000,
        help="Starting portfolio value in dollars (default: 50000)",
    )

    parser.add_argument(
        "--monthly-contribution",
        type=float,
        default=500,
        help="Amount added every month in dollars (default: 500)",
    )

    parser.add_argument(
        "--mean-return",
        type=float,
        default=7,
        help="Expected annual return in percent (default: 7)",
    )

    parser.add_argument(
        "--std-dev",
        type=float,
        default=15,
        help="Annual volatility (standard deviation) in percent (default: 15)",
    )

    parser.add_argument(
        "--num-simulations",
        type=int,
        default=None,
        help="Number of Monte Carlo paths (default: RETIRESIM_NUM_SIMULATIONS or 1000)",
    )

    parser.add_argument(
        "--inflation-rate",
        type=float,
        default=None,
        help="Annual inflation in percent (default: RETIRESIM_INFLATION_RATE or 2.5)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs (default: RETIRESIM_SEED or unseeded)",
    )

    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Path to save the plot (optional)",
    )

    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Path to export the percentile bands as CSV (optional)",
    )

    parser.add_argument(
        "--no-plot",
        action="store_true",
        help="Do not display the plot (useful for headless execution)",
    )

    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Raises
    ------
    ValueError
        If arguments are invalid
    """
    validate_form_inputs(
        initial_age=args.current_age,
        retirement_age=args.retirement_age,
        initial_portfolio_value=args.initial_investment,
        monthly_contribution=args.monthly_contribution,
        mean_return_pct=args.mean_return,
        std_dev_pct=args.std_dev,
    )

    for option in ("output", "csv"):
        value = getattr(args, option)
        if value:
            output_path = Path(value)
            if not output_path.parent.exists():
                raise ValueError(
                    f"Output directory does not exist: {output_path.parent}"
                )


def build_params(args: argparse.Namespace) -> Tuple[SimulationParams, Optional[int]]:
    """Combine command-line arguments with environment defaults.

    Returns
    -------
    tuple
        (simulation parameters, random seed or None for an unseeded run)
    """
    settings = load_settings()

    num_simulations = args.num_simulations
    if num_simulations is None:
        num_simulations = settings.num_simulations

    if args.inflation_rate is None:
        inflation_rate_pct = settings.inflation_rate * 100
    else:
        inflation_rate_pct = args.inflation_rate

    seed = args.seed
    if seed is None:
        seed = settings.seed

    params = SimulationParams.from_percentages(
        initial_age=args.current_age,
        retirement_age=args.retirement_age,
        initial_portfolio_value=args.initial_investment,
        monthly_contribution=args.monthly_contribution,
        mean_return_pct=args.mean_return,
        std_dev_pct=args.std_dev,
        num_simulations=num_simulations,
        inflation_rate_pct=inflation_rate_pct,
    )
    return params, seed


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error)
    """
    try:
        args = parse_args(argv)
        validate_args(args)
        params, seed = build_params(args)

        print("=" * 70)
        print("Monte Carlo Retirement Simulator")
        print("=" * 70)
        print(f"Age: {params.initial_age} -> {params.retirement_age} | Paths: {params.num_simulations}")
        print(
            f"Initial: {format_currency(params.initial_portfolio_value)} | "
            f"Monthly: {format_currency(params.monthly_contribution)}"
        )
        print(
            f"Return (μ): {params.mean_return:.4f} | Volatility (σ): {params.std_dev:.4f} | "
            f"Inflation: {params.inflation_rate:.4f}"
        )
        print("=" * 70)

        results = run_monte_carlo_simulation(
            params, random_source=NumpyUniformSource(seed)
        )

        if not results:
            print("No simulation data")
            return 0

        print(f"{'Age':>5} {'Pessimistic (10th %)':>22} {'Median (50th %)':>18} {'Optimistic (90th %)':>22}")
        for row in results:
            print(
                f"{row.year:>5} {format_currency(row.p10):>22} "
                f"{format_currency(row.p50):>18} {format_currency(row.p90):>22}"
            )

        final = summarize(results)
        print(f"\nMedian inflation-adjusted value at {final['year']}: {format_currency(final['p50'])}")

        if args.csv:
            results_to_frame(results).to_csv(args.csv)
            print(f"Bands exported to: {args.csv}")

        if args.output or not args.no_plot:
            plot_retirement_bands(
                results,
                output_path=args.output,
                show_plot=not args.no_plot,
            )

        if args.output:
            print(f"Plot saved to: {args.output}")

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
