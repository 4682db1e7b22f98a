"""
Unified CLI for Knapsack Heuristics.

Provides subcommands for running single strategies, comparing all of them,
generating instances, batch benchmarks, and an interactive menu.
"""

import logging

import click

from knapsack_heuristics import __version__
from knapsack_heuristics.config import ExperimentConfig, apply_overrides, load_config
from knapsack_heuristics.data import KnapsackGenerator, load_instance, save_instance
from knapsack_heuristics.eval import compare as compare_strategies
from knapsack_heuristics.eval import (
    export_results_to_csv,
    format_comparison,
    format_result,
    format_summary_table,
    run_benchmark,
    run_strategy,
    save_results_to_json,
)
from knapsack_heuristics.strategies import StrategyRegistry
from knapsack_heuristics.utils.error_handler import KnapsackHeuristicsError, handle_cli_errors
from knapsack_heuristics.utils.logger import log_experiment_config, setup_logger

STRATEGY_CHOICE = click.Choice(StrategyRegistry.list_strategies(), case_sensitive=False)


def _settings(config_path: str | None, verbose: bool = False, **overrides) -> ExperimentConfig:
    """Load the config file (or defaults), apply CLI overrides and set up logging."""
    config = load_config(config_path) if config_path else ExperimentConfig()
    config = apply_overrides(config, **overrides)

    level = logging.DEBUG if verbose else getattr(logging, config.logging.level)
    setup_logger(log_file=config.logging.log_file, level=level)
    return config


def common_options(func):
    """Options shared by every command that runs strategies."""
    func = click.option("--debug", is_flag=True, help="Show full tracebacks on errors")(func)
    func = click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")(func)
    func = click.option(
        "--top-fraction", type=float, help="Top-value subset fraction for Monte Carlo 2"
    )(func)
    func = click.option("--trials", type=int, help="Monte Carlo trials (overrides config)")(func)
    func = click.option("--seed", type=int, help="Random seed (overrides config)")(func)
    func = click.option(
        "--config", type=click.Path(exists=True, dir_okay=False), help="YAML configuration file"
    )(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main():
    """
    Knapsack Heuristics - greedy and randomized strategies compared.

    Examples:
        knapsack-heuristics compare data/small.txt --seed 42
        knapsack-heuristics run data/small.txt --strategy monte_carlo_all --trials 500
        knapsack-heuristics generate data/random.txt --n-items 30
        knapsack-heuristics menu
    """
    pass


@main.command()
def strategies():
    """List the available strategies in their default run order."""
    for spec in StrategyRegistry.specs():
        params = ", ".join(sorted(spec.params)) or "-"
        click.echo(f"{spec.key:<20} {spec.label:<45} mode={spec.mode.value:<11} params={params}")


@main.command()
@click.argument("instance_path", type=click.Path())
@click.option("--strategy", "-s", type=STRATEGY_CHOICE, required=True, help="Strategy to run")
@click.option("--detailed/--brief", default=True, help="Show selected items")
@common_options
@handle_cli_errors()
def run(instance_path, strategy, detailed, config, seed, trials, top_fraction, verbose, debug):
    """Run a single strategy on an instance file."""
    settings = _settings(config, verbose, seed=seed, trials=trials, top_fraction=top_fraction)
    instance = load_instance(instance_path)

    result = run_strategy(
        instance,
        strategy,
        seed=settings.seed,
        trials=settings.trials,
        top_fraction=settings.top_fraction,
    )
    click.echo(format_result(result, detailed=detailed))


@main.command()
@click.argument("instance_path", type=click.Path())
@click.option(
    "--strategy",
    "-s",
    "selected",
    type=STRATEGY_CHOICE,
    multiple=True,
    help="Strategy to include (repeatable; default all, in canonical order)",
)
@click.option(
    "--rank-by",
    type=click.Choice(["value", "weight", "time"]),
    help="Rank the table instead of listing in run order",
)
@click.option("--csv", "csv_path", type=click.Path(dir_okay=False), help="Export results to CSV")
@click.option("--json", "json_path", type=click.Path(dir_okay=False), help="Save results as JSON")
@common_options
@handle_cli_errors()
def compare(
    instance_path,
    selected,
    rank_by,
    csv_path,
    json_path,
    config,
    seed,
    trials,
    top_fraction,
    verbose,
    debug,
):
    """Run several strategies on one instance and compare them."""
    settings = _settings(
        config,
        verbose,
        seed=seed,
        trials=trials,
        top_fraction=top_fraction,
        strategies=list(selected) or None,
    )
    instance = load_instance(instance_path)

    log_experiment_config(
        logging.getLogger("knapsack_heuristics"),
        {
            "instance": instance.name,
            "seed": settings.seed,
            "trials": settings.trials,
            "top_fraction": settings.top_fraction,
        },
        "Comparison",
    )

    comparison = compare_strategies(
        instance,
        settings.strategies,
        seed=settings.seed,
        trials=settings.trials,
        top_fraction=settings.top_fraction,
    )
    click.echo(format_comparison(comparison, rank_by=rank_by))

    csv_out = csv_path or settings.output.csv
    json_out = json_path or settings.output.json_path
    if csv_out:
        export_results_to_csv(comparison, csv_out)
    if json_out:
        save_results_to_json(comparison, json_out)


@main.command()
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--n-items", type=int, default=20, show_default=True, help="Number of items")
@click.option("--capacity-ratio", type=float, help="Capacity as fraction of total weight")
@click.option("--seed", type=int, help="Random seed (overrides config)")
@click.option("--config", type=click.Path(exists=True, dir_okay=False), help="YAML configuration file")
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@handle_cli_errors()
def generate(output, n_items, capacity_ratio, seed, config, debug):
    """Generate a random instance file."""
    settings = _settings(config, seed=seed)
    if capacity_ratio is not None:
        settings = apply_overrides(
            settings, generator={**settings.generator.model_dump(), "capacity_ratio": capacity_ratio}
        )

    gen = settings.generator
    generator = KnapsackGenerator(seed=settings.seed)
    instance = generator.generate_instance(
        n_items,
        weight_range=gen.weight_range,
        value_range=gen.value_range,
        capacity_ratio=gen.capacity_ratio,
    )
    path = save_instance(instance, output)
    click.echo(f"Wrote {instance.n_items} items, capacity {instance.capacity} to {path}")


@main.command()
@click.option("--instances", "n_instances", type=int, help="Number of generated instances")
@click.option("--n-items-min", type=int, help="Minimum items per instance")
@click.option("--n-items-max", type=int, help="Maximum items per instance")
@click.option("--strategy", "-s", "selected", type=STRATEGY_CHOICE, multiple=True)
@click.option("--progress/--no-progress", default=True, help="Show a progress bar")
@common_options
@handle_cli_errors()
def benchmark(
    n_instances,
    n_items_min,
    n_items_max,
    selected,
    progress,
    config,
    seed,
    trials,
    top_fraction,
    verbose,
    debug,
):
    """Compare strategies over many generated instances."""
    settings = _settings(
        config,
        verbose,
        seed=seed,
        trials=trials,
        top_fraction=top_fraction,
        strategies=list(selected) or None,
    )
    generator_updates = {"n_items_min": n_items_min, "n_items_max": n_items_max}
    generator_updates = {k: v for k, v in generator_updates.items() if v is not None}
    if generator_updates:
        settings = apply_overrides(
            settings, generator={**settings.generator.model_dump(), **generator_updates}
        )
    if n_instances is not None:
        settings = apply_overrides(settings, benchmark={"n_instances": n_instances})

    gen = settings.generator
    generator = KnapsackGenerator(seed=settings.seed)
    instances = generator.generate_dataset(
        settings.benchmark.n_instances,
        (gen.n_items_min, gen.n_items_max),
        weight_range=gen.weight_range,
        value_range=gen.value_range,
        capacity_ratio=gen.capacity_ratio,
    )

    summaries = run_benchmark(
        instances,
        settings.strategies,
        seed=settings.seed,
        trials=settings.trials,
        top_fraction=settings.top_fraction,
        progress=progress,
    )
    click.echo(f"Benchmark over {len(instances)} instances (% of fractional optimum)")
    click.echo(format_summary_table(summaries))


@main.command()
@common_options
@handle_cli_errors()
def menu(config, seed, trials, top_fraction, verbose, debug):
    """Interactive menu: pick a strategy, then an instance file."""
    settings = _settings(config, verbose, seed=seed, trials=trials, top_fraction=top_fraction)
    specs = StrategyRegistry.specs()
    compare_option = len(specs) + 1

    while True:
        click.echo("\n" + "=" * 80)
        click.echo("KNAPSACK PROBLEM SOLVER")
        click.echo("=" * 80)
        for number, spec in enumerate(specs, 1):
            click.echo(f"{number}. {spec.label}")
        click.echo(f"{compare_option}. Run ALL Algorithms and Compare")
        click.echo("0. Exit")
        click.echo("=" * 80)

        choice = click.prompt("Select an option", type=int)
        if choice == 0:
            click.echo("Exiting... Goodbye!")
            break
        if not 1 <= choice <= compare_option:
            click.echo("Invalid choice!")
            continue

        filename = click.prompt("Enter dataset filename (e.g., data.txt)", type=str)
        try:
            instance = load_instance(filename)
        except KnapsackHeuristicsError as e:
            click.secho(e.format_error(), fg="red", err=True)
            continue

        if choice == compare_option:
            comparison = compare_strategies(
                instance,
                settings.strategies,
                seed=settings.seed,
                trials=settings.trials,
                top_fraction=settings.top_fraction,
            )
            click.echo(format_comparison(comparison))
        else:
            result = run_strategy(
                instance,
                specs[choice - 1].key,
                seed=settings.seed,
                trials=settings.trials,
                top_fraction=settings.top_fraction,
            )
            click.echo(format_result(result, detailed=True))


if __name__ == "__main__":
    main()
