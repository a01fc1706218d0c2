#!/usr/bin/env python3
"""
CLI for the offline calorie estimator.

Usage:
    # Estimate a meal
    poetry run meal-calories "2 tbsp peanut butter and a handful of almonds"

    # Read the description from stdin
    echo "3 eggs, 1 slice toast" | poetry run meal-calories -

    # Machine readable output
    poetry run meal-calories --json "a banana"
"""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from meal_calories.constants import LOG_LEVEL, validate_log_level
from meal_calories.estimator import estimate
from meal_calories.models import EstimateResult, VagueQuantityPrompt
from meal_calories.services.clarification import detect_vague_quantity

console = Console()


def _confidence_style(level: str) -> str:
    """Return a Rich color for a confidence level."""
    return {"high": "green", "medium": "yellow", "low": "red"}.get(level, "dim")


def _print_result(result: EstimateResult) -> None:
    """Pretty-print an estimate."""
    if not result.items:
        console.print("[red]No known foods found in the description.[/red]")
        return

    table = Table(show_header=True, header_style="bold", padding=(0, 1))
    table.add_column("Food", min_width=20)
    table.add_column("Calories", justify="right", min_width=8)
    table.add_column("Calculation", min_width=24)
    table.add_column("Confidence", min_width=10)
    table.add_column("Source", min_width=10)

    for item in result.items:
        style = _confidence_style(item.confidence_level)
        confidence = f"[{style}]{item.confidence_level}[/{style}]"
        if item.confidence_note:
            confidence += f" [dim]({item.confidence_note})[/dim]"
        table.add_row(
            item.food_label,
            f"{item.calories} kcal",
            item.calculation_text,
            confidence,
            item.source_name,
        )

    console.print(table)

    style = _confidence_style(result.confidence)
    console.print(
        f"\n  [bold]Total: {result.total_calories} kcal[/bold]  "
        f"[{style}]{result.confidence} confidence[/{style}]  "
        f"[dim]{result.matched_food_count} food(s) matched[/dim]"
    )

    if result.tips:
        console.print(f"\n  Tips ({len(result.tips)}):")
        for tip in result.tips:
            console.print(f"    [cyan]*[/cyan] {tip}")


def _print_prompt(prompt: VagueQuantityPrompt) -> None:
    """Show the clarification question and its options."""
    console.print(f"\n  [bold]{prompt.question}[/bold]")
    for option in prompt.options:
        console.print(f"    - {option.label} [dim](x{option.multiplier:g})[/dim]")


def _read_text(arg: Optional[str]) -> str:
    if arg and arg != "-":
        return arg
    if sys.stdin.isatty():
        return ""
    return sys.stdin.read()


def _log_level() -> int:
    """Level from the environment, which may have been filled from .env."""
    name = validate_log_level(os.getenv("MEAL_CALORIES_LOG_LEVEL", LOG_LEVEL))
    return getattr(logging, name)


def main() -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Offline calorie estimator for freeform meal descriptions",
    )
    parser.add_argument(
        "text", nargs="?", type=str,
        help='Meal description, or "-" to read from stdin',
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the estimate as JSON",
    )
    parser.add_argument(
        "--clarify", action="store_true",
        help="Also suggest a question for vague portions",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args()
    level = _log_level()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    text = _read_text(args.text)
    if not text.strip():
        parser.print_help()
        return 1

    result = estimate(text)
    prompt = detect_vague_quantity(text) if args.clarify else None

    if args.json:
        payload = result.model_dump(by_alias=True)
        if args.clarify:
            payload["clarification"] = prompt.model_dump(by_alias=True) if prompt else None
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return 0

    _print_result(result)
    if prompt:
        _print_prompt(prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
