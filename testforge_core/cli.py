#!/usr/bin/env python3
"""TestForge CLI.

Command-line interface for the prompt-to-test pipeline.

Usage:
    testforge parse "Open homepage and check title"   # Prompt text -> steps JSON
    testforge generate PROMPT_ID                      # Prompt -> test file
    testforge record-run SUITE_ID RUN_ID              # Stored results -> history entry
    testforge summary SUITE_ID                        # Suite history as Markdown
    testforge config                                  # Show configuration
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from testforge_core.config import Settings
from testforge_core.testing.errors import TestForgeError
from testforge_core.testing.execution.suite_aggregator import SuiteAggregator
from testforge_core.testing.generation.artifact_generator import ArtifactGenerator, GenerationOptions
from testforge_core.testing.generation.step_parser import ParseContext
from testforge_core.testing.lifecycle import PromptLifecycleManager
from testforge_core.testing.models.environment import EnvironmentConfig
from testforge_core.testing.models.prompt import PromptStatus, TestType
from testforge_core.testing.utils import truncate_string


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def cmd_parse(args, settings: Settings):
    """Parse prompt text into steps."""
    text = args.text if args.text != "-" else sys.stdin.read()
    parser = settings.build_parser()
    context = ParseContext(
        test_type=TestType.parse(args.test_type),
        base_url=args.base_url or settings.base_url,
    )
    result = asyncio.run(parser.parse_detailed(text, context))

    for index, reason in result.dropped:
        print(f"Dropped step {index}: {reason}", file=sys.stderr)
    if result.used_fallback:
        print(f"No usable steps in '{truncate_string(text, 60)}', using fallback", file=sys.stderr)

    _print_json([step.to_dict() for step in result.steps])


def cmd_generate(args, settings: Settings):
    """Generate a test file for a stored prompt."""
    store = settings.build_store()
    manager = PromptLifecycleManager(store, default_base_url=settings.base_url)
    prompt = manager.get(args.prompt_id)

    if prompt.status == PromptStatus.DRAFT and args.submit:
        prompt = manager.submit(prompt.prompt_id)

    if not prompt.parsed_steps or args.reparse:
        steps = asyncio.run(manager.parse_steps(prompt.prompt_id, settings.build_parser()))
        print(f"Parsed {len(steps)} steps", file=sys.stderr)

    base_url = args.base_url or prompt.base_url or settings.base_url
    if not base_url:
        raise ValueError("No base URL: pass --base-url or set TESTFORGE_BASE_URL")
    env = EnvironmentConfig(
        base_url=base_url,
        browser=args.browser,
        timeout=args.timeout,
        headless=not args.headed,
    )
    options = GenerationOptions(
        use_login_session=bool(args.storage_state),
        storage_state_path=args.storage_state,
    )

    ref = manager.generate_test(
        prompt.prompt_id,
        ArtifactGenerator(),
        env,
        options=options,
        output_dir=args.output_dir or settings.output_dir,
        regenerate=args.regenerate,
    )
    _print_json(ref.to_dict())


def cmd_record_run(args, settings: Settings):
    """Aggregate stored results of a run into the suite history."""
    aggregator = SuiteAggregator(settings.build_store(), report_dir=settings.reports_dir)
    entry = aggregator.record_run_from_store(args.suite_id, args.run_id)
    _print_json(entry.to_dict())


def cmd_summary(args, settings: Settings):
    """Print the suite summary."""
    aggregator = SuiteAggregator(settings.build_store())
    suite = aggregator.get_suite(args.suite_id)
    print(aggregator.generate_summary(suite, max_runs=args.runs))


def cmd_config(args, settings: Settings):
    """Show configuration."""
    print("=" * 50)
    print("TestForge Configuration")
    print("=" * 50)
    print()
    print(f"Data dir:     {settings.data_dir}")
    print(f"Output dir:   {settings.output_dir}")
    print(f"Reports dir:  {settings.reports_dir}")
    print(f"Base URL:     {settings.base_url or '-'}")
    print(f"Inference:    {'llm' if settings.uses_llm else 'keyword'}")
    if settings.uses_llm:
        print(f"Provider:     {settings.llm_provider}")
        print(f"Model:        {settings.llm_model}")
        print(f"API key:      {'set' if settings.llm_api_key else 'not set'}")
    print(f"Timeout:      {settings.inference_timeout}s")
    print()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testforge",
        description="TestForge - natural-language prompts to browser tests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    testforge parse "Open homepage and check title" --base-url https://example.test
    testforge generate 3f2a... --submit
    testforge record-run suite-1 run-42
    testforge summary suite-1
        """,
    )
    parser.add_argument("--config", help="Settings file (default: ~/.testforge/config.json)")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Parse
    parse_p = subparsers.add_parser("parse", help="Parse prompt text into steps")
    parse_p.add_argument("text", help="Prompt text ('-' reads stdin)")
    parse_p.add_argument("--base-url", help="Base URL hint")
    parse_p.add_argument("--test-type", default="UI", help="UI, API or E2E")

    # Generate
    gen_p = subparsers.add_parser("generate", help="Generate a test file for a prompt")
    gen_p.add_argument("prompt_id", help="Prompt ID")
    gen_p.add_argument("--base-url", help="Override BASE_URL")
    gen_p.add_argument("--browser", default="chromium", help="chromium, firefox or webkit")
    gen_p.add_argument("--timeout", type=int, default=30000, help="Timeout in ms")
    gen_p.add_argument("--headed", action="store_true", help="Run with browser UI")
    gen_p.add_argument("--storage-state", help="Login session storage_state file")
    gen_p.add_argument("--output-dir", help="Where to write the test file")
    gen_p.add_argument("--regenerate", type=int, help="Regenerate an existing sequence")
    gen_p.add_argument("--submit", action="store_true", help="Submit the prompt if still draft")
    gen_p.add_argument("--reparse", action="store_true", help="Parse steps again")

    # Record run
    run_p = subparsers.add_parser("record-run", help="Aggregate a run into the suite history")
    run_p.add_argument("suite_id", help="Suite ID")
    run_p.add_argument("run_id", help="Run ID")

    # Summary
    sum_p = subparsers.add_parser("summary", help="Show suite summary")
    sum_p.add_argument("suite_id", help="Suite ID")
    sum_p.add_argument("-n", "--runs", type=int, default=10, help="Runs to list")

    # Config
    subparsers.add_parser("config", help="Show configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "parse": cmd_parse,
        "generate": cmd_generate,
        "record-run": cmd_record_run,
        "summary": cmd_summary,
        "config": cmd_config,
    }

    settings = Settings.load(args.config)
    settings.apply_logging()

    try:
        commands[args.command](args, settings)
    except (TestForgeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
