"""CLI entrypoint for a batch exploration report."""

import argparse
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List

from .config import EngineConfig
from .exceptions import ConfigError
from .phases import (
    GraphBuildPhase,
    NielsenCheckPhase,
    PuzzleSeedPhase,
    ValidationPhase,
    WordResolutionPhase,
)
from .pipeline import PipelinePhase, PipelineRunner


def build_default_phases() -> List[PipelinePhase]:
    return [
        GraphBuildPhase(),
        PuzzleSeedPhase(),
        WordResolutionPhase(),
        NielsenCheckPhase(),
        ValidationPhase(),
    ]


def run_pipeline(
    config: EngineConfig,
    words: List[str] | None = None,
    shortest_to: List[str] | None = None,
    puzzle: bool = False,
    include_graph: bool = False,
) -> Dict[str, Any]:
    initial_context: Dict[str, Any] = {
        "config": config,
        "words": list(words or []),
        "shortest_to": list(shortest_to or []),
        "puzzle": puzzle,
    }
    runner = PipelineRunner(phases=build_default_phases())
    final_context = runner.run(initial_context)
    artifact: Dict[str, Any] = {
        "graph": final_context["graph_output"],
        "puzzle": final_context["puzzle_output"],
        "resolution": final_context["resolution_output"],
        "nielsen": final_context["nielsen_report"],
        "validation_report": final_context["validation_report"],
        "phases": final_context["completed_phases"],
    }
    if include_graph:
        artifact["graph"]["layout"] = final_context["session"].graph.to_json()
    return artifact


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Walk the Cayley tree of F(a, b), resolve words and check Nielsen reduced form.",
    )
    parser.add_argument(
        "--word",
        dest="words",
        action="append",
        default=[],
        help="Word to save, e.g. 'ab-a' (repeatable). Use a- / b- for inverses.",
    )
    parser.add_argument(
        "--shortest-to",
        action="append",
        default=[],
        help="Node id 'x,y' to draw a geodesic to from the origin (repeatable).",
    )
    parser.add_argument("--puzzle", action="store_true", help="Seed the two puzzle words first.")
    parser.add_argument("--max-depth", type=int, default=None, help="Tree depth (env PATHFORMS_MAX_DEPTH).")
    parser.add_argument(
        "--initial-step", type=float, default=None, help="Root edge length (env PATHFORMS_INITIAL_STEP)."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (env PATHFORMS_SEED).")
    parser.add_argument("--include-graph", action="store_true", help="Embed node/edge layout in the artifact.")
    parser.add_argument(
        "--output-path",
        default="03_data/pathforms_report.json",
        help="Where to save the resulting JSON artifact.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level.",
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    overrides = {
        key: value
        for key, value in (
            ("max_depth", args.max_depth),
            ("initial_step", args.initial_step),
            ("seed", args.seed),
        )
        if value is not None
    }
    try:
        config = replace(EngineConfig.from_env(), **overrides)
    except ConfigError as error:
        parser.error(str(error))

    artifact = run_pipeline(
        config,
        words=args.words,
        shortest_to=args.shortest_to,
        puzzle=args.puzzle,
        include_graph=args.include_graph,
    )
    output_path = Path(args.output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(artifact, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"Report saved to: {output_path.resolve()}")
    print(
        "Counts:",
        f"nodes={artifact['graph']['node_count']}",
        f"edges={artifact['graph']['edge_count']}",
        f"words={artifact['resolution']['summary']['saved_count']}",
        f"rejected={artifact['resolution']['summary']['rejected_count']}",
    )
    for saved in artifact["resolution"]["saved_words"]:
        marker = "" if saved["complete"] else "  (leaves tree)"
        print(f"  {saved['word']}{marker}")
    print(artifact["nielsen"]["message"])
    return 0
