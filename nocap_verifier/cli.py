"""Command line entry-point for multi-agent statement verification."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import List, Optional, TextIO

import click

from .statements import StatementClassifier, StatementQueue, classify_statement_type, parse_utterances
from .utils.config import ConfigManager, VerificationConfig
from .utils.logging import setup_logging
from .verification import VerificationOrchestrator, VerificationResult

logger = logging.getLogger("nocap_verifier.cli")

config_option = click.option(
    "--config", "-c", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML file with provider settings (environment variables take precedence)",
)
verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")


def _load_config(config_path: Optional[Path]) -> VerificationConfig:
    return ConfigManager(config_path).build_config()


async def _verify(statement: str, config: VerificationConfig) -> VerificationResult:
    async with VerificationOrchestrator(config) as orchestrator:
        return await orchestrator.verify_statement(statement)


async def _process(transcript: str, config: VerificationConfig) -> dict:
    classifier = StatementClassifier()
    transcriptions = [
        classifier.transcribe(utterance.text, utterance.speaker)
        for utterance in parse_utterances(transcript)
    ]
    corrections: List[str] = []

    async def collect_correction(text: str) -> None:
        corrections.append(text)

    async with VerificationOrchestrator(config) as orchestrator:
        async with StatementQueue(orchestrator, announcer=collect_correction) as queue:
            for transcription in transcriptions:
                queue.handle_transcription(transcription)
            await queue.join()

    return {
        "transcriptions": [t.model_dump(mode="json") for t in transcriptions],
        "queue": [
            {
                "id": item.id,
                "speaker_id": item.speaker_id,
                "statement_text": item.statement_text,
                "processing_status": item.processing_status.value,
                "result": item.result.to_payload() if item.result else None,
                "error": item.error,
            }
            for item in queue.items
        ],
        "corrections": corrections,
    }


def _write_json(data: dict, output: TextIO) -> None:
    json.dump(data, output, indent=2)
    output.write("\n")


@click.group()
def main() -> None:
    """Verify spoken statements across multiple fact-checking agents."""


@main.command()
@click.argument("statement")
@config_option
@verbose_option
def verify(statement: str, config_path: Optional[Path], verbose: bool) -> None:
    """Verify a single STATEMENT and print the result as JSON."""
    setup_logging(verbose=verbose)

    if not statement.strip():
        raise click.ClickException("No statement supplied")

    result = asyncio.run(_verify(statement.strip(), _load_config(config_path)))
    click.echo(json.dumps(result.to_payload(), indent=2))


@main.command()
@click.argument("text")
def classify(text: str) -> None:
    """Print the statement type of TEXT."""
    click.echo(classify_statement_type(text).value)


@main.command()
@click.option("--input", "-i", "input_file", type=click.File("r"), default="-", help="Transcript file path (defaults to stdin)")
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@config_option
@verbose_option
def process(input_file: TextIO, output: TextIO, config_path: Optional[Path], verbose: bool) -> None:
    """Classify a transcript and verify its declarative statements in order."""
    setup_logging(verbose=verbose)

    transcript = input_file.read()
    if not transcript.strip():
        raise click.ClickException("No transcript text supplied")

    report = asyncio.run(_process(transcript, _load_config(config_path)))

    if verbose:
        logger.info(f"Processed {len(report['queue'])} declarative statements")

    _write_json(report, output)


@main.command()
@config_option
def status(config_path: Optional[Path]) -> None:
    """Show which providers are configured."""
    config = _load_config(config_path)
    orchestrator = VerificationOrchestrator(config)
    click.echo(json.dumps(orchestrator.get_agent_status(), indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
