"""
Glossary Action Entry Point

Picks pair mode or set mode from the action inputs, runs the
delete → create → inspect sequence and reports the result to the runner.

Run: python main.py   (inputs as INPUT_* environment variables)
"""

import asyncio
import logging
import sys
from typing import Optional

from actions import ActionRuntime, GitHubActionsRuntime
from config import Config
from glossary.coordinator import handler
from glossary.errors import InputValidationError
from glossary.schemas import OperationState, RemoteOperation

logger = logging.getLogger(__name__)


async def main(runtime: ActionRuntime) -> RemoteOperation:
    """
    Dispatch on the language inputs and surface the operation outcome.

    Raises:
        InputValidationError: Neither a language pair nor a codes set was given
        GlossaryActionError: Anything the coordinator raises
    """
    target_language = runtime.get_input("target-language")
    source_language = runtime.get_input("source-language")
    language_codes_set = runtime.get_input("language-codes-set")

    if target_language and source_language:
        runtime.info(
            f"detected sourceLanguage: {source_language}, targetLanguage {target_language}"
        )
        runtime.info("create one pair glossary resource")
        operation = await handler(target_language, source_language, runtime=runtime)

    elif language_codes_set:
        runtime.info(f"detected language codes set: {language_codes_set}")
        runtime.info("create multi-language glossary resource")
        operation = await handler(language_codes_set, runtime=runtime)

    else:
        raise InputValidationError("Not appropriate language code input setting")

    state = operation.state
    if state == OperationState.RUNNING and operation.name:
        runtime.set_output("operation-name", operation.name)
    runtime.info(f"update is {state.value if state else None}")
    return operation


def run(runtime: Optional[ActionRuntime] = None) -> int:
    """
    Process entry point. Every failure ends as a failed step.

    Returns:
        Exit code (0 pass, 1 fail)
    """
    runtime = runtime or GitHubActionsRuntime()

    if not Config.validate():
        runtime.set_failed("invalid configuration")
        return 1

    logging.basicConfig(
        level=Config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        asyncio.run(main(runtime))
    except Exception as e:
        logger.error(f"Glossary action failed: {e}", exc_info=True)
        runtime.set_failed(str(e))
        return 1

    return 0


def run_cli() -> None:
    """Console script wrapper."""
    sys.exit(run())


if __name__ == "__main__":
    run_cli()
