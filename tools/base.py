"""Tool registry base with decorator pattern."""

import argparse
import sys
from typing import Callable, TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from openai import pydantic_function_tool

from voice.errors import VoiceError

T = TypeVar("T", bound=BaseModel)

# Internal registries
_TOOLS: list = []
_HANDLERS: dict[str, tuple[type[BaseModel], Callable]] = {}


def tool(model: type[T]) -> Callable[[Callable[[T], str]], Callable[[T], str]]:
    """Decorator to register a tool with its Pydantic model.

    Usage:
        @tool(Speak)
        def speak_handler(params: Speak) -> str:
            return speak(params, VoiceConfig.from_env())
    """
    def decorator(func: Callable[[T], str]) -> Callable[[T], str]:
        _TOOLS.append(pydantic_function_tool(model))
        _HANDLERS[model.__name__] = (model, func)
        return func
    return decorator


def execute_tool(name: str, args: dict) -> str:
    """Execute a tool by name with given arguments."""
    if name not in _HANDLERS:
        return f"Error: Unknown tool '{name}'"

    model_class, handler = _HANDLERS[name]
    try:
        params = model_class(**args)
        return handler(params)
    except Exception as e:
        return f"Error executing {name}: {e}"


def get_tools() -> list:
    """Get all registered tools."""
    return _TOOLS


def _build_parser(model: type[BaseModel]) -> argparse.ArgumentParser:
    """Derive a CLI from the model: required fields are positional, the rest are flags."""
    parser = argparse.ArgumentParser(description=(model.__doc__ or "").strip().split("\n")[0])
    for name, field in model.model_fields.items():
        arg_type = field.annotation if field.annotation in (str, int, float) else str
        if field.is_required():
            parser.add_argument(name, type=arg_type, help=field.description)
        else:
            parser.add_argument(
                f"--{name.replace('_', '-')}",
                dest=name,
                type=arg_type,
                default=None,
                help=field.description,
            )
    return parser


def run(model: type[T], handler: Callable[[T], str], argv: list[str] | None = None) -> int:
    """Run a tool from the command line and print its result.

    Returns:
        Process exit code (0 on success)
    """
    args = _build_parser(model).parse_args(argv)
    values = {k: v for k, v in vars(args).items() if v is not None}

    try:
        print(handler(model(**values)))
    except (ValidationError, VoiceError, httpx.HTTPError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0
