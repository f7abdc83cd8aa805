import logging
import re
import sys
from io import StringIO
from typing import Any

import pydantic
from colorlog import ColoredFormatter
from rich.console import Console
from rich.pretty import Pretty
from rich.theme import Theme

custom_theme = Theme(
    {
        "repr.tag_name": "bold magenta",
        "repr.attrib_name": "yellow",
        "repr.attrib_value": "green",
        "repr.bool_true": "bold bright_green",
        "repr.bool_false": "bold bright_red",
        "repr.none": "dim",
        "repr.number": "cyan",
        "repr.str": "green",
    }
)

ROOT_LOGGER_NAME = "ordergallery"

LOG_FORMAT = (
    "%(asctime)s - %(log_color)s%(levelname)s%(reset)s - "
    "%(pathname)s:%(bold)s%(lineno)d%(reset)s - %(bold)s%(funcName)s%(reset)s - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

# Longest string value kept verbatim in a model summary; data URIs get cut here.
MAX_VALUE_LENGTH = 60


def _shorten(value: Any) -> Any:
    if isinstance(value, str) and len(value) > MAX_VALUE_LENGTH:
        return f"{value[: MAX_VALUE_LENGTH - 3]}..."
    if isinstance(value, list):
        return [_shorten(item) for item in value]
    if isinstance(value, dict):
        return {key: _shorten(item) for key, item in value.items()}
    return value


def format_pydantic(model: pydantic.BaseModel) -> str:
    """
    One-line summary of a Pydantic model for use in f-strings.

    Long string fields (base64 payloads in particular) are truncated so a log line
    never carries a whole image.
    """
    if not isinstance(model, pydantic.BaseModel):
        return str(model)
    fields = ", ".join(f"{key}={_shorten(value)!r}" for key, value in model.model_dump().items())
    return f"{model.__class__.__name__}({fields})"


class RichReprFormatter(ColoredFormatter):
    """
    Colored formatter that renders Pydantic models and containers with Rich
    instead of their raw repr.
    """

    console_width = 120

    def _render(self, obj: Any) -> str:
        buffer = StringIO()
        Console(highlight=True, width=self.console_width, theme=custom_theme, file=buffer).print(
            Pretty(obj)
        )
        return buffer.getvalue().strip()

    def format(self, record):
        if isinstance(record.msg, pydantic.BaseModel):
            record.msg = format_pydantic(record.msg)
        elif not isinstance(record.msg, str | int | float | bool | type(None)):
            record.msg = self._render(_shorten(record.msg))

        # Shorten pathname to start from 'ordergallery/'
        match = re.search(r"(ordergallery/.*?)$", record.pathname)
        if match:
            record.pathname = match.group(1)

        return super().format(record)


def setup_logging(name: str = ROOT_LOGGER_NAME, level: str = "INFO") -> logging.Logger:
    """
    Configure a logger with one stdout handler using ``RichReprFormatter``.

    Calling it again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = True

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        RichReprFormatter(
            LOG_FORMAT,
            datefmt=DATE_FORMAT,
            reset=True,
            log_colors=LEVEL_COLORS,
            secondary_log_colors={"bold": {level_name: "bold" for level_name in LEVEL_COLORS}},
            style="%",
        )
    )
    logger.handlers = [handler]
    return logger
