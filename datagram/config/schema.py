"""Marshmallow schema for DatagramConfig validation."""

from __future__ import annotations

import codecs
from typing import Any, Dict

from marshmallow import Schema, ValidationError, fields, post_load, pre_load, validate, validates_schema

from ..const import (
    DEFAULT_ALLOW_TRAILING_SLACK,
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_LOG_TARGET,
    DEFAULT_MAX_LENGTH,
    DEFAULT_POOL_MAX_BUFFER_BYTES,
    DEFAULT_POOL_MAX_IDLE,
    LOG_TARGETS,
)
from ..protocol.protocol import CHARSET_LEN, HEADER_LEN, UINT32_MAX
from .model import DatagramConfig


class DatagramConfigSchema(Schema):
    """Declarative validation schema for codec configuration."""

    max_length = fields.Int(
        load_default=DEFAULT_MAX_LENGTH,
        validate=validate.Range(min=HEADER_LEN, max=HEADER_LEN + UINT32_MAX),
    )
    charset = fields.Str(load_default=None, allow_none=True)
    allow_trailing_slack = fields.Bool(load_default=DEFAULT_ALLOW_TRAILING_SLACK)

    pool_max_idle = fields.Int(load_default=DEFAULT_POOL_MAX_IDLE, validate=validate.Range(min=0))
    pool_max_buffer_bytes = fields.Int(load_default=DEFAULT_POOL_MAX_BUFFER_BYTES, validate=validate.Range(min=0))

    debug_logging = fields.Bool(load_default=DEFAULT_DEBUG_LOGGING)
    log_target = fields.Str(load_default=DEFAULT_LOG_TARGET, validate=validate.OneOf(LOG_TARGETS))

    @pre_load
    def normalize_strings(self, data: Dict[str, Any], **kwargs: Any) -> Dict[str, Any]:
        data = dict(data)
        if isinstance(data.get("charset"), str):
            data["charset"] = data["charset"].strip() or None
        if isinstance(data.get("log_target"), str):
            data["log_target"] = data["log_target"].strip().lower()
        return data

    @validates_schema
    def validate_charset(self, data: Dict[str, Any], **kwargs: Any) -> None:
        charset = data.get("charset")
        if charset is None:
            return
        try:
            codecs.lookup(charset)
        except LookupError as exc:
            raise ValidationError(f"Unknown charset '{charset}'", field_name="charset") from exc
        if len(charset.encode(charset)) > CHARSET_LEN:
            raise ValidationError(
                f"charset name must encode to at most {CHARSET_LEN} bytes",
                field_name="charset",
            )

    @post_load
    def make_config(self, data: Dict[str, Any], **kwargs: Any) -> DatagramConfig:
        return DatagramConfig(**data)
