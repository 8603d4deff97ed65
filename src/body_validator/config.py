"""Configuration for request-body validation."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ValidationConfig:
    """Settings used by the web framework integration.

    Attributes:
        root_name: Name of the body in messages, e.g. ``"body"."age" ...``
        status_code: HTTP status returned for rejected bodies
        log_rejections: Log every rejected body at INFO level
    """

    root_name: str = "body"
    status_code: int = 422
    log_rejections: bool = False

    @classmethod
    def from_env(cls) -> ValidationConfig:
        """Create config from environment variables.

        Reads:
        1. BODY_VALIDATOR_ROOT_NAME (default "body")
        2. BODY_VALIDATOR_STATUS_CODE (default 422)
        3. BODY_VALIDATOR_LOG_REJECTIONS: 1/true/yes/on enables logging

        Raises:
            ValueError: If BODY_VALIDATOR_STATUS_CODE is not an integer in 400-599
        """
        root_name = os.environ.get("BODY_VALIDATOR_ROOT_NAME") or cls.root_name

        raw_status = os.environ.get("BODY_VALIDATOR_STATUS_CODE")
        status_code = cls.status_code
        if raw_status:
            try:
                status_code = int(raw_status)
            except ValueError:
                raise ValueError(
                    f"BODY_VALIDATOR_STATUS_CODE must be an integer, got {raw_status!r}"
                ) from None
            if not 400 <= status_code <= 599:
                raise ValueError(
                    f"BODY_VALIDATOR_STATUS_CODE must be an HTTP error status (400-599), got {status_code}"
                )

        log_rejections = (
            os.environ.get("BODY_VALIDATOR_LOG_REJECTIONS", "").strip().lower() in _TRUTHY
        )

        return cls(
            root_name=root_name,
            status_code=status_code,
            log_rejections=log_rejections,
        )
