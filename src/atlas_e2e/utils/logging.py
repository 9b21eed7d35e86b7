"""Secure logging configuration for atlas-e2e.

Provides logging setup with password masking.
Password values are completely masked in all log output.
"""

import logging
import os
import re

from atlas_e2e.config import PASSWORD_ENV_VAR


class CredentialMaskingFilter(logging.Filter):
    """Logging filter that masks password values.

    Password values are replaced with [MASKED] to prevent credential
    leakage in logs, whether they appear as key=value pairs, dict
    entries or as the bare TEST_PASSWORD literal.
    """

    PASSWORD_PATTERNS = [
        # Match password=VALUE or password: VALUE
        re.compile(r"(password\s*[=:]\s*)([^\s;,}\"']+)", re.IGNORECASE),
        # Match dict format {"password": "value"}
        re.compile(r"([\"']password[\"']\s*:\s*[\"'])([^\"']+)([\"'])", re.IGNORECASE),
    ]

    def __init__(self, secrets: list[str] | None = None) -> None:
        """Initialize the filter.

        Args:
            secrets: Literal values to mask. Defaults to the TEST_PASSWORD value.
        """
        super().__init__()
        if secrets is None:
            env_secret = os.environ.get(PASSWORD_ENV_VAR)
            secrets = [env_secret] if env_secret else []
        self.secrets = [s for s in secrets if s]

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter and mask password values in log records.

        Args:
            record: Log record to process

        Returns:
            Always True (record is always passed through, just modified)
        """
        if record.msg:
            record.msg = self._mask(str(record.msg))
        if record.args and isinstance(record.args, tuple):
            new_args: list[object] = []
            for arg in record.args:
                if isinstance(arg, str):
                    new_args.append(self._mask(arg))
                else:
                    new_args.append(arg)
            record.args = tuple(new_args)
        return True

    def _mask(self, text: str) -> str:
        """Mask all password values in text.

        Args:
            text: Text potentially containing password values

        Returns:
            Text with password values replaced by [MASKED]
        """
        result = text
        for pattern in self.PASSWORD_PATTERNS:

            def mask_match(m: re.Match[str]) -> str:
                suffix = m.group(3) if len(m.groups()) > 2 else ""
                return m.group(1) + "[MASKED]" + suffix

            result = pattern.sub(mask_match, result)
        for secret in self.secrets:
            result = result.replace(secret, "[MASKED]")
        return result


def setup_logging(level: int = logging.INFO, name: str | None = None) -> logging.Logger:
    """Set up logging with password masking.

    Args:
        level: Logging level (default: INFO)
        name: Logger name (default: "atlas_e2e")

    Returns:
        Configured logger instance
    """
    logger_name = name or "atlas_e2e"
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    handler.addFilter(CredentialMaskingFilter())

    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the atlas_e2e namespace.

    Args:
        name: Logger name suffix (e.g., "auth" for "atlas_e2e.auth")

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"atlas_e2e.{name}")
    return logging.getLogger("atlas_e2e")
