"""Centralized logging with masking of IBANs, health-card serials and VAT numbers."""

from __future__ import annotations

import logging
import os
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

_IBAN_PATTERN = re.compile(r"\b([A-Z]{2}\d{2})[\dA-Z]{4,}([\dA-Z]{4})\b")
_HIC_PATTERN = re.compile(r"(?<![0-9])[0-9]{16}([0-9]{4})(?![0-9])")
# Partita IVA and any other run of 11+ digits, with or without "IT"
_PIVA_PATTERN = re.compile(r"(?<![0-9])(IT)?([0-9]{8,})([0-9]{3})(?![0-9])")


class _MaskingFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _mask(str(record.msg))
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: (_mask(v) if isinstance(v, str) else v) for k, v in record.args.items()}
            else:
                record.args = tuple((_mask(a) if isinstance(a, str) else a) for a in record.args)
        return True


def _mask(text: str) -> str:
    def _replace_iban(m: re.Match) -> str:  # type: ignore[type-arg]
        full = m.group(0)
        if len(full) < 8:
            return full
        return full[:4] + "*" * (len(full) - 8) + full[-4:]

    text = _IBAN_PATTERN.sub(_replace_iban, text)
    text = _HIC_PATTERN.sub(lambda m: "*" * 16 + m.group(1), text)
    return _PIVA_PATTERN.sub(
        lambda m: (m.group(1) or "") + "*" * len(m.group(2)) + m.group(3), text
    )


def _console_level() -> int:
    raw = os.getenv("ITALIAN_IDS_LOG_LEVEL", "").strip().upper() or "INFO"
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str = "italianIDs") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        return logger

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(_console_level())
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console.addFilter(_MaskingFilter())
    logger.addHandler(console)

    raw_level = os.getenv("ITALIAN_IDS_LOG_LEVEL", "").strip()
    if raw_level and not isinstance(logging.getLevelName(raw_level.upper()), int):
        logger.warning("ITALIAN_IDS_LOG_LEVEL=%r sconosciuto, uso INFO.", raw_level)

    log_dir = Path(
        os.getenv("ITALIAN_IDS_LOG_DIR", "") or Path.home() / ".italianIDs" / "logs"
    )
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_dir / "server.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError as exc:
        logger.warning("File di log non disponibile in %s (%s), solo console.", log_dir, exc)
        return logger

    fh.setLevel(logging.DEBUG)
    fh.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d – %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    fh.addFilter(_MaskingFilter())
    logger.addHandler(fh)
    return logger


logger = setup_logger()
